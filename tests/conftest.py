"""Pytest configuration and fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from profile_health.models.model_eval import EvalContext, ScoringConfig
from profile_health.models.model_snapshot import (
    Answer,
    AnswerAuthor,
    Categories,
    CategoryRef,
    Hours,
    Photo,
    Post,
    Product,
    ProfileSnapshot,
    Question,
    Review,
    ReviewReply,
    Service,
)

# Fixed reference time so recency windows are deterministic
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


def days_ago(days: float) -> datetime:
    """Timestamp ``days`` before NOW."""
    return NOW - timedelta(days=days)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def context() -> EvalContext:
    """Evaluation context pinned to NOW with the default config."""
    return EvalContext(now=NOW, config=ScoringConfig())


@pytest.fixture
def empty_snapshot() -> ProfileSnapshot:
    """Snapshot with every field absent."""
    return ProfileSnapshot()


@pytest.fixture
def complete_snapshot() -> ProfileSnapshot:
    """Snapshot that reaches the top tier of every category."""
    reviews = [
        Review(
            star_rating="FIVE",
            create_time=days_ago(1 + i) if i < 5 else days_ago(60 + i),
            review_reply=ReviewReply(comment="Thank you!"),
        )
        for i in range(50)
    ]
    photo_categories = ["COVER", "LOGO", "EXTERIOR", "INTERIOR", "TEAM"]
    photos = [Photo(category=photo_categories[i % len(photo_categories)]) for i in range(25)]
    posts = [
        Post(
            create_time=days_ago(1 + i * 3),  # 10 posts inside 30 days
            topic_type="STANDARD",
            summary=f"Update #{i}",
        )
        for i in range(20)
    ]
    products = [
        Product(
            name=f"Product {i}",
            product_description="Handmade and locally sourced",
            media=[{"googleUrl": f"https://example.com/p{i}.jpg"}],
        )
        for i in range(10)
    ]
    services = [Service(display_name=f"Service {i}", description="Full service") for i in range(5)]
    questions = [
        Question(
            author="Customer",
            text=f"Question {i}?",
            top_answers=[Answer(author=AnswerAuthor(type="MERCHANT"), text="Yes!")],
        )
        for i in range(10)
    ]
    attributes = {
        "payment": ["CREDIT_CARD", "NFC"],
        "accessibility": ["WHEELCHAIR_ENTRANCE"],
        "amenities": ["WIFI"],
        "parking": True,
        "restroom": True,
        "outdoor_seating": True,
        "delivery": True,
        "takeout": True,
        "reservations": True,
        "profile": {"description": "Neighbourhood bakery"},
    }

    return ProfileSnapshot(
        name="Corner Bakery",
        description="Fresh bread and pastries baked daily since 1998.",
        categories=Categories(
            primary_category=CategoryRef(display_name="Bakery"),
            additional_categories=[CategoryRef(display_name="Cafe")],
        ),
        phone="+1 512 555 0100",
        website="https://cornerbakery.example.com",
        address={"addressLines": ["12 Main St"], "locality": "Austin"},
        reviews=reviews,
        photos=photos,
        posts=posts,
        products=products,
        services=services,
        questions=questions,
        attributes=attributes,
        hours=Hours(periods=[{"openDay": "MONDAY", "openTime": "07:00"}]),
        average_rating=4.8,
        total_reviews=50,
    )
