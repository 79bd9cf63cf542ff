"""Tests for individual category evaluators."""

from datetime import timedelta

import pytest

from profile_health.evaluators.attributes import AttributesEvaluator
from profile_health.evaluators.helpers import (
    count_recent,
    distinct_categories,
    resolve_photo_category,
    resolve_service_description,
    round_half_up,
    tier_points,
)
from profile_health.evaluators.photos import PhotosEvaluator
from profile_health.evaluators.posts import PostsEvaluator
from profile_health.evaluators.products import ProductsEvaluator
from profile_health.evaluators.profile_info import ProfileInfoEvaluator
from profile_health.evaluators.q_and_a import QAndAEvaluator
from profile_health.evaluators.reviews import ReviewsEvaluator
from profile_health.evaluators.services import ServicesEvaluator
from profile_health.models.model_eval import EvalContext, ScoringConfig
from profile_health.models.model_snapshot import (
    Answer,
    AnswerAuthor,
    Categories,
    CategoryRef,
    FreeFormServiceItem,
    Hours,
    LocationAssociation,
    Photo,
    Post,
    Product,
    ProfileSnapshot,
    Question,
    Review,
    ReviewReply,
    Service,
    ServiceLabel,
    StructuredServiceItem,
)

ALL_EVALUATORS = [
    ProfileInfoEvaluator,
    ReviewsEvaluator,
    PhotosEvaluator,
    PostsEvaluator,
    ProductsEvaluator,
    ServicesEvaluator,
    QAndAEvaluator,
    AttributesEvaluator,
]


def _question(*author_types: str) -> Question:
    """Question with one answer per author type (no answers if none given)."""
    return Question(
        text="Do you deliver?",
        top_answers=[Answer(author=AnswerAuthor(type=t), text="Yes") for t in author_types],
    )


# Helper Tests
def test_round_half_up():
    """Test that ties round up instead of to even."""
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(0.0) == 0


def test_tier_points_first_match_wins():
    tiers = [(50, 3), (20, 2), (5, 1)]
    assert tier_points(50, tiers) == 3
    assert tier_points(49, tiers) == 2
    assert tier_points(5, tiers) == 1
    assert tier_points(4, tiers) == 0


def test_count_recent_is_strictly_after_cutoff(now):
    """Test that a timestamp exactly at the cutoff is not recent."""
    cutoff = now - timedelta(days=30)
    timestamps = [cutoff, cutoff + timedelta(seconds=1), None, now]

    assert count_recent(timestamps, cutoff) == 2


def test_count_recent_treats_naive_as_utc(now):
    naive = (now - timedelta(days=1)).replace(tzinfo=None)
    assert count_recent([naive], now - timedelta(days=30)) == 1


def test_resolve_photo_category_precedence():
    """Test primary field, fallback field, and primary winning when both set."""
    primary_only = Photo(category="COVER")
    fallback_only = Photo(location_association=LocationAssociation(category="LOGO"))
    both = Photo(category="EXTERIOR", location_association=LocationAssociation(category="COVER"))
    empty_primary = Photo(category="", location_association=LocationAssociation(category="TEAM"))

    assert resolve_photo_category(primary_only) == "COVER"
    assert resolve_photo_category(fallback_only) == "LOGO"
    assert resolve_photo_category(both) == "EXTERIOR"
    assert resolve_photo_category(empty_primary) == "TEAM"
    assert resolve_photo_category(Photo()) is None


def test_distinct_categories_keeps_first_seen_order():
    photos = [
        Photo(category="INTERIOR"),
        Photo(location_association=LocationAssociation(category="COVER")),
        Photo(category="INTERIOR"),
        Photo(),
    ]
    assert distinct_categories(photos) == ["INTERIOR", "COVER"]


def test_resolve_service_description_precedence():
    service = Service(
        description="Plain",
        structured_service_item=StructuredServiceItem(description="Structured"),
        free_form_service_item=FreeFormServiceItem(label=ServiceLabel(description="Free")),
    )
    structured = Service(structured_service_item=StructuredServiceItem(description="Structured"))
    free_form = Service(free_form_service_item=FreeFormServiceItem(label=ServiceLabel(description="Free")))

    assert resolve_service_description(service) == "Plain"
    assert resolve_service_description(structured) == "Structured"
    assert resolve_service_description(free_form) == "Free"
    assert resolve_service_description(Service(display_name="Only a name")) is None


# Totality Tests
@pytest.mark.parametrize("evaluator_cls", ALL_EVALUATORS)
def test_empty_snapshot_scores_zero(evaluator_cls, empty_snapshot, context):
    """Test that every evaluator is total on an empty snapshot and scores 0."""
    result = evaluator_cls().evaluate(empty_snapshot, context)

    assert result.score == 0
    assert result.max_score == evaluator_cls.max_score
    assert result.recommendations


@pytest.mark.parametrize("evaluator_cls", ALL_EVALUATORS)
def test_complete_snapshot_scores_max(evaluator_cls, complete_snapshot, context):
    """Test that every evaluator awards full marks to the complete snapshot."""
    result = evaluator_cls().evaluate(complete_snapshot, context)

    assert result.score == result.max_score
    assert result.issues == []


# Profile Info Evaluator Tests
def test_profile_info_complete(complete_snapshot, context):
    result = ProfileInfoEvaluator().evaluate(complete_snapshot, context)

    assert result.score == 6
    assert result.details.has_description


def test_profile_info_partial(context):
    """Test name + category + phone scoring 3/6 with one issue per gap."""
    snapshot = ProfileSnapshot(
        name="Joe's Plumbing",
        categories=Categories(primary_category=CategoryRef(display_name="Plumber")),
        phone="555-0100",
    )

    result = ProfileInfoEvaluator().evaluate(snapshot, context)

    assert result.score == 3
    assert result.issues == [
        "Business description is missing",
        "Website URL is missing",
        "Business address is incomplete",
    ]
    assert len(result.recommendations) == 3


def test_profile_info_description_fallback(context):
    snapshot = ProfileSnapshot(attributes={"profile": {"description": "We fix leaks"}})

    result = ProfileInfoEvaluator().evaluate(snapshot, context)

    assert result.details.has_description
    assert "Business description is missing" not in result.issues


def test_profile_info_empty_address_and_category(context):
    """Test that an empty address map and a category without a name both fail."""
    snapshot = ProfileSnapshot(address={}, categories=Categories(primary_category=CategoryRef()))

    result = ProfileInfoEvaluator().evaluate(snapshot, context)

    assert not result.details.has_address
    assert not result.details.has_category


def test_profile_info_empty_pairs_issues_and_recommendations(empty_snapshot, context):
    result = ProfileInfoEvaluator().evaluate(empty_snapshot, context)

    assert len(result.issues) == 6
    assert len(result.recommendations) == 6


# Reviews Evaluator Tests
def test_reviews_mid_tiers(now, context):
    """Test rating 4.2, 25 reviews, 72% response rate, 3 recent reviews."""
    reviews = [
        Review(
            create_time=now - timedelta(days=2 if i < 3 else 90),
            review_reply=ReviewReply(comment="Thanks") if i < 18 else None,
        )
        for i in range(25)
    ]
    snapshot = ProfileSnapshot(reviews=reviews, average_rating=4.2)

    result = ReviewsEvaluator().evaluate(snapshot, context)

    # rating 2 + volume 2 + response 1 + recency 1
    assert result.score == 6
    assert result.details.total_reviews == 25
    assert result.details.response_rate == 72
    assert result.details.recent_reviews == 3
    assert result.issues == []


def test_reviews_low_rating_flagged(context):
    snapshot = ProfileSnapshot(average_rating=3.0)

    result = ReviewsEvaluator().evaluate(snapshot, context)

    assert "Average rating (3.0) is below 3.5" in result.issues


def test_reviews_absent_rating_not_flagged(empty_snapshot, context):
    """Test that a missing rating is left to the volume check."""
    result = ReviewsEvaluator().evaluate(empty_snapshot, context)

    assert result.details.average_rating == 0.0
    assert result.issues == [
        "Only 0 reviews - aim for at least 20",
        "Response rate (0%) is below 70%",
        "Not enough recent reviews",
    ]


def test_reviews_response_rate_rounds_half_up(now, context):
    """Test that 1 reply out of 8 reviews (12.5%) reports 13%."""
    reviews = [
        Review(
            create_time=now - timedelta(days=90),
            review_reply=ReviewReply(comment="Thanks") if i == 0 else None,
        )
        for i in range(8)
    ]

    result = ReviewsEvaluator().evaluate(ProfileSnapshot(reviews=reviews), context)

    assert result.details.response_rate == 13
    assert "Response rate (13%) is below 70%" in result.issues


def test_reviews_recency_uses_injected_now(now, context):
    """Test that recency is measured from the context, not the system clock."""
    reviews = [Review(create_time=now - timedelta(days=d)) for d in (1, 2, 29, 30, 31)]
    snapshot = ProfileSnapshot(reviews=reviews)

    result = ReviewsEvaluator().evaluate(snapshot, context)

    # Exactly 30 days old is on the cutoff and does not count
    assert result.details.recent_reviews == 3


def test_reviews_top_tiers(complete_snapshot, context):
    result = ReviewsEvaluator().evaluate(complete_snapshot, context)

    assert result.score == 10
    assert result.details.response_rate == 100
    assert result.details.recent_reviews == 5


# Photos Evaluator Tests
def test_photos_few_photos(context):
    snapshot = ProfileSnapshot(photos=[Photo(category="COVER"), Photo(category="LOGO")])

    result = PhotosEvaluator().evaluate(snapshot, context)

    # cover 1 + logo 1
    assert result.score == 2
    assert "Only 2 photos - Google recommends at least 10" in result.issues
    assert "Limited variety in photo types" in result.issues


def test_photos_precomputed_total_wins(context):
    snapshot = ProfileSnapshot(total_photos=30, photos=[Photo(category="COVER")])

    result = PhotosEvaluator().evaluate(snapshot, context)

    assert result.details.total_photos == 30
    assert result.score == 4  # volume 3 + cover 1


def test_photos_logo_accepts_profile_label(context):
    snapshot = ProfileSnapshot(photos=[Photo(category="PROFILE")])

    result = PhotosEvaluator().evaluate(snapshot, context)

    assert result.details.has_logo_photo
    assert "Logo photo is not set" not in result.issues


def test_photos_fallback_category_used_by_every_check(context):
    """Test that cover, logo and variety all read the location association."""
    photos = [
        Photo(location_association=LocationAssociation(category=category))
        for category in ("COVER", "LOGO", "EXTERIOR", "INTERIOR")
    ]

    result = PhotosEvaluator().evaluate(ProfileSnapshot(photos=photos), context)

    assert result.details.has_cover_photo
    assert result.details.has_logo_photo
    assert result.details.photo_categories == ["COVER", "LOGO", "EXTERIOR", "INTERIOR"]
    assert result.score == 3


def test_photos_primary_category_wins_over_fallback(context):
    photo = Photo(category="EXTERIOR", location_association=LocationAssociation(category="COVER"))

    result = PhotosEvaluator().evaluate(ProfileSnapshot(photos=[photo]), context)

    assert not result.details.has_cover_photo
    assert result.details.photo_categories == ["EXTERIOR"]


# Posts Evaluator Tests
def test_posts_weekly_cadence(now, context):
    posts = [Post(create_time=now - timedelta(days=1 + i * 8)) for i in range(5)]

    result = PostsEvaluator().evaluate(ProfileSnapshot(posts=posts), context)

    # 4 posts within 30 days (1, 9, 17, 25) -> 2, 5 total -> 1
    assert result.details.posts_last_30_days == 4
    assert result.score == 3
    assert result.issues == []


def test_posts_none(empty_snapshot, context):
    result = PostsEvaluator().evaluate(empty_snapshot, context)

    assert result.score == 0
    assert result.details.last_post_date is None
    assert result.issues == ["No posts in the last 30 days", "Only 0 total posts"]


def test_posts_last_post_date_is_first_element(now, context):
    """Test that the first post is reported without re-sorting."""
    first = now - timedelta(days=40)
    posts = [Post(create_time=first), Post(create_time=now - timedelta(days=1))]

    result = PostsEvaluator().evaluate(ProfileSnapshot(posts=posts), context)

    assert result.details.last_post_date == first
    assert result.details.posts_last_30_days == 1


def test_posts_issue_names_configured_window(now):
    """Test that the recency issue reports the configured window."""
    context = EvalContext(now=now, config=ScoringConfig(recency_window_days=7))
    posts = [Post(create_time=now - timedelta(days=10))]

    result = PostsEvaluator().evaluate(ProfileSnapshot(posts=posts), context)

    assert result.details.posts_last_30_days == 0
    assert "No posts in the last 7 days" in result.issues


# Products Evaluator Tests
def test_products_none_flagged(empty_snapshot, context):
    result = ProductsEvaluator().evaluate(empty_snapshot, context)

    assert result.score == 0
    assert result.issues == ["No products listed"]


def test_products_one_or_two_not_flagged(context):
    """Test that 1-2 complete products score only completeness with no presence issue."""
    products = [Product(name="Sourdough", media=[{"url": "a.jpg"}]) for _ in range(2)]

    result = ProductsEvaluator().evaluate(ProfileSnapshot(products=products), context)

    assert result.score == 2
    assert result.issues == []


def test_products_missing_photos_and_descriptions(context):
    products = [
        Product(name="Bagel", product_description="Boiled", media=[{"url": "a.jpg"}]),
        Product(name="Baguette", media=[]),
        Product(media=[{"url": "c.jpg"}]),
    ]

    result = ProductsEvaluator().evaluate(ProfileSnapshot(products=products), context)

    # presence 1, photos 0, descriptions 0
    assert result.score == 1
    assert result.details.products_with_photos == 2
    assert result.details.products_with_descriptions == 2
    assert result.issues == [
        "1 products missing photos",
        "1 products missing descriptions",
    ]


def test_products_precomputed_total(context):
    products = [Product(name=f"P{i}", media=[{"url": "x.jpg"}]) for i in range(10)]
    snapshot = ProfileSnapshot(products=products, total_products=12)

    result = ProductsEvaluator().evaluate(snapshot, context)

    assert result.details.total_products == 12
    assert "2 products missing photos" in result.issues


def test_products_precomputed_total_below_list_length(context):
    """Test that a stale total smaller than the list never goes negative on completeness."""
    products = [Product(name=f"P{i}", media=[{"url": "x.jpg"}]) for i in range(3)]
    snapshot = ProfileSnapshot(products=products, total_products=2)

    result = ProductsEvaluator().evaluate(snapshot, context)

    # presence 0 (2 < 3, no issue), photos 1, descriptions 1
    assert result.score == 2
    assert result.issues == []
    assert result.details.total_products == 2
    assert result.details.products_with_photos == 3


def test_products_zero_total_falls_back_to_list_length(context):
    products = [Product(name=f"P{i}", media=[{"url": "x.jpg"}]) for i in range(3)]
    snapshot = ProfileSnapshot(products=products, total_products=0)

    result = ProductsEvaluator().evaluate(snapshot, context)

    assert result.details.total_products == 3
    assert result.score == 3


# Services Evaluator Tests
def test_services_none_flagged(empty_snapshot, context):
    result = ServicesEvaluator().evaluate(empty_snapshot, context)

    assert result.score == 0
    assert result.issues == ["No services listed"]


def test_services_mixed_representations(context):
    services = [
        Service(description="Repairs"),
        Service(structured_service_item=StructuredServiceItem(description="Installs")),
        Service(free_form_service_item=FreeFormServiceItem(label=ServiceLabel(description="Audits"))),
        Service(description="Consulting"),
        Service(description="Training"),
    ]

    result = ServicesEvaluator().evaluate(ProfileSnapshot(services=services), context)

    assert result.score == 3
    assert result.details.services_with_descriptions == 5


def test_services_missing_description(context):
    services = [Service(description="Repairs"), Service(display_name="Installs")]

    result = ServicesEvaluator().evaluate(ProfileSnapshot(services=services), context)

    assert result.score == 1
    assert result.issues == ["1 services missing descriptions"]


def test_services_precomputed_total_below_list_length(context):
    services = [Service(description=f"Service {i}") for i in range(5)]
    snapshot = ProfileSnapshot(services=services, total_services=1)

    result = ServicesEvaluator().evaluate(snapshot, context)

    # presence 1 (1 service), descriptions 1 (nothing missing)
    assert result.score == 2
    assert result.issues == []
    assert result.details.total_services == 1


# Q&A Evaluator Tests
def test_q_and_a_no_questions_recommends_seeding(empty_snapshot, context):
    result = QAndAEvaluator().evaluate(empty_snapshot, context)

    assert result.score == 0
    assert result.issues == []
    assert result.recommendations == ["Seed your Q&A section with common questions and answers"]


def test_q_and_a_three_questions_two_answered(context):
    """Test 3 questions, 2 answered (one customer, one owner answer).

    volume 0.5 + answer rate 2/3 -> 0 + owner 1/3 -> 0 = 0.5, rounds to 1.
    """
    questions = [_question("CUSTOMER"), _question("MERCHANT"), _question()]

    result = QAndAEvaluator().evaluate(ProfileSnapshot(questions=questions), context)

    assert result.score == 1
    assert result.details.answered_questions == 2
    assert result.details.owner_answers == 1
    assert result.issues == ["Low Q&A response rate", "Low owner participation in Q&A"]


def test_q_and_a_two_and_a_half_rounds_up(context):
    """Test partials 1 + 0.5 + 1 = 2.5 rounding to 3."""
    questions = (
        [_question("MERCHANT") for _ in range(5)]
        + [_question("CUSTOMER") for _ in range(2)]
        + [_question() for _ in range(3)]
    )

    result = QAndAEvaluator().evaluate(ProfileSnapshot(questions=questions), context)

    assert result.score == 3
    assert result.issues == []


def test_q_and_a_partials_not_rounded_individually(context):
    """Test 3 owner-answered questions: 0.5 + 1 + 2 = 3.5 rounds to 4."""
    questions = [_question("CUSTOMER", "MERCHANT") for _ in range(3)]

    result = QAndAEvaluator().evaluate(ProfileSnapshot(questions=questions), context)

    assert result.score == 4
    assert result.details.owner_answers == 3


# Attributes Evaluator Tests
def test_attributes_empty(empty_snapshot, context):
    result = AttributesEvaluator().evaluate(empty_snapshot, context)

    assert result.score == 0
    assert result.issues == ["Business hours not set", "Only 0 attributes set"]
    assert len(result.recommendations) == 3


def test_attributes_partial(context):
    snapshot = ProfileSnapshot(
        hours=Hours(periods=[{"openDay": "MONDAY"}]),
        attributes={"amenities": ["WIFI"], "a": 1, "b": 2, "c": 3, "d": 4},
    )

    result = AttributesEvaluator().evaluate(snapshot, context)

    # hours 1 + richness 1 + key attribute 1
    assert result.score == 3
    assert result.details.has_amenities
    assert result.details.total_attributes == 5


def test_attributes_key_attributes_recommendation_only(context):
    """Test that missing payment/accessibility/amenities adds no issue."""
    attributes = {f"attr_{i}": True for i in range(10)}
    attributes["payment"] = []

    result = AttributesEvaluator().evaluate(ProfileSnapshot(attributes=attributes), context)

    assert result.score == 2
    assert not result.details.has_payment_methods
    assert result.issues == ["Business hours not set"]
    assert "Add payment methods, accessibility features, and amenities" in result.recommendations
