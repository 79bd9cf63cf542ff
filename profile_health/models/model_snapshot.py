"""Profile snapshot models describing the scoring input.

Field names are snake_case; the directory API's camelCase spelling is accepted
as an alias so raw payloads validate without a mapping layer. Every field is
optional and every collection defaults to empty.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SnapshotModel(BaseModel):
    """Base for snapshot records: immutable, camelCase aliases, extras ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class CategoryRef(SnapshotModel):
    """Business category reference."""

    display_name: str | None = None


class Categories(SnapshotModel):
    """Primary and additional business categories."""

    primary_category: CategoryRef | None = None
    additional_categories: list[CategoryRef] = Field(default_factory=list)


class ReviewReply(SnapshotModel):
    """Owner reply attached to a review."""

    comment: str | None = None


class Review(SnapshotModel):
    """Customer review."""

    star_rating: str | None = Field(default=None, description="ONE..FIVE")
    create_time: datetime | None = None
    review_reply: ReviewReply | None = None

    @property
    def has_reply(self) -> bool:
        return bool(self.review_reply and self.review_reply.comment)


class LocationAssociation(SnapshotModel):
    """Media location association (second source for the photo category)."""

    category: str | None = None


class Photo(SnapshotModel):
    """Profile photo."""

    media_format: str | None = None
    google_url: str | None = None
    category: str | None = Field(default=None, description="COVER, LOGO, EXTERIOR, ...")
    location_association: LocationAssociation | None = None


class Post(SnapshotModel):
    """Local post."""

    create_time: datetime | None = None
    topic_type: str | None = None
    summary: str | None = None
    call_to_action: Any = None


class Product(SnapshotModel):
    """Product listing."""

    name: str | None = None
    product_description: str | None = None
    media: list[Any] | None = None


class StructuredServiceItem(SnapshotModel):
    """Service picked from the directory's predefined service types."""

    service_type_id: str | None = None
    description: str | None = None


class ServiceLabel(SnapshotModel):
    """Label of a free-form service."""

    display_name: str | None = None
    description: str | None = None


class FreeFormServiceItem(SnapshotModel):
    """Service defined by the owner with a custom label."""

    label: ServiceLabel | None = None


class Service(SnapshotModel):
    """Service listing. The description may live in one of three places."""

    display_name: str | None = None
    description: str | None = None
    structured_service_item: StructuredServiceItem | None = None
    free_form_service_item: FreeFormServiceItem | None = None


class AnswerAuthor(SnapshotModel):
    """Author of a Q&A answer."""

    type: str | None = Field(default=None, description="MERCHANT marks the business owner")


class Answer(SnapshotModel):
    """Answer to a customer question."""

    author: AnswerAuthor | None = None
    text: str | None = None


class Question(SnapshotModel):
    """Customer question with its top answers."""

    author: Any = None
    text: str | None = None
    top_answers: list[Answer] = Field(default_factory=list)


class Hours(SnapshotModel):
    """Regular opening hours. Periods are only checked for presence."""

    periods: list[Any] = Field(default_factory=list)


class ProfileSnapshot(SnapshotModel):
    """Point-in-time view of a business profile.

    Supplied by the acquisition layer and never mutated by the engine.
    """

    # Identity
    name: str | None = None
    description: str | None = None
    categories: Categories | None = None
    phone: str | None = None
    website: str | None = None
    address: dict[str, Any] | None = None

    # Collections
    reviews: list[Review] = Field(default_factory=list)
    photos: list[Photo] = Field(default_factory=list)
    posts: list[Post] = Field(default_factory=list, description="Newest first")
    products: list[Product] = Field(default_factory=list)
    services: list[Service] = Field(default_factory=list)
    questions: list[Question] = Field(default_factory=list)

    attributes: dict[str, Any] | None = None
    hours: Hours | None = None

    # Precomputed totals
    average_rating: float | None = None
    total_reviews: int | None = Field(default=None, ge=0)
    total_photos: int | None = Field(default=None, ge=0)
    total_products: int | None = Field(default=None, ge=0)
    total_services: int | None = Field(default=None, ge=0)

    @property
    def profile_description(self) -> str | None:
        """Description from the root field or the attributes.profile fallback."""
        if self.description:
            return self.description
        profile = (self.attributes or {}).get("profile")
        if isinstance(profile, dict):
            return profile.get("description") or None
        return None
