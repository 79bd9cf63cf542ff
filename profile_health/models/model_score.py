"""Score result models produced by evaluators and the aggregator."""

from collections.abc import Iterator
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from profile_health.models.model_eval import Category


class HealthStatus(str, Enum):
    """Qualitative label derived from the overall score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needs_work"
    POOR = "poor"


class CategoryScore(BaseModel):
    """Result of one category evaluator.

    Every deduction is explained by an entry in ``issues`` and, where the
    owner can act on it, a matching entry in ``recommendations``.
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0)
    max_score: int = Field(ge=0)
    issues: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def score_within_max(self) -> "CategoryScore":
        """Validate 0 <= score <= max_score."""
        if self.score > self.max_score:
            msg = f"Score {self.score} exceeds max score {self.max_score}"
            raise ValueError(msg)
        return self

    @property
    def percentage(self) -> float:
        """Score normalized to 0-100 (0 when max_score is 0)."""
        if self.max_score <= 0:
            return 0.0
        return self.score / self.max_score * 100


class ProfileInfoDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_name: bool = False
    has_description: bool = False
    has_category: bool = False
    has_phone: bool = False
    has_website: bool = False
    has_address: bool = False


class ReviewsDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    average_rating: float = 0.0
    total_reviews: int = Field(default=0, ge=0)
    response_rate: int = Field(default=0, ge=0, le=100, description="Percent of reviews replied to")
    recent_reviews: int = Field(default=0, ge=0)


class PhotosDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_photos: int = Field(default=0, ge=0)
    has_cover_photo: bool = False
    has_logo_photo: bool = False
    photo_categories: list[str] = Field(default_factory=list, description="Distinct, first-seen order")


class PostsDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_posts: int = Field(default=0, ge=0)
    posts_last_30_days: int = Field(default=0, ge=0)
    last_post_date: datetime | None = None


class ProductsDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_products: int = Field(default=0, ge=0)
    products_with_photos: int = Field(default=0, ge=0)
    products_with_descriptions: int = Field(default=0, ge=0)


class ServicesDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_services: int = Field(default=0, ge=0)
    services_with_descriptions: int = Field(default=0, ge=0)


class QAndADetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_questions: int = Field(default=0, ge=0)
    answered_questions: int = Field(default=0, ge=0)
    owner_answers: int = Field(default=0, ge=0, description="Questions with an owner answer")


class AttributesDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_hours: bool = False
    has_payment_methods: bool = False
    has_accessibility: bool = False
    has_amenities: bool = False
    total_attributes: int = Field(default=0, ge=0)


class ProfileInfoScore(CategoryScore):
    details: ProfileInfoDetails = Field(default_factory=ProfileInfoDetails)


class ReviewsScore(CategoryScore):
    details: ReviewsDetails = Field(default_factory=ReviewsDetails)


class PhotosScore(CategoryScore):
    details: PhotosDetails = Field(default_factory=PhotosDetails)


class PostsScore(CategoryScore):
    details: PostsDetails = Field(default_factory=PostsDetails)


class ProductsScore(CategoryScore):
    details: ProductsDetails = Field(default_factory=ProductsDetails)


class ServicesScore(CategoryScore):
    details: ServicesDetails = Field(default_factory=ServicesDetails)


class QAndAScore(CategoryScore):
    details: QAndADetails = Field(default_factory=QAndADetails)


class AttributesScore(CategoryScore):
    details: AttributesDetails = Field(default_factory=AttributesDetails)


class ScoreBreakdown(BaseModel):
    """Per-category results, one field per ``Category``."""

    model_config = ConfigDict(frozen=True)

    profile_info: ProfileInfoScore
    reviews: ReviewsScore
    photos: PhotosScore
    posts: PostsScore
    products: ProductsScore
    services: ServicesScore
    q_and_a: QAndAScore
    attributes: AttributesScore

    def get(self, category: Category) -> CategoryScore:
        return getattr(self, category.value)

    def items(self) -> Iterator[tuple[Category, CategoryScore]]:
        """Iterate (category, score) pairs in presentation order."""
        for category in Category:
            yield category, self.get(category)


class OverallResult(BaseModel):
    """Composite health score for one snapshot."""

    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdown
    status: HealthStatus

    @property
    def issues(self) -> list[str]:
        """All issues across categories, in category order."""
        return [issue for _, section in self.breakdown.items() for issue in section.issues]

    @property
    def recommendations(self) -> list[str]:
        """All recommendations across categories, de-duplicated, in category order."""
        seen: dict[str, None] = {}
        for _, section in self.breakdown.items():
            for recommendation in section.recommendations:
                seen.setdefault(recommendation, None)
        return list(seen)
