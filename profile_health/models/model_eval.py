"""Scoring configuration and evaluation context models."""

from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from profile_health.consts import DEFAULT_RECENCY_WINDOW_DAYS
from profile_health.models.common import _as_utc

# Weights are integer points out of this total
WEIGHT_TOTAL = 100


class Category(str, Enum):
    """Scored profile dimensions, in presentation order."""

    PROFILE_INFO = "profile_info"
    REVIEWS = "reviews"
    PHOTOS = "photos"
    POSTS = "posts"
    PRODUCTS = "products"
    SERVICES = "services"
    Q_AND_A = "q_and_a"
    ATTRIBUTES = "attributes"


class ScoreWeights(BaseModel):
    """Category weights for the composite score.

    Weights must sum to exactly 100. Changing the sum is a breaking change for
    anything that stores or compares overall scores.
    """

    model_config = ConfigDict(frozen=True)

    profile_info: int = Field(default=20, ge=0)
    reviews: int = Field(default=20, ge=0)
    photos: int = Field(default=15, ge=0)
    posts: int = Field(default=15, ge=0)
    products: int = Field(default=10, ge=0)
    services: int = Field(default=5, ge=0)
    q_and_a: int = Field(default=10, ge=0)
    attributes: int = Field(default=5, ge=0)

    @model_validator(mode="after")
    def weights_sum_to_total(self) -> "ScoreWeights":
        """Validate that weights sum to 100."""
        total = self.total
        if total != WEIGHT_TOTAL:
            msg = f"Weights must sum to {WEIGHT_TOTAL}, got {total}"
            raise ValueError(msg)
        return self

    @property
    def total(self) -> int:
        return sum(self.for_category(category) for category in Category)

    def for_category(self, category: Category) -> int:
        """Return the weight configured for a category."""
        return getattr(self, category.value)


class StatusThresholds(BaseModel):
    """Lower bounds (inclusive) of each status band; below needs_work is poor."""

    model_config = ConfigDict(frozen=True)

    excellent: int = Field(default=85, ge=0, le=100)
    good: int = Field(default=70, ge=0, le=100)
    needs_work: int = Field(default=50, ge=0, le=100)

    @model_validator(mode="after")
    def thresholds_descend(self) -> "StatusThresholds":
        """Validate excellent > good > needs_work."""
        if not self.excellent > self.good > self.needs_work:
            msg = (
                "Status thresholds must descend: "
                f"excellent={self.excellent}, good={self.good}, needs_work={self.needs_work}"
            )
            raise ValueError(msg)
        return self


class ScoringConfig(BaseModel):
    """Immutable scoring configuration injected into the registry."""

    model_config = ConfigDict(frozen=True)

    weights: ScoreWeights = Field(default_factory=ScoreWeights)
    status_thresholds: StatusThresholds = Field(default_factory=StatusThresholds)
    recency_window_days: int = Field(
        default=DEFAULT_RECENCY_WINDOW_DAYS, gt=0, description="Window for recent reviews/posts"
    )


class EvalContext(BaseModel):
    """Evaluation context for stateless evaluators.

    Evaluators never read the system clock. "Now" is taken once by the
    registry and passed in here, so the same snapshot and context always
    produce the same scores.
    """

    model_config = ConfigDict(frozen=True)

    now: datetime
    config: ScoringConfig = Field(default_factory=ScoringConfig)

    @field_validator("now")
    @classmethod
    def now_is_aware(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @property
    def recency_cutoff(self) -> datetime:
        """Timestamps strictly after this count as recent."""
        return self.now - timedelta(days=self.config.recency_window_days)
