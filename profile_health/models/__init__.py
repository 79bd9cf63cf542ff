"""Pydantic models for profile-health."""

from profile_health.models.model_eval import (
    Category,
    EvalContext,
    ScoreWeights,
    ScoringConfig,
    StatusThresholds,
)
from profile_health.models.model_score import (
    AttributesDetails,
    AttributesScore,
    CategoryScore,
    HealthStatus,
    OverallResult,
    PhotosDetails,
    PhotosScore,
    PostsDetails,
    PostsScore,
    ProductsDetails,
    ProductsScore,
    ProfileInfoDetails,
    ProfileInfoScore,
    QAndADetails,
    QAndAScore,
    ReviewsDetails,
    ReviewsScore,
    ScoreBreakdown,
    ServicesDetails,
    ServicesScore,
)
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
from profile_health.models.model_storage import AuditRecord

__all__ = [
    # Snapshot models
    "Answer",
    "AnswerAuthor",
    "Categories",
    "CategoryRef",
    "FreeFormServiceItem",
    "Hours",
    "LocationAssociation",
    "Photo",
    "Post",
    "Product",
    "ProfileSnapshot",
    "Question",
    "Review",
    "ReviewReply",
    "Service",
    "ServiceLabel",
    "StructuredServiceItem",
    # Evaluation models
    "Category",
    "EvalContext",
    "ScoreWeights",
    "ScoringConfig",
    "StatusThresholds",
    # Score models
    "CategoryScore",
    "HealthStatus",
    "OverallResult",
    "ScoreBreakdown",
    "ProfileInfoDetails",
    "ProfileInfoScore",
    "ReviewsDetails",
    "ReviewsScore",
    "PhotosDetails",
    "PhotosScore",
    "PostsDetails",
    "PostsScore",
    "ProductsDetails",
    "ProductsScore",
    "ServicesDetails",
    "ServicesScore",
    "QAndADetails",
    "QAndAScore",
    "AttributesDetails",
    "AttributesScore",
    # Storage models
    "AuditRecord",
]
