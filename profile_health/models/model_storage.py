"""Audit record handed to the persistence layer."""

from datetime import datetime

from pydantic import BaseModel, Field

from profile_health.models.common import _utc_now
from profile_health.models.model_score import HealthStatus, OverallResult


class AuditRecord(BaseModel):
    """One scored audit, stored alongside its timestamp for trend display.

    Storage itself is the caller's concern; this model only fixes the shape.
    """

    version: str = Field(default="1.0", description="Schema version for migrations")
    business_id: str | None = None
    evaluated_at: datetime = Field(default_factory=_utc_now)
    score: int = Field(ge=0, le=100)
    status: HealthStatus
    recommendations: list[str] = Field(default_factory=list)
    audit_data: OverallResult

    @classmethod
    def from_result(
        cls,
        result: OverallResult,
        evaluated_at: datetime,
        business_id: str | None = None,
    ) -> "AuditRecord":
        """Build a record from a scoring result."""
        return cls(
            business_id=business_id,
            evaluated_at=evaluated_at,
            score=result.overall_score,
            status=result.status,
            recommendations=result.recommendations,
            audit_data=result,
        )
