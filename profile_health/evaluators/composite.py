"""Composite scoring: combine category scores into an overall score and status."""

from profile_health.evaluators.helpers import round_half_up
from profile_health.models.model_eval import ScoringConfig, StatusThresholds
from profile_health.models.model_score import HealthStatus, OverallResult, ScoreBreakdown


def classify_status(overall_score: int, thresholds: StatusThresholds) -> HealthStatus:
    """Map an overall score to a status, checking bands from the top down."""
    if overall_score >= thresholds.excellent:
        return HealthStatus.EXCELLENT
    if overall_score >= thresholds.good:
        return HealthStatus.GOOD
    if overall_score >= thresholds.needs_work:
        return HealthStatus.NEEDS_WORK
    return HealthStatus.POOR


class ScoreAggregator:
    """Combines the eight category scores into an OverallResult.

    Each category is normalized to a percentage of its max score and the
    percentages are averaged with the configured weights:

        overall = round(sum(pct * weight) / sum(weight))
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    def calculate_overall_score(self, breakdown: ScoreBreakdown) -> int:
        """Calculate the weighted overall score (0-100).

        Args:
            breakdown: Per-category scores

        Returns:
            Integer overall score, rounded half up
        """
        weights = self.config.weights
        weighted_sum = 0.0
        total_weight = 0
        for category, section in breakdown.items():
            weight = weights.for_category(category)
            weighted_sum += section.percentage * weight
            total_weight += weight

        if total_weight == 0:
            return 0
        return max(0, min(100, round_half_up(weighted_sum / total_weight)))

    def aggregate(self, breakdown: ScoreBreakdown) -> OverallResult:
        """Build the overall result for a breakdown."""
        overall_score = self.calculate_overall_score(breakdown)
        return OverallResult(
            overall_score=overall_score,
            breakdown=breakdown,
            status=classify_status(overall_score, self.config.status_thresholds),
        )
