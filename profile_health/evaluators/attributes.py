"""Attributes evaluator for hours, attribute richness and key attributes."""

from typing import ClassVar

from profile_health.consts import (
    ATTRIBUTE_ACCESSIBILITY,
    ATTRIBUTE_AMENITIES,
    ATTRIBUTE_PAYMENT,
)
from profile_health.evaluators.helpers import tier_points
from profile_health.models.model_eval import Category, EvalContext
from profile_health.models.model_score import AttributesDetails, AttributesScore
from profile_health.models.model_snapshot import ProfileSnapshot

MAX_SCORE = 4

RICHNESS_TIERS = [(10, 2), (5, 1)]


class AttributesEvaluator:
    """Evaluates hours and business attributes.

    - Hours (max 1): at least one opening period
    - Richness (max 2): >=10 attribute keys -> 2, >=5 -> 1
    - Key attributes (max 1): payment, accessibility or amenities present.
      Missing all three is a recommendation, not an issue.
    """

    category: ClassVar[Category] = Category.ATTRIBUTES
    max_score: ClassVar[int] = MAX_SCORE

    def evaluate(self, snapshot: ProfileSnapshot, context: EvalContext) -> AttributesScore:
        attributes = snapshot.attributes or {}
        details = AttributesDetails(
            has_hours=bool(snapshot.hours and snapshot.hours.periods),
            has_payment_methods=bool(attributes.get(ATTRIBUTE_PAYMENT)),
            has_accessibility=bool(attributes.get(ATTRIBUTE_ACCESSIBILITY)),
            has_amenities=bool(attributes.get(ATTRIBUTE_AMENITIES)),
            total_attributes=len(attributes),
        )

        score = 0
        issues: list[str] = []
        recommendations: list[str] = []

        if details.has_hours:
            score += 1
        else:
            issues.append("Business hours not set")
            recommendations.append("Set your business hours including special hours")

        richness_points = tier_points(details.total_attributes, RICHNESS_TIERS)
        score += richness_points
        if richness_points == 0:
            issues.append(f"Only {details.total_attributes} attributes set")
            recommendations.append(
                "Fill out all relevant business attributes "
                "(payment methods, accessibility, amenities)"
            )

        if details.has_payment_methods or details.has_accessibility or details.has_amenities:
            score += 1
        else:
            recommendations.append("Add payment methods, accessibility features, and amenities")

        return AttributesScore(
            score=score,
            max_score=MAX_SCORE,
            issues=issues,
            recommendations=recommendations,
            details=details,
        )
