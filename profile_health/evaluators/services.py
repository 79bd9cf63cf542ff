"""Services evaluator for service listing presence and descriptions."""

from typing import ClassVar

from profile_health.evaluators.helpers import resolve_service_description, tier_points
from profile_health.models.model_eval import Category, EvalContext
from profile_health.models.model_score import ServicesDetails, ServicesScore
from profile_health.models.model_snapshot import ProfileSnapshot

MAX_SCORE = 3

PRESENCE_TIERS = [(5, 2), (1, 1)]


class ServicesEvaluator:
    """Evaluates listed services: presence (max 2) and descriptions (max 1)."""

    category: ClassVar[Category] = Category.SERVICES
    max_score: ClassVar[int] = MAX_SCORE

    def evaluate(self, snapshot: ProfileSnapshot, context: EvalContext) -> ServicesScore:
        services = snapshot.services
        total_services = snapshot.total_services or len(services)
        services_with_descriptions = sum(
            1 for service in services if resolve_service_description(service)
        )

        score = tier_points(total_services, PRESENCE_TIERS)
        issues: list[str] = []
        recommendations: list[str] = []

        if score == 0:
            issues.append("No services listed")
            recommendations.append("List your services with detailed descriptions")
        else:
            missing = total_services - services_with_descriptions
            if missing <= 0:
                score += 1
            else:
                issues.append(f"{missing} services missing descriptions")
                recommendations.append("Add descriptions to all services")

        return ServicesScore(
            score=score,
            max_score=MAX_SCORE,
            issues=issues,
            recommendations=recommendations,
            details=ServicesDetails(
                total_services=total_services,
                services_with_descriptions=services_with_descriptions,
            ),
        )
