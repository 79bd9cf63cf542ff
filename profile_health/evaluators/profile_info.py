"""Profile info evaluator for core identity fields."""

from typing import ClassVar

from profile_health.models.model_eval import Category, EvalContext
from profile_health.models.model_score import ProfileInfoDetails, ProfileInfoScore
from profile_health.models.model_snapshot import ProfileSnapshot

MAX_SCORE = 6


class ProfileInfoEvaluator:
    """Awards one point per identity field that is filled in.

    Checks: name, description (root or attributes.profile fallback), primary
    category, phone, website, non-empty address.
    """

    category: ClassVar[Category] = Category.PROFILE_INFO
    max_score: ClassVar[int] = MAX_SCORE

    def evaluate(self, snapshot: ProfileSnapshot, context: EvalContext) -> ProfileInfoScore:
        """Calculate profile info score.

        Args:
            snapshot: The profile snapshot
            context: Evaluation context (unused for identity checks)

        Returns:
            Profile info score between 0-6
        """
        primary = snapshot.categories.primary_category if snapshot.categories else None
        details = ProfileInfoDetails(
            has_name=bool(snapshot.name),
            has_description=bool(snapshot.profile_description),
            has_category=bool(primary and primary.display_name),
            has_phone=bool(snapshot.phone),
            has_website=bool(snapshot.website),
            has_address=bool(snapshot.address),
        )

        checks = [
            (
                details.has_name,
                "Business name is missing",
                "Add your business name exactly as customers know it",
            ),
            (
                details.has_description,
                "Business description is missing",
                "Add a detailed business description with relevant keywords "
                "(750 characters recommended)",
            ),
            (
                details.has_category,
                "Primary category is not set",
                "Set your primary business category and add relevant secondary categories",
            ),
            (details.has_phone, "Phone number is missing", "Add your business phone number"),
            (details.has_website, "Website URL is missing", "Add your business website URL"),
            (
                details.has_address,
                "Business address is incomplete",
                "Complete your business address details",
            ),
        ]

        score = 0
        issues: list[str] = []
        recommendations: list[str] = []
        for passed, issue, recommendation in checks:
            if passed:
                score += 1
            else:
                issues.append(issue)
                recommendations.append(recommendation)

        return ProfileInfoScore(
            score=score,
            max_score=MAX_SCORE,
            issues=issues,
            recommendations=recommendations,
            details=details,
        )
