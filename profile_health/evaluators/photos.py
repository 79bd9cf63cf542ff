"""Photos evaluator for volume, cover/logo presence and category variety."""

from typing import ClassVar

from profile_health.consts import PHOTO_CATEGORY_COVER, PHOTO_LOGO_CATEGORIES
from profile_health.evaluators.helpers import (
    distinct_categories,
    resolve_photo_category,
    tier_points,
)
from profile_health.models.model_eval import Category, EvalContext
from profile_health.models.model_score import PhotosDetails, PhotosScore
from profile_health.models.model_snapshot import ProfileSnapshot

MAX_SCORE = 6

VOLUME_TIERS = [(25, 3), (10, 2), (5, 1)]

# Distinct photo categories needed for the variety point
MIN_DISTINCT_CATEGORIES = 4


class PhotosEvaluator:
    """Evaluates photo coverage.

    - Volume (max 3): >=25 -> 3, >=10 -> 2, >=5 -> 1
    - Cover photo (max 1)
    - Logo photo (max 1), labelled LOGO or PROFILE
    - Variety (max 1): at least 4 distinct photo categories

    Category checks resolve each photo through ``resolve_photo_category``.
    """

    category: ClassVar[Category] = Category.PHOTOS
    max_score: ClassVar[int] = MAX_SCORE

    def evaluate(self, snapshot: ProfileSnapshot, context: EvalContext) -> PhotosScore:
        """Calculate photos score.

        Args:
            snapshot: The profile snapshot
            context: Evaluation context (unused for photo checks)

        Returns:
            Photos score between 0-6
        """
        photos = snapshot.photos
        total_photos = snapshot.total_photos or len(photos)

        resolved = [resolve_photo_category(photo) for photo in photos]
        has_cover_photo = PHOTO_CATEGORY_COVER in resolved
        has_logo_photo = any(category in PHOTO_LOGO_CATEGORIES for category in resolved)
        photo_categories = distinct_categories(photos)

        score = 0
        issues: list[str] = []
        recommendations: list[str] = []

        volume_points = tier_points(total_photos, VOLUME_TIERS)
        score += volume_points
        if volume_points == 0:
            issues.append(f"Only {total_photos} photos - Google recommends at least 10")
            recommendations.append(
                "Add more high-quality photos of your business "
                "(interior, exterior, team, products)"
            )

        if has_cover_photo:
            score += 1
        else:
            issues.append("Cover photo is not set")
            recommendations.append("Upload a compelling cover photo that represents your business")

        if has_logo_photo:
            score += 1
        else:
            issues.append("Logo photo is not set")
            recommendations.append("Upload your business logo")

        if len(photo_categories) >= MIN_DISTINCT_CATEGORIES:
            score += 1
        else:
            issues.append("Limited variety in photo types")
            recommendations.append(
                "Add photos in different categories: interior, exterior, team, products/services"
            )

        return PhotosScore(
            score=score,
            max_score=MAX_SCORE,
            issues=issues,
            recommendations=recommendations,
            details=PhotosDetails(
                total_photos=total_photos,
                has_cover_photo=has_cover_photo,
                has_logo_photo=has_logo_photo,
                photo_categories=photo_categories,
            ),
        )
