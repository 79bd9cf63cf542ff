"""Reviews evaluator for rating, volume, response rate and recency."""

from typing import ClassVar

from profile_health.evaluators.helpers import count_recent, round_half_up, tier_points
from profile_health.models.model_eval import Category, EvalContext
from profile_health.models.model_score import ReviewsDetails, ReviewsScore
from profile_health.models.model_snapshot import ProfileSnapshot

MAX_SCORE = 10

# (threshold, points), highest first
RATING_TIERS = [(4.5, 3), (4.0, 2), (3.5, 1)]
VOLUME_TIERS = [(50, 3), (20, 2), (5, 1)]
RESPONSE_RATE_TIERS = [(90, 2), (70, 1)]
RECENCY_TIERS = [(5, 2), (2, 1)]


class ReviewsEvaluator:
    """Evaluates review health on four additive sub-scores.

    - Rating (max 3): >=4.5 -> 3, >=4.0 -> 2, >=3.5 -> 1
    - Volume (max 3): >=50 -> 3, >=20 -> 2, >=5 -> 1
    - Response rate (max 2): >=90% -> 2, >=70% -> 1
    - Recency (max 2): reviews in the recency window, >=5 -> 2, >=2 -> 1

    An absent or zero rating is not reported as a low rating; the volume
    check already covers a profile without reviews.
    """

    category: ClassVar[Category] = Category.REVIEWS
    max_score: ClassVar[int] = MAX_SCORE

    def evaluate(self, snapshot: ProfileSnapshot, context: EvalContext) -> ReviewsScore:
        """Calculate reviews score.

        Args:
            snapshot: The profile snapshot
            context: Evaluation context providing the recency cutoff

        Returns:
            Reviews score between 0-10
        """
        reviews = snapshot.reviews
        total_reviews = len(reviews)
        average_rating = snapshot.average_rating or 0.0

        replied = sum(1 for review in reviews if review.has_reply)
        response_rate = round_half_up(replied / total_reviews * 100) if total_reviews > 0 else 0
        recent_reviews = count_recent(
            (review.create_time for review in reviews), context.recency_cutoff
        )

        score = 0
        issues: list[str] = []
        recommendations: list[str] = []

        rating_points = tier_points(average_rating, RATING_TIERS)
        score += rating_points
        if rating_points == 0 and average_rating > 0:
            issues.append(f"Average rating ({average_rating:.1f}) is below 3.5")
            recommendations.append(
                "Focus on improving customer satisfaction to boost your rating"
            )

        volume_points = tier_points(total_reviews, VOLUME_TIERS)
        score += volume_points
        if volume_points == 0:
            issues.append(f"Only {total_reviews} reviews - aim for at least 20")
            recommendations.append("Encourage satisfied customers to leave reviews")

        response_points = tier_points(response_rate, RESPONSE_RATE_TIERS)
        score += response_points
        if response_points == 0:
            issues.append(f"Response rate ({response_rate}%) is below 70%")
            recommendations.append("Respond to all reviews, especially negative ones")

        recency_points = tier_points(recent_reviews, RECENCY_TIERS)
        score += recency_points
        if recency_points == 0:
            issues.append("Not enough recent reviews")
            recommendations.append(
                "Implement a review generation strategy for consistent new reviews"
            )

        return ReviewsScore(
            score=score,
            max_score=MAX_SCORE,
            issues=issues,
            recommendations=recommendations,
            details=ReviewsDetails(
                average_rating=average_rating,
                total_reviews=total_reviews,
                response_rate=response_rate,
                recent_reviews=recent_reviews,
            ),
        )
