"""Posts evaluator for posting recency and volume."""

from typing import ClassVar

from profile_health.evaluators.helpers import count_recent, tier_points
from profile_health.models.model_eval import Category, EvalContext
from profile_health.models.model_score import PostsDetails, PostsScore
from profile_health.models.model_snapshot import ProfileSnapshot

MAX_SCORE = 5

RECENCY_TIERS = [
    (8, 3),  # 2+ per week
    (4, 2),  # 1 per week
    (1, 1),
]
VOLUME_TIERS = [(20, 2), (5, 1)]


class PostsEvaluator:
    """Evaluates posting activity.

    Posts are expected newest first; the first post's timestamp is reported
    as the last post date without re-sorting.
    """

    category: ClassVar[Category] = Category.POSTS
    max_score: ClassVar[int] = MAX_SCORE

    def evaluate(self, snapshot: ProfileSnapshot, context: EvalContext) -> PostsScore:
        posts = snapshot.posts
        total_posts = len(posts)
        posts_last_30_days = count_recent((post.create_time for post in posts), context.recency_cutoff)
        last_post_date = posts[0].create_time if posts else None

        score = 0
        issues: list[str] = []
        recommendations: list[str] = []

        recency_points = tier_points(posts_last_30_days, RECENCY_TIERS)
        score += recency_points
        if recency_points == 0:
            issues.append(f"No posts in the last {context.config.recency_window_days} days")
            recommendations.append(
                "Post updates at least weekly - share offers, events, or news"
            )

        volume_points = tier_points(total_posts, VOLUME_TIERS)
        score += volume_points
        if volume_points == 0:
            issues.append(f"Only {total_posts} total posts")
            recommendations.append("Build a consistent posting schedule to improve engagement")

        return PostsScore(
            score=score,
            max_score=MAX_SCORE,
            issues=issues,
            recommendations=recommendations,
            details=PostsDetails(
                total_posts=total_posts,
                posts_last_30_days=posts_last_30_days,
                last_post_date=last_post_date,
            ),
        )
