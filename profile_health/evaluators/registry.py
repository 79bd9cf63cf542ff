"""Evaluator registry for orchestrating all category evaluators."""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime

from profile_health.evaluators.attributes import AttributesEvaluator
from profile_health.evaluators.base import BaseEvaluator
from profile_health.evaluators.composite import ScoreAggregator
from profile_health.evaluators.photos import PhotosEvaluator
from profile_health.evaluators.posts import PostsEvaluator
from profile_health.evaluators.products import ProductsEvaluator
from profile_health.evaluators.profile_info import ProfileInfoEvaluator
from profile_health.evaluators.q_and_a import QAndAEvaluator
from profile_health.evaluators.reviews import ReviewsEvaluator
from profile_health.evaluators.services import ServicesEvaluator
from profile_health.models.common import _utc_now
from profile_health.models.model_eval import Category, EvalContext, ScoringConfig
from profile_health.models.model_score import OverallResult, ScoreBreakdown
from profile_health.models.model_snapshot import ProfileSnapshot

logger = logging.getLogger(__name__)


class EvaluatorRegistry:
    """Orchestrates all category evaluators to score profile snapshots.

    This registry manages the eight category evaluators and provides a
    unified interface for scoring. It handles:
    - Reading the injected clock once per evaluation
    - Running every category evaluator against the same context
    - Aggregating the results into an overall score and status

    The registry holds no per-snapshot state, so one instance can score
    snapshots from several threads.
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize registry with all evaluators.

        Args:
            config: Scoring configuration (defaults to the standard weights)
            clock: Source of "now" for recency windows
        """
        self.config = config or ScoringConfig()
        self.clock = clock
        self.aggregator = ScoreAggregator(self.config)
        self.evaluators: dict[Category, BaseEvaluator] = {
            Category.PROFILE_INFO: ProfileInfoEvaluator(),
            Category.REVIEWS: ReviewsEvaluator(),
            Category.PHOTOS: PhotosEvaluator(),
            Category.POSTS: PostsEvaluator(),
            Category.PRODUCTS: ProductsEvaluator(),
            Category.SERVICES: ServicesEvaluator(),
            Category.Q_AND_A: QAndAEvaluator(),
            Category.ATTRIBUTES: AttributesEvaluator(),
        }

    def build_context(self, now: datetime | None = None) -> EvalContext:
        """Create the evaluation context, reading the clock if ``now`` is not given."""
        return EvalContext(now=now or self.clock(), config=self.config)

    def evaluate(self, snapshot: ProfileSnapshot, now: datetime | None = None) -> OverallResult:
        """Score a snapshot.

        Args:
            snapshot: The profile snapshot (not modified)
            now: Reference time for recency windows (defaults to the clock)

        Returns:
            Overall result with per-category breakdown and status
        """
        context = self.build_context(now)
        return self._evaluate_with_context(snapshot, context)

    def evaluate_batch(
        self,
        snapshots: Iterable[ProfileSnapshot],
        now: datetime | None = None,
    ) -> list[OverallResult]:
        """Score multiple snapshots against a single clock reading.

        Args:
            snapshots: Snapshots to score
            now: Reference time shared by every snapshot (defaults to the clock)

        Returns:
            One result per snapshot, in input order
        """
        context = self.build_context(now)
        return [self._evaluate_with_context(snapshot, context) for snapshot in snapshots]

    def _evaluate_with_context(
        self, snapshot: ProfileSnapshot, context: EvalContext
    ) -> OverallResult:
        scores = {
            category.value: evaluator.evaluate(snapshot, context)
            for category, evaluator in self.evaluators.items()
        }
        breakdown = ScoreBreakdown(**scores)
        result = self.aggregator.aggregate(breakdown)

        logger.debug(
            f"Scored {snapshot.name or '<unnamed>'}: {result.overall_score}/100 "
            f"({result.status.value}), {len(result.issues)} issues"
        )
        return result


def score_profile(
    snapshot: ProfileSnapshot,
    now: datetime | None = None,
    config: ScoringConfig | None = None,
) -> OverallResult:
    """Score a single snapshot with a one-off registry."""
    return EvaluatorRegistry(config=config).evaluate(snapshot, now=now)
