"""Base evaluator protocol defining the contract for all category evaluators."""

from typing import ClassVar, Protocol

from profile_health.models.model_eval import Category, EvalContext
from profile_health.models.model_score import CategoryScore
from profile_health.models.model_snapshot import ProfileSnapshot


class BaseEvaluator(Protocol):
    """Protocol defining the evaluator contract.

    Evaluators are pure functions of a ProfileSnapshot and an EvalContext and
    return a CategoryScore with ``0 <= score <= max_score``. They never raise
    on a well-typed snapshot: absent fields are failing checks.

    This stateless design enables:
    - Easy testing with a fixed clock
    - Parallelizable evaluation
    - Reproducible scoring
    """

    category: ClassVar[Category]
    max_score: ClassVar[int]

    def evaluate(self, snapshot: ProfileSnapshot, context: EvalContext) -> CategoryScore:
        """Evaluate the snapshot on this category.

        Args:
            snapshot: The profile snapshot (never mutated)
            context: Evaluation context holding "now" and the scoring config

        Returns:
            Category score with issues, recommendations and details
        """
        ...
