"""Q&A evaluator for question volume, answer rate and owner participation."""

from typing import ClassVar

from profile_health.consts import OWNER_AUTHOR_TYPE
from profile_health.evaluators.helpers import round_half_up, tier_points
from profile_health.models.model_eval import Category, EvalContext
from profile_health.models.model_score import QAndADetails, QAndAScore
from profile_health.models.model_snapshot import ProfileSnapshot, Question

MAX_SCORE = 4

# (threshold, partial credit), highest first
VOLUME_TIERS = [(10, 1.0), (3, 0.5)]
ANSWER_RATE_TIERS = [(0.9, 1.0), (0.7, 0.5)]
OWNER_PARTICIPATION_TIERS = [(0.8, 2.0), (0.5, 1.0)]


def _has_owner_answer(question: Question) -> bool:
    return any(
        answer.author is not None and answer.author.type == OWNER_AUTHOR_TYPE
        for answer in question.top_answers
    )


class QAndAEvaluator:
    """Evaluates the Q&A section with fractional partial credit.

    Partials (volume up to 1, answer rate up to 1, owner participation up to
    2) are summed as floats and rounded once, half up, at the end. Partials are
    never rounded individually.

    A profile without questions gets a recommendation to seed the section
    and no issue.
    """

    category: ClassVar[Category] = Category.Q_AND_A
    max_score: ClassVar[int] = MAX_SCORE

    def evaluate(self, snapshot: ProfileSnapshot, context: EvalContext) -> QAndAScore:
        """Calculate Q&A score.

        Args:
            snapshot: The profile snapshot
            context: Evaluation context (unused for Q&A checks)

        Returns:
            Q&A score between 0-4
        """
        questions = snapshot.questions
        total_questions = len(questions)
        answered_questions = sum(1 for question in questions if question.top_answers)
        owner_answers = sum(1 for question in questions if _has_owner_answer(question))

        partial = tier_points(total_questions, VOLUME_TIERS)
        issues: list[str] = []
        recommendations: list[str] = []

        if total_questions > 0:
            answer_credit = tier_points(answered_questions / total_questions, ANSWER_RATE_TIERS)
            partial += answer_credit
            if answer_credit == 0:
                issues.append("Low Q&A response rate")
                recommendations.append("Answer all customer questions promptly")

            owner_credit = tier_points(
                owner_answers / total_questions, OWNER_PARTICIPATION_TIERS
            )
            partial += owner_credit
            if owner_credit == 0:
                issues.append("Low owner participation in Q&A")
                recommendations.append("Proactively answer questions as the business owner")
        else:
            recommendations.append("Seed your Q&A section with common questions and answers")

        return QAndAScore(
            score=min(MAX_SCORE, round_half_up(partial)),
            max_score=MAX_SCORE,
            issues=issues,
            recommendations=recommendations,
            details=QAndADetails(
                total_questions=total_questions,
                answered_questions=answered_questions,
                owner_answers=owner_answers,
            ),
        )
