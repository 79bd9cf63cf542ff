"""Evaluators module for scoring business profiles across eight categories.

Profiles are evaluated on:
- Profile info (identity fields)
- Reviews (rating, volume, response rate, recency)
- Photos (volume, cover/logo, variety)
- Posts (recency, volume)
- Products and services (presence, completeness)
- Q&A (volume, answer rate, owner participation)
- Attributes (hours, richness, key attributes)

All evaluators are stateless pure functions: ProfileSnapshot + EvalContext
-> CategoryScore.
"""

from profile_health.evaluators.attributes import AttributesEvaluator
from profile_health.evaluators.base import BaseEvaluator
from profile_health.evaluators.composite import ScoreAggregator, classify_status
from profile_health.evaluators.helpers import (
    count_recent,
    distinct_categories,
    resolve_photo_category,
    resolve_service_description,
    round_half_up,
)
from profile_health.evaluators.photos import PhotosEvaluator
from profile_health.evaluators.posts import PostsEvaluator
from profile_health.evaluators.products import ProductsEvaluator
from profile_health.evaluators.profile_info import ProfileInfoEvaluator
from profile_health.evaluators.q_and_a import QAndAEvaluator
from profile_health.evaluators.registry import EvaluatorRegistry, score_profile
from profile_health.evaluators.reviews import ReviewsEvaluator
from profile_health.evaluators.services import ServicesEvaluator

__all__ = [
    # Protocol
    "BaseEvaluator",
    # Individual evaluators
    "ProfileInfoEvaluator",
    "ReviewsEvaluator",
    "PhotosEvaluator",
    "PostsEvaluator",
    "ProductsEvaluator",
    "ServicesEvaluator",
    "QAndAEvaluator",
    "AttributesEvaluator",
    # Orchestration
    "EvaluatorRegistry",
    "score_profile",
    # Composite scoring
    "ScoreAggregator",
    "classify_status",
    # Utilities
    "count_recent",
    "distinct_categories",
    "resolve_photo_category",
    "resolve_service_description",
    "round_half_up",
]
