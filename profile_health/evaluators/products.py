"""Products evaluator for catalog presence and completeness."""

from typing import ClassVar

from profile_health.evaluators.helpers import tier_points
from profile_health.models.model_eval import Category, EvalContext
from profile_health.models.model_score import ProductsDetails, ProductsScore
from profile_health.models.model_snapshot import ProfileSnapshot

MAX_SCORE = 4

PRESENCE_TIERS = [(10, 2), (3, 1)]


class ProductsEvaluator:
    """Evaluates the product catalog.

    - Presence (max 2): >=10 -> 2, >=3 -> 1. Only an empty catalog is
      reported; 1-2 products score 0 without an issue.
    - Photos (max 1) and descriptions (max 1), checked when products exist.
    """

    category: ClassVar[Category] = Category.PRODUCTS
    max_score: ClassVar[int] = MAX_SCORE

    def evaluate(self, snapshot: ProfileSnapshot, context: EvalContext) -> ProductsScore:
        """Calculate products score.

        Args:
            snapshot: The profile snapshot
            context: Evaluation context (unused for catalog checks)

        Returns:
            Products score between 0-4
        """
        products = snapshot.products
        total_products = snapshot.total_products or len(products)
        products_with_photos = sum(1 for product in products if product.media)
        products_with_descriptions = sum(
            1 for product in products if product.product_description or product.name
        )

        score = tier_points(total_products, PRESENCE_TIERS)
        issues: list[str] = []
        recommendations: list[str] = []

        if total_products == 0:
            issues.append("No products listed")
            recommendations.append("Add your products/services with detailed descriptions")

        if total_products > 0:
            missing_photos = total_products - products_with_photos
            if missing_photos <= 0:
                score += 1
            else:
                issues.append(f"{missing_photos} products missing photos")
                recommendations.append("Add photos to all products")

            missing_descriptions = total_products - products_with_descriptions
            if missing_descriptions <= 0:
                score += 1
            else:
                issues.append(f"{missing_descriptions} products missing descriptions")
                recommendations.append("Add detailed descriptions to all products")

        return ProductsScore(
            score=score,
            max_score=MAX_SCORE,
            issues=issues,
            recommendations=recommendations,
            details=ProductsDetails(
                total_products=total_products,
                products_with_photos=products_with_photos,
                products_with_descriptions=products_with_descriptions,
            ),
        )
