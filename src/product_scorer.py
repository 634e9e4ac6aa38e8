import logging
from typing import List, Sequence, Tuple
from .constants import CATEGORY_WEIGHT, KEYWORD_WEIGHT, PRICE_WEIGHT, RATING_WEIGHT
from .models import Product, QueryConstraints, ScoredResult

def format_number(value: float) -> str:
    """Render integral numbers without a trailing '.0' (100.0 -> '100', 4.5 -> '4.5')."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)

class ProductScorer:
    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def score_products(self, products: Sequence[Product], constraints: QueryConstraints) -> List[ScoredResult]:
        """Score filtered products in catalog order, keeping only those with a positive score."""
        scored = []
        for product in products:
            score, matched_terms = self.score(product, constraints)
            if score <= 0:
                continue
            data = product.model_dump()
            # Results fed back in as a catalog already carry these; the fresh values win.
            data.pop("search_score", None)
            data.pop("matched_terms", None)
            data.update(searchScore=score, matchedTerms=matched_terms)
            scored.append(ScoredResult.model_validate(data))
        self.logger.debug(f"{len(scored)} of {len(products)} candidates scored above zero")
        return scored

    def score(self, product: Product, constraints: QueryConstraints) -> Tuple[int, List[str]]:
        """Calculate the additive relevance score and the labels of every signal that fired.

        Assumes the product already passed the catalog filter, so price and
        rating constraints that are present are known to be satisfied.
        """
        components = [
            self._calculate_keyword_score(product, constraints),
            self._calculate_price_score(constraints),
            self._calculate_rating_score(product, constraints),
            self._calculate_category_score(product, constraints),
        ]

        score = 0
        matched_terms = []
        for sub_score, labels in components:
            score += sub_score
            matched_terms.extend(labels)
        return score, matched_terms

    def _calculate_keyword_score(self, product: Product, constraints: QueryConstraints) -> Tuple[int, List[str]]:
        text = product.search_text
        matched = [keyword for keyword in constraints.keywords if keyword in text]
        return KEYWORD_WEIGHT * len(matched), matched

    def _calculate_price_score(self, constraints: QueryConstraints) -> Tuple[int, List[str]]:
        if constraints.max_price is None:
            return 0, []
        return PRICE_WEIGHT, [f"under ${format_number(constraints.max_price)}"]

    def _calculate_rating_score(self, product: Product, constraints: QueryConstraints) -> Tuple[int, List[str]]:
        if constraints.min_rating is None:
            return 0, []
        return RATING_WEIGHT, [f"good reviews ({format_number(product.rating)}⭐)"]

    def _calculate_category_score(self, product: Product, constraints: QueryConstraints) -> Tuple[int, List[str]]:
        if product.category not in constraints.normalized_query:
            return 0, []
        return CATEGORY_WEIGHT, [product.category]
