from typing import List, Sequence
from .models import Product, QueryConstraints

class CatalogFilter:
    """Applies the hard constraints of a query. Excluded products are never scored."""

    def filter(self, products: Sequence[Product], constraints: QueryConstraints) -> List[Product]:
        return [product for product in products if self.is_eligible(product, constraints)]

    def is_eligible(self, product: Product, constraints: QueryConstraints) -> bool:
        if constraints.requested_types and not self._matches_requested_type(product, constraints.requested_types):
            return False
        if constraints.max_price is not None and product.price > constraints.max_price:
            return False
        if constraints.min_rating is not None and product.rating < constraints.min_rating:
            return False
        return True

    def _matches_requested_type(self, product: Product, requested_types: List[str]) -> bool:
        text = product.search_text
        return any(
            product_type in text or product_type in product.category
            for product_type in requested_types
        )
