import logging
import re
from typing import List, Optional
from .constants import GOOD_RATING_THRESHOLD, MIN_KEYWORD_LENGTH, PRODUCT_TYPES, STOP_WORDS
from .models import QueryConstraints

PRICE_CEILING_PATTERN = re.compile(r'(?:under|less than|below|max|maximum)\s*\$?(\d+)')
GOOD_RATING_PATTERN = re.compile(r'(?:good|high|excellent)\s*(?:reviews?|rating)')

class QueryInterpreter:
    """Turns a free-text shopping query into structured search constraints.

    Only the first price phrase is honored and no price floor is supported.
    Rating phrases always map to the same fixed threshold.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def interpret(self, query: str) -> QueryConstraints:
        """Parse a query into constraints. Never fails; unknown text yields empty constraints."""
        normalized = query.lower()
        constraints = QueryConstraints(
            normalized_query=normalized,
            max_price=self._extract_max_price(normalized),
            min_rating=self._extract_min_rating(normalized),
            requested_types=self._extract_requested_types(normalized),
            keywords=self._extract_keywords(normalized),
        )
        self.logger.debug(f"Interpreted query '{query}' as {constraints.model_dump()}")
        return constraints

    def _extract_max_price(self, normalized: str) -> Optional[float]:
        match = PRICE_CEILING_PATTERN.search(normalized)
        if match is None:
            return None
        return float(match.group(1))

    def _extract_min_rating(self, normalized: str) -> Optional[float]:
        if GOOD_RATING_PATTERN.search(normalized):
            return GOOD_RATING_THRESHOLD
        return None

    def _extract_requested_types(self, normalized: str) -> List[str]:
        return [product_type for product_type in PRODUCT_TYPES if product_type in normalized]

    def _extract_keywords(self, normalized: str) -> List[str]:
        return [
            word for word in normalized.split()
            if len(word) > MIN_KEYWORD_LENGTH and word not in STOP_WORDS
        ]
