from typing import List, Sequence
from .constants import MAX_RESULTS
from .models import ScoredResult

class RankingSelector:
    def __init__(self, max_results: int = MAX_RESULTS):
        self.max_results = max_results

    def rank(self, scored: Sequence[ScoredResult]) -> List[ScoredResult]:
        """Order by descending score and keep the top results. Ties keep their catalog order."""
        # sorted() is stable, including with reverse=True.
        ranked = sorted(scored, key=lambda result: result.search_score, reverse=True)
        return ranked[:self.max_results]
