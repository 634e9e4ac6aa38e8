import logging
from typing import List, Optional, Sequence, Tuple, TypedDict
from langgraph.graph import StateGraph, END
from src.catalog import CatalogLoader
from src.catalog_filter import CatalogFilter
from src.langgraph_nodes import interpret_query, filter_catalog, score_candidates, rank_results
from src.models import Product, QueryConstraints, ScoredResult, SearchOutcome
from src.product_scorer import ProductScorer, format_number
from src.query_interpreter import QueryInterpreter
from src.ranking import RankingSelector
from src.utils.config import Config

class SearchState(TypedDict, total=False):
    query: str
    catalog: Sequence[Product]
    interpreter: QueryInterpreter
    catalog_filter: CatalogFilter
    scorer: ProductScorer
    ranker: RankingSelector
    constraints: QueryConstraints
    candidates: List[Product]
    scored: List[ScoredResult]
    ranked: List[ScoredResult]
    total_results: int

class SearchEngine:
    """Runs the smart search pipeline: interpret -> filter -> score -> rank.

    The compiled graph holds no per-call data, so one engine can serve
    concurrent callers. The catalog is read, never modified.
    """

    def __init__(
        self,
        interpreter: Optional[QueryInterpreter] = None,
        catalog_filter: Optional[CatalogFilter] = None,
        scorer: Optional[ProductScorer] = None,
        ranker: Optional[RankingSelector] = None,
    ):
        self.logger = logging.getLogger(__name__)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.interpreter = interpreter or QueryInterpreter()
        self.catalog_filter = catalog_filter or CatalogFilter()
        self.scorer = scorer or ProductScorer()
        self.ranker = ranker or RankingSelector()
        self.graph = self._build_graph()

    def _build_graph(self):
        graph = StateGraph(state_schema=SearchState)
        graph.add_node("interpret_query", interpret_query)
        graph.add_node("filter_catalog", filter_catalog)
        graph.add_node("score_candidates", score_candidates)
        graph.add_node("rank_results", rank_results)

        graph.add_edge("interpret_query", "filter_catalog")
        graph.add_edge("filter_catalog", "score_candidates")
        graph.add_edge("score_candidates", "rank_results")
        graph.add_edge("rank_results", END)

        graph.set_entry_point("interpret_query")
        return graph.compile()

    def search(self, query: str, catalog: Sequence[Product]) -> SearchOutcome:
        """
        Searches the catalog for a free-text query.
        Args:
            query (str): The user's query. Must already be validated as non-empty by the caller.
            catalog (Sequence[Product]): Products to search, in display order.
        Returns:
            SearchOutcome: at most MAX_RESULTS results and the total number of matches.
        """
        initial_state = {
            "query": query,
            "catalog": catalog,
            "interpreter": self.interpreter,
            "catalog_filter": self.catalog_filter,
            "scorer": self.scorer,
            "ranker": self.ranker,
        }
        result = self.graph.invoke(initial_state)

        constraints = result["constraints"]
        self.logger.info(
            f"Query '{query}': max_price={constraints.max_price}, min_rating={constraints.min_rating}, "
            f"types={constraints.requested_types}, keywords={constraints.keywords}"
        )
        self.logger.info(
            f"{len(result['candidates'])} of {len(catalog)} products passed filters, "
            f"{result['total_results']} matched, returning {len(result['ranked'])}"
        )
        return SearchOutcome(results=result["ranked"], totalResults=result["total_results"])

def initialize_engine(config: Optional[Config] = None) -> Tuple[SearchEngine, CatalogLoader]:
    """
    Builds the shared search engine and the catalog loader every entry point uses.
    Returns:
        Tuple: search_engine, catalog_loader
    """
    config = config or Config()
    logging.getLogger("src").setLevel(config.LOG_LEVEL)
    return SearchEngine(), CatalogLoader(config.CATALOG_PATH)

def format_display_results(outcome: SearchOutcome) -> str:
    """Formats search results, with their matched terms, for display."""
    if not outcome.results:
        return "No products matched your search."

    output_lines = [f"\nFound {outcome.total_results} products matching your search"]
    if outcome.total_results > len(outcome.results):
        output_lines.append(f"Showing the top {len(outcome.results)}:")
    for i, result in enumerate(outcome.results, 1):
        output_lines.append(f"\n{i}. {result.title} - ${format_number(result.price)} (Score: {result.search_score})")
        output_lines.append(f"   Matched: {', '.join(result.matched_terms)}")
    output_lines.append("-" * 80)
    return "\n".join(output_lines)

def format_catalog(products: Sequence[Product]) -> str:
    """Formats the unfiltered catalog for display."""
    if not products:
        return "The catalog is empty."

    output_lines = ["\nProduct Catalog:"]
    for i, product in enumerate(products, 1):
        output_lines.append(f"{i}. [{product.category}] {product.title} - ${format_number(product.price)} ({format_number(product.rating)}⭐)")
    return "\n".join(output_lines)

def filter_by_category(products: Sequence[Product], category: str) -> List[Product]:
    """Products whose category is exactly `category`. No search scoring is involved."""
    return [product for product in products if product.category == category]
