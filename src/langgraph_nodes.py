def interpret_query(state: dict) -> dict:
    interpreter = state["interpreter"]
    return {
        **state,
        "constraints": interpreter.interpret(state["query"])
    }


def filter_catalog(state: dict) -> dict:
    catalog_filter = state["catalog_filter"]
    candidates = catalog_filter.filter(state["catalog"], state["constraints"])
    return {
        **state,
        "candidates": candidates
    }


def score_candidates(state: dict) -> dict:
    scorer = state["scorer"]
    scored = scorer.score_products(state["candidates"], state["constraints"])
    return {
        **state,
        "scored": scored,
        "total_results": len(scored)
    }


def rank_results(state: dict) -> dict:
    """
    Sorts the positively scored products and keeps the top results.
    total_results is left untouched so callers can report every match.
    """
    ranker = state["ranker"]
    return {
        **state,
        "ranked": ranker.rank(state["scored"])
    }
