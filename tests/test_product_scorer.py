import pytest

from src.models import Product, QueryConstraints
from src.product_scorer import ProductScorer, format_number
from src.query_interpreter import QueryInterpreter

@pytest.fixture
def scorer():
    return ProductScorer()

@pytest.fixture
def interpreter():
    return QueryInterpreter()

@pytest.fixture
def running_shoe():
    return Product(
        id=1,
        title="Nike Air Zoom Pegasus Running Shoes",
        description="Responsive cushioning for daily running and training.",
        category="shoes",
        price=89,
        rating=4.5,
    )

def test_scenario_query_signals_in_discovery_order(scorer, interpreter, running_shoe):
    constraints = interpreter.interpret("Show me running shoes under $100 with good reviews")
    score, matched_terms = scorer.score(running_shoe, constraints)

    # running(2) + shoes(2) + price(3) + rating(2) + category(5)
    assert score == 14
    assert matched_terms == ["running", "shoes", "under $100", "good reviews (4.5⭐)", "shoes"]

def test_no_signals_scores_zero(scorer, running_shoe):
    score, matched_terms = scorer.score(running_shoe, QueryConstraints(normalized_query="blue", keywords=["blue"]))
    assert score == 0
    assert matched_terms == []

def test_duplicate_keywords_score_each_time(scorer, running_shoe):
    constraints = QueryConstraints(normalized_query="running running", keywords=["running", "running"])
    assert scorer.score(running_shoe, constraints) == (4, ["running", "running"])

def test_keywords_match_substrings_of_combined_text(scorer, running_shoe):
    constraints = QueryConstraints(normalized_query="cushion", keywords=["cushion"])
    assert scorer.score(running_shoe, constraints) == (2, ["cushion"])

@pytest.mark.parametrize("rating, expected_label", [
    (4.5, "good reviews (4.5⭐)"),
    (4.0, "good reviews (4⭐)"),
    (5, "good reviews (5⭐)"),
])
def test_rating_label(scorer, rating, expected_label):
    product = Product(id=7, title="Blender", category="kitchen", price=40, rating=rating)
    score, matched_terms = scorer.score(product, QueryConstraints(min_rating=4.0))
    assert score == 2
    assert matched_terms == [expected_label]

def test_price_label_has_no_decimal_for_whole_amounts(scorer, running_shoe):
    assert scorer.score(running_shoe, QueryConstraints(max_price=100.0)) == (3, ["under $100"])

def test_category_bonus_uses_raw_category(scorer):
    product = Product(id=3, title="Hiking Boots", category="Shoes", price=150, rating=4.2)
    # The lower-cased query cannot contain a capitalized category.
    assert scorer.score(product, QueryConstraints(normalized_query="shoes")) == (0, [])

def test_category_bonus(scorer):
    product = Product(id=4, title="Dumbbells", category="fitness", price=80, rating=4.6)
    assert scorer.score(product, QueryConstraints(normalized_query="home fitness gear")) == (5, ["fitness"])

def test_score_products_drops_non_positive_and_keeps_order(scorer):
    products = [
        Product(id=1, title="Blue Mug", category="kitchen", price=10, rating=4.1),
        Product(id=2, title="Red Mug", category="kitchen", price=12, rating=4.3),
        Product(id=3, title="Blue Scarf", category="clothing", price=20, rating=3.8, brand="Acme"),
    ]
    scored = scorer.score_products(products, QueryConstraints(normalized_query="blue", keywords=["blue"]))

    assert [r.id for r in scored] == [1, 3]
    assert all(r.search_score == 2 and r.matched_terms == ["blue"] for r in scored)
    assert scored[1].model_dump()["brand"] == "Acme"

@pytest.mark.parametrize("value, expected", [
    (100.0, "100"),
    (1500, "1500"),
    (4.5, "4.5"),
    (0.0, "0"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected

def test_score_products_replaces_stale_score_fields(scorer):
    product = Product(id=9, title="Blue Mug", category="kitchen", price=10, rating=4.1,
                      searchScore=99, matchedTerms=["old"])
    scored = scorer.score_products([product], QueryConstraints(normalized_query="blue", keywords=["blue"]))

    assert len(scored) == 1
    assert scored[0].search_score == 2
    assert scored[0].matched_terms == ["blue"]
    assert scored[0].model_dump(by_alias=True)["searchScore"] == 2
