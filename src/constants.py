# Canonical product types recognized in queries, in matching order
PRODUCT_TYPES = [
    "shoes",
    "laptops",
    "electronics",
    "accessories",
    "clothing",
    "headphones",
    "gaming",
    "fitness",
    "kitchen",
]

# Words never treated as search keywords
STOP_WORDS = frozenset({
    "show", "me", "with", "and", "the", "for",
    "under", "over", "good", "bad", "high", "low",
})

# Keywords must be longer than this to count
MIN_KEYWORD_LENGTH = 2

# Rating floor implied by phrases such as "good reviews" or "high rating"
GOOD_RATING_THRESHOLD = 4.0

# Score weights
KEYWORD_WEIGHT = 2
PRICE_WEIGHT = 3
RATING_WEIGHT = 2
CATEGORY_WEIGHT = 5

# Number of results returned by a search
MAX_RESULTS = 8
