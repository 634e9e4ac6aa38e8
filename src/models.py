from typing import Annotated, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt

class Product(BaseModel):
    """A catalog product. Display-only fields (images, brand, review counts) pass through untouched."""
    model_config = ConfigDict(extra="allow", frozen=True)

    id: Union[int, str]
    title: str
    description: str = ""
    category: str = Field(min_length=1)
    # Whole numbers stay ints so they serialize as written (89, not 89.0).
    price: Union[NonNegativeInt, NonNegativeFloat]
    rating: Union[Annotated[int, Field(ge=0, le=5)], Annotated[float, Field(ge=0, le=5)]]

    @property
    def search_text(self) -> str:
        """Lower-cased title, description and category used for matching."""
        return f"{self.title} {self.description} {self.category}".lower()

class QueryConstraints(BaseModel):
    """Structured constraints interpreted from a free-text query."""
    normalized_query: str = ""
    max_price: Optional[float] = None
    min_rating: Optional[float] = None
    requested_types: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)

class ScoredResult(Product):
    """A product annotated with its relevance score and the labels explaining it."""
    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    search_score: int = Field(alias="searchScore")
    matched_terms: List[str] = Field(default_factory=list, alias="matchedTerms")

class SearchOutcome(BaseModel):
    """Top results of a search plus the number of matches before truncation."""
    model_config = ConfigDict(populate_by_name=True)

    results: List[ScoredResult] = Field(default_factory=list)
    total_results: int = Field(default=0, alias="totalResults")
