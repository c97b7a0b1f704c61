from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

Difficulty = Literal["beginner", "intermediate", "advanced"]
SearchType = Literal["tutorials", "projects", "resources", "all"]


class SearchFilters(BaseModel):
    difficulty: Optional[Difficulty] = None
    tech_stack: Optional[List[str]] = None
    is_pro: Optional[bool] = None


class SearchRequest(BaseModel):
    """
    Free-text search with optional filters.

    Attributes:
        query: substring matched case-insensitively
        type: which collections the combined /search endpoint returns
        filters: ANDed with the text match; tech_stack terms are ORed together
    """

    query: str = Field(..., min_length=1, max_length=200)
    type: SearchType = "all"
    filters: Optional[SearchFilters] = None

    @field_validator("query")
    @classmethod
    def strip_query(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Query cannot be empty or only whitespace")
        return v
