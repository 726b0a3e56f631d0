# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-05
# Updated: 2026-10-19
# Description: search.py
# -----------------------------------------------------------------------------
from typing import List

from pydantic import AliasChoices, Field, BaseModel, field_validator

from api.schemas.recipes import RecipeOut
import settings

class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1)
    # "topK" is accepted for older mobile/web clients
    top_k: int = Field(
        settings.SEARCH_DEFAULT_TOP_K,
        ge=0,
        validation_alias=AliasChoices("top_k", "topK"),
    )

    @field_validator("top_k")
    @classmethod
    def _cap_top_k(cls, v: int) -> int:
        # SEARCH_MAX_TOP_K = 0 leaves top_k unbounded
        cap = settings.SEARCH_MAX_TOP_K
        if cap and v > cap:
            raise ValueError(f"top_k must be <= {cap}")
        return v

class SearchResponse(BaseModel):
    query: str
    top_k: int
    count: int
    results: List[RecipeOut]
