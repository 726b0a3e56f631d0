# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Description: RecipeEmbeddingStore
# -----------------------------------------------------------------------------

from typing import List, Optional, Protocol, Sequence, runtime_checkable

from embedding.EmbeddingRecord import EmbeddingRecord


@runtime_checkable
class RecipeEmbeddingStore(Protocol):
    """
    Storage for recipe vectors. No similarity query is part of the contract:
    callers scan find_all() and rank in the application layer, so an
    indexed backend can be swapped in without touching the search engine.
    """

    def test_connection(self) -> bool:
        ...

    def save(self, recipe_id: int, vector: Sequence[float]) -> EmbeddingRecord:
        ...

    def find_all(self) -> List[EmbeddingRecord]:
        ...

    def find_by_recipe_id(self, recipe_id: int) -> Optional[EmbeddingRecord]:
        ...

    def delete_for_recipe(self, recipe_id: Optional[int]) -> None:
        ...

    def count(self) -> int:
        ...
