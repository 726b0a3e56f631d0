# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-30
# Updated: 2026-10-19
# Description: InMemoryRecipeEmbeddingStore
# -----------------------------------------------------------------------------
import threading
from typing import List, Optional, Sequence

from embedding.EmbeddingRecord import EmbeddingRecord
from utility.errors import StoreError
from utility.logging_utils import get_class_logger


class InMemoryRecipeEmbeddingStore:
    """
    Process-local RecipeEmbeddingStore.
    Keeps insertion order, so find_all() is deterministic.
    """

    def __init__(self, logger=None) -> None:
        self.logger = logger or get_class_logger(self.__class__)
        self._records: List[EmbeddingRecord] = []
        self._lock = threading.Lock()

    def test_connection(self) -> bool:
        return True

    def save(self, recipe_id: int, vector: Sequence[float]) -> EmbeddingRecord:
        try:
            embedding = [float(x) for x in vector] if vector is not None else None
        except (TypeError, ValueError) as e:
            self.logger.error("Rejected non-numeric embedding for recipe_id=%s: %s", recipe_id, e)
            raise StoreError(f"Failed to save embedding for recipe {recipe_id}: {e}") from e

        record = EmbeddingRecord(recipe_id=recipe_id, embedding=embedding)
        with self._lock:
            self._records.append(record)
        self.logger.info("Saved embedding id='%s' for recipe_id=%s", record.id, recipe_id)
        return record

    def find_all(self) -> List[EmbeddingRecord]:
        with self._lock:
            return list(self._records)

    def find_by_recipe_id(self, recipe_id: int) -> Optional[EmbeddingRecord]:
        with self._lock:
            return next((r for r in self._records if r.recipe_id == recipe_id), None)

    def delete_for_recipe(self, recipe_id: Optional[int]) -> None:
        if recipe_id is None:
            return

        record = self.find_by_recipe_id(recipe_id)
        if record is None:
            self.logger.info("No embedding found for recipe_id=%s; nothing to delete", recipe_id)
            return

        with self._lock:
            # A concurrent delete may already have removed it
            self._records = [r for r in self._records if r.id != record.id]
        self.logger.info("Deleted embedding id='%s' for recipe_id=%s", record.id, recipe_id)

    def count(self) -> int:
        with self._lock:
            return len(self._records)
