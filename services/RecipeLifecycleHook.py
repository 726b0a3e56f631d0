# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-02
# Description: RecipeLifecycleHook.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from embedding.EmbeddingProvider import EmbeddingProvider
from embedding.EmbeddingRecord import EmbeddingRecord
from utility.logging_utils import get_class_logger
from vectorstore.RecipeEmbeddingStore import RecipeEmbeddingStore


def build_embedding_text(title: str, ingredient_names: Iterable[str]) -> str:
    """'<title> <ingredient>, <ingredient>, ...'"""
    return f"{title or ''} {', '.join(ingredient_names or [])}"


@dataclass
class RecipeLifecycleHook:
    """
    Keeps the embedding store in step with the recipe catalog.

    Embeddings are written once on create and removed on delete.
    Recipe edits are NOT re-embedded; an edited recipe keeps its original vector.
    """
    provider: EmbeddingProvider
    store: RecipeEmbeddingStore
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def on_recipe_created(self, recipe_id: int, title: str, ingredient_names: Iterable[str]) -> EmbeddingRecord:
        # ProviderError / StoreError propagate: the caller decides whether creation fails
        text = build_embedding_text(title, list(ingredient_names or []))
        self.logger.info("on_recipe_created: recipe_id=%s (start)", recipe_id)

        vector = self.provider.embed(text)
        record = self.store.save(recipe_id, vector)

        self.logger.info("on_recipe_created: recipe_id=%s -> embedding id='%s' (done)", recipe_id, record.id)
        return record

    def on_recipe_deleted(self, recipe_id: Optional[int]) -> None:
        self.logger.info("on_recipe_deleted: recipe_id=%s", recipe_id)
        self.store.delete_for_recipe(recipe_id)
