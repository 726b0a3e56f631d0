# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-01
# Updated: 2026-10-13
# Description: SemanticSearchEngine
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from catalog.Recipe import Recipe
from catalog.RecipeCatalog import RecipeCatalog
from embedding.EmbeddingProvider import EmbeddingProvider
from embedding.EmbeddingRecord import EmbeddingRecord
from search.similarity import cosine_similarity
import settings
from utility.logging_utils import get_class_logger
from vectorstore.RecipeEmbeddingStore import RecipeEmbeddingStore


@dataclass(frozen=True)
class ScoredRecord:
    record: EmbeddingRecord
    score: float


@dataclass
class SemanticSearchEngine:
    """
    Free-text recipe search over stored embeddings.

    Pipeline per call (stateless, no locking):
      embed query -> full scan of the store -> cosine score every record
      -> stable sort descending -> top_k -> hydrate ids via the catalog.

    Ties keep find_all() order. Ids without a catalog entry are dropped
    silently; a ProviderError on the query embedding fails the whole search.
    """
    provider: EmbeddingProvider
    store: RecipeEmbeddingStore
    catalog: RecipeCatalog
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger: logging.Logger = self.logger or get_class_logger(self.__class__)

    @staticmethod
    def rank(query_vector: Optional[Sequence[float]], records: Sequence[EmbeddingRecord]) -> List[ScoredRecord]:
        scored = [ScoredRecord(record=r, score=cosine_similarity(query_vector, r.embedding)) for r in records]
        # sorted() is stable, including with reverse=True
        return sorted(scored, key=lambda s: s.score, reverse=True)

    def search(self, query: str, top_k: int = settings.SEARCH_DEFAULT_TOP_K) -> List[Recipe]:
        if top_k < 0:
            raise ValueError(f"top_k must be >= 0, got {top_k}")

        self.logger.info("search: query=%r top_k=%d (start)", query, top_k)

        query_vector = self.provider.embed(query)
        records = self.store.find_all()

        ranked = self.rank(query_vector, records)[:top_k]
        self.logger.debug(
            "search: scored %d embeddings, top scores=%s",
            len(records),
            [round(s.score, 4) for s in ranked],
        )

        recipe_ids = [s.record.recipe_id for s in ranked if s.record.recipe_id is not None]

        results: List[Recipe] = []
        for recipe_id in recipe_ids:
            recipe = self.catalog.find_by_id(recipe_id)
            if recipe is None:
                self.logger.debug("search: recipe_id=%s no longer resolves; skipping", recipe_id)
                continue
            results.append(recipe)

        self.logger.info(
            "search: query=%r -> %d results from %d embeddings (done)",
            query,
            len(results),
            len(records),
        )
        return results
