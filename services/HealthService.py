# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-04
# Updated: 2026-10-19
# Description: HealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Optional

from api.schemas.health import DeepHealthResponse, SmokeTestSummary
from health.TestRunner import TestRunner
from utility.errors import StoreError
from utility.logging_utils import get_class_logger
from vectorstore.RecipeEmbeddingStore import RecipeEmbeddingStore


@dataclass
class HealthService:
    """
    /health/deep backend: smoke tests from TestRunner plus the number of
    stored recipe embeddings (an empty store still searches, but returns nothing).
    """

    test_runner: TestRunner
    store: Optional[RecipeEmbeddingStore] = None
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def deep_health(self, run_embedding: bool = True) -> DeepHealthResponse:
        results = self.test_runner.run_all(run_embedding=run_embedding)
        summary = SmokeTestSummary.from_results(results)

        return DeepHealthResponse(
            status="ok" if summary.failed == 0 else "error",
            results=results,
            summary=summary,
            embedding_count=self._embedding_count(),
        )

    def _embedding_count(self) -> Optional[int]:
        if self.store is None:
            return None
        try:
            n = self.store.count()
        except StoreError as e:
            self.logger.warning("Could not count stored embeddings: %s", e)
            return None

        if n == 0:
            self.logger.warning("Embedding store is empty; searches will return no results")
        return n
