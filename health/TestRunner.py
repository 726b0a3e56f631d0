# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-04
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

from embedding.EmbeddingProvider import EmbeddingProvider
from health.EmbeddingHealth import EmbeddingHealth
from health.StoreHealth import StoreHealth
import settings
from utility.logging_utils import get_class_logger
from vectorstore.RecipeEmbeddingStore import RecipeEmbeddingStore


class TestRunner:
    """
    Orchestrates all smoke tests and reports a consolidated result.

    Tests included:
      - StoreHealth     (embedding store reachable)
      - EmbeddingHealth (embedding provider round-trip, optional)
    """

    # Not a pytest test class
    __test__ = False

    def __init__(
        self,
        provider: EmbeddingProvider,
        store: RecipeEmbeddingStore,
        *,
        expected_dim: Optional[int] = settings.EMBED_EXPECTED_DIM,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or get_class_logger(self.__class__)

        self.logger.info("Initialising SmokeTestRunner")

        self.store_health = StoreHealth(store)
        self.embedding_health = EmbeddingHealth(provider, expected_dim=expected_dim)

    # -------------------------------------------------------------------------
    def run_all(self, run_embedding: bool = settings.HEALTH_CHECK_EMBEDDING) -> Dict[str, bool]:
        """
        Run all configured smoke tests.

        :param run_embedding: If True, includes a live embedding call.
        :return: Dict mapping test names to True/False.
        """
        self.logger.info("Starting smoke test suite (run_embedding=%s)", run_embedding)

        results: Dict[str, bool] = {}

        try:
            ok_store = self.store_health.run()
            results["store_health"] = ok_store
            self._log_result("StoreHealth", ok_store)
        except Exception as e:
            self.logger.exception("StoreHealth.run() raised an exception: %s", e)
            results["store_health"] = False

        if run_embedding:
            try:
                ok_embed = self.embedding_health.run()
                results["embedding_health"] = ok_embed
                self._log_result("EmbeddingHealth", ok_embed)
            except Exception as e:
                self.logger.exception("EmbeddingHealth.run() raised an exception: %s", e)
                results["embedding_health"] = False

        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)

        for name, ok in results.items():
            status = "PASS" if ok else "FAIL"
            self.logger.info("  %s: %s", name, status)
