# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-04
# Description: StoreHealth
# -----------------------------------------------------------------------------
import logging
from typing import Optional

from utility.logging_utils import get_logger
from vectorstore.RecipeEmbeddingStore import RecipeEmbeddingStore


class StoreHealth:
    """Smoke test for the embedding store: read-only, never writes a test record."""

    def __init__(self, store: RecipeEmbeddingStore, logger: Optional[logging.Logger] = None):
        self.store = store
        self.logger = logger or get_logger(__name__)

    def run(self) -> bool:
        self.logger.info("Running store healthcheck using store: %s", type(self.store).__name__)
        try:
            ok = bool(self.store.test_connection())
        except Exception as e:
            self.logger.exception("Store healthcheck FAILED: %s", e)
            return False

        if ok:
            self.logger.info("Store healthcheck PASSED.")
        else:
            self.logger.error("Store healthcheck FAILED: test_connection() returned False")
        return ok
