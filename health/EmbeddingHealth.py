# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-04
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import time
import logging
from typing import Optional

from embedding.EmbeddingProvider import EmbeddingProvider
from utility.logging_utils import get_logger


class EmbeddingHealth:
    """
    Smoke test for the embedding provider.

    Verifies:
      - The embedding call completes successfully
      - The response contains a non-empty vector
      - The vector dimension matches the expected dimension (if provided)
    """

    def __init__(
        self,
        provider: EmbeddingProvider,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.provider = provider
        self.expected_dim = expected_dim or None
        self.logger = logger or get_logger(__name__)

    def run(self) -> bool:
        """
        Run the embedding smoke test.

        Returns:
            True if the embedding call succeeds and (optionally) the dimension matches.
        """
        test_text = "chicken soup healthcheck"
        self.logger.info("Running embedding healthcheck using provider: %s", type(self.provider).__name__)

        try:
            start = time.time()
            embedding = self.provider.embed(test_text)
            elapsed_ms = (time.time() - start) * 1000.0

            if not embedding:
                self.logger.error("No embedding data returned.")
                return False

            dim = len(embedding)
            self.logger.info(
                "Embedding call succeeded in %.1f ms. Returned dimension: %d",
                elapsed_ms,
                dim,
            )

            if self.expected_dim is not None and dim != self.expected_dim:
                self.logger.warning(
                    "Dimension mismatch: expected %d, got %d.",
                    self.expected_dim,
                    dim,
                )
                return False

            self.logger.info("Embedding healthcheck PASSED.")
            return True

        except Exception as e:
            self.logger.exception("Embedding healthcheck FAILED: %s", e)
            return False
