# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Description: EmbeddingProvider
# -----------------------------------------------------------------------------

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class EmbeddingProvider(Protocol):
    def embed(self, text: str) -> List[float]:
        """
        Convert text to a fixed-length vector.
        Raises ProviderError on remote failure, missing data or an empty vector.
        """
        ...
