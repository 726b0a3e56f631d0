# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-28
# Description: errors.py
# -----------------------------------------------------------------------------


class RecipeSearchError(Exception):
    """Base class for failures raised by the semantic search pipeline."""


class ProviderError(RecipeSearchError):
    """
    Embedding generation failed: network/auth error, malformed payload,
    no data, or an empty vector.
    """


class StoreError(RecipeSearchError):
    """Underlying embedding persistence failed on save/find/delete."""
