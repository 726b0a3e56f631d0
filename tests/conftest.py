# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-07
# Description: conftest.py
# -----------------------------------------------------------------------------

import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from catalog.InMemoryRecipeCatalog import InMemoryRecipeCatalog  # noqa: E402
from catalog.Recipe import Ingredient, Recipe  # noqa: E402
from utility.errors import ProviderError  # noqa: E402
from vectorstore.InMemoryRecipeEmbeddingStore import InMemoryRecipeEmbeddingStore  # noqa: E402


class StubEmbeddingProvider:
    """
    Deterministic EmbeddingProvider: exact text -> vector lookup.
    Unknown text falls back to `default`, or raises ProviderError when no default is set.
    """

    def __init__(self, vectors: Dict[str, Sequence[float]], default: Optional[Sequence[float]] = None):
        self.vectors = {k: list(v) for k, v in vectors.items()}
        self.default = list(default) if default is not None else None
        self.calls: List[str] = []

    def embed(self, text: str) -> List[float]:
        self.calls.append(text)
        if text in self.vectors:
            return list(self.vectors[text])
        if self.default is not None:
            return list(self.default)
        raise ProviderError(f"no stub vector for {text!r}")


class FailingEmbeddingProvider:
    def __init__(self, message: str = "embedding service unavailable"):
        self.message = message
        self.calls: List[str] = []

    def embed(self, text: str) -> List[float]:
        self.calls.append(text)
        raise ProviderError(self.message)


@pytest.fixture
def make_provider():
    def _make(vectors: Dict[str, Sequence[float]], default: Optional[Sequence[float]] = None):
        return StubEmbeddingProvider(vectors, default=default)
    return _make


@pytest.fixture
def failing_provider() -> FailingEmbeddingProvider:
    return FailingEmbeddingProvider()


@pytest.fixture
def store() -> InMemoryRecipeEmbeddingStore:
    return InMemoryRecipeEmbeddingStore()


@pytest.fixture
def catalog() -> InMemoryRecipeCatalog:
    return InMemoryRecipeCatalog()


@pytest.fixture
def add_recipe(catalog):
    """Save a recipe into the catalog and return it with its assigned id."""
    def _add(title: str, ingredients: Sequence[str] = ()) -> Recipe:
        return catalog.save(Recipe(title=title, ingredients=[Ingredient(name=n) for n in ingredients]))
    return _add
