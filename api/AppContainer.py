# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-05
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from typing import Optional

from catalog.InMemoryRecipeCatalog import InMemoryRecipeCatalog
from config.Config import Config
from embedding.OpenAIRecipeEmbedder import OpenAIRecipeEmbedder
from health.TestRunner import TestRunner
from search.SemanticSearchEngine import SemanticSearchEngine
from services.HealthService import HealthService
from services.RecipeLifecycleHook import RecipeLifecycleHook
from services.RecipeService import RecipeService
from utility.logging_utils import get_class_logger
from vectorstore.ChromaRecipeEmbeddingStore import ChromaRecipeEmbeddingStore
from vectorstore.InMemoryRecipeEmbeddingStore import InMemoryRecipeEmbeddingStore
from vectorstore.RecipeEmbeddingStore import RecipeEmbeddingStore


class AppContainer:
    """
    Owns heavy object instantiation and application wiring.
    Singleton instances are provided via FastAPI dependencies.
    """

    def __init__(self, cfg: Optional[Config] = None) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger.info("AppContainer config: %s", self.cfg.summary())

        # Core infrastructure
        self.embedder = OpenAIRecipeEmbedder(cfg=self.cfg)
        self.store = self._build_store(self.cfg)
        self.catalog = InMemoryRecipeCatalog()

        # Semantic search core
        self.search_engine = SemanticSearchEngine(
            provider=self.embedder,
            store=self.store,
            catalog=self.catalog,
        )
        self.lifecycle_hook = RecipeLifecycleHook(
            provider=self.embedder,
            store=self.store,
        )

        # Recipe management flow (drives the lifecycle hook)
        self.recipe_service = RecipeService(
            catalog=self.catalog,
            lifecycle_hook=self.lifecycle_hook,
        )

        # Smoke tests / health
        self.test_runner = TestRunner(provider=self.embedder, store=self.store)
        self.health_service = HealthService(test_runner=self.test_runner, store=self.store)

    @staticmethod
    def _build_store(cfg: Config) -> RecipeEmbeddingStore:
        if cfg.embedding_store_backend == "memory":
            return InMemoryRecipeEmbeddingStore()
        return ChromaRecipeEmbeddingStore(cfg=cfg)
