# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-03
# Updated: 2026-10-19
# Description: RecipeService.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import replace
from typing import Optional

from catalog.Recipe import Recipe
from catalog.RecipeCatalog import RecipeCatalog
from services.RecipeLifecycleHook import RecipeLifecycleHook
from utility.logging_utils import get_class_logger


class RecipeService:
    """
    Recipe management facade used by FastAPI
    - create: persist to catalog, then embed via RecipeLifecycleHook
    - get: straight catalog lookup
    - delete: remove from catalog, then drop its embedding

    The acting user is always passed in explicitly (owner); there is no
    ambient request/security context.
    """

    def __init__(self,
                 *,
                 catalog: RecipeCatalog,
                 lifecycle_hook: RecipeLifecycleHook,
                 logger: logging.Logger | None = None, ) -> None:
        self.catalog = catalog
        self.lifecycle_hook = lifecycle_hook

        self.logger = logger or get_class_logger(self.__class__)

        self.logger.info("RecipeService initialised successfully (catalog=%s, hook=%s)",
                         type(catalog).__name__, type(lifecycle_hook).__name__)

    def create_recipe(self, recipe: Recipe, *, owner: str) -> Recipe:
        self.logger.info("create_recipe: owner='%s' title=%r (start)", owner, recipe.title)

        saved = self.catalog.save(replace(recipe, owner=owner))

        try:
            self.lifecycle_hook.on_recipe_created(saved.id, saved.title, saved.ingredient_names)
        except Exception as e:
            # Creation is atomic with embedding: roll the catalog write back
            self.logger.error(
                "create_recipe: embedding failed for recipe_id=%s, rolling back: %s", saved.id, e
            )
            self.catalog.delete_by_id(saved.id)
            raise

        self.logger.info("create_recipe: owner='%s' -> recipe_id=%s (done)", owner, saved.id)
        return saved

    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        return self.catalog.find_by_id(recipe_id)

    def delete_recipe(self, recipe_id: int) -> None:
        self.logger.info("delete_recipe: recipe_id=%s (start)", recipe_id)

        if self.catalog.find_by_id(recipe_id) is None:
            self.logger.warning("delete_recipe: recipe_id=%s -> not found", recipe_id)
            raise KeyError(f"Recipe not found: {recipe_id}")

        self.catalog.delete_by_id(recipe_id)
        self.lifecycle_hook.on_recipe_deleted(recipe_id)

        self.logger.info("delete_recipe: recipe_id=%s (done)", recipe_id)
