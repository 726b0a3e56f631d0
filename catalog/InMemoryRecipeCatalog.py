# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-02
# Description: InMemoryRecipeCatalog
# -----------------------------------------------------------------------------
import itertools
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from catalog.Recipe import Recipe
from utility.logging_utils import get_class_logger


class InMemoryRecipeCatalog:
    """
    Process-local RecipeCatalog with auto-incrementing integer ids.
    save() on a recipe without an id assigns the next one; with an id it overwrites.
    """

    def __init__(self, logger=None) -> None:
        self.logger = logger or get_class_logger(self.__class__)
        self._recipes: Dict[int, Recipe] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_by_id(self, recipe_id: int) -> Optional[Recipe]:
        with self._lock:
            return self._recipes.get(recipe_id)

    def save(self, recipe: Recipe) -> Recipe:
        with self._lock:
            if recipe.id is None:
                recipe = replace(recipe, id=next(self._ids))
            self._recipes[recipe.id] = recipe
        self.logger.info("Saved recipe id=%s title=%r", recipe.id, recipe.title)
        return recipe

    def delete_by_id(self, recipe_id: int) -> bool:
        with self._lock:
            removed = self._recipes.pop(recipe_id, None)
        if removed is not None:
            self.logger.info("Deleted recipe id=%s", recipe_id)
        return removed is not None

    def find_all(self) -> List[Recipe]:
        with self._lock:
            return list(self._recipes.values())
