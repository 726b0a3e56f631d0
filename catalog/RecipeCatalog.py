# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-01
# Description: RecipeCatalog
# -----------------------------------------------------------------------------

from typing import List, Optional, Protocol, runtime_checkable

from catalog.Recipe import Recipe


@runtime_checkable
class RecipeCatalog(Protocol):
    def find_by_id(self, recipe_id: int) -> Optional[Recipe]:
        ...

    def save(self, recipe: Recipe) -> Recipe:
        ...

    def delete_by_id(self, recipe_id: int) -> bool:
        ...

    def find_all(self) -> List[Recipe]:
        ...
