# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-01
# Description: Recipe
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class MeasurementType(str, Enum):
    GRAM = "GRAM"
    ML = "ML"
    TEASPOON = "TEASPOON"
    TABLESPOON = "TABLESPOON"
    CUP = "CUP"


@dataclass
class Ingredient:
    name: str
    quantity: Optional[int] = None
    measurement_type: MeasurementType = MeasurementType.GRAM


@dataclass
class Recipe:
    """Recipe as held by the catalog. id is None until the catalog saves it."""
    title: str
    ingredients: List[Ingredient] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)
    tag: Optional[str] = None
    type: Optional[str] = None
    price: Optional[float] = None
    total_calorie: int = 0
    photo: Optional[str] = None
    owner: Optional[str] = None
    id: Optional[int] = None

    @property
    def ingredient_names(self) -> List[str]:
        return [i.name for i in self.ingredients]
