# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-05
# Description: recipes.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from catalog.Recipe import Ingredient, MeasurementType, Recipe


class IngredientIn(BaseModel):
    name: str = Field(..., min_length=1)
    quantity: Optional[int] = None
    measurement_type: MeasurementType = MeasurementType.GRAM


class RecipeCreateRequest(BaseModel):
    title: str = Field(..., min_length=1)
    ingredients: List[IngredientIn] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    tag: Optional[str] = None
    type: Optional[str] = None
    price: Optional[float] = None
    # Supplied by the caller; no nutrition arithmetic happens here
    total_calorie: int = Field(0, ge=0)
    photo: Optional[str] = None

    def to_recipe(self) -> Recipe:
        return Recipe(
            title=self.title,
            ingredients=[
                Ingredient(name=i.name, quantity=i.quantity, measurement_type=i.measurement_type)
                for i in self.ingredients
            ],
            instructions=list(self.instructions),
            tag=self.tag,
            type=self.type,
            price=self.price,
            total_calorie=self.total_calorie,
            photo=self.photo,
        )


class IngredientOut(BaseModel):
    name: str
    quantity: Optional[int] = None
    measurement_type: MeasurementType


class RecipeOut(BaseModel):
    id: int
    title: str
    ingredients: List[IngredientOut]
    instructions: List[str]
    tag: Optional[str] = None
    type: Optional[str] = None
    price: Optional[float] = None
    total_calorie: int = 0
    photo: Optional[str] = None
    owner: Optional[str] = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeOut":
        return cls(
            id=recipe.id,
            title=recipe.title,
            ingredients=[
                IngredientOut(name=i.name, quantity=i.quantity, measurement_type=i.measurement_type)
                for i in recipe.ingredients
            ],
            instructions=list(recipe.instructions),
            tag=recipe.tag,
            type=recipe.type,
            price=recipe.price,
            total_calorie=recipe.total_calorie,
            photo=recipe.photo,
            owner=recipe.owner,
        )


class DeleteRecipeResponse(BaseModel):
    recipe_id: int
    deleted: bool
