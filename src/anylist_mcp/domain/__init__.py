"""Domain records exchanged with the list service."""

from __future__ import annotations

from .models import (
    Ingredient,
    Label,
    ListItem,
    MealPlanningEvent,
    Recipe,
    RecipeCollection,
    ShoppingList,
)

__all__ = [
    "Ingredient",
    "Label",
    "ListItem",
    "MealPlanningEvent",
    "Recipe",
    "RecipeCollection",
    "ShoppingList",
]
