from __future__ import annotations

from typing import Any, Dict

from .models import (
    EventPayload,
    IngredientPayload,
    ItemPayload,
    LabelPayload,
    ListSummaryPayload,
    ListWithItemsPayload,
    RecipeCollectionPayload,
    RecipePayload,
    RecipeSummaryPayload,
    format_date_value,
)


def serialize_event(event: Any) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(by_alias=True)


def serialize_label(label: Any) -> Dict[str, Any]:
    return LabelPayload.from_domain(label).model_dump(by_alias=True)


def serialize_recipe_summary(recipe: Any) -> Dict[str, Any]:
    return RecipeSummaryPayload.from_domain(recipe).model_dump(by_alias=True)


def serialize_recipe(recipe: Any) -> Dict[str, Any]:
    return RecipePayload.from_domain(recipe).model_dump(by_alias=True)


def serialize_ingredient(ingredient: Any) -> Dict[str, Any]:
    return IngredientPayload.from_domain(ingredient).model_dump(by_alias=True)


def serialize_recipe_collection(collection: Any) -> Dict[str, Any]:
    return RecipeCollectionPayload.from_domain(collection).model_dump(by_alias=True)


def serialize_list(shopping_list: Any) -> Dict[str, Any]:
    return ListSummaryPayload.from_domain(shopping_list).model_dump(by_alias=True)


def serialize_list_with_items(shopping_list: Any, include_checked: bool = False) -> Dict[str, Any]:
    payload = ListWithItemsPayload.from_domain(shopping_list, include_checked=include_checked)
    return payload.model_dump(by_alias=True)


def serialize_item(item: Any) -> Dict[str, Any]:
    return ItemPayload.from_domain(item).model_dump(by_alias=True)


__all__ = [
    "format_date_value",
    "serialize_event",
    "serialize_ingredient",
    "serialize_item",
    "serialize_label",
    "serialize_list",
    "serialize_list_with_items",
    "serialize_recipe",
    "serialize_recipe_collection",
    "serialize_recipe_summary",
]
