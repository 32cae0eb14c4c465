from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..utils.dates import parse_date, to_date_text

Number = Union[int, float, str]


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _text(value: Any) -> str:
    return str(value) if value else ""


def _attr(record: Any, name: str) -> Any:
    return getattr(record, name, None)


def format_date_value(value: Any) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        parsed = parse_date(value)
        return to_date_text(parsed) if parsed else value
    return to_date_text(value)


class LabelPayload(_Payload):
    id: Optional[str] = None
    name: str = ""
    hex_color: Optional[str] = None
    sort_index: Number = 0

    @classmethod
    def from_domain(cls, label: Any) -> "LabelPayload":
        sort_index = _attr(label, "sort_index")
        return cls(
            id=_attr(label, "identifier"),
            name=_text(_attr(label, "name")),
            hex_color=_attr(label, "hex_color") or None,
            sort_index=0 if sort_index is None else sort_index,
        )


class RecipeSummaryPayload(_Payload):
    id: Optional[str] = None
    name: str = ""

    @classmethod
    def from_domain(cls, recipe: Any) -> "RecipeSummaryPayload":
        return cls(id=_attr(recipe, "identifier"), name=_text(_attr(recipe, "name")))


class IngredientPayload(_Payload):
    raw: str = ""
    name: str = ""
    quantity: str = ""
    note: str = ""

    @classmethod
    def from_domain(cls, ingredient: Any) -> "IngredientPayload":
        return cls(
            raw=_text(_attr(ingredient, "raw_ingredient")),
            name=_text(_attr(ingredient, "name")),
            quantity=_text(_attr(ingredient, "quantity")),
            note=_text(_attr(ingredient, "note")),
        )


class RecipePayload(_Payload):
    id: Optional[str] = None
    name: str = ""
    note: str = ""
    source_name: str = ""
    source_url: str = ""
    prep_time: Optional[Number] = None
    cook_time: Optional[Number] = None
    servings: str = ""
    rating: Optional[Number] = None
    ingredients: List[IngredientPayload] = Field(default_factory=list)
    preparation_steps: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, recipe: Any) -> "RecipePayload":
        return cls(
            id=_attr(recipe, "identifier"),
            name=_text(_attr(recipe, "name")),
            note=_text(_attr(recipe, "note")),
            source_name=_text(_attr(recipe, "source_name")),
            source_url=_text(_attr(recipe, "source_url")),
            prep_time=_attr(recipe, "prep_time") or None,
            cook_time=_attr(recipe, "cook_time") or None,
            servings=_text(_attr(recipe, "servings")),
            rating=_attr(recipe, "rating") or None,
            ingredients=[IngredientPayload.from_domain(item) for item in _attr(recipe, "ingredients") or []],
            preparation_steps=[str(step) for step in _attr(recipe, "preparation_steps") or []],
        )


class RecipeCollectionPayload(_Payload):
    id: Optional[str] = None
    name: str = ""
    recipe_ids: List[str] = Field(default_factory=list)
    recipe_count: int = 0

    @classmethod
    def from_domain(cls, collection: Any) -> "RecipeCollectionPayload":
        recipe_ids = [str(value) for value in _attr(collection, "recipe_ids") or []]
        return cls(
            id=_attr(collection, "identifier"),
            name=_text(_attr(collection, "name")),
            recipe_ids=recipe_ids,
            recipe_count=len(recipe_ids),
        )


class EventPayload(_Payload):
    id: Optional[str] = None
    date: str = ""
    title: str = ""
    details: str = ""
    label_id: Optional[str] = None
    label: Optional[LabelPayload] = None
    recipe_id: Optional[str] = None
    recipe: Optional[RecipeSummaryPayload] = None

    @classmethod
    def from_domain(cls, event: Any) -> "EventPayload":
        label = _attr(event, "label")
        recipe = _attr(event, "recipe")
        return cls(
            id=_attr(event, "identifier"),
            date=format_date_value(_attr(event, "date")),
            title=_text(_attr(event, "title")),
            details=_text(_attr(event, "details")),
            label_id=_attr(event, "label_id") or None,
            label=LabelPayload.from_domain(label) if label else None,
            recipe_id=_attr(event, "recipe_id") or None,
            recipe=RecipeSummaryPayload.from_domain(recipe) if recipe else None,
        )


class ItemPayload(_Payload):
    id: Optional[str] = None
    name: str = ""
    quantity: str = ""
    details: str = ""
    checked: bool = False

    @classmethod
    def from_domain(cls, item: Any) -> "ItemPayload":
        return cls(
            id=_attr(item, "identifier"),
            name=_text(_attr(item, "name")),
            quantity=_text(_attr(item, "quantity")),
            details=_text(_attr(item, "details")),
            checked=bool(_attr(item, "checked")),
        )


class ListSummaryPayload(_Payload):
    id: Optional[str] = None
    name: str = ""
    item_count: int = 0

    @classmethod
    def from_domain(cls, shopping_list: Any) -> "ListSummaryPayload":
        return cls(
            id=_attr(shopping_list, "identifier"),
            name=_text(_attr(shopping_list, "name")),
            item_count=len(_attr(shopping_list, "items") or []),
        )


class ListWithItemsPayload(_Payload):
    id: Optional[str] = None
    name: str = ""
    items: List[ItemPayload] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, shopping_list: Any, *, include_checked: bool = False) -> "ListWithItemsPayload":
        items = list(_attr(shopping_list, "items") or [])
        if not include_checked:
            items = [item for item in items if not _attr(item, "checked")]
        return cls(
            id=_attr(shopping_list, "identifier"),
            name=_text(_attr(shopping_list, "name")),
            items=[ItemPayload.from_domain(item) for item in items],
        )
