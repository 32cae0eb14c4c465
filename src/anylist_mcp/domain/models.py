from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from ..utils.dates import parse_date, to_date_text

DateValue = Union[date, str, None]


def _optional_str(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


@dataclass(slots=True)
class Label:
    identifier: Optional[str]
    name: str = ""
    hex_color: Optional[str] = None
    sort_index: Optional[int] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Label":
        return cls(
            identifier=_optional_str(record.get("identifier")),
            name=record.get("name") or "",
            hex_color=record.get("hex_color"),
            sort_index=record.get("sort_index"),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "hex_color": self.hex_color,
            "sort_index": self.sort_index,
        }


@dataclass(slots=True)
class Ingredient:
    raw_ingredient: str = ""
    name: str = ""
    quantity: str = ""
    note: str = ""

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Ingredient":
        return cls(
            raw_ingredient=record.get("raw_ingredient") or "",
            name=record.get("name") or "",
            quantity=record.get("quantity") or "",
            note=record.get("note") or "",
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "raw_ingredient": self.raw_ingredient,
            "name": self.name,
            "quantity": self.quantity,
            "note": self.note,
        }


@dataclass(slots=True)
class Recipe:
    identifier: Optional[str]
    name: str = ""
    note: str = ""
    source_name: str = ""
    source_url: str = ""
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    servings: str = ""
    rating: Optional[int] = None
    ingredients: List[Ingredient] = field(default_factory=list)
    preparation_steps: List[str] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Recipe":
        return cls(
            identifier=_optional_str(record.get("identifier")),
            name=record.get("name") or "",
            note=record.get("note") or "",
            source_name=record.get("source_name") or "",
            source_url=record.get("source_url") or "",
            prep_time=record.get("prep_time"),
            cook_time=record.get("cook_time"),
            servings=record.get("servings") or "",
            rating=record.get("rating"),
            ingredients=[Ingredient.from_record(item) for item in record.get("ingredients") or []],
            preparation_steps=list(record.get("preparation_steps") or []),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "note": self.note,
            "source_name": self.source_name,
            "source_url": self.source_url,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "servings": self.servings,
            "rating": self.rating,
            "ingredients": [ingredient.to_record() for ingredient in self.ingredients],
            "preparation_steps": list(self.preparation_steps),
        }


@dataclass(slots=True)
class RecipeCollection:
    identifier: Optional[str]
    name: str = ""
    recipe_ids: List[str] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "RecipeCollection":
        return cls(
            identifier=_optional_str(record.get("identifier")),
            name=record.get("name") or "",
            recipe_ids=[str(value) for value in record.get("recipe_ids") or []],
        )

    def to_record(self) -> Dict[str, Any]:
        return {"identifier": self.identifier, "name": self.name, "recipe_ids": list(self.recipe_ids)}


@dataclass(slots=True)
class ListItem:
    identifier: Optional[str]
    name: str = ""
    quantity: str = ""
    details: str = ""
    checked: bool = False

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "ListItem":
        return cls(
            identifier=_optional_str(record.get("identifier")),
            name=record.get("name") or "",
            quantity=record.get("quantity") or "",
            details=record.get("details") or "",
            checked=bool(record.get("checked")),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "quantity": self.quantity,
            "details": self.details,
            "checked": self.checked,
        }


@dataclass(slots=True)
class ShoppingList:
    identifier: Optional[str]
    name: str = ""
    items: List[ListItem] = field(default_factory=list)

    def get_item_by_id(self, identifier: str) -> Optional[ListItem]:
        for item in self.items:
            if item.identifier == identifier:
                return item
        return None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "ShoppingList":
        return cls(
            identifier=_optional_str(record.get("identifier")),
            name=record.get("name") or "",
            items=[ListItem.from_record(item) for item in record.get("items") or []],
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "items": [item.to_record() for item in self.items],
        }


@dataclass(slots=True)
class MealPlanningEvent:
    """A dated entry on the meal planning calendar.

    ``label`` and ``recipe`` are snapshots resolved by the session when it
    loads events; writes only look at ``label_id`` and ``recipe_id``.
    """

    identifier: Optional[str]
    date: DateValue = None
    title: str = ""
    details: str = ""
    label_id: Optional[str] = None
    label: Optional[Label] = None
    recipe_id: Optional[str] = None
    recipe: Optional[Recipe] = None

    @property
    def calendar_day(self) -> Optional[date]:
        if isinstance(self.date, datetime):
            return self.date.date()
        if isinstance(self.date, date):
            return self.date
        return parse_date(self.date)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "MealPlanningEvent":
        return cls(
            identifier=_optional_str(record.get("identifier")),
            date=parse_date(record.get("date")) or record.get("date"),
            title=record.get("title") or "",
            details=record.get("details") or "",
            label_id=record.get("label_id"),
            recipe_id=record.get("recipe_id"),
        )

    def to_record(self) -> Dict[str, Any]:
        stored_date = to_date_text(self.date) if isinstance(self.date, date) else self.date
        return {
            "identifier": self.identifier,
            "date": stored_date,
            "title": self.title,
            "details": self.details,
            "label_id": self.label_id,
            "recipe_id": self.recipe_id,
        }
