"""Narrow interface to the list service.

Tool handlers only ever talk to a :class:`ListSession`. The bundled
:class:`~anylist_mcp.data.local_store.LocalListSession` implements it over a
local document; any other backend can be plugged in through a factory that
accepts :class:`Credentials`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Protocol, runtime_checkable

from ..domain import Label, ListItem, MealPlanningEvent, Recipe, RecipeCollection, ShoppingList


class SessionError(RuntimeError):
    """Raised when the list service rejects or fails an operation."""


class AuthenticationError(SessionError):
    """Raised when login is attempted without usable credentials."""


@dataclass(frozen=True)
class Credentials:
    credentials_file: Path
    email: Optional[str] = None
    password: Optional[str] = None

    @property
    def has_explicit_values(self) -> bool:
        return bool(self.email and self.password)


@runtime_checkable
class ListSession(Protocol):
    meal_planning_labels: List[Label]

    def login(self, realtime: bool = False) -> None: ...

    def teardown(self) -> None: ...

    def get_meal_planning_events(self) -> List[MealPlanningEvent]: ...

    def save_event(self, event: MealPlanningEvent) -> MealPlanningEvent: ...

    def delete_event(self, event: MealPlanningEvent) -> None: ...

    def save_label(self, label: Label) -> Label: ...

    def delete_label(self, label: Label) -> None: ...

    def get_recipes(self) -> List[Recipe]: ...

    def get_recipe_collections(self) -> List[RecipeCollection]: ...

    def get_lists(self) -> List[ShoppingList]: ...

    def add_item(self, shopping_list: ShoppingList, item: ListItem) -> ListItem: ...

    def remove_item(self, shopping_list: ShoppingList, item: ListItem) -> None: ...


SessionFactory = Callable[[Credentials], ListSession]
