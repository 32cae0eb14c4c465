from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List

import pytest

from anylist_mcp.api import api_state
from anylist_mcp.config import AnyListSettings
from anylist_mcp.domain import (
    Ingredient,
    Label,
    ListItem,
    MealPlanningEvent,
    Recipe,
    RecipeCollection,
    ShoppingList,
)
from anylist_mcp.services import ClientAccessor


class FakeSession:
    """In-memory stand-in for the list service that records every call."""

    def __init__(
        self,
        *,
        events: Iterable[MealPlanningEvent] = (),
        labels: Iterable[Label] = (),
        recipes: Iterable[Recipe] = (),
        collections: Iterable[RecipeCollection] = (),
        lists: Iterable[ShoppingList] = (),
    ) -> None:
        self.events: List[MealPlanningEvent] = list(events)
        self.labels: List[Label] = list(labels)
        self.recipes: List[Recipe] = list(recipes)
        self.collections: List[RecipeCollection] = list(collections)
        self.lists: List[ShoppingList] = list(lists)
        self.meal_planning_labels: List[Label] = []
        self.calls: List[str] = []
        self.failures: Dict[str, Exception] = {}
        self.logins = 0
        self.torn_down = False
        self._counter = 0

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name in self.failures:
            raise self.failures[name]

    def _next_id(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}-new-{self._counter}"

    def login(self, realtime: bool = False) -> None:
        self._record("login")
        self.logins += 1

    def teardown(self) -> None:
        self._record("teardown")
        self.torn_down = True

    def get_meal_planning_events(self) -> List[MealPlanningEvent]:
        self._record("get_meal_planning_events")
        self.meal_planning_labels = list(self.labels)
        return list(self.events)

    def save_event(self, event: MealPlanningEvent) -> MealPlanningEvent:
        self._record("save_event")
        if event.identifier is None:
            event.identifier = self._next_id("event")
            self.events.append(event)
        return event

    def delete_event(self, event: MealPlanningEvent) -> None:
        self._record("delete_event")
        self.events = [existing for existing in self.events if existing.identifier != event.identifier]

    def save_label(self, label: Label) -> Label:
        self._record("save_label")
        if label.identifier is None:
            label.identifier = self._next_id("label")
            label.sort_index = len(self.labels)
            self.labels.append(label)
        return label

    def delete_label(self, label: Label) -> None:
        self._record("delete_label")
        self.labels = [existing for existing in self.labels if existing.identifier != label.identifier]

    def get_recipes(self) -> List[Recipe]:
        self._record("get_recipes")
        return list(self.recipes)

    def get_recipe_collections(self) -> List[RecipeCollection]:
        self._record("get_recipe_collections")
        return list(self.collections)

    def get_lists(self) -> List[ShoppingList]:
        self._record("get_lists")
        return list(self.lists)

    def add_item(self, shopping_list: ShoppingList, item: ListItem) -> ListItem:
        self._record("add_item")
        item.identifier = self._next_id("item")
        shopping_list.items.append(item)
        return item

    def remove_item(self, shopping_list: ShoppingList, item: ListItem) -> None:
        self._record("remove_item")
        shopping_list.items = [entry for entry in shopping_list.items if entry.identifier != item.identifier]


@pytest.fixture
def anylist_settings(tmp_path: Path) -> AnyListSettings:
    return AnyListSettings(
        email="cook@example.com",
        password="hunter2",
        credentials_file=tmp_path / "credentials.json",
        data_file=tmp_path / "anylist.json",
    )


@pytest.fixture
def sample_labels() -> List[Label]:
    return [
        Label(identifier="L-breakfast", name="Breakfast", hex_color="#FFAA00", sort_index=0),
        Label(identifier="L-dinner", name="Dinner", hex_color="#3366FF", sort_index=1),
    ]


@pytest.fixture
def sample_recipes() -> List[Recipe]:
    return [
        Recipe(
            identifier="R1",
            name="Chicken Curry",
            servings="4",
            prep_time=15,
            cook_time=30,
            ingredients=[Ingredient(raw_ingredient="1 lb chicken", name="chicken", quantity="1 lb")],
            preparation_steps=["Brown the chicken.", "Add the sauce."],
        ),
        Recipe(identifier="R2", name="Beef Tacos"),
        Recipe(identifier="R3", name="curry noodles"),
        Recipe(identifier="R4", name=""),
    ]


@pytest.fixture
def fake_session(sample_labels, sample_recipes) -> FakeSession:
    return FakeSession(
        events=[
            MealPlanningEvent(identifier="E0", date=date(2024, 2, 28), title="Soup"),
            MealPlanningEvent(
                identifier="E1",
                date=date(2024, 3, 15),
                title="Curry night",
                details="Double the rice",
                label_id="L-dinner",
                label=sample_labels[1],
                recipe_id="R1",
                recipe=sample_recipes[0],
            ),
            MealPlanningEvent(identifier="E2", date="2024-04-01", title="Tacos"),
        ],
        labels=sample_labels,
        recipes=sample_recipes,
        collections=[
            RecipeCollection(identifier="C1", name="Weeknight", recipe_ids=["R1", "R2"]),
            RecipeCollection(identifier="C2", name="Empty"),
        ],
        lists=[
            ShoppingList(
                identifier="L1",
                name="Groceries",
                items=[
                    ListItem(identifier="I1", name="Eggs", quantity="12"),
                    ListItem(identifier="I2", name="Bread", checked=True),
                ],
            ),
            ShoppingList(identifier="L2", name="Hardware"),
        ],
    )


@pytest.fixture
def installed_session(fake_session: FakeSession, anylist_settings: AnyListSettings):
    previous = api_state.accessor
    api_state.accessor = ClientAccessor(anylist_settings, session_factory=lambda credentials: fake_session)
    try:
        yield fake_session
    finally:
        api_state.accessor = previous
