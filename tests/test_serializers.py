from datetime import date, datetime
from types import SimpleNamespace

from anylist_mcp.api.serializers import (
    format_date_value,
    serialize_event,
    serialize_ingredient,
    serialize_item,
    serialize_label,
    serialize_list,
    serialize_list_with_items,
    serialize_recipe,
    serialize_recipe_collection,
    serialize_recipe_summary,
)
from anylist_mcp.domain import (
    Ingredient,
    Label,
    ListItem,
    MealPlanningEvent,
    Recipe,
    RecipeCollection,
    ShoppingList,
)


class TestFormatDateValue:
    def test_native_date(self):
        assert format_date_value(date(2024, 3, 5)) == "2024-03-05"

    def test_datetime(self):
        assert format_date_value(datetime(2024, 3, 5, 18, 30)) == "2024-03-05"

    def test_preformatted_string(self):
        assert format_date_value("2024-03-05") == "2024-03-05"

    def test_missing(self):
        assert format_date_value(None) == ""
        assert format_date_value("") == ""

    def test_unrecognized_string_passes_through(self):
        assert format_date_value("next tuesday") == "next tuesday"


class TestSerializeEvent:
    def test_full_event(self):
        event = MealPlanningEvent(
            identifier="E1",
            date=date(2024, 3, 15),
            title="Curry",
            details="Extra spicy",
            label_id="L1",
            label=Label(identifier="L1", name="Dinner", hex_color="#112233", sort_index=2),
            recipe_id="R1",
            recipe=Recipe(identifier="R1", name="Chicken Curry"),
        )

        assert serialize_event(event) == {
            "id": "E1",
            "date": "2024-03-15",
            "title": "Curry",
            "details": "Extra spicy",
            "labelId": "L1",
            "label": {"id": "L1", "name": "Dinner", "hexColor": "#112233", "sortIndex": 2},
            "recipeId": "R1",
            "recipe": {"id": "R1", "name": "Chicken Curry"},
        }

    def test_defaults_for_missing_fields(self):
        payload = serialize_event(MealPlanningEvent(identifier="E2", date="2024-04-01"))

        assert payload == {
            "id": "E2",
            "date": "2024-04-01",
            "title": "",
            "details": "",
            "labelId": None,
            "label": None,
            "recipeId": None,
            "recipe": None,
        }

    def test_tolerates_foreign_records(self):
        payload = serialize_event(SimpleNamespace(identifier="X", date=None))

        assert payload["id"] == "X"
        assert payload["date"] == ""
        assert payload["title"] == ""


class TestSerializeLabel:
    def test_sort_index_defaults_to_zero(self):
        payload = serialize_label(Label(identifier="L1", name="Lunch"))

        assert payload == {"id": "L1", "name": "Lunch", "hexColor": None, "sortIndex": 0}

    def test_keeps_zero_sort_index(self):
        assert serialize_label(Label(identifier="L1", sort_index=0))["sortIndex"] == 0


class TestSerializeRecipes:
    def test_recipe_summary(self):
        assert serialize_recipe_summary(Recipe(identifier="R9", name="Pie")) == {"id": "R9", "name": "Pie"}

    def test_full_recipe(self):
        recipe = Recipe(
            identifier="R1",
            name="Pancakes",
            note="Family favorite",
            source_name="Grandma",
            source_url="https://example.com/pancakes",
            prep_time=10,
            cook_time=20,
            servings="4",
            rating=5,
            ingredients=[Ingredient(raw_ingredient="2 cups flour", name="flour", quantity="2 cups")],
            preparation_steps=["Mix", "Fry"],
        )

        payload = serialize_recipe(recipe)

        assert payload["sourceName"] == "Grandma"
        assert payload["sourceUrl"] == "https://example.com/pancakes"
        assert payload["prepTime"] == 10
        assert payload["cookTime"] == 20
        assert payload["rating"] == 5
        assert payload["ingredients"] == [{"raw": "2 cups flour", "name": "flour", "quantity": "2 cups", "note": ""}]
        assert payload["preparationSteps"] == ["Mix", "Fry"]

    def test_empty_recipe_defaults(self):
        payload = serialize_recipe(Recipe(identifier="R2"))

        assert payload == {
            "id": "R2",
            "name": "",
            "note": "",
            "sourceName": "",
            "sourceUrl": "",
            "prepTime": None,
            "cookTime": None,
            "servings": "",
            "rating": None,
            "ingredients": [],
            "preparationSteps": [],
        }

    def test_ingredient(self):
        payload = serialize_ingredient(Ingredient(raw_ingredient="salt", name="salt", note="to taste"))

        assert payload == {"raw": "salt", "name": "salt", "quantity": "", "note": "to taste"}

    def test_collection_counts_recipes(self):
        payload = serialize_recipe_collection(RecipeCollection(identifier="C1", name="Fast", recipe_ids=["R1", "R2"]))

        assert payload == {"id": "C1", "name": "Fast", "recipeIds": ["R1", "R2"], "recipeCount": 2}

    def test_collection_without_recipes(self):
        payload = serialize_recipe_collection(RecipeCollection(identifier="C2"))

        assert payload["recipeIds"] == []
        assert payload["recipeCount"] == 0


class TestSerializeLists:
    def _groceries(self) -> ShoppingList:
        return ShoppingList(
            identifier="L1",
            name="Groceries",
            items=[
                ListItem(identifier="I1", name="Milk", quantity="1 gal"),
                ListItem(identifier="I2", name="Bread", checked=True),
            ],
        )

    def test_list_summary(self):
        assert serialize_list(self._groceries()) == {"id": "L1", "name": "Groceries", "itemCount": 2}

    def test_list_with_items_hides_checked_by_default(self):
        payload = serialize_list_with_items(self._groceries())

        assert [item["id"] for item in payload["items"]] == ["I1"]

    def test_list_with_items_can_include_checked(self):
        payload = serialize_list_with_items(self._groceries(), include_checked=True)

        assert [item["id"] for item in payload["items"]] == ["I1", "I2"]

    def test_item_defaults(self):
        assert serialize_item(ListItem(identifier="I3", name="Eggs")) == {
            "id": "I3",
            "name": "Eggs",
            "quantity": "",
            "details": "",
            "checked": False,
        }
