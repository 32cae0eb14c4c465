"""Recipe and recipe collection tools (read only)."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from ..domain import Recipe
from .registry import register_tool
from .responses import ToolResult, error_response, success_response
from .serializers import serialize_recipe, serialize_recipe_collection
from .state import api_state


def search_recipes(recipes: Iterable[Recipe], term: str) -> List[Recipe]:
    needle = term.lower()
    return [recipe for recipe in recipes if recipe.name and needle in recipe.name.lower()]


@register_tool(
    "anylist_get_recipes",
    description="Get all recipes. Optionally filter by name search or collection.",
    category="recipes",
    tags=("read",),
    failure="Failed to get recipes",
    parameters={
        "search": {
            "type": "string",
            "description": "Search term to filter recipes by name (case-insensitive)",
        },
        "collectionId": {"type": "string", "description": "Filter by recipe collection ID"},
    },
)
def get_recipes(params: Mapping[str, Any]) -> ToolResult:
    session = api_state.session()
    recipes = session.get_recipes()

    search = params.get("search")
    if search:
        recipes = search_recipes(recipes, str(search))

    collection_id = params.get("collectionId")
    if collection_id:
        collection = next(
            (item for item in session.get_recipe_collections() if item.identifier == collection_id),
            None,
        )
        if collection is None:
            return error_response(f"Collection not found: {collection_id}")
        members = set(collection.recipe_ids or [])
        recipes = [recipe for recipe in recipes if recipe.identifier in members]

    formatted = [serialize_recipe(recipe) for recipe in recipes]
    return success_response({"count": len(formatted), "recipes": formatted})


@register_tool(
    "anylist_get_recipe_collections",
    description="Get all recipe collections.",
    category="recipes",
    tags=("read",),
    failure="Failed to get collections",
)
def get_recipe_collections(params: Mapping[str, Any]) -> ToolResult:
    collections = api_state.session().get_recipe_collections()
    formatted = [serialize_recipe_collection(collection) for collection in collections]
    return success_response({"count": len(formatted), "collections": formatted})
