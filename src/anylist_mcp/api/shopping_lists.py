"""Shopping list tools."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from ..domain import ListItem, ShoppingList
from .registry import register_tool
from .responses import ToolResult, error_response, success_response
from .serializers import serialize_item, serialize_list, serialize_list_with_items
from .state import api_state
from .validators import validate_list_item_input, validate_required_string


def _find_list(lists: Iterable[ShoppingList], list_id: str) -> Optional[ShoppingList]:
    for shopping_list in lists:
        if shopping_list.identifier == list_id:
            return shopping_list
    return None


@register_tool(
    "anylist_get_lists",
    description="Get all shopping lists.",
    category="shopping_lists",
    tags=("read",),
    failure="Failed to get lists",
)
def get_lists(params: Mapping[str, Any]) -> ToolResult:
    formatted = [serialize_list(shopping_list) for shopping_list in api_state.session().get_lists()]
    return success_response({"count": len(formatted), "lists": formatted})


@register_tool(
    "anylist_get_list_items",
    description="Get items from a specific shopping list.",
    category="shopping_lists",
    tags=("read",),
    failure="Failed to get list items",
    parameters={
        "listId": {"type": "string", "description": "ID of the shopping list"},
        "includeChecked": {"type": "boolean", "description": "Include checked-off items (default: false)"},
    },
    required=("listId",),
)
def get_list_items(params: Mapping[str, Any]) -> ToolResult:
    verdict = validate_required_string(params.get("listId"), "List ID")
    if not verdict.valid:
        return error_response(verdict.error or "Invalid list ID")

    list_id = params["listId"]
    shopping_list = _find_list(api_state.session().get_lists(), list_id)
    if shopping_list is None:
        return error_response(f"List not found: {list_id}")

    include_checked = params.get("includeChecked") is True
    return success_response(serialize_list_with_items(shopping_list, include_checked))


@register_tool(
    "anylist_add_list_item",
    description="Add an item to a shopping list.",
    category="shopping_lists",
    tags=("write",),
    failure="Failed to add item",
    parameters={
        "listId": {"type": "string", "description": "ID of the target shopping list"},
        "name": {"type": "string", "description": "Item name"},
        "quantity": {"type": "string", "description": 'Quantity (e.g., "2 lbs", "1 dozen")'},
        "details": {"type": "string", "description": "Additional notes"},
    },
    required=("listId", "name"),
)
def add_list_item(params: Mapping[str, Any]) -> ToolResult:
    verdict = validate_list_item_input(params)
    if not verdict.valid:
        return error_response(verdict.error or "Invalid list item")

    session = api_state.session()
    list_id = params["listId"]
    shopping_list = _find_list(session.get_lists(), list_id)
    if shopping_list is None:
        return error_response(f"List not found: {list_id}")

    item = ListItem(
        identifier=None,
        name=params["name"],
        quantity=params.get("quantity") or "",
        details=params.get("details") or "",
    )
    added = session.add_item(shopping_list, item)
    return success_response({"success": True, "message": "Item added successfully", "item": serialize_item(added)})


@register_tool(
    "anylist_remove_list_item",
    description="Remove an item from a shopping list.",
    category="shopping_lists",
    tags=("write",),
    failure="Failed to remove item",
    parameters={
        "listId": {"type": "string", "description": "ID of the shopping list"},
        "itemId": {"type": "string", "description": "ID of the item to remove"},
    },
    required=("listId", "itemId"),
)
def remove_list_item(params: Mapping[str, Any]) -> ToolResult:
    for key, label in (("listId", "List ID"), ("itemId", "Item ID")):
        verdict = validate_required_string(params.get(key), label)
        if not verdict.valid:
            return error_response(verdict.error or f"Invalid {label}")

    session = api_state.session()
    list_id = params["listId"]
    item_id = params["itemId"]
    shopping_list = _find_list(session.get_lists(), list_id)
    if shopping_list is None:
        return error_response(f"List not found: {list_id}")

    item = shopping_list.get_item_by_id(item_id)
    if item is None:
        return error_response(f"Item not found: {item_id}")

    session.remove_item(shopping_list, item)
    return success_response({"success": True, "message": "Item removed successfully", "itemId": item_id})
