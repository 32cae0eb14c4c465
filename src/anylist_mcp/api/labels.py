"""Meal planning calendar label tools."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from ..data import ListSession
from ..domain import Label
from .registry import register_tool
from .responses import ToolResult, error_response, success_response
from .serializers import serialize_label
from .state import api_state
from .validators import validate_label_input, validate_label_update_input, validate_required_string


def _load_labels(session: ListSession) -> List[Label]:
    # Labels arrive with the calendar events, there is no separate fetch.
    session.get_meal_planning_events()
    return list(session.meal_planning_labels or [])


def _find_label(labels: Iterable[Label], label_id: str) -> Optional[Label]:
    for label in labels:
        if label.identifier == label_id:
            return label
    return None


@register_tool(
    "anylist_get_labels",
    description="Get all meal planning calendar labels (e.g., Breakfast, Lunch, Dinner).",
    category="labels",
    tags=("read",),
    failure="Failed to get labels",
)
def get_labels(params: Mapping[str, Any]) -> ToolResult:
    formatted = [serialize_label(label) for label in _load_labels(api_state.session())]
    return success_response({"count": len(formatted), "labels": formatted})


@register_tool(
    "anylist_create_label",
    description="Create a new calendar label for categorizing meals.",
    category="labels",
    tags=("write",),
    failure="Failed to create label",
    parameters={
        "name": {"type": "string", "description": 'Label name (e.g., "Breakfast", "Dinner", "Snack")'},
        "hexColor": {"type": "string", "description": 'Hex color code (e.g., "#FF5733")'},
    },
    required=("name",),
)
def create_label(params: Mapping[str, Any]) -> ToolResult:
    verdict = validate_label_input(params)
    if not verdict.valid:
        return error_response(verdict.error or "Invalid label")

    session = api_state.session()
    label = Label(identifier=None, name=params["name"], hex_color=params.get("hexColor") or None)
    saved = session.save_label(label)
    return success_response(
        {"success": True, "message": "Label created successfully", "label": serialize_label(saved)}
    )


@register_tool(
    "anylist_update_label",
    description="Update an existing calendar label.",
    category="labels",
    tags=("write",),
    failure="Failed to update label",
    parameters={
        "labelId": {"type": "string", "description": "ID of the label to update"},
        "name": {"type": "string", "description": "Updated name"},
        "hexColor": {"type": "string", "description": 'Updated hex color (e.g., "#FF5733")'},
    },
    required=("labelId",),
)
def update_label(params: Mapping[str, Any]) -> ToolResult:
    verdict = validate_label_update_input(params)
    if not verdict.valid:
        return error_response(verdict.error or "Invalid label update")

    session = api_state.session()
    label_id = params["labelId"]
    label = _find_label(_load_labels(session), label_id)
    if label is None:
        return error_response(f"Label not found: {label_id}")

    if "name" in params:
        label.name = params["name"]
    if "hexColor" in params:
        label.hex_color = params["hexColor"]

    saved = session.save_label(label)
    return success_response(
        {"success": True, "message": "Label updated successfully", "label": serialize_label(saved)}
    )


@register_tool(
    "anylist_delete_label",
    description="Delete a calendar label.",
    category="labels",
    tags=("write",),
    failure="Failed to delete label",
    parameters={"labelId": {"type": "string", "description": "ID of the label to delete"}},
    required=("labelId",),
)
def delete_label(params: Mapping[str, Any]) -> ToolResult:
    verdict = validate_required_string(params.get("labelId"), "Label ID")
    if not verdict.valid:
        return error_response(verdict.error or "Invalid label ID")

    session = api_state.session()
    label_id = params["labelId"]
    label = _find_label(_load_labels(session), label_id)
    if label is None:
        return error_response(f"Label not found: {label_id}")

    session.delete_label(label)
    return success_response({"success": True, "message": "Label deleted successfully", "labelId": label_id})
