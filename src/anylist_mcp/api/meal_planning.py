"""Meal planning calendar tools."""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, List, Mapping, Optional

from ..domain import MealPlanningEvent
from ..utils.dates import is_within_range, parse_date
from .registry import register_tool
from .responses import ToolResult, error_response, success_response
from .serializers import serialize_event
from .state import api_state
from .validators import validate_event_input, validate_event_update_input, validate_required_string

_UPDATABLE_FIELDS = (("title", "title"), ("details", "details"), ("labelId", "label_id"), ("recipeId", "recipe_id"))


def _find_event(events: Iterable[MealPlanningEvent], event_id: str) -> Optional[MealPlanningEvent]:
    for event in events:
        if event.identifier == event_id:
            return event
    return None


def filter_events_by_date(
    events: Iterable[MealPlanningEvent],
    start: Optional[date],
    end: Optional[date],
) -> List[MealPlanningEvent]:
    if start is None and end is None:
        return list(events)
    selected = []
    for event in events:
        day = event.calendar_day
        if day is None:
            continue
        if start is not None and end is not None:
            keep = is_within_range(day, start, end)
        elif start is not None:
            keep = day >= start
        else:
            keep = day <= end
        if keep:
            selected.append(event)
    return selected


@register_tool(
    "anylist_get_meal_planning_events",
    description="Get meal planning calendar events. Optionally filter by date range.",
    category="meal_planning",
    tags=("read",),
    failure="Failed to get events",
    parameters={
        "startDate": {
            "type": "string",
            "description": "Start date filter (YYYY-MM-DD). Events on or after this date.",
        },
        "endDate": {
            "type": "string",
            "description": "End date filter (YYYY-MM-DD). Events on or before this date.",
        },
    },
)
def get_meal_planning_events(params: Mapping[str, Any]) -> ToolResult:
    session = api_state.session()
    events = session.get_meal_planning_events()
    start = parse_date(params.get("startDate")) if params.get("startDate") else None
    end = parse_date(params.get("endDate")) if params.get("endDate") else None
    formatted = [serialize_event(event) for event in filter_events_by_date(events, start, end)]
    return success_response({"count": len(formatted), "events": formatted})


@register_tool(
    "anylist_create_meal_planning_event",
    description="Create a new meal planning calendar event. Use this to add meals to the calendar.",
    category="meal_planning",
    tags=("write",),
    failure="Failed to create event",
    parameters={
        "date": {"type": "string", "description": "Event date (YYYY-MM-DD)"},
        "title": {"type": "string", "description": "Event title (e.g., meal name)"},
        "details": {"type": "string", "description": "Additional notes or details"},
        "labelId": {
            "type": "string",
            "description": "ID of a calendar label to apply (e.g., Breakfast, Lunch, Dinner)",
        },
        "recipeId": {"type": "string", "description": "ID of a linked recipe"},
    },
    required=("date", "title"),
)
def create_meal_planning_event(params: Mapping[str, Any]) -> ToolResult:
    verdict = validate_event_input(params)
    if not verdict.valid:
        return error_response(verdict.error or "Invalid event")

    session = api_state.session()
    event = MealPlanningEvent(
        identifier=None,
        date=parse_date(params["date"]),
        title=params["title"],
        details=params.get("details") or "",
        label_id=params.get("labelId") or None,
        recipe_id=params.get("recipeId") or None,
    )
    saved = session.save_event(event)
    return success_response(
        {"success": True, "message": "Event created successfully", "event": serialize_event(saved)}
    )


@register_tool(
    "anylist_update_meal_planning_event",
    description="Update an existing meal planning calendar event.",
    category="meal_planning",
    tags=("write",),
    failure="Failed to update event",
    parameters={
        "eventId": {"type": "string", "description": "ID of the event to update"},
        "date": {"type": "string", "description": "New date (YYYY-MM-DD)"},
        "title": {"type": "string", "description": "Updated title"},
        "details": {"type": "string", "description": "Updated details"},
        "labelId": {"type": "string", "description": "Updated label ID"},
        "recipeId": {"type": "string", "description": "Updated recipe ID"},
    },
    required=("eventId",),
)
def update_meal_planning_event(params: Mapping[str, Any]) -> ToolResult:
    verdict = validate_event_update_input(params)
    if not verdict.valid:
        return error_response(verdict.error or "Invalid event update")

    session = api_state.session()
    event_id = params["eventId"]
    event = _find_event(session.get_meal_planning_events(), event_id)
    if event is None:
        return error_response(f"Event not found: {event_id}")

    # A falsy date leaves the day unchanged.
    if params.get("date"):
        event.date = parse_date(params["date"])
    # Other keys the caller sent are applied; an explicit "" clears the field.
    for key, attribute in _UPDATABLE_FIELDS:
        if key in params:
            setattr(event, attribute, params[key])

    saved = session.save_event(event)
    return success_response(
        {"success": True, "message": "Event updated successfully", "event": serialize_event(saved)}
    )


@register_tool(
    "anylist_delete_meal_planning_event",
    description="Delete a meal planning calendar event.",
    category="meal_planning",
    tags=("write",),
    failure="Failed to delete event",
    parameters={"eventId": {"type": "string", "description": "ID of the event to delete"}},
    required=("eventId",),
)
def delete_meal_planning_event(params: Mapping[str, Any]) -> ToolResult:
    verdict = validate_required_string(params.get("eventId"), "Event ID")
    if not verdict.valid:
        return error_response(verdict.error or "Invalid event ID")

    session = api_state.session()
    event_id = params["eventId"]
    event = _find_event(session.get_meal_planning_events(), event_id)
    if event is None:
        return error_response(f"Event not found: {event_id}")

    session.delete_event(event)
    return success_response({"success": True, "message": "Event deleted successfully", "eventId": event_id})
