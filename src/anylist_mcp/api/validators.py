"""Input checks for tool arguments.

Every validator returns a :class:`Verdict`. Composite validators stop at the
first failing check so the message always names a single field.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..utils.dates import parse_date

_HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")


@dataclass(frozen=True)
class Verdict:
    valid: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "Verdict":
        return cls(valid=True)

    @classmethod
    def fail(cls, message: str) -> "Verdict":
        return cls(valid=False, error=message)


def validate_date(value: Any) -> Verdict:
    if not value:
        return Verdict.fail("Date is required")
    if not isinstance(value, str):
        return Verdict.fail("Date must be a string")
    if parse_date(value) is None:
        return Verdict.fail("Invalid date format. Use YYYY-MM-DD")
    return Verdict.ok()


def validate_hex_color(value: Any) -> Verdict:
    if not value:
        return Verdict.ok()
    if not isinstance(value, str):
        return Verdict.fail("Hex color must be a string")
    if not _HEX_COLOR.fullmatch(value):
        return Verdict.fail("Invalid hex color. Use #RRGGBB format")
    return Verdict.ok()


def validate_required_string(value: Any, field_name: str) -> Verdict:
    if not value:
        return Verdict.fail(f"{field_name} is required")
    if not isinstance(value, str):
        return Verdict.fail(f"{field_name} must be a string")
    if not value.strip():
        return Verdict.fail(f"{field_name} cannot be empty")
    return Verdict.ok()


def validate_event_input(params: Mapping[str, Any]) -> Verdict:
    verdict = validate_date(params.get("date"))
    if not verdict.valid:
        return verdict
    return validate_required_string(params.get("title"), "Title")


def validate_event_update_input(params: Mapping[str, Any]) -> Verdict:
    verdict = validate_required_string(params.get("eventId"), "Event ID")
    if not verdict.valid:
        return verdict
    if params.get("date"):
        return validate_date(params["date"])
    return Verdict.ok()


def validate_label_input(params: Mapping[str, Any]) -> Verdict:
    verdict = validate_required_string(params.get("name"), "Name")
    if not verdict.valid:
        return verdict
    return validate_hex_color(params.get("hexColor"))


def validate_label_update_input(params: Mapping[str, Any]) -> Verdict:
    verdict = validate_required_string(params.get("labelId"), "Label ID")
    if not verdict.valid:
        return verdict
    return validate_hex_color(params.get("hexColor"))


def validate_list_item_input(params: Mapping[str, Any]) -> Verdict:
    verdict = validate_required_string(params.get("listId"), "List ID")
    if not verdict.valid:
        return verdict
    return validate_required_string(params.get("name"), "Item name")
