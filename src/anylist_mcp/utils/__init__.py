"""Small pure helpers shared across layers."""

from __future__ import annotations

from .dates import add_days, is_within_range, parse_date, to_date_text, today

__all__ = ["add_days", "is_within_range", "parse_date", "to_date_text", "today"]
