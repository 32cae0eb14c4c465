"""Configuration models and helpers."""

from __future__ import annotations

from .settings import DEFAULT_SESSION_BACKEND, AnyListSettings, AppSettings, LoggingSettings, get_settings

__all__ = ["DEFAULT_SESSION_BACKEND", "AnyListSettings", "AppSettings", "LoggingSettings", "get_settings"]
