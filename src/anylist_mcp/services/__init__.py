"""Session access and process-level services."""

from __future__ import annotations

from .client import ClientAccessor, CredentialsNotConfiguredError, SessionBackendError, load_session_factory

__all__ = ["ClientAccessor", "CredentialsNotConfiguredError", "SessionBackendError", "load_session_factory"]
