"""Access to the list service: session interface, credentials and backends."""

from __future__ import annotations

from .credentials import CredentialStore, StoredCredentials
from .session import AuthenticationError, Credentials, ListSession, SessionError, SessionFactory

__all__ = [
    "AuthenticationError",
    "CredentialStore",
    "Credentials",
    "ListSession",
    "SessionError",
    "SessionFactory",
    "StoredCredentials",
]
