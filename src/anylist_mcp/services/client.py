from __future__ import annotations

import logging
import threading
from importlib import import_module
from typing import Optional

from ..config import AnyListSettings, get_settings
from ..data import CredentialStore, Credentials, ListSession, SessionFactory

logger = logging.getLogger(__name__)


class CredentialsNotConfiguredError(RuntimeError):
    """Raised when neither stored credentials nor an override pair is available."""


class SessionBackendError(RuntimeError):
    """Raised when the configured session backend cannot be imported."""


def load_session_factory(path: str) -> SessionFactory:
    """Resolve a ``package.module:callable`` path to a session factory."""

    module_name, _, attribute = path.partition(":")
    if not module_name or not attribute:
        raise SessionBackendError(f"Session backend '{path}' must look like 'package.module:factory'.")
    try:
        module = import_module(module_name)
    except ImportError as exc:
        raise SessionBackendError(f"Session backend module '{module_name}' could not be imported.") from exc
    factory = getattr(module, attribute, None)
    if not callable(factory):
        raise SessionBackendError(f"Session backend '{path}' is not callable.")
    return factory


class ClientAccessor:
    """Owns the one shared, logged-in session for the process.

    The first :meth:`get_client` call logs in; concurrent first calls wait on
    the lock and receive the same session. :meth:`disconnect` resets
    everything so the next call starts over.
    """

    def __init__(
        self,
        settings: Optional[AnyListSettings] = None,
        *,
        session_factory: Optional[SessionFactory] = None,
    ) -> None:
        self._settings = settings
        self._session_factory = session_factory
        self._client: Optional[ListSession] = None
        self._lock = threading.Lock()

    @property
    def settings(self) -> AnyListSettings:
        return self._settings or get_settings().anylist

    def resolve_credentials(self) -> Credentials:
        settings = self.settings
        has_stored = CredentialStore(settings.credentials_file).exists()
        if not has_stored and not settings.has_override_credentials:
            logger.warning(
                "No credential file at %s and %s not set",
                settings.credentials_file,
                " / ".join(settings.missing_env_vars),
            )
            raise CredentialsNotConfiguredError(
                'AnyList credentials not configured. Run "anylist-mcp setup" to authenticate.'
            )
        if settings.has_override_credentials:
            return Credentials(
                credentials_file=settings.credentials_file,
                email=settings.email,
                password=settings.password,
            )
        return Credentials(credentials_file=settings.credentials_file)

    def _factory(self) -> SessionFactory:
        if self._session_factory is None:
            self._session_factory = load_session_factory(self.settings.session_backend)
        return self._session_factory

    def _connect(self) -> ListSession:
        credentials = self.resolve_credentials()
        session = self._factory()(credentials)
        session.login(realtime=False)
        logger.info("Connected to list service (credentials file: %s)", credentials.credentials_file)
        return session

    def get_client(self) -> ListSession:
        client = self._client
        if client is not None:
            return client
        with self._lock:
            if self._client is None:
                self._client = self._connect()
            return self._client

    def disconnect(self) -> None:
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.teardown()
            logger.info("Disconnected from list service")

    def is_connected(self) -> bool:
        return self._client is not None
