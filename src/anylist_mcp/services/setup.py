"""Interactive credential setup (``anylist-mcp setup``)."""

from __future__ import annotations

import getpass
import logging
import sys
from typing import Callable, Optional

import orjson

from ..config import DEFAULT_SESSION_BACKEND, AnyListSettings, get_settings
from ..data import Credentials, SessionFactory
from .client import load_session_factory

logger = logging.getLogger(__name__)

HOST_CONFIG = {"mcpServers": {"anylist": {"command": "anylist-mcp", "args": ["serve"]}}}


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def run_setup(
    settings: Optional[AnyListSettings] = None,
    *,
    session_factory: Optional[SessionFactory] = None,
    prompt: Callable[[str], str] = input,
    secret_prompt: Callable[[str], str] = getpass.getpass,
) -> None:
    settings = settings or get_settings().anylist
    offline = settings.session_backend == DEFAULT_SESSION_BACKEND
    print()
    print("anylist-mcp setup")
    print("This stores your AnyList credentials locally for the MCP server.")
    if offline:
        print(f"Using the local offline store at {settings.data_file}.")
        print("Nothing is sent to AnyList; set ANYLIST_SESSION_BACKEND to use a real account.")
    print()

    email = prompt("AnyList Email: ").strip()
    if not email:
        _fail("Error: Email is required.")
    password = secret_prompt("AnyList Password: ")
    if not password:
        _fail("Error: Password is required.")

    print()
    if offline:
        print("Saving credentials for the local store (the password is not checked)...")
    else:
        print(f"Verifying credentials with {settings.session_backend}...")
    try:
        factory = session_factory or load_session_factory(settings.session_backend)
        session = factory(
            Credentials(credentials_file=settings.credentials_file, email=email, password=password)
        )
        session.login(realtime=False)
        session.teardown()
    except Exception as exc:  # noqa: BLE001
        logger.debug("Setup login failed", exc_info=True)
        _fail(f"Login failed: {exc}\nPlease check your email and password and try again.")

    print()
    print("Credentials stored." if offline else "Credentials verified.")
    print(f"Credentials saved to: {settings.credentials_file}")
    print()
    print("Add this to your MCP host configuration:")
    print(orjson.dumps(HOST_CONFIG, option=orjson.OPT_INDENT_2).decode())
    print()
