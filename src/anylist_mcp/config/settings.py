from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "anylist-mcp"
APP_AUTHOR = "anylist-mcp"
DEFAULT_CREDENTIALS_FILE = Path.home() / ".mcp-anylist-credentials"
DEFAULT_DATA_FILE = Path(user_data_dir(APP_NAME, APP_AUTHOR)) / "anylist.json"
DEFAULT_SESSION_BACKEND = "anylist_mcp.data.local_store:LocalListSession"


@dataclass(frozen=True)
class AnyListSettings:
    email: Optional[str]
    password: Optional[str]
    credentials_file: Path
    data_file: Path
    session_backend: str = DEFAULT_SESSION_BACKEND

    @property
    def has_override_credentials(self) -> bool:
        return bool(self.email and self.password)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.email:
            missing.append("ANYLIST_EMAIL")
        if not self.password:
            missing.append("ANYLIST_PASSWORD")
        return missing


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Optional[Path]


@dataclass(frozen=True)
class AppSettings:
    anylist: AnyListSettings
    logging: LoggingSettings


def _path_from_env(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    return Path(raw).expanduser() if raw else default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    anylist = AnyListSettings(
        email=os.getenv("ANYLIST_EMAIL"),
        password=os.getenv("ANYLIST_PASSWORD"),
        credentials_file=_path_from_env("ANYLIST_CREDENTIALS_FILE", DEFAULT_CREDENTIALS_FILE),
        data_file=_path_from_env("ANYLIST_DATA_FILE", DEFAULT_DATA_FILE),
        session_backend=os.getenv("ANYLIST_SESSION_BACKEND", DEFAULT_SESSION_BACKEND),
    )

    log_dir = os.getenv("ANYLIST_MCP_LOG_DIR")
    logging_settings = LoggingSettings(
        level=os.getenv("ANYLIST_MCP_LOG_LEVEL", "INFO").upper(),
        directory=Path(log_dir).expanduser() if log_dir else None,
    )

    return AppSettings(anylist=anylist, logging=logging_settings)
