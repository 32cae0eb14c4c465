from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config import get_settings

_INITIALIZED = False


def configure_logging(level: Optional[str] = None, *, log_dir: Optional[Path] = None) -> None:
    """Configure application-wide logging.

    Console output goes to stderr; stdout carries the MCP stdio transport.
    A rotating file is added when a log directory is configured.
    """

    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings().logging
    resolved_level = getattr(logging, (level or settings.level).upper(), logging.INFO)
    directory = log_dir or settings.directory

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if directory is not None:
        directory.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(str(directory / "anylist-mcp.log"), maxBytes=1_000_000, backupCount=5))

    root = logging.getLogger()
    root.setLevel(resolved_level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured (level=%s, directory=%s)", resolved_level, directory)
