from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import orjson

from .session import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredCredentials:
    email: str
    token: str


class CredentialStore:
    """Credential file holding the account email and a session token."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> StoredCredentials:
        if not self.exists():
            raise AuthenticationError(f"No stored credentials at {self._path}")
        try:
            data = orjson.loads(self._path.read_bytes() or b"{}")
        except orjson.JSONDecodeError as exc:
            raise AuthenticationError(f"Credential file {self._path} is not valid JSON") from exc
        email = data.get("email") if isinstance(data, dict) else None
        token = data.get("token") if isinstance(data, dict) else None
        if not email or not token:
            raise AuthenticationError(f"Credential file {self._path} is missing email or token")
        return StoredCredentials(email=str(email), token=str(token))

    def save(self, email: str, token: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = orjson.dumps({"email": email, "token": token}, option=orjson.OPT_INDENT_2)
        self._path.write_bytes(payload + b"\n")
        os.chmod(self._path, 0o600)
        logger.debug("Stored credentials for %s at %s", email, self._path)
