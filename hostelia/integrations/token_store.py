"""
Bearer token store.

Holds the token forwarded to the backend and the cached user object.
A store is either per-request (seeded from the incoming Authorization
header) or process-wide, optionally persisted to a JSON file.
"""

import json
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from hostelia.core.logging import get_logger

logger = get_logger(__name__)


class TokenStore:
    """In-memory token and user cache with optional JSON file persistence."""

    def __init__(
        self,
        token: Optional[str] = None,
        user: Optional[Dict[str, Any]] = None,
        path: Optional[Union[str, Path]] = None,
    ):
        self._lock = threading.Lock()
        self._path = Path(path) if path else None
        self._token = token
        self._user = user
        if self._path and token is None:
            self._load()

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        return self._user

    def set(self, token: str, user: Optional[Dict[str, Any]] = None) -> None:
        with self._lock:
            self._token = token
            self._user = user
            self._save()

    def clear(self) -> None:
        with self._lock:
            self._token = None
            self._user = None
            self._save()

    def clear_if_current(self, token: Optional[str]) -> bool:
        """
        Clear the store only if ``token`` is still the stored token.

        A token replaced by a fresh login after the failing request was sent
        is left alone. Returns True when the store was cleared.
        """
        with self._lock:
            if token is None or token != self._token:
                return False
            self._token = None
            self._user = None
            self._save()
        logger.info("Cleared rejected bearer token")
        return True

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning(f"Ignoring unreadable token store {self._path}: {exc}")
            return
        self._token = data.get("token")
        self._user = data.get("user")

    def _save(self) -> None:
        if self._path is None:
            return
        if self._token is None:
            self._path.unlink(missing_ok=True)
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps({"token": self._token, "user": self._user}),
            encoding="utf-8",
        )


__all__ = ["TokenStore"]
