"""
Local session state.

The signed-in user is kept as a snapshot in a ``"current_user"`` slot.
A :class:`SessionContext` owns two slots: a durable one that survives a
process restart ("remember me") and a volatile one that lives as long as
the process.  Exactly one session is active at a time.
"""

from __future__ import annotations

import json
import logging
from abc import abstractmethod
from pathlib import Path
from typing import Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.schemas.user import SessionUser

LOGGER = logging.getLogger(__name__)

SESSION_KEY = "current_user"


class SessionStore(Protocol):
    """A single key-value slot holding a serialized session."""

    @abstractmethod
    def read(self) -> Optional[str]:
        ...

    @abstractmethod
    def write(self, value: str) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...


class MemorySessionStore(SessionStore):
    """Volatile slot, gone when the process exits."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def read(self) -> Optional[str]:
        return self._values.get(SESSION_KEY)

    def write(self, value: str) -> None:
        self._values[SESSION_KEY] = value

    def clear(self) -> None:
        self._values.pop(SESSION_KEY, None)


class FileSessionStore(SessionStore):
    """Durable slot: a JSON file keyed by ``current_user``."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def read(self) -> Optional[str]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            LOGGER.warning("Unreadable session file %s: %s", self._path, exc)
            return None
        if not isinstance(data, dict):
            return None
        value = data.get(SESSION_KEY)
        return value if isinstance(value, str) else None

    def write(self, value: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps({SESSION_KEY: value}), encoding="utf-8")

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


class SessionContext:
    """Narrow read/write access to the current session."""

    def __init__(self, durable: SessionStore, volatile: Optional[SessionStore] = None) -> None:
        self._durable = durable
        self._volatile = volatile or MemorySessionStore()

    def get_session(self) -> Optional[SessionUser]:
        """Current user snapshot; corrupt or missing data reads as no session."""
        for store in (self._volatile, self._durable):
            raw = store.read()
            if not raw:
                continue
            try:
                return SessionUser.model_validate_json(raw)
            except PydanticValidationError:
                LOGGER.warning("Ignoring corrupt session data")
        return None

    def set_session(self, user: SessionUser, remember: bool = False) -> None:
        """Replace any existing session; ``remember`` selects the durable slot."""
        payload = user.model_dump_json()
        self.clear_session()
        if remember:
            self._durable.write(payload)
        else:
            self._volatile.write(payload)

    def refresh_session(self, user: SessionUser) -> None:
        """Rewrite the snapshot in whichever slot currently holds it."""
        if self._volatile.read():
            self._volatile.write(user.model_dump_json())
        elif self._durable.read():
            self._durable.write(user.model_dump_json())

    def clear_session(self) -> None:
        """Idempotent."""
        self._volatile.clear()
        self._durable.clear()


def get_session_context() -> SessionContext:
    """Session context backed by the ``SESSION_FILE`` setting."""
    return SessionContext(durable=FileSessionStore(settings.SESSION_FILE))
