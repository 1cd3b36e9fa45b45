"""
Session key holder - keeps the unlocked API key in memory.

The key is set on unlock and cleared on lock. It is never written to disk,
so it is gone whenever the service process is recycled.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def normalize_key(raw: Optional[str]) -> str:
    """Trim and lowercase a credential; None reads as empty."""
    return str(raw or "").strip().lower()


@dataclass
class SessionKeyHolder:
    """Holds the unlocked-session API key in memory."""

    _key: str = ""
    _unlocked_at: Optional[datetime] = None

    @property
    def is_unlocked(self) -> bool:
        """Check if a session key is currently held."""
        return bool(self._key)

    @property
    def key(self) -> str:
        """The session key, or an empty string when locked."""
        return self._key

    @property
    def unlocked_at(self) -> Optional[datetime]:
        """When the current key was set."""
        return self._unlocked_at

    def set(self, raw: Optional[str]) -> None:
        """Normalize and store the key, replacing any previous one."""
        self._key = normalize_key(raw)
        self._unlocked_at = datetime.now() if self._key else None

    def clear(self) -> None:
        """Drop the key from memory."""
        self._key = ""
        self._unlocked_at = None


# Global default - the session holder for this service process
session_keys = SessionKeyHolder()
