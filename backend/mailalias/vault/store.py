"""
Async key-value storage for the persisted credential state.

Only two keys matter here: ``locked`` (password-protected mode flag) and
``apiKey`` (the legacy, unprotected credential).
"""

import asyncio
import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Optional, Protocol

from ..logging import get_logger

logger = get_logger("vault")

KEY_LOCKED = "locked"
KEY_API_KEY = "apiKey"


class CredentialStore(Protocol):
    """Storage adapter interface."""

    async def get(self, key: str) -> Any: ...

    async def set(self, key: str, value: Any) -> None: ...

    async def remove(self, key: str) -> None: ...


class MemoryCredentialStore:
    """Dict-backed store; contents live as long as the object."""

    def __init__(self, initial: Optional[dict] = None):
        self._data: dict[str, Any] = dict(initial or {})

    async def get(self, key: str) -> Any:
        return self._data.get(key)

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileCredentialStore:
    """Store persisted as a single JSON object on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        # Serializes every read and read-modify-write across worker threads
        self._lock = threading.Lock()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read store {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        # Readers see either the old file or the new one, never a partial write
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def _get(self, key: str) -> Any:
        with self._lock:
            return self._read().get(key)

    def _set(self, key: str, value: Any) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def _remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)

    async def get(self, key: str) -> Any:
        return await asyncio.to_thread(self._get, key)

    async def set(self, key: str, value: Any) -> None:
        await asyncio.to_thread(self._set, key, value)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._remove, key)
