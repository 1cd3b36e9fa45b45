"""Word list and domain list used for random handles."""

import asyncio
import json
import re
from pathlib import Path
from typing import Any

from ..errors import FormatError
from .client import AliasClient

# The provider rejects "-" in handles, so only [a-z0-9] survives
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_word(value: Any) -> str:
    return _NON_ALNUM.sub("", str(value or "").strip().lower())


def normalize_domain(value: Any) -> str:
    return str(value).strip().lower()


def _load_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


async def fetch_word_list(path: str | Path) -> list[str]:
    """Load and normalize the bundled dictionary. Read fresh on every call."""
    try:
        data = await asyncio.to_thread(_load_json, Path(path))
    except (OSError, ValueError) as e:
        raise FormatError(f"dictionary.json could not be loaded: {e}") from e

    if not isinstance(data, list):
        raise FormatError("dictionary.json must be an array of strings.")

    words = [w for w in (normalize_word(item) for item in data) if w]
    if len(words) < 2:
        raise FormatError("dictionary.json needs at least 2 valid words.")
    return words


async def fetch_domain_list(client: AliasClient) -> list[str]:
    data = await client.get_domains()
    if not isinstance(data, list):
        raise FormatError("Invalid /domains response.")
    return [d for d in (normalize_domain(item) for item in data) if d]
