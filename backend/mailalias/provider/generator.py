"""Random two-word alias generation."""

import asyncio
import random
from pathlib import Path
from typing import Optional

from ..errors import FormatError
from ..logging import get_logger
from .client import AliasClient
from .words import fetch_domain_list, fetch_word_list

logger = get_logger("provider.generator")

HANDLE_SEPARATOR = "."
MAX_REDRAWS = 10


def pick_words(words: list[str], rng: random.Random) -> tuple[str, str]:
    """Draw two words, redrawing the second a few times if it repeats.

    Distinctness is best-effort: after MAX_REDRAWS a repeated pair is kept.
    """
    first = rng.choice(words)
    second = rng.choice(words)
    if len(words) > 1:
        redraws = 0
        while second == first and redraws < MAX_REDRAWS:
            second = rng.choice(words)
            redraws += 1
    return first, second


async def generate_random_alias(
    client: AliasClient,
    credential: str,
    word_list_path: str | Path,
    rng: Optional[random.Random] = None,
) -> str:
    """Create a ``word.word@domain`` alias and return its address."""
    rng = rng or random.Random()

    words, domains = await asyncio.gather(
        fetch_word_list(word_list_path),
        fetch_domain_list(client),
    )
    if not domains:
        raise FormatError("No domains available from /domains.")

    first, second = pick_words(words, rng)
    handle = f"{first}{HANDLE_SEPARATOR}{second}"
    domain = rng.choice(domains)

    created = await client.create_alias(credential, handle, domain)

    # The provider may normalize the address; prefer what it reports
    if isinstance(created, dict):
        address = created.get("alias") or created.get("address")
        if address:
            logger.info(f"Created alias {address}")
            return str(address)

    logger.info(f"Created alias {handle}@{domain} (provider did not echo address)")
    return f"{handle}@{domain}"
