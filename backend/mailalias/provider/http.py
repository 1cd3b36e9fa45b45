"""Uniform handling of provider responses.

Every remote call goes through ``fetch_json`` so callers only ever see a
parsed body or a ``RemoteError``.
"""

import json
from typing import Any, Optional

import httpx

from ..errors import RemoteError
from ..logging import get_logger

logger = get_logger("provider")

ERROR_FIELDS = ("error", "message", "code")


def parse_body(text: str) -> Any:
    """Parse a JSON body; empty or invalid text yields None."""
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


def extract_error_message(data: Any, text: str, status_code: int) -> str:
    """Pick the most specific failure message from a response.

    Preference: ``error``, ``message``, ``code`` fields of a JSON object,
    then the raw body text, then ``HTTP <status>``.
    """
    if isinstance(data, dict):
        for field in ERROR_FIELDS:
            value = data.get(field)
            if value:
                return str(value)
    if text:
        return text
    return f"HTTP {status_code}"


async def fetch_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    headers: Optional[dict] = None,
    data: Optional[dict] = None,
) -> Any:
    """Perform one request and return its parsed body.

    Raises:
        RemoteError: on a non-2xx status or a transport failure
    """
    try:
        resp = await client.request(method, url, headers=headers, data=data)
    except httpx.HTTPError as e:
        logger.warning(f"{method} {url} failed: {type(e).__name__}: {e}")
        raise RemoteError(str(e) or type(e).__name__) from e

    text = resp.text
    body = parse_body(text)

    if not resp.is_success:
        message = extract_error_message(body, text, resp.status_code)
        logger.warning(f"{method} {url} -> {resp.status_code}: {message}")
        raise RemoteError(message, status_code=resp.status_code)

    logger.debug(f"{method} {url} -> {resp.status_code}")
    return body
