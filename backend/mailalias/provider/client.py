"""HTTP client for the mail-alias provider API."""

from typing import Any, Optional

import httpx

from ..config import ServiceConfig
from .http import fetch_json

API_KEY_HEADER = "X-API-Key"


class AliasClient:
    """Async client for the provider's alias and domain endpoints.

    Nothing here retries: one failed attempt surfaces as a RemoteError.
    """

    def __init__(self, config: ServiceConfig, http_client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=config.http_timeout)

    async def close(self):
        await self._client.aclose()

    def _auth(self, credential: str) -> dict:
        return {API_KEY_HEADER: credential}

    async def create_alias(self, credential: str, handle: str, domain: str) -> Any:
        """Register ``handle@domain``; returns the provider's record."""
        return await fetch_json(
            self._client,
            "POST",
            f"{self.base_url}/api/alias/create",
            headers=self._auth(credential),
            data={"alias_handle": handle, "alias_domain": domain},
        )

    async def delete_alias(self, credential: str, address: str) -> Any:
        return await fetch_json(
            self._client,
            "POST",
            f"{self.base_url}/api/alias/delete",
            headers=self._auth(credential),
            data={"alias": address},
        )

    async def list_aliases(self, credential: str) -> Any:
        """Raw list body, normally ``[{"address": ..., "goto": ...}, ...]``.

        Not validated here; callers coerce non-lists to an empty list.
        """
        return await fetch_json(
            self._client,
            "GET",
            f"{self.base_url}/api/alias/list",
            headers=self._auth(credential),
        )

    async def get_domains(self) -> Any:
        return await fetch_json(self._client, "GET", f"{self.base_url}/domains")
