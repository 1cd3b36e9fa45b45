"""
Message dispatcher - the single entry point for UI requests.

Every request gets an envelope back: ``{"ok": True, ...}`` on success,
``{"ok": False, "error": "..."}`` on any failure. No exception leaves
``Dispatcher.handle``.
"""

import random
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .config import ServiceConfig
from .errors import ProtocolError
from .logging import get_logger
from .provider import AliasClient, fetch_domain_list, generate_random_alias
from .vault import CredentialStore, SessionKeyHolder, resolve_credential

logger = get_logger("dispatcher")

INVALID_MESSAGE = "Invalid message"
UNKNOWN_MESSAGE_TYPE = "Unknown message type"


# --- Message Models ---

class SetSessionKey(BaseModel):
    """Unlock: hold the API key in memory for this process."""
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["SET_SESSION_KEY"]
    api_key: Any = Field(default=None, alias="apiKey")


class ClearSessionKey(BaseModel):
    type: Literal["CLEAR_SESSION_KEY"]


class GenerateRandomAlias(BaseModel):
    type: Literal["GENERATE_RANDOM_ALIAS"]


class ListAliases(BaseModel):
    type: Literal["LIST_ALIASES"]


class GetDomains(BaseModel):
    type: Literal["GET_DOMAINS"]


class CreateAlias(BaseModel):
    type: Literal["CREATE_ALIAS"]
    handle: Any = None
    domain: Any = None


class DeleteAlias(BaseModel):
    type: Literal["DELETE_ALIAS"]
    address: Any = None


Message = Annotated[
    Union[
        SetSessionKey,
        ClearSessionKey,
        GenerateRandomAlias,
        ListAliases,
        GetDomains,
        CreateAlias,
        DeleteAlias,
    ],
    Field(discriminator="type"),
]

_message_adapter = TypeAdapter(Message)

MESSAGE_TYPES = frozenset({
    "SET_SESSION_KEY",
    "CLEAR_SESSION_KEY",
    "GENERATE_RANDOM_ALIAS",
    "LIST_ALIASES",
    "GET_DOMAINS",
    "CREATE_ALIAS",
    "DELETE_ALIAS",
})


def parse_message(raw: Any) -> BaseModel:
    """Validate a raw message dict into its typed request.

    Raises:
        ProtocolError: missing/unknown type or malformed fields
    """
    if not isinstance(raw, dict) or not isinstance(raw.get("type"), str) or not raw["type"]:
        raise ProtocolError(INVALID_MESSAGE)
    if raw["type"] not in MESSAGE_TYPES:
        raise ProtocolError(UNKNOWN_MESSAGE_TYPE)
    try:
        return _message_adapter.validate_python(raw)
    except ValidationError as e:
        logger.debug(f"Rejected {raw['type']} message: {e.error_count()} validation error(s)")
        raise ProtocolError(INVALID_MESSAGE) from e


def _clean(value: Any) -> str:
    return str(value or "").strip().lower()


def alias_items(data: Any) -> list[dict]:
    """Coerce a provider list body into ``{address, forwardTarget}`` records."""
    if not isinstance(data, list):
        return []
    items = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        items.append({
            "address": entry.get("address", ""),
            "forwardTarget": entry.get("goto", entry.get("forwardTarget", "")),
        })
    return items


class Dispatcher:
    """Routes typed messages to the session holder or the provider client."""

    def __init__(
        self,
        config: ServiceConfig,
        store: CredentialStore,
        session: SessionKeyHolder,
        client: AliasClient,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.store = store
        self.session = session
        self.client = client
        self.rng = rng

    async def handle(self, raw: Any) -> dict:
        """Process one message and return its response envelope."""
        try:
            message = parse_message(raw)
            logger.debug(f"Dispatching {message.type}")
            return await self._dispatch(message)
        except Exception as e:
            message_type = raw.get("type") if isinstance(raw, dict) else None
            logger.warning(
                f"{message_type or 'message'} failed: {type(e).__name__}: {e}",
                extra={"message_type": message_type},
            )
            return {"ok": False, "error": str(e) or type(e).__name__}

    async def _dispatch(self, message: BaseModel) -> dict:
        # Session control never needs a credential
        if isinstance(message, SetSessionKey):
            self.session.set(message.api_key)
            logger.info("Session key set")
            return {"ok": True}

        if isinstance(message, ClearSessionKey):
            self.session.clear()
            logger.info("Session key cleared")
            return {"ok": True}

        credential = await resolve_credential(self.store, self.session)

        if isinstance(message, GenerateRandomAlias):
            email = await generate_random_alias(
                self.client, credential, self.config.dictionary_path, rng=self.rng
            )
            return {"ok": True, "email": email}

        elif isinstance(message, ListAliases):
            data = await self.client.list_aliases(credential)
            return {"ok": True, "items": alias_items(data)}

        elif isinstance(message, GetDomains):
            items = await fetch_domain_list(self.client)
            return {"ok": True, "items": items}

        elif isinstance(message, CreateAlias):
            await self.client.create_alias(
                credential, _clean(message.handle), _clean(message.domain)
            )
            return {"ok": True}

        elif isinstance(message, DeleteAlias):
            await self.client.delete_alias(credential, _clean(message.address))
            return {"ok": True}

        raise ProtocolError(UNKNOWN_MESSAGE_TYPE)
