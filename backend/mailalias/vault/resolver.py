"""Decides which credential authorizes the current operation."""

from ..errors import AuthError
from .session import SessionKeyHolder, normalize_key
from .store import CredentialStore, KEY_API_KEY, KEY_LOCKED

LOCKED_MESSAGE = "Locked. Open the extension and unlock first."
NOT_CONFIGURED_MESSAGE = "API-Key not set."


async def is_locked(store: CredentialStore) -> bool:
    """Read the persisted lock flag; absent means unlocked (legacy mode)."""
    return bool(await store.get(KEY_LOCKED))


async def resolve_credential(store: CredentialStore, session: SessionKeyHolder) -> str:
    """
    Return the API key for one authorized operation.

    In locked mode only the session key counts; otherwise only the stored
    key does. Read fresh on every call so lock/unlock changes apply to the
    very next request.

    Raises:
        AuthError: when the authoritative source is empty
    """
    if await is_locked(store):
        if not session.is_unlocked:
            raise AuthError(LOCKED_MESSAGE)
        return session.key

    key = normalize_key(await store.get(KEY_API_KEY))
    if not key:
        raise AuthError(NOT_CONFIGURED_MESSAGE)
    return key
