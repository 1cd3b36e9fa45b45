"""Credential handling: in-memory session key, persisted store, resolver."""

from .resolver import resolve_credential, LOCKED_MESSAGE, NOT_CONFIGURED_MESSAGE
from .session import SessionKeyHolder, session_keys
from .store import (
    CredentialStore,
    MemoryCredentialStore,
    JsonFileCredentialStore,
    KEY_API_KEY,
    KEY_LOCKED,
)

__all__ = [
    'resolve_credential',
    'LOCKED_MESSAGE',
    'NOT_CONFIGURED_MESSAGE',
    'SessionKeyHolder',
    'session_keys',
    'CredentialStore',
    'MemoryCredentialStore',
    'JsonFileCredentialStore',
    'KEY_API_KEY',
    'KEY_LOCKED',
]
