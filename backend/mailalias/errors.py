"""Error kinds raised inside the service.

Every one of these propagates up to the message dispatcher, which is the
single place they are turned into a failure envelope.
"""


class AliasError(Exception):
    """Base class for all service errors."""


class AuthError(AliasError):
    """No usable credential (locked without a session key, or not configured)."""


class FormatError(AliasError):
    """Upstream data has the wrong shape (word list, domain list)."""


class RemoteError(AliasError):
    """The provider answered with a non-success status, or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(AliasError):
    """Malformed or unknown message."""
