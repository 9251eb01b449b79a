"""Exception taxonomy for newsdesk.

Network and client failures derive from :class:`FetchError` and propagate to
the sync coordinator. :class:`StorageError` never leaves the persistent store.
"""


class NewsdeskError(Exception):
    """Base class for all newsdesk errors."""

    description = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.description)
        if message:
            self.description = message


class ConfigError(NewsdeskError):
    """Invalid or incomplete configuration."""

    description = "Invalid configuration"


class FetchError(NewsdeskError):
    """A remote article query failed."""

    description = "Failed to fetch articles"


class NoConnectionError(FetchError):
    description = "No internet connection"


class InvalidURLError(FetchError):
    description = "Invalid URL"


class NoDataError(FetchError):
    description = "No data received"


class TransportError(FetchError):
    """Wraps a lower-level network failure."""

    description = "Network error"


class DecodeError(FetchError):
    """The response body is not a valid article-list envelope."""

    description = "Could not read the server response"


class StorageError(NewsdeskError):
    """Local store failure. Logged and absorbed by the store."""

    description = "Local storage error"
