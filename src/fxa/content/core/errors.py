# fxa/content/core/errors.py
"""Exceptions raised by client sources."""


class SourceError(Exception):
    """Base exception for all client source failures."""
    pass


class SourceAPIError(SourceError):
    """HTTP error returned by a source API.

    Attributes:
        status_code: HTTP status code
        message: Error message from response
        endpoint: API endpoint that failed
    """

    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"[{status_code}] {endpoint}: {message}")


class SourceUnavailableError(SourceError):
    """The source could not be reached (connection, timeout)."""
    pass


class SourceNotFoundError(KeyError):
    """No source registered under the requested name."""
    pass
