"""Custom exception classes for httptool."""

from typing import Optional

from httptool.status import status_text


class HttptoolBaseError(Exception):
    """Base class for all custom exceptions in httptool."""

    pass


class ConfigurationError(HttptoolBaseError):
    """Raised when loading or validating the configuration file fails."""

    pass


class ResponseCommittedError(HttptoolBaseError):
    """Raised when a response writer is modified after it was rendered."""

    pass


class HTTPError(HttptoolBaseError):
    """
    An expected failure carrying an HTTP status, meant to be *returned*
    from a handler rather than raised.

    The host adapter renders it as a plain-text response with the given
    status. ``detail`` defaults to the standard reason phrase.
    """

    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        if detail is None:
            detail = status_text(status_code) or f"HTTP {status_code}"
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")
