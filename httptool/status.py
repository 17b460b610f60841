"""HTTP status helpers shared by the error types and the response writer."""

from http import HTTPStatus


def status_text(status_code: int) -> str:
    """Return the standard reason phrase for *status_code* ("" if unknown)."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""
