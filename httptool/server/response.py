"""Mutable response sink handed to handlers.

Starlette responses are built in one shot, while handlers in a chain
write status, headers and body incrementally. :class:`ResponseWriter`
buffers those writes and renders a :class:`starlette.responses.Response`
once the chain has returned.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from starlette.datastructures import MutableHeaders
from starlette.responses import Response

from httptool.errors import ResponseCommittedError

logger = logging.getLogger(__name__)

# Headers that describe a body which http_error is about to replace.
_BODY_HEADERS = ("content-length", "content-encoding")


class ResponseWriter:
    """Buffered response: status, headers and body written by handlers.

    The first :meth:`write_header` call wins; :meth:`write` without a prior
    status implies ``200``. After :meth:`to_response` the writer is
    committed and further writes raise :class:`ResponseCommittedError`.
    """

    def __init__(self) -> None:
        self.headers = MutableHeaders()
        self._status_code: Optional[int] = None
        self._body = bytearray()
        self._committed = False

    @property
    def status_code(self) -> int:
        """Status written so far, ``200`` if none was written."""
        return self._status_code if self._status_code is not None else 200

    @property
    def wrote_header(self) -> bool:
        return self._status_code is not None

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    def write_header(self, status_code: int) -> None:
        """Record the response status. Later calls are ignored."""
        self._check_writable()
        if self._status_code is not None:
            logger.debug(
                "Superfluous write_header(%d) ignored; status already %d.",
                status_code,
                self._status_code,
            )
            return
        self._status_code = status_code

    def write(self, data: Union[bytes, str]) -> int:
        """Append *data* to the body and return the number of bytes written."""
        self._check_writable()
        if isinstance(data, str):
            data = data.encode("utf-8")
        if self._status_code is None:
            self._status_code = 200
        self._body.extend(data)
        return len(data)

    def reset(self) -> None:
        """Discard the status and body written so far. Headers are kept."""
        self._check_writable()
        self._status_code = None
        self._body.clear()

    def to_response(self) -> Response:
        """Render the buffered state and mark the writer committed."""
        response = Response(content=bytes(self._body), status_code=self.status_code)
        for key, value in self.headers.raw:
            # Starlette computes content-length from the rendered body.
            if key == b"content-length":
                continue
            response.raw_headers.append((key, value))
        self._committed = True
        return response

    def _check_writable(self) -> None:
        if self._committed:
            raise ResponseCommittedError("Response has already been committed to the host.")

    def __repr__(self) -> str:
        return (
            f"ResponseWriter(status={self.status_code}, "
            f"body_bytes={len(self._body)}, committed={self._committed})"
        )


def http_error(writer: ResponseWriter, message: str, status_code: int) -> None:
    """Replace the response with a plain-text *message* and *status_code*.

    Status and body written earlier are discarded; headers set by outer
    layers survive except those describing the old body. Best effort: a
    committed writer is left untouched.
    """
    if writer.committed:
        logger.warning(
            "Cannot write %d response: response already committed.", status_code
        )
        return

    writer.reset()
    for name in _BODY_HEADERS:
        if name in writer.headers:
            del writer.headers[name]
    writer.headers["Content-Type"] = "text/plain; charset=utf-8"
    writer.headers["X-Content-Type-Options"] = "nosniff"
    writer.write_header(status_code)
    writer.write(message)
