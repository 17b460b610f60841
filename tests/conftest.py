"""Shared fixtures: hand-built Starlette requests and a recording logger."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest
from starlette.requests import Request


def make_request(
    method: str = "GET",
    path: str = "/",
    headers: Optional[Dict[str, str]] = None,
) -> Request:
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "server": ("testserver", 80),
        "client": ("127.0.0.1", 50000),
        "root_path": "",
        "path": path,
        "query_string": b"",
        "headers": [
            (k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in (headers or {}).items()
        ],
    }
    return Request(scope)


class RecordingLogger:
    """Logger stand-in that keeps every ``error`` call."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((msg % args if args else msg, kwargs))

    @property
    def messages(self) -> List[str]:
        return [m for m, _ in self.calls]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
