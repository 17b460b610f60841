"""Tests for the Starlette endpoint adapter and returned-error rendering."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from httptool.errors import HTTPError
from httptool.middleware.chain import HandlerFunc
from httptool.server.endpoint import as_endpoint, default_error_handler
from httptool.server.response import ResponseWriter

from conftest import make_request


class TestAsEndpoint:
    @pytest.mark.anyio
    async def test_renders_writer(self) -> None:
        async def hello(request, writer):
            writer.headers["Content-Type"] = "text/plain"
            writer.write(f"hello {request.url.path}")
            return None

        resp = await as_endpoint(HandlerFunc(hello))(make_request(path="/world"))
        assert resp.status_code == 200
        assert resp.body == b"hello /world"
        assert resp.headers["content-type"] == "text/plain"

    @pytest.mark.anyio
    async def test_http_error_keeps_status(self) -> None:
        async def missing(request, writer):
            return HTTPError(404)

        resp = await as_endpoint(HandlerFunc(missing))(make_request())
        assert resp.status_code == 404
        assert resp.body == b"Not Found"

    @pytest.mark.anyio
    async def test_http_error_custom_detail(self) -> None:
        async def bad(request, writer):
            return HTTPError(400, "name is required")

        resp = await as_endpoint(HandlerFunc(bad))(make_request())
        assert resp.status_code == 400
        assert resp.body == b"name is required"

    @pytest.mark.anyio
    async def test_other_returned_error_is_generic_500(self) -> None:
        async def broken(request, writer):
            writer.write("half")
            return OSError("disk /var/data full")

        resp = await as_endpoint(HandlerFunc(broken))(make_request())
        assert resp.status_code == 500
        assert resp.body == b"Internal Server Error"

    @pytest.mark.anyio
    async def test_custom_error_handler(self) -> None:
        err = PermissionError("nope")
        on_error = MagicMock()

        async def forbidden(request, writer):
            return err

        req = make_request()
        await as_endpoint(HandlerFunc(forbidden), error_handler=on_error)(req)

        on_error.assert_called_once()
        called_req, called_writer, called_err = on_error.call_args.args
        assert called_req is req
        assert isinstance(called_writer, ResponseWriter)
        assert called_err is err

    @pytest.mark.anyio
    async def test_raised_exception_not_caught(self) -> None:
        async def boom(request, writer):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await as_endpoint(HandlerFunc(boom))(make_request())


class TestDefaultErrorHandler:
    def test_unknown_status_detail(self) -> None:
        err = HTTPError(599)
        assert err.detail == "HTTP 599"
        w = ResponseWriter()
        default_error_handler(make_request(), w, err)
        assert w.status_code == 599
        assert w.body == b"HTTP 599"
