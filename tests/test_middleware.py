"""Tests for the built-in middleware layers."""

from __future__ import annotations

import re
from unittest.mock import MagicMock

import pytest

from httptool.middleware.access_log import access_log_middleware
from httptool.middleware.chain import chain_func
from httptool.middleware.headers import with_headers
from httptool.middleware.request_id import request_id_middleware
from httptool.server.response import ResponseWriter

from conftest import make_request


async def _ok(request, writer):
    writer.write("ok")
    return None


class TestWithHeaders:
    @pytest.mark.anyio
    async def test_sets_headers(self) -> None:
        writer = ResponseWriter()
        handler = chain_func(_ok, with_headers({"X-Frame-Options": "DENY", "X-A": "1"}))
        await handler(make_request(), writer)
        assert writer.headers["x-frame-options"] == "DENY"
        assert writer.headers["x-a"] == "1"

    @pytest.mark.anyio
    async def test_headers_visible_to_inner_handler(self) -> None:
        seen = {}

        async def inner(request, writer):
            seen["x-a"] = writer.headers.get("x-a")
            return None

        await chain_func(inner, with_headers({"X-A": "1"}))(make_request(), ResponseWriter())
        assert seen == {"x-a": "1"}


class TestRequestId:
    @pytest.mark.anyio
    async def test_generates_id(self) -> None:
        writer = ResponseWriter()
        req = make_request()
        await chain_func(_ok, request_id_middleware())(req, writer)

        rid = writer.headers["x-request-id"]
        assert re.fullmatch(r"[0-9a-f]{12}", rid)
        assert req.state.request_id == rid

    @pytest.mark.anyio
    async def test_reuses_incoming_id(self) -> None:
        writer = ResponseWriter()
        req = make_request(headers={"X-Correlation-ID": "abc-123"})
        await chain_func(_ok, request_id_middleware("X-Correlation-ID"))(req, writer)

        assert writer.headers["x-correlation-id"] == "abc-123"
        assert req.state.request_id == "abc-123"

    @pytest.mark.anyio
    async def test_ids_differ_per_request(self) -> None:
        handler = chain_func(_ok, request_id_middleware())
        w1, w2 = ResponseWriter(), ResponseWriter()
        await handler(make_request(), w1)
        await handler(make_request(), w2)
        assert w1.headers["x-request-id"] != w2.headers["x-request-id"]


class TestAccessLog:
    @pytest.mark.anyio
    async def test_logs_success_at_info(self) -> None:
        log = MagicMock()
        await chain_func(_ok, access_log_middleware(log))(
            make_request("GET", "/items"), ResponseWriter()
        )

        log.info.assert_called_once()
        args = log.info.call_args.args
        line = args[0] % args[1:]
        assert line.startswith("GET /items -> 200")
        log.warning.assert_not_called()

    @pytest.mark.anyio
    async def test_returned_error_logged_and_passed_through(self) -> None:
        log = MagicMock()
        err = ValueError("bad id")

        async def fails(request, writer):
            return err

        result = await chain_func(fails, access_log_middleware(log))(
            make_request(), ResponseWriter()
        )

        assert result is err
        log.warning.assert_called_once()
        log.info.assert_not_called()

    @pytest.mark.anyio
    async def test_fault_logged_and_reraised(self) -> None:
        log = MagicMock()

        async def boom(request, writer):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await chain_func(boom, access_log_middleware(log))(make_request(), ResponseWriter())
        log.warning.assert_called_once()
        assert "RuntimeError" in log.warning.call_args.args
