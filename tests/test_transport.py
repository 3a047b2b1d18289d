"""Tests for the shared HTTP call against a local aiohttp server."""

import asyncio
import socket

import pytest
from aiohttp import test_utils, web

from smacross.services.base import AuthError, FormatError, SymbolError, TransientError
from smacross.services.data_ingestion.alphavantage_adapter import AlphaVantageAdapter


async def status_handler(request: web.Request) -> web.Response:
    return web.Response(status=int(request.match_info["code"]), text="upstream says no")


async def slow_handler(request: web.Request) -> web.Response:
    await asyncio.sleep(1.5)
    return web.json_response({"late": True})


async def text_handler(request: web.Request) -> web.Response:
    return web.Response(text="<html>maintenance</html>", content_type="text/html")


async def bad_utf8_handler(request: web.Request) -> web.Response:
    return web.Response(body=b'{"x": "\xff\xfe"}', content_type="application/json")


async def ok_handler(request: web.Request) -> web.Response:
    return web.json_response({"symbol": request.query.get("symbol"), "closes": [1.5, 2.5]})


@pytest.fixture
async def server():
    app = web.Application()
    app.router.add_get("/status/{code}", status_handler)
    app.router.add_get("/slow", slow_handler)
    app.router.add_get("/text", text_handler)
    app.router.add_get("/bad-utf8", bad_utf8_handler)
    app.router.add_get("/ok", ok_handler)

    test_server = test_utils.TestServer(app)
    await test_server.start_server()
    yield test_server
    await test_server.close()


@pytest.fixture
def adapter(settings):
    return AlphaVantageAdapter(settings=settings, timeout=0.5)


def unused_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


async def test_success_returns_decoded_json(server, adapter):
    payload = await adapter._get_json(str(server.make_url("/ok")), {"symbol": "SPY"})
    assert payload == {"symbol": "SPY", "closes": [1.5, 2.5]}


@pytest.mark.parametrize(
    "code,expected",
    [
        (401, AuthError),
        (403, AuthError),
        (404, SymbolError),
        (429, TransientError),
        (500, TransientError),
        (503, TransientError),
        (418, FormatError),
    ],
)
async def test_http_status_is_classified(server, adapter, code, expected):
    with pytest.raises(expected) as exc_info:
        await adapter._get_json(str(server.make_url(f"/status/{code}")), {})
    assert str(code) in exc_info.value.message


async def test_slow_upstream_is_transient(server, adapter):
    with pytest.raises(TransientError):
        await adapter._get_json(str(server.make_url("/slow")), {})


async def test_refused_connection_is_transient(adapter):
    url = f"http://127.0.0.1:{unused_port()}/query"
    with pytest.raises(TransientError) as exc_info:
        await adapter._get_json(url, {})
    assert "could not be reached" in exc_info.value.message


async def test_non_json_body_is_format_error(server, adapter):
    with pytest.raises(FormatError):
        await adapter._get_json(str(server.make_url("/text")), {})


async def test_undecodable_body_is_format_error(server, adapter):
    with pytest.raises(FormatError):
        await adapter._get_json(str(server.make_url("/bad-utf8")), {})


async def test_fetch_maps_rejected_key_end_to_end(server, settings):
    settings.alpha_vantage_base_url = str(server.make_url("/status/401"))
    adapter = AlphaVantageAdapter(settings=settings, timeout=0.5)
    with pytest.raises(AuthError):
        await adapter.fetch("SPY", credential="bad")
