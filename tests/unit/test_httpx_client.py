import json

import httpx
import pytest

from minter.app.infrastructure.http.httpx_client import HttpxHttpClient
from minter.app.ports.http_client import HttpClientError, HttpClientTimeoutError, RequestTimeout


def _client(handler) -> HttpxHttpClient:
    return HttpxHttpClient(httpx.AsyncClient(transport=httpx.MockTransport(handler)))


@pytest.mark.asyncio
async def test_post_json_sends_body_and_headers_and_decodes_reply():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ipfsHash": "Qm123"})

    client = _client(handler)
    reply = await client.post_json(
        "https://api.example.test/v1/ipfs/upload/json",
        {"content": {"name": "x"}},
        timeout=RequestTimeout(),
        headers={"X-Flair-Client-Id": "client-1"},
    )
    await client.close()

    assert reply == {"ipfsHash": "Qm123"}
    assert seen[0].method == "POST"
    assert seen[0].headers["X-Flair-Client-Id"] == "client-1"
    assert json.loads(seen[0].read()) == {"content": {"name": "x"}}


@pytest.mark.asyncio
async def test_post_json_maps_error_status_to_client_error():
    client = _client(lambda request: httpx.Response(502, text="bad gateway"))
    with pytest.raises(HttpClientError) as exc_info:
        await client.post_json("https://api.example.test/x", {}, timeout=RequestTimeout())
    assert "502" in str(exc_info.value)
    await client.close()


@pytest.mark.asyncio
async def test_post_json_maps_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    client = _client(handler)
    with pytest.raises(HttpClientTimeoutError):
        await client.post_json("https://api.example.test/x", {}, timeout=RequestTimeout(1.0, 1.0))
    await client.close()


@pytest.mark.asyncio
async def test_post_json_maps_connection_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = _client(handler)
    with pytest.raises(HttpClientError):
        await client.post_json("https://api.example.test/x", {}, timeout=RequestTimeout())
    await client.close()


@pytest.mark.asyncio
async def test_post_json_rejects_non_json_reply():
    client = _client(lambda request: httpx.Response(200, text="<html>ok</html>"))
    with pytest.raises(HttpClientError):
        await client.post_json("https://api.example.test/x", {}, timeout=RequestTimeout())
    await client.close()
