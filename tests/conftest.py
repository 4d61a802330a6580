from __future__ import annotations

import random
from typing import Any

import pytest
from fastapi import FastAPI

from minter.app.ports.http_client import RequestTimeout
from minter.app.routers.mint import mint_router

TEST_PRIVATE_KEY = "0x" + "11" * 32
TEST_COLLECTION_ADDRESS = "0x" + "22" * 20
TEST_FORWARDER_ADDRESS = "0x" + "33" * 20
TEST_API_URL = "https://api.example.test"


class FakeMetadataStore:
    """Implements MetadataStore for tests; records every uploaded document."""

    def __init__(
        self,
        content_id: str = "Qm123",
        *,
        raise_on_upload: Exception | None = None,
    ) -> None:
        self._content_id = content_id
        self._raise_on_upload = raise_on_upload
        self.uploads: list[dict[str, Any]] = []

    async def upload_json(self, document: dict[str, Any]) -> str:
        if self._raise_on_upload is not None:
            raise self._raise_on_upload
        self.uploads.append(document)
        return self._content_id


class FakeContract:
    """Implements MetaTransactionContract for tests; records mint calls."""

    def __init__(
        self,
        result: dict[str, Any] | None = None,
        *,
        raise_on_mint: Exception | None = None,
    ) -> None:
        self._result = result if result is not None else {"signature": "0xabc", "txHash": "0xdef"}
        self._raise_on_mint = raise_on_mint
        self.calls: list[tuple[str, int, list[str]]] = []

    async def mint_with_token_uris_by_role(
        self, to: str, count: int, token_uris: list[str]
    ) -> dict[str, Any]:
        self.calls.append((to, count, list(token_uris)))
        if self._raise_on_mint is not None:
            raise self._raise_on_mint
        return self._result


class FakeHttpClient:
    """Implements AbstractHttpClient for tests; replies with canned JSON."""

    def __init__(self, reply: Any = None, *, raise_on_post: Exception | None = None) -> None:
        self._reply = reply if reply is not None else {}
        self._raise_on_post = raise_on_post
        self.posts: list[dict[str, Any]] = []
        self.closed = False

    async def post_json(
        self,
        url: str,
        payload: Any,
        *,
        timeout: RequestTimeout,
        headers: dict[str, str] | None = None,
    ) -> Any:
        self.posts.append({"url": url, "payload": payload, "timeout": timeout, "headers": headers or {}})
        if self._raise_on_post is not None:
            raise self._raise_on_post
        return self._reply

    async def close(self) -> None:
        self.closed = True


@pytest.fixture()
def test_app() -> FastAPI:
    app = FastAPI()
    app.state.metadata_store = FakeMetadataStore()
    app.state.contract = FakeContract()
    app.state.rng = random.Random(7)
    app.include_router(mint_router)
    return app
