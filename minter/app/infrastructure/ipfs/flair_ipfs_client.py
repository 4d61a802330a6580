"""Metadata store adapter: uploads JSON documents to IPFS through the Flair API."""
from __future__ import annotations

from typing import Any

from loguru import logger

from minter.app.constants import FLAIR_CLIENT_ID_HEADER, IPFS_UPLOAD_JSON_PATH
from minter.app.core import SERVICE_NAME
from minter.app.ports.http_client import AbstractHttpClient, HttpClientError, RequestTimeout
from minter.app.ports.metadata_store import MetadataStore, MetadataUploadError


class FlairIpfsClient(MetadataStore):
    """Pins JSON documents and returns their content identifier (CID)."""

    def __init__(
        self,
        client: AbstractHttpClient,
        *,
        base_url: str,
        client_id: str,
        timeout: RequestTimeout | None = None,
    ) -> None:
        self._client = client
        self._upload_url = base_url.rstrip("/") + IPFS_UPLOAD_JSON_PATH
        self._client_id = client_id
        self._timeout = timeout or RequestTimeout()

    async def upload_json(self, document: dict[str, Any]) -> str:
        try:
            reply = await self._client.post_json(
                self._upload_url,
                {"clientId": self._client_id, "content": document},
                timeout=self._timeout,
                headers={FLAIR_CLIENT_ID_HEADER: self._client_id},
            )
        except HttpClientError as exc:
            raise MetadataUploadError(str(exc)) from exc

        content_id = reply.get("ipfsHash") if isinstance(reply, dict) else None
        if not isinstance(content_id, str) or not content_id:
            raise MetadataUploadError(f"upload reply has no ipfsHash: {reply!r}")

        logger.bind(service_name=SERVICE_NAME, event="metadata_uploaded", cid=content_id).debug("")
        return content_id
