"""Port: content-addressed metadata store."""
from __future__ import annotations

from typing import Any, Protocol


class MetadataUploadError(Exception):
    """Raised when the store rejects an upload or returns no content id."""


class MetadataStore(Protocol):
    async def upload_json(self, document: dict[str, Any]) -> str: ...
