"""Port: contract handle able to sign and submit meta-transactions."""
from __future__ import annotations

from typing import Any, Protocol


class MetaTransactionSubmitError(Exception):
    """Raised when the relayer rejects or cannot be reached for a signed request."""


class UnsupportedContractMethodError(Exception):
    """Raised when a contract type does not expose the requested method."""


class MetaTransactionContract(Protocol):
    async def mint_with_token_uris_by_role(
        self, to: str, count: int, token_uris: list[str]
    ) -> dict[str, Any]:
        """Sign a mint meta-transaction and submit it. Result is opaque to callers."""
        ...
