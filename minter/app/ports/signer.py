"""Port: signing identity. The private key never leaves the implementation."""
from __future__ import annotations

from typing import Any, Protocol


class Signer(Protocol):
    @property
    def address(self) -> str: ...

    def sign_typed_data(self, full_message: dict[str, Any]) -> str:
        """Sign an EIP-712 message and return the 0x-prefixed hex signature."""
        ...
