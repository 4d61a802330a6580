"""EIP-712 ForwardRequest for the trusted forwarder that executes relayed calls."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eth_utils import to_checksum_address, to_hex

from minter.app.constants import ForwarderDomain

FORWARD_REQUEST_TYPES: dict[str, list[dict[str, str]]] = {
    "EIP712Domain": [
        {"name": "name", "type": "string"},
        {"name": "version", "type": "string"},
        {"name": "chainId", "type": "uint256"},
        {"name": "verifyingContract", "type": "address"},
    ],
    "ForwardRequest": [
        {"name": "from", "type": "address"},
        {"name": "to", "type": "address"},
        {"name": "value", "type": "uint256"},
        {"name": "minGasPrice", "type": "uint256"},
        {"name": "maxGasPrice", "type": "uint256"},
        {"name": "expiresAt", "type": "uint256"},
        {"name": "nonce", "type": "uint256"},
        {"name": "data", "type": "bytes"},
    ],
}


@dataclass(frozen=True)
class ForwardRequest:
    """A call the forwarder executes on behalf of `from_address`."""

    from_address: str
    to_address: str
    value: int
    min_gas_price: int
    max_gas_price: int
    expires_at: int
    nonce: int
    data: bytes

    def to_message(self) -> dict[str, Any]:
        return {
            "from": to_checksum_address(self.from_address),
            "to": to_checksum_address(self.to_address),
            "value": self.value,
            "minGasPrice": self.min_gas_price,
            "maxGasPrice": self.max_gas_price,
            "expiresAt": self.expires_at,
            "nonce": self.nonce,
            "data": self.data,
        }

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe form. Integers are decimal strings, data is 0x-hex."""
        message = self.to_message()
        return {
            **message,
            "value": str(self.value),
            "minGasPrice": str(self.min_gas_price),
            "maxGasPrice": str(self.max_gas_price),
            "expiresAt": str(self.expires_at),
            "nonce": str(self.nonce),
            "data": to_hex(self.data),
        }


def build_typed_data(request: ForwardRequest, *, chain_id: int, forwarder_address: str) -> dict[str, Any]:
    return {
        "types": FORWARD_REQUEST_TYPES,
        "primaryType": "ForwardRequest",
        "domain": {
            "name": ForwarderDomain.NAME,
            "version": ForwarderDomain.VERSION,
            "chainId": chain_id,
            "verifyingContract": to_checksum_address(forwarder_address),
        },
        "message": request.to_message(),
    }
