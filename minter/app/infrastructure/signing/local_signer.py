"""Signer backed by a local private key (eth-account).

The account is derived on first use so a missing or malformed
MINTER_PRIVATE_KEY fails the first signing request, not process startup.
"""
from __future__ import annotations

from functools import cached_property
from typing import Any

from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_account.signers.local import LocalAccount
from eth_utils import to_hex
from pydantic import SecretStr

from minter.app.ports.signer import Signer


class LocalAccountSigner(Signer):
    def __init__(self, private_key: SecretStr) -> None:
        self._private_key = private_key

    @cached_property
    def _account(self) -> LocalAccount:
        return Account.from_key(self._private_key.get_secret_value())

    @property
    def address(self) -> str:
        return self._account.address

    def sign_typed_data(self, full_message: dict[str, Any]) -> str:
        signable = encode_typed_data(full_message=full_message)
        signed = self._account.sign_message(signable)
        return to_hex(signed.signature)

    def __repr__(self) -> str:
        return "LocalAccountSigner(private_key=**********)"
