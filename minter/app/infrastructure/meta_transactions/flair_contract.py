"""Contract client that signs meta-transactions and submits them to the Flair relayer.

Calldata is ABI-encoded for the method registered under the contract FQN, wrapped
in a ForwardRequest, signed with the injected Signer and posted to the relayer.
The relayer pays gas and executes the call through the trusted forwarder.
"""
from __future__ import annotations

import secrets
import time
from typing import Any, Callable

from eth_abi import encode
from eth_utils import to_checksum_address
from loguru import logger

from minter.app.constants import FLAIR_CLIENT_ID_HEADER, META_TRANSACTIONS_PATH, MINT_METHOD
from minter.app.core import SERVICE_NAME
from minter.app.infrastructure.meta_transactions.forward_request import ForwardRequest, build_typed_data
from minter.app.infrastructure.meta_transactions.registry import method_arg_types, method_selector
from minter.app.ports.contract_client import MetaTransactionContract, MetaTransactionSubmitError
from minter.app.ports.http_client import AbstractHttpClient, HttpClientError, RequestTimeout
from minter.app.ports.signer import Signer


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class FlairMetaTransactionContract(MetaTransactionContract):
    def __init__(
        self,
        client: AbstractHttpClient,
        signer: Signer,
        *,
        chain_id: int | str,
        client_id: str,
        contract_fqn: str,
        address: str,
        forwarder_address: str,
        base_url: str,
        ttl_seconds: int = 3600,
        min_gas_price: int = 0,
        max_gas_price: int = 0,
        timeout: RequestTimeout | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._client = client
        self._signer = signer
        self._chain_id = chain_id
        self._client_id = client_id
        self._contract_fqn = contract_fqn
        self._address = address
        self._forwarder_address = forwarder_address
        self._submit_url = base_url.rstrip("/") + META_TRANSACTIONS_PATH
        self._ttl_seconds = ttl_seconds
        self._min_gas_price = min_gas_price
        self._max_gas_price = max_gas_price
        self._timeout = timeout or RequestTimeout()
        self._clock = clock

    def encode_call(self, method: str, args: list[Any]) -> bytes:
        arg_types = method_arg_types(self._contract_fqn, method)
        return method_selector(self._contract_fqn, method) + encode(list(arg_types), args)

    def build_request(self, data: bytes) -> ForwardRequest:
        return ForwardRequest(
            from_address=self._signer.address,
            to_address=self._address,
            value=0,
            min_gas_price=self._min_gas_price,
            max_gas_price=self._max_gas_price,
            expires_at=int(self._clock()) + self._ttl_seconds,
            nonce=secrets.randbits(256),
            data=data,
        )

    def chain_id(self) -> int:
        # CONTRACT_CHAIN_ID is parsed on use, never at startup.
        return int(self._chain_id)

    async def submit(self, method: str, args: list[Any]) -> dict[str, Any]:
        chain_id = self.chain_id()
        request = self.build_request(self.encode_call(method, args))
        typed_data = build_typed_data(
            request,
            chain_id=chain_id,
            forwarder_address=self._forwarder_address,
        )
        signature = self._signer.sign_typed_data(typed_data)
        _log("meta_transaction_signed", method=method, signature=signature)

        payload = {
            "chainId": chain_id,
            "contractFqn": self._contract_fqn,
            "forwarder": typed_data["domain"]["verifyingContract"],
            "request": request.to_dict(),
            "signature": signature,
        }
        try:
            submission = await self._client.post_json(
                self._submit_url,
                payload,
                timeout=self._timeout,
                headers={FLAIR_CLIENT_ID_HEADER: self._client_id},
            )
        except HttpClientError as exc:
            raise MetaTransactionSubmitError(str(exc)) from exc

        _log("meta_transaction_submitted", method=method)
        return {
            "signature": signature,
            "request": payload["request"],
            "submission": submission,
        }

    async def mint_with_token_uris_by_role(
        self, to: str, count: int, token_uris: list[str]
    ) -> dict[str, Any]:
        return await self.submit(MINT_METHOD, [to_checksum_address(to), count, list(token_uris)])
