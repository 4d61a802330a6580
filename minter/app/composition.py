"""
Composition root: single place where concrete implementations are wired.

Builds the HTTP client, signer, metadata store, contract client and id generator from an
immutable Settings object; provides close lifecycle. Used by lifespan to
populate app.state. No DI container library, explicit wiring only.
"""

import random

from minter.app.config.settings import Settings
from minter.app.constants import NFT_CONTRACT_FQN
from minter.app.infrastructure.http.factory import create_http_client, request_timeout
from minter.app.infrastructure.ipfs.flair_ipfs_client import FlairIpfsClient
from minter.app.infrastructure.meta_transactions.flair_contract import FlairMetaTransactionContract
from minter.app.infrastructure.signing.local_signer import LocalAccountSigner
from minter.app.ports.contract_client import MetaTransactionContract
from minter.app.ports.http_client import AbstractHttpClient
from minter.app.ports.metadata_store import MetadataStore


class AppDependencies:
    """Holds wired dependencies and their lifecycle. Built only in composition root."""

    def __init__(
        self,
        *,
        settings: Settings,
        http_client: AbstractHttpClient,
        metadata_store: MetadataStore,
        contract: MetaTransactionContract,
        rng: random.Random,
    ) -> None:
        self._settings = settings
        self._http_client = http_client
        self._metadata_store = metadata_store
        self._contract = contract
        self._rng = rng
        self._closed = False

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def metadata_store(self) -> MetadataStore:
        return self._metadata_store

    @property
    def contract(self) -> MetaTransactionContract:
        return self._contract

    @property
    def rng(self) -> random.Random:
        return self._rng

    async def close(self) -> None:
        if not self._closed:
            await self._http_client.close()
            self._closed = True


def create_app_dependencies(settings: Settings | None = None) -> AppDependencies:
    """
    Composition root: build all app dependencies in one place.
    Caller owns lifecycle (close). Nothing here contacts the network or
    derives the signing key, so bad configuration fails on first use.
    """
    _settings = settings or Settings()
    http_client = create_http_client(_settings)
    timeout = request_timeout(_settings)
    signer = LocalAccountSigner(_settings.minter_private_key)

    metadata_store = FlairIpfsClient(
        http_client,
        base_url=_settings.flair_api_url,
        client_id=_settings.flair_client_id,
        timeout=timeout,
    )
    contract = FlairMetaTransactionContract(
        http_client,
        signer,
        chain_id=_settings.contract_chain_id,
        client_id=_settings.flair_client_id,
        contract_fqn=NFT_CONTRACT_FQN,
        address=_settings.nft_collection_address,
        forwarder_address=_settings.forwarder_address,
        base_url=_settings.flair_api_url,
        ttl_seconds=_settings.meta_tx_ttl_seconds,
        min_gas_price=_settings.meta_tx_min_gas_price,
        max_gas_price=_settings.meta_tx_max_gas_price,
        timeout=timeout,
    )

    return AppDependencies(
        settings=_settings,
        http_client=http_client,
        metadata_store=metadata_store,
        contract=contract,
        rng=random.Random(),
    )
