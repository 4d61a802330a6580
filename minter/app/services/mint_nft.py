"""
Accepts plain Python types and the store/contract ports; returns an outcome.
Router translates outcome to the HTTP response. Upstream errors propagate unchanged.
"""

import random
from dataclasses import dataclass
from typing import Any

from loguru import logger

from minter.app.constants import (
    NFT_DESCRIPTION,
    NFT_NAME_PREFIX,
    NFT_SITE_URL,
    RANDOM_ID_UPPER_BOUND,
    TOKEN_URI_SCHEME,
)
from minter.app.core import SERVICE_NAME
from minter.app.ports.contract_client import MetaTransactionContract
from minter.app.ports.metadata_store import MetadataStore
from minter.app.schemas.mint import NftMetadata


@dataclass(frozen=True)
class MintOutcome:
    """Result of mint_nft. `metadata` is in the same order as `token_uris`."""
    token_uris: list[str]
    metadata: list[NftMetadata]
    response: Any


def build_nft_metadata(random_id: int) -> NftMetadata:
    return NftMetadata(
        name=f"{NFT_NAME_PREFIX}{random_id}",
        image=f"{NFT_SITE_URL}/{random_id}.png",
        description=NFT_DESCRIPTION,
        external_link=f"{NFT_SITE_URL}/{random_id}",
    )


def token_uri(content_id: str) -> str:
    return f"{TOKEN_URI_SCHEME}{content_id}"


def build_token_uris(content_ids: list[str], count: int) -> list[str]:
    if len(content_ids) != count:
        raise ValueError(f"expected {count} token URIs, got {len(content_ids)}")
    return [token_uri(content_id) for content_id in content_ids]


async def mint_nft(
    to: str,
    count: int,
    *,
    metadata_store: MetadataStore,
    contract: MetaTransactionContract,
    rng: random.Random | None = None,
) -> MintOutcome:
    """
    Upload one fresh metadata document per token, then sign and submit the mint.
    Random ids are not checked for collisions. Uploaded documents are left in the
    store when the mint fails.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    rng = rng or random.Random()

    metadata: list[NftMetadata] = []
    content_ids: list[str] = []
    for _ in range(count):
        document = build_nft_metadata(rng.randrange(RANDOM_ID_UPPER_BOUND))
        content_ids.append(await metadata_store.upload_json(document.model_dump()))
        metadata.append(document)
    token_uris = build_token_uris(content_ids, count)

    log = logger.bind(service_name=SERVICE_NAME, event="minting", to=to, count=count)
    log.info(f"Minting {count} NFTs to {to}")
    for uri in token_uris:
        log.info(f" - TokenURI: {uri}")

    response = await contract.mint_with_token_uris_by_role(to, count, token_uris)

    signature = response.get("signature") if isinstance(response, dict) else None
    log.info(f" - Signature: {signature}")
    log.info(" - Transaction is being processed, check the contract on a block explorer for its status")
    return MintOutcome(token_uris=token_uris, metadata=metadata, response=response)
