from __future__ import annotations

from typing import Any

from eth_utils import is_address, to_checksum_address
from fastapi import APIRouter, Request, Response
from loguru import logger

from minter.app.constants import DEFAULT_RECIPIENT, MINT_COUNT
from minter.app.core import SERVICE_NAME
from minter.app.schemas.mint import MintResponse
from minter.app.services.mint_nft import mint_nft


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).warning("")


mint_router = APIRouter(tags=["Mint"])


@mint_router.get(
    "/mint",
    summary="Mint a 1-of-1 NFT",
    description="Uploads a freshly generated metadata document to IPFS, then signs a mintWithTokenURIsByRole meta-transaction and submits it to the relayer. The returned transaction is submitted but not yet mined.",
    responses={
        200: {"description": "Metadata uploaded and meta-transaction submitted."},
        400: {"description": "Invalid recipient address."},
        500: {"description": "Metadata store or relayer failed."},
        503: {"description": "Minting clients not initialized."},
    },
)
async def mint(request: Request, to: str | None = None) -> Response:
    if to is not None and not is_address(to):
        return Response(status_code=400, content="Invalid recipient address")

    metadata_store = getattr(request.app.state, "metadata_store", None)
    contract = getattr(request.app.state, "contract", None)
    if metadata_store is None or contract is None:
        _log("mint_rejected", reason="clients_not_initialized")
        return Response(status_code=503, content="Minting not available")

    recipient = to_checksum_address(DEFAULT_RECIPIENT if to is None else to)
    try:
        outcome = await mint_nft(
            recipient,
            MINT_COUNT,
            metadata_store=metadata_store,
            contract=contract,
            rng=getattr(request.app.state, "rng", None),
        )
    except Exception as e:
        _log("mint_failed", to=recipient, error=str(e))
        raise

    return Response(
        status_code=200,
        media_type="application/json",
        content=MintResponse(
            token_uris=outcome.token_uris,
            nft_metadata=outcome.metadata[0],
            response=outcome.response,
        ).model_dump_json(by_alias=True),
    )
