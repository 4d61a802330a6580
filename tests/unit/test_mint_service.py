import random

import pytest

from minter.app.ports.metadata_store import MetadataUploadError
from minter.app.services.mint_nft import build_nft_metadata, build_token_uris, mint_nft, token_uri
from tests.conftest import FakeContract, FakeMetadataStore

RECIPIENT = "0x8016f96b5cCC4663324E8D117c337BB7aA68d909"


def test_build_nft_metadata_uses_id_everywhere():
    doc = build_nft_metadata(42)
    assert doc.name == "Angel #42"
    assert doc.image == "https://my-awesome-site.com/nft/42.png"
    assert doc.external_link == "https://my-awesome-site.com/nft/42"
    assert doc.description == "This is the first NFT in the collection"


def test_token_uri_wraps_content_id():
    assert token_uri("QmAbc") == "ipfs://QmAbc"


def test_build_token_uris_keeps_order():
    assert build_token_uris(["QmA", "QmB"], 2) == ["ipfs://QmA", "ipfs://QmB"]


def test_build_token_uris_rejects_count_mismatch():
    with pytest.raises(ValueError):
        build_token_uris(["QmA"], 2)
    with pytest.raises(ValueError):
        build_token_uris([], 1)


@pytest.mark.asyncio
async def test_mint_nft_uploads_one_document_per_token():
    store = FakeMetadataStore(content_id="QmX")
    contract = FakeContract()
    outcome = await mint_nft(RECIPIENT, 3, metadata_store=store, contract=contract, rng=random.Random(1))

    assert outcome.token_uris == ["ipfs://QmX"] * 3
    assert len(outcome.metadata) == 3
    assert [m.model_dump() for m in outcome.metadata] == store.uploads
    assert contract.calls == [(RECIPIENT, 3, ["ipfs://QmX"] * 3)]
    assert outcome.response == {"signature": "0xabc", "txHash": "0xdef"}


@pytest.mark.asyncio
async def test_mint_nft_rejects_non_positive_count():
    store = FakeMetadataStore()
    contract = FakeContract()
    with pytest.raises(ValueError):
        await mint_nft(RECIPIENT, 0, metadata_store=store, contract=contract)
    assert store.uploads == []
    assert contract.calls == []


@pytest.mark.asyncio
async def test_mint_nft_upload_error_propagates_unchanged():
    error = MetadataUploadError("boom")
    contract = FakeContract()
    with pytest.raises(MetadataUploadError) as exc_info:
        await mint_nft(RECIPIENT, 1, metadata_store=FakeMetadataStore(raise_on_upload=error), contract=contract)
    assert exc_info.value is error
    assert contract.calls == []


@pytest.mark.asyncio
async def test_mint_nft_passes_result_through_verbatim():
    result = {"signature": "0x01", "submission": {"id": "mtx-1", "status": "queued"}}
    outcome = await mint_nft(
        RECIPIENT, 1, metadata_store=FakeMetadataStore(), contract=FakeContract(result=result)
    )
    assert outcome.response is result
