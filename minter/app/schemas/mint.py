from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NftMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    image: str
    description: str
    external_link: str


class MintResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token_uris: list[str] = Field(alias="tokenURIs")
    nft_metadata: NftMetadata = Field(alias="nftMetadata")
    response: Any
