"""Settings for the minter service."""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    # Values are not checked here; a bad key or address fails when first used.
    contract_chain_id: str = Field("", validation_alias="CONTRACT_CHAIN_ID")
    flair_client_id: str = Field("", validation_alias="FLAIR_CLIENT_ID")
    minter_private_key: SecretStr = Field(SecretStr(""), validation_alias="MINTER_PRIVATE_KEY")
    nft_collection_address: str = Field("", validation_alias="NFT_COLLECTION_ADDRESS")

    forwarder_address: str = Field("", validation_alias="META_TX_FORWARDER_ADDRESS")
    flair_api_url: str = Field("https://api.flair.dev", validation_alias="FLAIR_API_URL")

    meta_tx_ttl_seconds: int = Field(3600, validation_alias="META_TX_TTL_SECONDS")
    meta_tx_min_gas_price: int = Field(0, validation_alias="META_TX_MIN_GAS_PRICE")
    meta_tx_max_gas_price: int = Field(500_000_000_000, validation_alias="META_TX_MAX_GAS_PRICE")

    http_connect_timeout_seconds: float | None = Field(None, validation_alias="HTTP_CONNECT_TIMEOUT_SECONDS")
    http_read_timeout_seconds: float | None = Field(None, validation_alias="HTTP_READ_TIMEOUT_SECONDS")

    host: str = Field("0.0.0.0", validation_alias="HOST")
    port: int = Field(8080, validation_alias="PORT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
