"""Minting constants shared across modules."""
from __future__ import annotations

# Example recipient; GET /mint?to=<address> overrides it.
DEFAULT_RECIPIENT = "0x8016f96b5cCC4663324E8D117c337BB7aA68d909"
MINT_COUNT = 1

NFT_CONTRACT_FQN = "collections/ERC721/extensions/ERC721OneOfOneMintExtension"
MINT_METHOD = "mintWithTokenURIsByRole"

TOKEN_URI_SCHEME = "ipfs://"
RANDOM_ID_UPPER_BOUND = 10**10

NFT_SITE_URL = "https://my-awesome-site.com/nft"
NFT_NAME_PREFIX = "Angel #"
NFT_DESCRIPTION = "This is the first NFT in the collection"

FLAIR_CLIENT_ID_HEADER = "X-Flair-Client-Id"
IPFS_UPLOAD_JSON_PATH = "/v1/ipfs/upload/json"
META_TRANSACTIONS_PATH = "/v1/meta-transactions"


class ForwarderDomain:
    NAME = "UnorderedForwarder"
    VERSION = "0.0.1"
