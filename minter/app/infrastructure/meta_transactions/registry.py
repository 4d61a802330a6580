"""Known contract types and the method signatures they expose for meta-transactions."""
from __future__ import annotations

from eth_utils import function_signature_to_4byte_selector

from minter.app.constants import MINT_METHOD, NFT_CONTRACT_FQN
from minter.app.ports.contract_client import UnsupportedContractMethodError

CONTRACT_METHODS: dict[str, dict[str, tuple[str, ...]]] = {
    NFT_CONTRACT_FQN: {
        MINT_METHOD: ("address", "uint256", "string[]"),
    },
}


def method_arg_types(contract_fqn: str, method: str) -> tuple[str, ...]:
    try:
        return CONTRACT_METHODS[contract_fqn][method]
    except KeyError:
        raise UnsupportedContractMethodError(f"{contract_fqn} has no method {method}") from None


def method_selector(contract_fqn: str, method: str) -> bytes:
    arg_types = method_arg_types(contract_fqn, method)
    return function_signature_to_4byte_selector(f"{method}({','.join(arg_types)})")
