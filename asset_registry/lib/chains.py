"""
Static chain table and composite asset identifiers.

Chains are keyed by their SLIP-44 style coin id. Asset identifiers encode a
chain and a token address as "c<coinId>_t<tokenId>", e.g.
"c60_t0xdAC17F958D2ee523a2206206994597C13D831ec7".
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import ParseError


@dataclass(frozen=True)
class Chain:
    """A supported blockchain network."""

    id: int
    handle: str  # Directory name under blockchains/
    name: str  # Display name used in token list titles


ETHEREUM = 60
CLASSIC = 61
TRON = 195
SOLANA = 501
BINANCE = 714
POLYGON = 966
OPTIMISM = 10000070
FANTOM = 10000250
AVALANCHEC = 10009000
ARBITRUM = 10042221
SMARTCHAIN = 20000714
AURORA = 1323161554

CHAINS: Dict[int, Chain] = {
    chain.id: chain
    for chain in [
        Chain(ETHEREUM, "ethereum", "Ethereum"),
        Chain(CLASSIC, "classic", "Ethereum Classic"),
        Chain(TRON, "tron", "Tron"),
        Chain(SOLANA, "solana", "Solana"),
        Chain(BINANCE, "binance", "BNB Beacon Chain"),
        Chain(POLYGON, "polygon", "Polygon"),
        Chain(OPTIMISM, "optimism", "Optimism"),
        Chain(FANTOM, "fantom", "Fantom"),
        Chain(AVALANCHEC, "avalanchec", "Avalanche C-Chain"),
        Chain(ARBITRUM, "arbitrum", "Arbitrum"),
        Chain(SMARTCHAIN, "smartchain", "BNB Smart Chain"),
        Chain(AURORA, "aurora", "Aurora"),
    ]
}

# Chains that can be populated from a remote token feed
REMOTE_FEED_CHAINS = frozenset([ETHEREUM, POLYGON, BINANCE, AURORA])

COIN_PREFIX = "c"
TOKEN_PREFIX = "t"
SEPARATOR = "_"


def get_chain(coin_id: int) -> Chain:
    """
    Look up a chain by coin id.

    Raises:
        ParseError: If the coin id is not in the chain table
    """
    if coin_id not in CHAINS:
        raise ParseError(f"Unknown chain: {coin_id}")
    return CHAINS[coin_id]


def get_chain_by_handle(handle: str) -> Chain:
    """
    Look up a chain by its handle (case-insensitive).

    Raises:
        ParseError: If no chain has this handle
    """
    handle_lower = handle.lower()
    for chain in CHAINS.values():
        if chain.handle == handle_lower:
            return chain
    raise ParseError(
        f"Unknown chain: {handle}. "
        f"Supported: {', '.join(sorted(c.handle for c in CHAINS.values()))}"
    )


def build_asset_id(coin_id: int, token_id: str) -> str:
    """Build a composite asset identifier, e.g. build_asset_id(60, "0xABC") -> "c60_t0xABC"."""
    return f"{COIN_PREFIX}{coin_id}{SEPARATOR}{TOKEN_PREFIX}{token_id}"


def parse_asset_id(asset_id: str) -> Tuple[Chain, str]:
    """
    Split a composite asset identifier into its chain and token id.

    Only the first separator splits, so token ids may themselves contain
    underscores.

    Args:
        asset_id: Identifier such as "c60_t0xABC"

    Returns:
        Tuple of (chain, token_id)

    Raises:
        ParseError: If the identifier is malformed or names an unknown chain
    """
    coin_part, sep, token_part = asset_id.partition(SEPARATOR)
    if not sep or not token_part.startswith(TOKEN_PREFIX):
        raise ParseError(f"Invalid asset id, expected c<coin>_t<token>: {asset_id!r}")

    digits = coin_part[len(COIN_PREFIX):]
    if not coin_part.startswith(COIN_PREFIX) or not digits.isdigit():
        raise ParseError(f"Invalid coin in asset id: {asset_id!r}")

    token_id = token_part[len(TOKEN_PREFIX):]
    if not token_id:
        raise ParseError(f"Missing token in asset id: {asset_id!r}")

    return get_chain(int(digits)), validate_token_id(token_id)


def validate_token_id(token_id: str) -> str:
    """
    Check that a token id is usable as a single directory name.

    Raises:
        ParseError: If the token id is empty or could escape the asset directory
    """
    if not token_id or token_id in (".", "..") or "/" in token_id or "\\" in token_id:
        raise ParseError(f"Invalid token id: {token_id!r}")
    return token_id
