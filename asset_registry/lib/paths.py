"""
Path and URL derivation for the registry layout.

    <root>/blockchains/<handle>/assets/<address>/info.json
    <root>/blockchains/<handle>/assets/<address>/logo.png
    <root>/blockchains/<handle>/tokenlist.json
    <root>/blockchains/<handle>/tokenlist-extended.json
"""

from pathlib import Path

BLOCKCHAINS_DIR = "blockchains"
ASSETS_DIR = "assets"
INFO_FILENAME = "info.json"
LOGO_FILENAME = "logo.png"

TOKENLIST_DEFAULT = "default"
TOKENLIST_EXTENDED = "extended"

# Every list variant, in the order duplicate checks visit them
TOKEN_LIST_TYPES = [TOKENLIST_DEFAULT, TOKENLIST_EXTENDED]

TOKEN_LIST_FILENAMES = {
    TOKENLIST_DEFAULT: "tokenlist.json",
    TOKENLIST_EXTENDED: "tokenlist-extended.json",
}


def get_chain_path(root: str, handle: str) -> Path:
    return Path(root) / BLOCKCHAINS_DIR / handle


def get_asset_path(root: str, handle: str, token_id: str) -> Path:
    return get_chain_path(root, handle) / ASSETS_DIR / token_id


def get_asset_info_path(root: str, handle: str, token_id: str) -> Path:
    return get_asset_path(root, handle, token_id) / INFO_FILENAME


def get_asset_logo_path(root: str, handle: str, token_id: str) -> Path:
    return get_asset_path(root, handle, token_id) / LOGO_FILENAME


def get_token_list_path(root: str, handle: str, list_type: str) -> Path:
    """
    Get the token list file for a chain and list variant.

    Raises:
        ValueError: If list_type is not a known variant
    """
    if list_type not in TOKEN_LIST_FILENAMES:
        raise ValueError(
            f"Unsupported token list type: {list_type}. "
            f"Supported: {', '.join(TOKEN_LIST_TYPES)}"
        )
    return get_chain_path(root, handle) / TOKEN_LIST_FILENAMES[list_type]


def get_asset_logo_url(assets_app_url: str, handle: str, token_id: str) -> str:
    """
    Get the public URL of an asset's logo.

    Examples:
        get_asset_logo_url("https://assets.example", "ethereum", "0xABC")
        -> "https://assets.example/blockchains/ethereum/assets/0xABC/logo.png"
    """
    base = assets_app_url.rstrip("/")
    return f"{base}/{BLOCKCHAINS_DIR}/{handle}/{ASSETS_DIR}/{token_id}/{LOGO_FILENAME}"
