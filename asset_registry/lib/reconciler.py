"""
Token list reconciliation and asset info templates.

The reconciler is the only writer of token lists. It keeps an asset unique
across all of a chain's list variants and bumps the list's major version on
every insertion.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from . import paths
from .chains import Chain, parse_asset_id
from .config import RegistryConfig
from .errors import (
    DuplicateAssetError,
    MissingAssetInfoError,
    ParseError,
    StorageError,
)
from .models import AssetInfo, TokenList, TokenListEntry, Version
from .stores import AssetInfoStore, TokenListStore


class Reconciler:
    """
    Adds tokens to token lists and creates asset info templates.

    Every operation is all-or-nothing: all reads and checks complete before
    the single write. Operations are not safe to run concurrently against the
    same registry; run one process at a time.
    """

    def __init__(
        self,
        config: RegistryConfig,
        asset_store: Optional[AssetInfoStore] = None,
        token_list_store: Optional[TokenListStore] = None,
    ):
        self.config = config
        self.asset_store = asset_store or AssetInfoStore(config)
        self.token_list_store = token_list_store or TokenListStore(config)

    def _check_duplicate(self, chain: Chain, asset_id: str) -> None:
        for list_type in paths.TOKEN_LIST_TYPES:
            token_list = self.token_list_store.read(chain, list_type)
            if token_list.contains(asset_id):
                path = self.token_list_store.path(chain, list_type)
                raise DuplicateAssetError(
                    f"Duplicate asset {asset_id}, already exists in {path}",
                    list_type=list_type,
                    path=str(path),
                )

    def _get_listable_asset_info(self, chain: Chain, token_id: str) -> AssetInfo:
        path = self.asset_store.path(chain, token_id)
        try:
            info = self.asset_store.read(chain, token_id)
        except StorageError as e:
            raise MissingAssetInfoError(
                f"Failed to get token info for {token_id}: {e}", path=str(path)
            ) from e

        missing = info.missing_fields()
        if missing:
            raise MissingAssetInfoError(
                f"Asset info {path} is missing fields: {', '.join(missing)}", path=str(path)
            )
        decimals = info.decimals
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise MissingAssetInfoError(
                f"Asset info {path} has invalid decimals: {info.decimals!r}", path=str(path)
            )
        return info

    def build_entry(self, chain: Chain, asset_id: str, token_id: str, info: AssetInfo) -> TokenListEntry:
        """Project an asset info record into a token list entry for this chain."""
        logo_uri = paths.get_asset_logo_url(self.config.assets_app_url, chain.handle, token_id)
        return TokenListEntry.from_asset_info(asset_id, info, logo_uri)

    def add_token_to_list(
        self,
        chain: Chain,
        asset_id: str,
        token_id: str,
        list_type: str = paths.TOKENLIST_DEFAULT,
    ) -> TokenList:
        """
        Append a token to one of a chain's token lists.

        The asset must not appear in any of the chain's lists, and its
        info.json must already exist.

        Args:
            chain: Chain whose list is updated
            asset_id: Composite asset id stored as the entry's "asset"
            token_id: Token address used to locate info.json
            list_type: "default" or "extended"

        Returns:
            The token list as written

        Raises:
            ParseError: If list_type is not a known variant
            DuplicateAssetError: If asset_id is already listed for the chain
            MissingAssetInfoError: If info.json is missing or incomplete
            StorageError: If a token list cannot be read or written
        """
        if list_type not in paths.TOKEN_LIST_TYPES:
            raise ParseError(f"Unsupported token list type: {list_type}")

        self._check_duplicate(chain, asset_id)

        token_list = self.token_list_store.read(chain, list_type)
        info = self._get_listable_asset_info(chain, token_id)

        tokens = token_list.tokens + [self.build_entry(chain, asset_id, token_id, info)]
        updated = TokenList(
            name=self.config.list_name(chain.name),
            logoURI=self.config.logo_url,
            timestamp=datetime.now().strftime(self.config.time_format),
            tokens=tokens,
            version=Version(major=token_list.version.major + 1),
        )

        self.token_list_store.write(chain, list_type, updated)
        return updated

    def create_template(self, asset_id: str) -> Path:
        """
        Create an empty info.json for a new asset, ready for manual curation.

        Args:
            asset_id: Composite asset id such as "c60_t0xABC"

        Returns:
            Path of the created info.json

        Raises:
            ParseError: If the asset id is malformed or names an unknown chain
            AssetExistsError: If the asset already has an info.json
            StorageError: If the file cannot be written
        """
        chain, token_id = parse_asset_id(asset_id)
        return self.asset_store.create(chain, AssetInfo.placeholder(token_id))
