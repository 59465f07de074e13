"""
File-backed stores for asset info records and token lists.

Stores assume a single writer: reads and writes are plain file operations
with no locking, so only one process may modify a registry at a time.
"""

from pathlib import Path

from . import paths
from .chains import Chain
from .config import RegistryConfig
from .errors import StorageError
from .json_files import create_json, format_json_file, read_json, write_json
from .models import AssetInfo, TokenList


class AssetInfoStore:
    """Reads and creates info.json records under <root>/blockchains/<handle>/assets/."""

    def __init__(self, config: RegistryConfig):
        self.config = config

    def path(self, chain: Chain, token_id: str) -> Path:
        return paths.get_asset_info_path(self.config.root, chain.handle, token_id)

    def exists(self, chain: Chain, token_id: str) -> bool:
        return self.path(chain, token_id).is_file()

    def read(self, chain: Chain, token_id: str) -> AssetInfo:
        """
        Read an asset's info record.

        Raises:
            StorageError: If the file is missing, unreadable or not an object
        """
        path = self.path(chain, token_id)
        data = read_json(path)
        try:
            return AssetInfo.from_dict(data)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Invalid asset info in {path}: {e}", path=str(path)) from e

    def create(self, chain: Chain, info: AssetInfo) -> Path:
        """
        Create a new info.json for an asset and canonicalize its formatting.

        Never overwrites an existing record.

        Returns:
            Path of the created file

        Raises:
            AssetExistsError: If the asset already has an info.json
            StorageError: If the file cannot be written
        """
        path = self.path(chain, info.id)
        create_json(path, info.to_dict())
        format_json_file(path)
        return path


class TokenListStore:
    """
    Reads and rewrites a chain's token lists (default and extended).

    Each write replaces the whole file. Concurrent writers to the same list
    race and can lose entries; callers must serialize access externally.
    """

    def __init__(self, config: RegistryConfig):
        self.config = config

    def path(self, chain: Chain, list_type: str) -> Path:
        return paths.get_token_list_path(self.config.root, chain.handle, list_type)

    def read(self, chain: Chain, list_type: str) -> TokenList:
        """
        Read a token list.

        Raises:
            StorageError: If the file is missing, unreadable or malformed
        """
        path = self.path(chain, list_type)
        data = read_json(path)
        try:
            return TokenList.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Invalid token list in {path}: {e}", path=str(path)) from e

    def write(self, chain: Chain, list_type: str, token_list: TokenList) -> Path:
        path = self.path(chain, list_type)
        write_json(path, token_list.to_dict())
        return path
