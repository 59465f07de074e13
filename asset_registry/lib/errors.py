"""
Exception types raised by the asset registry.

Every error carries enough context (a file path, an address or an HTTP
status) to attribute the failure to a single file or asset.
"""

from typing import Optional


class RegistryError(Exception):
    """Base exception for all asset registry failures."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ParseError(RegistryError):
    """Raised for a malformed asset identifier or an unknown chain."""

    pass


class DuplicateAssetError(RegistryError):
    """Raised when an asset is already listed in one of a chain's token lists."""

    def __init__(self, message: str, list_type: str, path: Optional[str] = None):
        super().__init__(message, path)
        self.list_type = list_type


class MissingAssetInfoError(RegistryError):
    """Raised when a token's info.json is absent or lacks required fields."""

    pass


class StorageError(RegistryError):
    """Raised when reading or writing a registry file fails."""

    pass


class AssetExistsError(StorageError):
    """Raised when creating a file that already exists."""

    pass


class RemoteFetchError(RegistryError):
    """Exception raised when the remote token feed cannot be fetched or decoded."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LogoError(RegistryError):
    """Raised when a logo image cannot be downloaded or converted to PNG."""

    pass


class ConfigError(RegistryError):
    """Raised when an ASSETS_* setting holds an unusable value."""

    pass
