"""
Registry configuration.

Settings come from environment variables with sensible defaults and are
passed explicitly to the stores, reconciler and ingestion pipeline.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from .errors import ConfigError

DEFAULT_ASSETS_APP_URL = "https://assets-cdn.trustwallet.com"
DEFAULT_LOGO_URL = "https://trustwallet.com/assets/images/favicon.png"
DEFAULT_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"
DEFAULT_LIST_NAME_FORMAT = "Trust Wallet: {chain}"


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        number = float(value)
    except ValueError as e:
        raise ConfigError(f"Invalid {name}: {value!r} is not a number") from e
    if number <= 0:
        raise ConfigError(f"Invalid {name}: {value!r} must be positive")
    return number


@dataclass(frozen=True)
class RegistryConfig:
    root: str = "."  # Directory holding blockchains/
    assets_app_url: str = DEFAULT_ASSETS_APP_URL  # Base URL for published logos
    logo_url: str = DEFAULT_LOGO_URL  # Branding logo on every token list
    time_format: str = DEFAULT_TIME_FORMAT  # strftime format for token list timestamps
    list_name_format: str = DEFAULT_LIST_NAME_FORMAT
    http_timeout: Optional[float] = None  # None blocks until the remote answers

    def list_name(self, chain_name: str) -> str:
        return self.list_name_format.format(chain=chain_name)

    def with_root(self, root: Optional[str]) -> "RegistryConfig":
        """Return a copy rooted at another directory (unchanged if root is None)."""
        if root is None:
            return self
        return replace(self, root=root)


def load_config() -> RegistryConfig:
    """Build the configuration from ASSETS_* environment variables."""
    return RegistryConfig(
        root=os.getenv("ASSETS_ROOT", "."),
        assets_app_url=os.getenv("ASSETS_APP_URL", DEFAULT_ASSETS_APP_URL).rstrip("/"),
        logo_url=os.getenv("ASSETS_LOGO_URL", DEFAULT_LOGO_URL),
        time_format=os.getenv("ASSETS_TIME_FORMAT", DEFAULT_TIME_FORMAT),
        list_name_format=os.getenv("ASSETS_LIST_NAME_FORMAT", DEFAULT_LIST_NAME_FORMAT),
        http_timeout=_env_float("ASSETS_HTTP_TIMEOUT"),
    )
