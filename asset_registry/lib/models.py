"""
Data models for the asset registry.

This module defines the on-disk records (asset info, token lists) and the
ephemeral records used while ingesting a remote token feed. Every model
converts to and from the plain dicts stored in the registry's JSON files.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Classification given to assets created from a remote feed
DEFAULT_ASSET_TYPE = "coin"

# Fields that must be present on an asset info record before it can be listed
LISTING_REQUIRED_FIELDS = ["type", "id", "name", "symbol", "decimals"]

# Ingestion outcome statuses
STATUS_CREATED = "created"
STATUS_ALREADY_KNOWN = "already_known"
STATUS_FAILED = "failed"

REPORT_COLUMNS = ["chain", "address", "status", "reason"]


def _list_field(data: Dict[str, Any], key: str) -> List[Any]:
    """Return data[key] as a list (empty if absent), rejecting other JSON types."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a JSON array, got {value!r}")
    return value


def _str_field(data: Dict[str, Any], key: str) -> str:
    """Return data[key] as a string (empty if absent), rejecting other JSON types."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


@dataclass
class Link:
    """A named external link on an asset (source code, whitepaper, socials)."""

    name: Optional[str] = ""
    url: Optional[str] = ""

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name or "", "url": self.url or ""}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Link":
        if not isinstance(data, dict):
            raise ValueError(f"link must be a JSON object, got {data!r}")
        return cls(name=data.get("name"), url=data.get("url"))


@dataclass
class AssetInfo:
    """
    Per-asset metadata record stored as info.json.

    Scalar fields are None when the key is absent from the stored file. The
    empty string (zero for decimals) marks a placeholder awaiting manual
    curation. Both serialize to the placeholder, so every key is always
    written.
    """

    id: str
    name: Optional[str] = ""
    type: Optional[str] = ""
    symbol: Optional[str] = ""
    decimals: Optional[int] = 0
    website: Optional[str] = ""
    explorer: Optional[str] = ""
    status: Optional[str] = ""
    links: List[Link] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    @classmethod
    def placeholder(cls, token_id: str) -> "AssetInfo":
        """Create a fully empty template for a new asset."""
        return cls(id=token_id, links=[Link()], tags=[""])

    @classmethod
    def from_remote(cls, remote: "RemoteAsset") -> "AssetInfo":
        """Create a template prefilled with the name, symbol and decimals of a feed entry."""
        info = cls.placeholder(remote.address)
        info.name = remote.name
        info.symbol = remote.symbol
        info.decimals = remote.decimals
        info.type = DEFAULT_ASSET_TYPE
        return info

    def missing_fields(self) -> List[str]:
        """Return the listing-required fields that are absent from this record."""
        return [name for name in LISTING_REQUIRED_FIELDS if getattr(self, name) is None]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name or "",
            "type": self.type or "",
            "symbol": self.symbol or "",
            "decimals": self.decimals or 0,
            "website": self.website or "",
            "explorer": self.explorer or "",
            "status": self.status or "",
            "id": self.id,
            "links": [link.to_dict() for link in self.links],
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssetInfo":
        if not isinstance(data, dict):
            raise ValueError("asset info must be a JSON object")
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            type=data.get("type"),
            symbol=data.get("symbol"),
            decimals=data.get("decimals"),
            website=data.get("website"),
            explorer=data.get("explorer"),
            status=data.get("status"),
            links=[Link.from_dict(link) for link in _list_field(data, "links")],
            tags=list(_list_field(data, "tags")),
        )


@dataclass
class TokenListEntry:
    """A token list row, projected from an asset's info record."""

    asset: str  # Composite asset id, e.g. c60_t0x...
    type: str
    address: str
    name: str
    symbol: str
    decimals: int
    logoURI: str
    pairs: List[Dict[str, Any]] = field(default_factory=list)  # Carried through, never derived

    @classmethod
    def from_asset_info(cls, asset_id: str, info: AssetInfo, logo_uri: str) -> "TokenListEntry":
        return cls(
            asset=asset_id,
            type=info.type,
            address=info.id,
            name=info.name,
            symbol=info.symbol,
            decimals=int(info.decimals),
            logoURI=logo_uri,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "asset": self.asset,
            "type": self.type,
            "address": self.address,
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
            "logoURI": self.logoURI,
        }
        if self.pairs:
            data["pairs"] = self.pairs
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenListEntry":
        if not isinstance(data, dict):
            raise ValueError(f"token list entry must be a JSON object, got {data!r}")
        return cls(
            asset=data["asset"],
            type=data.get("type", ""),
            address=data.get("address", ""),
            name=data.get("name", ""),
            symbol=data.get("symbol", ""),
            decimals=data.get("decimals", 0),
            logoURI=data.get("logoURI", ""),
            pairs=list(_list_field(data, "pairs")),
        )


@dataclass
class Version:
    major: int = 0


@dataclass
class TokenList:
    """A chain's published token list (tokenlist.json or tokenlist-extended.json)."""

    name: str
    logoURI: str
    timestamp: str
    tokens: List[TokenListEntry] = field(default_factory=list)
    version: Version = field(default_factory=Version)

    def contains(self, asset_id: str) -> bool:
        return any(token.asset == asset_id for token in self.tokens)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "logoURI": self.logoURI,
            "timestamp": self.timestamp,
            "tokens": [token.to_dict() for token in self.tokens],
            "version": {"major": self.version.major},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenList":
        if not isinstance(data, dict):
            raise ValueError("token list must be a JSON object")
        version = data.get("version") or {}
        if not isinstance(version, dict):
            raise ValueError(f"version must be a JSON object, got {version!r}")
        return cls(
            name=data.get("name", ""),
            logoURI=data.get("logoURI", ""),
            timestamp=data.get("timestamp", ""),
            tokens=[TokenListEntry.from_dict(token) for token in _list_field(data, "tokens")],
            version=Version(major=int(version.get("major", 0))),
        )


@dataclass
class RemoteAsset:
    """A token description received from a remote feed, awaiting ingestion."""

    chain_id: int
    address: str
    name: str
    symbol: str
    decimals: int
    logo_uri: str
    origin_logo_uri: Optional[str] = None  # Overrides logo_uri when set

    @property
    def preferred_logo_uri(self) -> str:
        return self.origin_logo_uri or self.logo_uri

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RemoteAsset":
        address = _str_field(data, "address")
        if not address:
            raise ValueError(f"feed entry has no address: {data!r}")
        return cls(
            chain_id=int(data.get("chainId", 0)),
            address=address,
            name=_str_field(data, "name"),
            symbol=_str_field(data, "symbol"),
            decimals=int(data.get("decimals", 0)),
            logo_uri=_str_field(data, "logoURI"),
            origin_logo_uri=_str_field(data, "originLogoURI") or None,
        )


@dataclass
class IngestionOutcome:
    """What happened to a single feed entry during ingestion."""

    address: str
    status: str  # created, already_known, failed
    reason: Optional[str] = None  # Error message for failed entries

    def to_csv_row(self, chain: str) -> List[str]:
        return [chain, self.address, self.status, self.reason or ""]


@dataclass
class IngestionReport:
    """
    Result of ingesting a remote feed for one chain.

    Outcomes are kept in feed order, one per entry processed.
    """

    chain: str
    outcomes: List[IngestionOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    def _count(self, status: str) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def created_count(self) -> int:
        return self._count(STATUS_CREATED)

    @property
    def known_count(self) -> int:
        return self._count(STATUS_ALREADY_KNOWN)

    @property
    def failed_count(self) -> int:
        return self._count(STATUS_FAILED)
