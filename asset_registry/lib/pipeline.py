"""
Remote feed ingestion.

Creates asset info templates and logos for every token in a remote feed that
the registry does not know yet. A bad feed aborts the run; a bad entry only
fails that entry.
"""

from typing import Optional

from . import paths
from .chains import REMOTE_FEED_CHAINS, Chain, validate_token_id
from .config import RegistryConfig
from .errors import ParseError, RegistryError, StorageError
from .feed_client import RemoteFeedClient
from .formatters import log
from .logos import LogoIngester
from .models import (
    STATUS_ALREADY_KNOWN,
    STATUS_CREATED,
    STATUS_FAILED,
    AssetInfo,
    IngestionOutcome,
    IngestionReport,
    RemoteAsset,
)
from .stores import AssetInfoStore


class RemoteIngestionPipeline:
    """
    Imports new assets from a remote token feed.

    Known assets are never modified, so running the same feed twice creates
    nothing the second time.
    """

    def __init__(
        self,
        config: RegistryConfig,
        asset_store: Optional[AssetInfoStore] = None,
        logo_ingester: Optional[LogoIngester] = None,
        feed_client: Optional[RemoteFeedClient] = None,
    ):
        self.config = config
        self.asset_store = asset_store or AssetInfoStore(config)
        self.logo_ingester = logo_ingester or LogoIngester(timeout=config.http_timeout)
        self.feed_client = feed_client or RemoteFeedClient(timeout=config.http_timeout)

    def _create_asset(self, chain: Chain, remote: RemoteAsset) -> None:
        # Download and decode first so an unusable logo leaves no info.json behind
        logo = self.logo_ingester.fetch(remote.preferred_logo_uri)

        info_path = self.asset_store.create(chain, AssetInfo.from_remote(remote))

        logo_path = paths.get_asset_logo_path(self.config.root, chain.handle, remote.address)
        try:
            self.logo_ingester.save(logo, logo_path)
        except StorageError as e:
            raise StorageError(
                f"{e}; {info_path} was created without a logo, "
                f"add {logo_path} by hand (re-ingesting will skip this asset)",
                path=str(logo_path),
            ) from e

    def _ingest_one(self, chain: Chain, remote: RemoteAsset) -> IngestionOutcome:
        try:
            validate_token_id(remote.address)
            if self.asset_store.exists(chain, remote.address):
                return IngestionOutcome(remote.address, STATUS_ALREADY_KNOWN)
            self._create_asset(chain, remote)
        except RegistryError as e:
            return IngestionOutcome(remote.address, STATUS_FAILED, reason=str(e))
        return IngestionOutcome(remote.address, STATUS_CREATED)

    def ingest(self, chain: Chain, url: str) -> IngestionReport:
        """
        Ingest every token of a remote feed into a chain's registry.

        Args:
            chain: Chain the feed belongs to
            url: Feed URL

        Returns:
            IngestionReport with one outcome per feed entry, in feed order

        Raises:
            ParseError: If the chain does not support remote feeds
            RemoteFetchError: If the feed cannot be fetched or decoded
        """
        if chain.id not in REMOTE_FEED_CHAINS:
            raise ParseError(f"Remote ingestion is not supported for {chain.handle}")

        log(chain.handle, f"Fetching token feed from {url}...")
        remote_assets = self.feed_client.get_remote_assets(url)
        log(chain.handle, f"Received {len(remote_assets)} tokens")

        report = IngestionReport(chain=chain.handle)
        for remote in remote_assets:
            outcome = self._ingest_one(chain, remote)
            report.outcomes.append(outcome)

            if outcome.status == STATUS_CREATED:
                log(chain.handle, f"Created info.json for {remote.address}")
            elif outcome.status == STATUS_ALREADY_KNOWN:
                log(chain.handle, f"Already known: {remote.address}")
            else:
                log(chain.handle, f"ERROR: {remote.address}: {outcome.reason}")

        log(
            chain.handle,
            f"Processed {report.total} tokens: {report.created_count} created, "
            f"{report.known_count} already known, {report.failed_count} failed",
        )
        return report
