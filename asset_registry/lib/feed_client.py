"""
HTTP client for remote token feeds.

A feed is a single JSON document: an array of token objects with the keys
chainId, address, name, symbol, decimals, logoURI and optionally
originLogoURI. Any transport or decode problem is fatal for the whole
fetch; there is no retry.
"""

from typing import Any, List, Optional

import requests

from .errors import RemoteFetchError
from .models import RemoteAsset


class RemoteFeedClient:
    """
    Fetches and decodes remote token feeds.

    Handles:
    - HTTP errors (non-200 responses)
    - Transport failures (connection errors, timeouts)
    - Malformed payloads (invalid JSON, wrong shape, entries without address)
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the feed client.

        Args:
            session: requests session to reuse (a new one is created if None)
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get_json(self, url: str) -> Any:
        """
        GET a URL and decode its JSON body.

        Raises:
            RemoteFetchError: For transport errors, HTTP errors or invalid JSON
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteFetchError(f"Request to {url} failed: {e}") from e

        if response.status_code != 200:
            raise RemoteFetchError(
                f"Request to {url} failed: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise RemoteFetchError(f"Invalid JSON from {url}: {e}") from e

    def get_remote_assets(self, url: str) -> List[RemoteAsset]:
        """
        Fetch a token feed.

        Args:
            url: Feed URL

        Returns:
            List of RemoteAsset objects in feed order

        Raises:
            RemoteFetchError: If the feed cannot be fetched or any entry is malformed
        """
        data = self._get_json(url)
        if not isinstance(data, list):
            raise RemoteFetchError(f"Expected a JSON array from {url}, got {type(data).__name__}")

        assets: List[RemoteAsset] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise RemoteFetchError(f"Feed entry {index} from {url} is not an object")
            try:
                assets.append(RemoteAsset.from_dict(item))
            except (TypeError, ValueError) as e:
                raise RemoteFetchError(f"Invalid feed entry {index} from {url}: {e}") from e

        return assets
