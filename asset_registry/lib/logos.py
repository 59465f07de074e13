"""
Logo ingestion: download an image and store it as PNG.

Any raster format Pillow can decode (PNG, JPEG, GIF, WebP, ...) is accepted
and re-encoded, so every logo in the registry is a real PNG file.
"""

import io
from pathlib import Path
from typing import Optional, Union

import requests
from PIL import Image, UnidentifiedImageError

from .errors import LogoError, StorageError

# Modes the PNG encoder writes directly; anything else is converted to RGBA
PNG_MODES = {"1", "L", "LA", "I", "P", "RGB", "RGBA"}


class LogoIngester:
    """Fetches logo images over HTTP and writes them to the registry."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the ingester.

        Args:
            session: requests session to reuse (a new one is created if None)
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def _download(self, url: str) -> bytes:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise LogoError(f"Failed to download logo from {url}: {e}") from e

        if response.status_code != 200:
            raise LogoError(f"Failed to download logo from {url}: HTTP {response.status_code}")
        return response.content

    def _decode(self, url: str, data: bytes) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(data))
            # Force decoding now so truncated files fail here
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise LogoError(f"Unsupported or corrupt image at {url}: {e}") from e

        if image.mode not in PNG_MODES:
            image = image.convert("RGBA")
        return image

    def fetch(self, url: str) -> Image.Image:
        """
        Download and decode an image without touching the registry.

        Raises:
            LogoError: If there is no URL or the image cannot be downloaded or decoded
        """
        if not url:
            raise LogoError("No logo URL")
        return self._decode(url, self._download(url))

    def save(self, image: Image.Image, target: Union[str, Path]) -> Path:
        """
        Write a decoded image as PNG, creating parent directories.

        Raises:
            StorageError: If the PNG cannot be written
        """
        path = Path(target)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            image.save(path, format="PNG")
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to write logo {path}: {e}", path=str(path)) from e
        return path

    def create(self, url: str, target: Union[str, Path]) -> Path:
        """
        Download an image and save it as PNG, creating parent directories.

        Args:
            url: Source image URL
            target: Destination path (normally .../logo.png)

        Returns:
            Path of the written logo

        Raises:
            LogoError: If the image cannot be downloaded or decoded
            StorageError: If the PNG cannot be written
        """
        return self.save(self.fetch(url), target)
