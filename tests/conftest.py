"""
Pytest configuration and shared fixtures for asset-registry tests.
"""

import io
import json
import struct
import zlib

import pytest
from PIL import Image

from asset_registry.lib.chains import CHAINS, ETHEREUM
from asset_registry.lib.config import RegistryConfig
from asset_registry.lib.paths import get_asset_info_path, get_token_list_path


@pytest.fixture
def ethereum():
    """The Ethereum chain record."""
    return CHAINS[ETHEREUM]


@pytest.fixture
def sample_token_address():
    """Sample ERC-20 contract address (USDT)."""
    return "0xdAC17F958D2ee523a2206206994597C13D831ec7"


@pytest.fixture
def config(tmp_path):
    """Registry config rooted in a temporary directory."""
    return RegistryConfig(
        root=str(tmp_path),
        assets_app_url="https://assets.example.com",
        logo_url="https://example.com/logo.png",
    )


@pytest.fixture
def write_token_list(config):
    """Write a token list file for a chain and return its path."""

    def _write(chain, list_type, tokens=None, major=1):
        path = get_token_list_path(config.root, chain.handle, list_type)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(
                {
                    "name": f"Trust Wallet: {chain.name}",
                    "logoURI": "https://example.com/logo.png",
                    "timestamp": "2024-01-01T00:00:00.000000",
                    "tokens": tokens or [],
                    "version": {"major": major},
                }
            ),
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def write_asset_info(config):
    """Write an info.json for a token and return its path."""

    def _write(chain, token_id, **overrides):
        data = {
            "name": "Foo",
            "type": "ERC20",
            "symbol": "FOO",
            "decimals": 18,
            "website": "https://foo.example",
            "explorer": f"https://etherscan.io/token/{token_id}",
            "status": "active",
            "id": token_id,
            "links": [],
            "tags": [],
        }
        data.update(overrides)
        path = get_asset_info_path(config.root, chain.handle, token_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def png_bytes():
    """A small PNG image."""
    buffer = io.BytesIO()
    Image.new("RGBA", (4, 4), (255, 0, 0, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def jpeg_bytes():
    """A small JPEG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), (0, 0, 255)).save(buffer, format="JPEG")
    return buffer.getvalue()


def _png_chunk(chunk_type, data):
    return (
        struct.pack(">I", len(data))
        + chunk_type
        + data
        + struct.pack(">I", zlib.crc32(chunk_type + data) & 0xFFFFFFFF)
    )


@pytest.fixture
def oversized_png_bytes():
    """A PNG header declaring 20000x10000 pixels, past Pillow's decompression bomb limit."""
    header = struct.pack(">IIBBBBB", 20000, 10000, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", header) + _png_chunk(b"IEND", b"")
