"""
Unit tests for JSON file primitives and the file-backed stores.

Tests follow the Given/When/Then pattern for clarity.
"""

import json

import pytest

from asset_registry.lib.errors import AssetExistsError, StorageError
from asset_registry.lib.json_files import create_json, format_json_file, read_json, write_json
from asset_registry.lib.models import TokenList, TokenListEntry, Version
from asset_registry.lib.paths import TOKENLIST_DEFAULT
from asset_registry.lib.stores import AssetInfoStore, TokenListStore


class TestJsonFiles:
    """Tests for read/write/create/format helpers."""

    def test_format_rewrites_in_canonical_layout(self, tmp_path):
        """
        Given a compact JSON file with non-ASCII text
        When formatting it
        Then it should use 4-space indent, keep key order and end with a newline
        """
        # Given
        path = tmp_path / "info.json"
        path.write_text('{"name":"Café","id":"0xABC"}', encoding="utf-8")

        # When
        format_json_file(path)

        # Then
        assert path.read_text(encoding="utf-8") == '{\n    "name": "Café",\n    "id": "0xABC"\n}\n'

    def test_create_refuses_existing_file(self, tmp_path):
        """
        Given an existing file
        When creating it again
        Then AssetExistsError should be raised and content preserved
        """
        # Given
        path = tmp_path / "info.json"
        path.write_text("{}", encoding="utf-8")

        # When / Then
        with pytest.raises(AssetExistsError) as exc_info:
            create_json(path, {"id": "0xABC"})

        assert exc_info.value.path == str(path)
        assert path.read_text(encoding="utf-8") == "{}"

    def test_write_creates_parent_directories(self, tmp_path):
        """
        Given a path in missing directories
        When writing JSON
        Then the directories should be created
        """
        # Given
        path = tmp_path / "a" / "b" / "list.json"

        # When
        write_json(path, {"tokens": []})

        # Then
        assert read_json(path) == {"tokens": []}

    def test_read_invalid_json_raises_storage_error(self, tmp_path):
        """
        Given a file containing invalid JSON
        When reading it
        Then StorageError should name the file
        """
        # Given
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        # When / Then
        with pytest.raises(StorageError, match="broken.json"):
            read_json(path)

    def test_read_missing_file_raises_storage_error(self, tmp_path):
        """
        Given a path that does not exist
        When reading it
        Then StorageError should be raised
        """
        # When / Then
        with pytest.raises(StorageError):
            read_json(tmp_path / "missing.json")


class TestStores:
    """Tests for AssetInfoStore and TokenListStore."""

    def test_asset_store_exists_and_read(self, config, ethereum, write_asset_info):
        """
        Given an info.json on disk
        When checking and reading it through the store
        Then it should exist and parse
        """
        # Given
        write_asset_info(ethereum, "0xDEAD", name="Dead")
        store = AssetInfoStore(config)

        # When
        info = store.read(ethereum, "0xDEAD")

        # Then
        assert store.exists(ethereum, "0xDEAD")
        assert not store.exists(ethereum, "0xBEEF")
        assert info.name == "Dead"

    def test_asset_store_rejects_non_object(self, config, ethereum):
        """
        Given an info.json holding a JSON array
        When reading it through the store
        Then StorageError should be raised
        """
        # Given
        store = AssetInfoStore(config)
        path = store.path(ethereum, "0xDEAD")
        path.parent.mkdir(parents=True)
        path.write_text("[]", encoding="utf-8")

        # When / Then
        with pytest.raises(StorageError, match="Invalid asset info"):
            store.read(ethereum, "0xDEAD")

    def test_token_list_store_write_then_read(self, config, ethereum):
        """
        Given a token list
        When writing and reading it back
        Then the stored document should match
        """
        # Given
        store = TokenListStore(config)
        token_list = TokenList(
            name="Trust Wallet: Ethereum",
            logoURI="https://example.com/logo.png",
            timestamp="2024-01-01T00:00:00.000000",
            tokens=[
                TokenListEntry(
                    asset="c60_t0xABC",
                    type="ERC20",
                    address="0xABC",
                    name="Foo",
                    symbol="FOO",
                    decimals=18,
                    logoURI="https://assets.example.com/logo.png",
                )
            ],
            version=Version(major=5),
        )

        # When
        path = store.write(ethereum, TOKENLIST_DEFAULT, token_list)
        read_back = store.read(ethereum, TOKENLIST_DEFAULT)

        # Then
        assert read_back == token_list
        assert json.loads(path.read_text(encoding="utf-8"))["version"] == {"major": 5}

    def test_token_list_entry_without_asset_is_invalid(self, config, ethereum, write_token_list):
        """
        Given a token list whose entry has no asset key
        When reading it through the store
        Then StorageError should be raised
        """
        # Given
        write_token_list(ethereum, TOKENLIST_DEFAULT, tokens=[{"address": "0xABC"}])

        # When / Then
        with pytest.raises(StorageError, match="Invalid token list"):
            TokenListStore(config).read(ethereum, TOKENLIST_DEFAULT)

    def test_token_list_with_scalar_version_is_invalid(self, config, ethereum, write_token_list):
        """
        Given a token list whose version is a bare number instead of an object
        When reading it through the store
        Then StorageError should be raised
        """
        # Given
        path = write_token_list(ethereum, TOKENLIST_DEFAULT)
        data = json.loads(path.read_text(encoding="utf-8"))
        data["version"] = 3
        path.write_text(json.dumps(data), encoding="utf-8")

        # When / Then
        with pytest.raises(StorageError, match="Invalid token list"):
            TokenListStore(config).read(ethereum, TOKENLIST_DEFAULT)

    def test_token_list_with_object_tokens_is_invalid(self, config, ethereum, write_token_list):
        """
        Given a token list whose tokens field is an object
        When reading it through the store
        Then StorageError should be raised
        """
        # Given
        write_token_list(ethereum, TOKENLIST_DEFAULT, tokens={"c60_t0xABC": {}})

        # When / Then
        with pytest.raises(StorageError, match="Invalid token list"):
            TokenListStore(config).read(ethereum, TOKENLIST_DEFAULT)

    def test_asset_info_with_string_links_is_invalid(self, config, ethereum, write_asset_info):
        """
        Given an info.json whose links are plain URL strings
        When reading it through the store
        Then StorageError should be raised
        """
        # Given
        write_asset_info(ethereum, "0xDEAD", links=["https://x"])

        # When / Then
        with pytest.raises(StorageError, match="Invalid asset info"):
            AssetInfoStore(config).read(ethereum, "0xDEAD")
