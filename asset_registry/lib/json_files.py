"""
JSON file primitives for the registry.

All registry files share one canonical layout (4-space indent, key order as
written, UTF-8 without escaping, trailing newline), so generated files and
hand-edited files stay byte-comparable after formatting.
"""

import json
from pathlib import Path
from typing import Any, Union

from .errors import AssetExistsError, StorageError

PathLike = Union[str, Path]

JSON_INDENT = 4


def dumps(data: Any) -> str:
    """Serialize data in the canonical registry format."""
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False) + "\n"


def read_json(path: PathLike) -> Any:
    """
    Read and decode a JSON file.

    Raises:
        StorageError: If the file cannot be read or is not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise StorageError(f"Failed to read data from {path}: {e}", path=str(path)) from e


def write_json(path: PathLike, data: Any) -> None:
    """
    Write data to a JSON file, replacing any existing content.

    Parent directories are created as needed.

    Raises:
        StorageError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(dumps(data))
    except OSError as e:
        raise StorageError(f"Failed to write {path}: {e}", path=str(path)) from e


def create_json(path: PathLike, data: Any) -> None:
    """
    Write data to a new JSON file, refusing to touch an existing one.

    Raises:
        AssetExistsError: If the file already exists
        StorageError: If the file cannot be created or written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "x", encoding="utf-8") as f:
            f.write(json.dumps(data))
    except FileExistsError as e:
        raise AssetExistsError(f"File already exists: {path}", path=str(path)) from e
    except OSError as e:
        raise StorageError(f"Failed to create file {path}: {e}", path=str(path)) from e


def format_json_file(path: PathLike) -> None:
    """
    Rewrite a JSON file in the canonical registry format.

    Raises:
        StorageError: If the file cannot be read, decoded or rewritten
    """
    write_json(path, read_json(path))
