"""Utility functions for reading and writing JSON files.

This module provides the JSON helpers used for configuration files, with
error handling that turns I/O and parse failures into one exception type.
"""

import json
from pathlib import Path
from typing import Any

from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


def load_json_file(file_path: str | Path) -> Any:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Parsed JSON data.

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load JSON from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.debug(f"Successfully loaded JSON from {file_path}")
        return data
    except json.JSONDecodeError as e:
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e


def dump_json_file(data: Any, file_path: str | Path) -> None:
    """Write ``data`` as indented JSON, creating parent directories.

    Raises:
        JSONLoaderError: If the file cannot be written.
    """
    file_path = Path(file_path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        logger.debug(f"Wrote JSON to {file_path}")
    except (OSError, TypeError) as e:
        raise JSONLoaderError(f"Error writing file {file_path}: {e}") from e
