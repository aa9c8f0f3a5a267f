"""Loading of artifacts from disk.

Missing files are reported by the validators before any reader runs, so
readers let ``OSError`` propagate as an environment fault.
"""

import json
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    """Read and parse a UTF-8 JSON document.

    Raises:
        ValueError: If the file is not valid UTF-8 or not valid JSON

    """
    return json.loads(path.read_text(encoding="utf-8"))


def read_text(path: Path) -> str:
    """Read a UTF-8 text document, replacing undecodable bytes."""
    return path.read_text(encoding="utf-8", errors="replace")


def file_size(path: Path) -> int | None:
    """Return the size of a regular file in bytes, or None if it is missing."""
    if not path.is_file():
        return None
    return path.stat().st_size


def format_size(size: int) -> str:
    """Format a byte count in kilobytes."""
    return f"{size / 1024:.1f} KB"
