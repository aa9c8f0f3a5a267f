"""Tests for artifact readers."""

import json
from pathlib import Path

import pytest

from site_check.readers import file_size, format_size, read_json, read_text


def test_read_json(tmp_path: Path) -> None:
    """Parses JSON documents."""
    path = tmp_path / "search.json"
    path.write_text(json.dumps([{"title": "A"}]), encoding="utf-8")

    assert read_json(path) == [{"title": "A"}]


def test_read_json_raises_value_error_for_invalid_json(tmp_path: Path) -> None:
    """Parse errors surface as ValueError."""
    path = tmp_path / "search.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(ValueError):
        read_json(path)


def test_read_json_raises_value_error_for_invalid_utf8(tmp_path: Path) -> None:
    """Undecodable bytes surface as ValueError."""
    path = tmp_path / "search.json"
    path.write_bytes(b"\xff\xfe[]")

    with pytest.raises(ValueError):
        read_json(path)


def test_read_text_replaces_undecodable_bytes(tmp_path: Path) -> None:
    """HTML is read leniently."""
    path = tmp_path / "index.html"
    path.write_bytes(b"<p>\xff</p>")

    assert read_text(path) == "<p>\ufffd</p>"


def test_file_size(tmp_path: Path) -> None:
    """Reports the size of existing files only."""
    path = tmp_path / "docfind_bg.wasm"
    path.write_bytes(b"\x00" * 2048)

    assert file_size(path) == 2048
    assert file_size(tmp_path / "missing.wasm") is None
    assert file_size(tmp_path) is None


@pytest.mark.parametrize(
    ("size", "expected"),
    [(0, "0.0 KB"), (2048, "2.0 KB"), (1_258_291, "1228.8 KB")],
)
def test_format_size(size: int, expected: str) -> None:
    """Formats sizes in kilobytes with one decimal."""
    assert format_size(size) == expected
