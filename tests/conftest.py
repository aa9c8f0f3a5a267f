"""Shared fixtures."""

from pathlib import Path

import pytest

from site_check.layout import SiteLayout


@pytest.fixture
def layout(tmp_path: Path) -> SiteLayout:
    """Layout of an example site rooted in a temporary directory."""
    site_root = tmp_path / "exampleSite"
    site_root.mkdir()
    return SiteLayout(site_root=site_root)
