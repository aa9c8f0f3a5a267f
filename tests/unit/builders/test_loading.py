"""Tests for builder loading module."""

import pytest

from site_check.builders.hugo import HugoBuilder, HugoConfig, hugo_manifest
from site_check.builders.loading import (
    BuilderNotFoundError,
    create_builder,
    load_builder_manifest,
)
from site_check.config import BuilderSettings


def test_load_builder_manifest_returns_manifest() -> None:
    """Loads builder manifest by key."""
    manifest = load_builder_manifest("hugo")

    assert manifest is hugo_manifest


def test_load_builder_manifest_raises_for_unknown_builder() -> None:
    """Raises BuilderNotFoundError for unknown builder key."""
    with pytest.raises(BuilderNotFoundError) as exc_info:
        load_builder_manifest("jekyll")

    assert "jekyll" in str(exc_info.value)
    assert "Available builders" in str(exc_info.value)


def test_create_builder_validates_config() -> None:
    """Creates the builder from its validated configuration."""
    builder = create_builder(
        BuilderSettings(key="hugo", config={"minify": False, "timeout": 30})
    )

    assert isinstance(builder, HugoBuilder)
    assert builder.config == HugoConfig(minify=False, timeout=30)


def test_create_builder_raises_for_invalid_config() -> None:
    """Raises ValueError naming the builder for invalid configuration."""
    with pytest.raises(ValueError, match="Invalid configuration for builder 'hugo'"):
        create_builder(BuilderSettings(key="hugo", config={"timeout": -1}))
