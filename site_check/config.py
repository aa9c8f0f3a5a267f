"""Harness configuration loaded from an optional YAML file."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError

from site_check.models.base import Model

log = logging.getLogger(__name__)


class BuilderSettings(Model):
    """Which builder plugin runs the site build, and its raw configuration."""

    key: str = Field(default="hugo", description="Builder entry point name")
    config: Mapping[str, Any] = Field(
        default_factory=dict,
        description="Builder specific configuration, validated by the builder",
    )


class HarnessConfig(Model):
    """Project layout and build settings for a verification run."""

    site_root: Path = Field(
        default=Path("exampleSite"), description="Example site project root"
    )
    output_dir: str = Field(default="public", description="Build output directory")
    static_dir: str = Field(default="static", description="Static assets directory")
    search_index: str = Field(
        default="search.json", description="Search index path inside the output"
    )
    index_page: str = Field(
        default="index.html", description="Root page path inside the output"
    )
    asset_dir: str = Field(
        default="docfind", description="Compiled asset directory inside static"
    )
    script_name: str = Field(default="docfind.js", description="Script asset name")
    module_name: str = Field(
        default="docfind_bg.wasm", description="Binary module asset name"
    )
    builder: BuilderSettings = Field(default_factory=BuilderSettings)


def load_config(path: Path) -> HarnessConfig:
    """Load harness configuration from a YAML file.

    A relative ``site_root`` is resolved against the directory holding the
    configuration file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, not valid YAML or fails validation

    """
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    log.debug("Loading configuration from %s", path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        raise ValueError(f"Empty config file: {path}")

    try:
        config = HarnessConfig.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid config schema in {path}: {e}") from e

    if not config.site_root.is_absolute():
        config = config.model_copy(
            update={"site_root": path.parent / config.site_root}
        )
    return config
