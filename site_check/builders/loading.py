"""Loading of builders from entry points."""

import logging
from importlib.metadata import entry_points
from typing import Any

from pydantic import ValidationError

from site_check.builders.base import SiteBuilder
from site_check.builders.manifest import BuilderManifest
from site_check.config import BuilderSettings

ENTRY_POINT_GROUP = "site_check.builders"

log = logging.getLogger(__name__)


class BuilderNotFoundError(Exception):
    """Raised when a builder is not found."""


def load_builder_manifest(key: str) -> BuilderManifest[Any]:
    """Load a builder manifest by key.

    Args:
        key: The builder key as registered in pyproject.toml (e.g., "hugo")

    Returns:
        The builder manifest instance

    Raises:
        BuilderNotFoundError: If no builder with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: BuilderManifest[Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise BuilderNotFoundError(
        f"Builder '{key}' not found. Available builders: {available}"
    )


def create_builder(settings: BuilderSettings) -> SiteBuilder:
    """Create the builder selected by ``settings``.

    Raises:
        BuilderNotFoundError: If the builder key is unknown
        ValueError: If the builder configuration is invalid

    """
    log.debug("Loading builder: %s", settings.key)
    manifest = load_builder_manifest(settings.key)
    try:
        config = manifest.config_cls.model_validate(dict(settings.config))
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration for builder '{settings.key}': {e}"
        ) from e
    return manifest.builder_factory(config)
