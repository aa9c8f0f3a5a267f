"""Builder manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel

from site_check.builders.base import SiteBuilder


@dataclass(frozen=True, kw_only=True)
class BuilderManifest[ConfigT: BaseModel]:
    """Manifest describing a builder plugin.

    The manifest references the configuration class and the factory creating
    the builder from a validated configuration.
    """

    config_cls: type[ConfigT]
    builder_factory: Callable[[ConfigT], SiteBuilder]
