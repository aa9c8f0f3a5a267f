"""Hugo builder module."""

from site_check.builders.hugo.builder import HugoBuilder
from site_check.builders.hugo.config import HugoConfig
from site_check.builders.hugo.manifest import hugo_manifest

__all__ = ["HugoBuilder", "HugoConfig", "hugo_manifest"]
