"""Hugo builder manifest."""

from site_check.builders.hugo.builder import HugoBuilder
from site_check.builders.hugo.config import HugoConfig
from site_check.builders.manifest import BuilderManifest

hugo_manifest = BuilderManifest(
    config_cls=HugoConfig,
    builder_factory=HugoBuilder.from_config,
)
