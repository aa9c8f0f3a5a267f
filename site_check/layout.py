"""Filesystem locations of the artifacts under test."""

from dataclasses import dataclass
from pathlib import Path

from site_check.config import HarnessConfig


@dataclass(frozen=True, kw_only=True)
class SiteLayout:
    """Resolves artifact paths relative to the example site root."""

    site_root: Path
    output_name: str = "public"
    static_name: str = "static"
    search_index_name: str = "search.json"
    index_page_name: str = "index.html"
    asset_dir_name: str = "docfind"
    script_name: str = "docfind.js"
    module_name: str = "docfind_bg.wasm"

    @classmethod
    def from_config(cls, config: HarnessConfig) -> "SiteLayout":
        """Create a layout from harness configuration."""
        return cls(
            site_root=config.site_root,
            output_name=config.output_dir,
            static_name=config.static_dir,
            search_index_name=config.search_index,
            index_page_name=config.index_page,
            asset_dir_name=config.asset_dir,
            script_name=config.script_name,
            module_name=config.module_name,
        )

    @property
    def output_dir(self) -> Path:
        return self.site_root / self.output_name

    @property
    def search_index(self) -> Path:
        return self.output_dir / self.search_index_name

    @property
    def index_page(self) -> Path:
        return self.output_dir / self.index_page_name

    @property
    def asset_dir(self) -> Path:
        return self.site_root / self.static_name / self.asset_dir_name

    @property
    def script_reference(self) -> str:
        """Reference to the script as it appears in rendered pages."""
        return f"{self.asset_dir_name}/{self.script_name}"
