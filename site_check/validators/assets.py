"""Validation of the compiled search assets."""

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import ClassVar

from site_check.layout import SiteLayout
from site_check.models.category import Category
from site_check.models.result import CheckResult, Precondition
from site_check.readers import file_size, format_size
from site_check.validators.base import (
    ArtifactValidator,
    PreconditionStep,
    require_exists,
)


class AssetValidator(ArtifactValidator[Path]):
    """Checks that the asset step left the script and binary module in place."""

    category: ClassVar[Category] = Category.ASSETS

    def preconditions(self) -> Sequence[PreconditionStep]:
        return [self._exists]

    def checks(self) -> Sequence[Callable[[Path], CheckResult]]:
        return [self.check_script, self.check_module]

    def _exists(self, layout: SiteLayout) -> Precondition[Path]:
        return require_exists(
            layout.asset_dir,
            f"{layout.static_name}/{layout.asset_dir_name}/ exists",
            "Directory not found. Run build script first.",
        )

    def check_script(self, asset_dir: Path) -> CheckResult:
        label = f"{self.layout.script_name} exists"
        if (asset_dir / self.layout.script_name).is_file():
            return CheckResult.ok(label)
        return CheckResult.fail(label, "File not found")

    def check_module(self, asset_dir: Path) -> CheckResult:
        name = self.layout.module_name
        size = file_size(asset_dir / name)
        if size is None:
            return CheckResult.fail(f"{name} exists", "File not found")
        return CheckResult.ok(f"{name} exists ({format_size(size)})")
