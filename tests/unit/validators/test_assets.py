"""Tests for the compiled asset validator."""

from site_check.layout import SiteLayout
from site_check.models.result import CheckResult
from site_check.testing.site import write_assets
from site_check.validators.assets import AssetValidator


def test_missing_directory_reports_single_failure(layout: SiteLayout) -> None:
    """Only the directory check is reported when it is missing."""
    results = AssetValidator(layout=layout).validate()

    assert results == [
        CheckResult.fail(
            "static/docfind/ exists", "Directory not found. Run build script first."
        )
    ]


def test_all_assets_present(layout: SiteLayout) -> None:
    """Reports the binary module size."""
    write_assets(layout, module=b"\x00" * 3072)

    results = AssetValidator(layout=layout).validate()

    assert results == [
        CheckResult.ok("static/docfind/ exists"),
        CheckResult.ok("docfind.js exists"),
        CheckResult.ok("docfind_bg.wasm exists (3.0 KB)"),
    ]


def test_missing_module(layout: SiteLayout) -> None:
    """A missing binary module fails without affecting the script check."""
    write_assets(layout, module=None)

    results = AssetValidator(layout=layout).validate()

    assert results[1] == CheckResult.ok("docfind.js exists")
    assert results[2] == CheckResult.fail("docfind_bg.wasm exists", "File not found")


def test_missing_script(layout: SiteLayout) -> None:
    """A missing script fails without affecting the module check."""
    write_assets(layout, script=False)

    results = AssetValidator(layout=layout).validate()

    assert results[1] == CheckResult.fail("docfind.js exists", "File not found")
    assert results[2].passed
