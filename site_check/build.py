"""Clean build of the example site."""

import logging
import shutil

from site_check.builders.base import BuildError, SiteBuilder
from site_check.layout import SiteLayout
from site_check.models.result import CheckResult

log = logging.getLogger(__name__)

BUILD_LABEL = "Hugo build"


def clean_output(layout: SiteLayout) -> None:
    """Remove a stale output directory, if any."""
    if layout.output_dir.exists():
        log.info("Removing stale output directory %s", layout.output_dir)
        shutil.rmtree(layout.output_dir)


async def run_build(builder: SiteBuilder, layout: SiteLayout) -> CheckResult:
    """Rebuild the site from scratch and report the outcome as one result.

    A build that reports success but leaves no output directory is a failure.
    Errors removing the old output are environment faults and propagate.
    """
    clean_output(layout)

    try:
        await builder.build(layout.site_root)
    except BuildError as e:
        log.error("Build failed: %s", e)
        return CheckResult.fail(BUILD_LABEL, str(e) or type(e).__name__)

    if not layout.output_dir.is_dir():
        return CheckResult.fail(
            BUILD_LABEL, f"{layout.output_name}/ directory not created"
        )

    return CheckResult.ok("Hugo build completes without errors")
