"""Human-readable console report of check results."""

import logging
import os
import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

from site_check.models.category import Category
from site_check.models.result import CategoryResult
from site_check.orchestrator import count_results

REPORT_LOGGER = "site_check.report"

RESET = "\x1b[0m"
COLORS: Mapping[str, str] = {
    "green": "\x1b[32m",
    "red": "\x1b[31m",
    "yellow": "\x1b[33m",
    "cyan": "\x1b[36m",
}

PASS_SYMBOL = "✓"
FAIL_SYMBOL = "✗"

CATEGORY_TITLES: Mapping[Category, str] = {
    Category.BUILD: "Hugo Build",
    Category.JSON: "search.json Output",
    Category.HTML: "HTML Output",
    Category.ASSETS: "Static Assets",
}


class ColorFormatter(logging.Formatter):
    """Formatter wrapping records in the ANSI color named by ``record.color``."""

    def __init__(self, fmt: str | None = None, *, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = getattr(record, "color", None)
        if not self.use_color or color not in COLORS:
            return message
        return f"{COLORS[color]}{message}{RESET}"


def supports_color(stream: TextIO) -> bool:
    """Whether ANSI colors should be written to ``stream``."""
    if "NO_COLOR" in os.environ:
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def create_report_logger(stream: TextIO | None = None) -> logging.Logger:
    """Create the logger the report is written through.

    Report records do not propagate to the root logger.
    """
    stream = stream if stream is not None else sys.stdout
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        ColorFormatter("%(message)s", use_color=supports_color(stream))
    )

    report_log = logging.getLogger(REPORT_LOGGER)
    report_log.handlers = [handler]
    report_log.setLevel(logging.INFO)
    report_log.propagate = False
    return report_log


def log_banner(log: logging.Logger) -> None:
    """Log the report heading."""
    log.info("╔═══════════════════════════════════════╗", extra={"color": "cyan"})
    log.info("║   DocFind Hugo Module - Test Suite    ║", extra={"color": "cyan"})
    log.info("╚═══════════════════════════════════════╝", extra={"color": "cyan"})


def log_results(
    log: logging.Logger, category_results: Sequence[CategoryResult]
) -> None:
    """Log every check, grouped by category, failures with their reason."""
    for category_result in category_results:
        title = CATEGORY_TITLES[category_result.category]
        log.info("")
        log.info("Testing %s...", title, extra={"color": "cyan"})

        for result in category_result.results:
            if result.passed:
                log.info("  %s %s", PASS_SYMBOL, result.label, extra={"color": "green"})
            else:
                log.info("  %s %s", FAIL_SYMBOL, result.label, extra={"color": "red"})
                log.info("    → %s", result.reason, extra={"color": "yellow"})


def log_summary(
    log: logging.Logger, category_results: Sequence[CategoryResult]
) -> None:
    """Log the pass/fail totals."""
    passed, failed = count_results(category_results)

    log.info("")
    log.info("═" * 39, extra={"color": "cyan"})
    if failed == 0:
        log.info(
            "%s All %d checks passed!", PASS_SYMBOL, passed, extra={"color": "green"}
        )
    else:
        log.info(
            "%s %d of %d checks failed",
            FAIL_SYMBOL,
            failed,
            passed + failed,
            extra={"color": "red"},
        )
