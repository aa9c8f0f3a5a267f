"""CLI entry point for the site artifact checks."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from site_check.builders.base import SiteBuilder
from site_check.builders.loading import BuilderNotFoundError, create_builder
from site_check.config import BuilderSettings, HarnessConfig, load_config
from site_check.layout import SiteLayout
from site_check.models.category import Category
from site_check.orchestrator import CheckOrchestrator, count_results, select_categories
from site_check.report import create_report_logger, log_banner, log_results, log_summary


def resolve_config(
    config_path: Path | None,
    site_root: Path | None = None,
    builder_key: str | None = None,
) -> HarnessConfig:
    """Load configuration and apply command line overrides.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist
        ValueError: If the configuration file is invalid

    """
    config = load_config(config_path) if config_path else HarnessConfig()

    updates: dict[str, object] = {}
    if site_root is not None:
        updates["site_root"] = site_root
    if builder_key is not None and builder_key != config.builder.key:
        updates["builder"] = BuilderSettings(key=builder_key)

    return config.model_copy(update=updates) if updates else config


async def run(
    builder: SiteBuilder,
    layout: SiteLayout,
    categories: Sequence[Category],
    report_log: logging.Logger,
) -> int:
    """Run the selected checks, report them and return the exit code."""
    log = logging.getLogger("site_check")
    log.info(
        "Checking %s (categories: %s)",
        layout.site_root,
        ", ".join(categories),
    )

    orchestrator = CheckOrchestrator(builder=builder, layout=layout)
    category_results = await orchestrator.run(categories)

    log_banner(report_log)
    log_results(report_log, category_results)
    log_summary(report_log, category_results)

    _, failed = count_results(category_results)
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="site-check",
        description="Build the example site and verify the generated artifacts",
    )
    parser.add_argument(
        "--only",
        type=Category,
        choices=list(Category),
        default=None,
        metavar="{" + ",".join(Category) + "}",
        help="Run only the checks of this category",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--site-root",
        type=Path,
        default=None,
        help="Example site project root (overrides the configuration)",
    )
    parser.add_argument(
        "--builder",
        default=None,
        help="Builder key (overrides the configuration, e.g. hugo)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = resolve_config(args.config, args.site_root, args.builder)
        builder = create_builder(config.builder)
    except (FileNotFoundError, ValueError, BuilderNotFoundError) as e:
        parser.error(str(e))

    exit_code = asyncio.run(
        run(
            builder=builder,
            layout=SiteLayout.from_config(config),
            categories=select_categories(args.only),
            report_log=create_report_logger(),
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
