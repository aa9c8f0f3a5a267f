"""Check orchestrator running the selected categories in order."""

import logging
from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from site_check.build import run_build
from site_check.builders.base import SiteBuilder
from site_check.layout import SiteLayout
from site_check.models.category import CATEGORY_ORDER, Category
from site_check.models.result import CategoryResult, CheckResult
from site_check.validators import VALIDATORS, ArtifactValidator

log = logging.getLogger(__name__)

VALIDATOR_BY_CATEGORY: Mapping[Category, type[ArtifactValidator[Any]]] = {
    validator.category: validator for validator in VALIDATORS
}


def select_categories(only: Category | None = None) -> Sequence[Category]:
    """Categories to run, in execution order."""
    if only is None:
        return CATEGORY_ORDER
    return (only,)


def count_results(category_results: Sequence[CategoryResult]) -> tuple[int, int]:
    """Count passed and failed checks across all categories."""
    passed = failed = 0
    for category_result in category_results:
        for result in category_result.results:
            if result.passed:
                passed += 1
            else:
                failed += 1
    return passed, failed


@dataclass(frozen=True, kw_only=True)
class CheckOrchestrator:
    """Runs the build and artifact checks one category at a time."""

    builder: SiteBuilder
    layout: SiteLayout

    async def run(self, categories: Collection[Category]) -> Sequence[CategoryResult]:
        """Run the given categories and collect their results.

        Categories always execute in the fixed order build, json, html,
        assets, regardless of the order they are passed in.

        Args:
            categories: Categories selected for this run

        Returns:
            One category result per selected category, in execution order

        """
        category_results: list[CategoryResult] = []

        for category in CATEGORY_ORDER:
            if category not in categories:
                continue

            log.info("Running %s checks", category)
            results = await self._run_category(category)
            log.info(
                "Finished %s checks: %d passed, %d failed",
                category,
                sum(1 for r in results if r.passed),
                sum(1 for r in results if not r.passed),
            )
            category_results.append(CategoryResult(category=category, results=results))

        return category_results

    async def _run_category(self, category: Category) -> Sequence[CheckResult]:
        if category is Category.BUILD:
            return [await run_build(self.builder, self.layout)]

        validator = VALIDATOR_BY_CATEGORY[category](layout=self.layout)
        return validator.validate()
