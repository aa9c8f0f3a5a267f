"""Validation of the rendered root page.

The page is matched as plain text. Minification may drop attribute quotes
and escape slashes inside inline scripts, so each marker accepts every form
it can take.
"""

from collections.abc import Callable, Sequence
from typing import ClassVar

from site_check.layout import SiteLayout
from site_check.models.category import Category
from site_check.models.result import CheckResult, Precondition
from site_check.readers import read_text
from site_check.validators.base import (
    ArtifactValidator,
    PreconditionStep,
    require_exists,
)

CONTAINER_CLASS = ".docfind-container"
INPUT_ID = "docfind-input"
EXPANDABLE_ID = "docfind-expandable"
ARIA_LABEL = "aria-label="
MIN_ARIA_LABELS = 2


def has_id(html: str, element_id: str) -> bool:
    """Whether an element id appears, quoted or not."""
    return f'id="{element_id}"' in html or f"id={element_id}" in html


def has_reference(html: str, reference: str) -> bool:
    """Whether a path appears, literally or with JSON-escaped slashes."""
    return reference in html or reference.replace("/", "\\/") in html


class HtmlValidator(ArtifactValidator[str]):
    """Checks that the search widget was rendered into ``index.html``."""

    category: ClassVar[Category] = Category.HTML

    def preconditions(self) -> Sequence[PreconditionStep]:
        return [self._exists]

    def checks(self) -> Sequence[Callable[[str], CheckResult]]:
        return [
            self.check_styles,
            self.check_search_input,
            self.check_expandable_widget,
            self.check_script_import,
            self.check_module_import,
            self.check_aria_labels,
        ]

    def _exists(self, layout: SiteLayout) -> Precondition[str]:
        found = require_exists(
            layout.index_page,
            f"{layout.index_page_name} exists",
            "File not found. Run Hugo build first.",
        )
        if found.value is None:
            return Precondition(result=found.result)
        return Precondition(result=found.result, value=read_text(found.value))

    @staticmethod
    def check_styles(html: str) -> CheckResult:
        if CONTAINER_CLASS in html:
            return CheckResult.ok("DocFind CSS styles present")
        return CheckResult.fail(
            "DocFind CSS present", f"Missing {CONTAINER_CLASS} styles"
        )

    @staticmethod
    def check_search_input(html: str) -> CheckResult:
        if has_id(html, INPUT_ID):
            return CheckResult.ok("Inline search input present")
        return CheckResult.fail("Inline search input", f"Missing #{INPUT_ID}")

    @staticmethod
    def check_expandable_widget(html: str) -> CheckResult:
        if has_id(html, EXPANDABLE_ID):
            return CheckResult.ok("Expandable widget present")
        return CheckResult.fail("Expandable widget", f"Missing #{EXPANDABLE_ID}")

    def check_script_import(self, html: str) -> CheckResult:
        if has_reference(html, self.layout.script_reference):
            return CheckResult.ok("DocFind script import present")
        return CheckResult.fail(
            "DocFind script import", f"Missing {self.layout.script_name} import"
        )

    def check_module_import(self, html: str) -> CheckResult:
        if self.layout.module_name in html:
            return CheckResult.ok("WASM import present")
        return CheckResult.fail(
            "WASM import", f"Missing {self.layout.module_name} reference"
        )

    @staticmethod
    def check_aria_labels(html: str) -> CheckResult:
        count = html.count(ARIA_LABEL)
        if count >= MIN_ARIA_LABELS:
            return CheckResult.ok(f"Accessibility: {count} aria-label attributes found")
        return CheckResult.fail(
            "Accessibility",
            f"Only {count} aria-labels found (expected ≥{MIN_ARIA_LABELS})",
        )
