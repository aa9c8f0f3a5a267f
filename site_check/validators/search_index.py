"""Validation of the search index document."""

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any, ClassVar, TypedDict

from site_check.layout import SiteLayout
from site_check.models.category import Category
from site_check.models.result import CheckResult, Precondition
from site_check.readers import read_json
from site_check.validators.base import (
    ArtifactValidator,
    PreconditionStep,
    require_exists,
)

REQUIRED_FIELDS = ("title", "href", "body")

# Hugo writes the separator as a JSON escape for ">", and minification may
# drop the surrounding spaces; any decoded ">" counts.
SECTION_SEPARATORS = (" > ", ">")

# Markup that must never survive text extraction, by kind.
HTML_LEAK_PATTERNS: Mapping[str, str] = {
    'id="': "id attribute",
    "<h2": "h2 tag",
}


class SearchIndexRecord(TypedDict):
    """One search index entry; extra fields are allowed and ignored."""

    title: str
    href: str
    body: str


def json_type_name(value: Any) -> str:
    """Name of the JSON type of a parsed value."""
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list():
            return "array"
        case _:
            return "object"


def field_value(record: Any, name: str) -> Any:
    """Raw value of a record field, None when absent or not an object."""
    if not isinstance(record, Mapping):
        return None
    return record.get(name)


def field_text(record: Any, name: str) -> str:
    """String value of a record field, empty when absent or not a string."""
    value = field_value(record, name)
    return value if isinstance(value, str) else ""


class SearchIndexValidator(ArtifactValidator[Sequence[SearchIndexRecord]]):
    """Checks the structure and content quality of ``search.json``."""

    category: ClassVar[Category] = Category.JSON

    def preconditions(self) -> Sequence[PreconditionStep]:
        return [self._exists, self._parse, self._is_array, self._has_entries]

    def checks(self) -> Sequence[Callable[[Sequence[SearchIndexRecord]], CheckResult]]:
        return [
            self.check_required_fields,
            self.check_href_is_relative,
            self.check_deep_links,
            self.check_section_titles,
            self.check_content_hygiene,
        ]

    def _exists(self, layout: SiteLayout) -> Precondition[Path]:
        return require_exists(
            layout.search_index,
            f"{layout.search_index_name} exists",
            "File not found. Run Hugo build first.",
        )

    def _parse(self, path: Path) -> Precondition[Any]:
        label = f"{self.layout.search_index_name} is valid JSON"
        try:
            data = read_json(path)
        except ValueError as e:
            return Precondition.unmet(label, str(e))
        return Precondition.met(label, data)

    def _is_array(self, data: Any) -> Precondition[list[Any]]:
        label = f"{self.layout.search_index_name} is array"
        if not isinstance(data, list):
            return Precondition.unmet(label, f"Got {json_type_name(data)}")
        return Precondition.met(label, data)

    def _has_entries(self, records: list[Any]) -> Precondition[list[Any]]:
        name = self.layout.search_index_name
        if not records:
            return Precondition.unmet(f"{name} has entries", "Array is empty")
        return Precondition.met(f"{name} has {len(records)} entries", records)

    @staticmethod
    def check_required_fields(records: Sequence[SearchIndexRecord]) -> CheckResult:
        first = records[0]
        present = first.keys() if isinstance(first, Mapping) else ()
        missing = [name for name in REQUIRED_FIELDS if name not in present]
        if missing:
            return CheckResult.fail(
                "Entry has required fields", f"Missing: {', '.join(missing)}"
            )
        return CheckResult.ok("Entries have required fields (title, href, body)")

    @staticmethod
    def check_href_is_relative(records: Sequence[SearchIndexRecord]) -> CheckResult:
        href = field_text(records[0], "href")
        if href.startswith("/"):
            return CheckResult.ok("href values are relative URLs")
        observed = field_value(records[0], "href")
        return CheckResult.fail("href is relative URL", f"Got: {observed}")

    @staticmethod
    def check_deep_links(records: Sequence[SearchIndexRecord]) -> CheckResult:
        if any("#" in field_text(record, "href") for record in records):
            return CheckResult.ok("Deep linking detected (href contains #)")
        return CheckResult.fail(
            "Deep linking",
            "No entries with anchors (#) found. "
            "Section splitting might be failing.",
        )

    @staticmethod
    def check_section_titles(records: Sequence[SearchIndexRecord]) -> CheckResult:
        if any(
            separator in field_text(record, "title")
            for record in records
            for separator in SECTION_SEPARATORS
        ):
            return CheckResult.ok("Section titles detected (Title > Section)")
        return CheckResult.fail(
            "Section titles", 'No entries with " > " separators found.'
        )

    @staticmethod
    def check_content_hygiene(records: Sequence[SearchIndexRecord]) -> CheckResult:
        bodies = [field_text(record, "body") for record in records]
        leaks = [
            kind
            for pattern, kind in HTML_LEAK_PATTERNS.items()
            if any(pattern in body for body in bodies)
        ]
        if leaks:
            return CheckResult.fail(
                "Content hygiene",
                f"Found raw HTML ({', '.join(leaks)}) in body content.",
            )
        return CheckResult.ok("Content is clean (No HTML attribute leakage)")
