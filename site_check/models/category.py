"""Check categories selectable from the command line."""

from enum import StrEnum


class Category(StrEnum):
    """Independent group of checks run against one artifact type."""

    BUILD = "build"
    JSON = "json"
    HTML = "html"
    ASSETS = "assets"


# Execution order is fixed: later categories read what the build produced.
CATEGORY_ORDER: tuple[Category, ...] = (
    Category.BUILD,
    Category.JSON,
    Category.HTML,
    Category.ASSETS,
)
