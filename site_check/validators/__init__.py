"""Validators, one per artifact category."""

from typing import Any

from site_check.validators.assets import AssetValidator
from site_check.validators.base import ArtifactValidator
from site_check.validators.html import HtmlValidator
from site_check.validators.search_index import SearchIndexValidator

VALIDATORS: tuple[type[ArtifactValidator[Any]], ...] = (
    SearchIndexValidator,
    HtmlValidator,
    AssetValidator,
)

__all__ = [
    "VALIDATORS",
    "ArtifactValidator",
    "AssetValidator",
    "HtmlValidator",
    "SearchIndexValidator",
]
