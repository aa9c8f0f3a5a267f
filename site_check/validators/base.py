"""Abstract base class for artifact validators."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

from site_check.layout import SiteLayout
from site_check.models.category import Category
from site_check.models.result import CheckResult, Precondition

type PreconditionStep = Callable[[Any], Precondition[Any]]


@dataclass(frozen=True, kw_only=True)
class ArtifactValidator[T](ABC):
    """Ordered checks against one artifact type.

    Validation runs in two phases. Preconditions form a chain: each step
    receives the value unlocked by the previous one (the layout for the
    first), and the first unmet precondition ends the category. Checks then
    run independently against the final value of type T, and every one of
    them is reported.
    """

    category: ClassVar[Category]

    layout: SiteLayout

    @abstractmethod
    def preconditions(self) -> Sequence[PreconditionStep]:
        """Gating steps, in order."""

    @abstractmethod
    def checks(self) -> Sequence[Callable[[T], CheckResult]]:
        """Independent checks run once all preconditions are met."""

    def validate(self) -> Sequence[CheckResult]:
        """Run all preconditions and checks, returning results in order."""
        results: list[CheckResult] = []

        value: Any = self.layout
        for step in self.preconditions():
            outcome = step(value)
            results.append(outcome.result)
            if not outcome.result.passed:
                return results
            value = outcome.value

        results.extend(check(value) for check in self.checks())
        return results


def require_exists(path: Path, label: str, reason: str) -> Precondition[Path]:
    """Gate on ``path`` existing, unlocking the path itself."""
    if not path.exists():
        return Precondition.unmet(label, reason)
    return Precondition.met(label, path)
