"""Models for check results."""

from collections.abc import Sequence
from dataclasses import dataclass

from site_check.models.category import Category


@dataclass(frozen=True, kw_only=True)
class CheckResult:
    """Outcome of a single named check.

    ``reason`` is only set for failures.
    """

    passed: bool
    label: str
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.passed and self.reason is not None:
            raise ValueError("A passing check must not carry a reason")
        if not self.passed and not self.reason:
            raise ValueError("A failing check requires a reason")

    @classmethod
    def ok(cls, label: str) -> "CheckResult":
        """Create a passing result."""
        return cls(passed=True, label=label)

    @classmethod
    def fail(cls, label: str, reason: str) -> "CheckResult":
        """Create a failing result."""
        return cls(passed=False, label=label, reason=reason)


@dataclass(frozen=True, kw_only=True)
class Precondition[T]:
    """Result of a gating check together with the value it unlocks.

    When ``result`` fails, ``value`` is None and the remaining checks of the
    category are skipped.
    """

    result: CheckResult
    value: T | None = None

    @classmethod
    def met(cls, label: str, value: T) -> "Precondition[T]":
        """Create a satisfied precondition carrying the value for the next step."""
        return cls(result=CheckResult.ok(label), value=value)

    @classmethod
    def unmet(cls, label: str, reason: str) -> "Precondition[T]":
        """Create a failed precondition."""
        return cls(result=CheckResult.fail(label, reason))


@dataclass(frozen=True, kw_only=True)
class CategoryResult:
    """Results of one category, in the order the checks ran."""

    category: Category
    results: Sequence[CheckResult]
