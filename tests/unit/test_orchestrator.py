"""Tests for the check orchestrator."""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from site_check.builders.base import BuildOutput, SiteBuilder
from site_check.layout import SiteLayout
from site_check.models.category import Category
from site_check.models.result import CategoryResult, CheckResult
from site_check.orchestrator import CheckOrchestrator, count_results, select_categories
from site_check.testing.factories import CheckResultFactory, FailedCheckResultFactory
from site_check.testing.site import write_assets, write_site


@pytest.fixture
def builder_mock(layout: SiteLayout) -> Mock:
    """Create mock builder that writes a complete site."""
    builder = Mock(spec=SiteBuilder)

    async def build(site_root: object) -> BuildOutput:
        write_site(layout)
        return BuildOutput()

    builder.build = AsyncMock(side_effect=build)
    return builder


@pytest.fixture
def orchestrator(builder_mock: Mock, layout: SiteLayout) -> CheckOrchestrator:
    """Create orchestrator with mock builder."""
    return CheckOrchestrator(builder=builder_mock, layout=layout)


async def test_runs_all_categories_in_order(orchestrator: CheckOrchestrator) -> None:
    """Categories run build, json, html, assets regardless of input order."""
    results = await orchestrator.run(
        [Category.ASSETS, Category.HTML, Category.JSON, Category.BUILD]
    )

    assert [r.category for r in results] == [
        Category.BUILD,
        Category.JSON,
        Category.HTML,
        Category.ASSETS,
    ]
    assert all(check.passed for r in results for check in r.results)


async def test_total_equals_sum_of_categories(orchestrator: CheckOrchestrator) -> None:
    """The totals count every reported check."""
    results = await orchestrator.run(select_categories())

    passed, failed = count_results(results)

    assert failed == 0
    assert passed == sum(len(r.results) for r in results) == 1 + 9 + 7 + 3


async def test_filtered_category_without_output(
    orchestrator: CheckOrchestrator, builder_mock: Mock
) -> None:
    """Skipping the build leaves missing artifacts as one failure each."""
    for category in (Category.JSON, Category.HTML, Category.ASSETS):
        results = await orchestrator.run(select_categories(category))

        assert len(results) == 1
        assert len(results[0].results) == 1
        assert not results[0].results[0].passed

    builder_mock.build.assert_not_called()


async def test_build_failure_does_not_stop_other_categories(
    orchestrator: CheckOrchestrator, builder_mock: Mock, layout: SiteLayout
) -> None:
    """Later categories still run and report missing files."""
    builder_mock.build.side_effect = None
    write_assets(layout)

    results = await orchestrator.run(select_categories())

    assert len(results) == 4
    assert results[0].results == [
        CheckResult.fail("Hugo build", "public/ directory not created")
    ]
    assert not results[1].results[0].passed
    assert not results[2].results[0].passed
    assert all(check.passed for check in results[3].results)


async def test_idempotent_runs(
    orchestrator: CheckOrchestrator, layout: SiteLayout
) -> None:
    """The same filter against unchanged artifacts gives the same results."""
    write_site(layout)

    first = await orchestrator.run(select_categories(Category.HTML))
    second = await orchestrator.run(select_categories(Category.HTML))

    assert first == second


async def test_validators_receive_layout(orchestrator: CheckOrchestrator) -> None:
    """Artifact categories are delegated to their validator."""
    expected = [CheckResultFactory.build()]

    with patch(
        "site_check.orchestrator.VALIDATOR_BY_CATEGORY",
        {Category.JSON: Mock(return_value=Mock(validate=Mock(return_value=expected)))},
    ) as validators:
        results = await orchestrator.run([Category.JSON])

    assert results == [CategoryResult(category=Category.JSON, results=expected)]
    validators[Category.JSON].assert_called_once_with(layout=orchestrator.layout)


def test_select_categories() -> None:
    """Without a filter every category is selected, in order."""
    assert list(select_categories()) == ["build", "json", "html", "assets"]
    assert list(select_categories(Category.HTML)) == [Category.HTML]


def test_count_results() -> None:
    """Counts passes and failures across categories."""
    category_results = [
        CategoryResult(
            category=Category.BUILD, results=[FailedCheckResultFactory.build()]
        ),
        CategoryResult(
            category=Category.ASSETS,
            results=CheckResultFactory.batch(2) + [FailedCheckResultFactory.build()],
        ),
    ]

    assert count_results(category_results) == (2, 2)
    assert count_results([]) == (0, 0)
