"""Shared pytest configuration for the storefront test suite.

Tests pick up a default marker from the top-level directory they live in
(`tests/unit/` gets `unit`, and so on), unless they already carry it.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = {
    "unit": pytest.mark.unit,
    "contract": pytest.mark.contract,
    "e2e": pytest.mark.e2e,
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default marker for each item's top-level test directory."""
    for item in items:
        try:
            relative = item.path.resolve().relative_to(TESTS_ROOT)
        except ValueError:
            continue
        mark = DIRECTORY_MARKERS.get(relative.parts[0])
        if mark is None:
            continue
        if not any(marker.name == mark.name for marker in item.iter_markers()):
            item.add_marker(mark)
