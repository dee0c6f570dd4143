"""
Shared fixtures for codegraph-lint tests.
"""

from collections.abc import Callable

import pytest

from codegraph_lint import Diagnostic, Linter, RestrictionEntry


@pytest.fixture
def lint() -> Callable[..., list[Diagnostic]]:
    """Lint a snippet with the given restriction options (plain dicts)."""

    def _lint(code: str, options: list[dict], file_path: str = "test.js") -> list[Diagnostic]:
        entries = [RestrictionEntry.model_validate(option) for option in options]
        return Linter(entries).lint_source(code, file_path).diagnostics

    return _lint


def pytest_collection_modifyitems(config, items):
    """Path based markers"""
    for item in items:
        if "test_linter" in item.nodeid or "test_extractor" in item.nodeid or "test_cli" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
