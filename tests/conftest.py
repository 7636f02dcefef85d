"""Shared test fixtures for patlint.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "patlint"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def rules_file(tmp_path: Path) -> Path:
    """Write a small YAML rule set with one error rule and one warning rule."""
    path = tmp_path / "rules.yaml"
    path.write_text(
        "global-exclude-paths: ['vendor/**']\n"
        "rules:\n"
        "  - name: no-debugger\n"
        "    pattern: 'debugger;'\n"
        "    documentation: Remove debugger statements.\n"
        "  - name: no-todo\n"
        "    pattern: 'TODO'\n"
        "    severity: warning\n",
        encoding="utf-8",
    )
    return path
