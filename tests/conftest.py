"""Pytest configuration for the catalogbridge test suite.

Hypothesis profile is "ci" when CI=true, "dev" otherwise; HYPOTHESIS_PROFILE
overrides both. Tests marked fuzz only run with ``pytest -m fuzz``.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import settings

settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)

_profile = os.environ.get("HYPOTHESIS_PROFILE")
if _profile not in ("dev", "ci"):
    _profile = "ci" if os.environ.get("CI") == "true" else "dev"
settings.load_profile(_profile)


def pytest_configure(config: pytest.Config) -> None:
    """Register the fuzz marker."""
    config.addinivalue_line("markers", "fuzz: reconciliation fuzzing, run with -m fuzz")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless selected with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Root directory for a project tree written with write_project()."""
    return tmp_path / "project"
