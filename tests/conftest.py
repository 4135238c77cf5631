from __future__ import annotations

import pytest

from svcs.core import StoreContext


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Prevent a developer's SVCS_* environment from influencing tests."""

    monkeypatch.setenv("SVCS_DEBUG", "")
    monkeypatch.setenv("SVCS_PROJECT_ROOT", str(tmp_path / "work"))


@pytest.fixture
def work_dir(tmp_path):
    """Create an empty working directory."""
    work = tmp_path / "work"
    work.mkdir()
    return work


@pytest.fixture
def context(work_dir):
    """Create a store layout inside the working directory."""
    return StoreContext.open(work_dir)
