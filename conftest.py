"""Pytest configuration for shared actions tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parent
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

# Runner variables that would leak into tests when the suite itself runs in CI.
_RUNNER_ENV = (
    "GITHUB_OUTPUT",
    "GITHUB_STEP_SUMMARY",
    "GITHUB_REPOSITORY",
    "GITHUB_API_URL",
    "INPUT_COMMIT",
    "INPUT_GITHUB_TOKEN",
    "INPUT_TAG_FORMAT",
    "INPUT_RELEASE_NAME",
)


@pytest.fixture(autouse=True)
def _isolate_runner_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide the outer workflow's runner variables from each test."""
    for name in _RUNNER_ENV:
        monkeypatch.delenv(name, raising=False)
