from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch) -> None:
    for key in ("STACKLITE_LOG_LEVEL", "STACKLITE_SOURCE_NAME"):
        monkeypatch.delenv(key, raising=False)
