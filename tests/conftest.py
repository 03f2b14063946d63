"""Pytest configuration for test isolation.

Settings are read from the environment (and a local ``.env``), so a
developer's shell could leak a real ``DATABASE_URL`` or display limit into
the tests. An autouse fixture clears those variables for every test and
drops cached SQLAlchemy engines afterwards so each test's SQLite file is
released.
"""

from __future__ import annotations

import pytest
from db.client import dispose_engines

_ENV_VARS = (
    "DATABASE_URL",
    "TM_DISPLAY_LIMIT",
    "TM_DECIMAL_SEPARATOR",
    "TM_THOUSANDS_SEPARATOR",
    "TRANSMAILIFIER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    dispose_engines()
