from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ("AED_WAIT_LANG", "AED_WAIT_MAX_ATTEMPTS", "AED_WAIT_BUILD"):
        monkeypatch.delenv(name, raising=False)
