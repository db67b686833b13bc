from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Settings are read from MDBUILD_* variables; keep tests independent of the shell
    for key in list(os.environ):
        if key.upper().startswith("MDBUILD_"):
            monkeypatch.delenv(key)
