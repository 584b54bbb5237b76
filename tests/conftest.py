import os

import pytest


@pytest.fixture(autouse=True)
def _clean_log_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MTL_* variables from the developer shell out of settings tests."""
    for env_key in list(os.environ):
        if env_key.startswith("MTL_"):
            monkeypatch.delenv(env_key)
