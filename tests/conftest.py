import os

import pytest

from jazzicon.settings import get_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch, tmp_path):
    """Isolate tests from JAZZICON_* variables and any .env in the cwd."""
    for key in list(os.environ):
        if key.upper().startswith("JAZZICON_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
