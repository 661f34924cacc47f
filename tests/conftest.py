import pytest

from regionbox.base.runtime import get_settings
from regionbox.registries.m49_regions import reload_aliases


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    monkeypatch.delenv("REGIONBOX_EXTRA_ALIASES", raising=False)
    monkeypatch.delenv("REGIONBOX_DEBUG", raising=False)
    get_settings(force_reload=True)
    reload_aliases()
    yield
    monkeypatch.undo()
    get_settings(force_reload=True)
    reload_aliases()
