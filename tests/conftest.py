"""Shared fixtures."""

from collections.abc import Iterator

import pytest
import structlog
from fakes import FakeDiscLibrary

from cdidc.config import get_settings
from cdidc.metadata import libdiscid


@pytest.fixture
def disc_library(monkeypatch: pytest.MonkeyPatch) -> FakeDiscLibrary:
    """Replace the discid binding with a fake that reads a fixed disc."""
    library = FakeDiscLibrary()
    monkeypatch.setattr(libdiscid, "_load_library", lambda: library)
    return library


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the environment out of cached settings and logging config."""
    for name in ("CDIDC_DEVICE", "CDIDC_BROWSER", "CDIDC_LOG_LEVEL", "CDIDC_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
