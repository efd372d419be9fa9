from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from resultvalue.logging import ROOT_LOGGER
from resultvalue.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Each test reads settings from its own environment."""
    for var in ("RESULTVALUE_UNWRAP_MESSAGE", "RESULTVALUE_PAYLOAD_REPR_LIMIT", "RESULTVALUE_DEBUG",
                "RESULTVALUE_LOG_LEVEL", "RESULTVALUE_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers installed by configure_logging."""
    yield
    root = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in root.handlers if getattr(h, "_resultvalue", False)]:
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
