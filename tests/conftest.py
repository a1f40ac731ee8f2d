# tests/conftest.py
from __future__ import annotations

import pytest

from xcolor_expressions.registry import ColorRegistry, reset_default_registry
from xcolor_expressions.utils import clear_config_cache, reload_topics


@pytest.fixture(autouse=True)
def _isolate_env_and_caches(monkeypatch):
    """Does: Clear env overrides, data cache, debug topics and the shared registry."""
    for var in (
        "XCOLOR_DATA_DIR",
        "DATA_DIR",
        "XCOLOR_PRESETS",
        "XCOLOR_PRECISION",
        "XCOLOR_SUGGESTION_CUTOFF",
        "XCOLOR_DEBUG_TOPICS",
    ):
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()
    reload_topics()
    reset_default_registry()
    yield
    reset_default_registry()


@pytest.fixture
def registry() -> ColorRegistry:
    """Does: Fresh registry holding the 'default' preset only."""
    return ColorRegistry(["default"])
