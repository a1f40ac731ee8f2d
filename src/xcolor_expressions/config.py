"""
config.py.

Does: Env-overridable tunables for the default registry, rendering precision and
      name suggestions. Read at call time so tests can monkeypatch the env.
Used by: registry.registry (default presets, suggestion cutoff), render.formatting.
"""

from __future__ import annotations

import logging
import os

__all__ = [
    "MIN_PRECISION",
    "STD_PRECISION",
    "get_default_presets",
    "get_precision",
    "get_suggestion_cutoff",
]

log = logging.getLogger(__name__)

# ── Defaults ─────────────────────────────────────────────────────────────────
MIN_PRECISION = 2
STD_PRECISION = 3
DEFAULT_PRESETS = ("default",)
DEFAULT_SUGGESTION_CUTOFF = 75.0


def get_default_presets() -> tuple[str, ...]:
    """Does: Presets loaded into the process-wide registry (XCOLOR_PRESETS, comma-sep)."""
    raw = os.getenv("XCOLOR_PRESETS")
    if raw is None:
        return DEFAULT_PRESETS
    return tuple(p.strip() for p in raw.split(",") if p.strip())


def get_precision() -> int:
    """Does: Rendering precision (XCOLOR_PRECISION), floored at MIN_PRECISION."""
    raw = os.getenv("XCOLOR_PRECISION", "")
    if not raw.strip():
        return STD_PRECISION
    try:
        prec = int(raw)
    except ValueError:
        log.warning("Ignoring non-integer XCOLOR_PRECISION=%r", raw)
        return STD_PRECISION
    return max(prec, MIN_PRECISION)


def get_suggestion_cutoff() -> float:
    """Does: rapidfuzz score cutoff (0-100) for 'did you mean' hints."""
    raw = os.getenv("XCOLOR_SUGGESTION_CUTOFF", "")
    if not raw.strip():
        return DEFAULT_SUGGESTION_CUTOFF
    try:
        return float(raw)
    except ValueError:
        log.warning("Ignoring non-numeric XCOLOR_SUGGESTION_CUTOFF=%r", raw)
        return DEFAULT_SUGGESTION_CUTOFF
