from __future__ import annotations

import logging
import os
from typing import Optional

DEBUG_PY_TRACE_ENV = "GEXP_DEBUG_PY_TRACE"
LOG_LEVEL_ENV = "GEXP_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}

def debug_py_trace_enabled() -> bool:
    """True when errors should also print the Python traceback."""
    return os.environ.get(DEBUG_PY_TRACE_ENV, "").strip().lower() in _TRUTHY

def set_debug_py_trace(enabled: bool) -> None:
    if enabled:
        os.environ[DEBUG_PY_TRACE_ENV] = "1"
    else:
        os.environ.pop(DEBUG_PY_TRACE_ENV, None)

def log_level() -> Optional[int]:
    """Level named by GEXP_LOG_LEVEL, or None when unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return None

    level = logging.getLevelName(name)
    return level if isinstance(level, int) else None

def configure_logging() -> None:
    level = log_level()
    if level is None:
        return

    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
