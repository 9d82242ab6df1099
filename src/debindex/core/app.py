#!/usr/bin/env python3
"""
Purpose:
    Provides a module-level accessor for the debindex AppContext, with optional
    reload and configuration override.
"""
from typing import Optional, Dict, Any

from debindex.core.app_context import AppContext, build_context

# --- Module state --- #

_CTX: Optional[AppContext] = None


# --- Public API --- #

def get_context(
    *,
    force_reload: bool = False,
    config_override: Optional[Dict[str, Any]] = None,
) -> AppContext:
    """
    Return the process-wide `AppContext`.

    Args:
        force_reload:
            If True, rebuilds the context even if one is already cached.
        config_override:
            Optional configuration dict to use instead of `load_config()`.
    """
    global _CTX
    if _CTX is None or force_reload or config_override:
        _CTX = build_context(config=config_override)
    return _CTX
