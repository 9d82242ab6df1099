#!/usr/bin/env python3
"""
Formatting helpers for debindex.

- One-line messages for Pydantic v2 `ValidationError`s raised while building
  catalog entries from configuration.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Sequence


# --- Public API --- #

def format_pydantic_errors_simple(exc: Exception, prefix: str = "") -> List[str]:
    """
    Return stable one-line messages from a Pydantic v2 ValidationError.

    Example:
        extra_fields[1].key: Value error, Invalid stored key: 'Bad Key'...

    `prefix` is prepended to each location (e.g. "extra_fields[1]").
    Falls back to the first line of str(exc) if `exc.errors()` isn't available.
    """
    errors: Sequence[dict[str, Any]] | None = None

    errors_fn = getattr(exc, "errors", None)
    if callable(errors_fn):
        try:
            errors = errors_fn()
        except (TypeError, ValueError, RuntimeError):
            errors = None

    if not errors:
        first = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
        return [f"{prefix}: {first}" if prefix else first]

    return [f"{_format_error_loc(err.get('loc', ()), prefix)}: {err.get('msg', 'Validation error')}" for err in errors]


# --- Internals --- #

def _format_error_loc(loc: Iterable[Any], prefix: str = "") -> str:
    """
    Convert a Pydantic error `loc` tuple into a dotted path with index suffixes.

    Examples:
        ('key',), prefix='extra_fields[0]' -> "extra_fields[0].key"
        (0, 'name')                        -> "[0].name"
        ()                                 -> "<root>"
    """
    parts: List[str] = [prefix] if prefix else []
    for seg in loc:
        if isinstance(seg, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{seg}]"
            else:
                parts.append(f"[{seg}]")
        else:
            parts.append(str(seg))
    return ".".join(parts) if parts else "<root>"
