#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types and normalization helpers for debindex's
    Pydantic models: control field names, stored keys, and description text.
"""

from typing import Any, Annotated
from pydantic import BeforeValidator

from debindex.core.constants import STORED_KEY_ALLOWED_RE
from debindex.core.utils import is_valid_control_field_name, is_valid_stored_key


# --- Normalizers --- #

def _normalize_control_field_name(v: Any) -> str:
    """
    Normalize a control field name:
    - coerce to str
    - strip surrounding whitespace
    - preserve case (control field names are compared case-sensitively here)
    - reject spaces, colons, and a leading '#' or '-'
    """
    text = "" if v is None else str(v).strip()
    if not text:
        raise ValueError("Invalid field name: must be a non-empty string")
    if not is_valid_control_field_name(text):
        raise ValueError(f"Invalid field name: {text!r} is not a legal control field name")
    return text


def _normalize_stored_key(v: Any) -> str:
    """
    Normalize a stored document key:
    - coerce to str
    - strip surrounding whitespace
    - validate via fullmatch against STORED_KEY_ALLOWED_RE (no lowercasing)
    """
    text = "" if v is None else str(v).strip()
    if not text:
        raise ValueError("Invalid stored key: must be a non-empty string")
    if not is_valid_stored_key(text):
        raise ValueError(
            f"Invalid stored key: {text!r}. Allowed pattern: {STORED_KEY_ALLOWED_RE.pattern!r}"
        )
    return text


def _normalize_description(v: Any) -> str:
    """None -> empty string; otherwise trimmed text."""
    return "" if v is None else str(v).strip()


# --- Reusable Annotated types --- #

ControlFieldName = Annotated[str, BeforeValidator(_normalize_control_field_name)]
StoredKey = Annotated[str, BeforeValidator(_normalize_stored_key)]
DescriptionText = Annotated[str, BeforeValidator(_normalize_description)]
