#!/usr/bin/env python3
"""
Purpose:
    Minimal in-memory index document: an ordered list of stored fields with
    read (`get`) and write (`add`) accessors, plus YAML load/dump helpers.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Protocol, Tuple, Union

import yaml

from debindex.core.constants import DEFAULT_TEXT_ENCODING


class DocumentWriter(Protocol):
    """Write accessor the forward path adds stored fields through."""

    def add(self, key: str, value: str) -> None: ...


class IndexDocument:
    """
    Ordered stored fields. A key may be added more than once; `get` returns the
    first value, matching how index engines read single-valued stored fields.

    Typical use:
        >>> doc = IndexDocument()
        >>> doc.add("deb_package", "hello")
        >>> doc.get("deb_package")
        'hello'
    """

    def __init__(self, fields: Optional[Dict[str, Any]] = None):
        self._fields: List[Tuple[str, str]] = []
        for k, v in (fields or {}).items():
            if v is not None:
                self.add(k, v)

    # --- Accessors --- #

    def add(self, key: str, value: str) -> None:
        self._fields.append((str(key), str(value)))

    def get(self, key: str) -> Optional[str]:
        for k, v in self._fields:
            if k == key:
                return v
        return None

    def to_dict(self) -> Dict[str, str]:
        out: Dict[str, str] = {}
        for k, v in self._fields:
            out.setdefault(k, v)
        return out

    # --- IO --- #

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "IndexDocument":
        """
        Load stored fields from a YAML mapping file.

        Raises:
            FileNotFoundError: if the file does not exist
            ValueError: if the file does not hold a mapping
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"The file {str(p)!r} does not exist")
        data = yaml.safe_load(p.read_text(encoding=DEFAULT_TEXT_ENCODING)) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{p.name!r} must contain a mapping of stored fields")
        return cls(data)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)

    # --- Dunder --- #

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"<IndexDocument fields={len(self._fields)}>"
