#!/usr/bin/env python3
"""
Purpose:
    Collects non-fatal errors raised while processing one artifact, and pairs
    a primary value with those diagnostics as an `Outcome`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")


class Diagnostics:
    def __init__(self):
        self.errors: List[str] = []

    def add(self, message: str):
        self.errors.append(message)

    def extend(self, other: "Diagnostics"):
        """Append the messages of `other` in order."""
        self.errors.extend(other.errors)

    def is_ok(self) -> bool:
        return not self.errors

    def __len__(self):
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def __repr__(self):
        return f"<Diagnostics ok={self.is_ok()} errors={len(self.errors)}>"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """A primary value plus the non-fatal diagnostics gathered while producing it."""
    value: T
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def ok(self) -> bool:
        return self.diagnostics.is_ok()
