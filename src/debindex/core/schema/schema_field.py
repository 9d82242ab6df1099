#!/usr/bin/env python3
"""
Purpose:
    Implements the SchemaField model: one entry of the schema catalog, pairing
    a control field name with the key it is stored under in index documents.
"""
from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from debindex.core.annotated_types import ControlFieldName, StoredKey, DescriptionText


class SchemaField(BaseModel):
    """
    One metadata field eligible for index storage.

    Example
    -------
    >>> f = SchemaField(name=" Installed-Size ", key="deb_installed_size",
    ...                 description="Estimated installed size in KiB")
    >>> f.name
    'Installed-Size'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: ControlFieldName = Field(..., description="Logical control field name (e.g. 'Pre-Depends').")
    key: StoredKey = Field(..., description="Key the value is stored under in the index document.")
    description: DescriptionText = Field(default="", description="Human-readable description.")

    def as_row(self) -> Dict[str, str]:
        """Flat representation used by listings and config files."""
        return {"name": self.name, "key": self.key, "description": self.description}
