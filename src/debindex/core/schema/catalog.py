#!/usr/bin/env python3
"""
Purpose:
    Implements the SchemaCatalog: the fixed, ordered list of metadata fields
    that may be projected into an index document and read back from it.
    Also defines the Debian catalog and the separate checksum field.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from debindex.core.constants import FILENAME_FIELD
from debindex.core.schema.schema_field import SchemaField


class CatalogError(ValueError):
    """Raised when catalog entries collide on name or stored key."""


class SchemaCatalog:
    """
    Immutable, ordered collection of `SchemaField`s.

    Duplicate policy: names and stored keys must each be unique; a collision
    is an error (stored keys are persisted, so nothing may shadow another).
    Extension is additive only via `extend()`, which returns a new catalog.
    """

    def __init__(self, fields: Iterable[SchemaField]):
        self._fields: Tuple[SchemaField, ...] = tuple(fields)
        self._by_name: Dict[str, SchemaField] = {}
        self._by_key: Dict[str, SchemaField] = {}
        for f in self._fields:
            self._register(f)

    # --- Query API --- #

    def by_name(self, name: str) -> Optional[SchemaField]:
        """Return the field with this logical name, or None."""
        return self._by_name.get(name)

    def by_key(self, key: str) -> Optional[SchemaField]:
        """Return the field stored under this key, or None."""
        return self._by_key.get(key)

    def require(self, name: str) -> SchemaField:
        """Return the field by logical name or raise LookupError."""
        f = self.by_name(name)
        if f is None:
            raise LookupError(f"Schema field {name!r} not found")
        return f

    def names(self) -> List[str]:
        """Logical names in catalog order."""
        return [f.name for f in self._fields]

    def keys(self) -> List[str]:
        """Stored keys in catalog order."""
        return [f.key for f in self._fields]

    @property
    def fields(self) -> Tuple[SchemaField, ...]:
        return self._fields

    # --- Extension --- #

    def extend(self, fields: Iterable[SchemaField | Dict[str, Any]]) -> "SchemaCatalog":
        """
        Return a new catalog with `fields` appended after the existing ones.

        Raises:
            CatalogError: if an added field reuses an existing name or key.
            pydantic.ValidationError: if a dict entry is not a valid SchemaField.
        """
        extra = [f if isinstance(f, SchemaField) else SchemaField.model_validate(f) for f in fields]
        return SchemaCatalog([*self._fields, *extra])

    # --- Dunder --- #

    def __iter__(self) -> Iterator[SchemaField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"<SchemaCatalog fields={len(self._fields)}>"

    # --- Internals --- #

    def _register(self, f: SchemaField) -> None:
        if f.name in self._by_name:
            raise CatalogError(f"Duplicate schema field name {f.name!r}")
        if f.key in self._by_key:
            raise CatalogError(
                f"Stored key {f.key!r} of {f.name!r} is already used by {self._by_key[f.key].name!r}"
            )
        self._by_name[f.name] = f
        self._by_key[f.key] = f


# --- Debian catalog --- #

# (name, stored key, description) in stored-field write order
_DEBIAN_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("Package", "deb_package", "Binary package name"),
    ("Architecture", "deb_architecture", "Architecture the package is built for"),
    ("Installed-Size", "deb_installed_size", "Estimated installed size in KiB"),
    ("Maintainer", "deb_maintainer", "Package maintainer name and email"),
    ("Version", "deb_version", "Package version"),
    ("Depends", "deb_depends", "Absolute dependencies"),
    ("Pre-Depends", "deb_pre_depends", "Dependencies required before unpacking"),
    ("Provides", "deb_provides", "Virtual packages provided"),
    ("Recommends", "deb_recommends", "Strong, non-absolute dependencies"),
    ("Suggests", "deb_suggests", "Optional related packages"),
    ("Enhances", "deb_enhances", "Packages this package enhances"),
    ("Breaks", "deb_breaks", "Packages broken by this package"),
    ("Conflicts", "deb_conflicts", "Packages that cannot be installed alongside"),
    ("Replaces", "deb_replaces", "Packages whose files this package overwrites"),
    ("Section", "deb_section", "Archive section"),
    ("Priority", "deb_priority", "Installation priority"),
    ("Description", "deb_description", "Synopsis and extended description"),
    (FILENAME_FIELD, "deb_filename", "Repository-relative path of the package file"),
)

CHECKSUM_FIELD = SchemaField(name="MD5sum", key="deb_md5", description="MD5 checksum of the package file")


def build_debian_catalog() -> SchemaCatalog:
    """Construct the fixed Debian metadata catalog."""
    return SchemaCatalog(
        SchemaField(name=name, key=key, description=desc) for name, key, desc in _DEBIAN_FIELDS
    )
