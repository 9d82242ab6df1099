#!/usr/bin/env python3
"""
Purpose:
    Implements the FieldMapper, the bidirectional projection between parsed
    control metadata and index-document fields.

    Forward:  record + package type + relative path + checksum -> DocumentFields
    Reverse:  stored document -> MetadataReadback(attributes, checksum, recognized)

Only catalog fields are projected; other parsed keys are dropped on the
forward path. Both directions are no-ops for other package formats.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Protocol, Tuple

from debindex.core.constants import DEB_EXTENSION, DEB_PACKAGE_TYPE, FILENAME_FIELD
from debindex.core.schema.catalog import CHECKSUM_FIELD, CatalogError, SchemaCatalog, build_debian_catalog
from debindex.core.schema.schema_field import SchemaField

logger = logging.getLogger(__name__)


class DocumentReader(Protocol):
    """Read accessor over an opaque stored document."""

    def get(self, key: str) -> Optional[str]: ...


class DocumentFields:
    """Immutable, ordered (stored key, value) pairs produced by the forward path."""

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()):
        self._pairs: Tuple[Tuple[str, str], ...] = tuple(pairs)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        for k, v in self._pairs:
            if k == key:
                return v
        return default

    def keys(self) -> List[str]:
        return [k for k, _ in self._pairs]

    def to_dict(self) -> Dict[str, str]:
        return dict(self._pairs)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentFields):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        return f"DocumentFields({list(self._pairs)!r})"


@dataclass(frozen=True)
class MetadataReadback:
    """Result of the reverse path."""
    attributes: Dict[str, str] = field(default_factory=dict)
    checksum: Optional[str] = None
    recognized: bool = False


class FieldMapper:
    """
    Maps metadata to document fields and back, for one package format.

    Args:
        catalog: fields eligible for storage; defaults to the Debian catalog.
        package_type: packaging label the forward path accepts.
        extension: file extension the reverse path uses to recognize documents.
        checksum_field: field the checksum is stored under, outside the catalog.
    """

    def __init__(
        self,
        catalog: Optional[SchemaCatalog] = None,
        *,
        package_type: str = DEB_PACKAGE_TYPE,
        extension: str = DEB_EXTENSION,
        checksum_field: SchemaField = CHECKSUM_FIELD,
    ):
        self._catalog = catalog if catalog is not None else build_debian_catalog()
        self._filename_field = self._catalog.require(FILENAME_FIELD)
        if self._catalog.by_key(checksum_field.key) is not None:
            raise CatalogError(f"Checksum key {checksum_field.key!r} collides with a catalog field")
        self._package_type = package_type
        self._extension = extension
        self._checksum_field = checksum_field

    # --- Properties --- #

    @property
    def catalog(self) -> SchemaCatalog:
        return self._catalog

    @property
    def package_type(self) -> str:
        return self._package_type

    @property
    def extension(self) -> str:
        return self._extension

    @property
    def checksum_field(self) -> SchemaField:
        return self._checksum_field

    # --- Forward path --- #

    def to_document_fields(
        self,
        record: Mapping[str, Optional[str]],
        package_type: Optional[str],
        relative_path: Optional[str],
        checksum: Optional[str] = None,
    ) -> DocumentFields:
        """
        Project a metadata mapping into stored document fields.

        The Filename field always comes from `relative_path`, never from `record`.
        Absent or None values are omitted; the checksum follows the catalog fields.
        Returns an empty DocumentFields when `package_type` is not this format.
        """
        if package_type != self._package_type:
            logger.debug("Skipping forward mapping for package type %r", package_type)
            return DocumentFields()

        values = dict(record)
        values[FILENAME_FIELD] = relative_path

        pairs: List[Tuple[str, str]] = []
        for f in self._catalog:
            value = values.get(f.name)
            if value is not None:
                pairs.append((f.key, value))

        if checksum:
            pairs.append((self._checksum_field.key, checksum))

        return DocumentFields(pairs)

    # --- Reverse path --- #

    def is_recognized(self, document: DocumentReader) -> bool:
        """True if the document's stored filename ends with this format's extension."""
        filename = document.get(self._filename_field.key)
        return isinstance(filename, str) and filename.endswith(self._extension)

    def to_metadata(self, document: DocumentReader) -> MetadataReadback:
        """
        Rebuild the metadata mapping and checksum from a stored document.

        Missing stored fields leave the logical key absent; no defaults are filled in.
        """
        if not self.is_recognized(document):
            return MetadataReadback()

        attributes: Dict[str, str] = {}
        for f in self._catalog:
            value = document.get(f.key)
            if value is not None:
                attributes[f.name] = value

        return MetadataReadback(
            attributes=attributes,
            checksum=document.get(self._checksum_field.key),
            recognized=True,
        )
