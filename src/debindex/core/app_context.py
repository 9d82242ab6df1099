#!/usr/bin/env python3
"""
Purpose:
    Wires together the debindex application context: merged configuration,
    the schema catalog (with any configured extra fields), the field mapper,
    and the Debian index creator backed by local-file collaborators.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from debindex.core.config import load_config
from debindex.core.formatting import format_pydantic_errors_simple
from debindex.core.indexer import DebianIndexCreator
from debindex.core.log import configure_logging
from debindex.core.mapping.field_mapper import FieldMapper
from debindex.core.schema.catalog import SchemaCatalog, build_debian_catalog
from debindex.core.schema.schema_field import SchemaField
from debindex.io.checksum_locator import locate_checksum
from debindex.io.deb_archive import read_control_lines


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration, catalog, mapper, and creator."""
    config: Dict[str, Any]
    catalog: SchemaCatalog
    mapper: FieldMapper
    creator: DebianIndexCreator


# --- Factory --- #

def build_context(*, config: Optional[Dict[str, Any]] = None, setup_logging: bool = True) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        setup_logging:
            If True, configures the `debindex` logger from `config['logging']['level']`.

    Raises:
        ValueError: if `extra_fields` holds invalid catalog entries.
        CatalogError: if an extra field collides with an existing name or key.
    """
    cfg = config or load_config()

    if setup_logging:
        configure_logging(cfg.get("logging", {}).get("level", "WARNING"))

    catalog = build_debian_catalog().extend(_extra_fields(cfg.get("extra_fields") or []))

    kwargs: Dict[str, Any] = {}
    if cfg.get("package_type"):
        kwargs["package_type"] = cfg["package_type"]
    if cfg.get("extension"):
        kwargs["extension"] = cfg["extension"]
    mapper = FieldMapper(catalog, **kwargs)

    locator = partial(locate_checksum, suffix=cfg.get("checksum_suffix") or ".md5")
    creator = DebianIndexCreator(mapper, control_provider=read_control_lines, checksum_locator=locator)

    return AppContext(config=cfg, catalog=catalog, mapper=mapper, creator=creator)


# --- Internals --- #

def _extra_fields(entries: List[Dict[str, Any]]) -> List[SchemaField]:
    """Validate configured extra fields, collecting every problem before raising."""
    fields: List[SchemaField] = []
    errors: List[str] = []
    for i, entry in enumerate(entries):
        try:
            fields.append(SchemaField.model_validate(entry))
        except ValidationError as e:
            errors.extend(format_pydantic_errors_simple(e, prefix=f"extra_fields[{i}]"))
    if errors:
        raise ValueError("Invalid extra_fields configuration:\n  " + "\n  ".join(errors))
    return fields
