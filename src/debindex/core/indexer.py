#!/usr/bin/env python3
"""
Purpose:
    The Debian index creator: drives parse -> attributes -> document fields for
    one artifact, and reads stored documents back into artifact metadata.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from debindex.core.checksum import checksum_outcome
from debindex.core.constants import DEB_CREATOR_ID, FILENAME_FIELD
from debindex.core.control.parser import parse_control
from debindex.core.diagnostics import Diagnostics
from debindex.core.document import DocumentWriter
from debindex.core.mapping.artifact import ArtifactInfo
from debindex.core.mapping.field_mapper import DocumentReader, FieldMapper

logger = logging.getLogger(__name__)

ControlProvider = Callable[[Path], List[str]]
ChecksumLocator = Callable[[Path], Optional[Path]]


@dataclass
class ArtifactContext:
    """One artifact's processing state: its file, its description, and its non-fatal errors."""
    info: ArtifactInfo
    artifact_path: Optional[Path] = None
    errors: Diagnostics = field(default_factory=Diagnostics)


class DebianIndexCreator:
    """
    Index creator for Debian packages.

    Args:
        mapper: field mapper for this format.
        control_provider: returns the control-record lines of an artifact file.
        checksum_locator: returns the path of the artifact's checksum file (may not exist).
    """

    id = DEB_CREATOR_ID

    def __init__(
        self,
        mapper: FieldMapper,
        *,
        control_provider: ControlProvider,
        checksum_locator: ChecksumLocator,
    ):
        self._mapper = mapper
        self._control_provider = control_provider
        self._checksum_locator = checksum_locator

    @property
    def mapper(self) -> FieldMapper:
        return self._mapper

    # --- Populate (artifact file -> attributes) --- #

    def populate_artifact_info(self, ctx: ArtifactContext) -> None:
        """
        Fill `ctx.info` from the artifact file when it is a package of this format.

        Raises:
            ParseError: if the control record is malformed (nothing is written).
        """
        info = ctx.info
        if ctx.artifact_path is None or info.packaging != self._mapper.package_type:
            logger.debug("Skipping %s (packaging=%r)", ctx.artifact_path, info.packaging)
            return

        logger.info("Reading control record of %s", ctx.artifact_path)
        record = parse_control(self._control_provider(ctx.artifact_path))

        attributes = dict(info.attributes)
        attributes.update(record)
        attributes[FILENAME_FIELD] = info.relative_path
        info.attributes = attributes

        outcome = checksum_outcome(self._checksum_locator(ctx.artifact_path))
        ctx.errors.extend(outcome.diagnostics)
        if outcome.value is not None:
            info.checksum = outcome.value

    # --- Forward (attributes -> document) --- #

    def update_document(self, info: ArtifactInfo, document: DocumentWriter) -> int:
        """Add this artifact's stored fields to `document`. Returns the number of fields added."""
        # without a file name there is no path worth storing
        relative_path = info.attributes.get(FILENAME_FIELD) or (info.relative_path if info.file_name else None)
        fields = self._mapper.to_document_fields(info.attributes, info.packaging, relative_path, info.checksum)
        for key, value in fields:
            document.add(key, value)
        return len(fields)

    # --- Reverse (document -> attributes) --- #

    def update_artifact_info(self, document: DocumentReader, info: ArtifactInfo) -> bool:
        """Copy stored metadata from `document` into `info`. Returns False if not a Debian document."""
        readback = self._mapper.to_metadata(document)
        if not readback.recognized:
            return False
        info.attributes = {**info.attributes, **readback.attributes}
        info.checksum = readback.checksum
        return True

    def __str__(self) -> str:
        return self.id
