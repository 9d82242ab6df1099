#!/usr/bin/env python3
"""
Pydantic model for the in-flight description of one repository artifact.

Carries the coordinates used to derive the package's relative path, the
metadata attributes filled by the control parser, and the optional checksum
(kept alongside the attributes, never inside them).
"""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from debindex.core.utils import derive_relative_path


class ArtifactInfo(BaseModel):
    """
    Artifact coordinates plus the metadata gathered for it.

    Example
    -------
    >>> info = ArtifactInfo(group_id="org.example", artifact_id="hello",
    ...                     version="2.10", packaging="deb",
    ...                     file_name="hello_2.10_amd64.deb")
    >>> info.relative_path
    './org/example/hello/2.10/hello_2.10_amd64.deb'
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    group_id: str = Field(default="", description="Dotted group identifier.")
    artifact_id: str = Field(default="", description="Artifact identifier.")
    version: str = Field(default="", description="Artifact version.")
    packaging: Optional[str] = Field(default=None, description="Packaging label (e.g. 'deb').")
    file_name: str = Field(default="", description="Native file name of the artifact.")
    attributes: Dict[str, Optional[str]] = Field(default_factory=dict, description="Metadata attributes.")
    checksum: Optional[str] = Field(default=None, description="Checksum of the artifact file, if known.")

    @property
    def relative_path(self) -> str:
        """Repository-relative path: ./<group path>/<artifact>/<version>/<file name>."""
        return derive_relative_path(self.group_id, self.artifact_id, self.version, self.file_name)
