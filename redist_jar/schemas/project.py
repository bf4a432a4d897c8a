"""Pydantic models describing persisted project state."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AttachedArtifactEntry(BaseModel):
    type: str
    classifier: str
    file: str

    model_config = ConfigDict(extra="forbid")


class ProjectDescriptor(BaseModel):
    group_id: str
    artifact_id: str
    version: str
    packaging: str = "jar"
    build_directory: str = Field(default="target", description="Build output directory, relative to the descriptor.")
    final_name: Optional[str] = Field(default=None, description="Explicit build name; defaults to artifact_id-version.")
    artifact_file: Optional[str] = Field(default=None, description="Primary artifact file, if one was registered.")
    attached_artifacts: List[AttachedArtifactEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
