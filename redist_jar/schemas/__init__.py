"""Schema definitions for project metadata."""

from .project import AttachedArtifactEntry, ProjectDescriptor

__all__ = [
    "AttachedArtifactEntry",
    "ProjectDescriptor",
]
