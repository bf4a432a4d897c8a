"""Redistribute pre-built jars as project artifacts."""

__version__ = "0.1.0"
from .config import RedistSettings, load_settings
from .errors import (
    ConfigurationError,
    CopyError,
    DirectoryCreationError,
    DuplicateArtifactError,
    RedistError,
)
from .project import AttachedArtifact, BuildProject, ProjectModel, dump_project, load_project
from .publish import ArtifactPublisher, PublishRequest, PublishResult

__all__ = [
    "__version__",
    "ArtifactPublisher",
    "PublishRequest",
    "PublishResult",
    "AttachedArtifact",
    "BuildProject",
    "ProjectModel",
    "load_project",
    "dump_project",
    "RedistSettings",
    "load_settings",
    "RedistError",
    "ConfigurationError",
    "CopyError",
    "DirectoryCreationError",
    "DuplicateArtifactError",
]
