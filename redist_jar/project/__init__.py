"""Project model and descriptor persistence."""

from .model import AttachedArtifact, BuildProject, ProjectModel
from .state import dump_project, load_project

__all__ = [
    "AttachedArtifact",
    "BuildProject",
    "ProjectModel",
    "dump_project",
    "load_project",
]
