"""Persist project state as JSON descriptors."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..schemas.project import AttachedArtifactEntry, ProjectDescriptor
from .model import AttachedArtifact, BuildProject


def load_project(path: Path) -> BuildProject:
    """Load a project descriptor, resolving relative paths against its directory."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        descriptor = ProjectDescriptor.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Unable to read project descriptor {path}: {exc}") from exc

    base_dir = path.parent.resolve()
    return BuildProject(
        group_id=descriptor.group_id,
        artifact_id=descriptor.artifact_id,
        version=descriptor.version,
        packaging=descriptor.packaging,
        build_directory=_resolve(base_dir, descriptor.build_directory),
        final_name=descriptor.final_name,
        artifact_file=_resolve_optional(base_dir, descriptor.artifact_file),
        attached_artifacts=[
            AttachedArtifact(
                type=entry.type,
                classifier=entry.classifier,
                file=_resolve(base_dir, entry.file),
            )
            for entry in descriptor.attached_artifacts
        ],
    )


def dump_project(project: BuildProject, path: Path) -> None:
    """Write a project descriptor to disk.

    Paths under the descriptor's directory are stored relative to it so the
    descriptor stays valid when the workspace moves.
    """

    base_dir = path.parent.resolve()
    descriptor = ProjectDescriptor(
        group_id=project.group_id,
        artifact_id=project.artifact_id,
        version=project.version,
        packaging=project.packaging,
        build_directory=_relativize(base_dir, project.build_directory),
        final_name=project.final_name,
        artifact_file=_relativize(base_dir, project.artifact_file) if project.artifact_file else None,
        attached_artifacts=[
            AttachedArtifactEntry(type=item.type, classifier=item.classifier, file=_relativize(base_dir, item.file))
            for item in project.attached_artifacts
        ],
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(descriptor.model_dump_json(indent=2) + "\n", encoding="utf-8")


def _resolve(base_dir: Path, value: str) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return path


def _resolve_optional(base_dir: Path, value: Optional[str]) -> Optional[Path]:
    if value is None:
        return None
    return _resolve(base_dir, value)


def _relativize(base_dir: Path, value: Path) -> str:
    path = Path(value)
    if not path.is_absolute():
        return path.as_posix()
    try:
        return path.relative_to(base_dir).as_posix()
    except ValueError:
        return str(path)
