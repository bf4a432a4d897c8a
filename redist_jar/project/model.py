"""Project model consumed by the publisher."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol


class ProjectModel(Protocol):
    """Primary artifact slot plus the supplemental artifact sequence of a project."""

    def get_artifact_file(self) -> Optional[Path]:  # pragma: no cover - interface
        ...

    def set_artifact_file(self, file: Path) -> None:  # pragma: no cover - interface
        ...

    def attach_artifact(self, artifact_type: str, classifier: str, file: Path) -> None:  # pragma: no cover - interface
        ...


@dataclass(frozen=True, slots=True)
class AttachedArtifact:
    type: str
    classifier: str
    file: Path


@dataclass(slots=True)
class BuildProject:
    """In-memory project implementing :class:`ProjectModel`."""

    group_id: str
    artifact_id: str
    version: str
    packaging: str = "jar"
    build_directory: Path = Path("target")
    final_name: Optional[str] = None
    artifact_file: Optional[Path] = None
    attached_artifacts: List[AttachedArtifact] = field(default_factory=list)

    @property
    def resolved_final_name(self) -> str:
        return self.final_name or f"{self.artifact_id}-{self.version}"

    def get_artifact_file(self) -> Optional[Path]:
        return self.artifact_file

    def set_artifact_file(self, file: Path) -> None:
        self.artifact_file = Path(file)

    def attach_artifact(self, artifact_type: str, classifier: str, file: Path) -> None:
        self.attached_artifacts.append(
            AttachedArtifact(type=artifact_type, classifier=classifier, file=Path(file))
        )
