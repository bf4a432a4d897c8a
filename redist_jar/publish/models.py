"""Data models used while publishing a jar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


DEFAULT_ARTIFACT_TYPE = "jar"


@dataclass(slots=True)
class PublishRequest:
    source_file: Path
    output_directory: Optional[Path]
    base_name: Optional[str]
    classifier: Optional[str] = None
    artifact_type: str = DEFAULT_ARTIFACT_TYPE


@dataclass(slots=True)
class PublishResult:
    source_file: Path
    target_file: Path
    artifact_type: str
    classifier: Optional[str]
    registration: str
    sha256: str
    logs: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "source_file": str(self.source_file),
            "target_file": str(self.target_file),
            "artifact_type": self.artifact_type,
            "classifier": self.classifier,
            "registration": self.registration,
            "checksum": {"sha256": self.sha256},
            "logs": self.logs,
        }
