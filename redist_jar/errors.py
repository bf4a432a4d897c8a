"""Error types raised while redistributing a jar."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


DUPLICATE_ARTIFACT_MESSAGE = (
    "You must use a classifier to attach supplemental artifacts "
    "to the project instead of replacing them."
)


class RedistError(RuntimeError):
    """Base class for failures of the jar redistribution step."""


class ConfigurationError(RedistError, ValueError):
    """Raised when a required invocation parameter is missing or malformed."""


class _TransferError(RedistError):
    def __init__(self, message: str, *, source: Optional[Path], target: Path) -> None:
        super().__init__(f"{message} from {source} to {target}")
        self.source = source
        self.target = target


class DirectoryCreationError(_TransferError):
    """Raised when the target directory is missing and cannot be created."""

    def __init__(self, *, source: Optional[Path], target: Path) -> None:
        super().__init__("Unable to create output directory while copying", source=source, target=target)


class CopyError(_TransferError):
    """Raised when the jar cannot be copied to its target location."""

    def __init__(self, *, source: Optional[Path], target: Path) -> None:
        super().__init__("Error copying JAR", source=source, target=target)


class DuplicateArtifactError(RedistError):
    """Raised when a primary artifact is already set and no classifier was given."""

    def __init__(self, message: str = DUPLICATE_ARTIFACT_MESSAGE) -> None:
        super().__init__(message)
