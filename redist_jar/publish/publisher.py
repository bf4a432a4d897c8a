"""Copy a pre-built jar into the build output and register it with the project."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional

from ..errors import ConfigurationError, CopyError, DirectoryCreationError, DuplicateArtifactError
from ..project.model import ProjectModel
from ..utils import compute_sha256, has_classifier
from .models import PublishRequest, PublishResult


logger = logging.getLogger(__name__)


class ArtifactPublisher:
    """Places a redistributed jar under its computed name and registers it.

    The publisher holds no state between calls. Concurrent calls are safe as
    long as they target different projects and files; calls sharing a project
    must be serialized by the caller.
    """

    def compute_target_path(
        self,
        output_directory: Optional[Path],
        base_name: Optional[str],
        classifier: Optional[str] = None,
    ) -> Path:
        """Return ``output_directory/base_name[-classifier].jar``."""

        if output_directory is None:
            raise ConfigurationError("output directory is not allowed to be null")
        if not base_name:
            raise ConfigurationError("final name is not allowed to be null or empty")

        file_name = base_name
        if has_classifier(classifier):
            file_name += f"-{classifier}"
        file_name += ".jar"
        return Path(output_directory) / file_name

    def publish(self, request: PublishRequest) -> Path:
        """Copy the request's source jar to its target path, replacing any existing file."""

        target = self.compute_target_path(request.output_directory, request.base_name, request.classifier)
        source = Path(request.source_file)

        parent = target.parent
        if not parent.is_dir():
            logger.debug("Creating output directory %s", parent)
            try:
                parent.mkdir(exist_ok=True)
            except OSError as exc:
                logger.error("Unable to create %s while copying from %s to %s", parent, source, target)
                raise DirectoryCreationError(source=source, target=target) from exc

        try:
            shutil.copyfile(source, target)
        except OSError as exc:
            logger.error("Error during copying from %s to %s", source, target)
            raise CopyError(source=source, target=target) from exc

        logger.info("Copied %s to %s", source, target)
        return target

    def register_artifact(
        self,
        project: ProjectModel,
        artifact_type: str,
        classifier: Optional[str],
        file: Path,
    ) -> str:
        """Attach ``file`` to the project; return ``"attached"`` or ``"primary"``."""

        if has_classifier(classifier):
            project.attach_artifact(artifact_type, classifier, file)
            logger.info("Attached %s artifact %s with classifier %s", artifact_type, file, classifier)
            return "attached"

        if _has_primary_artifact(project):
            raise DuplicateArtifactError()
        project.set_artifact_file(file)
        logger.info("Set primary artifact to %s", file)
        return "primary"

    def execute(self, request: PublishRequest, project: ProjectModel) -> PublishResult:
        """Publish the jar and register it against ``project``."""

        target = self.publish(request)
        registration = self.register_artifact(project, request.artifact_type, request.classifier, target)

        logs = [f"Copied {request.source_file} to {target}"]
        if registration == "attached":
            logs.append(f"Attached {request.artifact_type} artifact with classifier '{request.classifier}'.")
        else:
            logs.append("Registered as primary project artifact.")

        return PublishResult(
            source_file=Path(request.source_file),
            target_file=target,
            artifact_type=request.artifact_type,
            classifier=request.classifier if has_classifier(request.classifier) else None,
            registration=registration,
            sha256=compute_sha256(target),
            logs=logs,
        )


def _has_primary_artifact(project: ProjectModel) -> bool:
    current = project.get_artifact_file()
    if current is None:
        return False
    return Path(current).is_file()
