from __future__ import annotations

from pathlib import Path

import pytest

from redist_jar.errors import ConfigurationError
from redist_jar.publish import ArtifactPublisher


@pytest.mark.parametrize("classifier", [None, "", "   ", "\t\n"])
def test_target_path_without_classifier(tmp_path: Path, classifier) -> None:
    target = ArtifactPublisher().compute_target_path(tmp_path, "myapp-1.0", classifier)
    assert target == tmp_path / "myapp-1.0.jar"


def test_target_path_with_classifier(tmp_path: Path) -> None:
    target = ArtifactPublisher().compute_target_path(tmp_path, "myapp-1.0", "sources")
    assert target == tmp_path / "myapp-1.0-sources.jar"


def test_target_path_keeps_classifier_verbatim(tmp_path: Path) -> None:
    target = ArtifactPublisher().compute_target_path(tmp_path, "myapp", " linux ")
    assert target.name == "myapp- linux .jar"


def test_target_path_requires_output_directory() -> None:
    with pytest.raises(ConfigurationError):
        ArtifactPublisher().compute_target_path(None, "myapp", None)


@pytest.mark.parametrize("base_name", [None, ""])
def test_target_path_requires_base_name(tmp_path: Path, base_name) -> None:
    with pytest.raises(ConfigurationError):
        ArtifactPublisher().compute_target_path(tmp_path, base_name, "sources")
