from __future__ import annotations

from pathlib import Path

import pytest

from redist_jar.config import load_settings
from redist_jar.errors import ConfigurationError
from redist_jar.project import BuildProject


def _project(tmp_path: Path) -> BuildProject:
    return BuildProject(
        group_id="com.example",
        artifact_id="myapp",
        version="1.0",
        build_directory=tmp_path / "target",
    )


def _config_file(tmp_path: Path) -> Path:
    path = tmp_path / "redist.toml"
    path.write_text(
        '[tool.redist-jar]\njar-file = "from-config.jar"\nclassifier = "config"\nfinal-name = "configured"\n',
        encoding="utf-8",
    )
    return path


def test_defaults_come_from_project(tmp_path: Path) -> None:
    settings = load_settings(
        _project(tmp_path),
        overrides={"jar_file": "lib/prebuilt.jar"},
        env={},
        workspace_root=tmp_path,
    )

    assert settings.jar_file == tmp_path / "lib" / "prebuilt.jar"
    assert settings.output_directory == tmp_path / "target"
    assert settings.final_name == "myapp-1.0"
    assert settings.classifier is None
    assert settings.artifact_type == "jar"


def test_config_file_beats_project_defaults(tmp_path: Path) -> None:
    settings = load_settings(
        _project(tmp_path),
        config_path=_config_file(tmp_path),
        env={},
        workspace_root=tmp_path,
    )

    assert settings.jar_file == tmp_path / "from-config.jar"
    assert settings.final_name == "configured"
    assert settings.classifier == "config"


def test_environment_beats_config_file(tmp_path: Path) -> None:
    settings = load_settings(
        _project(tmp_path),
        config_path=_config_file(tmp_path),
        env={"REDIST_JAR_CLASSIFIER": "env", "REDIST_JAR_TYPE": "test-jar"},
        workspace_root=tmp_path,
    )

    assert settings.classifier == "env"
    assert settings.artifact_type == "test-jar"
    assert settings.final_name == "configured"


def test_overrides_beat_environment(tmp_path: Path) -> None:
    settings = load_settings(
        _project(tmp_path),
        overrides={"classifier": "cli", "final_name": None},
        config_path=_config_file(tmp_path),
        env={"REDIST_JAR_CLASSIFIER": "env"},
        workspace_root=tmp_path,
    )

    assert settings.classifier == "cli"
    assert settings.final_name == "configured"


def test_dotenv_does_not_override_environment(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("REDIST_JAR_FILE=dotenv.jar\nREDIST_JAR_CLASSIFIER=dotenv\n", encoding="utf-8")

    settings = load_settings(
        _project(tmp_path),
        env={"REDIST_JAR_CLASSIFIER": "env"},
        dotenv_path=env_file,
        workspace_root=tmp_path,
    )

    assert settings.jar_file == tmp_path / "dotenv.jar"
    assert settings.classifier == "env"


def test_process_environment_used_by_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDIST_JAR_FILE", str(tmp_path / "env.jar"))

    settings = load_settings(_project(tmp_path), workspace_root=tmp_path)

    assert settings.jar_file == tmp_path / "env.jar"


def test_missing_jar_file_is_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_settings(_project(tmp_path), env={}, workspace_root=tmp_path)


def test_malformed_config_is_configuration_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[tool.redist-jar\n", encoding="utf-8")

    with pytest.raises(ConfigurationError) as excinfo:
        load_settings(_project(tmp_path), config_path=path, env={}, workspace_root=tmp_path)

    assert str(path) in str(excinfo.value)


def test_to_request_carries_settings(tmp_path: Path) -> None:
    settings = load_settings(
        _project(tmp_path),
        overrides={"jar_file": "a.jar", "classifier": "sources"},
        env={},
        workspace_root=tmp_path,
    )

    request = settings.to_request()

    assert request.source_file == tmp_path / "a.jar"
    assert request.output_directory == tmp_path / "target"
    assert request.base_name == "myapp-1.0"
    assert request.classifier == "sources"
    assert request.artifact_type == "jar"
