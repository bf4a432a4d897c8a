"""Resolve invocation parameters for the ``jar`` goal."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from dotenv import dotenv_values

from .errors import ConfigurationError
from .project.model import BuildProject
from .publish.models import DEFAULT_ARTIFACT_TYPE, PublishRequest


CONFIG_TABLE = "redist-jar"

# field -> (environment variable, config file key)
_SOURCES: Dict[str, Tuple[str, str]] = {
    "jar_file": ("REDIST_JAR_FILE", "jar-file"),
    "output_directory": ("REDIST_JAR_OUTPUT_DIRECTORY", "output-directory"),
    "final_name": ("REDIST_JAR_FINAL_NAME", "final-name"),
    "classifier": ("REDIST_JAR_CLASSIFIER", "classifier"),
    "artifact_type": ("REDIST_JAR_TYPE", "type"),
}


@dataclass(slots=True)
class RedistSettings:
    jar_file: Path
    output_directory: Path
    final_name: str
    classifier: Optional[str] = None
    artifact_type: str = DEFAULT_ARTIFACT_TYPE

    def to_request(self) -> PublishRequest:
        return PublishRequest(
            source_file=self.jar_file,
            output_directory=self.output_directory,
            base_name=self.final_name,
            classifier=self.classifier,
            artifact_type=self.artifact_type,
        )


def load_settings(
    project: BuildProject,
    *,
    overrides: Optional[Mapping[str, Optional[object]]] = None,
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Path] = None,
    workspace_root: Optional[Path] = None,
) -> RedistSettings:
    """Resolve settings by precedence: override, environment, config file, project default."""

    workspace = workspace_root or Path.cwd()
    environ = _environment(env, dotenv_path)
    file_values = _read_config_table(config_path) if config_path else {}
    explicit = {key: value for key, value in (overrides or {}).items() if value is not None}

    resolved: Dict[str, Any] = {}
    for name, (env_key, file_key) in _SOURCES.items():
        if name in explicit:
            resolved[name] = explicit[name]
        elif environ.get(env_key):
            resolved[name] = environ[env_key]
        elif file_key in file_values:
            resolved[name] = file_values[file_key]

    jar_file = resolved.get("jar_file")
    if not jar_file:
        raise ConfigurationError("jar file is required (use --jar-file, REDIST_JAR_FILE or 'jar-file')")

    output_directory = resolved.get("output_directory") or project.build_directory
    return RedistSettings(
        jar_file=_resolve_path(jar_file, workspace),
        output_directory=_resolve_path(output_directory, workspace),
        final_name=str(resolved.get("final_name") or project.resolved_final_name),
        classifier=_optional_str(resolved.get("classifier")),
        artifact_type=str(resolved.get("artifact_type") or DEFAULT_ARTIFACT_TYPE),
    )


def _environment(env: Optional[Mapping[str, str]], dotenv_path: Optional[Path]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    if dotenv_path is not None and dotenv_path.exists():
        values.update({key: value for key, value in dotenv_values(dotenv_path).items() if value is not None})
    values.update(os.environ if env is None else env)
    return values


def _read_config_table(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Unable to read configuration from {path}: {exc}") from exc

    table = data.get("tool", {}).get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigurationError(f"[tool.{CONFIG_TABLE}] in {path} must be a table")
    return table


def _resolve_path(value: object, workspace: Path) -> Path:
    path = Path(str(value))
    if not path.is_absolute():
        path = workspace / path
    return path


def _optional_str(value: object) -> Optional[str]:
    if value is None:
        return None
    return str(value)
