"""Command-line entry point for jar redistribution."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Mapping, Optional, Sequence

from redist_jar.config import load_settings
from redist_jar.errors import RedistError
from redist_jar.project import dump_project, load_project
from redist_jar.publish import ArtifactPublisher


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "jar":
            return _handle_jar(args)
        if args.command == "target-path":
            return _handle_target_path(args)
    except RedistError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    parser.error(f"Unknown command '{args.command}'")
    return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="redist-jar", description="Redistribute a pre-built jar as a project artifact.")
    parser.add_argument("--log-level", default="WARNING", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    subparsers = parser.add_subparsers(dest="command", required=True)

    jar = subparsers.add_parser("jar", help="Copy a jar into the build output and register it.")
    jar.add_argument("--project", required=True, help="Project descriptor JSON.")
    jar.add_argument("--jar-file")
    jar.add_argument("--output-dir")
    jar.add_argument("--final-name")
    jar.add_argument("--classifier")
    jar.add_argument("--type", dest="artifact_type")
    jar.add_argument("--config", help="TOML file with a [tool.redist-jar] table.")
    jar.add_argument("--env-file", help="Optional .env file with REDIST_JAR_* values.")
    jar.add_argument("--workspace-root")
    jar.add_argument("--dry-run", action=argparse.BooleanOptionalAction, default=False)

    target = subparsers.add_parser("target-path", help="Print the computed target path.")
    target.add_argument("--output-dir", required=True)
    target.add_argument("--final-name", required=True)
    target.add_argument("--classifier")

    return parser


def _handle_jar(args: argparse.Namespace) -> int:
    workspace = _resolve_workspace(args.workspace_root)
    project_path = _resolve_path(args.project, workspace)
    project = load_project(project_path)

    settings = load_settings(
        project,
        overrides={
            "jar_file": args.jar_file,
            "output_directory": args.output_dir,
            "final_name": args.final_name,
            "classifier": args.classifier,
            "artifact_type": args.artifact_type,
        },
        config_path=_resolve_optional_path(args.config, workspace),
        dotenv_path=_resolve_optional_path(args.env_file, workspace),
        workspace_root=workspace,
    )
    publisher = ArtifactPublisher()

    if args.dry_run:
        target = publisher.compute_target_path(settings.output_directory, settings.final_name, settings.classifier)
        _print_json(
            {
                "project_path": str(project_path),
                "source_file": str(settings.jar_file),
                "target_file": str(target),
                "dry_run": True,
                "logs": ["Dry run enabled; copy and registration skipped."],
            }
        )
        return 0

    result = publisher.execute(settings.to_request(), project)
    dump_project(project, project_path)

    payload = {"project_path": str(project_path), "dry_run": False, **result.to_dict()}
    payload["logs"] = [*result.logs, f"Project descriptor written to {project_path}"]
    _print_json(payload)
    return 0


def _handle_target_path(args: argparse.Namespace) -> int:
    target = ArtifactPublisher().compute_target_path(Path(args.output_dir), args.final_name, args.classifier)
    _print_json({"target_file": str(target)})
    return 0


def _resolve_workspace(value: Optional[str]) -> Path:
    return Path(value).resolve() if value else Path.cwd()


def _resolve_path(value: str, workspace: Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = workspace / path
    return path.resolve()


def _resolve_optional_path(value: Optional[str], workspace: Path) -> Optional[Path]:
    if value is None:
        return None
    return _resolve_path(value, workspace)


def _print_json(payload: Mapping[str, object]) -> None:
    print(json.dumps(payload, indent=2, default=str))


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
