"""CLI argument parser."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("gradlesync")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gradlesync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser("inspect", help="Show the effective model of a build")
    inspect_parser.add_argument("--effective", required=True, help="Path to the effective build XML")
    inspect_parser.add_argument("--json", action="store_true", help="Print the full model as JSON")
    inspect_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    plan_parser = subparsers.add_parser("plan", help="Preview the script edits for a desired model")
    plan_parser.add_argument("--effective", required=True, help="Path to the effective build XML")
    plan_parser.add_argument("--desired", required=True, help="Path to a JSON object of desired model fields")
    plan_parser.add_argument("--config", help="Path to gradlesync.json")
    plan_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    build_cmd = subparsers.add_parser("build", help="Run a Gradle task")
    build_cmd.add_argument("--project", required=True, help="Gradle project directory")
    build_cmd.add_argument("--task", required=True, help="Task to run")
    build_cmd.add_argument("--config", help="Path to gradlesync.json")
    build_cmd.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    build_cmd.add_argument("build_args", nargs=argparse.REMAINDER, help="Extra Gradle arguments")

    return parser
