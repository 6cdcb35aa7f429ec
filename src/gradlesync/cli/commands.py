"""CLI command runners and output formatting."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gradlesync import (
    BuildModel,
    ConfigError,
    GradleSync,
    GradleSyncConfig,
    RecordingScriptEditor,
    ScriptEdit,
    load_config,
)
from gradlesync.cli.progress.rich import RichMergeProgress


def _config(args: argparse.Namespace) -> GradleSyncConfig:
    if getattr(args, "config", None):
        return load_config(args.config)
    return GradleSyncConfig()


def _read_text(path: str, *, what: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed reading {what}: {path}") from exc


def _load_effective(sync: GradleSync, path: str) -> BuildModel:
    return sync.load("", _read_text(path, what="effective build XML"))


def _load_desired(current: BuildModel, path: str) -> BuildModel:
    try:
        payload: Any = json.loads(_read_text(path, what="desired model"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in desired model: {path}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"desired model must be a JSON object: {path}")
    try:
        return current.evolve(**payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid desired model: {exc}") from exc


def format_model_summary(model: BuildModel) -> str:
    lines = [
        "",
        f"gradlesync - {model.name or '(unnamed project)'}",
        "",
        f"  Project:       {model.group}:{model.name}:{model.version}",
        f"  Path:          {model.project_path}",
        f"  Packaging:     {model.packaging}",
        f"  Archive:       {model.archive_path}",
        f"  Compatibility: source {model.source_compatibility}, target {model.target_compatibility}",
        "",
        f"  Plugins:       {', '.join(plugin.identifier for plugin in model.effective_plugins) or '-'}",
        f"  Repositories:  {', '.join(repository.url for repository in model.effective_repositories) or '-'}",
        f"  Source sets:   {', '.join(source_set.name for source_set in model.effective_source_sets) or '-'}",
        f"  Tasks:         {len(model.effective_tasks)}",
        "",
        f"  Dependencies:  {len(model.effective_dependencies)}",
    ]
    for dependency in model.effective_dependencies:
        lines.append(f"    {dependency.configuration_name or '-':<12}  {dependency.to_canonical_string()}")
    if model.effective_managed_dependencies:
        lines.append(f"  Managed:       {len(model.effective_managed_dependencies)}")
        for dependency in model.effective_managed_dependencies:
            lines.append(f"    {dependency.configuration_name or '-':<12}  {dependency.to_canonical_string()}")
    lines.append("")
    return "\n".join(lines)


def format_edits(edits: list[ScriptEdit]) -> str:
    lines = ["", f"gradlesync - {len(edits)} planned edit(s)", ""]
    lines.extend(f"  {edit.describe()}" for edit in edits)
    if not edits:
        lines.append("  (no changes)")
    lines.append("")
    return "\n".join(lines)


def run_inspect(args: argparse.Namespace) -> int:
    sync = GradleSync(editor=RecordingScriptEditor())
    model = _load_effective(sync, args.effective)
    if args.json:
        print(model.model_dump_json(indent=2))
    else:
        print(format_model_summary(model))
    return 0


def run_plan(args: argparse.Namespace) -> int:
    config = _config(args)
    editor = RecordingScriptEditor()
    current = _load_effective(GradleSync(editor=editor, config=config), args.effective)
    desired = _load_desired(current, args.desired)

    if args.verbose:
        GradleSync(editor=editor, config=config).merge("", current, desired)
    else:
        with RichMergeProgress() as progress:
            GradleSync(editor=editor, config=config, progress=progress).merge("", current, desired)
    print(format_edits(editor.edits))
    return 0


def run_build(args: argparse.Namespace) -> int:
    sync = GradleSync(editor=RecordingScriptEditor(), config=_config(args))
    build_args = [arg for arg in args.build_args if arg != "--"]
    succeeded = sync.run_build(args.project, args.task, *build_args)
    print(f"gradlesync - {args.task} {'succeeded' if succeeded else 'failed'}")
    return 0 if succeeded else 1
