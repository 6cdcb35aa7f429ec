"""SDK composition root for gradlesync."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from gradlesync.contracts.build import BuildRunner
from gradlesync.contracts.config import GradleSyncConfig
from gradlesync.contracts.merge import MergePlan
from gradlesync.contracts.model import BuildModel
from gradlesync.contracts.script import ScriptEditor
from gradlesync.contracts.tree import TreeReader
from gradlesync.engine.merger import ModelMerger
from gradlesync.engine.progress import MergeProgress
from gradlesync.model.loader import ModelLoader
from gradlesync.runner.gradle import GradleRunner


class GradleSync:
    """gradlesync SDK public API.

    Reads a build's model through *editor* (script side) and *tree_reader*
    (effective side), and writes desired changes back through *editor*.
    """

    def __init__(
        self,
        *,
        editor: ScriptEditor,
        config: GradleSyncConfig | None = None,
        tree_reader: TreeReader[Any] | None = None,
        runner: BuildRunner | None = None,
        progress: MergeProgress | None = None,
    ) -> None:
        self._config = config or GradleSyncConfig()
        self._loader = ModelLoader(editor, tree_reader=tree_reader)
        self._merger = ModelMerger(editor, progress=progress, transactional=self._config.transactional_merge)
        self._runner = runner or GradleRunner(self._config)

    @property
    def config(self) -> GradleSyncConfig:
        return self._config

    def load(self, script: str, effective: Any | None = None) -> BuildModel:
        if effective is None:
            return self._loader.load_script(script)
        return self._loader.load(script, effective)

    def plan(self, old: BuildModel, new: BuildModel) -> MergePlan:
        return self._merger.plan(old, new)

    def merge(self, script: str, old: BuildModel, new: BuildModel) -> str:
        return self._merger.merge(script, old, new)

    def run_build(self, directory: str | Path, task: str, *arguments: str) -> bool:
        return self._runner.run_build(directory, task, *arguments)
