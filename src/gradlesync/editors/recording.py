"""Dry-run script editor that records edits instead of applying them."""

from __future__ import annotations

from gradlesync.contracts.model import Dependency, Plugin, Repository
from gradlesync.contracts.script import EditOperation, ScriptEdit, ScriptEditor


class RecordingScriptEditor(ScriptEditor):
    """Records every write as a :class:`ScriptEdit` and returns the script unchanged.

    Reads are delegated to *delegate* when one is given; otherwise the script
    is treated as declaring nothing.
    """

    def __init__(self, delegate: ScriptEditor | None = None) -> None:
        self._delegate = delegate
        self._edits: list[ScriptEdit] = []

    @property
    def edits(self) -> list[ScriptEdit]:
        return list(self._edits)

    def replay(self, editor: ScriptEditor, script: str) -> str:
        """Apply the recorded edits to *script* through *editor*."""
        for edit in self._edits:
            script = edit.apply(editor, script)
        return script

    def _record(self, script: str, operation: EditOperation, *arguments: object) -> str:
        self._edits.append(ScriptEdit(operation=operation, arguments=arguments))
        return script

    def get_declared_dependencies(self, script: str) -> list[Dependency]:
        return self._delegate.get_declared_dependencies(script) if self._delegate else []

    def get_direct_dependencies(self, script: str) -> list[Dependency]:
        return self._delegate.get_direct_dependencies(script) if self._delegate else []

    def get_managed_dependencies(self, script: str) -> list[Dependency]:
        return self._delegate.get_managed_dependencies(script) if self._delegate else []

    def get_plugins(self, script: str) -> list[Plugin]:
        return self._delegate.get_plugins(script) if self._delegate else []

    def get_repositories(self, script: str) -> list[Repository]:
        return self._delegate.get_repositories(script) if self._delegate else []

    def get_direct_properties(self, script: str) -> dict[str, str]:
        return self._delegate.get_direct_properties(script) if self._delegate else {}

    def set_property(self, script: str, key: str, value: str) -> str:
        return self._record(script, EditOperation.SET_PROPERTY, key, value)

    def remove_property(self, script: str, key: str) -> str:
        return self._record(script, EditOperation.REMOVE_PROPERTY, key)

    def set_archive_name(self, script: str, name: str) -> str:
        return self._record(script, EditOperation.SET_ARCHIVE_NAME, name)

    def insert_plugin(self, script: str, identifier: str) -> str:
        return self._record(script, EditOperation.INSERT_PLUGIN, identifier)

    def remove_plugin(self, script: str, identifier: str) -> str:
        return self._record(script, EditOperation.REMOVE_PLUGIN, identifier)

    def insert_dependency(self, script: str, dependency: Dependency) -> str:
        return self._record(script, EditOperation.INSERT_DEPENDENCY, dependency)

    def remove_dependency(self, script: str, dependency: Dependency) -> str:
        return self._record(script, EditOperation.REMOVE_DEPENDENCY, dependency)

    def insert_direct_dependency(self, script: str, group: str, name: str) -> str:
        return self._record(script, EditOperation.INSERT_DIRECT_DEPENDENCY, group, name)

    def remove_direct_dependency(self, script: str, group: str, name: str) -> str:
        return self._record(script, EditOperation.REMOVE_DIRECT_DEPENDENCY, group, name)

    def insert_managed_dependency(self, script: str, dependency: Dependency) -> str:
        return self._record(script, EditOperation.INSERT_MANAGED_DEPENDENCY, dependency)

    def remove_managed_dependency(self, script: str, dependency: Dependency) -> str:
        return self._record(script, EditOperation.REMOVE_MANAGED_DEPENDENCY, dependency)

    def insert_repository(self, script: str, url: str) -> str:
        return self._record(script, EditOperation.INSERT_REPOSITORY, url)

    def remove_repository(self, script: str, url: str) -> str:
        return self._record(script, EditOperation.REMOVE_REPOSITORY, url)

    def insert_task(self, script: str, name: str, depends_on: list[str], type: str, code: str) -> str:
        return self._record(script, EditOperation.INSERT_TASK, name, list(depends_on), type, code)
