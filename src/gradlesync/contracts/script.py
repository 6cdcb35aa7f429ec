"""Script mutation contract.

A :class:`ScriptEditor` owns the textual side of a build script: it extracts
declarations from the script and applies structured edits to it, returning
the updated text. Formatting preservation is entirely its concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

from gradlesync.contracts.model import Dependency, Plugin, Repository

PROJECT_PROPERTY_PREFIX = "ext."


class EditOperation(StrEnum):
    """Write operations of :class:`ScriptEditor`, valued by method name."""

    SET_PROPERTY = "set_property"
    REMOVE_PROPERTY = "remove_property"
    SET_ARCHIVE_NAME = "set_archive_name"
    INSERT_PLUGIN = "insert_plugin"
    REMOVE_PLUGIN = "remove_plugin"
    INSERT_DEPENDENCY = "insert_dependency"
    REMOVE_DEPENDENCY = "remove_dependency"
    INSERT_DIRECT_DEPENDENCY = "insert_direct_dependency"
    REMOVE_DIRECT_DEPENDENCY = "remove_direct_dependency"
    INSERT_MANAGED_DEPENDENCY = "insert_managed_dependency"
    REMOVE_MANAGED_DEPENDENCY = "remove_managed_dependency"
    INSERT_REPOSITORY = "insert_repository"
    REMOVE_REPOSITORY = "remove_repository"
    INSERT_TASK = "insert_task"


class ScriptEdit(BaseModel):
    """One structured edit, replayable against any :class:`ScriptEditor`."""

    operation: EditOperation
    arguments: tuple[Any, ...] = ()

    model_config = ConfigDict(frozen=True)

    def apply(self, editor: ScriptEditor, script: str) -> str:
        return getattr(editor, self.operation.value)(script, *self.arguments)

    def describe(self) -> str:
        rendered = []
        for argument in self.arguments:
            if isinstance(argument, Dependency):
                rendered.append(f"{argument.configuration_name or '-'} {argument.to_canonical_string()}")
            elif isinstance(argument, (list, tuple)):
                rendered.append("[" + ", ".join(str(value) for value in argument) + "]")
            else:
                rendered.append(str(argument))
        return f"{self.operation.value}({', '.join(rendered)})"


class ScriptEditor(ABC):
    # Read side

    @abstractmethod
    def get_declared_dependencies(self, script: str) -> list[Dependency]: ...  # pragma: no cover

    @abstractmethod
    def get_direct_dependencies(self, script: str) -> list[Dependency]: ...  # pragma: no cover

    @abstractmethod
    def get_managed_dependencies(self, script: str) -> list[Dependency]: ...  # pragma: no cover

    @abstractmethod
    def get_plugins(self, script: str) -> list[Plugin]: ...  # pragma: no cover

    @abstractmethod
    def get_repositories(self, script: str) -> list[Repository]: ...  # pragma: no cover

    @abstractmethod
    def get_direct_properties(self, script: str) -> dict[str, str]: ...  # pragma: no cover

    # Write side

    @abstractmethod
    def set_property(self, script: str, key: str, value: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def remove_property(self, script: str, key: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def set_archive_name(self, script: str, name: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def insert_plugin(self, script: str, identifier: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def remove_plugin(self, script: str, identifier: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def insert_dependency(self, script: str, dependency: Dependency) -> str: ...  # pragma: no cover

    @abstractmethod
    def remove_dependency(self, script: str, dependency: Dependency) -> str: ...  # pragma: no cover

    @abstractmethod
    def insert_direct_dependency(self, script: str, group: str, name: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def remove_direct_dependency(self, script: str, group: str, name: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def insert_managed_dependency(self, script: str, dependency: Dependency) -> str: ...  # pragma: no cover

    @abstractmethod
    def remove_managed_dependency(self, script: str, dependency: Dependency) -> str: ...  # pragma: no cover

    @abstractmethod
    def insert_repository(self, script: str, url: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def remove_repository(self, script: str, url: str) -> str: ...  # pragma: no cover

    @abstractmethod
    def insert_task(
        self,
        script: str,
        name: str,
        depends_on: list[str],
        type: str,
        code: str,
    ) -> str: ...  # pragma: no cover
