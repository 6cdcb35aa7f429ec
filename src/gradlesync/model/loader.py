"""Build model loading from a build script and its effective build description."""

from __future__ import annotations

import logging
from typing import Any

from gradlesync.contracts.exceptions import ModelLoadError
from gradlesync.contracts.model import BuildModel, Dependency, Plugin, Repository, SourceDirectory, SourceSet, Task
from gradlesync.contracts.script import ScriptEditor
from gradlesync.contracts.tree import TreeReader
from gradlesync.model.plugins import PluginType
from gradlesync.model.xml_tree import XmlTreeReader

logger = logging.getLogger(__name__)

_PROJECT = "project"
_SHORT_NAME_BY_CLASS = {plugin_type.clazz: plugin_type.short_name for plugin_type in PluginType}

_SCALAR_NODES = (
    ("group", "group"),
    ("name", "name"),
    ("version", "version"),
    ("packaging", "packaging"),
    ("archive_path", "archivePath"),
    ("source_compatibility", "sourceCompatibility"),
    ("target_compatibility", "targetCompatibility"),
    ("project_path", "projectPath"),
    ("root_project_path", "rootProjectDirectory"),
)


def archive_name_from_path(archive_path: str) -> str:
    """``build/libs/foo-1.0.jar`` -> ``foo-1.0``."""
    if not archive_path:
        return ""
    file_name = archive_path.replace("\\", "/").rsplit("/", 1)[-1]
    stem, dot, _ = file_name.rpartition(".")
    return stem if dot else file_name


class ModelLoader:
    """Build a :class:`BuildModel` from script text and an effective build tree.

    The direct side is read from the script through the :class:`ScriptEditor`;
    the effective side is read from the tree through the :class:`TreeReader`.
    """

    def __init__(self, editor: ScriptEditor, *, tree_reader: TreeReader[Any] | None = None) -> None:
        self._editor = editor
        self._tree: TreeReader[Any] = tree_reader or XmlTreeReader()

    def load_script(self, script: str) -> BuildModel:
        """Load only the direct model declared in *script*."""
        return BuildModel(**self._direct_fields(script))

    def load(self, script: str, effective: Any) -> BuildModel:
        """Load direct and effective model; *effective* is raw tree text or a parsed root node."""
        root = self._tree.parse(effective) if isinstance(effective, str) else effective
        project = self._tree.single_child(root, _PROJECT)
        if project is None:
            raise ModelLoadError("effective build description has no project element", location=_PROJECT)

        fields = self._effective_fields(project)
        fields.update(self._direct_fields(script))
        model = BuildModel(**fields)
        logger.debug(
            "Loaded model %s:%s (%d effective dependencies, %d effective tasks)",
            model.group,
            model.name,
            len(model.effective_dependencies),
            len(model.effective_tasks),
        )
        return model

    def _direct_fields(self, script: str) -> dict[str, Any]:
        dependencies = [
            *self._editor.get_declared_dependencies(script),
            *self._editor.get_direct_dependencies(script),
        ]
        return {
            "dependencies": dependencies,
            "managed_dependencies": self._editor.get_managed_dependencies(script),
            "plugins": self._editor.get_plugins(script),
            "repositories": self._editor.get_repositories(script),
            "properties": self._editor.get_direct_properties(script),
        }

    def _effective_fields(self, project: Any) -> dict[str, Any]:
        location = _PROJECT
        fields: dict[str, Any] = {
            field_name: self._text(project, location, node_name) for field_name, node_name in _SCALAR_NODES
        }
        fields["archive_name"] = archive_name_from_path(fields["archive_path"])
        fields["effective_tasks"] = self._tasks(project, location)
        fields["effective_dependencies"] = self._dependencies(project, location)
        fields["effective_managed_dependencies"] = [
            self._dependency(node, node_location)
            for node, node_location in self._items(project, location, "managedDependencies", "dependency")
        ]
        fields["effective_plugins"] = [
            self._plugin(node, node_location)
            for node, node_location in self._items(project, location, "plugins", "plugin")
        ]
        fields["effective_repositories"] = [
            Repository(
                name=self._text(node, node_location, "name"),
                url=self._text(node, node_location, "url", required=True),
            )
            for node, node_location in self._items(project, location, "repositories", "repository")
        ]
        fields["effective_source_sets"] = [
            self._source_set(node, node_location)
            for node, node_location in self._items(project, location, "sourceSets", "sourceSet")
        ]
        fields["effective_properties"] = {
            self._text(node, node_location, "key", required=True): self._text(node, node_location, "value")
            for node, node_location in self._items(project, location, "properties", "property")
        }
        return fields

    def _tasks(self, project: Any, location: str) -> list[Task]:
        tasks: list[Task] = []
        task_locations: list[str] = []
        for node, node_location in self._items(project, location, "tasks", "task"):
            depends_on = [
                self._tree.text(dep).strip() for dep, _ in self._items(node, node_location, "dependsOn", "task")
            ]
            tasks.append(
                Task(
                    name=self._text(node, node_location, "name", required=True),
                    type=self._text(node, node_location, "type"),
                    depends_on=depends_on,
                )
            )
            task_locations.append(node_location)

        # Edges may point forward, so they are checked once every name is known.
        known = {task.name for task in tasks}
        for task, task_location in zip(tasks, task_locations):
            for dep_name in task.depends_on:
                if dep_name not in known:
                    raise ModelLoadError(
                        f"task {task.name!r} depends on unknown task {dep_name!r}",
                        location=f"{task_location}/dependsOn",
                    )
        return tasks

    def _dependencies(self, project: Any, location: str) -> list[Dependency]:
        # Canonical coordinate -> declaration with the highest-priority configuration.
        best: dict[str, Dependency] = {}
        for node, node_location in self._items(project, location, "dependencies", "dependency"):
            dependency = self._dependency(node, node_location)
            coordinate = dependency.to_canonical_string()
            stored = best.get(coordinate)
            if stored is None:
                best[coordinate] = dependency
            elif dependency.configuration.overrides(stored.configuration):
                logger.debug(
                    "%s: configuration %r overrides %r",
                    coordinate,
                    dependency.configuration_name,
                    stored.configuration_name,
                )
                best[coordinate] = dependency
            else:
                logger.debug("%s: keeping configuration %r", coordinate, stored.configuration_name)
        return list(best.values())

    def _dependency(self, node: Any, location: str) -> Dependency:
        fields: dict[str, Any] = {
            "group": self._text(node, location, "group"),
            "name": self._text(node, location, "name", required=True),
            "version": self._text(node, location, "version"),
            "configuration_name": self._text(node, location, "configuration"),
        }

        artifacts = self._tree.single_child(node, "artifacts")
        artifact = self._tree.single_child(artifacts, "artifact") if artifacts is not None else None
        if artifact is not None:
            artifact_location = f"{location}/artifacts/artifact"
            classifier = self._text(artifact, artifact_location, "classifier")
            packaging = self._text(artifact, artifact_location, "type")
            if classifier:
                fields["classifier"] = classifier
            if packaging:
                fields["packaging"] = packaging

        fields["excluded_dependencies"] = [
            Dependency.excluded(
                self._text(rule, rule_location, "group"),
                self._text(rule, rule_location, "module", required=True),
            )
            for rule, rule_location in self._items(node, location, "excludeRules", "excludeRule")
        ]
        return Dependency(**fields)

    def _plugin(self, node: Any, location: str) -> Plugin:
        clazz = self._text(node, location, "class", required=True)
        return Plugin(clazz=clazz, short_name=_SHORT_NAME_BY_CLASS.get(clazz, ""))

    def _source_set(self, node: Any, location: str) -> SourceSet:
        return SourceSet(
            name=self._text(node, location, "name", required=True),
            java_directories=[
                SourceDirectory(path=self._tree.text(directory).strip())
                for directory, _ in self._items(node, location, "java", "directory")
            ],
            resource_directories=[
                SourceDirectory(path=self._tree.text(directory).strip())
                for directory, _ in self._items(node, location, "resources", "directory")
            ],
        )

    def _text(self, node: Any, location: str, name: str, *, required: bool = False) -> str:
        child = self._tree.single_child(node, name)
        if child is None:
            if required:
                raise ModelLoadError(f"missing required element {name!r}", location=f"{location}/{name}")
            return ""
        return self._tree.text(child).strip()

    def _items(self, node: Any, location: str, container: str, item: str) -> list[tuple[Any, str]]:
        parent = self._tree.single_child(node, container)
        if parent is None:
            return []
        return [
            (child, f"{location}/{container}/{item}[{index}]")
            for index, child in enumerate(self._tree.repeated_children(parent, item), start=1)
        ]
