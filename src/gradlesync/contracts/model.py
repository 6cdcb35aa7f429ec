"""Build model contracts.

Every entity is a frozen pydantic model. Building a changed entity goes
through :meth:`Entity.evolve`, which revalidates a copy, so collection
fields (stored as tuples, or read-only mappings for properties) are never
shared with the caller's containers.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Self

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, field_validator, model_validator

from gradlesync.contracts.configuration import DependencyConfiguration

DEFAULT_PACKAGING = "jar"


class Entity(BaseModel):
    model_config = ConfigDict(frozen=True)

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy of this entity with *changes* applied."""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self).model_validate(values)


class Dependency(Entity):
    """Artifact declaration.

    ``configuration_name`` is the only stored configuration field; passing
    ``configuration=<DependencyConfiguration>`` to the constructor or to
    :meth:`evolve` sets it from the enum value.
    """

    group: str = ""
    name: str = ""
    version: str = ""
    classifier: str = ""
    packaging: str = DEFAULT_PACKAGING
    configuration_name: str = ""
    excluded_dependencies: tuple[Dependency, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _apply_configuration(cls, data: Any) -> Any:
        if isinstance(data, dict) and "configuration" in data:
            data = dict(data)
            data["configuration_name"] = DependencyConfiguration(data.pop("configuration")).value
        return data

    @property
    def configuration(self) -> DependencyConfiguration:
        return DependencyConfiguration.from_name(self.configuration_name)

    def to_canonical_string(self) -> str:
        coordinate = f"{self.group}:{self.name}:{self.version}"
        if self.classifier:
            coordinate += f":{self.classifier}"
        if self.packaging and self.packaging != DEFAULT_PACKAGING:
            coordinate += f"@{self.packaging}"
        return coordinate

    @classmethod
    def from_coordinate(cls, configuration_name: str, coordinate: str) -> Dependency:
        """Parse ``group:name[:version[:classifier]][@packaging]``."""
        packaging = DEFAULT_PACKAGING
        if "@" in coordinate:
            coordinate, packaging = coordinate.rsplit("@", 1)
        parts = coordinate.split(":")
        parts += [""] * (4 - len(parts))
        group, name, version, classifier = parts[:4]
        return cls(
            group=group,
            name=name,
            version=version,
            classifier=classifier,
            packaging=packaging,
            configuration_name=configuration_name,
        )

    @classmethod
    def excluded(cls, group: str, name: str) -> Dependency:
        return cls(group=group, name=name)


class Plugin(Entity):
    """Applied plugin, identified by its class or, failing that, its short name."""

    clazz: str = ""
    short_name: str = ""

    @property
    def identifier(self) -> str:
        return self.clazz or self.short_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plugin):
            return NotImplemented
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash(self.identifier)


class Repository(Entity):
    name: str = ""
    url: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repository):
            return NotImplemented
        return self.url == other.url

    def __hash__(self) -> int:
        return hash(self.url)


class Task(Entity):
    """Build task.

    ``depends_on`` holds task names (``Task`` values are accepted and stored
    by name). Names resolve through :meth:`BuildModel.effective_task`, so
    dependency cycles are representable.
    """

    name: str = ""
    type: str = ""
    code: str = ""
    depends_on: tuple[str, ...] = ()

    @field_validator("depends_on", mode="before")
    @classmethod
    def _task_names(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(item.name if isinstance(item, Task) else item for item in value)
        return value

    @property
    def depends_on_names(self) -> list[str]:
        return list(self.depends_on)


class SourceDirectory(Entity):
    path: str = ""


class SourceSet(Entity):
    name: str = ""
    java_directories: tuple[SourceDirectory, ...] = ()
    resource_directories: tuple[SourceDirectory, ...] = ()


def _declares(dependencies: tuple[Dependency, ...], dependency: Dependency) -> bool:
    coordinate = dependency.to_canonical_string()
    return any(
        candidate.to_canonical_string() == coordinate and candidate.configuration_name == dependency.configuration_name
        for candidate in dependencies
    )


def _freeze(properties: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(properties))


def _thaw(properties: Mapping[str, str]) -> dict[str, str]:
    return dict(properties)


def _empty_properties() -> Mapping[str, str]:
    return MappingProxyType({})


# Read-only after validation; serialized as a plain object.
PropertyMap = Annotated[
    Mapping[str, str],
    AfterValidator(_freeze),
    PlainSerializer(_thaw, return_type=dict[str, str]),
]


class BuildModel(Entity):
    """Aggregate of one project's direct (script) and effective (evaluated) state.

    Only the direct collections and the scalar project fields take part in
    merging; the ``effective_*`` collections are filled by the loader.
    """

    group: str = ""
    name: str = ""
    version: str = ""
    packaging: str = ""
    archive_name: str = ""
    archive_path: str = ""
    source_compatibility: str = ""
    target_compatibility: str = ""
    project_path: str = ""
    root_project_path: str = ""

    tasks: tuple[Task, ...] = ()
    dependencies: tuple[Dependency, ...] = ()
    managed_dependencies: tuple[Dependency, ...] = ()
    plugins: tuple[Plugin, ...] = ()
    repositories: tuple[Repository, ...] = ()
    source_sets: tuple[SourceSet, ...] = ()
    properties: PropertyMap = Field(default_factory=_empty_properties)

    effective_tasks: tuple[Task, ...] = ()
    effective_dependencies: tuple[Dependency, ...] = ()
    effective_managed_dependencies: tuple[Dependency, ...] = ()
    effective_plugins: tuple[Plugin, ...] = ()
    effective_repositories: tuple[Repository, ...] = ()
    effective_source_sets: tuple[SourceSet, ...] = ()
    effective_properties: PropertyMap = Field(default_factory=_empty_properties)

    def __hash__(self) -> int:
        values = (getattr(self, name) for name in type(self).model_fields)
        return hash(tuple(frozenset(value.items()) if isinstance(value, Mapping) else value for value in values))

    def has_effective_task(self, name: str) -> bool:
        return any(task.name == name for task in self.effective_tasks)

    def effective_task(self, name: str) -> Task | None:
        """Return the effective task called *name*; with duplicates, the last one declared."""
        found = None
        for task in self.effective_tasks:
            if task.name == name:
                found = task
        return found

    def effective_task_dependencies(self, task: Task) -> list[Task]:
        dependencies = (self.effective_task(name) for name in task.depends_on)
        return [dependency for dependency in dependencies if dependency is not None]

    def has_effective_dependency(self, dependency: Dependency) -> bool:
        return _declares(self.effective_dependencies, dependency)

    def has_effective_managed_dependency(self, dependency: Dependency) -> bool:
        return _declares(self.effective_managed_dependencies, dependency)

    def has_effective_plugin(self, plugin: Plugin) -> bool:
        return plugin in self.effective_plugins

    def has_effective_repository(self, repository: Repository) -> bool:
        return repository in self.effective_repositories
