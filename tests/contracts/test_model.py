from __future__ import annotations

import pytest
from pydantic import ValidationError

from gradlesync.contracts.configuration import DependencyConfiguration
from gradlesync.contracts.model import BuildModel, Dependency, Plugin, Repository, SourceDirectory, SourceSet, Task


def test_defaults() -> None:
    dep = Dependency()

    assert dep.classifier == ""
    assert dep.packaging == "jar"
    assert dep.configuration is DependencyConfiguration.OTHER
    assert dep.excluded_dependencies == ()


@pytest.mark.parametrize(
    ("coordinate", "classifier", "packaging"),
    [
        ("group:name:version", "", "jar"),
        ("group:name:version:classifier", "classifier", "jar"),
        ("group:name:version@packaging", "", "packaging"),
        ("group:name:version:classifier@packaging", "classifier", "packaging"),
    ],
)
def test_from_coordinate(coordinate: str, classifier: str, packaging: str) -> None:
    dep = Dependency.from_coordinate("compile", coordinate)

    assert dep.configuration_name == "compile"
    assert dep.group == "group"
    assert dep.name == "name"
    assert dep.version == "version"
    assert dep.classifier == classifier
    assert dep.packaging == packaging


def test_from_coordinate_without_version() -> None:
    dep = Dependency.from_coordinate("", "group:name")

    assert (dep.group, dep.name, dep.version) == ("group", "name", "")


@pytest.mark.parametrize(
    ("changes", "expected"),
    [
        ({}, "group:name:version"),
        ({"classifier": "c"}, "group:name:version:c"),
        ({"packaging": "pom"}, "group:name:version@pom"),
        ({"classifier": "c", "packaging": "pom"}, "group:name:version:c@pom"),
    ],
)
def test_to_canonical_string(changes: dict[str, str], expected: str) -> None:
    dep = Dependency.from_coordinate("compile", "group:name:version").evolve(**changes)

    assert dep.to_canonical_string() == expected


def test_configuration_name_from_enum() -> None:
    dep = Dependency(configuration=DependencyConfiguration.RUNTIME)

    assert dep.configuration_name == "runtime"
    assert dep.configuration is DependencyConfiguration.RUNTIME


def test_configuration_enum_from_name() -> None:
    dep = Dependency(configuration_name="runtime")

    assert dep.configuration is DependencyConfiguration.RUNTIME


def test_unknown_configuration_name_is_kept_with_other_enum() -> None:
    dep = Dependency(configuration_name="compileOnly")

    assert dep.configuration_name == "compileOnly"
    assert dep.configuration is DependencyConfiguration.OTHER


def test_evolve_configuration_keeps_name_in_sync() -> None:
    dep = Dependency(configuration_name="compileOnly").evolve(configuration=DependencyConfiguration.TEST_COMPILE)

    assert dep.configuration_name == "testCompile"
    assert dep.configuration is DependencyConfiguration.TEST_COMPILE


def test_entities_are_frozen() -> None:
    dep = Dependency(group="g")

    with pytest.raises(ValidationError):
        dep.group = "other"  # type: ignore[misc]


def test_evolve_copies_collections() -> None:
    exclusions = [Dependency.excluded("org.abc", "xyz")]
    dep = Dependency(name="lib", excluded_dependencies=exclusions)
    copy = dep.evolve()
    exclusions.append(Dependency.excluded("org.def", "uvw"))

    assert copy == dep
    assert copy is not dep
    assert len(dep.excluded_dependencies) == 1
    assert isinstance(dep.excluded_dependencies, tuple)


def test_build_model_properties_are_not_aliased() -> None:
    properties = {"a": "1"}
    model = BuildModel(properties=properties)
    properties["b"] = "2"

    assert model.properties == {"a": "1"}
    assert model.evolve(properties={"c": "3"}).properties == {"c": "3"}


def test_dependency_equality_includes_configuration_and_exclusions() -> None:
    base = Dependency.from_coordinate("compile", "g:n:1")

    assert base == Dependency.from_coordinate("compile", "g:n:1")
    assert base != base.evolve(configuration=DependencyConfiguration.RUNTIME)
    assert base != base.evolve(excluded_dependencies=[Dependency.excluded("x", "y")])


def test_plugin_equality_by_identifier() -> None:
    assert Plugin(clazz="org.gradle.api.plugins.WarPlugin", short_name="war") == Plugin(
        clazz="org.gradle.api.plugins.WarPlugin"
    )
    assert Plugin(short_name="war") == Plugin(short_name="war")
    assert Plugin(short_name="war") != Plugin(short_name="ear")
    assert Plugin(clazz="a.B", short_name="b").identifier == "a.B"
    assert len({Plugin(clazz="a.B"), Plugin(clazz="a.B", short_name="b")}) == 1


def test_repository_equality_by_url() -> None:
    assert Repository(name="central", url="https://repo/") == Repository(name="other", url="https://repo/")
    assert Repository(url="https://a/") != Repository(url="https://b/")


def test_task_depends_on_stores_names() -> None:
    test = Task(name="test")
    build = Task(name="build", depends_on=[test])
    dist = Task(name="dist", type="Zip", depends_on=[build, "test"])

    assert build.depends_on == ("test",)
    assert dist.depends_on == ("build", "test")
    assert dist.depends_on_names == ["build", "test"]


def test_effective_task_lookup() -> None:
    first = Task(name="build", type="A")
    second = Task(name="build", type="B", depends_on=["test", "missing"])
    test = Task(name="test")
    model = BuildModel(effective_tasks=[first, test, second])

    assert model.effective_task("build") == second
    assert model.effective_task("dist") is None
    assert model.effective_task_dependencies(second) == [test]


def test_cyclic_tasks_are_representable() -> None:
    model = BuildModel(effective_tasks=[Task(name="a", depends_on=["b"]), Task(name="b", depends_on=["a"])])
    a = model.effective_task("a")

    assert a is not None
    (b,) = model.effective_task_dependencies(a)
    assert model.effective_task_dependencies(b) == [a]


def test_source_set_directories() -> None:
    source_set = SourceSet(name="main", java_directories=[SourceDirectory(path="src/main/java")])

    assert source_set.java_directories[0].path == "src/main/java"
    assert source_set.resource_directories == ()


def test_has_effective_helpers() -> None:
    junit = Dependency.from_coordinate("testCompile", "junit:junit:4.11")
    model = BuildModel(
        effective_tasks=[Task(name="build")],
        effective_dependencies=[junit.evolve(excluded_dependencies=[Dependency.excluded("org.hamcrest", "core")])],
        effective_plugins=[Plugin(clazz="org.gradle.api.plugins.JavaPlugin")],
        effective_repositories=[Repository(url="https://repo1.maven.org/maven2/")],
    )

    assert model.has_effective_task("build")
    assert not model.has_effective_task("dist")
    assert model.has_effective_dependency(junit)
    assert not model.has_effective_dependency(junit.evolve(configuration=DependencyConfiguration.COMPILE))
    assert not model.has_effective_managed_dependency(junit)
    assert model.has_effective_plugin(Plugin(clazz="org.gradle.api.plugins.JavaPlugin"))
    assert model.has_effective_repository(Repository(url="https://repo1.maven.org/maven2/"))


def test_properties_are_read_only() -> None:
    model = BuildModel(properties={"a": "1"}, effective_properties={"a": "1", "b": "2"})

    with pytest.raises(TypeError):
        model.effective_properties["x"] = "y"  # type: ignore[index]
    with pytest.raises(TypeError):
        model.properties["a"] = "2"  # type: ignore[index]
    assert model.evolve(properties={"c": "3"}).properties == {"c": "3"}
    with pytest.raises(TypeError):
        model.evolve(name="app").properties["b"] = "2"  # type: ignore[index]


def test_properties_are_copied_from_the_caller() -> None:
    source = {"a": "1"}
    model = BuildModel(properties=source)

    source["a"] = "2"

    assert model.properties == {"a": "1"}


def test_build_model_is_hashable() -> None:
    model = BuildModel(name="app", properties={"a": "1"}, tasks=[Task(name="build")])

    assert hash(model) == hash(BuildModel(name="app", properties={"a": "1"}, tasks=[Task(name="build")]))
    assert len({model, model.evolve(), BuildModel(name="other")}) == 2


def test_properties_dump_as_plain_dict() -> None:
    model = BuildModel(properties={"a": "1"})

    assert model.model_dump()["properties"] == {"a": "1"}
    assert '"properties":{"a":"1"}' in model.model_dump_json()
