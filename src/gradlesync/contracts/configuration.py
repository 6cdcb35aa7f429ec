"""Dependency configuration hierarchy."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType


class DependencyConfiguration(StrEnum):
    """Gradle dependency configuration, valued by its name in build scripts."""

    COMPILE = "compile"
    RUNTIME = "runtime"
    TEST_COMPILE = "testCompile"
    TEST_RUNTIME = "testRuntime"
    # Simulates the Maven ``import`` scope; only meaningful for managed dependencies.
    IMPORT = "import"
    # Declaration without version and configuration.
    DIRECT = "direct"
    # Any configuration name not listed above.
    OTHER = ""

    @property
    def maven_scope(self) -> str:
        return _MAVEN_SCOPE_BY_CONFIG[self]

    @property
    def extended_by(self) -> tuple[DependencyConfiguration, ...]:
        return _EXTENDED_BY.get(self, ())

    def overrides(self, candidate: DependencyConfiguration) -> bool:
        """Tell whether a declaration under this configuration covers one under *candidate*."""
        stack = [self]
        while stack:
            config = stack.pop()
            if config is candidate:
                return True
            stack.extend(reversed(config.extended_by))
        return False

    @classmethod
    def from_name(cls, name: str) -> DependencyConfiguration:
        try:
            return cls(name)
        except ValueError:
            return cls.OTHER

    @classmethod
    def from_maven_scope(cls, scope: str) -> DependencyConfiguration:
        return _CONFIG_BY_MAVEN_SCOPE.get(scope, cls.OTHER)


_MAVEN_SCOPE_BY_CONFIG = MappingProxyType(
    {
        DependencyConfiguration.COMPILE: "compile",
        DependencyConfiguration.RUNTIME: "runtime",
        DependencyConfiguration.TEST_COMPILE: "test",
        DependencyConfiguration.TEST_RUNTIME: "test",
        DependencyConfiguration.IMPORT: "import",
        DependencyConfiguration.DIRECT: "",
        DependencyConfiguration.OTHER: "",
    }
)

_CONFIG_BY_MAVEN_SCOPE = MappingProxyType(
    {
        "compile": DependencyConfiguration.COMPILE,
        "provided": DependencyConfiguration.COMPILE,
        "runtime": DependencyConfiguration.RUNTIME,
        "test": DependencyConfiguration.TEST_COMPILE,
        "system": DependencyConfiguration.COMPILE,
        "import": DependencyConfiguration.IMPORT,
    }
)

# https://docs.gradle.org/current/userguide/java_plugin.html#tab:configurations
_EXTENDED_BY = MappingProxyType(
    {
        DependencyConfiguration.COMPILE: (DependencyConfiguration.RUNTIME, DependencyConfiguration.TEST_COMPILE),
        DependencyConfiguration.RUNTIME: (DependencyConfiguration.OTHER, DependencyConfiguration.TEST_RUNTIME),
        DependencyConfiguration.TEST_COMPILE: (DependencyConfiguration.OTHER, DependencyConfiguration.TEST_RUNTIME),
        DependencyConfiguration.TEST_RUNTIME: (DependencyConfiguration.OTHER,),
    }
)
