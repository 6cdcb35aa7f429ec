"""Known Gradle plugin types and the packaging each one provides."""

from __future__ import annotations

from enum import Enum

from gradlesync.contracts.exceptions import UnknownPackagingError


class PluginType(Enum):
    JAVA = ("org.gradle.api.plugins.JavaPlugin", "java", "jar")
    GROOVY = ("org.gradle.api.plugins.GroovyPlugin", "groovy", "jar")
    SCALA = ("org.gradle.api.plugins.scala.ScalaPlugin", "scala", "jar")
    WAR = ("org.gradle.api.plugins.WarPlugin", "war", "war")
    EAR = ("org.gradle.plugins.ear.EarPlugin", "ear", "ear")
    APPLICATION = ("org.gradle.api.plugins.ApplicationPlugin", "application", "")
    MAVEN = ("org.gradle.api.plugins.MavenPlugin", "maven", "")
    ECLIPSE = ("org.gradle.plugins.ide.eclipse.EclipsePlugin", "eclipse", "")
    IDEA = ("org.gradle.plugins.ide.idea.IdeaPlugin", "idea", "")

    def __init__(self, clazz: str, short_name: str, packaging: str) -> None:
        self.clazz = clazz
        self.short_name = short_name
        self.packaging = packaging

    @property
    def identifier(self) -> str:
        """Preferred script spelling: the short name when there is one."""
        return self.short_name or self.clazz


def plugin_for_packaging(packaging: str) -> PluginType:
    """Return the first known plugin providing *packaging*."""
    if packaging:
        for plugin_type in PluginType:
            if plugin_type.packaging == packaging:
                return plugin_type
    raise UnknownPackagingError(packaging)
