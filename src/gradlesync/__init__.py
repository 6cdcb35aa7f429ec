"""Public API surface for gradlesync."""

from gradlesync.config import load_config
from gradlesync.contracts.build import BuildRunner
from gradlesync.contracts.config import GradleSyncConfig
from gradlesync.contracts.configuration import DependencyConfiguration
from gradlesync.contracts.exceptions import (
    ConfigError,
    GradleSyncError,
    MergeError,
    ModelLoadError,
    ScriptEditError,
    UnknownPackagingError,
)
from gradlesync.contracts.merge import MergePhase, MergePlan
from gradlesync.contracts.model import BuildModel, Dependency, Plugin, Repository, SourceDirectory, SourceSet, Task
from gradlesync.contracts.script import PROJECT_PROPERTY_PREFIX, EditOperation, ScriptEdit, ScriptEditor
from gradlesync.contracts.tree import TreeReader
from gradlesync.editors import RecordingScriptEditor
from gradlesync.engine import ModelMerger
from gradlesync.model import ModelLoader, PluginType, XmlTreeReader
from gradlesync.runner import GradleRunner
from gradlesync.sdk import GradleSync

__all__ = [
    "PROJECT_PROPERTY_PREFIX",
    "BuildModel",
    "BuildRunner",
    "ConfigError",
    "Dependency",
    "DependencyConfiguration",
    "EditOperation",
    "GradleRunner",
    "GradleSync",
    "GradleSyncConfig",
    "GradleSyncError",
    "MergeError",
    "MergePhase",
    "MergePlan",
    "ModelLoadError",
    "ModelLoader",
    "ModelMerger",
    "Plugin",
    "PluginType",
    "RecordingScriptEditor",
    "Repository",
    "ScriptEdit",
    "ScriptEditError",
    "ScriptEditor",
    "SourceDirectory",
    "SourceSet",
    "Task",
    "TreeReader",
    "UnknownPackagingError",
    "XmlTreeReader",
    "load_config",
]
