"""Public contracts for gradlesync."""

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
from gradlesync.contracts.model import (
    DEFAULT_PACKAGING,
    BuildModel,
    Dependency,
    Entity,
    Plugin,
    Repository,
    SourceDirectory,
    SourceSet,
    Task,
)
from gradlesync.contracts.script import PROJECT_PROPERTY_PREFIX, EditOperation, ScriptEdit, ScriptEditor
from gradlesync.contracts.tree import TreeReader

__all__ = [
    "DEFAULT_PACKAGING",
    "PROJECT_PROPERTY_PREFIX",
    "BuildModel",
    "BuildRunner",
    "ConfigError",
    "Dependency",
    "DependencyConfiguration",
    "EditOperation",
    "Entity",
    "GradleSyncConfig",
    "GradleSyncError",
    "MergeError",
    "MergePhase",
    "MergePlan",
    "ModelLoadError",
    "Plugin",
    "Repository",
    "ScriptEdit",
    "ScriptEditError",
    "ScriptEditor",
    "SourceDirectory",
    "SourceSet",
    "Task",
    "TreeReader",
    "UnknownPackagingError",
]
