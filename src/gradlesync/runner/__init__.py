"""Build runner implementations."""

from gradlesync.runner.gradle import GradleRunner

__all__ = ["GradleRunner"]
