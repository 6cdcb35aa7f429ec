"""Blocking wrapper around the ``gradle`` command line."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from gradlesync.contracts.build import BuildRunner
from gradlesync.contracts.config import GradleSyncConfig

logger = logging.getLogger(__name__)


class GradleRunner(BuildRunner):
    """Runs Gradle builds by shelling out to the Gradle launcher.

    The launcher is ``$GRADLE_HOME/bin/gradle`` when a Gradle home is
    configured (or set in the environment), else ``gradle_executable``.
    Build output is captured and only surfaced through debug logging; a
    launcher that cannot be started is logged as a warning and reported as
    a failed build.
    """

    def __init__(self, config: GradleSyncConfig | None = None) -> None:
        self._config = config or GradleSyncConfig()

    def executable(self) -> str:
        gradle_home = self._config.gradle_home or os.environ.get("GRADLE_HOME")
        if gradle_home:
            launcher = "gradle.bat" if os.name == "nt" else "gradle"
            return str(Path(gradle_home) / "bin" / launcher)
        return self._config.gradle_executable

    def run_build(self, directory: str | Path, task: str, *arguments: str) -> bool:
        cmd = [self.executable(), task, *self._config.extra_args, *arguments]
        logger.debug("Running: %s (in %s)", " ".join(cmd), directory)
        try:
            result = subprocess.run(
                cmd,
                cwd=directory,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                timeout=self._config.build_timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Gradle task %s timed out after %ss", task, self._config.build_timeout)
            return False
        except OSError as exc:
            logger.warning("Failed to execute %s: %s", cmd[0], exc)
            return False

        logger.debug("Gradle output:\n%s", result.stdout)
        if result.returncode != 0:
            logger.debug("Gradle task %s failed with exit code %d:\n%s", task, result.returncode, result.stderr)
            return False
        return True
