"""Exception hierarchy for gradlesync."""

from __future__ import annotations


class GradleSyncError(Exception):
    """Base exception for all gradlesync errors."""


class ConfigError(GradleSyncError):
    """Configuration loading or validation failure."""


class ModelLoadError(GradleSyncError):
    """Effective build description violates its input contract.

    Attributes:
        location: Slash-separated path of the offending element
            (e.g. ``project/tasks/task[3]/name``).
    """

    def __init__(self, message: str, *, location: str) -> None:
        super().__init__(f"{message} (at {location})")
        self.location = location


class MergeError(GradleSyncError):
    """Model merge failure.

    Attributes:
        partial_script: Script text with every edit applied before the failure,
            or ``None`` when no edit had been applied.
    """

    def __init__(self, message: str, *, partial_script: str | None = None) -> None:
        super().__init__(message)
        self.partial_script = partial_script


class UnknownPackagingError(MergeError):
    """No known plugin provides the requested packaging."""

    def __init__(self, packaging: str) -> None:
        super().__init__(f"There is no plugin which provides {packaging!r} packaging")
        self.packaging = packaging


class ScriptEditError(GradleSyncError):
    """Script mutation could not be applied to the build script.

    Attributes:
        partial_script: Set by the merger to the script text with every edit
            applied before the failing one.
    """

    def __init__(self, message: str, *, partial_script: str | None = None) -> None:
        super().__init__(message)
        self.partial_script = partial_script
