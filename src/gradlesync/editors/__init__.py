"""Script editor implementations."""

from gradlesync.editors.recording import RecordingScriptEditor

__all__ = ["RecordingScriptEditor"]
