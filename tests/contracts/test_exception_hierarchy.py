from __future__ import annotations

from gradlesync.contracts.exceptions import (
    ConfigError,
    GradleSyncError,
    MergeError,
    ModelLoadError,
    ScriptEditError,
    UnknownPackagingError,
)


def test_all_errors_share_base() -> None:
    for error_type in (ConfigError, ModelLoadError, MergeError, UnknownPackagingError, ScriptEditError):
        assert issubclass(error_type, GradleSyncError)


def test_model_load_error_carries_location() -> None:
    error = ModelLoadError("missing required element 'name'", location="project/tasks/task[2]/name")

    assert error.location == "project/tasks/task[2]/name"
    assert "project/tasks/task[2]/name" in str(error)


def test_unknown_packaging_error() -> None:
    error = UnknownPackagingError("rar")

    assert isinstance(error, MergeError)
    assert error.packaging == "rar"
    assert error.partial_script is None
    assert "rar" in str(error)


def test_script_edit_error_partial_script() -> None:
    assert ScriptEditError("boom").partial_script is None
    assert ScriptEditError("boom", partial_script="group = 'g'\n").partial_script == "group = 'g'\n"
