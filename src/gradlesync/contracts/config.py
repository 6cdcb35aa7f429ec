"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class GradleSyncConfig(BaseModel):
    gradle_home: Path | None = None
    gradle_executable: str = "gradle"
    build_timeout: float | None = Field(default=None, gt=0)
    extra_args: tuple[str, ...] = ()
    transactional_merge: bool = False

    model_config = {"frozen": True}

    @field_validator("gradle_executable")
    @classmethod
    def validate_executable(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("gradle_executable must be non-empty")
        return value.strip()
