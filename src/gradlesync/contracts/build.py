"""Build execution contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class BuildRunner(ABC):
    @abstractmethod
    def run_build(self, directory: str | Path, task: str, *arguments: str) -> bool:
        """Run *task* in *directory* and block until it finishes; ``True`` on success."""
        ...  # pragma: no cover
