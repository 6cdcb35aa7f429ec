"""Progress reporting protocol for the merge pipeline.

The merger emits phase lifecycle events, one phase per model category;
consumers (e.g. the CLI's Rich progress bar) implement ``MergeProgress``
to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class MergeProgress(ABC):
    """Observer interface for merge progress events."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """A merge phase is starting. *total* is ``None`` when the edit count is not known upfront."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str) -> None:
        """One script edit within *phase* has been applied."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        ...  # pragma: no cover


class NullMergeProgress(MergeProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
