"""Spy merge progress for engine tests."""

from __future__ import annotations

from gradlesync.engine.progress import MergeProgress


class SpyMergeProgress(MergeProgress):
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []
        self.totals: dict[str, int | None] = {}
        self.errors: dict[str, BaseException] = {}

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self.events.append(("start", phase))
        self.totals[phase] = total

    def item_done(self, phase: str) -> None:
        self.events.append(("item", phase))

    def phase_done(self, phase: str) -> None:
        self.events.append(("done", phase))

    def phase_error(self, phase: str, error: BaseException) -> None:
        self.events.append(("error", phase))
        self.errors[phase] = error

    def started_phases(self) -> list[str]:
        return [phase for event, phase in self.events if event == "start"]
