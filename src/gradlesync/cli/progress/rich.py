"""Rich-based merge progress display."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from gradlesync.engine.merger import (
    PHASE_DEPENDENCIES,
    PHASE_MANAGED_DEPENDENCIES,
    PHASE_PLUGINS,
    PHASE_PROJECT,
    PHASE_PROPERTIES,
    PHASE_REPOSITORIES,
    PHASE_TASKS,
)
from gradlesync.engine.progress import MergeProgress


class RichMergeProgress(MergeProgress):
    """One status line per merge phase, with the number of script edits it made.

    Phases are usually applied lazily, so their size is unknown up front; the
    line counts edits as they land instead of drawing a bar. Use as a context
    manager so the live display is started and stopped::

        with RichMergeProgress() as progress:
            script = ModelMerger(editor, progress=progress).merge(script, old, new)
    """

    _PHASE_STYLES: ClassVar[dict[str, str]] = {
        PHASE_PROJECT: "cyan",
        PHASE_TASKS: "green",
        PHASE_DEPENDENCIES: "blue",
        PHASE_MANAGED_DEPENDENCIES: "blue",
        PHASE_PLUGINS: "magenta",
        PHASE_REPOSITORIES: "magenta",
        PHASE_PROPERTIES: "yellow",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._task_ids: dict[str, RichTaskID] = {}
        self._edits: dict[str, int] = {}
        self._planned: dict[str, int | None] = {}
        self.failed_phase: str | None = None

    @property
    def edits_applied(self) -> int:
        return sum(self._edits.values())

    def edits_in(self, phase: str) -> int:
        return self._edits.get(phase, 0)

    def __enter__(self) -> RichMergeProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()
        if exc_type is None:
            self._console.print(f"{self.edits_applied} script edit(s) applied")

    def _label(self, phase: str) -> str:
        style = self._PHASE_STYLES.get(phase)
        return f"[{style}]{phase:>12}[/]" if style else f"{phase:>12}"

    def _describe(self, phase: str) -> str:
        done = self._edits[phase]
        planned = self._planned[phase]
        count = f"{done}/{planned}" if planned is not None else str(done)
        return f"{self._label(phase)}  {count} edit(s)"

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self._edits[phase] = 0
        self._planned[phase] = total
        self._task_ids[phase] = self._progress.add_task(self._describe(phase), total=total)

    def item_done(self, phase: str) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        self._edits[phase] += 1
        self._progress.update(task_id, advance=1, description=self._describe(phase))

    def phase_done(self, phase: str) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        # Finishing the task stops its spinner; a lazy phase has no total yet.
        done = self._edits[phase]
        self._progress.update(task_id, total=done, completed=done)

    def phase_error(self, phase: str, error: BaseException) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        self.failed_phase = phase
        self._progress.update(
            task_id,
            description=f"[red]✗[/red] {self._label(phase)}  {type(error).__name__} after {self._edits[phase]} edit(s)",
        )
