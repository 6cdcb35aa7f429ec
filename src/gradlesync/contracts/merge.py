"""Merge plan contracts."""

from __future__ import annotations

from pydantic import BaseModel

from gradlesync.contracts.script import ScriptEdit


class MergePhase(BaseModel):
    name: str
    edits: tuple[ScriptEdit, ...] = ()


class MergePlan(BaseModel):
    phases: tuple[MergePhase, ...] = ()

    @property
    def edits(self) -> list[ScriptEdit]:
        return [edit for phase in self.phases for edit in phase.edits]

    @property
    def is_empty(self) -> bool:
        return not any(phase.edits for phase in self.phases)

    def phase(self, name: str) -> MergePhase:
        for phase in self.phases:
            if phase.name == name:
                return phase
        raise KeyError(name)
