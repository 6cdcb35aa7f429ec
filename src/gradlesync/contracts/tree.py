"""Effective build tree reader contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

N = TypeVar("N")


class TreeReader(ABC, Generic[N]):
    """Read-only navigation over a parsed effective build description."""

    @abstractmethod
    def parse(self, raw: str) -> N: ...  # pragma: no cover

    @abstractmethod
    def single_child(self, node: N, name: str) -> N | None: ...  # pragma: no cover

    @abstractmethod
    def repeated_children(self, node: N, name: str) -> list[N]: ...  # pragma: no cover

    @abstractmethod
    def text(self, node: N) -> str: ...  # pragma: no cover
