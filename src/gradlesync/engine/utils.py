"""Engine utility helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

T = TypeVar("T")


def subtract(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """All elements of *first* not equal to any element of *second*, in order."""
    remaining = list(second)
    return [item for item in first if item not in remaining]


def subtract_mapping(first: Mapping[str, str], second: Mapping[str, str]) -> dict[str, str]:
    """Entries of *first* for which *second* has no equal value under the same key."""
    return {key: value for key, value in first.items() if key not in second or second[key] != value}
