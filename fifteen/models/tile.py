"""A single numbered tile."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """The value held by one grid cell. ``0`` is the blank."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Tile values must be ints, got {self.value!r}.")
        if self.value < 0:
            raise ValueError(f"Tile values must be non-negative, got {self.value}.")

    @property
    def is_blank(self) -> bool:
        return self.value == 0
