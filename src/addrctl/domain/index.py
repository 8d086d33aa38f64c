"""Index — a position in the displayed person list.

Users address records one-based; internal list access is zero-based.
Keeping both behind one type avoids off-by-one drift at call sites.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Index:
    """A non-negative zero-based position with a one-based view."""

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            msg = f"Index must be non-negative, got {self.zero_based}"
            raise ValueError(msg)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    @classmethod
    def from_zero_based(cls, value: int) -> Index:
        return cls(value)

    @classmethod
    def from_one_based(cls, value: int) -> Index:
        return cls(value - 1)

    def __str__(self) -> str:
        return str(self.one_based)
