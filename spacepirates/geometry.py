"""Axis-aligned rectangles used for bounds and collision checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FloatRect:
    """A rectangle given by its top-left corner and its size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: FloatRect) -> bool:
        """Return True when the two rectangles overlap by a non-empty area."""
        inter_left = max(min(self.left, self.right), min(other.left, other.right))
        inter_right = min(max(self.left, self.right), max(other.left, other.right))
        inter_top = max(min(self.top, self.bottom), min(other.top, other.bottom))
        inter_bottom = min(max(self.top, self.bottom), max(other.top, other.bottom))
        return inter_left < inter_right and inter_top < inter_bottom