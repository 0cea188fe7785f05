from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """The six unit steps on an axial hex grid."""

    DOWN = "down"
    RIGHT_LOWER = "right_lower"
    RIGHT_UPPER = "right_upper"
    UP = "up"
    LEFT_UPPER = "left_upper"
    LEFT_LOWER = "left_lower"

    @property
    def offset(self) -> tuple[int, int]:
        """The ``(dq, dr)`` step for this direction."""

        return _AXIAL_OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        """The direction whose step undoes this one."""

        return _OPPOSITES[self]


_AXIAL_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.DOWN: (+1, 0),
    Direction.RIGHT_LOWER: (+1, -1),
    Direction.RIGHT_UPPER: (0, -1),
    Direction.UP: (-1, 0),
    Direction.LEFT_UPPER: (-1, +1),
    Direction.LEFT_LOWER: (0, +1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.DOWN: Direction.UP,
    Direction.RIGHT_LOWER: Direction.LEFT_UPPER,
    Direction.RIGHT_UPPER: Direction.LEFT_LOWER,
    Direction.UP: Direction.DOWN,
    Direction.LEFT_UPPER: Direction.RIGHT_LOWER,
    Direction.LEFT_LOWER: Direction.RIGHT_UPPER,
}


__all__ = ["Direction"]
