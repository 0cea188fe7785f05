"""Axial hex coordinates and the cubic helper used for distance math.

Axial ``(q, r)`` is the public key type.  Distance and radius enumeration are
computed in cube space, where the hex metric is the largest absolute
difference of the three components.  The cube form never leaves this module.

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass

from .directions import Direction


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class AxialCoordinate:
    """Immutable axial hex-grid coordinate."""

    q: int
    r: int

    def __post_init__(self) -> None:
        _require_int("q", self.q)
        _require_int("r", self.r)

    def _to_cubic(self) -> _CubicCoordinate:
        return _CubicCoordinate(self.q, -self.q - self.r, self.r)

    def translate(self, dq: int, dr: int) -> AxialCoordinate:
        return AxialCoordinate(self.q + dq, self.r + dr)

    def neighbor(self, direction: Direction) -> AxialCoordinate:
        return self.translate(*Direction(direction).offset)

    def neighbors(self) -> tuple[AxialCoordinate, ...]:
        """Return the six adjacent coordinates in :class:`Direction` order."""

        return tuple(self.neighbor(direction) for direction in Direction)

    def down(self) -> AxialCoordinate:
        return self.neighbor(Direction.DOWN)

    def right_lower(self) -> AxialCoordinate:
        return self.neighbor(Direction.RIGHT_LOWER)

    def right_upper(self) -> AxialCoordinate:
        return self.neighbor(Direction.RIGHT_UPPER)

    def up(self) -> AxialCoordinate:
        return self.neighbor(Direction.UP)

    def left_upper(self) -> AxialCoordinate:
        return self.neighbor(Direction.LEFT_UPPER)

    def left_lower(self) -> AxialCoordinate:
        return self.neighbor(Direction.LEFT_LOWER)

    def distance_from(self, other: AxialCoordinate) -> int:
        """Return the number of unit steps separating ``self`` and ``other``."""

        if not isinstance(other, AxialCoordinate):
            raise TypeError("distance_from expects an AxialCoordinate")
        return self._to_cubic().distance_from(other._to_cubic())

    def all_hexes_within_distance(self, distance: int) -> list[AxialCoordinate]:
        """Return every coordinate at most ``distance`` steps away, ``self`` included.

        The result holds ``3 * n * n + 3 * n + 1`` coordinates for ``n >= 0``
        and is empty for a negative ``distance``.
        """

        return [
            cube.to_axial() for cube in self._to_cubic().all_hexes_within_distance(distance)
        ]


@dataclass(frozen=True, slots=True)
class _CubicCoordinate:
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise ValueError("For cube coords, x + y + z must be 0")

    def to_axial(self) -> AxialCoordinate:
        return AxialCoordinate(self.x, self.z)

    def distance_from(self, other: _CubicCoordinate) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z))

    def all_hexes_within_distance(self, distance: int) -> list[_CubicCoordinate]:
        _require_int("distance", distance)
        if distance < 0:
            return []
        results: list[_CubicCoordinate] = []
        for dx in range(-distance, distance + 1):
            lower_y = max(-distance, -dx - distance)
            upper_y = min(distance, -dx + distance)
            for dy in range(lower_y, upper_y + 1):
                dz = -dx - dy
                results.append(_CubicCoordinate(self.x + dx, self.y + dy, self.z + dz))
        return results


__all__ = ["AxialCoordinate"]
