"""Sparse storage of per-cell payloads keyed by axial coordinate."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from .coords import AxialCoordinate

log = logging.getLogger(__name__)

T = TypeVar("T")


class HexGrid(Generic[T]):
    """Maps occupied hex cells to a single payload each.

    Inserting at an occupied coordinate replaces the previous payload.
    Not safe for concurrent mutation.
    """

    def __init__(self) -> None:
        self._cells: dict[AxialCoordinate, T] = {}

    def insert(self, coordinate: AxialCoordinate, value: T) -> None:
        if not isinstance(coordinate, AxialCoordinate):
            raise TypeError("HexGrid keys must be AxialCoordinate instances")
        if coordinate in self._cells:
            log.debug("Replacing payload at (%d, %d)", coordinate.q, coordinate.r)
        self._cells[coordinate] = value

    def get(self, coordinate: AxialCoordinate) -> T | None:
        """Return the payload stored at ``coordinate`` or ``None`` when empty."""

        return self._cells.get(coordinate)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cells!r})"


__all__ = ["HexGrid"]
