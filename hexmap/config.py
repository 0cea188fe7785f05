"""Validated settings for the command line demo."""

from __future__ import annotations

from functools import reduce

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import AxialCoordinate
from .directions import Direction


def _default_moves() -> list[Direction]:
    return [Direction.LEFT_UPPER, Direction.DOWN, Direction.RIGHT_UPPER]


class DemoSettings(BaseModel):
    """Parameters for the sample walk and neighbourhood printed by the demo."""

    model_config = ConfigDict(extra="forbid")

    origin_q: int = Field(default=0)
    origin_r: int = Field(default=0)
    radius: int = Field(default=1, ge=0)
    moves: list[Direction] = Field(default_factory=_default_moves)

    @field_validator("moves", mode="before")
    @classmethod
    def _normalise_moves(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            raise ValueError("moves must be a sequence of direction names")
        if isinstance(value, (list, tuple)):
            return [item.lower() if isinstance(item, str) else item for item in value]
        return value

    @property
    def origin(self) -> AxialCoordinate:
        return AxialCoordinate(self.origin_q, self.origin_r)

    def destination(self) -> AxialCoordinate:
        """Apply ``moves`` in order starting from :attr:`origin`."""

        return reduce(lambda coord, move: coord.neighbor(move), self.moves, self.origin)


__all__ = ["DemoSettings"]
