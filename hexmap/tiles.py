"""Tile records that can be stored in a :class:`~hexmap.grid.HexGrid`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Terrain(str, Enum):
    """Base terrain of a tile."""

    WATER = "water"
    MOUNTAIN = "mountain"
    FOREST = "forest"
    SWAMP = "swamp"
    DESERT = "desert"


class Animal(str, Enum):
    BEAR = "bear"
    COUGAR = "cougar"


class StructureColor(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    WHITE = "white"
    BLACK = "black"


class StructureKind(str, Enum):
    STANDING_STONE = "standing_stone"
    ABANDONED_SHACK = "abandoned_shack"


@dataclass(frozen=True)
class Structure:
    """A coloured landmark placed on a tile."""

    kind: StructureKind
    color: StructureColor


@dataclass(frozen=True)
class Tile:
    """Terrain plus the optional animal territory and structure on a cell."""

    terrain: Terrain
    animal: Animal | None = None
    structure: Structure | None = None


__all__ = [
    "Animal",
    "Structure",
    "StructureColor",
    "StructureKind",
    "Terrain",
    "Tile",
]
