"""Axial hex-grid coordinates and sparse per-cell storage."""

from .coords import AxialCoordinate
from .directions import Direction
from .grid import HexGrid

__version__ = "0.1.0"

__all__ = ["AxialCoordinate", "Direction", "HexGrid", "__version__"]
