"""Command line demo walking a small hex map."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.pretty import Pretty
from rich.table import Table

from .config import DemoSettings
from .grid import HexGrid
from .tiles import Animal, Structure, StructureColor, StructureKind, Terrain, Tile

log = logging.getLogger(__name__)


def sample_tile() -> Tile:
    return Tile(
        terrain=Terrain.WATER,
        animal=Animal.BEAR,
        structure=Structure(StructureKind.STANDING_STONE, StructureColor.GREEN),
    )


def run(settings: DemoSettings, console: Console) -> HexGrid[Tile]:
    """Print the demo values for ``settings`` and return the populated grid."""

    tile = sample_tile()
    origin = settings.origin
    destination = settings.destination()
    neighbourhood = origin.all_hexes_within_distance(settings.radius)

    grid: HexGrid[Tile] = HexGrid()

    table = Table(title="Hex demo", show_header=True)
    table.add_column("value")
    table.add_column("result")
    table.add_row("tile", Pretty(tile))
    table.add_row("origin", Pretty(origin))
    table.add_row("destination", Pretty(destination))
    table.add_row("distance", str(origin.distance_from(destination)))
    table.add_row(f"within {settings.radius}", Pretty(neighbourhood))
    console.print(table)

    grid.insert(origin, tile)
    console.print(grid)
    return grid


def main() -> None:
    """Run the demo with default settings."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = DemoSettings()
    log.info("Running hex demo with %s", settings.model_dump(mode="json"))
    run(settings, Console())


if __name__ == "__main__":  # pragma: no cover - module entry point
    main()
