from collections import defaultdict

from hexmap import AxialCoordinate, HexGrid

center = AxialCoordinate(2, -1)
radius = 3

grid: HexGrid[int] = HexGrid()
rings: dict[int, list[AxialCoordinate]] = defaultdict(list)


if __name__ == "__main__":
    for coord in center.all_hexes_within_distance(radius):
        distance = center.distance_from(coord)
        grid.insert(coord, distance)
        rings[distance].append(coord)

    for distance in sorted(rings):
        print(f"ring {distance}:", len(rings[distance]), "cells")
    print("cells stored:", len(grid))
    print("value at", center.down().down(), "->", grid.get(center.down().down()))
