"""
Grid helpers
Coordinate type, bounds checking and 8-connected neighborhoods
"""

from typing import List, Tuple

Coordinate = Tuple[int, int]

# Offsets of the 8 surrounding cells, origin excluded
NEIGHBOR_OFFSETS: Tuple[Coordinate, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr != 0 or dc != 0
)


def in_bounds(row: int, col: int, height: int, width: int) -> bool:
    """Check if (row, col) lies inside a height x width grid"""
    return 0 <= row < height and 0 <= col < width


def neighbors(row: int, col: int, height: int, width: int) -> List[Coordinate]:
    """Return the in-bounds neighbors of a cell (up to 8, never the cell itself)"""
    coords = []
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if in_bounds(nr, nc, height, width):
            coords.append((nr, nc))
    return coords
