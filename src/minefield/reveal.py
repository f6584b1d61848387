"""
Reveal engine
Opens cells and cascades through connected mine-free regions
"""

from enum import Enum
from typing import List

from .grid import Coordinate, neighbors


class OpenResult(Enum):
    """Outcome of an open request"""
    ALREADY_OPEN_OR_MINED = "already_open_or_mined"
    OPENED = "opened"


def open_cell(field, row: int, col: int) -> OpenResult:
    """
    Open a cell and flood-fill its zero-count region

    Cells with no mined neighbors push their neighbors onto a work stack,
    cells with a count of 1-8 are opened but stop the cascade. Mined and
    already opened cells are skipped, which bounds the traversal.

    Returns:
        OPENED if (row, col) was opened by this call,
        ALREADY_OPEN_OR_MINED if nothing changed
    """
    if not _open_one(field, row, col):
        return OpenResult.ALREADY_OPEN_OR_MINED

    stack: List[Coordinate] = [(row, col)]
    while stack:
        r, c = stack.pop()
        if field.count_mined_neighbors(r, c) != 0:
            continue
        for nr, nc in neighbors(r, c, field.height, field.width):
            if _open_one(field, nr, nc):
                stack.append((nr, nc))

    return OpenResult.OPENED


def _open_one(field, row: int, col: int) -> bool:
    """Open a single mine-free cell, False if mined or already open"""
    if field.has_mine(row, col):
        return False
    return field.set_opened(row, col)
