"""
Mine placement
Random initial distribution and first-click mine relocation
"""

from enum import Enum


class RelocationPolicy(Enum):
    """How relocation behaves on a saturated board (every cell mined)"""
    # Sample once, remove the clicked mine, then re-add at the sample.
    # The sample is always mined, so the field loses one mine, unless the
    # sample is the clicked cell, which gets its mine back.
    LITERAL = "literal"
    # Remove the clicked mine and place no replacement
    CLEAR = "clear"


def random_coordinate(field, rng):
    """Pick a uniformly random (row, col) on the field"""
    return rng.randrange(field.height), rng.randrange(field.width)


def place_mines(field, count: int, rng):
    """
    Place `count` mines on distinct random cells using rejection sampling

    Args:
        field: Minefield to fill, count must not exceed its size
        count: Number of mines to add
        rng: Random source providing randrange()
    """
    placed = 0
    while placed < count:
        row, col = random_coordinate(field, rng)
        if field.add_mine(row, col):
            placed += 1


def relocate_mine(field, row: int, col: int, rng,
                  policy: RelocationPolicy = RelocationPolicy.CLEAR):
    """
    Move the mine under a first click somewhere else

    On a board with at least one mine-free cell the mine is moved to a
    random mine-free cell other than (row, col), keeping the mine count.
    A saturated board has nowhere to move it, see RelocationPolicy.

    Args:
        field: Minefield holding a mine at (row, col)
        row: Row of the clicked cell
        col: Column of the clicked cell
        rng: Random source providing randrange()
        policy: Behavior on a saturated board
    """
    saturated = field.mines_placed() >= field.size

    if saturated and policy == RelocationPolicy.CLEAR:
        field.remove_mine(row, col)
        return

    candidate = random_coordinate(field, rng)
    if not saturated:
        while candidate == (row, col) or field.has_mine(*candidate):
            candidate = random_coordinate(field, rng)

    field.remove_mine(row, col)
    field.add_mine(*candidate)
