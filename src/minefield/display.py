"""
Display
Masked text view of a minefield
"""

MINE_GLYPH = "X"
FLAG_GLYPH = "F"
HIDDEN_GLYPH = "."
EMPTY_GLYPH = " "


def render_cell(field, row: int, col: int) -> str:
    """
    Render one cell as a single character

    Opened cells (or every cell in reveal-all mode) show "X" for a mine,
    " " for no mined neighbors, or the neighbor count 1-8. Hidden cells
    show "F" when flagged, "." otherwise.

    Raises:
        IndexError: If (row, col) is outside the field
    """
    if not field.in_bounds(row, col):
        raise IndexError(f"Cell ({row}, {col}) is outside the {field.height}x{field.width} field")

    if field.show_all or field.is_opened(row, col):
        if field.has_mine(row, col):
            return MINE_GLYPH
        count = field.count_mined_neighbors(row, col)
        return EMPTY_GLYPH if count == 0 else str(count)

    return FLAG_GLYPH if field.is_flagged(row, col) else HIDDEN_GLYPH


def render_board(field) -> str:
    """Render the whole field row by row, each row ending with a newline"""
    lines = []
    for row in range(field.height):
        lines.append("".join(render_cell(field, row, col) for col in range(field.width)))
        lines.append("\n")
    return "".join(lines)
