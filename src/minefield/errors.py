"""
Minefield Errors
Exceptions raised by the minefield engine
"""


class MinefieldError(Exception):
    """Base class for minefield engine errors"""


class InvalidConfiguration(MinefieldError, ValueError):
    """Raised when a minefield is built with impossible dimensions or mine count"""

    def __init__(self, height: int, width: int, mines: int):
        self.height = height
        self.width = width
        self.mines = mines
        super().__init__(
            f"Invalid minefield configuration: height={height}, width={width}, mines={mines} "
            "(height and width must be positive, mines must be non-negative)"
        )
