"""
Minefield configuration
Difficulty presets and sanitizing of user-typed game settings
"""

from typing import Dict, Optional, Tuple

# Difficulty presets (height, width, mines)
DIFFICULTIES: Dict[str, Tuple[int, int, int]] = {
    'beginner': (9, 9, 10),
    'intermediate': (16, 16, 40),
    'expert': (16, 30, 99)
}

# Board shown when the program starts
DEFAULT_SETTINGS: Tuple[int, int, int] = (10, 10, 10)


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse an integer from user text, None if it isn't one"""
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


class GameSettings:
    """
    Board dimensions and mine count typed in by the user

    The engine rejects impossible configurations, so the UI layer keeps
    these values valid before a game is created.
    """

    def __init__(self, height: int = DEFAULT_SETTINGS[0],
                 width: int = DEFAULT_SETTINGS[1],
                 mines: int = DEFAULT_SETTINGS[2]):
        self.height = height
        self.width = width
        self.mines = mines
        self._clamp()

    def update_from_text(self, height_text: Optional[str] = None,
                         width_text: Optional[str] = None,
                         mines_text: Optional[str] = None):
        """
        Replace settings from text fields

        A field that is empty or not a number keeps its previous value.
        """
        height = parse_int(height_text)
        width = parse_int(width_text)
        mines = parse_int(mines_text)

        if height is not None:
            self.height = height
        if width is not None:
            self.width = width
        if mines is not None:
            self.mines = mines
        self._clamp()

    def apply_difficulty(self, difficulty: str) -> bool:
        """Load a difficulty preset, returns False for an unknown name"""
        if difficulty not in DIFFICULTIES:
            return False
        self.height, self.width, self.mines = DIFFICULTIES[difficulty]
        return True

    def difficulty(self) -> Optional[str]:
        """Name of the preset matching the current settings, if any"""
        for name, params in DIFFICULTIES.items():
            if params == self.as_tuple():
                return name
        return None

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.height, self.width, self.mines

    def _clamp(self):
        self.height = max(1, self.height)
        self.width = max(1, self.width)
        self.mines = max(0, self.mines)
        # Leave at least one free cell when asked for more mines than cells
        if self.mines > self.height * self.width:
            self.mines = self.height * self.width - 1

    def __repr__(self) -> str:
        return f"GameSettings(height={self.height}, width={self.width}, mines={self.mines})"
