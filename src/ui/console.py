"""
Minefield Console
Text front end: reads commands, applies clicks and prints the board
"""

import random
from typing import Callable, Optional

from minefield.config import DIFFICULTIES, GameSettings
from minefield.game_api import create_game
from minefield.session import GameSession
from minefield.statistics import GameStatistics

HELP_TEXT = """Commands:
  o ROW COL          open a cell (left click)
  f ROW COL          flag/unflag a cell (right click)
  n [H W M]          new game, optionally with new height, width and mine count
  d DIFFICULTY       new game with a preset (beginner, intermediate, expert)
  h                  show this help
  q                  quit
Rows and columns are 0-based."""

VICTORY_MESSAGE = "Congratulations!\nWant to try again?\n(type n for a new game)"
DEFEAT_MESSAGE = "You lost!\nTough luck, try again?\n(type n for a new game)"


class MinefieldConsole:
    """Console game loop driving one GameSession at a time"""

    def __init__(self, settings: Optional[GameSettings] = None,
                 statistics: Optional[GameStatistics] = None,
                 rng: Optional[random.Random] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output: Optional[Callable[[str], None]] = None):
        self.settings = settings if settings is not None else GameSettings()
        self.statistics = statistics if statistics is not None else GameStatistics()
        self.rng = rng
        self.input_func = input_func if input_func is not None else input
        self.output = output if output is not None else print
        self.session: Optional[GameSession] = None
        self._new_game()

    def _new_game(self):
        """Discard the current game and start a new one from the settings"""
        height, width, mines = self.settings.as_tuple()
        self.session = create_game(height, width, mines, rng=self.rng,
                                   statistics=self.statistics)

    def status_line(self) -> str:
        """Text shown under the board: size, mines left and the win ratio"""
        height, width, _ = self.settings.as_tuple()
        line = (f"{height}x{width}  mines left: {self.session.remaining_mines()}"
                "  Classic mode (first click=no mine)")
        ratio = self.statistics.win_ratio()
        if ratio is not None:
            line += f"\nWin/Loss: {ratio:.2f}"
        return line

    def show_board(self):
        self.output(self.session.query_board().rstrip("\n"))
        self.output(self.status_line())

    def handle_command(self, line: str) -> bool:
        """
        Apply one command line

        Returns:
            False when the user asked to quit, True otherwise
        """
        parts = line.replace(",", " ").split()
        if not parts:
            return True

        command = parts[0].lower()
        if command in ("q", "quit", "exit"):
            return False

        if command in ("h", "help", "?"):
            self.output(HELP_TEXT)
        elif command in ("o", "f"):
            self._handle_click(command, parts[1:])
        elif command == "n":
            # Missing or non-numeric fields keep their previous value
            fields = parts[1:4] + [None] * (3 - len(parts[1:4]))
            self.settings.update_from_text(*fields)
            self._new_game()
            self.show_board()
        elif command == "d":
            if len(parts) < 2 or not self.settings.apply_difficulty(parts[1].lower()):
                self.output(f"Unknown difficulty. Choose one of: {', '.join(DIFFICULTIES)}")
            else:
                self._new_game()
                self.show_board()
        else:
            self.output("Unknown command. Type h for help.")
        return True

    def _handle_click(self, command: str, args):
        if len(args) != 2:
            self.output("Invalid input. Example: o 3 5")
            return
        try:
            row, col = int(args[0]), int(args[1])
        except ValueError:
            self.output("Invalid input. Coordinates must be integers.")
            return

        if not self.session.field.in_bounds(row, col):
            self.output(f"({row}, {col}) is outside the board.")
            return

        # Clicks after the game is over are ignored
        if not self.session.is_running():
            self.output("Game over. Type n for a new game.")
            return

        if command == "o":
            self.session.left_click(row, col)
        else:
            self.session.right_click(row, col)

        self.show_board()
        if self.session.is_won():
            self.output(VICTORY_MESSAGE)
        elif self.session.is_lost():
            self.output(DEFEAT_MESSAGE)

    def run(self):
        """Read and apply commands until quit or end of input"""
        self.output("Minefield (type h for help)")
        self.show_board()
        while True:
            try:
                line = self.input_func("> ")
            except EOFError:
                return
            if not self.handle_command(line):
                return
