"""
Minefield engine package
Grid state, mine placement, flood-fill reveal, game sessions and text display
"""

from .board import Minefield, CellState, Cell
from .config import DIFFICULTIES, DEFAULT_SETTINGS, GameSettings
from .display import render_board, render_cell
from .errors import MinefieldError, InvalidConfiguration
from .game_api import create_game, cumulative_win_ratio
from .placement import RelocationPolicy, place_mines, relocate_mine
from .reveal import OpenResult, open_cell
from .session import GameSession, GameState
from .statistics import GameStatistics

__version__ = "1.0.0"

__all__ = [
    'Minefield', 'CellState', 'Cell',
    'DIFFICULTIES', 'DEFAULT_SETTINGS', 'GameSettings',
    'render_board', 'render_cell',
    'MinefieldError', 'InvalidConfiguration',
    'create_game', 'cumulative_win_ratio',
    'RelocationPolicy', 'place_mines', 'relocate_mine',
    'OpenResult', 'open_cell',
    'GameSession', 'GameState',
    'GameStatistics',
]
