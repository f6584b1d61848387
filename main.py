"""
Minefield - Main Entry Point
Plays minefield games in the terminal
"""

import argparse
import random
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from minefield.config import DEFAULT_SETTINGS, DIFFICULTIES, GameSettings
from ui.console import MinefieldConsole


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Play minefield in the terminal')
    parser.add_argument('--height', type=str, default=None,
                        help=f'Number of rows (default {DEFAULT_SETTINGS[0]})')
    parser.add_argument('--width', type=str, default=None,
                        help=f'Number of columns (default {DEFAULT_SETTINGS[1]})')
    parser.add_argument('--mines', type=str, default=None,
                        help=f'Number of mines (default {DEFAULT_SETTINGS[2]})')
    parser.add_argument('--difficulty', type=str, default=None, choices=list(DIFFICULTIES),
                        help='Start from a preset instead of the default board')
    parser.add_argument('--seed', type=int, default=-1,
                        help='RNG seed; <0 uses OS entropy (random every run)')
    return parser.parse_args(argv)


def build_settings(args) -> GameSettings:
    """Turn command-line options into sanitized game settings"""
    settings = GameSettings()
    if args.difficulty:
        settings.apply_difficulty(args.difficulty)
    settings.update_from_text(args.height, args.width, args.mines)
    return settings


def main(argv=None):
    """Main entry point for the minefield game"""
    args = parse_args(argv)
    rng = random.Random(args.seed) if args.seed >= 0 else None
    try:
        console = MinefieldConsole(build_settings(args), rng=rng)
        console.run()
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        sys.exit(0)
    except Exception as e:
        print(f"Error running minefield: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
