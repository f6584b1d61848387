"""
Tests for the command-line entry point
"""

import os
import sys
from unittest.mock import patch

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import build_settings, main, parse_args


class TestArguments:
    """Test cases for argument parsing"""

    def test_defaults(self):
        settings = build_settings(parse_args([]))

        assert settings.as_tuple() == (10, 10, 10)

    def test_difficulty_then_overrides(self):
        settings = build_settings(parse_args(['--difficulty', 'expert', '--mines', '500']))

        assert settings.as_tuple() == (16, 30, 479)

    def test_non_numeric_option_keeps_default(self):
        settings = build_settings(parse_args(['--height', 'tall', '--width', '4']))

        assert settings.as_tuple() == (10, 4, 10)

    def test_unknown_difficulty_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(['--difficulty', 'nightmare'])


class TestMain:
    """Test cases for main()"""

    def test_main_plays_until_quit(self, capsys):
        with patch('builtins.input', side_effect=['o 0 0', 'q']):
            main(['--height', '1', '--width', '1', '--mines', '0', '--seed', '3'])

        out = capsys.readouterr().out
        assert "Congratulations!" in out

    def test_keyboard_interrupt_exits_cleanly(self, capsys):
        with patch('builtins.input', side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                main([])

        assert exc_info.value.code == 0
        assert "Game interrupted by user" in capsys.readouterr().out
