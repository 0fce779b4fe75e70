"""
Unit tests for commands.py module.

Tests:
- Parsing place, undo and info commands
- Rejection of malformed input
"""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gorules.board import IntersectionState
from gorules.commands import Info, Place, Undo, parse_command
from gorules.errors import InvalidMove, InvalidPosition


class TestParsePlace:
    """Tests for stone placement commands."""

    @pytest.mark.parametrize("text", ["b;c;5", "B;C;5", "black;C;5", "b ; c ; 5", "Black;c;5"])
    def test_black(self, text):
        assert parse_command(text, 9) == Place(2, 4, IntersectionState.BLACK)

    @pytest.mark.parametrize("text", ["w;a;1", "white;A;1", "W;a;1"])
    def test_white(self, text):
        assert parse_command(text, 9) == Place(0, 0, IntersectionState.WHITE)

    def test_off_board(self):
        with pytest.raises(InvalidPosition):
            parse_command("b;j;1", 9)
        with pytest.raises(InvalidPosition):
            parse_command("b;a;10", 9)

    def test_same_text_on_larger_board(self):
        assert parse_command("b;j;10", 19) == Place(9, 9, IntersectionState.BLACK)

    @pytest.mark.parametrize("text", ["b;c", "b;c;5;1", "b;;5", "b;c;five", "b;5;c"])
    def test_malformed(self, text):
        with pytest.raises(InvalidMove):
            parse_command(text, 9)

    def test_empty_stone_rejected(self):
        with pytest.raises(InvalidMove):
            Place(0, 0, IntersectionState.EMPTY)


class TestParseOther:
    """Tests for undo and info commands."""

    @pytest.mark.parametrize("text", ["u", "U", "undo", " Undo "])
    def test_undo(self, text):
        assert parse_command(text, 9) == Undo()

    @pytest.mark.parametrize("text", ["i;e;5", "in;E;5", "info;e;5"])
    def test_info(self, text):
        assert parse_command(text, 9) == Info(4, 4)

    def test_info_off_board(self):
        with pytest.raises(InvalidPosition):
            parse_command("info;z;1", 9)

    @pytest.mark.parametrize("text", ["", "hello", "x;a;1", "undo;1"])
    def test_unknown(self, text):
        with pytest.raises(InvalidMove):
            parse_command(text, 9)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
