"""Tests for move notation and game records."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.bitboard import BitBoard, bit
from checkers.core.state import GameState
from checkers.core.moves import Move
from checkers.core.notation import GameRecord, algebraic_to_move, move_to_algebraic


class TestMoveNotation:
    def test_step(self):
        assert algebraic_to_move('a3-b4') == Move.from_indices(8, 12)
        assert move_to_algebraic(Move.from_indices(8, 12)) == 'a3-b4'

    def test_jump(self):
        move = algebraic_to_move('C3xE5')
        assert move == Move.from_indices(9, 18)
        assert move_to_algebraic(move) == 'c3xe5'

    def test_separator_must_match(self):
        with pytest.raises(ValueError):
            algebraic_to_move('a3xb4')
        with pytest.raises(ValueError):
            algebraic_to_move('c3-e5')

    def test_light_square(self):
        with pytest.raises(ValueError):
            algebraic_to_move('a1-a2')

    def test_not_diagonal(self):
        with pytest.raises(ValueError):
            algebraic_to_move('a1-e5')
        with pytest.raises(ValueError):
            algebraic_to_move('a1-c1')

    def test_malformed(self):
        with pytest.raises(ValueError):
            algebraic_to_move('z9-a1')
        with pytest.raises(ValueError):
            algebraic_to_move('c3')


class TestGameRecord:
    def test_empty_record(self):
        record = GameRecord()
        assert record.to_text() == ""
        assert record.replay() == GameState.new_game()

    def test_text(self):
        record = GameRecord(moves=[
            algebraic_to_move('c3-d4'),
            algebraic_to_move('f6-e5'),
            algebraic_to_move('d4xf6'),
        ])
        assert record.to_text() == "1. c3-d4 f6-e5 2. d4xf6"

    def test_replay(self):
        record = GameRecord.from_text("1. c3-d4 f6-e5 2. d4xf6")
        state = record.replay()
        assert state.board.count(True) == 12
        assert state.board.count(False) == 11
        assert state.is_jump
        assert state.is_white_to_move

    def test_round_trip(self):
        text = "1. c3-d4 f6-e5 2. d4xf6"
        assert GameRecord.from_text(text).to_text() == text

    def test_illegal_move_in_record(self):
        record = GameRecord.from_text("1. c3-d4 c3-d4")
        with pytest.raises(ValueError):
            record.replay()

    def test_custom_start(self):
        start = GameState(board=BitBoard(bit(9), bit(13)))
        record = GameRecord.from_text("c3xe5", start=start)
        state = record.replay()
        assert state.board.white == bit(18)
        assert state.board.black == 0

    def test_black_to_move_start(self):
        start = GameState.new_game()
        start.is_white_to_move = False
        record = GameRecord(start=start, moves=[
            algebraic_to_move('f6-e5'),
            algebraic_to_move('c3-d4'),
        ])
        text = record.to_text()
        assert text == "1... f6-e5 2. c3-d4"
        parsed = GameRecord.from_text(text, start=start)
        assert parsed.moves == record.moves
        assert parsed.to_text() == text
