"""
Move generation for checkers men.

Generates simple diagonal steps and single captures, forward only.
Kings are not modelled and there is no forced-capture rule.
"""

from __future__ import annotations
from dataclasses import dataclass

from .bitboard import (
    BOARD_SIZE,
    BitBoard, Position, is_within_board, position_of, sq_to_algebraic,
    next_dark_square
)
from .state import GameState


@dataclass(frozen=True)
class Move:
    """A move of one man from start to end (a step or a single capture)."""
    start: Position
    end: Position

    @classmethod
    def from_indices(cls, start: int, end: int) -> Move:
        """Build a move from two square indices."""
        return cls(position_of(start), position_of(end))

    def is_jump(self) -> bool:
        return abs(self.end.file - self.start.file) == 2

    def is_simple(self) -> bool:
        return abs(self.end.file - self.start.file) == 1

    def captured_position(self) -> Position:
        """Square of the man removed by this jump."""
        assert self.is_jump(), f"not a jump: {self}"
        return Position((self.start.file + self.end.file) // 2,
                        (self.start.rank + self.end.rank) // 2)

    @property
    def indices(self) -> tuple[int, int]:
        return self.start.square, self.end.square

    def __str__(self) -> str:
        start, end = self.indices
        sep = 'x' if self.is_jump() else '-'
        return f"{sq_to_algebraic(start)}{sep}{sq_to_algebraic(end)}"


class MoveGenerator:
    """
    Generates moves for the men of one side.

    Squares are scanned by ascending index. For each man the order is
    step right, step left, jump right, jump left ("right" is file + 1).
    """

    def __init__(self, board: BitBoard):
        self.board = board
        self.set_player(True)

    def set_player(self, is_white: bool) -> None:
        """Select the side whose men are moved."""
        self.player_pieces = self.board.side_mask(is_white)
        self.opponent_pieces = self.board.side_mask(not is_white)
        self.rank_step = 1 if is_white else -1

    def generate(self) -> list[Move]:
        moves: list[Move] = []
        pos = Position(0, 0)
        while pos.rank < BOARD_SIZE:
            if self.board.has_piece(self.player_pieces, pos):
                self._add_simple_moves(pos, moves)
                self._add_jump_moves(pos, moves)
            pos = next_dark_square(pos)
        return moves

    def _can_move_to(self, file: int, rank: int) -> bool:
        return is_within_board(file, rank) and self.board.is_empty(Position(file, rank))

    def _add_simple_moves(self, start: Position, moves: list[Move]) -> None:
        rank = start.rank + self.rank_step
        for file_step in (1, -1):
            file = start.file + file_step
            if self._can_move_to(file, rank):
                moves.append(Move(start, Position(file, rank)))

    def _add_jump_moves(self, start: Position, moves: list[Move]) -> None:
        for file_step in (1, -1):
            end_file = start.file + 2 * file_step
            end_rank = start.rank + 2 * self.rank_step
            if not self._can_move_to(end_file, end_rank):
                continue

            # Need an opponent man on the square jumped over
            captured = Position(start.file + file_step, start.rank + self.rank_step)
            if not self.board.has_piece(self.opponent_pieces, captured):
                continue

            moves.append(Move(start, Position(end_file, end_rank)))


def generate(board: BitBoard, is_white: bool) -> list[Move]:
    """All moves for the men of one side on board."""
    generator = MoveGenerator(board)
    generator.set_player(is_white)
    return generator.generate()


def get_legal_moves(state: GameState) -> list[Move]:
    """All moves for the side to move. Ignores any pending capture chain."""
    return generate(state.board, state.is_white_to_move)


def get_continuation_moves(state: GameState) -> list[Move]:
    """
    Captures that continue the current chain from last_jump_position.

    Empty unless the state is mid-chain. Used by hosts that enforce chains;
    the bots do not call it.
    """
    if not state.is_jump or state.last_jump_position is None:
        return []
    return [
        move for move in get_legal_moves(state)
        if move.is_jump() and move.start == state.last_jump_position
    ]


def get_winner(state: GameState) -> bool | None:
    """
    Winner if the side to move cannot move: True for white, False for black.

    Returns None while the side to move still has a move.
    """
    if get_legal_moves(state):
        return None
    return not state.is_white_to_move
