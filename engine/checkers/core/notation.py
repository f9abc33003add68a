"""
Text notation for squares, moves and game records.

Squares are algebraic: file letter a-h, rank digit 1-8, so square 0 is
'a1' and square 31 is 'h8'. Steps are written 'a3-b4' and captures
'c3xe5'. A record is a space separated list of moves with move numbers,
for example:

    1. c3-d4 f6-e5 2. d4xf6 ...

A capture that keeps the same side to move shares the side's slot with
the following moves of the chain ("d4xf6 f6xd8").
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field

from .bitboard import algebraic_to_sq, position_of
from .moves import Move, get_legal_moves
from .state import GameState, apply_move

_MOVE_RE = re.compile(r'^([a-h][1-8])([-x])([a-h][1-8])$')
_MOVE_NUMBER_RE = re.compile(r'^\d+\.(\.\.)?$')


def move_to_algebraic(move: Move) -> str:
    """Convert move to notation."""
    return str(move)


def algebraic_to_move(s: str) -> Move:
    """Parse notation into a move. Raises ValueError on malformed input."""
    match = _MOVE_RE.match(s.strip().lower())
    if not match:
        raise ValueError(f"Invalid move format: {s!r}")
    start_text, sep, end_text = match.groups()
    move = Move(position_of(algebraic_to_sq(start_text)),
                position_of(algebraic_to_sq(end_text)))

    if not (move.is_simple() or move.is_jump()) or \
            abs(move.end.rank - move.start.rank) != abs(move.end.file - move.start.file):
        raise ValueError(f"Not a diagonal step or capture: {s!r}")
    if (sep == 'x') != move.is_jump():
        raise ValueError(f"Separator does not match move kind: {s!r}")
    return move


@dataclass
class GameRecord:
    """Moves played from a starting state."""
    start: GameState = field(default_factory=GameState.new_game)
    moves: list[Move] = field(default_factory=list)

    def replay(self) -> GameState:
        """Apply all recorded moves, checking each one is generated."""
        state = self.start.copy()
        for move in self.moves:
            if move not in get_legal_moves(state):
                raise ValueError(f"Illegal move in record: {move}")
            state = apply_move(state, move)
        return state

    def to_text(self) -> str:
        """
        Format as numbered move text. A number starts each white turn; a
        record that opens mid-turn starts with "1...".
        """
        tokens = []
        state = self.start.copy()
        number = 1
        if self.moves and not (state.is_white_to_move and not state.is_jump):
            tokens.append(f"{number}...")
            number += 1
        for move in self.moves:
            if state.is_white_to_move and not state.is_jump:
                tokens.append(f"{number}.")
                number += 1
            tokens.append(str(move))
            state = apply_move(state, move)
        return " ".join(tokens)

    @classmethod
    def from_text(cls, text: str, start: GameState | None = None) -> GameRecord:
        """Parse numbered move text. Move numbers are optional."""
        record = cls(start=start.copy() if start is not None else GameState.new_game())
        for token in text.split():
            if _MOVE_NUMBER_RE.match(token):
                continue
            record.moves.append(algebraic_to_move(token))
        return record
