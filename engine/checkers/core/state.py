"""
Game state representation for checkers.

Wraps the bitboard with whose turn it is and the pending-jump bookkeeping
the host uses to run capture chains.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from .bitboard import (
    BOARD_SIZE, WHITE_START, BLACK_START, VALID_MASK,
    BitBoard, Position, is_dark_square, mask_of
)

if TYPE_CHECKING:
    from .moves import Move


@dataclass(frozen=False)
class GameState:
    """
    Represents the state handed to the engine for one ply.

    Attributes:
        board: Occupancy masks for both colours
        is_white_to_move: True if white is the side to move
        is_jump: True if the side to move just captured and moves again
        last_jump_position: Landing square of that capture (only meaningful
            while is_jump is set)
    """
    board: BitBoard = field(default_factory=lambda: BitBoard(WHITE_START, BLACK_START))
    is_white_to_move: bool = True
    is_jump: bool = False
    last_jump_position: Optional[Position] = None

    @classmethod
    def new_game(cls) -> GameState:
        """Create a new game in the starting position."""
        return cls()

    @classmethod
    def from_masks(
        cls,
        white_mask: int,
        black_mask: int,
        is_white_to_move: bool,
        is_jump: bool = False,
    ) -> GameState:
        """Build a state from the host's four values (unsigned masks)."""
        return cls(
            board=BitBoard(white_mask & VALID_MASK, black_mask & VALID_MASK),
            is_white_to_move=bool(is_white_to_move),
            is_jump=bool(is_jump),
        )

    def to_masks(self) -> tuple[int, int, bool]:
        """Return (white_mask, black_mask, is_jump) for the host."""
        return self.board.white_mask(), self.board.black_mask(), self.is_jump

    def copy(self) -> GameState:
        return GameState(
            board=self.board.copy(),
            is_white_to_move=self.is_white_to_move,
            is_jump=self.is_jump,
            last_jump_position=self.last_jump_position,
        )

    def describe(self) -> str:
        """One-line summary used in log output."""
        text = (f"Board: {self.board} is_white_to_move: {self.is_white_to_move}"
                f" is_jump: {self.is_jump}")
        if self.is_jump:
            text += f" last_jump_position: {self.last_jump_position}"
        return text

    def __hash__(self) -> int:
        return hash((self.board.white, self.board.black, self.is_white_to_move, self.is_jump))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return False
        return (
            self.board == other.board and
            self.is_white_to_move == other.is_white_to_move and
            self.is_jump == other.is_jump and
            (not self.is_jump or self.last_jump_position == other.last_jump_position)
        )

    def __repr__(self) -> str:
        """Pretty print the board."""
        lines = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = f"{rank + 1} |"
            for file in range(BOARD_SIZE):
                if not is_dark_square(file, rank):
                    row += "  "
                    continue
                sq_bit = mask_of(file, rank)
                if self.board.white & sq_bit:
                    row += " w"
                elif self.board.black & sq_bit:
                    row += " b"
                else:
                    row += " ."
            lines.append(row)

        lines.append("  +" + "-" * (BOARD_SIZE * 2))
        lines.append("    " + " ".join("abcdefgh"))
        side = "White" if self.is_white_to_move else "Black"
        suffix = " (continuing capture)" if self.is_jump else ""
        lines.append(f"\n{side} to move{suffix}")

        return "\n".join(lines)


def apply_move(state: GameState, move: Move) -> GameState:
    """
    Return the successor of state after move. The input is not modified.

    A capture keeps the same side to move and records where it landed;
    a simple step hands the move to the opponent.
    """
    next_state = state.copy()
    next_state.board.apply_move(state.is_white_to_move, move)

    if move.is_jump():
        next_state.is_jump = True
        next_state.last_jump_position = move.end
    else:
        next_state.is_jump = False
        next_state.last_jump_position = None
        next_state.is_white_to_move = not state.is_white_to_move

    return next_state
