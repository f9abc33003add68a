"""
Bitboard utilities for 8x8 checkers.

Only the 32 dark squares are playable. Each one maps to a bit index:

  8 | .. 28 .. 29 .. 30 .. 31
  7 | 24 .. 25 .. 26 .. 27 ..
  6 | .. 20 .. 21 .. 22 .. 23
  5 | 16 .. 17 .. 18 .. 19 ..
  4 | .. 12 .. 13 .. 14 .. 15
  3 |  8 ..  9 .. 10 .. 11 ..
  2 | ..  4 ..  5 ..  6 ..  7
  1 |  0 ..  1 ..  2 ..  3 ..
    +------------------------
       a  b  c  d  e  f  g  h

Square index = rank * 4 + file // 2 (rank 0 = row 1, file 0 = column a).
The file of index i is (i % 4) * 2 + rank % 2.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple

# Board dimensions
BOARD_SIZE = 8
NUM_SQUARES = 32

# Mask for valid squares (bits 0-31)
VALID_MASK = (1 << NUM_SQUARES) - 1

# Starting positions: three ranks of men per side
WHITE_START = 0x00000FFF  # squares 0-11 (ranks 1-3)
BLACK_START = 0xFFF00000  # squares 20-31 (ranks 6-8)


class Position(NamedTuple):
    """A square given as (file, rank), both 0-7."""
    file: int
    rank: int

    @property
    def square(self) -> int:
        return bit_index(self.file, self.rank)

    @property
    def mask(self) -> int:
        return mask_of(self.file, self.rank)

    def __str__(self) -> str:
        return f"({self.file},{self.rank})"


def is_within_board(file: int, rank: int) -> bool:
    """Check if (file, rank) is on the board."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def is_dark_square(file: int, rank: int) -> bool:
    """Check if (file, rank) is one of the playable squares."""
    return is_within_board(file, rank) and file % 2 == rank % 2


def bit_index(file: int, rank: int) -> int:
    """Convert a dark square to its bit index 0-31."""
    assert is_dark_square(file, rank), f"not a dark square: ({file},{rank})"
    return rank * 4 + file // 2


def position_of(index: int) -> Position:
    """Convert a bit index to its (file, rank) square."""
    assert 0 <= index < NUM_SQUARES, f"square index out of range: {index}"
    rank = index // 4
    return Position((index % 4) * 2 + rank % 2, rank)


def mask_of(file: int, rank: int) -> int:
    """Return bitboard with the single bit for (file, rank) set."""
    return bit(bit_index(file, rank))


def next_dark_square(pos: Position) -> Position:
    """
    Step to the next dark square in bit-index order.

    Stepping past square 31 yields a position on rank 8, which callers
    use as the end-of-board marker.
    """
    file, rank = pos.file + 2, pos.rank
    if file >= BOARD_SIZE:
        rank += 1
        file = rank % 2
    return Position(file, rank)


def sq_to_algebraic(sq: int) -> str:
    """Convert square index to algebraic notation (e.g., 'a1')."""
    file, rank = position_of(sq)
    return chr(ord('a') + file) + str(rank + 1)


def algebraic_to_sq(s: str) -> int:
    """Convert algebraic notation to square index."""
    s = s.strip().lower()
    if len(s) != 2 or not ('a' <= s[0] <= 'h') or not ('1' <= s[1] <= '8'):
        raise ValueError(f"Invalid square: {s!r}")
    file = ord(s[0]) - ord('a')
    rank = int(s[1]) - 1
    if not is_dark_square(file, rank):
        raise ValueError(f"Not a playable square: {s!r}")
    return bit_index(file, rank)


def bit(sq: int) -> int:
    """Return bitboard with single bit set at square."""
    return 1 << sq


def popcount(bb: int) -> int:
    """Count number of set bits."""
    return bin(int(bb) & VALID_MASK).count('1')


@dataclass
class BitBoard:
    """
    Occupancy of the board as two 32-bit masks, one per colour.

    Bit i of `white` set means a white man stands on dark square i.
    """
    white: int = 0
    black: int = 0

    def __post_init__(self):
        assert self.white & ~VALID_MASK == 0, "white mask exceeds 32 bits"
        assert self.black & ~VALID_MASK == 0, "black mask exceeds 32 bits"
        assert self.white & self.black == 0, "white and black masks overlap"

    # Raw accessors for the host boundary

    def white_mask(self) -> int:
        return self.white

    def black_mask(self) -> int:
        return self.black

    def set_white_mask(self, mask: int) -> None:
        self.white = mask & VALID_MASK

    def set_black_mask(self, mask: int) -> None:
        self.black = mask & VALID_MASK

    def side_mask(self, is_white: bool) -> int:
        return self.white if is_white else self.black

    def count(self, is_white: bool) -> int:
        """Number of men of the given colour."""
        return popcount(self.side_mask(is_white))

    @property
    def occupied(self) -> int:
        return self.white | self.black

    def is_empty(self, pos: Position) -> bool:
        return not self.occupied & pos.mask

    @staticmethod
    def has_piece(side_mask: int, pos: Position) -> bool:
        return (side_mask & pos.mask) != 0

    def apply_move(self, is_white: bool, move) -> None:
        """
        Apply a move for the given side in place.

        The move must be legal for this board. A jump also removes the
        captured opponent man.
        """
        start_bit = move.start.mask
        end_bit = move.end.mask
        if is_white:
            self.white = (self.white & ~start_bit) | end_bit
            if move.is_jump():
                self.black &= ~move.captured_position().mask
        else:
            self.black = (self.black & ~start_bit) | end_bit
            if move.is_jump():
                self.white &= ~move.captured_position().mask

    def copy(self) -> BitBoard:
        return BitBoard(self.white, self.black)

    def __str__(self) -> str:
        return f"white: {self.white:#010x} black: {self.black:#010x}"
