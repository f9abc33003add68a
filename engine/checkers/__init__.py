"""Checkers move engine: bitboard move generation and minimax bots."""

__version__ = "0.1.0"
