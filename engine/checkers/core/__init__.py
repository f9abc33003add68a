"""Core game logic: bitboards, state, and move generation."""

from .bitboard import *
from .state import GameState, apply_move
from .moves import Move, MoveGenerator, generate, get_legal_moves
