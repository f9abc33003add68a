"""
Fixed-depth minimax for checkers.

Scores positions by piece difference (white minus black). White maximises,
black minimises. No pruning: the tree at the default depth is small.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from ..core.bitboard import NUM_SQUARES, BitBoard
from ..core.state import GameState, apply_move
from ..core.moves import get_legal_moves

logger = logging.getLogger(__name__)


@dataclass
class MinimaxConfig:
    """Configuration for minimax search."""
    max_depth: int = 3  # The node at this depth scores its children directly
    sentinel_score: int = 50  # Outside the reachable score range of +/-32


@dataclass
class SearchResult:
    """Best score found and the immediate successor that leads to it."""
    score: int
    state: Optional[GameState] = None


def score(board: BitBoard) -> int:
    """Absolute score of a board: white men minus black men."""
    return board.count(True) - board.count(False)


class MinMaxBot:
    """Plays the move chosen by fixed-depth minimax."""

    def __init__(self, config: Optional[MinimaxConfig] = None):
        self.config = config or MinimaxConfig()
        if self.config.sentinel_score <= NUM_SQUARES:
            raise ValueError(
                f"sentinel_score must exceed {NUM_SQUARES}, got {self.config.sentinel_score}")
        self.nodes_searched = 0

    def play_move(self, state: GameState) -> Optional[GameState]:
        """
        Return the successor chosen by minimax, or None if the side to
        move has no move at all.
        """
        self.nodes_searched = 0
        result = self.search(state)
        if result.state is None:
            logger.debug("No possible bot moves.")
            return None
        return result.state

    def search(self, state: GameState, depth: int = 0) -> SearchResult:
        """
        Minimax from state. Ties keep the first move in generation order.

        A node without moves keeps the sentinel score, which reads as a loss
        for its side to move. If every child of a node is such a loss, the
        node still reports its first child as its state so that a side with
        moves always has one to play.
        """
        self.nodes_searched += 1
        maximizing = state.is_white_to_move
        sentinel = self.config.sentinel_score
        best = SearchResult(score=-sentinel if maximizing else sentinel)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Evaluating state at depth: %d state: %s", depth, state.describe())

        first_child = None
        for move in get_legal_moves(state):
            child = apply_move(state, move)
            if first_child is None:
                first_child = child

            if depth == self.config.max_depth:
                child_score = score(child.board)
            else:
                child_score = self.search(child, depth + 1).score

            if maximizing:
                improved = child_score > best.score
            else:
                improved = child_score < best.score
            if improved:
                best.score = child_score
                best.state = child

        if best.state is None:
            best.state = first_child

        logger.debug("Returning result at depth: %d score: %d", depth, best.score)
        return best
