"""
Bot interface and the random baseline bot.
"""

from __future__ import annotations
import logging
from typing import Optional, Protocol, Union

import numpy as np

from ..core.state import GameState, apply_move
from ..core.moves import get_legal_moves

logger = logging.getLogger(__name__)


class Bot(Protocol):
    """A policy that plays one move for the side to move."""

    def play_move(self, state: GameState) -> Optional[GameState]:
        """Return the successor state, or None if there is no move."""
        ...


class RandomBot:
    """Picks uniformly among the generated moves."""

    def __init__(self, rng: Union[np.random.Generator, int, None] = None):
        """
        Args:
            rng: Random source. A Generator is used as is; an int or None
                seeds a fresh default_rng.
        """
        if isinstance(rng, np.random.Generator):
            self.rng = rng
        else:
            self.rng = np.random.default_rng(rng)

    def play_move(self, state: GameState) -> Optional[GameState]:
        moves = get_legal_moves(state)
        if not moves:
            return None

        move = moves[int(self.rng.integers(len(moves)))]
        logger.debug("Selected move: %s", move)
        return apply_move(state, move)
