"""
Entry point for hosts that exchange the game as plain integers.

The host keeps the board as two signed 32-bit masks. Bit 31 arrives as a
negative number and must go back the same way.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from .core.bitboard import VALID_MASK
from .core.state import GameState
from .ai.bot import Bot
from .ai.minimax import MinMaxBot

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """What the host reads back after a bot turn."""
    played: bool
    white_mask: int
    black_mask: int
    is_jump: bool


def to_unsigned32(value: int) -> int:
    return int(value) & VALID_MASK


def to_signed32(value: int) -> int:
    value = int(value) & VALID_MASK
    return value - (1 << 32) if value & (1 << 31) else value


def play_bot_move(
    white_mask: int,
    black_mask: int,
    is_white_to_move: bool,
    is_jump: bool,
    bot: Optional[Bot] = None,
) -> MoveResult:
    """
    Play one bot move for the side to move.

    The engine does not restrict the move to a pending capture chain even
    when is_jump is set; hosts that enforce chains must only call back
    when any move is acceptable. When no move exists, played is False and
    the input masks are echoed.
    """
    state = GameState.from_masks(
        to_unsigned32(white_mask), to_unsigned32(black_mask),
        is_white_to_move, is_jump
    )
    logger.debug("GameState before: %s", state.describe())

    if bot is None:
        bot = MinMaxBot()
    next_state = bot.play_move(state)
    if next_state is None:
        logger.debug("No possible bot moves.")
        return MoveResult(False, to_signed32(white_mask), to_signed32(black_mask), False)

    logger.debug("GameState after: %s", next_state.describe())
    white, black, jump = next_state.to_masks()
    return MoveResult(True, to_signed32(white), to_signed32(black), jump)
