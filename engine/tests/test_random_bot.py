"""Tests for the random bot."""

import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.bitboard import BitBoard, BLACK_START
from checkers.core.state import GameState, apply_move
from checkers.core.moves import get_legal_moves
from checkers.ai.bot import Bot, RandomBot
from checkers.ai.minimax import MinMaxBot


class TestRandomBot:
    def test_no_moves(self):
        bot = RandomBot(np.random.default_rng(0))
        assert bot.play_move(GameState(board=BitBoard(0, BLACK_START))) is None

    def test_plays_a_generated_move(self):
        state = GameState.new_game()
        successors = [apply_move(state, m) for m in get_legal_moves(state)]
        bot = RandomBot(np.random.default_rng(0))
        for _ in range(20):
            assert bot.play_move(state) in successors

    def test_same_seed_same_game(self):
        def play(seed):
            bot = RandomBot(seed)
            state = GameState.new_game()
            states = []
            for _ in range(30):
                state = bot.play_move(state)
                if state is None:
                    break
                states.append(state)
            return states

        assert play(7) == play(7)

    def test_covers_all_moves(self):
        state = GameState.new_game()
        bot = RandomBot(np.random.default_rng(123))
        seen = {hash(bot.play_move(state)) for _ in range(200)}
        assert len(seen) == 7


class TestBotProtocol:
    def test_bots_share_interface(self):
        bots: list[Bot] = [RandomBot(1), MinMaxBot()]
        state = GameState.new_game()
        for bot in bots:
            result = bot.play_move(state)
            assert result is not None
            assert not result.is_white_to_move
