"""Bots: fixed-depth minimax and a random baseline."""

from .bot import Bot, RandomBot
from .minimax import MinMaxBot, MinimaxConfig, score
