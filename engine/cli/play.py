#!/usr/bin/env python3
"""
Terminal-based checkers client.

Play against a bot or watch two bots play.
"""

from __future__ import annotations
import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.state import GameState, apply_move
from checkers.core.moves import Move, get_legal_moves, get_continuation_moves, get_winner
from checkers.core.notation import algebraic_to_move, move_to_algebraic
from checkers.ai.bot import Bot, RandomBot
from checkers.ai.minimax import MinMaxBot, MinimaxConfig


def print_board(state: GameState, highlight_moves: list[Move] | None = None) -> None:
    """Print the board, marking move destinations in green."""
    GREEN = '\033[92m'
    RESET = '\033[0m'

    text = repr(state)
    if not highlight_moves:
        print(text)
        return

    # Rows in repr are rank 8 first; each square takes two characters
    targets = {(m.end.file, m.end.rank) for m in highlight_moves}
    lines = text.split("\n")
    for row_idx in range(8):
        rank = 7 - row_idx
        line = lines[row_idx]
        prefix, cells = line[:3], line[3:]
        out = prefix
        for file in range(8):
            cell = cells[file * 2:file * 2 + 2]
            if (file, rank) in targets:
                out += f" {GREEN}*{RESET}"
            else:
                out += cell
        lines[row_idx] = out
    print("\n".join(lines))


def allowed_moves(state: GameState) -> list[Move]:
    """Moves a human may play: a pending capture chain must be continued."""
    if state.is_jump:
        return get_continuation_moves(state)
    return get_legal_moves(state)


def end_turn(state: GameState) -> GameState:
    """Hand the move to the opponent after a finished capture chain."""
    next_state = state.copy()
    next_state.is_jump = False
    next_state.last_jump_position = None
    next_state.is_white_to_move = not state.is_white_to_move
    return next_state


def parse_user_move(state: GameState, input_str: str) -> Move | str | None:
    """Parse user input into a move or a command."""
    input_str = input_str.strip().lower()

    if input_str in ['q', 'quit', 'exit']:
        return 'quit'
    if input_str in ['h', 'help', '?']:
        return 'help'
    if input_str in ['m', 'moves']:
        return 'show_moves'
    if input_str in ['u', 'undo']:
        return 'undo'

    try:
        move = algebraic_to_move(input_str)
    except ValueError:
        print(f"Invalid format: {input_str}. Use notation like 'c3-d4' or 'c3xe5'")
        return None
    if move in allowed_moves(state):
        return move
    print(f"Illegal move: {input_str}")
    return None


def play_bot_turn(bot: Bot, state: GameState) -> GameState | None:
    """
    Let the bot move until the turn passes to the other side.

    Returns None if the bot had no move when its turn began.
    """
    is_white = state.is_white_to_move
    played = False
    while state.is_white_to_move == is_white:
        next_state = bot.play_move(state)
        if next_state is None:
            if not played:
                return None
            # Capture chain has nowhere to go
            return end_turn(state)
        print(f"Bot plays: {describe_transition(state, next_state)}")
        state = next_state
        played = True
    return state


def describe_transition(before: GameState, after: GameState) -> str:
    """Name the move that leads from before to after."""
    for move in get_legal_moves(before):
        if apply_move(before, move) == after:
            return move_to_algebraic(move)
    return "?"


def make_bot(name: str, depth: int, seed: int | None) -> Bot:
    if name == 'random':
        return RandomBot(seed)
    return MinMaxBot(MinimaxConfig(max_depth=depth))


def make_bots(name: str, depth: int, seed: int | None) -> tuple[Bot, Bot]:
    """Build the white and black bots for a watched game.

    The black bot is seeded with seed + 1 so two random bots do not mirror
    each other's choices.
    """
    black_seed = seed + 1 if seed is not None else None
    return make_bot(name, depth, seed), make_bot(name, depth, black_seed)


def undo_to_human_turn(history: list[GameState], human_is_white: bool) -> GameState | None:
    """
    Drop states back to the previous start of a human turn.

    history[-1] is the current state. The bot's whole reply, capture chain
    included, is undone along with the human's move. Returns the restored
    state, or None (leaving history untouched) if there is nothing to undo.
    """
    for i in range(len(history) - 2, -1, -1):
        candidate = history[i]
        if candidate.is_white_to_move == human_is_white and not candidate.is_jump:
            del history[i + 1:]
            return candidate
    return None


def play_human_vs_bot(bot: Bot, human_is_white: bool = True) -> None:
    """Play a game: human vs bot."""
    state = GameState.new_game()
    history = [state]

    print("\n=== Checkers ===")
    print("You are", "white (w)" if human_is_white else "black (b)")
    print("Commands: move (e.g., 'c3-d4', 'c3xe5'), 'm' for moves, 'u' undo, 'q' quit")

    while True:
        print(state)

        if not state.is_jump:
            winner = get_winner(state)
            if winner is not None:
                print("You win!" if winner == human_is_white else "Bot wins!")
                return

        if state.is_white_to_move != human_is_white:
            state = play_bot_turn(bot, state)
            history.append(state)
            continue

        moves = allowed_moves(state)
        if not moves:
            # Capture chain has nowhere to go
            state = end_turn(state)
            history.append(state)
            continue

        while True:
            try:
                user_input = input("> ").strip()
            except EOFError:
                return

            result = parse_user_move(state, user_input)
            if result == 'quit':
                print("Thanks for playing!")
                return
            elif result == 'help':
                print("Enter moves like 'c3-d4' or captures like 'c3xe5'")
                print("'m' to see your moves, 'u' to take back your last move, 'q' to quit")
            elif result == 'show_moves':
                print_board(state, moves)
                print("Moves:", ", ".join(move_to_algebraic(m) for m in moves))
            elif result == 'undo':
                previous = undo_to_human_turn(history, human_is_white)
                if previous is None:
                    print("Nothing to undo")
                    continue
                state = previous
                print("Move taken back")
                break
            elif isinstance(result, Move):
                state = apply_move(state, result)
                history.append(state)
                print(f"You played: {move_to_algebraic(result)}")
                break


def watch_bot_vs_bot(white: Bot, black: Bot, delay: float = 0.5, max_turns: int = 200) -> None:
    """Watch two bots play."""
    state = GameState.new_game()

    print("\n=== Bot vs Bot ===")
    for turn in range(max_turns):
        print(state)
        winner = get_winner(state)
        if winner is not None:
            print(f"Game over after {turn} turns. {'White' if winner else 'Black'} wins.")
            return
        bot = white if state.is_white_to_move else black
        state = play_bot_turn(bot, state)
        time.sleep(delay)

    print(f"Stopped after {max_turns} turns.")


def main():
    parser = argparse.ArgumentParser(description='Checkers Terminal Client')
    parser.add_argument('--bot', choices=['minimax', 'random'], default='minimax',
                        help='Bot policy')
    parser.add_argument('--depth', type=int, default=MinimaxConfig.max_depth,
                        help='Minimax depth')
    parser.add_argument('--seed', type=int, default=None, help='Random bot seed')
    parser.add_argument('--watch', action='store_true', help='Watch bot vs bot')
    parser.add_argument('--delay', type=float, default=0.5, help='Delay between turns when watching')
    parser.add_argument('--play-as', choices=['white', 'black'], default='white',
                        help='Colour to play')
    parser.add_argument('--verbose', action='store_true', help='Log search details')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
    )

    if args.watch:
        white, black = make_bots(args.bot, args.depth, args.seed)
        watch_bot_vs_bot(white, black, args.delay)
    else:
        play_human_vs_bot(make_bot(args.bot, args.depth, args.seed), args.play_as == 'white')


if __name__ == '__main__':
    main()
