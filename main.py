#!/usr/bin/env python3
"""
GridSweep - Main entry point.

Usage:
    python main.py play [--rows R] [--cols C] [--mines M] [--seed S]
    python main.py simulate [--games N] [--rows R] [--cols C] [--mines M]
"""
import argparse
import logging

import numpy as np

from gridsweep import BoardConfig, Game, GridSweepEnv


logger = logging.getLogger(__name__)

PLAY_HELP = (
    "Commands: r ROW COL (reveal), f ROW COL (flag), c ROW COL (chord), "
    "n (new game), q (quit)"
)


def make_config(args: argparse.Namespace) -> BoardConfig:
    """Build a board config from arguments, capping the mine count."""
    return BoardConfig.clamped(args.rows, args.cols, args.mines)


def play(args: argparse.Namespace) -> None:
    """Play a game in the terminal."""
    config = make_config(args)
    game = Game(config, rng=np.random.default_rng(args.seed))

    print(f"Board: {config.rows}x{config.cols} with {config.num_mines} mines")
    print(PLAY_HELP)
    print(game.render())

    while True:
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break
        if not line:
            continue

        parts = line.split()
        command = parts[0]
        if command == "q":
            break
        if command == "n":
            game.reset()
            print(game.render())
            continue
        if command not in ("r", "f", "c") or len(parts) != 3:
            print(PLAY_HELP)
            continue
        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            print(PLAY_HELP)
            continue

        if command == "r":
            game.reveal(row, col)
        elif command == "f":
            game.toggle_flag(row, col)
        else:
            game.chord(row, col)

        print(game.render())
        if game.is_won:
            print("*** WIN! ***  (n for a new game, q to quit)")
        elif game.is_lost:
            print("*** LOST (hit mine) ***  (n for a new game, q to quit)")


def simulate(args: argparse.Namespace) -> None:
    """Play games with a random policy over useful actions and report results."""
    config = make_config(args)
    env = GridSweepEnv(config=config, render_mode="ansi" if args.render else None)

    wins = 0
    total_revealed = 0
    env.action_space.seed(args.seed)

    for episode in range(args.games):
        seed = None if args.seed is None else args.seed + episode
        _, info = env.reset(seed=seed)
        done = False

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        if info["game_state"] == "WON":
            wins += 1
        total_revealed += info["revealed"]
        logger.debug(
            "Game %d: %s after %d steps", episode + 1, info["game_state"], info["steps"]
        )
        if args.render:
            print(env.render())
            print()

    print(f"Board: {config.rows}x{config.cols} with {config.num_mines} mines")
    print(f"Games: {args.games}")
    print(f"Win rate: {wins / args.games:.1%}")
    print(f"Avg revealed: {total_revealed / args.games:.1f} cells")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the board size arguments shared by every command."""
    parser.add_argument("--rows", type=int, default=9, help="Number of rows")
    parser.add_argument("--cols", type=int, default=9, help="Number of columns")
    parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines (capped at half the cells)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="GridSweep - mine-sweeping puzzle in the terminal"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    add_board_arguments(play_parser)

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play games with a random policy"
    )
    add_board_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    simulate_parser.add_argument(
        "--render", action="store_true", help="Print the final board of each game"
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except ValueError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
