"""
Command-line interface for playing and benchmarking the arcade games.
"""

import argparse
import logging

from board_arcade.api import play_game, run_matches
from board_arcade.core.types import Difficulty, GameMode
from board_arcade.utils.config import GAMES, Config

DIFFICULTIES = [d.value for d in Difficulty]


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play two-player board games against a local opponent or the computer"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="tic_tac_toe",
        help="Game to play (default: tic_tac_toe)",
    )
    parser.add_argument(
        "--mode", "-m",
        choices=[m.value for m in GameMode],
        default=GameMode.AI.value,
        help="ai: play the computer, local: two humans (default: ai)",
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTIES,
        default=Difficulty.NORMAL.value,
        help="Computer difficulty (default: normal)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for the easy opponent's random choices",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Computer plays both seats",
    )
    parser.add_argument(
        "--show-scores",
        action="store_true",
        help="Print the computer's move scores before each of its moves",
    )
    parser.add_argument(
        "--matches", "-n",
        type=int,
        default=0,
        help="Play N computer-vs-computer matches and print a summary instead of an interactive game",
    )
    parser.add_argument(
        "--opponent-difficulty",
        choices=DIFFICULTIES,
        default=None,
        help="Difficulty of the first seat in --matches (default: same as --difficulty)",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Number of worker processes for --matches (default: CPU count - 1)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Build configuration
    config_kwargs = {
        "game_name": args.game,
        "mode": GameMode(args.mode),
        "difficulty": Difficulty(args.difficulty),
        "seed": args.seed,
    }
    if args.workers:
        config_kwargs["num_workers"] = args.workers

    config = Config(**config_kwargs)

    if args.matches > 0:
        summary = run_matches(
            config.game_name,
            args.matches,
            difficulty=config.difficulty,
            opponent_difficulty=Difficulty(args.opponent_difficulty) if args.opponent_difficulty else None,
            seed=config.seed,
            num_workers=config.num_workers,
        )
        print(summary)
        return

    play_game(config, self_play=args.self_play, show_scores=args.show_scores)


if __name__ == "__main__":
    main()
