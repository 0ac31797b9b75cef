"""
Public API for playing and benchmarking the arcade games.

Usage:
    from board_arcade import Config, play_game, run_matches

    play_game(Config(game_name="connect_four", difficulty="hard"))
    print(run_matches("reversi", matches=20, difficulty="hard", opponent_difficulty="easy"))
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from board_arcade.controller import GameController
from board_arcade.core.types import Difficulty, GameMode, Move, Outcome, Player
from board_arcade.debug.viz import render_scores
from board_arcade.simulation import DEFAULT_WORKER_COUNT, MatchRunner, MatchSummary
from board_arcade.utils.config import DEFAULT_CONFIG, Config, check_game_name
from board_arcade.utils.factory import create_controller, create_game, create_strategy

logger = logging.getLogger(__name__)

# Final line for the human seat in a game against the computer
OUTCOME_LINES = {
    Outcome.WIN: "You win!",
    Outcome.LOSS: "The computer wins.",
    Outcome.TIE: "Nobody wins.",
}


def parse_move(controller: GameController, raw: str) -> Move:
    """
    Turn typed input into a legal move.

    Accepts a cell index ("4") for placement games or "from,to" for
    games that move pieces.

    Raises:
        ValueError: input is malformed or names no legal move
    """
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    if not parts or len(parts) > 2:
        raise ValueError(f"expected 'cell' or 'from,to', got {raw!r}")
    cells = [int(p) for p in parts]
    if any(not 0 <= c < controller.board.size for c in cells):
        raise ValueError(f"cells must be in 0..{controller.board.size - 1}")

    if len(cells) == 1:
        move = controller.move_for(controller.rules.tap_target(controller.state, cells[0]))
    else:
        move = controller.move_for(cells[1], source=cells[0])

    if move is None:
        raise ValueError(f"{raw!r} is not a legal move")
    return move


def _human_turn(controller: GameController, input_fn: Callable[[str], str]) -> Move:
    """Prompt for a move until a legal one is entered, apply it, return it."""
    hint = _describe(controller, controller.legal_moves()[0])
    print(f"\n{controller.status_text}")
    print(f"Format: cell index or from,to (e.g., {hint})")

    while True:
        raw = input_fn("Move: ").strip()
        try:
            move = parse_move(controller, raw)
        except ValueError as e:
            print(f"Invalid input: {e}")
            continue
        controller.attempt_move(move)
        return move


def _describe(controller: GameController, move: Move) -> str:
    return controller.rules.move_label(controller.board, move)


def _print_scores(controller: GameController) -> None:
    difficulty = controller.difficulty_for(controller.current_player)
    scored = controller.strategy.score_moves(controller.state, controller.legal_moves(), difficulty)
    table = render_scores(scored, title=f"{controller.rules.game_id()} / {difficulty.value}")
    if table:
        print(table)


def play_game(
    config: Config = DEFAULT_CONFIG,
    self_play: bool = False,
    show_scores: bool = False,
    input_fn: Callable[[str], str] = input,
) -> Optional[Player]:
    """
    Terminal play loop.

    Parameters
    ----------
    config : Config
        Game, mode, difficulty and seed.
    self_play : bool
        If True, the computer plays both seats.
    show_scores : bool
        If True, print the computer's move scores before each of its moves.
    input_fn : callable
        Source of human input (replaceable for scripted sessions).

    Returns
    -------
    The winner, or None for a draw.
    """
    controller = create_controller(config)
    if self_play:
        controller = GameController(
            controller.rules,
            controller.strategy,
            mode=GameMode.AI,
            difficulty=config.difficulty,
            computer_players=tuple(Player),
        )

    rules = controller.rules
    print(f"Starting {rules.game_id()} ({controller.mode.value}, {controller.difficulty.value})")
    print(controller.render())

    try:
        while not controller.is_game_over:
            current = controller.current_player
            if controller.is_computer_turn():
                if show_scores:
                    _print_scores(controller)
                move = controller.computer_move()
                print(f"\n{rules.player_label(current)} (AI) played: {_describe(controller, move)}")
            else:
                move = _human_turn(controller, input_fn)
                print(f"\n{rules.player_label(current)} played: {_describe(controller, move)}")

            if controller.pass_message:
                print(controller.pass_message)
            print(controller.render())

        print("\n" + "=" * 40)
        print(controller.status_text)
        if not self_play and controller.mode is GameMode.AI:
            print(OUTCOME_LINES[controller.outcome(config.computer_player.opponent)])
        print("=" * 40)

    except KeyboardInterrupt:
        print("\nInterrupted.")
        return None
    except Exception:
        logger.exception("Fatal error in play loop")
        raise

    return controller.winner


def run_matches(
    game_name: str,
    matches: int,
    difficulty: Difficulty = Difficulty.NORMAL,
    opponent_difficulty: Optional[Difficulty] = None,
    seed: Optional[int] = None,
    num_workers: int = DEFAULT_WORKER_COUNT,
) -> MatchSummary:
    """
    Computer vs computer benchmark.

    Player.ONE plays at `opponent_difficulty` (defaults to `difficulty`),
    Player.TWO at `difficulty`, matching the seat the computer takes
    against a human.
    """
    check_game_name(game_name)
    difficulties = {
        Player.ONE: Difficulty(opponent_difficulty if opponent_difficulty is not None else difficulty),
        Player.TWO: Difficulty(difficulty),
    }
    with MatchRunner(num_workers) as runner:
        return runner.run_batch(game_name, matches, difficulties, seed=seed)


__all__ = [
    "play_game",
    "run_matches",
    "parse_move",
    "create_controller",
    "create_game",
    "create_strategy",
    "MatchRunner",
    "DEFAULT_WORKER_COUNT",
]
