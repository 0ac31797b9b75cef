"""
Worker process logic for parallel match play.

Workers receive MatchJob objects and return MatchResult objects. Each
match builds its own controller, so nothing is shared between processes.
"""

from __future__ import annotations

from typing import List

from board_arcade.core.types import GameMode, Move, Player
from board_arcade.simulation.jobs import MatchJob, MatchResult


def run_match(job: MatchJob) -> MatchResult:
    """Play one computer-vs-computer match."""
    from board_arcade.controller import GameController
    from board_arcade.utils.factory import create_game, create_strategy

    rules = create_game(job.game_name)
    controller = GameController(
        rules,
        create_strategy(job.game_name, rules, seed=job.seed),
        mode=GameMode.AI,
        computer_players=tuple(Player),
    )
    for player, difficulty in job.difficulties.items():
        controller.set_difficulty(player, difficulty)

    moves: List[Move] = []
    while not controller.is_game_over and len(moves) < job.max_plies:
        moves.append(controller.computer_move())

    return MatchResult(
        game_name=job.game_name,
        winner=controller.winner,
        plies=len(moves),
        completed=controller.is_game_over,
        scores=controller.scores(),
        moves=moves,
        outcomes={player: controller.outcome(player) for player in Player},
    )
