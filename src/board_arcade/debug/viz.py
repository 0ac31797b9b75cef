"""
Terminal visualizer for move scores - game-agnostic.

Renders the heuristic score a strategy gives each legal move as a ranked
table with a normalised bar, so weight changes can be eyeballed during
development.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from board_arcade.core.types import Move

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI Colors & Styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG = {
    "green": "\033[38;5;28m",
    "red": "\033[38;5;124m",
    "yellow": "\033[38;5;142m",
    "orange": "\033[38;5;166m",
    "gray": "\033[38;5;245m",
}


def score_color(fraction: float) -> str:
    """Color for a score normalised to [0, 1] within its table."""
    if fraction >= 0.75:
        return FG["green"]
    if fraction >= 0.5:
        return FG["yellow"]
    if fraction >= 0.25:
        return FG["orange"]
    return FG["red"]


# ═══════════════════════════════════════════════════════════════════════════════
# Text utilities
# ═══════════════════════════════════════════════════════════════════════════════

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))


def pad(text: str, width: int, align: str = "left") -> str:
    gap = max(0, width - visible_len(text))
    if align == "right":
        return " " * gap + text
    return text + " " * gap


def move_str(move: Move) -> str:
    """'12' for placements, '9→18' for steps, '9→27×18' for captures."""
    text = str(move.target) if move.source is None else f"{move.source}→{move.target}"
    if move.source is not None and move.captured:
        text += "×" + ",".join(str(c) for c in move.captured)
    return text


# ═══════════════════════════════════════════════════════════════════════════════
# Table rendering
# ═══════════════════════════════════════════════════════════════════════════════

H, V = "─", "│"
TABLE_W = 44
BAR_W = 16


def hline(left: str, right: str) -> str:
    return f"{left}{H * TABLE_W}{right}"


def trow(content: str) -> str:
    return f"{V}{pad(content, TABLE_W)}{V}"


def render_scores(scored: Sequence[Tuple[Move, float]], title: str = "", limit: int = 10) -> str:
    """
    Ranked table of (move, score) pairs, best first.

    Returns an empty string when there is nothing to show (strategies
    that rank by rules rather than scores).
    """
    if not scored:
        return ""

    ranked: List[Tuple[Move, float]] = sorted(scored, key=lambda ms: -ms[1])[:limit]
    lo = min(s for _, s in ranked)
    hi = max(s for _, s in ranked)
    span = hi - lo

    lines = [hline("┌", "┐")]
    if title:
        lines.append(trow(f" {BOLD}{title}{RESET}"))
        lines.append(hline("├", "┤"))

    for rank, (move, score) in enumerate(ranked):
        fraction = (score - lo) / span if span else 1.0
        filled = round(fraction * BAR_W)
        bar = f"{score_color(fraction)}{'█' * filled}{DIM}{'░' * (BAR_W - filled)}{RESET}"
        marker = f"{BOLD}▶{RESET}" if rank == 0 else " "
        lines.append(trow(f"{marker}{pad(move_str(move), 12)}{pad(f'{score:g}', 10, 'right')}  {bar}"))

    if len(scored) > limit:
        lines.append(trow(f" {FG['gray']}… {len(scored) - limit} more{RESET}"))
    lines.append(hline("└", "┘"))
    return "\n".join(lines)
