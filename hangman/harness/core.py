"""
Session harness primitives.

- Player:    points (never negative) and lives for one player.
- play_turn: apply one (position, char) guess to a Round and relay the
             result to the Player.
- run_moves: play a sequence of guesses until the round is solved, the
             player runs out of lives, or the moves run out.

These functions are UI-agnostic so they can be reused by the CLI, tests,
or a future service without changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from hangman.config import DEFAULT_CONFIG
from hangman.engine import Round


class Player:
    """
    Tracks a player's points and remaining lives during a game.

    Points are clamped: an update that would take the total below zero
    sets it to exactly zero.
    """

    def __init__(self, lives: int = DEFAULT_CONFIG.lives):
        self.points = 0
        self.lives = int(lives)

    def update_points(self, delta: int) -> None:
        if self.points + delta < 0:
            self.points = 0
        else:
            self.points += delta

    def reduce_lives(self) -> None:
        self.lives -= 1

    def is_alive(self) -> bool:
        return self.lives > 0


@dataclass
class TurnResult:
    position: int
    char: str
    points: int          # points earned this turn (0 for a solved position)
    total_points: int
    lives: int
    solved: bool         # round.end_of_game() after this turn
    alive: bool


def play_turn(rnd: Round, player: Player, position: int, char: str) -> TurnResult:
    """
    One guess: score it, take a life on negative points, update the total.
    Malformed guesses raise before anything changes.
    """
    points = rnd.play(position, char)
    if points < 0:
        player.reduce_lives()
    player.update_points(points)
    return TurnResult(
        position=position,
        char=char,
        points=points,
        total_points=player.points,
        lives=player.lives,
        solved=rnd.end_of_game(),
        alive=player.is_alive(),
    )


def run_moves(rnd: Round, player: Player,
              moves: Iterable[Tuple[int, str]]) -> List[TurnResult]:
    """
    Play `moves` in order. Stops early once the round is solved or the
    player is out of lives; remaining moves are ignored.
    """
    out: List[TurnResult] = []
    for position, char in moves:
        if rnd.end_of_game() or not player.is_alive():
            break
        out.append(play_turn(rnd, player, position, char))
    return out
