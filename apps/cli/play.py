# apps/cli/play.py
"""
CLI entry point for playing a round.

This script:
  1) Loads the dictionary for a book (cache file if present, otherwise
     OpenLibrary), validates it and prints a one-line summary.
  2) Picks the secret word (--word, or a seeded random dictionary word).
  3) Runs the read-eval loop: read a position and a character, play the
     guess, print points and lives, until the word is revealed or the
     player runs out of lives.

Usage:
    python -m apps.cli.play --book-id OL31390631M --show-probs
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Callable, Optional, Tuple

import numpy as np

from hangman import DEFAULT_CONFIG, GameConfig, HangmanError
from hangman.datasets import DictionaryStore, dictionary_report, pretty_summary
from hangman.engine import Round
from hangman.harness import Player, play_turn

DEFAULT_BOOK_ID = "OL31390631M"


def _format_probs(rnd: Round, position: int) -> str:
    """Probabilities at `position`, most likely first."""
    probs = sorted(rnd.probabilities(position).items(), key=lambda kv: (-kv[1], kv[0]))
    if not probs:
        return f"Position {position}: no candidates left"
    body = "  ".join(f"{ch}={p:.2f}" for ch, p in probs)
    return f"Position {position}: {body}"


def _read_guess(rnd: Round, ask: Callable[[str], str],
                show_probs: bool) -> Optional[Tuple[int, str]]:
    """
    Prompt until a well-formed (position, char) is entered.
    Returns None on end of input.
    """
    N = rnd.word_length
    while True:
        try:
            raw = ask(f"Choose the position of your guess (0-{N - 1}): ").strip()
        except EOFError:
            return None
        try:
            position = int(raw)
        except ValueError:
            print(f"Not a number: {raw!r}")
            continue
        if not 0 <= position < N:
            print(f"Position must be between 0 and {N - 1}")
            continue

        if show_probs:
            print(_format_probs(rnd, position))

        try:
            raw = ask("Choose the character of your guess: ").strip()
        except EOFError:
            return None
        if not raw:
            print("Enter one character")
            continue
        return position, raw[0]


def pick_word(words, seed: int | None) -> str:
    """Deterministic draw for a given seed (sorted so set order doesn't matter)."""
    rng = np.random.default_rng(seed)
    pool = sorted(words)
    return str(pool[int(rng.integers(len(pool)))])


def play(rnd: Round, player: Player, *, ask: Optional[Callable[[str], str]] = None,
         show_probs: bool = False) -> bool:
    """
    Interactive loop. Returns True if the word was fully revealed.
    `ask` defaults to the builtin input().
    """
    ask = ask or input
    while not rnd.end_of_game() and player.is_alive():
        print(f"\nWord: {rnd.masked_word()}   candidates left: {len(rnd.candidates)}")
        guess = _read_guess(rnd, ask, show_probs)
        if guess is None:
            print()
            break
        position, char = guess
        r = play_turn(rnd, player, position, char)
        print(f"Points this guess: {r.points}")
        print(f"Number of points: {r.total_points}")
        print(f"Remaining lives: {r.lives}")

    won = rnd.end_of_game()
    if won:
        print(f"\nSolved: {rnd.masked_word()} with {player.points} points")
    elif not player.is_alive():
        print("\nOut of lives.")
    return won


def main(argv=None) -> int:
    """
    Parse CLI args, load the dictionary, and play one round.
    """
    ap = argparse.ArgumentParser(description="bookhangman - guess a word letter by letter")
    ap.add_argument("--book-id", default=DEFAULT_BOOK_ID,
                    help="OpenLibrary works id whose description seeds the dictionary")
    ap.add_argument("--word", help="secret word (default: random dictionary word)")
    ap.add_argument("--seed", type=int, help="RNG seed for picking the secret word")
    ap.add_argument("--cache-dir", default=str(DEFAULT_CONFIG.cache_dir),
                    help="directory for cached dictionaries")
    ap.add_argument("--lives", type=int, default=DEFAULT_CONFIG.lives,
                    help="starting lives")
    ap.add_argument("--show-probs", action="store_true",
                    help="print letter probabilities for the chosen position")
    args = ap.parse_args(argv)

    config: GameConfig = replace(DEFAULT_CONFIG, cache_dir=Path(args.cache_dir),
                                 lives=args.lives)

    # 1) Dictionary: any failure here is fatal
    store = DictionaryStore(config)
    try:
        words, source = store.load_with_source(args.book_id)
    except (HangmanError, OSError) as e:
        print(f"Could not set up dictionary for {args.book_id}: {e}", file=sys.stderr)
        return 1
    print(f"Dictionary {args.book_id} ({source}): {pretty_summary(dictionary_report(words, config))}")

    # 2) Secret word
    word = args.word or pick_word(words, args.seed)

    # 3) Play
    rnd = Round(word, words)
    player = Player(lives=config.lives)
    play(rnd, player, show_probs=args.show_probs)
    return 0


if __name__ == "__main__":
    sys.exit(main())
