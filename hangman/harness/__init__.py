from .core import Player, TurnResult, play_turn, run_moves

__all__ = ["Player", "TurnResult", "play_turn", "run_moves"]
