"""Game orchestration."""

from unoengine.orchestration.game_runner import GameResult, GameRunner
from unoengine.orchestration.simulation import run_simulation

__all__ = ["GameResult", "GameRunner", "run_simulation"]
