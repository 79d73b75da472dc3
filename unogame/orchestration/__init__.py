"""Game orchestration."""

from unogame.orchestration.game_runner import GameResult, GameRunner

__all__ = ["GameRunner", "GameResult"]
