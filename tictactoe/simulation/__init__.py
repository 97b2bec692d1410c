"""Simulation module for tic-tac-toe."""
from .game_simulator import GameSimulator, ScoreResult
from .strategies import Strategy
from .strategy_registry import UnknownStrategyError, strategy_registry

__all__ = [
    "GameSimulator",
    "ScoreResult",
    "Strategy",
    "UnknownStrategyError",
    "strategy_registry",
]
