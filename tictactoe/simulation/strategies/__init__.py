"""
Strategy implementations for tic-tac-toe play.
"""
from .base import Strategy, StrategyConfig
from .random_move import RandomStrategy
from .one_step_ahead import GreedyOneStepStrategy
from .rollout import RolloutSamplerStrategy
from .human import HumanStrategy

__all__ = [
    "Strategy",
    "StrategyConfig",
    "RandomStrategy",
    "GreedyOneStepStrategy",
    "RolloutSamplerStrategy",
    "HumanStrategy",
]
