"""
Base classes for strategy implementations.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Any
from dataclasses import dataclass
from ...core.game_state import GameState, Move
from ...core.player import Mark


@dataclass
class StrategyConfig:
    """Configuration for a strategy."""
    name: str
    description: str
    parameters: Dict[str, Any]


class Strategy(ABC):
    """Abstract base class for move selection strategies."""

    def __init__(self, player: Mark, config: Optional[StrategyConfig] = None):
        if player == Mark.EMPTY:
            raise ValueError("Strategy must play as a player, not EMPTY")
        self.player = Mark(player)
        self.config = config or self.get_default_config()
        self.setup(**self.config.parameters)

    @abstractmethod
    def setup(self, **kwargs):
        """Initialize strategy with parameters."""
        pass

    @abstractmethod
    def choose_move(self, state: GameState) -> Move:
        """Pick one legal move for this strategy's player."""
        pass

    @classmethod
    @abstractmethod
    def get_default_config(cls) -> StrategyConfig:
        """Get default configuration for this strategy."""
        pass

    def get_description(self) -> str:
        """Get human-readable description of the strategy."""
        return f"{self.config.name}: {self.config.description}"
