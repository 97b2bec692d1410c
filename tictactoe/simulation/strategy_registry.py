"""
Registry for managing and accessing different strategies.
"""
from typing import Dict, Type, List
from ..core.player import Mark
from .strategies import (
    Strategy, StrategyConfig, RandomStrategy, GreedyOneStepStrategy,
    RolloutSamplerStrategy
)


class UnknownStrategyError(ValueError):
    """Raised when a strategy name is not registered."""


class StrategyRegistry:
    """Registry for managing available strategies."""

    def __init__(self):
        self._strategies: Dict[str, Type[Strategy]] = {}
        self._register_default_strategies()

    def _register_default_strategies(self):
        """Register all built-in strategies."""
        self.register(RandomStrategy)
        self.register(GreedyOneStepStrategy)
        self.register(RolloutSamplerStrategy)

    def register(self, strategy_class: Type[Strategy]):
        """Register a new strategy class."""
        config = strategy_class.get_default_config()
        self._strategies[config.name.lower()] = strategy_class

    def _lookup(self, name: str) -> Type[Strategy]:
        strategy_class = self._strategies.get(name.lower())
        if not strategy_class:
            raise UnknownStrategyError(
                f"Unknown strategy: {name} (available: {', '.join(self.list_strategies())})"
            )
        return strategy_class

    def get_strategy(self, name: str, player: Mark, **kwargs) -> Strategy:
        """Get a strategy instance by name with optional parameter overrides.

        Overrides for parameters the strategy does not declare are ignored,
        so one set of options can be passed to any strategy.
        """
        strategy_class = self._lookup(name)

        config = strategy_class.get_default_config()
        if kwargs:
            config.parameters.update(
                {k: v for k, v in kwargs.items() if k in config.parameters}
            )

        return strategy_class(player, config)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._strategies

    def list_strategies(self) -> List[str]:
        """List all available strategy names."""
        return list(self._strategies.keys())

    def get_strategy_info(self, name: str) -> StrategyConfig:
        """Get information about a strategy."""
        return self._lookup(name).get_default_config()

    def get_all_strategies_info(self) -> Dict[str, StrategyConfig]:
        """Get information about all registered strategies."""
        return {
            name: strategy_class.get_default_config()
            for name, strategy_class in self._strategies.items()
        }


# Global registry instance
strategy_registry = StrategyRegistry()
