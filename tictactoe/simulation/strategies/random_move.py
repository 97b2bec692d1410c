"""
Uniform random strategy implementation.
"""
import logging
import time
from typing import Optional
import numpy as np
from ...core.game_state import GameState, InvalidMoveError, Move
from .base import Strategy, StrategyConfig

logger = logging.getLogger(__name__)


def entropy_seed() -> int:
    """Seed from OS entropy mixed with a high-resolution clock reading."""
    return int(np.random.SeedSequence().entropy) ^ time.perf_counter_ns()


class RandomStrategy(Strategy):
    """Pick any legal move with equal probability."""

    def setup(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        if rng is not None:
            self.seed = seed
            self.rng = rng
            return
        if seed is None:
            seed = entropy_seed()
            logger.info("Using random seed: %d", seed)
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def choose_move(self, state: GameState) -> Move:
        moves = state.legal_moves(self.player)
        if not moves:
            raise InvalidMoveError("No legal moves left - game is over")
        logger.debug("Valid moves: %s", " ".join(str(m) for m in moves))
        return moves[int(self.rng.integers(0, len(moves)))]

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="random",
            description="Pick a legal move uniformly at random",
            parameters={"seed": None}
        )
