"""
Rollout sampling strategy implementation.
"""
import logging
from typing import Dict, Optional
import numpy as np
from ...core.game import play_game
from ...core.game_state import GameState, InvalidMoveError, Move
from ...core.player import opponent
from .base import Strategy, StrategyConfig
from .one_step_ahead import GreedyOneStepStrategy
from .random_move import entropy_seed

logger = logging.getLogger(__name__)


class RolloutSamplerStrategy(Strategy):
    """
    Score candidate moves by sampled playouts.

    Every trial lets a one-step-ahead player pick a move on a scratch copy
    of the board, then plays the game out with one-step-ahead players on
    both sides. The terminal outcome adds ``win_score``, ``tie_score`` or
    ``loss_score`` to the move that started the playout. The move with the
    highest total wins; ties go to the move that comes first in legal-move
    order. Moves that were never sampled are not candidates.

    This is a flat Monte Carlo evaluator, not a tree search.
    """

    def setup(
        self,
        sample_count: int = 50,
        win_score: float = 1.0,
        tie_score: float = 0.0,
        loss_score: float = -1.0,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None
    ):
        if sample_count < 1:
            raise ValueError(f"sample_count must be at least 1, got {sample_count}")
        self.sample_count = sample_count
        self.win_score = win_score
        self.tie_score = tie_score
        self.loss_score = loss_score

        if rng is None:
            if seed is None:
                seed = entropy_seed()
                logger.info("Using random seed: %d", seed)
            rng = np.random.default_rng(seed)
        self.seed = seed
        self.rng = rng

        self.greedy = self._make_greedy(self.player)
        self.opponent_greedy = self._make_greedy(opponent(self.player))

    def _make_greedy(self, player) -> GreedyOneStepStrategy:
        config = GreedyOneStepStrategy.get_default_config()
        config.parameters.update(rng=self.rng)
        return GreedyOneStepStrategy(player, config)

    def outcome_score(self, final_state: GameState) -> float:
        """Score of a finished playout from this player's point of view."""
        if final_state.winner == self.player:
            return self.win_score
        if final_state.is_tied:
            return self.tie_score
        return self.loss_score

    def evaluate(self, state: GameState) -> Dict[int, float]:
        """Accumulated playout score per sampled position."""
        totals: Dict[int, float] = {m.position: 0.0 for m in state.legal_moves(self.player)}
        visits = dict.fromkeys(totals, 0)

        for _ in range(self.sample_count):
            scratch = state.copy()
            move = self.greedy.choose_move(scratch)
            scratch.apply(move)
            record = play_game(self.greedy, self.opponent_greedy, scratch)
            totals[move.position] += self.outcome_score(record.final_state)
            visits[move.position] += 1

        return {position: total for position, total in totals.items() if visits[position]}

    def choose_move(self, state: GameState) -> Move:
        if not state.is_playing:
            raise InvalidMoveError("No legal moves left - game is over")

        scores = self.evaluate(state)
        best_position = None
        best_score = 0.0
        for position, score in scores.items():
            if best_position is None or score > best_score:
                best_position = position
                best_score = score

        logger.debug("Rollout scores for player %s: %s", self.player, scores)
        return Move(best_position, self.player)

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="one_step_ahead_mcst",
            description="Pick the move with the best sampled playout score",
            parameters={
                "sample_count": 50,
                "win_score": 1.0,
                "tie_score": 0.0,
                "loss_score": -1.0,
                "seed": None,
            }
        )
