"""Scoring harness: plays many games between two strategies."""
import logging
import numpy as np
from typing import Dict, Iterable, Optional, Tuple
from dataclasses import dataclass
from rich.progress import track
from ..core.game import play_game
from ..core.player import Mark
from .strategies.random_move import entropy_seed
from .strategy_registry import StrategyRegistry, strategy_registry

logger = logging.getLogger(__name__)


@dataclass
class ScoreResult:
    """Aggregate results of a scoring run, from strategy A's point of view."""
    num_games: int
    strategy_a: str
    strategy_b: str
    wins: int
    losses: int
    ties: int
    move_counts: np.ndarray  # moves played in each game

    @property
    def win_pct(self) -> float:
        return self.wins / self.num_games * 100

    @property
    def loss_pct(self) -> float:
        return self.losses / self.num_games * 100

    @property
    def tie_pct(self) -> float:
        return self.ties / self.num_games * 100

    @property
    def mean_moves(self) -> float:
        return float(self.move_counts.sum()) / self.num_games

    def __str__(self) -> str:
        lines = [f"Score Results ({self.num_games} games, {self.strategy_a} vs {self.strategy_b}):"]
        lines.append(f"  Wins:   {self.win_pct:.1f}%")
        lines.append(f"  Losses: {self.loss_pct:.1f}%")
        lines.append(f"  Ties:   {self.tie_pct:.1f}%")
        lines.append(f"  Average game length: {self.mean_moves:.2f} moves")
        return "\n".join(lines)


class GameSimulator:
    """Runs batches of games between named strategies."""

    def __init__(self, registry: Optional[StrategyRegistry] = None):
        self.registry = registry or strategy_registry

    def score(
        self,
        strategy_a: str,
        strategy_b: str,
        num_games: int = 100,
        seed: Optional[int] = None,
        progress: bool = False,
        **strategy_params
    ) -> ScoreResult:
        """Play ``num_games`` games; ``strategy_a`` always moves first.

        Args:
            strategy_a: Registered name of the first player's strategy
            strategy_b: Registered name of the second player's strategy
            num_games: Number of games to play
            seed: Master seed; every game's strategies are seeded from it
            progress: Show a progress bar while the games run
            strategy_params: Parameter overrides passed to both strategies
        """
        # Resolve both names before playing anything.
        for name in (strategy_a, strategy_b):
            self.registry.get_strategy_info(name)
        if num_games < 1:
            raise ValueError(f"num_games must be positive, got {num_games}")

        if seed is None:
            seed = entropy_seed()
        logger.info("Scoring %s vs %s over %d games (seed %d)",
                    strategy_a, strategy_b, num_games, seed)

        game_seeds = np.random.SeedSequence(seed).generate_state(2 * num_games, dtype=np.uint64)

        wins = losses = ties = 0
        move_counts = np.zeros(num_games, dtype=int)

        games = range(num_games)
        if progress:
            games = track(games, description=f"{strategy_a} vs {strategy_b}...")

        for i in games:
            params = dict(strategy_params)
            params["seed"] = int(game_seeds[2 * i])
            player_a = self.registry.get_strategy(strategy_a, Mark.PLAYER_ONE, **params)
            params["seed"] = int(game_seeds[2 * i + 1])
            player_b = self.registry.get_strategy(strategy_b, Mark.PLAYER_TWO, **params)

            record = play_game(player_a, player_b)
            move_counts[i] = record.num_moves

            if record.winner == Mark.PLAYER_ONE:
                wins += 1
            elif record.winner == Mark.PLAYER_TWO:
                losses += 1
            else:
                ties += 1
            logger.debug("Game %d: %s", i + 1, record)

        result = ScoreResult(
            num_games=num_games,
            strategy_a=strategy_a,
            strategy_b=strategy_b,
            wins=wins,
            losses=losses,
            ties=ties,
            move_counts=move_counts,
        )
        logger.info("%s: %d wins, %d losses, %d ties", strategy_a, wins, losses, ties)
        return result

    def compare_all(
        self,
        strategy_names: Iterable[str],
        num_games: int = 100,
        seed: Optional[int] = None,
        **strategy_params
    ) -> Dict[Tuple[str, str], ScoreResult]:
        """Score every ordered pairing of the given strategies."""
        names = list(strategy_names)
        for name in names:
            self.registry.get_strategy_info(name)

        results = {}
        for i, a in enumerate(names):
            for j, b in enumerate(names):
                pair_seed = None if seed is None else seed + i * len(names) + j
                results[(a, b)] = self.score(a, b, num_games, seed=pair_seed, **strategy_params)
        return results
