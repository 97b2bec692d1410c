#!/usr/bin/env python3
"""
Run strategy comparison tests for tic-tac-toe.
"""
import sys
from pathlib import Path

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).parent))

from tests.test_strategy_comparison import TestStrategyComparison
from tictactoe.simulation import GameSimulator
from tictactoe.simulation.strategy_registry import strategy_registry


def main():
    """Run all strategy comparison tests."""
    print("="*80)
    print("TIC-TAC-TOE STRATEGY COMPARISON TESTS")
    print("="*80)

    test = TestStrategyComparison()

    # Test 1: One step ahead against random, both seats
    print("\n1. ONE STEP AHEAD VS RANDOM")
    print("-"*40)
    test.test_one_step_ahead_beats_random()
    test.test_random_rarely_beats_one_step_ahead()

    # Test 2: Round robin with a larger sample
    print("\n\n2. ALL STRATEGIES ROUND ROBIN")
    print("-"*40)
    results = GameSimulator().compare_all(
        strategy_registry.list_strategies(), num_games=50, seed=1, sample_count=20
    )
    test._print_results(results)

    print("\n" + "="*80)
    print("All tests completed!")


if __name__ == "__main__":
    main()
