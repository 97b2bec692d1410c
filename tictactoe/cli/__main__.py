import logging
import sys
import click
from rich.logging import RichHandler
from ..core.game import Game, GameRecord
from ..core.player import Mark
from ..simulation import GameSimulator, UnknownStrategyError, strategy_registry
from .interface import (
    InteractiveCLI, console, display_board, display_record, display_score,
    display_strategies, run_self_checks
)


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def strategy_overrides(seed, samples) -> dict:
    overrides = {}
    if seed is not None:
        overrides["seed"] = seed
    if samples is not None:
        overrides["sample_count"] = samples
    return overrides


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Log every move')
def main(verbose):
    """Tic-Tac-Toe - strategy simulator and scoring harness."""
    setup_logging(verbose)


@main.command()
@click.option('--seed', type=int, help='Seed for the random move checks')
def test(seed):
    """Run built-in checks of board status and move logic."""
    if not run_self_checks(seed):
        sys.exit(1)


@main.command(name="random")
@click.option('--seed', type=int, help='Seed for player one (player two uses seed + 1)')
def random_game(seed):
    """Play one game between two random strategies, showing every board."""
    player_one = strategy_registry.get_strategy("random", Mark.PLAYER_ONE, seed=seed)
    player_two = strategy_registry.get_strategy(
        "random", Mark.PLAYER_TWO, seed=None if seed is None else seed + 1
    )

    game = Game(player_one, player_two)
    display_board(game.state)
    while game.state.is_playing:
        game.play_turn()
        display_board(game.state)
    display_record(GameRecord(final_state=game.state, moves=tuple(game.log)))


@main.command()
@click.argument('num_games', type=click.IntRange(min=1))
@click.argument('strategy_a')
@click.argument('strategy_b')
@click.option('--seed', type=int, help='Master seed for reproducible runs')
@click.option('--samples', type=click.IntRange(min=1), help='Playouts per move for one_step_ahead_mcst')
@click.pass_context
def score(ctx, num_games, strategy_a, strategy_b, seed, samples):
    """Play NUM_GAMES games of STRATEGY_A (moving first) against STRATEGY_B."""
    try:
        result = GameSimulator().score(
            strategy_a, strategy_b, num_games, seed=seed, progress=True,
            **strategy_overrides(None, samples)
        )
    except UnknownStrategyError as e:
        raise click.UsageError(
            f"{e}\nStrategies: {', '.join(strategy_registry.list_strategies())}", ctx=ctx
        )
    display_score(result)


@main.command()
@click.option('--opponent', 'opponent_name', default='one_step_ahead', show_default=True,
              help='Strategy to play against')
@click.option('--second', is_flag=True, help='Let the computer move first')
@click.option('--seed', type=int, help='Seed for the computer player')
@click.option('--samples', type=click.IntRange(min=1), help='Playouts per move for one_step_ahead_mcst')
@click.pass_context
def play(ctx, opponent_name, second, seed, samples):
    """Play interactively against a computer strategy."""
    try:
        cli = InteractiveCLI(opponent_name, human_first=not second, **strategy_overrides(seed, samples))
    except UnknownStrategyError as e:
        raise click.UsageError(str(e), ctx=ctx)
    cli.run()


@main.command()
def strategies():
    """List available strategies."""
    display_strategies()


if __name__ == "__main__":
    main()
