from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt, Confirm
from rich.markup import escape
from typing import List, Optional, Tuple
from ..core.game import Game, GameRecord
from ..core.game_state import GameState, GameStatus, Move
from ..core.notation import ROW_LABELS, label_for_position
from ..core.player import Mark, PLAYERS, opponent
from ..simulation import ScoreResult, strategy_registry
from ..simulation.strategies import HumanStrategy


console = Console()


# (board, expected status, expected winner)
REFERENCE_BOARDS = [
    ([0, 0, 0, 0, 0, 0, 0, 0, 0], GameStatus.PLAYING, None),
    ([1, 1, 1, 0, 0, 0, 0, 0, 0], GameStatus.WON, Mark.PLAYER_ONE),
    ([0, 0, 0, 1, 1, 1, 0, 0, 0], GameStatus.WON, Mark.PLAYER_ONE),
    ([0, 0, 0, 0, 0, 0, 1, 1, 1], GameStatus.WON, Mark.PLAYER_ONE),
    ([1, 0, 0, 1, 0, 0, 1, 0, 0], GameStatus.WON, Mark.PLAYER_ONE),
    ([0, 1, 0, 0, 1, 0, 0, 1, 0], GameStatus.WON, Mark.PLAYER_ONE),
    ([0, 0, 1, 0, 0, 1, 0, 0, 1], GameStatus.WON, Mark.PLAYER_ONE),
    ([1, 0, 0, 0, 1, 0, 0, 0, 1], GameStatus.WON, Mark.PLAYER_ONE),
    ([0, 0, 1, 0, 1, 0, 1, 0, 0], GameStatus.WON, Mark.PLAYER_ONE),
    ([2, 2, 2, 0, 0, 0, 0, 0, 0], GameStatus.WON, Mark.PLAYER_TWO),
    ([0, 0, 0, 2, 2, 2, 0, 0, 0], GameStatus.WON, Mark.PLAYER_TWO),
    ([0, 0, 0, 0, 0, 0, 2, 2, 2], GameStatus.WON, Mark.PLAYER_TWO),
    ([2, 0, 0, 2, 0, 0, 2, 0, 0], GameStatus.WON, Mark.PLAYER_TWO),
    ([0, 2, 0, 0, 2, 0, 0, 2, 0], GameStatus.WON, Mark.PLAYER_TWO),
    ([0, 0, 2, 0, 0, 2, 0, 0, 2], GameStatus.WON, Mark.PLAYER_TWO),
    ([2, 0, 0, 0, 2, 0, 0, 0, 2], GameStatus.WON, Mark.PLAYER_TWO),
    ([0, 0, 2, 0, 2, 0, 2, 0, 0], GameStatus.WON, Mark.PLAYER_TWO),
    ([1, 2, 2, 2, 1, 1, 1, 2, 2], GameStatus.TIED, None),
]

REFERENCE_POSITIONS = [1, 0, 2, 4, 3, 5, 7, 6, 8]


def status_line(state: GameState) -> str:
    if state.is_won:
        return f"Player {state.winner} wins."
    elif state.is_tied:
        return "Tie."
    return "Playing."


def format_board(state: GameState, symbols: bool = False) -> str:
    """Render the board as a 3x3 grid followed by its status line."""
    rows = []
    for row in range(3):
        cells = state.board[3 * row:3 * row + 3]
        rows.append("|".join(c.symbol if symbols else str(int(c)) for c in cells))
    return "\n-----\n".join(rows) + "\n" + status_line(state)


def format_labelled_board(state: GameState) -> str:
    """Board with row letters and column numbers for interactive play."""
    lines = [" 1 2 3"]
    for row in range(3):
        cells = state.board[3 * row:3 * row + 3]
        lines.append(ROW_LABELS[row] + "|".join(c.symbol for c in cells))
        if row < 2:
            lines.append(" -+-+-")
    return "\n".join(lines)


def display_board(state: GameState):
    console.print(format_board(state))
    console.print()


def display_record(record: GameRecord):
    console.print(str(record))


def display_score(result: ScoreResult):
    """Show scoring harness results as a table."""
    table = Table(title=f"{result.strategy_a} vs {result.strategy_b} ({result.num_games} games)")
    table.add_column("Outcome", style="cyan")
    table.add_column("Games", style="magenta")
    table.add_column("Percent", style="green")

    table.add_row("Win", str(result.wins), f"{result.win_pct:.1f}%")
    table.add_row("Loss", str(result.losses), f"{result.loss_pct:.1f}%")
    table.add_row("Tie", str(result.ties), f"{result.tie_pct:.1f}%")

    console.print(table)
    console.print(f"\nAverage game length: {result.mean_moves:.2f} moves")


def display_strategies():
    """Show registered strategies and their parameters."""
    table = Table(title="Available Strategies")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="green")
    table.add_column("Parameters", style="yellow")

    for name, config in strategy_registry.get_all_strategies_info().items():
        params = ", ".join([f"{k}={v}" for k, v in config.parameters.items()])
        table.add_row(name, config.description, params or "None")

    console.print(table)


def check_board_status() -> List[Tuple[str, bool]]:
    results = []
    for board, expected_status, expected_winner in REFERENCE_BOARDS:
        state = GameState(board)
        display_board(state)
        passed = state.status == expected_status and state.winner == expected_winner
        results.append((f"status {''.join(map(str, board))}", passed))
    return results


def check_board_moves() -> List[Tuple[str, bool]]:
    results = []
    for first in (Mark.PLAYER_ONE, Mark.PLAYER_TWO):
        state = GameState()
        state.next_player = first
        display_board(state)
        player = first
        for position in REFERENCE_POSITIONS:
            if not state.is_playing:
                break
            state.apply(Move(position, player))
            display_board(state)
            player = opponent(player)
        results.append((f"full sequence starting with player {first}", state.is_tied))
    return results


def check_random_moves(seed: Optional[int] = None) -> List[Tuple[str, bool]]:
    seeds = (None, None) if seed is None else (seed, seed + 1)
    players = [
        strategy_registry.get_strategy("random", mark, seed=s)
        for mark, s in zip(PLAYERS, seeds)
    ]

    state = GameState()
    passed = True
    display_board(state)
    for _ in range(4):
        for player in players:
            if not state.is_playing:
                break
            move = player.choose_move(state)
            console.print(str(move))
            passed = passed and move in state.legal_moves(player.player)
            state.apply(move)
            display_board(state)
    return [("random moves are legal", passed)]


def run_self_checks(seed: Optional[int] = None) -> bool:
    """Run the built-in board and move checks; True if all pass."""
    results = check_board_status() + check_board_moves() + check_random_moves(seed)

    table = Table(title="Self Checks")
    table.add_column("Check", style="cyan")
    table.add_column("Result")
    for name, passed in results:
        table.add_row(name, "[green]PASS[/green]" if passed else "[red]FAIL[/red]")
    console.print(table)

    return all(passed for _, passed in results)


class InteractiveCLI:
    """Interactive game against a computer strategy."""

    def __init__(self, opponent_name: str = "one_step_ahead", human_first: bool = True, **strategy_params):
        human_mark = Mark.PLAYER_ONE if human_first else Mark.PLAYER_TWO
        config = HumanStrategy.get_default_config()
        config.parameters.update(prompt=self.ask_move, on_invalid=self.show_invalid)
        self.human = HumanStrategy(human_mark, config)
        self.computer = strategy_registry.get_strategy(
            opponent_name, opponent(human_mark), **strategy_params
        )

    def ask_move(self, state: GameState) -> str:
        console.print(Panel(format_labelled_board(state), title="Board", border_style="blue"))
        return Prompt.ask("[cyan]Please enter the position for your move[/cyan]")

    def show_invalid(self, message: str):
        console.print(f"[red]{escape(message)}[/red]")

    def play_one(self) -> GameRecord:
        if self.human.player == Mark.PLAYER_ONE:
            game = Game(self.human, self.computer)
        else:
            game = Game(self.computer, self.human)
        while game.state.is_playing:
            move = game.play_turn()
            if move.player == self.computer.player:
                console.print(f"[yellow]Computer plays {label_for_position(move.position)}[/yellow]")

        console.print(Panel(format_labelled_board(game.state), title="Final Board", border_style="blue"))
        if game.state.winner == self.human.player:
            console.print("[bold green]You win![/bold green]")
        elif game.state.winner == self.computer.player:
            console.print("[bold red]Computer wins.[/bold red]")
        else:
            console.print("[bold yellow]Tie.[/bold yellow]")
        return GameRecord(final_state=game.state, moves=tuple(game.log))

    def run(self):
        """Main CLI loop."""
        console.print(Panel.fit(
            "[bold cyan]Welcome to Tic-Tac-Toe![/bold cyan]\n"
            "Enter your move as <row><col>, where row is a, b or c\n"
            "and col is 1, 2 or 3, e.g. a1",
            border_style="blue"
        ))
        console.print(f"[dim]You are {self.human.player.symbol}, "
                      f"playing against {self.computer.config.name}[/dim]")

        while True:
            self.play_one()
            if not Confirm.ask("\n[cyan]Play again?[/cyan]", default=False):
                console.print("[yellow]Thanks for playing![/yellow]")
                break
