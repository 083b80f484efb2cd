"""Command line entry point for tictactoe-session."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from tictactoe_session import __version__
from tictactoe_session.action import Action
from tictactoe_session.agents import AGENT_NAMES, create_agent
from tictactoe_session.board import TicTacToeBoard
from tictactoe_session.config import (
    SessionConfig,
    get_config_paths,
    load_config,
    save_config,
)
from tictactoe_session.config.loader import CONFIG_FILE_NAME, PROJECT_DIR_NAME
from tictactoe_session.evaluate import evaluate_agents
from tictactoe_session.exceptions import TicTacToeSessionError
from tictactoe_session.session import play_game
from tictactoe_session.status import status_to_string

console = Console(highlight=False)


def setup_logging(level: str) -> None:
    """Send diagnostics to stderr through rich, keeping stdout for the board."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_session_config(ctx: click.Context) -> SessionConfig:
    config = load_config(explicit_config_path=ctx.obj.get("config"))
    level = "DEBUG" if ctx.obj.get("verbose") else config.logging.level
    setup_logging(level)
    return config


def _o_seed(seed: Optional[int]) -> Optional[int]:
    # Distinct stream for O so two random agents do not mirror each other
    return None if seed is None else seed + 1


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="tictactoe-session")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug diagnostics")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: Optional[Path]) -> None:
    """Tic-Tac-Toe session: a board and two agents taking turns.

    Without a subcommand, plays one game between two first-available agents
    and prints the grid and status after every move.

    \b
    Examples:
        tictactoe-session                          # Play the default game
        tictactoe-session play --o-agent random    # Random agent as O
        tictactoe-session evaluate --games 500     # Compare agents
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(play_command)


@cli.command("play")
@click.option("--x-agent", type=click.Choice(AGENT_NAMES), help="Agent playing X")
@click.option("--o-agent", type=click.Choice(AGENT_NAMES), help="Agent playing O")
@click.option("--seed", type=click.IntRange(min=0), help="Seed for random agents")
@click.pass_context
def play_command(
    ctx: click.Context,
    x_agent: Optional[str] = None,
    o_agent: Optional[str] = None,
    seed: Optional[int] = None,
) -> None:
    """Play a single game and print every move."""
    try:
        config = _load_session_config(ctx)
        if seed is None:
            seed = config.players.seed

        player_x = create_agent(x_agent or config.players.x, seed=seed)
        player_o = create_agent(o_agent or config.players.o, seed=_o_seed(seed))

        def print_half_move(board: TicTacToeBoard, action: Action) -> None:
            if config.display.show_board:
                console.print(board.render())
            console.print(status_to_string(board.get_game_status()))

        result = play_game(
            TicTacToeBoard(),
            player_x,
            player_o,
            on_half_move=print_half_move,
            max_half_moves=config.game.max_half_moves,
        )
    except TicTacToeSessionError as e:
        raise click.ClickException(str(e))

    console.print(
        f"[bold]Result:[/bold] {result.outcome.value} after {result.num_moves} moves"
    )


@cli.command("evaluate")
@click.option("--x-agent", type=click.Choice(AGENT_NAMES), help="Agent playing X")
@click.option("--o-agent", type=click.Choice(AGENT_NAMES), help="Agent playing O")
@click.option("--games", "-n", type=click.IntRange(min=1), default=100, show_default=True)
@click.option("--seed", type=click.IntRange(min=0), help="Seed for random agents")
@click.pass_context
def evaluate_command(
    ctx: click.Context,
    x_agent: Optional[str],
    o_agent: Optional[str],
    games: int,
    seed: Optional[int],
) -> None:
    """Play many games between two agents and summarise the results."""
    try:
        config = _load_session_config(ctx)
        if seed is None:
            seed = config.players.seed

        x_name = x_agent or config.players.x
        o_name = o_agent or config.players.o
        results = evaluate_agents(
            create_agent(x_name, seed=seed),
            create_agent(o_name, seed=_o_seed(seed)),
            x_name,
            o_name,
            num_games=games,
        )
    except TicTacToeSessionError as e:
        raise click.ClickException(str(e))

    table = Table(title=f"{x_name} (X) vs {o_name} (O)")
    table.add_column("Games", justify="right")
    table.add_column("X Wins", justify="right")
    table.add_column("O Wins", justify="right")
    table.add_column("Draws", justify="right")
    table.add_column("Avg Moves", justify="right")
    table.add_row(
        str(results["num_games"]),
        f"{results['x_wins']} ({results['x_win_rate']:.0%})",
        f"{results['o_wins']} ({results['o_win_rate']:.0%})",
        f"{results['draws']} ({results['draw_rate']:.0%})",
        f"{results['avg_moves_per_game']:.1f}",
    )
    console.print(table)


@cli.command("init")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite an existing project configuration",
)
def init_command(force: bool) -> None:
    """Write a default configuration file for the current directory.

    Creates .tictactoe/config.yaml holding every setting at its default, then
    lists the files the loader reads.
    """
    project_root = Path.cwd()
    config_path = project_root / PROJECT_DIR_NAME / CONFIG_FILE_NAME

    if config_path.exists() and not force:
        console.print(
            f"[yellow]Configuration already exists in {project_root}[/yellow]\n"
            "Use --force to overwrite it"
        )
        return

    try:
        save_config(SessionConfig(), config_path)
    except TicTacToeSessionError as e:
        raise click.ClickException(str(e))

    console.print(f"[green]Wrote default configuration to {config_path}[/green]")
    for scope, path in get_config_paths().items():
        console.print(f"{scope}: {path if path else '-'}")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except TicTacToeSessionError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Game interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
