"""CLI entry point."""

from __future__ import annotations

import logging
import random
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO game: one human against computer players")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    logging.getLogger("unoengine").setLevel(logging.DEBUG if verbose else logging.INFO)


def _check_strategy(strategy: str) -> str:
    from unoengine.agents.computer_agent import STRATEGIES

    if strategy not in STRATEGIES:
        raise typer.BadParameter(
            f"Unknown strategy: {strategy}. Use 'random' or 'first'.", param_hint="--strategy"
        )
    return strategy


@app.command()
def play(
    name: str = typer.Option(
        "Player",
        "--name",
        "-n",
        envvar="UNO_PLAYER_NAME",
        help="Your player name",
    ),
    computers: int = typer.Option(
        3,
        "--computers",
        "-c",
        min=1,
        max=9,
        envvar="UNO_COMPUTER_PLAYERS",
        help="Number of computer players (1-9)",
    ),
    strategy: str = typer.Option("random", "--strategy", help="Computer strategy: random or first"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log reshuffles and other engine details"),
) -> None:
    """Play a single UNO game in the terminal."""
    from unoengine.agents import ComputerAgent, HumanAgent
    from unoengine.engine import create_players
    from unoengine.orchestration import GameRunner

    if not name.strip():
        raise typer.BadParameter("The player name is mandatory.", param_hint="--name")
    _check_strategy(strategy)
    _configure_logging(verbose)

    rng = random.Random(seed)
    players = create_players(name.strip(), computers)
    agents = [
        HumanAgent(name=p.name)
        if p.human
        else ComputerAgent(name=p.name, strategy=strategy, rng=random.Random(rng.randint(0, 2**31 - 1)))
        for p in players
    ]
    try:
        result = GameRunner(players, agents, seed=seed).run()
    except EOFError:
        typer.echo("Input closed, game abandoned.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Winner: {result.winner or 'None (draw)'}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def simulate(
    players: int = typer.Option(4, "--players", "-p", min=2, max=10, help="Number of computer players"),
    games: int = typer.Option(100, "--games", "-g", min=1, help="Number of games"),
    strategy: str = typer.Option("random", "--strategy", help="Computer strategy: random or first"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every move"),
) -> None:
    """Run many computer-only games and report the wins."""
    from unoengine.orchestration import run_simulation

    _check_strategy(strategy)
    _configure_logging(verbose)
    if not verbose:
        # Per-move logging is noise over hundreds of games
        logging.getLogger("unoengine").setLevel(logging.WARNING)

    wins = run_simulation(num_players=players, num_games=games, strategy=strategy, seed=seed)
    typer.echo("Simulation results:")
    for pid, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {pid}: {w} wins")


if __name__ == "__main__":
    app()
