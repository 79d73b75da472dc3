"""CLI entry point."""

from __future__ import annotations

from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Play UNO at the terminal")


@app.callback()
def main() -> None:
    """UNO for 2-10 players sharing one terminal."""


@app.command()
def play(
    players: int = typer.Option(
        4,
        "--players",
        "-n",
        min=2,
        max=10,
        envvar="UNO_PLAYERS",
        help="Number of players (2-10)",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"
    ),
    max_turns: Optional[int] = typer.Option(
        None,
        "--max-turns",
        min=1,
        envvar="UNO_MAX_TURNS",
        help="Stop without a winner after this many turns",
    ),
    log_level: str = typer.Option(
        "INFO", "--log-level", envvar="UNO_LOG_LEVEL", help="Log file level"
    ),
) -> None:
    """Run a single UNO game."""
    from unogame.agents import ConsoleInput, ConsoleOutput
    from unogame.logging_config import setup_logging
    from unogame.orchestration.game_runner import GameRunner

    setup_logging(level=log_level)
    runner = GameRunner(
        ConsoleInput(),
        ConsoleOutput(),
        num_players=players,
        seed=seed,
        max_turns=max_turns,
    )
    result = runner.run()
    typer.echo(f"Winner: {result.winner or 'None'}")
    typer.echo(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    app()
