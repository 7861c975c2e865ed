"""Main CLI application for the world generator."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from worldgen.cli.commands import generate
from worldgen.config import get_settings

# Create main app
app = typer.Typer(
    name="worldgen",
    help="Generate star systems and mainworlds from the survey rule tables",
    add_completion=True,
)

# Add commands
app.command("system")(generate.system)
app.command("mainworld")(generate.mainworld)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every generation step"),
) -> None:
    """Worldgen - procedural star systems.

    Use 'worldgen system' for full systems or 'worldgen mainworld' for a single world.
    """
    level = logging.DEBUG if verbose else get_settings().effective_log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
