"""Generation commands."""

import logging
from typing import Optional

import typer

from worldgen.cli.display import (
    display_error,
    display_info,
    display_system_table,
    display_world,
)
from worldgen.config import get_settings
from worldgen.dice import DiceRoller
from worldgen.generators import generate_mainworld, generate_system

logger = logging.getLogger(__name__)


def _make_roller(seed: Optional[int]) -> DiceRoller:
    """Build a roller from the option, falling back to the configured seed."""
    if seed is None:
        seed = get_settings().seed
    logger.debug(f"Using seed {seed}")
    return DiceRoller(seed=seed)


def system(
    count: int = typer.Option(1, "--count", "-n", help="Number of systems to generate"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Seed for reproducible output"),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per line"),
) -> None:
    """Generate star systems."""
    if count < 1:
        display_error(f"Count must be at least 1, got {count}")
        raise typer.Exit(1)

    settings = get_settings()
    roller = _make_roller(seed)
    systems = [
        generate_system(
            roller,
            habitable_zone=settings.habitable_zone,
            hz_variance=settings.hz_variance,
        )
        for _ in range(count)
    ]

    if as_json:
        for generated in systems:
            typer.echo(generated.model_dump_json())
        return

    display_system_table(systems)
    if roller.seed is not None:
        display_info(f"Seed: {roller.seed}")


def mainworld(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Seed for reproducible output"),
    habitable_zone: Optional[int] = typer.Option(
        None, "--hz", help="Orbit of the habitable zone"
    ),
    hz_variance: Optional[int] = typer.Option(
        None, "--hz-variance", help="Mainworld offset from the habitable zone"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the world as JSON"),
) -> None:
    """Generate a single mainworld."""
    settings = get_settings()
    if habitable_zone is None:
        habitable_zone = settings.habitable_zone
    if hz_variance is None:
        hz_variance = settings.hz_variance

    roller = _make_roller(seed)
    world = generate_mainworld(roller, hz_variance, habitable_zone)

    if as_json:
        typer.echo(world.model_dump_json())
        return

    display_world(world)
    if roller.seed is not None:
        display_info(f"Seed: {roller.seed}")
