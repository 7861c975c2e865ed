"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from worldgen.generators.types import (
    CloseSatellite,
    FarSatellite,
    System,
    TravelZone,
    World,
)
from worldgen.generators.uwp import (
    bases_code,
    pbg_code,
    star_code,
    world_uwp,
    zone_code,
)


# Shared console instance
console = Console()

ZONE_STYLES: dict[TravelZone, str] = {
    TravelZone.GREEN: "green",
    TravelZone.AMBER: "yellow",
    TravelZone.RED: "bold red",
}


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def _mainworld_type_label(world: World) -> str:
    if isinstance(world.mainworld_type, FarSatellite):
        return f"Far satellite (orbit {world.mainworld_type.orbit})"
    if isinstance(world.mainworld_type, CloseSatellite):
        return f"Close satellite (orbit {world.mainworld_type.orbit})"
    return "Planet"


def display_system_table(systems: list[System], title: str = "Star Systems") -> None:
    """Display generated systems, one row each.

    Args:
        systems: Systems to list.
        title: Table title.
    """
    if not systems:
        console.print("[dim]No systems generated.[/dim]")
        return

    table = Table(title=title, box=box.SIMPLE)
    table.add_column("#", justify="right", style="dim")
    table.add_column("UWP", style="cyan", no_wrap=True)
    table.add_column("Bases", no_wrap=True)
    table.add_column("Zone", no_wrap=True)
    table.add_column("PBG", no_wrap=True)
    table.add_column("Stars", style="white")

    for index, system in enumerate(systems, start=1):
        world = system.mainworld
        zone_style = ZONE_STYLES[world.travel_zone]
        table.add_row(
            str(index),
            world_uwp(world),
            bases_code(world.bases),
            f"[{zone_style}]{zone_code(world.travel_zone)}[/{zone_style}]",
            pbg_code(system),
            " ".join(star_code(star) for star in system.stars),
        )

    console.print(table)


def display_world(world: World) -> None:
    """Display a mainworld's attributes in a panel.

    Args:
        world: The world to show.
    """
    table = Table(box=None, show_header=False, padding=(0, 1))
    table.add_column("Attribute", style="bold")
    table.add_column("Value")

    zone_style = ZONE_STYLES[world.travel_zone]
    table.add_row("Type", _mainworld_type_label(world))
    table.add_row("Orbit", f"{world.orbit} (HZ variance {world.hz_variance:+d})")
    table.add_row("Starport", world.port.value)
    table.add_row("Bases", ", ".join(b.value.title() for b in world.bases) or "None")
    table.add_row("Size", str(world.size))
    table.add_row("Atmosphere", str(world.atmosphere))
    table.add_row("Hydrographics", str(world.hydrographics))
    table.add_row("Population", f"{world.population} (digit {world.population_digit})")
    table.add_row("Government", str(world.government))
    table.add_row("Law", str(world.law))
    table.add_row("Tech", str(world.tech))
    table.add_row(
        "Travel zone",
        f"[{zone_style}]{world.travel_zone.value.title()}[/{zone_style}]",
    )

    console.print(Panel(table, title=f"[bold cyan]{world_uwp(world)}[/bold cyan]", expand=False))
