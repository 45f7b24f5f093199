"""CLI interface for island map saves."""

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from islandmap import config
from islandmap.errors import IslandMapError
from islandmap.geometry import Edge, Vertex
from islandmap.grid import HexGrid
from islandmap.hex_coords import HexCoord, hexagon, key_to_coords
from islandmap.island_map import HexType, IslandMap
from islandmap.schemas import IslandSave

logger = logging.getLogger(__name__)


def _parse_coords(ctx, param, values) -> list[HexCoord]:
    coords = []
    for value in values:
        try:
            coords.append(key_to_coords(value))
        except ValueError:
            raise click.BadParameter(f"Expected 'q,r', got {value!r}")
    return coords


def _load(path: str) -> IslandMap:
    try:
        island = IslandSave.model_validate_json(Path(path).read_text()).to_island_map()
    except (ValidationError, IslandMapError, ValueError) as e:
        raise click.ClickException(f"Invalid save {path}: {e}")
    logger.debug("Loaded %s: %r", path, island)
    return island


def _save(island: IslandMap, path: str) -> None:
    Path(path).write_text(
        IslandSave.from_island_map(island).model_dump_json(indent=config.SAVE_INDENT)
    )


@click.group()
def cli():
    """Island Map Topology Tools"""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)


@cli.command()
@click.option("--radius", default=config.DEFAULT_RADIUS, help="Island radius in hexes")
@click.option("--output", default="island.json", help="Output file")
@click.option("--civ", "civs", multiple=True, help="Civilization to register")
@click.option(
    "--terrain",
    type=click.Choice([t.value for t in HexType]),
    default=config.DEFAULT_HEX_TYPE,
    help="Terrain of every hex",
)
def new(radius: int, output: str, civs: tuple[str, ...], terrain: str):
    """Create a hexagonal island save."""
    if radius < 0:
        raise click.BadParameter("Radius must be non-negative", param_hint="--radius")

    island = IslandMap(HexGrid.from_coords(hexagon(radius)))
    for coord in island.grid.all_coords():
        island.set_hex_type(coord, HexType(terrain))
    for civ in civs:
        try:
            island.register_civilization(civ)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--civ")

    _save(island, output)
    click.echo(f"Created island with {island.grid.size()} hexes")
    click.echo(f"Saved to {output}")


@cli.command()
@click.argument("save", type=click.Path(exists=True, dir_okay=False))
def stats(save: str):
    """Show island statistics."""
    island = _load(save)
    grid = island.grid

    click.echo("Island Statistics:")
    click.echo(f"  Hexes: {grid.size()}")
    click.echo(f"  Edges: {len(grid.all_edges())}")
    click.echo(f"  Vertices: {len(grid.all_vertices())}")
    click.echo(f"  Civilizations: {len(island.civilizations())}")
    click.echo(f"  Cities: {len(island.all_cities())}")
    click.echo(f"  Roads: {len(island.all_roads())}")
    click.echo(f"  Visible hexes: {len(island.visible_hexes())}")


@cli.command()
@click.argument("save", type=click.Path(exists=True, dir_okay=False))
@click.option("--as-json", is_flag=True, help="Print coordinates as a JSON list")
def visible(save: str, as_json: bool):
    """List visible hexes."""
    island = _load(save)
    coords = island.visible_hexes()

    if as_json:
        click.echo(json.dumps([[c.q, c.r] for c in coords]))
        return
    if not coords:
        click.echo("No visible hexes")
    for coord in coords:
        click.echo(f"{coord}  {island.get_hex_type(coord).value}")


@cli.command()
@click.argument("save", type=click.Path(exists=True, dir_okay=False))
@click.option("--civ", required=True, help="Owning civilization")
@click.option("--hex", "hexes", multiple=True, callback=_parse_coords, help="Vertex hex as q,r (3 times)")
def city(save: str, civ: str, hexes: list[HexCoord]):
    """Found a city on the vertex shared by three hexes."""
    if len(hexes) != 3:
        raise click.BadParameter("A vertex needs exactly 3 hexes", param_hint="--hex")

    island = _load(save)
    try:
        island.add_city(Vertex.create(*hexes), civ)
    except (IslandMapError, ValueError) as e:
        raise click.ClickException(str(e))

    _save(island, save)
    click.echo(f"City founded by {civ}")


@cli.command()
@click.argument("save", type=click.Path(exists=True, dir_okay=False))
@click.option("--hex", "hexes", multiple=True, callback=_parse_coords, help="Vertex hex as q,r (3 times)")
def upgrade(save: str, hexes: list[HexCoord]):
    """Raise the city on a vertex by one level."""
    if len(hexes) != 3:
        raise click.BadParameter("A vertex needs exactly 3 hexes", param_hint="--hex")

    island = _load(save)
    try:
        upgraded = island.upgrade_city(Vertex.create(*hexes))
    except (IslandMapError, ValueError) as e:
        raise click.ClickException(str(e))

    _save(island, save)
    click.echo(f"City upgraded to {upgraded.level.name.title()}")


@cli.command()
@click.argument("save", type=click.Path(exists=True, dir_okay=False))
@click.option("--civ", required=True, help="Owning civilization")
@click.option("--hex", "hexes", multiple=True, callback=_parse_coords, help="Edge hex as q,r (2 times)")
def road(save: str, civ: str, hexes: list[HexCoord]):
    """Build a road on the edge between two hexes."""
    if len(hexes) != 2:
        raise click.BadParameter("An edge needs exactly 2 hexes", param_hint="--hex")

    island = _load(save)
    try:
        island.add_road(Edge.create(*hexes), civ)
    except (IslandMapError, ValueError) as e:
        raise click.ClickException(str(e))

    _save(island, save)
    click.echo(f"Road built by {civ}")


if __name__ == "__main__":
    cli()
