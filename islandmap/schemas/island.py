"""Island map save format.

Loading replays registration, terrain assignment and every city and road
placement against a fresh IslandMap, so each overlay rule is checked again.
"""

from typing import Annotated

from pydantic import Field, StringConstraints

from islandmap.hex_coords import HexCoord
from islandmap.island_map import CityLevel, HexType, IslandMap

from .base import (
    CoordData,
    EdgeData,
    SaveModel,
    VertexData,
    coord_to_data,
    edge_from_data,
    edge_to_data,
    vertex_from_data,
    vertex_to_data,
)
from .grid import GridSave

# Civilization ids are trimmed on load and must not be blank
CivilizationName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CitySave(SaveModel):
    """A city on a vertex."""

    vertex: VertexData
    owner: CivilizationName
    level: CityLevel = CityLevel.OUTPOST


class RoadSave(SaveModel):
    """A road on an edge."""

    edge: EdgeData
    owner: CivilizationName


class IslandSave(SaveModel):
    """The complete island map of a session."""

    grid: GridSave
    hex_types: list[tuple[CoordData, HexType]] = Field(default_factory=list)
    civilizations: list[CivilizationName] = Field(default_factory=list)
    cities: list[CitySave] = Field(default_factory=list)
    roads: list[RoadSave] = Field(default_factory=list)

    @classmethod
    def from_island_map(cls, island: IslandMap) -> "IslandSave":
        return cls(
            grid=GridSave.from_grid(island.grid),
            hex_types=[
                (tuple(coord_to_data(coord)), hex_type)
                for coord, hex_type in island.hex_types().items()
            ],
            civilizations=[civ.value for civ in island.civilizations()],
            cities=[
                CitySave(
                    vertex=vertex_to_data(city.vertex),
                    owner=city.owner.value,
                    level=city.level,
                )
                for city in island.all_cities()
            ],
            roads=[
                RoadSave(edge=edge_to_data(road.edge), owner=road.owner.value)
                for road in island.all_roads()
            ],
        )

    def to_island_map(self) -> IslandMap:
        island = IslandMap(self.grid.to_grid())
        for (q, r), hex_type in self.hex_types:
            island.set_hex_type(HexCoord(q, r), hex_type)
        for civ in self.civilizations:
            island.register_civilization(civ)
        for city in self.cities:
            island.add_city(vertex_from_data(city.vertex), city.owner, city.level)
        for road in self.roads:
            island.add_road(edge_from_data(road.edge), road.owner)
        return island
