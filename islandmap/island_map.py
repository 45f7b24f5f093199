"""Ownership and visibility overlay on top of a hex grid.

The island map assigns a terrain type to every grid hex, and records the
cities (on vertices) and roads (on edges) built by registered
civilizations. A hex becomes visible as soon as any infrastructure is
built on one of its corners or on an edge meeting one of its corners,
whoever owns it.

Every mutating call validates first and writes last, so a rejected call
leaves the map untouched. Entries are never removed.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from itertools import combinations
from typing import Optional

from islandmap import config
from islandmap.errors import (
    CapitalAlreadyExists,
    CityAtMaxLevel,
    CityNotFound,
    DuplicateCity,
    DuplicateRoad,
    InvalidEdge,
    InvalidGeometry,
    InvalidHex,
    InvalidVertex,
    UnregisteredCivilization,
)
from islandmap.geometry import Edge, Vertex
from islandmap.grid import HexGrid
from islandmap.hex_coords import HexCoord

logger = logging.getLogger(__name__)


class HexType(str, Enum):
    """Terrain of a hex."""
    WOOD = "Wood"
    BRICK = "Brick"
    WHEAT = "Wheat"
    SHEEP = "Sheep"
    ORE = "Ore"
    DESERT = "Desert"
    WATER = "Water"


class CityLevel(int, Enum):
    """City levels, from the initial outpost up to the capital."""
    OUTPOST = 0
    COLONY = 1
    TOWN = 2
    METROPOLIS = 3
    CAPITAL = 4

    def next_level(self) -> Optional["CityLevel"]:
        """Following level, or None for a capital."""
        if self is CityLevel.CAPITAL:
            return None
        return CityLevel(self.value + 1)


@dataclass(frozen=True, order=True)
class CivilizationId:
    """Identifier of a civilization. Surrounding whitespace is dropped."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Civilization id cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class City:
    """A city standing on a vertex."""

    vertex: Vertex
    owner: CivilizationId
    level: CityLevel = CityLevel(config.DEFAULT_CITY_LEVEL)


@dataclass(frozen=True)
class Road:
    """A road laid along an edge."""

    edge: Edge
    owner: CivilizationId


def as_civilization_id(value: CivilizationId | str) -> CivilizationId:
    if isinstance(value, CivilizationId):
        return value
    return CivilizationId(value)


def _lookup_civilization_id(value: CivilizationId | str) -> Optional[CivilizationId]:
    # Queries treat a malformed id as one that owns nothing
    try:
        return as_civilization_id(value)
    except ValueError:
        return None


class IslandMap:
    """Terrain, cities and roads layered over a HexGrid."""

    def __init__(self, grid: HexGrid):
        self.grid = grid
        self._hex_types: dict[HexCoord, HexType] = {
            coord: HexType(config.DEFAULT_HEX_TYPE) for coord in grid.all_coords()
        }
        self._civilizations: set[CivilizationId] = set()
        self._cities: dict[str, City] = {}
        self._roads: dict[str, Road] = {}

    # Terrain

    def set_hex_type(self, coord: HexCoord, hex_type: HexType) -> None:
        """Set the terrain of a grid hex.

        Raises:
            InvalidHex: if coord is not in the grid
        """
        if not self.grid.has_hex(coord):
            raise InvalidHex(f"Hex {coord} is not part of the grid")
        self._hex_types[coord] = HexType(hex_type)

    def get_hex_type(self, coord: HexCoord) -> Optional[HexType]:
        """Terrain of a grid hex, or None outside the grid."""
        return self._hex_types.get(coord)

    def hex_types(self) -> dict[HexCoord, HexType]:
        return dict(self._hex_types)

    # Civilizations

    def register_civilization(self, civ: CivilizationId | str) -> CivilizationId:
        """Register a civilization. Registering twice is a no-op."""
        civ_id = as_civilization_id(civ)
        if civ_id not in self._civilizations:
            self._civilizations.add(civ_id)
            logger.info("Registered civilization %s", civ_id)
        return civ_id

    def is_civilization_registered(self, civ: CivilizationId | str) -> bool:
        return _lookup_civilization_id(civ) in self._civilizations

    def civilizations(self) -> list[CivilizationId]:
        return sorted(self._civilizations)

    def _require_registered(self, civ: CivilizationId | str) -> CivilizationId:
        civ_id = as_civilization_id(civ)
        if civ_id not in self._civilizations:
            raise UnregisteredCivilization(f"Civilization {civ_id} is not registered")
        return civ_id

    # Cities

    def add_city(
        self,
        vertex: Vertex,
        owner: CivilizationId | str,
        level: CityLevel = CityLevel(config.DEFAULT_CITY_LEVEL),
    ) -> City:
        """Found a city on a vertex.

        Raises:
            UnregisteredCivilization: if owner was never registered
            InvalidVertex: if none of the vertex's hexes is in the grid
            DuplicateCity: if the vertex already has a city
            CapitalAlreadyExists: if level is CAPITAL and the island has one
        """
        owner_id = self._require_registered(owner)
        level = CityLevel(level)
        if not any(self.grid.has_hex(coord) for coord in vertex.hexes()):
            raise InvalidVertex(f"{vertex} does not touch the grid")
        if vertex.key() in self._cities:
            raise DuplicateCity(f"{vertex} already has a city")
        if level is CityLevel.CAPITAL:
            self._require_capital_allowed()

        city = City(vertex=self.grid.vertex(*vertex.hexes()), owner=owner_id, level=level)
        self._cities[vertex.key()] = city
        logger.info("City founded at %s by %s (level %s)", vertex, owner_id, city.level.name)
        return city

    def has_city(self, vertex: Vertex) -> bool:
        return vertex.key() in self._cities

    def get_city(self, vertex: Vertex) -> Optional[City]:
        return self._cities.get(vertex.key())

    def get_city_owner(self, vertex: Vertex) -> Optional[CivilizationId]:
        city = self._cities.get(vertex.key())
        return city.owner if city else None

    def get_city_level(self, vertex: Vertex) -> Optional[CityLevel]:
        city = self._cities.get(vertex.key())
        return city.level if city else None

    def upgrade_city(self, vertex: Vertex) -> City:
        """Raise a city by one level.

        Returns the upgraded city, which replaces the previous entry.

        Raises:
            CityNotFound: if there is no city on the vertex
            CityAtMaxLevel: if the city is already a capital
            CapitalAlreadyExists: if a metropolis would become a second capital
        """
        city = self._cities.get(vertex.key())
        if city is None:
            raise CityNotFound(f"No city at {vertex}")
        next_level = city.level.next_level()
        if next_level is None:
            raise CityAtMaxLevel(f"City at {vertex} is already a capital")
        if next_level is CityLevel.CAPITAL:
            self._require_capital_allowed()

        upgraded = replace(city, level=next_level)
        self._cities[vertex.key()] = upgraded
        logger.info("City at %s upgraded to %s", vertex, next_level.name)
        return upgraded

    def all_cities(self) -> list[City]:
        return list(self._cities.values())

    def get_city_count(self) -> int:
        return len(self._cities)

    def get_cities_for_civilization(self, civ: CivilizationId | str) -> list[City]:
        civ_id = _lookup_civilization_id(civ)
        return [city for city in self._cities.values() if city.owner == civ_id]

    # Capital, at most one per island

    def has_capital(self) -> bool:
        return self.get_capital() is not None

    def get_capital(self) -> Optional[Vertex]:
        """Vertex of the island's capital, or None."""
        for city in self._cities.values():
            if city.level is CityLevel.CAPITAL:
                return city.vertex
        return None

    def is_capital_allowed(self) -> bool:
        return not self.has_capital()

    def _require_capital_allowed(self) -> None:
        capital = self.get_capital()
        if capital is not None:
            raise CapitalAlreadyExists(f"Only one capital per island, already at {capital}")

    # Roads

    def add_road(self, edge: Edge, owner: CivilizationId | str) -> Road:
        """Build a road along an edge.

        Raises:
            UnregisteredCivilization: if owner was never registered
            InvalidEdge: if neither of the edge's hexes is in the grid
            DuplicateRoad: if the edge already has a road
        """
        owner_id = self._require_registered(owner)
        hex1, hex2 = edge.hexes()
        if not (self.grid.has_hex(hex1) or self.grid.has_hex(hex2)):
            raise InvalidEdge(f"{edge} does not touch the grid")
        if edge.key() in self._roads:
            raise DuplicateRoad(f"{edge} already has a road")

        road = Road(edge=self.grid.edge(hex1, hex2), owner=owner_id)
        self._roads[edge.key()] = road
        logger.info("Road built on %s by %s", edge, owner_id)
        return road

    def has_road(self, edge: Edge) -> bool:
        return edge.key() in self._roads

    def get_road_owner(self, edge: Edge) -> Optional[CivilizationId]:
        road = self._roads.get(edge.key())
        return road.owner if road else None

    def all_roads(self) -> list[Road]:
        return list(self._roads.values())

    def get_roads_for_civilization(self, civ: CivilizationId | str) -> list[Edge]:
        civ_id = _lookup_civilization_id(civ)
        return [road.edge for road in self._roads.values() if road.owner == civ_id]

    # Road network adjacency
    #
    # These only consider land edges: both hexes are in the grid and at
    # least one of them is not water.

    def _is_land_edge(self, edge: Edge) -> bool:
        hex1, hex2 = edge.hexes()
        if not (self.grid.has_hex(hex1) and self.grid.has_hex(hex2)):
            return False
        return not (
            self._hex_types[hex1] is HexType.WATER and self._hex_types[hex2] is HexType.WATER
        )

    def _is_inner_vertex(self, vertex: Vertex) -> bool:
        return all(self.grid.has_hex(coord) for coord in vertex.hexes())

    def get_edges_for_vertex(self, vertex: Vertex) -> list[Edge]:
        """Land edges meeting at a vertex whose three hexes are in the grid.

        Returns an empty list for a vertex on or beyond the grid border.
        """
        if not self._is_inner_vertex(vertex):
            return []
        return [
            self.grid.edge(*edge.hexes())
            for edge in vertex.edges()
            if self._is_land_edge(edge)
        ]

    def get_vertices_for_edge(self, edge: Edge) -> list[Vertex]:
        """End vertices of an edge whose three hexes are in the grid."""
        return [
            self.grid.vertex(*vertex.hexes())
            for vertex in edge.vertices()
            if self._is_inner_vertex(vertex)
        ]

    def get_adjacent_edges(self, edge: Edge) -> list[Edge]:
        """Land edges sharing an inner vertex with the given edge."""
        adjacent = []
        for vertex in self.get_vertices_for_edge(edge):
            for other in self.get_edges_for_vertex(vertex):
                if other != edge and other not in adjacent:
                    adjacent.append(other)
        return adjacent

    def get_buildable_roads_for_civilization(self, civ: CivilizationId | str) -> list[Edge]:
        """Free land edges where a civilization could extend its network.

        An edge qualifies when one of its inner vertices carries a city of
        the civilization, or when an adjacent edge carries one of its roads.
        Unregistered civilizations get an empty list.
        """
        civ_id = _lookup_civilization_id(civ)
        if civ_id not in self._civilizations:
            return []

        buildable = []
        for edge in self.grid.all_edges():
            if not self._is_land_edge(edge) or self.has_road(edge):
                continue
            if any(
                self.get_city_owner(vertex) == civ_id
                for vertex in self.get_vertices_for_edge(edge)
            ):
                buildable.append(edge)
            elif any(
                self.get_road_owner(other) == civ_id
                for other in self.get_adjacent_edges(edge)
            ):
                buildable.append(edge)
        return buildable

    # Visibility

    def is_hex_visible(self, coord: HexCoord) -> bool:
        """Whether a hex is revealed by nearby cities or roads.

        A grid hex is visible when one of its six vertices has a city, or
        when one of the three edges meeting at one of those vertices has a
        road. Ownership does not matter.
        """
        if not self.grid.has_hex(coord):
            return False

        for vertex in self.grid.get_vertices_for_hex(coord):
            if self.has_city(vertex):
                return True
            for a, b in combinations(vertex.hexes(), 2):
                try:
                    edge = self.grid.edge(a, b)
                except InvalidGeometry:
                    continue
                if self.has_road(edge):
                    return True
        return False

    def visible_hexes(self) -> list[HexCoord]:
        return [coord for coord in self.grid.all_coords() if self.is_hex_visible(coord)]

    def __repr__(self) -> str:
        return (
            f"IslandMap(hexes={self.grid.size()}, civilizations={len(self._civilizations)}, "
            f"cities={len(self._cities)}, roads={len(self._roads)})"
        )
