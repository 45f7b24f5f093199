"""Hex topology and ownership layer for island maps."""

from .errors import (
    IslandMapError,
    InvalidGeometry,
    InvalidHex,
    InvalidVertex,
    InvalidEdge,
    UnregisteredCivilization,
    DuplicateCity,
    DuplicateRoad,
    CityNotFound,
    CityAtMaxLevel,
    CapitalAlreadyExists,
    FrozenGridError,
)
from .hex_coords import (
    HexCoord,
    MainHexDirection,
    SecondaryHexDirection,
    ALL_MAIN_DIRECTIONS,
    ALL_SECONDARY_DIRECTIONS,
    SECONDARY_TO_MAIN_DIRECTION_PAIRS,
    inverse_main_direction,
    inverse_secondary_direction,
    neighbor,
    neighbors,
    distance,
    hexagon,
    ring,
)
from .geometry import Hex, Edge, Vertex, edge_at, vertex_at, outgoing_edge
from .grid import HexGrid
from .island_map import HexType, CityLevel, CivilizationId, City, Road, IslandMap

__all__ = [
    # errors
    "IslandMapError",
    "InvalidGeometry",
    "InvalidHex",
    "InvalidVertex",
    "InvalidEdge",
    "UnregisteredCivilization",
    "DuplicateCity",
    "DuplicateRoad",
    "CityNotFound",
    "CityAtMaxLevel",
    "CapitalAlreadyExists",
    "FrozenGridError",
    # coordinates
    "HexCoord",
    "MainHexDirection",
    "SecondaryHexDirection",
    "ALL_MAIN_DIRECTIONS",
    "ALL_SECONDARY_DIRECTIONS",
    "SECONDARY_TO_MAIN_DIRECTION_PAIRS",
    "inverse_main_direction",
    "inverse_secondary_direction",
    "neighbor",
    "neighbors",
    "distance",
    "hexagon",
    "ring",
    # geometry
    "Hex",
    "Edge",
    "Vertex",
    "edge_at",
    "vertex_at",
    "outgoing_edge",
    # grid and overlay
    "HexGrid",
    "HexType",
    "CityLevel",
    "CivilizationId",
    "City",
    "Road",
    "IslandMap",
]
