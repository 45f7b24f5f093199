"""Pydantic save schemas for islandmap."""

from typing import Any

from islandmap.grid import HexGrid
from islandmap.island_map import IslandMap

from .base import (
    CoordData,
    EdgeData,
    VertexData,
    SaveModel,
    coord_to_data,
    coord_from_data,
    edge_to_data,
    edge_from_data,
    vertex_to_data,
    vertex_from_data,
)
from .grid import GridSave
from .island import CivilizationName, CitySave, RoadSave, IslandSave


def serialize_grid(grid: HexGrid) -> dict[str, Any]:
    return GridSave.from_grid(grid).model_dump(mode="json")


def deserialize_grid(data: dict[str, Any]) -> HexGrid:
    return GridSave.model_validate(data).to_grid()


def serialize_island_map(island: IslandMap) -> dict[str, Any]:
    return IslandSave.from_island_map(island).model_dump(mode="json")


def deserialize_island_map(data: dict[str, Any]) -> IslandMap:
    return IslandSave.model_validate(data).to_island_map()


__all__ = [
    # base
    "CoordData",
    "EdgeData",
    "VertexData",
    "SaveModel",
    "coord_to_data",
    "coord_from_data",
    "edge_to_data",
    "edge_from_data",
    "vertex_to_data",
    "vertex_from_data",
    # grid
    "GridSave",
    "serialize_grid",
    "deserialize_grid",
    # island
    "CivilizationName",
    "CitySave",
    "RoadSave",
    "IslandSave",
    "serialize_island_map",
    "deserialize_island_map",
]
