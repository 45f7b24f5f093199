"""Wire formats for coordinates, edges and vertices.

    HexCoord <-> [q, r]
    Edge     <-> [[q1, r1], [q2, r2]]
    Vertex   <-> [[q1, r1], [q2, r2], [q3, r3]]

Loading always goes through Edge/Vertex construction, so a payload whose
hexes are not adjacent raises InvalidGeometry instead of producing a
broken primitive.
"""

from typing import Any

from pydantic import BaseModel, StrictInt, TypeAdapter

from islandmap.geometry import Edge, Vertex
from islandmap.hex_coords import HexCoord

CoordData = tuple[StrictInt, StrictInt]
EdgeData = tuple[CoordData, CoordData]
VertexData = tuple[CoordData, CoordData, CoordData]

_coord_adapter = TypeAdapter(CoordData)
_edge_adapter = TypeAdapter(EdgeData)
_vertex_adapter = TypeAdapter(VertexData)


def coord_to_data(coord: HexCoord) -> list[int]:
    return [coord.q, coord.r]


def coord_from_data(data: Any) -> HexCoord:
    """Load a coordinate.

    Raises:
        pydantic.ValidationError: if data is not a pair of integers
    """
    q, r = _coord_adapter.validate_python(data)
    return HexCoord(q, r)


def edge_to_data(edge: Edge) -> list[list[int]]:
    return [coord_to_data(h) for h in edge.hexes()]


def edge_from_data(data: Any) -> Edge:
    """Load an edge.

    Raises:
        pydantic.ValidationError: if data is not two integer pairs
        InvalidGeometry: if the two hexes are not adjacent
    """
    a, b = _edge_adapter.validate_python(data)
    return Edge.create(HexCoord(*a), HexCoord(*b))


def vertex_to_data(vertex: Vertex) -> list[list[int]]:
    return [coord_to_data(h) for h in vertex.hexes()]


def vertex_from_data(data: Any) -> Vertex:
    """Load a vertex.

    Raises:
        pydantic.ValidationError: if data is not three integer pairs
        InvalidGeometry: if the three hexes are not mutually adjacent
    """
    a, b, c = _vertex_adapter.validate_python(data)
    return Vertex.create(HexCoord(*a), HexCoord(*b), HexCoord(*c))


class SaveModel(BaseModel):
    """Base for save payloads: unknown keys are rejected."""

    model_config = {"extra": "forbid"}
