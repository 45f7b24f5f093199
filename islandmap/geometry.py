"""Canonical geometric primitives of a hex grid: cells, edges and vertices.

An edge is the border between two adjacent hexes, a vertex the corner
where three mutually adjacent hexes meet. Both are identified only by
the coordinates of the hexes that form them, stored in canonical
(sorted) order, so building them from any permutation of the same
coordinates yields equal objects with equal hashes.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Optional

from islandmap.errors import InvalidGeometry
from islandmap.hex_coords import (
    HexCoord,
    MainHexDirection,
    SecondaryHexDirection,
    SECONDARY_TO_MAIN_DIRECTION_PAIRS,
    distance,
    inverse_secondary_direction,
    neighbor,
    neighbors,
)


@dataclass(frozen=True)
class Hex:
    """A cell of a grid. Carries no payload besides its coordinate."""

    coord: HexCoord

    def __str__(self) -> str:
        return f"Hex{self.coord}"


@dataclass(frozen=True)
class Edge:
    """Border shared by two adjacent hexes.

    Prefer Edge.create(); direct construction normalizes and validates too.
    """

    hex1: HexCoord
    hex2: HexCoord

    def __post_init__(self):
        a, b = sorted((HexCoord(*self.hex1), HexCoord(*self.hex2)))
        gap = distance(a, b)
        if gap != 1:
            raise InvalidGeometry(
                f"Hexes must be adjacent to form an edge: {a} and {b} are {gap} apart"
            )
        object.__setattr__(self, "hex1", a)
        object.__setattr__(self, "hex2", b)

    @classmethod
    def create(cls, a: HexCoord, b: HexCoord) -> "Edge":
        """Build the edge between two adjacent hexes, in any order.

        Raises:
            InvalidGeometry: if a and b are not at distance 1
        """
        return cls(a, b)

    def hexes(self) -> tuple[HexCoord, HexCoord]:
        return (self.hex1, self.hex2)

    def is_adjacent_to(self, coord: HexCoord) -> bool:
        return coord == self.hex1 or coord == self.hex2

    def key(self) -> str:
        """Canonical string key, e.g. '0,0-1,0'."""
        return f"{self.hex1.key()}-{self.hex2.key()}"

    def vertices(self) -> tuple["Vertex", "Vertex"]:
        """The two vertices at the ends of this edge.

        Each is formed with one of the two hexes adjacent to both sides.
        """
        shared = sorted(set(neighbors(self.hex1)) & set(neighbors(self.hex2)))
        first, second = (Vertex(self.hex1, self.hex2, c) for c in shared)
        return (first, second)

    def __str__(self) -> str:
        return f"Edge({self.hex1} - {self.hex2})"


@dataclass(frozen=True)
class Vertex:
    """Corner where three mutually adjacent hexes meet."""

    hex1: HexCoord
    hex2: HexCoord
    hex3: HexCoord

    def __post_init__(self):
        a, b, c = sorted(
            (HexCoord(*self.hex1), HexCoord(*self.hex2), HexCoord(*self.hex3))
        )
        if not (distance(a, b) == distance(a, c) == distance(b, c) == 1):
            raise InvalidGeometry(
                f"Hexes {a}, {b}, {c} are not mutually adjacent and cannot form a vertex"
            )
        object.__setattr__(self, "hex1", a)
        object.__setattr__(self, "hex2", b)
        object.__setattr__(self, "hex3", c)

    @classmethod
    def create(cls, a: HexCoord, b: HexCoord, c: HexCoord) -> "Vertex":
        """Build the vertex shared by three hexes, in any order.

        Raises:
            InvalidGeometry: if any pair of the three is not at distance 1
        """
        return cls(a, b, c)

    def hexes(self) -> tuple[HexCoord, HexCoord, HexCoord]:
        return (self.hex1, self.hex2, self.hex3)

    def is_adjacent_to(self, coord: HexCoord) -> bool:
        return coord in (self.hex1, self.hex2, self.hex3)

    def key(self) -> str:
        """Canonical string key, e.g. '-1,1-0,0-0,1'."""
        return "-".join(h.key() for h in self.hexes())

    def edges(self) -> tuple[Edge, Edge, Edge]:
        """The three edges meeting at this vertex."""
        first, second, third = (Edge(a, b) for a, b in combinations(self.hexes(), 2))
        return (first, second, third)

    def hex(self, direction: SecondaryHexDirection) -> Optional[HexCoord]:
        """Get the hex of this vertex lying in the given corner direction.

        The hex to the N of a vertex is the one that has this vertex as its
        S corner. Each of the three candidates is tried in turn. A vertex
        has hexes in only three of the six directions (N, ES, WS or S, EN,
        WN), so the other three return None.
        """
        opposite = inverse_secondary_direction(direction)
        for candidate in self.hexes():
            if vertex_at(candidate, opposite) == self:
                return candidate
        return None

    def __str__(self) -> str:
        return f"Vertex({self.hex1}, {self.hex2}, {self.hex3})"


def edge_at(coord: HexCoord, direction: MainHexDirection) -> Edge:
    """Edge between coord and its neighbor in the given main direction."""
    return Edge(coord, neighbor(coord, direction))


def vertex_at(coord: HexCoord, direction: SecondaryHexDirection) -> Vertex:
    """Vertex at the given corner of coord.

    Formed by coord and the two neighbors flanking that corner.
    """
    first, second = SECONDARY_TO_MAIN_DIRECTION_PAIRS[direction]
    return Vertex(coord, neighbor(coord, first), neighbor(coord, second))


def outgoing_edge(coord: HexCoord, direction: SecondaryHexDirection) -> Edge:
    """Edge leaving the given corner of coord, away from coord.

    It separates the two neighbors flanking that corner.
    """
    first, second = SECONDARY_TO_MAIN_DIRECTION_PAIRS[direction]
    return Edge(neighbor(coord, first), neighbor(coord, second))
