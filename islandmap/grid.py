"""Hex grid with shared edge and vertex identities."""

import logging
from collections.abc import Iterable, Iterator
from typing import Optional

from islandmap.errors import FrozenGridError
from islandmap.geometry import Edge, Hex, Vertex, edge_at, vertex_at
from islandmap.hex_coords import (
    ALL_MAIN_DIRECTIONS,
    ALL_SECONDARY_DIRECTIONS,
    HexCoord,
    MainHexDirection,
    SecondaryHexDirection,
    neighbors,
)

logger = logging.getLogger(__name__)


class HexGrid:
    """A fixed set of hex cells in axial coordinates.

    Every edge and vertex touching a cell is computed once at construction
    and cached by its canonical key, so the same primitive reached from two
    different cells is the same object. Topology is defined over the whole
    coordinate plane: a cell on the border of the grid still has six edges
    and six vertices, even though some of them touch hexes outside the grid.

    The grid is frozen once built: no cells can be added and the caches are
    read-only, so it can be shared between readers freely.
    """

    def __init__(self, hexes: Iterable[Hex | HexCoord] = ()):
        self._hexes: dict[HexCoord, Hex] = {}
        self._edge_cache: dict[str, Edge] = {}
        self._vertex_cache: dict[str, Vertex] = {}

        for item in hexes:
            cell = item if isinstance(item, Hex) else Hex(HexCoord(*item))
            self._hexes[cell.coord] = cell

        self._precompute_edges_and_vertices()
        self._frozen = True

        logger.debug(
            "Built grid: %d hexes, %d cached edges, %d cached vertices",
            len(self._hexes),
            len(self._edge_cache),
            len(self._vertex_cache),
        )

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise FrozenGridError(f"HexGrid is frozen, cannot set '{name}'")
        super().__setattr__(name, value)

    @classmethod
    def from_coords(cls, coords: Iterable[HexCoord]) -> "HexGrid":
        return cls(Hex(HexCoord(*c)) for c in coords)

    def _precompute_edges_and_vertices(self) -> None:
        # All edges first, then all vertices, in cell insertion order
        for cell in self._hexes.values():
            for direction in ALL_MAIN_DIRECTIONS:
                self._cache_edge(edge_at(cell.coord, direction))
        for cell in self._hexes.values():
            for direction in ALL_SECONDARY_DIRECTIONS:
                self._cache_vertex(vertex_at(cell.coord, direction))

    def _cache_edge(self, edge: Edge) -> Edge:
        return self._edge_cache.setdefault(edge.key(), edge)

    def _cache_vertex(self, vertex: Vertex) -> Vertex:
        return self._vertex_cache.setdefault(vertex.key(), vertex)

    # Cells

    def size(self) -> int:
        return len(self._hexes)

    def __len__(self) -> int:
        return len(self._hexes)

    def __contains__(self, coord: object) -> bool:
        return coord in self._hexes

    def __iter__(self) -> Iterator[Hex]:
        return iter(self._hexes.values())

    def has_hex(self, coord: HexCoord) -> bool:
        return coord in self._hexes

    def get_hex(self, coord: HexCoord) -> Optional[Hex]:
        return self._hexes.get(coord)

    def all_hexes(self) -> list[Hex]:
        return list(self._hexes.values())

    def all_coords(self) -> list[HexCoord]:
        return [cell.coord for cell in self._hexes.values()]

    def get_neighbors(self, coord: HexCoord) -> list[Hex]:
        """Neighboring hexes that are members of the grid."""
        found = []
        for candidate in neighbors(coord):
            cell = self.get_hex(candidate)
            if cell is not None:
                found.append(cell)
        return found

    def get_neighbor_coords(self, coord: HexCoord) -> list[HexCoord]:
        """All six neighbor coordinates, members or not."""
        return neighbors(coord)

    # Edges

    def edge(self, a: HexCoord, b: HexCoord) -> Edge:
        """Canonical edge between two adjacent hexes.

        Returns the cached instance when the edge touches the grid, otherwise
        a fresh (equal-by-value) edge; the cache is never written to.

        Raises:
            InvalidGeometry: if a and b are not adjacent
        """
        edge = Edge(a, b)
        return self._edge_cache.get(edge.key(), edge)

    def get_edge(self, coord: HexCoord, direction: MainHexDirection) -> Optional[Edge]:
        """Edge of a member hex in the given main direction."""
        if not self.has_hex(coord):
            return None
        return self._edge_cache[edge_at(coord, direction).key()]

    def get_edges_for_hex(self, coord: HexCoord) -> list[Edge]:
        """All six edges of a member hex, including those facing outside the grid.

        Returns an empty list when coord is not a member.
        """
        if not self.has_hex(coord):
            return []
        return [self._edge_cache[edge_at(coord, d).key()] for d in ALL_MAIN_DIRECTIONS]

    def get_edges(self, coord: HexCoord) -> list[Edge]:
        """Edges of a member hex that lead to another member hex."""
        return [
            edge
            for edge in self.get_edges_for_hex(coord)
            if self.has_hex(edge.hex1) and self.has_hex(edge.hex2)
        ]

    def all_edges(self, include_boundary: bool = False) -> list[Edge]:
        """Edges of the grid, in construction order.

        By default only edges shared by two member hexes are listed. With
        include_boundary=True every cached edge is listed, including those
        between a member and an outside hex.
        """
        if include_boundary:
            return list(self._edge_cache.values())
        return [edge for edge in self._edge_cache.values() if self._touch_count(edge.hexes()) == 2]

    # Vertices

    def vertex(self, a: HexCoord, b: HexCoord, c: HexCoord) -> Vertex:
        """Canonical vertex shared by three mutually adjacent hexes.

        Same caching rules as edge().

        Raises:
            InvalidGeometry: if the three hexes are not mutually adjacent
        """
        vertex = Vertex(a, b, c)
        return self._vertex_cache.get(vertex.key(), vertex)

    def get_vertex(
        self, coord: HexCoord, direction: SecondaryHexDirection
    ) -> Optional[Vertex]:
        """Vertex at the given corner of a member hex."""
        if not self.has_hex(coord):
            return None
        return self._vertex_cache[vertex_at(coord, direction).key()]

    def get_vertices_for_hex(self, coord: HexCoord) -> list[Vertex]:
        """All six vertices of a member hex, including those on the grid border.

        Returns an empty list when coord is not a member.
        """
        if not self.has_hex(coord):
            return []
        return [
            self._vertex_cache[vertex_at(coord, d).key()]
            for d in ALL_SECONDARY_DIRECTIONS
        ]

    def get_vertices(self, coord: HexCoord) -> list[Vertex]:
        """Vertices of a member hex whose three hexes are all members."""
        return [
            vertex
            for vertex in self.get_vertices_for_hex(coord)
            if self._touch_count(vertex.hexes()) == 3
        ]

    def all_vertices(self, include_boundary: bool = False) -> list[Vertex]:
        """Vertices of the grid, in construction order.

        By default only vertices shared by at least two member hexes are
        listed. With include_boundary=True every cached vertex is listed,
        including the outer corners touching a single member hex.
        """
        if include_boundary:
            return list(self._vertex_cache.values())
        return [
            vertex
            for vertex in self._vertex_cache.values()
            if self._touch_count(vertex.hexes()) >= 2
        ]

    def _touch_count(self, coords: Iterable[HexCoord]) -> int:
        return sum(1 for coord in coords if self.has_hex(coord))

    def __repr__(self) -> str:
        return f"HexGrid(size={len(self._hexes)})"
