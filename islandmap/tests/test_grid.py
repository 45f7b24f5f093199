"""Tests for HexGrid topology and caching."""
import pytest
from islandmap.errors import FrozenGridError, InvalidGeometry
from islandmap.geometry import Edge, Hex, Vertex, edge_at, vertex_at
from islandmap.grid import HexGrid
from islandmap.hex_coords import (
    ALL_MAIN_DIRECTIONS,
    ALL_SECONDARY_DIRECTIONS,
    HexCoord,
    MainHexDirection,
    SecondaryHexDirection,
    hexagon,
    neighbor,
    neighbors,
)


ORIGIN = HexCoord(0, 0)
SEVEN_CELLS = [ORIGIN] + neighbors(ORIGIN)


@pytest.fixture
def seven_hex_grid():
    """Origin plus its six neighbors."""
    return HexGrid.from_coords(SEVEN_CELLS)


@pytest.fixture
def single_hex_grid():
    return HexGrid([Hex(ORIGIN)])


class TestMembership:
    def test_size(self, seven_hex_grid):
        assert seven_hex_grid.size() == 7
        assert len(seven_hex_grid) == 7

    def test_has_hex(self, seven_hex_grid):
        assert seven_hex_grid.has_hex(ORIGIN)
        assert seven_hex_grid.has_hex(HexCoord(1, -1))
        assert not seven_hex_grid.has_hex(HexCoord(2, 0))

    def test_contains(self, seven_hex_grid):
        assert ORIGIN in seven_hex_grid
        assert HexCoord(3, 3) not in seven_hex_grid

    def test_get_hex(self, seven_hex_grid):
        assert seven_hex_grid.get_hex(ORIGIN) == Hex(ORIGIN)
        assert seven_hex_grid.get_hex(HexCoord(9, 9)) is None

    def test_accepts_hexes_and_coords(self):
        grid = HexGrid([Hex(ORIGIN), HexCoord(1, 0)])
        assert grid.all_coords() == [ORIGIN, HexCoord(1, 0)]

    def test_duplicate_cells_collapse(self):
        grid = HexGrid.from_coords([ORIGIN, ORIGIN, HexCoord(1, 0)])
        assert grid.size() == 2

    def test_iteration_in_insertion_order(self, seven_hex_grid):
        assert [cell.coord for cell in seven_hex_grid] == SEVEN_CELLS

    def test_empty_grid(self):
        grid = HexGrid()
        assert grid.size() == 0
        assert grid.all_edges() == []
        assert grid.all_vertices(include_boundary=True) == []


class TestNeighbors:
    def test_center_has_six_member_neighbors(self, seven_hex_grid):
        assert len(seven_hex_grid.get_neighbors(ORIGIN)) == 6

    def test_rim_hex_has_three_member_neighbors(self, seven_hex_grid):
        # Origin and the two ring hexes on either side
        assert len(seven_hex_grid.get_neighbors(HexCoord(1, 0))) == 3

    def test_neighbor_coords_ignore_membership(self, single_hex_grid):
        assert single_hex_grid.get_neighbors(ORIGIN) == []
        assert single_hex_grid.get_neighbor_coords(ORIGIN) == neighbors(ORIGIN)


class TestEdgesForHex:
    def test_six_edges_even_on_border(self, single_hex_grid):
        edges = single_hex_grid.get_edges_for_hex(ORIGIN)
        assert len(edges) == 6
        assert len(set(edges)) == 6
        assert all(e.is_adjacent_to(ORIGIN) for e in edges)

    def test_non_member_has_no_edges(self, single_hex_grid):
        assert single_hex_grid.get_edges_for_hex(HexCoord(5, 5)) == []

    def test_shared_edge_is_same_instance(self, seven_hex_grid):
        east = HexCoord(1, 0)
        from_origin = seven_hex_grid.get_edge(ORIGIN, MainHexDirection.E)
        from_east = seven_hex_grid.get_edge(east, MainHexDirection.W)
        assert from_origin == from_east
        assert from_origin is from_east

    def test_edges_only_between_members(self, seven_hex_grid):
        assert len(seven_hex_grid.get_edges(ORIGIN)) == 6
        assert len(seven_hex_grid.get_edges(HexCoord(1, 0))) == 3

    def test_get_edge_for_non_member(self, seven_hex_grid):
        assert seven_hex_grid.get_edge(HexCoord(7, 7), MainHexDirection.E) is None

    def test_edge_lookup_returns_cached_instance(self, seven_hex_grid):
        cached = seven_hex_grid.get_edge(ORIGIN, MainHexDirection.NE)
        assert seven_hex_grid.edge(HexCoord(0, 1), ORIGIN) is cached

    def test_edge_lookup_outside_grid_does_not_grow_cache(self, seven_hex_grid):
        before = len(seven_hex_grid.all_edges(include_boundary=True))
        far = seven_hex_grid.edge(HexCoord(10, 10), HexCoord(11, 10))
        assert far == Edge.create(HexCoord(11, 10), HexCoord(10, 10))
        assert len(seven_hex_grid.all_edges(include_boundary=True)) == before

    def test_edge_lookup_rejects_non_adjacent(self, seven_hex_grid):
        with pytest.raises(InvalidGeometry):
            seven_hex_grid.edge(ORIGIN, HexCoord(2, 0))


class TestVerticesForHex:
    def test_six_vertices_even_on_border(self, single_hex_grid):
        vertices = single_hex_grid.get_vertices_for_hex(ORIGIN)
        assert len(vertices) == 6
        assert len(set(vertices)) == 6

    def test_non_member_has_no_vertices(self, single_hex_grid):
        assert single_hex_grid.get_vertices_for_hex(HexCoord(1, 0)) == []

    def test_shared_vertex_is_same_instance(self, seven_hex_grid):
        ne = neighbor(ORIGIN, MainHexDirection.NE)
        nw = neighbor(ORIGIN, MainHexDirection.NW)
        a = seven_hex_grid.get_vertex(ORIGIN, SecondaryHexDirection.N)
        b = seven_hex_grid.get_vertex(ne, SecondaryHexDirection.WS)
        c = seven_hex_grid.get_vertex(nw, SecondaryHexDirection.ES)
        assert a is b is c

    def test_vertex_lookup_returns_cached_instance(self, seven_hex_grid):
        cached = seven_hex_grid.get_vertex(ORIGIN, SecondaryHexDirection.S)
        assert seven_hex_grid.vertex(*reversed(cached.hexes())) is cached

    def test_vertices_with_all_members(self, seven_hex_grid):
        assert len(seven_hex_grid.get_vertices(ORIGIN)) == 6
        assert seven_hex_grid.get_vertices(HexCoord(1, 0)) == [
            v for v in seven_hex_grid.get_vertices_for_hex(HexCoord(1, 0))
            if v.is_adjacent_to(ORIGIN)
        ]

    def test_get_vertex_for_non_member(self, seven_hex_grid):
        assert seven_hex_grid.get_vertex(HexCoord(7, 7), SecondaryHexDirection.N) is None

    def test_vertex_lookup_rejects_non_adjacent(self, seven_hex_grid):
        with pytest.raises(InvalidGeometry):
            seven_hex_grid.vertex(ORIGIN, HexCoord(1, 0), HexCoord(-1, 0))


class TestSevenHexScenario:
    def test_counts(self, seven_hex_grid):
        assert seven_hex_grid.size() == 7
        assert len(seven_hex_grid.all_edges()) == 12
        assert len(seven_hex_grid.all_vertices()) == 12

    def test_spoke_and_rim_vertices(self, seven_hex_grid):
        vertices = seven_hex_grid.all_vertices()
        spokes = [v for v in vertices if all(seven_hex_grid.has_hex(h) for h in v.hexes())]
        assert len(spokes) == 6
        assert all(v.is_adjacent_to(ORIGIN) for v in spokes)

    def test_counts_with_boundary(self, seven_hex_grid):
        assert len(seven_hex_grid.all_edges(include_boundary=True)) == 30
        assert len(seven_hex_grid.all_vertices(include_boundary=True)) == 24

    def test_counts_stable_across_constructions(self):
        first = HexGrid.from_coords(SEVEN_CELLS)
        second = HexGrid.from_coords(SEVEN_CELLS)
        assert len(first.all_edges()) == len(second.all_edges()) == 12
        assert len(first.all_vertices()) == len(second.all_vertices()) == 12
        assert first.all_edges() == second.all_edges()
        assert first.all_vertices() == second.all_vertices()


class TestEnumeration:
    @pytest.mark.parametrize("radius", [0, 1, 2, 3])
    def test_no_duplicate_keys(self, radius):
        grid = HexGrid.from_coords(hexagon(radius))
        for include_boundary in (False, True):
            edges = grid.all_edges(include_boundary=include_boundary)
            vertices = grid.all_vertices(include_boundary=include_boundary)
            assert len({e.key() for e in edges}) == len(edges)
            assert len({v.key() for v in vertices}) == len(vertices)

    def test_irregular_grid_no_duplicates(self):
        grid = HexGrid.from_coords([HexCoord(0, 0), HexCoord(5, 5), HexCoord(1, 0), HexCoord(-3, 2)])
        edges = grid.all_edges(include_boundary=True)
        assert len(set(edges)) == len(edges)

    def test_single_hex_has_no_shared_primitives(self, single_hex_grid):
        assert single_hex_grid.all_edges() == []
        assert single_hex_grid.all_vertices() == []
        assert len(single_hex_grid.all_edges(include_boundary=True)) == 6
        assert len(single_hex_grid.all_vertices(include_boundary=True)) == 6

    def test_order_independent_of_queries(self):
        queried = HexGrid.from_coords(SEVEN_CELLS)
        for coord in reversed(SEVEN_CELLS):
            queried.get_vertices_for_hex(coord)
            queried.get_edges_for_hex(coord)
            queried.edge(HexCoord(20, 20), HexCoord(21, 20))
        fresh = HexGrid.from_coords(SEVEN_CELLS)
        assert queried.all_edges(include_boundary=True) == fresh.all_edges(include_boundary=True)
        assert queried.all_vertices(include_boundary=True) == fresh.all_vertices(include_boundary=True)

    def test_edges_cached_before_vertices_in_cell_order(self, single_hex_grid):
        expected = [edge_at(ORIGIN, d) for d in ALL_MAIN_DIRECTIONS]
        assert single_hex_grid.all_edges(include_boundary=True) == expected
        expected_vertices = [vertex_at(ORIGIN, d) for d in ALL_SECONDARY_DIRECTIONS]
        assert single_hex_grid.all_vertices(include_boundary=True) == expected_vertices

    def test_every_enumerated_primitive_is_the_cached_one(self, seven_hex_grid):
        for edge in seven_hex_grid.all_edges():
            assert seven_hex_grid.edge(*edge.hexes()) is edge
        for vertex in seven_hex_grid.all_vertices():
            assert seven_hex_grid.vertex(*vertex.hexes()) is vertex


class TestFrozen:
    def test_cannot_set_attributes(self, seven_hex_grid):
        with pytest.raises(FrozenGridError):
            seven_hex_grid._hexes = {}

    def test_frozen_error_is_attribute_error(self, seven_hex_grid):
        with pytest.raises(AttributeError):
            seven_hex_grid.extra = 1

    def test_enumeration_returns_copies(self, seven_hex_grid):
        seven_hex_grid.all_edges().clear()
        seven_hex_grid.all_hexes().clear()
        assert len(seven_hex_grid.all_edges()) == 12
        assert seven_hex_grid.size() == 7
