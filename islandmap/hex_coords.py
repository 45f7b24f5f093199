"""Axial hex coordinate utilities.

Main directions (cell to cell) and their (q, r) offsets:
    W   (-1,  0)
    E   (+1,  0)
    NE  ( 0, +1)
    SE  (+1, -1)
    NW  (-1, +1)
    SW  ( 0, -1)

Secondary directions point at the six corners (vertices) of a hex, spaced
like a clock face: N (12h), EN (2h), ES (4h), S (6h), WS (8h), WN (10h).
Each corner sits between two main directions, clockwise.
"""

from enum import Enum
from typing import NamedTuple


class HexOffset(NamedTuple):
    """Offset for hex neighbor lookup."""
    dq: int
    dr: int


class HexCoord(NamedTuple):
    """Axial hex coordinates.

    Tuple ordering (q first, then r) is the canonical order used to
    normalize edges and vertices.
    """
    q: int
    r: int

    @property
    def s(self) -> int:
        """Derived cube coordinate."""
        return -self.q - self.r

    def neighbor(self, direction: "MainHexDirection") -> "HexCoord":
        return neighbor(self, direction)

    def neighbors(self) -> list["HexCoord"]:
        return neighbors(self)

    def distance_to(self, other: "HexCoord") -> int:
        return distance(self, other)

    def key(self) -> str:
        return coords_to_key(self.q, self.r)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


class MainHexDirection(str, Enum):
    """The six cell-to-cell directions."""
    W = "W"
    E = "E"
    NE = "NE"
    SE = "SE"
    NW = "NW"
    SW = "SW"


class SecondaryHexDirection(str, Enum):
    """The six corner directions of a hex."""
    N = "N"
    EN = "EN"
    ES = "ES"
    S = "S"
    WS = "WS"
    WN = "WN"


ALL_MAIN_DIRECTIONS: tuple[MainHexDirection, ...] = (
    MainHexDirection.W,
    MainHexDirection.E,
    MainHexDirection.NE,
    MainHexDirection.SE,
    MainHexDirection.NW,
    MainHexDirection.SW,
)

ALL_SECONDARY_DIRECTIONS: tuple[SecondaryHexDirection, ...] = (
    SecondaryHexDirection.N,
    SecondaryHexDirection.EN,
    SecondaryHexDirection.ES,
    SecondaryHexDirection.S,
    SecondaryHexDirection.WS,
    SecondaryHexDirection.WN,
)

# Neighbor offsets indexed by main direction
HEX_NEIGHBOR_OFFSETS: dict[MainHexDirection, HexOffset] = {
    MainHexDirection.W: HexOffset(-1, 0),
    MainHexDirection.E: HexOffset(+1, 0),
    MainHexDirection.NE: HexOffset(0, +1),
    MainHexDirection.SE: HexOffset(+1, -1),
    MainHexDirection.NW: HexOffset(-1, +1),
    MainHexDirection.SW: HexOffset(0, -1),
}

_MAIN_INVERSES: dict[MainHexDirection, MainHexDirection] = {
    MainHexDirection.W: MainHexDirection.E,
    MainHexDirection.E: MainHexDirection.W,
    MainHexDirection.NE: MainHexDirection.SW,
    MainHexDirection.SW: MainHexDirection.NE,
    MainHexDirection.NW: MainHexDirection.SE,
    MainHexDirection.SE: MainHexDirection.NW,
}

_SECONDARY_INVERSES: dict[SecondaryHexDirection, SecondaryHexDirection] = {
    SecondaryHexDirection.N: SecondaryHexDirection.S,
    SecondaryHexDirection.S: SecondaryHexDirection.N,
    SecondaryHexDirection.EN: SecondaryHexDirection.WS,
    SecondaryHexDirection.WS: SecondaryHexDirection.EN,
    SecondaryHexDirection.ES: SecondaryHexDirection.WN,
    SecondaryHexDirection.WN: SecondaryHexDirection.ES,
}

# Corner direction -> the two main directions flanking it, clockwise
SECONDARY_TO_MAIN_DIRECTION_PAIRS: dict[
    SecondaryHexDirection, tuple[MainHexDirection, MainHexDirection]
] = {
    SecondaryHexDirection.N: (MainHexDirection.NW, MainHexDirection.NE),
    SecondaryHexDirection.EN: (MainHexDirection.NE, MainHexDirection.E),
    SecondaryHexDirection.ES: (MainHexDirection.E, MainHexDirection.SE),
    SecondaryHexDirection.S: (MainHexDirection.SE, MainHexDirection.SW),
    SecondaryHexDirection.WS: (MainHexDirection.SW, MainHexDirection.W),
    SecondaryHexDirection.WN: (MainHexDirection.W, MainHexDirection.NW),
}


def inverse_main_direction(direction: MainHexDirection) -> MainHexDirection:
    """Get the main direction on the opposite side of a hex.

    W <-> E, NE <-> SW, NW <-> SE.
    """
    return _MAIN_INVERSES[direction]


def inverse_secondary_direction(
    direction: SecondaryHexDirection,
) -> SecondaryHexDirection:
    """Get the opposite corner direction.

    N <-> S, EN <-> WS, ES <-> WN.
    """
    return _SECONDARY_INVERSES[direction]


def neighbor(coord: HexCoord, direction: MainHexDirection) -> HexCoord:
    """Get coordinates of the neighbor in the given main direction.

    Args:
        coord: Origin hex
        direction: One of the six main directions

    Returns:
        HexCoord of the neighbor (grid membership is not considered)
    """
    offset = HEX_NEIGHBOR_OFFSETS[direction]
    return HexCoord(coord.q + offset.dq, coord.r + offset.dr)


def neighbors(coord: HexCoord) -> list[HexCoord]:
    """Get all 6 neighbors, in ALL_MAIN_DIRECTIONS order."""
    return [neighbor(coord, direction) for direction in ALL_MAIN_DIRECTIONS]


def distance(a: HexCoord, b: HexCoord) -> int:
    """Calculate hex distance between two coordinates.

    Uses axial coordinate distance formula.
    """
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


def ring(radius: int, center: HexCoord = HexCoord(0, 0)) -> list[HexCoord]:
    """Get the coordinates at exactly `radius` steps from center.

    Walks the ring starting from the SW-most corner, so the result order
    is deterministic. Radius 0 returns [center].
    """
    if radius < 0:
        raise ValueError(f"Radius must be non-negative, got {radius}")
    if radius == 0:
        return [center]

    results: list[HexCoord] = []
    offset = HEX_NEIGHBOR_OFFSETS[MainHexDirection.SW]
    current = HexCoord(center.q + offset.dq * radius, center.r + offset.dr * radius)
    walk = (
        MainHexDirection.E,
        MainHexDirection.NE,
        MainHexDirection.NW,
        MainHexDirection.W,
        MainHexDirection.SW,
        MainHexDirection.SE,
    )
    for direction in walk:
        for _ in range(radius):
            results.append(current)
            current = neighbor(current, direction)
    return results


def hexagon(radius: int, center: HexCoord = HexCoord(0, 0)) -> list[HexCoord]:
    """Get every coordinate within `radius` steps of center, ring by ring.

    A radius-1 hexagon is the classic 7-hex island, radius 2 gives 19.
    """
    results: list[HexCoord] = []
    for k in range(radius + 1):
        results.extend(ring(k, center))
    return results


def coords_to_key(q: int, r: int) -> str:
    """Convert coordinates to string key for dict lookups."""
    return f"{q},{r}"


def key_to_coords(key: str) -> HexCoord:
    """Convert string key back to coordinates."""
    q, r = key.split(",")
    return HexCoord(int(q), int(r))
