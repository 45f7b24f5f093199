"""Exceptions raised by the island topology and ownership layer."""


class IslandMapError(Exception):
    """Base class for all islandmap errors."""


class InvalidGeometry(IslandMapError, ValueError):
    """Raised when an edge or vertex is built from non-adjacent coordinates."""


class InvalidHex(IslandMapError, ValueError):
    """Raised when a coordinate is not a member of the grid."""


class InvalidVertex(IslandMapError, ValueError):
    """Raised when a city target vertex touches no grid cell."""


class InvalidEdge(IslandMapError, ValueError):
    """Raised when a road target edge touches no grid cell."""


class UnregisteredCivilization(IslandMapError):
    """Raised when an unregistered civilization tries to own something."""


class DuplicateCity(IslandMapError):
    """Raised when a vertex already carries a city."""


class DuplicateRoad(IslandMapError):
    """Raised when an edge already carries a road."""


class CityNotFound(IslandMapError, KeyError):
    """Raised when a vertex carries no city."""


class CityAtMaxLevel(IslandMapError):
    """Raised when upgrading a city that is already a capital."""


class FrozenGridError(IslandMapError, AttributeError):
    """Raised on any attempt to mutate a grid after construction."""


class CapitalAlreadyExists(IslandMapError):
    """Raised when a second capital would appear on the same island."""
