"""Grid save format: {"cells": [[q, r], ...]}."""

from pydantic import AliasChoices, Field

from islandmap.grid import HexGrid
from islandmap.hex_coords import HexCoord

from .base import CoordData, SaveModel


class GridSave(SaveModel):
    """Serialized HexGrid. Older saves used the key "hexes"."""

    cells: list[CoordData] = Field(
        default_factory=list,
        validation_alias=AliasChoices("cells", "hexes"),
    )

    @classmethod
    def from_grid(cls, grid: HexGrid) -> "GridSave":
        return cls(cells=[(coord.q, coord.r) for coord in grid.all_coords()])

    def to_grid(self) -> HexGrid:
        """Rebuild the grid, recomputing every edge and vertex."""
        return HexGrid.from_coords(HexCoord(q, r) for q, r in self.cells)
