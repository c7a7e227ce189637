"""Pond — the hexagonal grid the frog hops across.

The Pond owns its cells, knows which one is the start and which one the
end, and lays cells out as "odd-r" offset hexes when built from a grid:
odd rows sit half a cell to the right of even rows.  Side indices run
counter-clockwise from east::

    0 east, 1 north-east, 2 north-west, 3 west, 4 south-west, 5 south-east
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from frogpath.pond.cell import Cell, FoodStock, Terrain

logger = logging.getLogger(__name__)

# (dcol, drow) per side, for even and odd rows
_EVEN_ROW_OFFSETS = [(1, 0), (0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1)]
_ODD_ROW_OFFSETS = [(1, 0), (1, -1), (0, -1), (-1, 0), (0, 1), (1, 1)]

_TERRAIN_TOKENS: dict[str, Terrain] = {
    "S": Terrain.WATER,
    "E": Terrain.WATER,
    "W": Terrain.WATER,
    ".": Terrain.WATER,
    "M": Terrain.MUD,
    "R": Terrain.REEDS,
    "L": Terrain.LILY_PAD,
    "A": Terrain.ALLIGATOR,
}
_FOOD_TOKENS = {"1": 1, "2": 2, "3": 3}
_HOLE = "-"


class PondFormatError(ValueError):
    """Raised when a pond description cannot be turned into a pond."""


def hex_offsets(row: int) -> list[tuple[int, int]]:
    """Return the ``(dcol, drow)`` step for each side from a cell on ``row``."""
    return _ODD_ROW_OFFSETS if row % 2 else _EVEN_ROW_OFFSETS


def link_grid(grid: dict[tuple[int, int], Cell]) -> None:
    """Connect every cell in an offset grid to its hexagonal neighbours.

    Args:
        grid: Mapping from ``(col, row)`` to the cell at that position.
            Missing positions are holes and stay ``None``.
    """
    for (col, row), cell in grid.items():
        for side, (dcol, drow) in enumerate(hex_offsets(row)):
            cell.neighbours[side] = grid.get((col + dcol, row + drow))


@dataclass
class Pond:
    """A finite set of linked hexagons with one start and one end.

    Attributes:
        cells: Every cell of the pond, in identifier order.
        positions: Optional ``(col, row)`` layout per cell, used for
            drawing.  Ponds linked by hand may leave it empty.
        start: The frog's starting cell.
        end: The destination cell.
    """

    cells: list[Cell]
    positions: dict[Cell, tuple[int, int]] = field(default_factory=dict, repr=False)
    start: Cell = field(init=False)
    end: Cell = field(init=False)

    def __post_init__(self) -> None:
        """Locate the unique start and end cells.

        Raises:
            PondFormatError: If the pond is empty or does not have exactly
                one start and one end.
        """
        if not self.cells:
            msg = "pond has no cells"
            raise PondFormatError(msg)
        starts = [c for c in self.cells if c.is_start]
        ends = [c for c in self.cells if c.is_end]
        if len(starts) != 1:
            msg = f"pond needs exactly one start cell, found {len(starts)}"
            raise PondFormatError(msg)
        if len(ends) != 1:
            msg = f"pond needs exactly one end cell, found {len(ends)}"
            raise PondFormatError(msg)
        self.start = starts[0]
        self.end = ends[0]

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        """Number of grid columns spanned by the layout (0 if unplaced)."""
        return max((col for col, _ in self.positions.values()), default=-1) + 1

    @property
    def height(self) -> int:
        """Number of grid rows spanned by the layout (0 if unplaced)."""
        return max((row for _, row in self.positions.values()), default=-1) + 1

    def neighbour(self, cell: Cell, index: int) -> Cell | None:
        """Return the neighbour of ``cell`` on side ``index``, or None at an edge."""
        return cell.neighbour(index)

    def reset(self) -> None:
        """Return every cell to its pre-search state."""
        for cell in self.cells:
            cell.reset()

    # -- Construction ------------------------------------------------------

    @classmethod
    def from_grid(cls, rows: list[list[str]]) -> Pond:
        """Build a pond from rows of single-character tokens.

        Tokens: ``S`` start, ``E`` end, ``W`` or ``.`` water, ``M`` mud,
        ``R`` reeds, ``L`` lily pad, ``A`` alligator, ``1``-``3`` food
        with that many flies, ``-`` no cell.  Identifiers are assigned in
        reading order, skipping holes.

        Raises:
            PondFormatError: On an unknown token or a bad start/end count.
        """
        grid: dict[tuple[int, int], Cell] = {}
        cells: list[Cell] = []
        for row, tokens in enumerate(rows):
            for col, token in enumerate(tokens):
                if token == _HOLE:
                    continue
                cell = _cell_from_token(token, len(cells), col, row)
                grid[(col, row)] = cell
                cells.append(cell)

        link_grid(grid)
        positions = {cell: pos for pos, cell in grid.items()}
        return cls(cells=cells, positions=positions)

    @classmethod
    def from_text(cls, text: str) -> Pond:
        """Parse a pond layout, one whitespace-separated row per line.

        Blank lines and ``#`` comments are ignored.

        Raises:
            PondFormatError: If the text holds no rows or cannot be parsed.
        """
        rows: list[list[str]] = []
        for line in text.splitlines():
            content = line.split("#", 1)[0].split()
            if content:
                rows.append(content)
        if not rows:
            msg = "pond description is empty"
            raise PondFormatError(msg)
        return cls.from_grid(rows)

    @classmethod
    def from_file(cls, path: str | Path) -> Pond:
        """Load a pond layout from a text file.

        Raises:
            FileNotFoundError: If the file does not exist.
            PondFormatError: If its contents cannot be parsed.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
        try:
            pond = cls.from_text(text)
        except PondFormatError as exc:
            msg = f"{path}: {exc}"
            raise PondFormatError(msg) from exc
        logger.info(
            "Loaded pond %s: %d cells (%dx%d)",
            path.name,
            len(pond),
            pond.width,
            pond.height,
        )
        return pond


def _cell_from_token(token: str, cell_id: int, col: int, row: int) -> Cell:
    """Create the cell described by one layout token."""
    if token in _FOOD_TOKENS:
        return Cell(
            cell_id=cell_id,
            terrain=Terrain.FOOD,
            food=FoodStock(flies=_FOOD_TOKENS[token]),
        )
    terrain = _TERRAIN_TOKENS.get(token.upper())
    if terrain is None:
        msg = f"unknown token {token!r} at column {col}, row {row}"
        raise PondFormatError(msg)
    return Cell(
        cell_id=cell_id,
        terrain=terrain,
        is_start=token.upper() == "S",
        is_end=token.upper() == "E",
    )
