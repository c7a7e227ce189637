"""Random pond generation.

Builds seeded, reproducible ponds for demos and for exercising the path
search on many layouts.  Terrain is drawn independently per cell from
weighted choices; start and end are then placed on two distinct cells.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from frogpath.pond.cell import Cell, FoodStock, Terrain
from frogpath.pond.pond import Pond, link_grid

if TYPE_CHECKING:
    from numpy.random import Generator

DEFAULT_TERRAIN_WEIGHTS: dict[str, float] = {
    "water": 0.45,
    "lily_pad": 0.15,
    "reeds": 0.12,
    "mud": 0.12,
    "alligator": 0.06,
    "food": 0.10,
}


def random_pond(
    rng: Generator,
    width: int,
    height: int,
    *,
    terrain_weights: dict[str, float] | None = None,
    max_flies: int = 3,
) -> Pond:
    """Generate a ``width`` x ``height`` offset-hex pond.

    Args:
        rng: Seeded random generator.
        width: Number of columns.
        height: Number of rows.
        terrain_weights: Relative weight per terrain name (lower-case
            ``Terrain`` member names).  Defaults to
            ``DEFAULT_TERRAIN_WEIGHTS``.
        max_flies: Upper bound on flies per food cell.

    Returns:
        A linked Pond with one start and one end cell.

    Raises:
        ValueError: If the pond would have fewer than two cells, or the
            weights name an unknown terrain or sum to zero.
    """
    if width * height < 2:
        msg = f"pond of {width}x{height} cannot hold a start and an end"
        raise ValueError(msg)

    weights = terrain_weights or DEFAULT_TERRAIN_WEIGHTS
    terrains: list[Terrain] = []
    probs: list[float] = []
    for name, weight in weights.items():
        try:
            terrains.append(Terrain[name.upper()])
        except KeyError:
            msg = f"unknown terrain {name!r}"
            raise ValueError(msg) from None
        probs.append(float(weight))
    total = sum(probs)
    if total <= 0:
        msg = "terrain weights must sum to a positive value"
        raise ValueError(msg)
    probs = [p / total for p in probs]

    count = width * height
    picks = rng.choice(len(terrains), size=count, p=probs)
    start_idx, end_idx = (int(i) for i in rng.choice(count, size=2, replace=False))

    grid: dict[tuple[int, int], Cell] = {}
    cells: list[Cell] = []
    for idx in range(count):
        col, row = idx % width, idx // width
        terrain = terrains[int(picks[idx])]
        # Start and end are always plain water
        if idx in (start_idx, end_idx):
            terrain = Terrain.WATER
        food = None
        if terrain is Terrain.FOOD:
            food = FoodStock(flies=int(rng.integers(1, max_flies + 1)))
        cell = Cell(
            cell_id=idx,
            terrain=terrain,
            is_start=idx == start_idx,
            is_end=idx == end_idx,
            food=food,
        )
        grid[(col, row)] = cell
        cells.append(cell)

    link_grid(grid)
    return Pond(cells=cells, positions={cell: pos for pos, cell in grid.items()})
