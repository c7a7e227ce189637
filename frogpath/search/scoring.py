"""Scoring — how attractive a hexagon is as the frog's next hop.

Lower scores win.  The rules are applied in order and later rules
replace earlier ones rather than adding to them:

1. Food cells rank by flies left (3 -> 0, 2 -> 1, 1 -> 2).
2. The end cell scores 3.
3. Otherwise lily pads score 4, reeds 5, plain water 6.
4. Reeds next to an alligator score 10 regardless of the above.

Jumps of two hexes from a lily pad or the start pay an extra 0.5 when
they run roughly straight, 1.0 otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from frogpath.pond.cell import NUM_SIDES

if TYPE_CHECKING:
    from frogpath.pond.cell import Cell

# -- Constants ---------------------------------------------------------------

_FOOD_PRIORITY = {3: 0.0, 2: 1.0, 1: 2.0}
_END_PRIORITY = 3.0
_LILY_PAD_PRIORITY = 4.0
_REEDS_PRIORITY = 5.0
_WATER_PRIORITY = 6.0
_REEDS_NEAR_ALLIGATOR_PRIORITY = 10.0
_STRAIGHT_HOP_PENALTY = 0.5
_BENT_HOP_PENALTY = 1.0


def near_alligator(cell: Cell) -> bool:
    """Return True if any neighbour of ``cell`` is an alligator."""
    return any(n is not None and n.is_alligator for n in cell.neighbours)


def base_priority(cell: Cell) -> float:
    """Score a directly adjacent candidate."""
    priority = 0.0

    food = cell.as_food()
    if food is not None:
        priority = _FOOD_PRIORITY.get(food.flies, 0.0)

    if cell.is_end:
        priority = _END_PRIORITY
    elif cell.is_lily_pad:
        priority = _LILY_PAD_PRIORITY
    elif cell.is_reeds:
        priority = _REEDS_PRIORITY
    elif cell.is_water:
        priority = _WATER_PRIORITY

    if cell.is_reeds and near_alligator(cell):
        priority = _REEDS_NEAR_ALLIGATOR_PRIORITY

    return priority


def shared_neighbours(cell: Cell, occupied: Cell) -> int:
    """Count side pairs ``(i, j)`` where both cells have the same neighbour.

    Two empty sides count as a match, so cells on a pond edge collect
    extra pairs.
    """
    count = 0
    for i in range(NUM_SIDES):
        theirs = cell.neighbour(i)
        for j in range(NUM_SIDES):
            if occupied.neighbour(j) is theirs:
                count += 1
    return count


def is_two_away_straight(cell: Cell, occupied: Cell) -> bool:
    """Return True if exactly one side pair of the two cells matches.

    Away from the edges a target two steps away in a straight line shares
    a single neighbour with the origin; a target off the line shares two.
    When both cells sit on an edge their empty sides match too, and the
    jump counts as bent.
    """
    return shared_neighbours(cell, occupied) == 1


def hop_priority(cell: Cell, occupied: Cell) -> float:
    """Score a two-hex jump from ``occupied`` to ``cell``."""
    priority = base_priority(cell)
    if is_two_away_straight(cell, occupied):
        priority += _STRAIGHT_HOP_PENALTY
    else:
        priority += _BENT_HOP_PENALTY
    return priority
