"""Cell — a single hexagon in the pond.

Each cell holds an immutable terrain kind, up to six neighbour links and
the traversal state the path search writes while it explores.  Food cells
carry a ``FoodStock`` payload instead of being a separate subclass, so the
search only ever asks "is this food, and how many flies remain".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

NUM_SIDES = 6


class Terrain(Enum):
    """What a hexagon is made of."""

    WATER = auto()
    MUD = auto()
    REEDS = auto()
    LILY_PAD = auto()
    ALLIGATOR = auto()
    FOOD = auto()


class TraversalState(Enum):
    """Where a cell stands relative to the in-progress path."""

    UNVISITED = auto()
    IN_STACK = auto()
    RETIRED = auto()


@dataclass
class FoodStock:
    """Flies sitting on a food cell.

    Attributes:
        flies: Flies still available to eat.
        initial: Flies the cell started with (used by ``refill``).
    """

    flies: int
    initial: int = field(init=False)

    def __post_init__(self) -> None:
        """Remember the starting stock."""
        if self.flies < 0:
            msg = f"fly count must be non-negative, got {self.flies}"
            raise ValueError(msg)
        self.initial = self.flies

    def consume(self) -> int:
        """Eat every fly on the cell and return how many were eaten."""
        eaten = self.flies
        self.flies = 0
        return eaten

    def refill(self) -> None:
        """Restore the starting stock."""
        self.flies = self.initial


@dataclass(eq=False)
class Cell:
    """A single hexagon of the pond.

    Cells compare by identity so they can be used as queue items and
    dictionary keys even though their traversal state changes.

    Attributes:
        cell_id: Printable identifier, unique within a pond.
        terrain: Terrain kind (fixed for the life of the cell).
        is_start: Whether the frog starts here.
        is_end: Whether this is the frog's destination.
        food: Fly stock, present only on ``Terrain.FOOD`` cells.
        state: Traversal state written by the path search.
        neighbours: Six neighbour slots, ``None`` at a pond edge.
    """

    cell_id: int
    terrain: Terrain = Terrain.WATER
    is_start: bool = False
    is_end: bool = False
    food: FoodStock | None = None
    state: TraversalState = TraversalState.UNVISITED
    neighbours: list[Cell | None] = field(
        default_factory=lambda: [None] * NUM_SIDES,
        repr=False,
    )

    def __post_init__(self) -> None:
        """Keep the food payload consistent with the terrain."""
        if self.terrain is Terrain.FOOD and self.food is None:
            msg = f"food cell {self.cell_id} needs a FoodStock"
            raise ValueError(msg)
        if self.terrain is not Terrain.FOOD and self.food is not None:
            msg = f"cell {self.cell_id} is {self.terrain.name}, not FOOD"
            raise ValueError(msg)

    def __str__(self) -> str:
        return str(self.cell_id)

    # -- Neighbours --------------------------------------------------------

    def neighbour(self, index: int) -> Cell | None:
        """Return the neighbour on side ``index`` or None at an edge.

        Raises:
            IndexError: If ``index`` is not in ``0..5``.
        """
        if not 0 <= index < NUM_SIDES:
            msg = f"side {index} out of range 0..{NUM_SIDES - 1}"
            raise IndexError(msg)
        return self.neighbours[index]

    def connect(self, index: int, other: Cell) -> None:
        """Link ``other`` on side ``index`` and link back on the opposite side."""
        if not 0 <= index < NUM_SIDES:
            msg = f"side {index} out of range 0..{NUM_SIDES - 1}"
            raise IndexError(msg)
        self.neighbours[index] = other
        other.neighbours[(index + NUM_SIDES // 2) % NUM_SIDES] = self

    # -- Classification ----------------------------------------------------

    @property
    def is_water(self) -> bool:
        return self.terrain is Terrain.WATER

    @property
    def is_mud(self) -> bool:
        return self.terrain is Terrain.MUD

    @property
    def is_reeds(self) -> bool:
        return self.terrain is Terrain.REEDS

    @property
    def is_lily_pad(self) -> bool:
        return self.terrain is Terrain.LILY_PAD

    @property
    def is_alligator(self) -> bool:
        return self.terrain is Terrain.ALLIGATOR

    @property
    def is_food(self) -> bool:
        return self.terrain is Terrain.FOOD

    def as_food(self) -> FoodStock | None:
        """Return the fly stock if this is a food cell."""
        return self.food

    # -- Traversal state ---------------------------------------------------

    @property
    def is_retired(self) -> bool:
        return self.state is TraversalState.RETIRED

    @property
    def is_marked(self) -> bool:
        """Return True once the search has put this cell on its path."""
        return self.state is not TraversalState.UNVISITED

    def mark_in_stack(self) -> None:
        self.state = TraversalState.IN_STACK

    def mark_retired(self) -> None:
        self.state = TraversalState.RETIRED

    def reset(self) -> None:
        """Forget any search state and put the flies back."""
        self.state = TraversalState.UNVISITED
        if self.food is not None:
            self.food.refill()
