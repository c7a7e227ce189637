"""FrogPath — greedy path search with backtracking.

Owns the in-progress path (a stack of cells from the start to the frog's
current hexagon) and advances it one hop per step:

1. Record the current cell in the trace.
2. Stop if it is the end.
3. Eat any flies on it.
4. Hop to the best-ranked valid candidate, or retire the cell and back up
   if there is none.

A retired cell is never a candidate again, so every step either grows the
path by a fresh cell or permanently shrinks the pond.  The search halts
within ``2 * len(pond)`` steps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from frogpath.pond.cell import NUM_SIDES
from frogpath.search.queue import EmptyQueueError, UniquePriorityQueue
from frogpath.search.scoring import base_priority, hop_priority, near_alligator

if TYPE_CHECKING:
    from frogpath.pond.cell import Cell
    from frogpath.pond.pond import Pond

logger = logging.getLogger(__name__)

NO_SOLUTION = "No solution"


class SearchState(Enum):
    """Lifecycle of a single path search."""

    SEARCHING = auto()
    SOLVED = auto()
    NO_SOLUTION = auto()


@dataclass(frozen=True)
class PathResult:
    """Outcome of a finished search.

    Attributes:
        state: ``SOLVED`` or ``NO_SOLUTION`` (``SEARCHING`` for a
            snapshot taken mid-search).
        trace: Identifiers of every cell the frog stood on, in order,
            including cells it later backed out of.
        flies_eaten: Flies eaten along the way.
    """

    state: SearchState
    trace: tuple[int, ...] = ()
    flies_eaten: int = 0

    @property
    def solved(self) -> bool:
        return self.state is SearchState.SOLVED

    def __str__(self) -> str:
        if self.state is SearchState.NO_SOLUTION:
            return NO_SOLUTION
        hops = " ".join(str(cell_id) for cell_id in self.trace)
        return f"{hops} ate {self.flies_eaten} flies"


@dataclass
class FrogPath:
    """Searches a pond for a path from its start to its end.

    Attributes:
        pond: The pond to search.  Cell traversal state and fly stocks
            are mutated as the search runs.
        state: Current search state.
        trace: Identifiers of cells visited so far.
        flies_eaten: Running fly tally.
        iterations: Steps taken so far.
    """

    pond: Pond
    state: SearchState = field(init=False, default=SearchState.SEARCHING)
    trace: list[int] = field(init=False, default_factory=list)
    flies_eaten: int = field(init=False, default=0)
    iterations: int = field(init=False, default=0)
    _stack: list[Cell] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Seed the path with the start cell."""
        self._stack.append(self.pond.start)

    @property
    def path(self) -> tuple[Cell, ...]:
        """The current start-to-frog path."""
        return tuple(self._stack)

    @property
    def current(self) -> Cell | None:
        """The cell the frog is standing on, or None once the path is empty."""
        return self._stack[-1] if self._stack else None

    def reset(self) -> None:
        """Clear pond and search state so the search can run again."""
        self.pond.reset()
        self.state = SearchState.SEARCHING
        self.trace.clear()
        self.flies_eaten = 0
        self.iterations = 0
        self._stack = [self.pond.start]

    # -- Candidates --------------------------------------------------------

    def is_valid(self, cell: Cell | None) -> bool:
        """Return True if the frog may hop onto ``cell``.

        Reeds are allowed next to an alligator (they are scored down
        instead); every other terrain is not.
        """
        if cell is None or cell is self.pond.start:
            return False
        if cell.is_marked or cell.is_mud or cell.is_alligator:
            return False
        if cell.is_reeds:
            return True
        return not near_alligator(cell)

    def find_best(self, curr: Cell) -> Cell | None:
        """Return the best next hop from ``curr``, or None if stuck.

        Lily pads and the start also let the frog jump straight to any
        neighbour of a neighbour.  A cell reachable both ways keeps the
        direct-hop score.
        """
        queue: UniquePriorityQueue[Cell] = UniquePriorityQueue()

        for i in range(NUM_SIDES):
            neighbour = curr.neighbour(i)
            if self.is_valid(neighbour):
                queue.add(neighbour, base_priority(neighbour))

        if curr.is_lily_pad or curr.is_start:
            for i in range(NUM_SIDES):
                neighbour = curr.neighbour(i)
                if neighbour is None:
                    continue
                for j in range(NUM_SIDES):
                    candidate = neighbour.neighbour(j)
                    if self.is_valid(candidate):
                        queue.add(candidate, hop_priority(candidate, curr))

        try:
            return queue.remove_min()
        except EmptyQueueError:
            return None

    # -- Search loop -------------------------------------------------------

    def step(self) -> SearchState:
        """Advance the search by one hop or one backtrack.

        Returns:
            The search state after the step.
        """
        if self.state is not SearchState.SEARCHING:
            return self.state

        curr = self._stack[-1]
        self.iterations += 1
        self.trace.append(curr.cell_id)

        if curr.is_end:
            self.state = SearchState.SOLVED
            logger.info(
                "Reached end %s after %d steps, ate %d flies",
                curr,
                self.iterations,
                self.flies_eaten,
            )
            return self.state

        food = curr.as_food()
        if food is not None and food.flies > 0:
            self.flies_eaten += food.consume()

        nxt = self.find_best(curr)
        if nxt is None:
            self._stack.pop()
            curr.mark_retired()
            logger.debug("Retired %s, backing up", curr)
        else:
            self._stack.append(nxt)
            nxt.mark_in_stack()
            logger.debug("Hop %s -> %s", curr, nxt)

        if not self._stack:
            self.state = SearchState.NO_SOLUTION
            logger.info("No path to end after %d steps", self.iterations)
        return self.state

    def find_path(self) -> PathResult:
        """Step until the search is solved or proven impossible."""
        while self.step() is SearchState.SEARCHING:
            pass
        return self.result()

    def result(self) -> PathResult:
        """Snapshot the current outcome."""
        return PathResult(
            state=self.state,
            trace=tuple(self.trace),
            flies_eaten=self.flies_eaten,
        )
