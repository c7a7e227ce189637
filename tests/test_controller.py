"""Tests for frogpath.search.controller — the path search."""

import logging

import numpy as np
import pytest

from frogpath.pond.cell import TraversalState
from frogpath.pond.generate import random_pond
from frogpath.pond.pond import Pond
from frogpath.search.controller import FrogPath, PathResult, SearchState


def solve(text: str) -> PathResult:
    return FrogPath(pond=Pond.from_text(text)).find_path()


class TestScenarios:
    """End-to-end searches on small ponds."""

    def test_start_next_to_end(self) -> None:
        assert str(solve("S E")) == "0 1 ate 0 flies"

    def test_end_behind_alligator(self) -> None:
        result = solve("S A E")
        assert not result.solved
        assert result.state == SearchState.NO_SOLUTION
        assert str(result) == "No solution"

    def test_end_behind_two_mud(self) -> None:
        assert str(solve("S M M E")) == "No solution"

    def test_food_chain(self, food_chain_pond: Pond) -> None:
        result = FrogPath(pond=food_chain_pond).find_path()
        assert str(result) == "0 1 2 ate 3 flies"
        assert result.flies_eaten == 3
        assert food_chain_pond.cells[1].as_food().flies == 0

    def test_start_jumps_over_mud(self) -> None:
        assert str(solve("S M E")) == "0 2 ate 0 flies"

    def test_lily_pad_jump_and_backtrack(self) -> None:
        # The start jumps to the lily pad, which prefers the water behind
        # it over a two-hex jump; that water dead-ends and is retired.
        frog = FrogPath(pond=Pond.from_text("S . L M . E"))
        result = frog.find_path()
        assert str(result) == "0 2 1 2 4 5 ate 0 flies"
        assert frog.pond.cells[1].is_retired
        assert [c.cell_id for c in frog.path] == [0, 2, 4, 5]

    def test_reeds_by_alligator_chosen_last(self, reeds_pond: Pond) -> None:
        result = FrogPath(pond=reeds_pond).find_path()
        assert str(result) == "0 1 2 1 3 5 ate 0 flies"
        assert reeds_pond.cells[2].is_retired

    def test_food_eaten_once_across_backtracking(self) -> None:
        frog = FrogPath(pond=Pond.from_text("S 2 . M M E"))
        result = frog.find_path()
        assert result.trace == (0, 1, 2, 1, 0)
        assert result.flies_eaten == 2
        assert str(result) == "No solution"

    def test_edge_jump_ties_with_direct_reeds(self) -> None:
        # Along the top edge the jump to the lily pad picks up the bent
        # penalty (4 + 1), tying the reeds next door, which were queued first.
        frog = FrogPath(pond=Pond.from_text("S R L E"))
        result = frog.find_path()
        assert str(result) == "0 1 2 3 ate 0 flies"
        assert [c.cell_id for c in frog.path] == [0, 1, 2, 3]


class TestFindBest:
    """Tests for candidate validity and selection."""

    def test_prefers_water_over_gator_reeds(self, reeds_pond: Pond) -> None:
        frog = FrogPath(pond=reeds_pond)
        hub, dead_end, reeds = reeds_pond.cells[1:4]
        assert frog.find_best(hub) is dead_end
        dead_end.mark_retired()
        assert frog.find_best(hub) is reeds

    def test_gator_reeds_are_valid(self, reeds_pond: Pond) -> None:
        frog = FrogPath(pond=reeds_pond)
        assert frog.is_valid(reeds_pond.cells[3])

    def test_invalid_cells(self, reeds_pond: Pond) -> None:
        frog = FrogPath(pond=reeds_pond)
        start, hub, _, _, gator, _ = reeds_pond.cells
        assert not frog.is_valid(None)
        assert not frog.is_valid(start)
        assert not frog.is_valid(gator)
        hub.mark_in_stack()
        assert not frog.is_valid(hub)

    def test_water_beside_alligator_invalid(self) -> None:
        pond = Pond.from_text("S . A E")
        frog = FrogPath(pond=pond)
        assert not frog.is_valid(pond.cells[1])
        assert frog.find_best(pond.start) is None

    def test_mud_invalid(self) -> None:
        pond = Pond.from_text("S M E")
        assert not FrogPath(pond=pond).is_valid(pond.cells[1])

    def test_no_two_hop_from_plain_water(self) -> None:
        pond = Pond.from_text("S . M E")
        frog = FrogPath(pond=pond)
        water = pond.cells[1]
        water.mark_in_stack()
        assert frog.find_best(water) is None

    def test_direct_score_wins_over_jump(self, two_row_pond: Pond) -> None:
        # Cell 1 is both a neighbour and a neighbour-of-neighbour of the
        # start; it keeps its direct score of 6 and beats every jump.
        frog = FrogPath(pond=two_row_pond)
        assert frog.find_best(two_row_pond.start) is two_row_pond.cells[1]


class TestStepping:
    """Tests for the step-wise state machine."""

    def test_initial_state(self, food_chain_pond: Pond) -> None:
        frog = FrogPath(pond=food_chain_pond)
        assert frog.state == SearchState.SEARCHING
        assert frog.path == (food_chain_pond.start,)
        assert frog.current is food_chain_pond.start
        assert frog.iterations == 0

    def test_steps(self, food_chain_pond: Pond) -> None:
        frog = FrogPath(pond=food_chain_pond)
        food = food_chain_pond.cells[1]
        assert frog.step() == SearchState.SEARCHING
        assert frog.current is food
        assert food.state == TraversalState.IN_STACK
        assert frog.step() == SearchState.SEARCHING
        assert frog.flies_eaten == 3
        assert frog.step() == SearchState.SOLVED
        assert frog.trace == [0, 1, 2]

    def test_mid_search_snapshot_renders_trace(self, food_chain_pond: Pond) -> None:
        frog = FrogPath(pond=food_chain_pond)
        frog.step()
        snapshot = frog.result()
        assert snapshot.state == SearchState.SEARCHING
        assert not snapshot.solved
        assert str(snapshot) == "0 ate 0 flies"

    def test_step_after_finish_is_noop(self) -> None:
        frog = FrogPath(pond=Pond.from_text("S E"))
        frog.find_path()
        assert frog.step() == SearchState.SOLVED
        assert frog.iterations == 2

    def test_no_solution_empties_path(self) -> None:
        frog = FrogPath(pond=Pond.from_text("S A E"))
        frog.find_path()
        assert frog.path == ()
        assert frog.current is None
        assert frog.pond.start.is_retired

    def test_reset_allows_rerun(self, food_chain_pond: Pond) -> None:
        frog = FrogPath(pond=food_chain_pond)
        first = frog.find_path()
        frog.reset()
        assert frog.state == SearchState.SEARCHING
        assert frog.trace == []
        assert food_chain_pond.cells[1].as_food().flies == 3
        assert frog.find_path() == first

    def test_logs_outcome(
        self,
        food_chain_pond: Pond,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.INFO, logger="frogpath")
        FrogPath(pond=food_chain_pond).find_path()
        assert "Reached end 2" in caplog.text


class TestTermination:
    """The search must halt on any finite pond."""

    @pytest.mark.parametrize("seed", range(40))
    def test_random_ponds_halt(self, seed: int) -> None:
        pond = random_pond(np.random.default_rng(seed), 9, 7)
        frog = FrogPath(pond=pond)
        retired: set[int] = set()
        while frog.step() == SearchState.SEARCHING:
            assert frog.trace[-1] not in retired
            retired = {c.cell_id for c in pond.cells if c.is_retired}
            assert frog.iterations <= 2 * len(pond)

        assert frog.state in (SearchState.SOLVED, SearchState.NO_SOLUTION)
        assert frog.iterations <= 2 * len(pond)
        assert not any(c.is_retired for c in frog.path)
        if frog.state == SearchState.SOLVED:
            assert frog.path[0] is pond.start
            assert frog.path[-1] is pond.end
