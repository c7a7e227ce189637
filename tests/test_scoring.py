"""Tests for frogpath.search.scoring."""

import pytest

from frogpath.pond.cell import Cell, FoodStock, Terrain
from frogpath.pond.pond import Pond
from frogpath.search.scoring import (
    base_priority,
    hop_priority,
    is_two_away_straight,
    near_alligator,
    shared_neighbours,
)


def food_cell(flies: int, **kwargs) -> Cell:
    return Cell(cell_id=9, terrain=Terrain.FOOD, food=FoodStock(flies=flies), **kwargs)


class TestBasePriority:
    """Tests for the per-terrain score cascade."""

    @pytest.mark.parametrize(
        ("flies", "expected"),
        [(3, 0.0), (2, 1.0), (1, 2.0), (0, 0.0)],
    )
    def test_food_by_flies(self, flies: int, expected: float) -> None:
        assert base_priority(food_cell(flies)) == expected

    @pytest.mark.parametrize(
        ("terrain", "expected"),
        [(Terrain.LILY_PAD, 4.0), (Terrain.REEDS, 5.0), (Terrain.WATER, 6.0)],
    )
    def test_terrain_scores(self, terrain: Terrain, expected: float) -> None:
        assert base_priority(Cell(cell_id=0, terrain=terrain)) == expected

    def test_end_scores_three(self) -> None:
        assert base_priority(Cell(cell_id=0, is_end=True)) == 3.0

    def test_end_overrides_food(self) -> None:
        assert base_priority(food_cell(3, is_end=True)) == 3.0

    def test_reeds_near_alligator(self) -> None:
        reeds = Cell(cell_id=0, terrain=Terrain.REEDS)
        reeds.connect(2, Cell(cell_id=1, terrain=Terrain.ALLIGATOR))
        assert near_alligator(reeds)
        assert base_priority(reeds) == 10.0

    def test_water_near_alligator_unchanged(self) -> None:
        water = Cell(cell_id=0)
        water.connect(4, Cell(cell_id=1, terrain=Terrain.ALLIGATOR))
        assert base_priority(water) == 6.0

    def test_no_alligator_at_edges(self) -> None:
        assert not near_alligator(Cell(cell_id=0, terrain=Terrain.REEDS))


class TestHopPriority:
    """Tests for the two-hex jump penalty."""

    # 5x3 open pond; the start (id 6) sits at (1, 1) with all six sides filled
    _INTERIOR = ". . . . .\n. S . . .\n. . . . E\n"

    def test_interior_straight_jump(self) -> None:
        pond = Pond.from_text(self._INTERIOR)
        origin, target = pond.cells[6], pond.cells[8]
        assert shared_neighbours(target, origin) == 1
        assert is_two_away_straight(target, origin)
        assert hop_priority(target, origin) == 6.5

    def test_bent_jump_shares_two_neighbours(self) -> None:
        pond = Pond.from_text(self._INTERIOR)
        origin, target = pond.cells[6], pond.cells[3]
        assert shared_neighbours(target, origin) == 2
        assert not is_two_away_straight(target, origin)
        assert hop_priority(target, origin) == 7.0

    def test_straight_jump_along_edge_is_bent(self, two_row_pond: Pond) -> None:
        # One real shared cell plus 3 x 4 pairs of empty sides
        origin, target = two_row_pond.cells[0], two_row_pond.cells[2]
        assert shared_neighbours(target, origin) == 13
        assert hop_priority(target, origin) == 7.0

    def test_edge_knight_jump(self, two_row_pond: Pond) -> None:
        origin, target = two_row_pond.cells[0], two_row_pond.cells[4]
        assert shared_neighbours(target, origin) == 10
        assert hop_priority(target, origin) == 7.0

    def test_empty_sides_match(self) -> None:
        lonely_a = Cell(cell_id=0)
        lonely_b = Cell(cell_id=1)
        assert shared_neighbours(lonely_a, lonely_b) == 36
        assert hop_priority(lonely_a, lonely_b) == 7.0

    def test_far_end_gets_bent_penalty(self, two_row_pond: Pond) -> None:
        origin, end = two_row_pond.cells[0], two_row_pond.end
        assert shared_neighbours(end, origin) == 16
        assert hop_priority(end, origin) == 4.0
