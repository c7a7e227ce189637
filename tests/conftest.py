"""Shared fixtures for the frogpath test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from frogpath.pond.cell import Cell, Terrain
from frogpath.pond.pond import Pond
from frogpath.simulation.config import FrogPathConfig


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def two_row_pond() -> Pond:
    """A 3x2 open-water pond.

    Ids in reading order::

        0(S) 1 2
           3  4 5(E)
    """
    return Pond.from_text("S . .\n. . E\n")


@pytest.fixture
def food_chain_pond() -> Pond:
    """Start, a 3-fly food cell, and the end in a straight line."""
    return Pond.from_text("S 3 E")


@pytest.fixture
def reeds_pond() -> Pond:
    """A hand-linked pond with a dead end and reeds beside an alligator.

    Ids: 0 start, 1 water, 2 dead-end water, 3 reeds, 4 alligator, 5 end.
    """
    start = Cell(cell_id=0, is_start=True)
    hub = Cell(cell_id=1)
    dead_end = Cell(cell_id=2)
    reeds = Cell(cell_id=3, terrain=Terrain.REEDS)
    gator = Cell(cell_id=4, terrain=Terrain.ALLIGATOR)
    end = Cell(cell_id=5, is_end=True)

    start.connect(0, hub)
    hub.connect(0, reeds)
    hub.connect(1, dead_end)
    reeds.connect(0, gator)
    reeds.connect(1, end)
    return Pond(cells=[start, hub, dead_end, reeds, gator, end])


@pytest.fixture
def default_config() -> FrogPathConfig:
    """Default run config (no YAML file needed)."""
    return FrogPathConfig()
