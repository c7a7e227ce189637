"""Config — load run parameters from YAML files.

Which pond to search, how to generate a random one, how loudly to log and
how the viewer animates the search all live in YAML and are parsed into a
typed dataclass here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from frogpath.pond.generate import DEFAULT_TERRAIN_WEIGHTS


@dataclass
class FrogPathConfig:
    """Top-level run configuration.

    Attributes:
        pond_file: Pond layout to search.  Relative paths in a YAML file
            are resolved against the file's directory.
        seed: RNG seed for random ponds.
        random_width: Columns of a generated pond.
        random_height: Rows of a generated pond.
        terrain_weights: Relative weight per terrain for generated ponds.
        max_flies: Most flies a generated food cell can hold.
        log_level: Name of the console logging level.
        cell_size: Viewer hexagon size in pixels.
        steps_per_second: Viewer search speed.
        fps: Viewer frame rate.
    """

    pond_file: Path | None = None
    seed: int = 42
    random_width: int = 12
    random_height: int = 10
    terrain_weights: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_TERRAIN_WEIGHTS),
    )
    max_flies: int = 3

    log_level: str = "INFO"

    # Viewer
    cell_size: int = 28
    steps_per_second: float = 4.0
    fps: int = 30

    @classmethod
    def from_yaml(cls, path: str | Path) -> FrogPathConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated FrogPathConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        pond_file = data.get("pond_file")
        if pond_file is not None:
            pond_file = Path(pond_file)
            if not pond_file.is_absolute():
                pond_file = path.parent / pond_file

        return cls(
            pond_file=pond_file,
            seed=data.get("seed", cls.seed),
            random_width=data.get("random_width", cls.random_width),
            random_height=data.get("random_height", cls.random_height),
            terrain_weights=data.get(
                "terrain_weights",
                dict(DEFAULT_TERRAIN_WEIGHTS),
            ),
            max_flies=data.get("max_flies", cls.max_flies),
            log_level=data.get("log_level", cls.log_level),
            cell_size=data.get("cell_size", cls.cell_size),
            steps_per_second=data.get(
                "steps_per_second",
                cls.steps_per_second,
            ),
            fps=data.get("fps", cls.fps),
        )
