"""Centralized domain constants for the segregation simulation.

Grid symbols, defaults and colors used by more than one module live here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

RED_SYMBOL = "R"
"""Grid-file character for a red agent."""

BLUE_SYMBOL = "B"
"""Grid-file character for a blue agent."""

EMPTY_SYMBOL = "E"
"""Grid-file character written for empty cells (any unknown character reads as empty)."""

RUN_UNTIL_CONVERGED = 0
"""Simulation-count sentinel: step until no agent is unhappy."""

DEFAULT_HAPPINESS_THRESHOLD = 30
"""Default minimum percentage of acceptable neighbors."""

DEFAULT_SIMULATION_COUNT = RUN_UNTIL_CONVERGED
"""Default number of generations to run."""

MIN_HAPPINESS_THRESHOLD = 0
MAX_HAPPINESS_THRESHOLD = 100

ISOLATED_CELL_HAPPINESS = 100.0
"""Happiness of a cell with no in-bounds neighbors (1x1 grid)."""

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))
"""Von Neumann (4-directional) neighborhood as (d_row, d_col) offsets."""

DEFAULT_PPM_FILENAME = "out.ppm"
"""Image written after every run unless overridden."""

PPM_MAX_COLOR = 255

RED_RGB: tuple[int, int, int] = (255, 0, 0)
BLUE_RGB: tuple[int, int, int] = (0, 0, 255)
EMPTY_RGB: tuple[int, int, int] = (255, 255, 255)
