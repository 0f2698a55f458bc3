"""
Scenario Generator Module

Draws the hidden prize arrangement and the contestant's initial pick for a
single trial.
"""

from typing import Tuple

import numpy as np

from .validation import N_DOORS

Arrangement = Tuple[int, int, int]

# Draw k places the car behind door k.
ARRANGEMENTS: Tuple[Arrangement, ...] = (
    (1, 0, 0),
    (0, 1, 0),
    (0, 0, 1),
)


class ScenarioGenerator:
    """
    Source of per-trial scenarios.

    Parameters
    ----------
    rng : numpy.random.Generator
        Random stream used for every draw. Any object exposing
        ``integers(low, high)`` with the same semantics is accepted.

    Examples
    --------
    >>> import numpy as np
    >>> gen = ScenarioGenerator(np.random.default_rng(7))
    >>> arrangement, pick = gen.draw()
    >>> sum(arrangement), 0 <= pick < 3
    (1, True)
    """

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def draw_arrangement(self) -> Arrangement:
        """Return one of the three one-hot arrangements, each with probability 1/3."""
        return ARRANGEMENTS[int(self.rng.integers(0, N_DOORS))]

    def draw_initial_pick(self) -> int:
        """Return a door index drawn uniformly from ``[0, 3)``."""
        return int(self.rng.integers(0, N_DOORS))

    def draw(self) -> Tuple[Arrangement, int]:
        arrangement = self.draw_arrangement()
        return arrangement, self.draw_initial_pick()
