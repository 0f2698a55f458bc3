"""
Trial Evaluation Module

Computes the outcome of a single trial under the stay and switch
strategies. The switch strategy simulates the host opening a goat door
before the contestant changes to the last closed door.

"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

import numpy as np

from .scenario import Arrangement
from .validation import N_DOORS, validate_arrangement, validate_pick


class Strategy(Enum):
    """
    Contestant strategy after the host's reveal.

    Attributes
    ----------
    STAY : str
        Keep the initial pick.
    SWITCH : str
        Move to the remaining closed door.
    """
    STAY = 'stay'
    SWITCH = 'switch'

    @property
    def theoretical_probability(self) -> float:
        """Probability of winning the car with this strategy."""
        return 1 / 3 if self is Strategy.STAY else 2 / 3

    def evaluate(self, arrangement: Sequence[int], initial_pick: int,
                 rng: np.random.Generator = None) -> int:
        """
        Outcome of one trial under this strategy.

        *rng* is required for ``SWITCH`` and ignored for ``STAY``.
        """
        if self is Strategy.STAY:
            return evaluate_stay(arrangement, initial_pick)
        if rng is None:
            raise ValueError("the switch strategy needs a random source for the reveal")
        return evaluate_switch(arrangement, initial_pick, rng)


@dataclass(frozen=True)
class SwitchTrial:
    """
    Record of one switch-strategy trial.

    Attributes
    ----------
    arrangement : tuple of int
        Prize placement for the trial.
    initial_pick : int
        Contestant's first choice.
    revealed_door : int
        Goat door opened by the host.
    final_pick : int
        Door the contestant switches to.
    outcome : int
        1 if the final pick hides the car, else 0.
    """
    arrangement: Arrangement
    initial_pick: int
    revealed_door: int
    final_pick: int
    outcome: int


def evaluate_stay(arrangement: Sequence[int], initial_pick: int) -> int:
    """
    Outcome of keeping the initial pick.

    Consumes no randomness: the contestant wins exactly when the initial
    pick is the car door.

    Parameters
    ----------
    arrangement : sequence of int
        One-hot prize placement over three doors.
    initial_pick : int
        Door index in ``[0, 3)``.

    Returns
    -------
    int
        ``arrangement[initial_pick]``.
    """
    arrangement = validate_arrangement(arrangement)
    initial_pick = validate_pick(initial_pick)
    return arrangement[initial_pick]


def goat_candidates(arrangement: Sequence[int], initial_pick: int) -> List[int]:
    """
    Doors the host may open, in ascending order.

    These are the doors other than the initial pick that hide a goat: two
    of them when the initial pick is the car, one otherwise.
    """
    arrangement = validate_arrangement(arrangement)
    initial_pick = validate_pick(initial_pick)
    return _goat_candidates(arrangement, initial_pick)


def reveal_door(arrangement: Sequence[int], initial_pick: int,
                rng: np.random.Generator) -> int:
    """
    Draw the door the host opens.

    The host picks uniformly among the goat candidates. The draw is made
    even when only one candidate exists.
    """
    arrangement = validate_arrangement(arrangement)
    initial_pick = validate_pick(initial_pick)
    return _reveal(_goat_candidates(arrangement, initial_pick), rng)


def play_switch(arrangement: Sequence[int], initial_pick: int,
                rng: np.random.Generator) -> SwitchTrial:
    """
    Play one trial with the switch strategy and return the full record.

    Parameters
    ----------
    arrangement : sequence of int
        One-hot prize placement over three doors.
    initial_pick : int
        Door index in ``[0, 3)``.
    rng : numpy.random.Generator
        Random stream for the host's reveal.

    Returns
    -------
    SwitchTrial
        Initial pick, revealed door, final pick and outcome. The three door
        indices are pairwise distinct.

    Examples
    --------
    >>> import numpy as np
    >>> trial = play_switch((0, 1, 0), 0, np.random.default_rng(0))
    >>> trial.revealed_door, trial.final_pick, trial.outcome
    (2, 1, 1)
    """
    arrangement = validate_arrangement(arrangement)
    initial_pick = validate_pick(initial_pick)
    return _play_switch(arrangement, initial_pick, rng)


def evaluate_switch(arrangement: Sequence[int], initial_pick: int,
                    rng: np.random.Generator) -> int:
    """Outcome of switching to the last closed door after the host's reveal."""
    return play_switch(arrangement, initial_pick, rng).outcome


def _goat_candidates(arrangement: Arrangement, initial_pick: int) -> List[int]:
    remaining = [door for door in range(N_DOORS) if door != initial_pick]
    return [door for door in remaining if arrangement[door] == 0]


def _reveal(candidates: List[int], rng: np.random.Generator) -> int:
    return candidates[int(rng.integers(0, len(candidates)))]


def _play_switch(arrangement: Arrangement, initial_pick: int,
                 rng: np.random.Generator) -> SwitchTrial:
    revealed = _reveal(_goat_candidates(arrangement, initial_pick), rng)
    final_pick = next(
        door for door in range(N_DOORS)
        if door != initial_pick and door != revealed
    )
    return SwitchTrial(
        arrangement=arrangement,
        initial_pick=initial_pick,
        revealed_door=revealed,
        final_pick=final_pick,
        outcome=arrangement[final_pick],
    )
