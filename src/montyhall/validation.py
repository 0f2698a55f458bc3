"""
Validation Module

Implements input validation for arrangements, door picks and simulation
parameters.

"""

import numbers
from typing import Optional, Sequence, Tuple

import numpy as np

from .exceptions import (
    InvalidArrangementError,
    InvalidParameterError,
    InvalidPickError,
)

N_DOORS = 3

# Win tallies are accumulated in int64 when worker results are combined.
MAX_TRIALS = int(np.iinfo(np.int64).max)


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def validate_arrangement(arrangement: Sequence[int]) -> Tuple[int, int, int]:
    """
    Validate a prize arrangement and normalize it to a tuple.

    Parameters
    ----------
    arrangement : sequence of int
        Door values, 1 for the car and 0 for a goat. Lists, tuples and
        numpy arrays are accepted.

    Returns
    -------
    tuple of int
        The arrangement as a plain 3-tuple.

    Raises
    ------
    InvalidArrangementError
        If the arrangement does not hold exactly three binary values with
        exactly one car.
    """
    try:
        values = tuple(arrangement)
    except TypeError:
        raise InvalidArrangementError(
            f"arrangement must be a sequence of {N_DOORS} values, "
            f"got {type(arrangement).__name__}"
        ) from None

    if len(values) != N_DOORS:
        raise InvalidArrangementError(
            f"arrangement must have exactly {N_DOORS} doors, got {len(values)}"
        )
    if not all(_is_integer(v) and v in (0, 1) for v in values):
        raise InvalidArrangementError(
            f"arrangement values must be 0 or 1, got {values}"
        )
    values = tuple(int(v) for v in values)
    if sum(values) != 1:
        raise InvalidArrangementError(
            f"arrangement must contain exactly one car, got {values}"
        )
    return values


def validate_pick(pick: int, name: str = 'initial_pick') -> int:
    """
    Validate a door index.

    Raises
    ------
    InvalidPickError
        If *pick* is not an integer in ``[0, 3)``.
    """
    if not _is_integer(pick):
        raise InvalidPickError(
            f"{name} must be an integer door index, got {type(pick).__name__}"
        )
    if not 0 <= pick < N_DOORS:
        raise InvalidPickError(
            f"{name} must be in [0, {N_DOORS}), got {pick}"
        )
    return int(pick)


def validate_n_trials(n_trials: int) -> int:
    """
    Validate the trial count.

    Parameters
    ----------
    n_trials : int
        Number of trials per strategy.

    Returns
    -------
    int
        The trial count as a Python int.

    Raises
    ------
    InvalidParameterError
        If *n_trials* is not an integer, is below 1, or exceeds
        ``MAX_TRIALS``.
    """
    if not _is_integer(n_trials):
        raise InvalidParameterError(
            f"n_trials must be an integer, got {type(n_trials).__name__}"
        )
    if n_trials < 1:
        raise InvalidParameterError(f"n_trials must be positive, got {n_trials}")
    if n_trials > MAX_TRIALS:
        raise InvalidParameterError(
            f"n_trials must not exceed {MAX_TRIALS}, got {n_trials}"
        )
    return int(n_trials)


def validate_seed(seed: Optional[int]) -> Optional[int]:
    """Validate an optional non-negative integer seed."""
    if seed is None:
        return None
    if not _is_integer(seed):
        raise InvalidParameterError(
            f"seed must be a non-negative integer or None, got {type(seed).__name__}"
        )
    if seed < 0:
        raise InvalidParameterError(f"seed must be non-negative, got {seed}")
    return int(seed)


def validate_n_jobs(n_jobs: int) -> int:
    """Validate the worker process count."""
    if not _is_integer(n_jobs):
        raise InvalidParameterError(
            f"n_jobs must be an integer, got {type(n_jobs).__name__}"
        )
    if n_jobs < 1:
        raise InvalidParameterError(f"n_jobs must be at least 1, got {n_jobs}")
    return int(n_jobs)
