"""
Validation tests for arrangements, picks and run parameters.
"""

import numpy as np
import pytest

from montyhall.exceptions import (
    InvalidArrangementError,
    InvalidParameterError,
    InvalidPickError,
    MontyHallError,
)
from montyhall.validation import (
    MAX_TRIALS,
    validate_arrangement,
    validate_n_jobs,
    validate_n_trials,
    validate_pick,
    validate_seed,
)


class TestArrangementValidation:

    def test_normalizes_to_tuple(self):
        assert validate_arrangement([0, 1, 0]) == (0, 1, 0)
        assert validate_arrangement(np.array([0, 0, 1])) == (0, 0, 1)

    def test_numpy_values_become_python_ints(self):
        result = validate_arrangement(np.array([1, 0, 0], dtype=np.int8))
        assert all(type(v) is int for v in result)

    def test_wrong_length(self):
        with pytest.raises(InvalidArrangementError, match='exactly 3 doors'):
            validate_arrangement((0, 1))

    def test_two_cars(self):
        with pytest.raises(InvalidArrangementError, match='exactly one car'):
            validate_arrangement((1, 0, 1))


class TestPickValidation:

    @pytest.mark.parametrize('pick', [0, 1, 2, np.int64(2)])
    def test_valid(self, pick):
        assert validate_pick(pick) == int(pick)

    def test_message_names_parameter(self):
        with pytest.raises(InvalidPickError, match='final_pick'):
            validate_pick(5, name='final_pick')


class TestParameterValidation:

    def test_trials_bounds(self):
        assert validate_n_trials(1) == 1
        assert validate_n_trials(MAX_TRIALS) == MAX_TRIALS
        with pytest.raises(InvalidParameterError, match='must not exceed'):
            validate_n_trials(MAX_TRIALS + 1)
        with pytest.raises(InvalidParameterError, match='positive'):
            validate_n_trials(0)

    def test_trials_type(self):
        with pytest.raises(InvalidParameterError, match='integer'):
            validate_n_trials(1e6)
        with pytest.raises(InvalidParameterError):
            validate_n_trials(False)

    def test_seed(self):
        assert validate_seed(None) is None
        assert validate_seed(np.uint32(7)) == 7
        with pytest.raises(InvalidParameterError):
            validate_seed(-3)

    def test_n_jobs(self):
        assert validate_n_jobs(4) == 4
        with pytest.raises(InvalidParameterError):
            validate_n_jobs(0)


def test_exception_hierarchy():
    assert issubclass(InvalidArrangementError, InvalidParameterError)
    assert issubclass(InvalidPickError, InvalidParameterError)
    assert issubclass(InvalidParameterError, MontyHallError)
