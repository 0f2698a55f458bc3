"""
Exception Classes Module

Defines exception hierarchy for the montyhall package.
"""


class MontyHallError(Exception):
    """
    Base exception class for all montyhall package errors.

    All custom exceptions in the montyhall package inherit from this class,
    allowing users to catch any montyhall-specific error with:

        try:
            results = simulate(...)
        except MontyHallError as e:
            # Handle any montyhall error
            print(f"montyhall error: {e}")
    """
    pass


class InvalidParameterError(MontyHallError):
    """
    Exception raised when input parameter validation fails.

    Common triggers include:

    - Trial count that is not a positive integer or exceeds ``MAX_TRIALS``
    - Seed that is negative or not an integer
    - Worker count (``n_jobs``) below 1

    See Also
    --------
    InvalidArrangementError : For malformed prize arrangements.
    InvalidPickError : For door indices outside the three doors.
    """
    pass


class InvalidArrangementError(InvalidParameterError):
    """
    Exception raised when an arrangement is not a valid prize placement.

    An arrangement must hold exactly three binary values with exactly one 1
    (the car).

    Examples
    --------
    >>> evaluate_stay((1, 1, 0), 0)  # doctest: +SKIP
    InvalidArrangementError: arrangement must contain exactly one car, got (1, 1, 0)

    See Also
    --------
    montyhall.validation.validate_arrangement : Function that performs this check.
    """
    pass


class InvalidPickError(InvalidParameterError):
    """
    Exception raised when a door index is outside ``[0, 3)``.

    See Also
    --------
    montyhall.validation.validate_pick : Function that performs this check.
    """
    pass


class SimulationError(MontyHallError):
    """
    Exception raised when a trial loop aborts.

    Trigger conditions include:

    - The random source raising while drawing
    - A worker process failing during a parallel run

    The original exception is chained as ``__cause__``.

    See Also
    --------
    montyhall.simulation.simulate : Driver that raises this error.
    """
    pass


class VisualizationError(MontyHallError):
    """
    Exception raised for visualization-related errors.

    Trigger conditions include:

    - Missing plotting backend (matplotlib not installed)

    Examples
    --------
    >>> results.plot()  # in an environment without matplotlib installed  # doctest: +SKIP
    VisualizationError: Install required dependencies: matplotlib>=3.3.

    See Also
    --------
    montyhall.visualization.plot_results : Function that generates plots.
    montyhall.results.SimulationResults.plot : Method that calls plot_results.
    """
    pass
