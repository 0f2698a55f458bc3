"""
Warning category hierarchy for the montyhall package.

Provides structured warning categories for the simulation, enabling
selective filtering via Python's standard ``warnings.filterwarnings()``
mechanism. All warning classes inherit from :class:`MontyHallWarning`,
which itself inherits from :class:`UserWarning`.

Examples
--------
Suppress only small-sample warnings while keeping others visible:

>>> import warnings
>>> from montyhall import SmallSampleWarning
>>> warnings.filterwarnings('ignore', category=SmallSampleWarning)
"""


class MontyHallWarning(UserWarning):
    """
    Base warning class for all montyhall package warnings.

    Because ``MontyHallWarning`` inherits from ``UserWarning``, existing
    calls to ``warnings.filterwarnings('ignore', category=UserWarning)``
    will continue to suppress montyhall warnings.
    """
    pass


class SmallSampleWarning(MontyHallWarning):
    """
    Warning raised when the trial count is too small for the observed
    win rates to be a meaningful estimate of the theoretical ones.
    """
    pass


class ConvergenceWarning(MontyHallWarning):
    """
    Warning raised when a large run fails to converge.

    Triggered when, over at least one million trials, an observed win
    rate lies further than the convergence tolerance from its
    theoretical value. Expected only with vanishing probability; a
    repeated occurrence points to a biased random source.
    """
    pass
