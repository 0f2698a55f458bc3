"""
montyhall: Monte Carlo Validation of the Monty Hall Problem
============================================================

Empirically checks the two theoretical win probabilities of the Monty Hall
problem: staying with the initial door wins 1/3 of the time, switching after
the host opens a goat door wins 2/3 of the time.

Key Features
------------
- Explicit random streams: every draw comes from a ``numpy.random.Generator``
  built from a recorded seed, so any run can be reproduced
- Faithful host: the reveal is a genuine random draw among the goat doors
  the host is allowed to open
- Independent experiments: stay and switch trials never share draws
- Parallel runs: trials split across worker processes with independent
  child streams, tallies combined by summation
- Export: CSV table and a matplotlib bar chart

Main Components
---------------
simulate : function
    Run both experiments. See ``help(simulate)``.
SimulationResults : class
    Tallies with ``summary()``, ``to_csv()`` and ``plot()``.
ScenarioGenerator : class
    Draws arrangements and initial picks.
evaluate_stay, evaluate_switch : functions
    Outcome of one trial under each strategy.
Exception hierarchy : module
    Typed exceptions inheriting from ``MontyHallError``.

Quick Start
-----------
>>> from montyhall import simulate
>>> results = simulate(1_000_000, seed=2024)
>>> print(results.summary())
>>> results.switch_probability  # doctest: +SKIP
0.6668
"""

from .evaluation import (
    Strategy,
    SwitchTrial,
    evaluate_stay,
    evaluate_switch,
    goat_candidates,
    play_switch,
    reveal_door,
)
from .results import SimulationResults
from .scenario import ARRANGEMENTS, Arrangement, ScenarioGenerator
from .simulation import DEFAULT_N_TRIALS, partition_trials, run_trials, simulate

from .exceptions import (
    InvalidArrangementError,
    InvalidParameterError,
    InvalidPickError,
    MontyHallError,
    SimulationError,
    VisualizationError,
)
from .warnings_categories import (
    ConvergenceWarning,
    MontyHallWarning,
    SmallSampleWarning,
)

__all__ = [
    # Driver
    'simulate',
    'run_trials',
    'partition_trials',
    'DEFAULT_N_TRIALS',
    'SimulationResults',
    # Scenario generation
    'ScenarioGenerator',
    'Arrangement',
    'ARRANGEMENTS',
    # Trial evaluation
    'Strategy',
    'SwitchTrial',
    'evaluate_stay',
    'evaluate_switch',
    'goat_candidates',
    'play_switch',
    'reveal_door',
    # Exception classes
    'MontyHallError',
    'InvalidParameterError',
    'InvalidArrangementError',
    'InvalidPickError',
    'SimulationError',
    'VisualizationError',
    # Warning classes
    'MontyHallWarning',
    'SmallSampleWarning',
    'ConvergenceWarning',
]
