"""
Monte Carlo Simulation Module

Runs independent Monty Hall trials for the stay and switch strategies,
tallies wins, and packages the tallies as SimulationResults. Trials can be
split across worker processes, each with its own child random stream.

"""

import logging
import multiprocessing as mp
import warnings
from typing import List, Optional, Tuple

import numpy as np

from .evaluation import Strategy, _play_switch
from .exceptions import MontyHallError, SimulationError
from .results import SimulationResults
from .scenario import ScenarioGenerator
from .validation import validate_n_jobs, validate_n_trials, validate_seed
from .warnings_categories import ConvergenceWarning, SmallSampleWarning

logger = logging.getLogger('montyhall')

DEFAULT_N_TRIALS = 10_000_000

# Below this many trials the observed rates are reported with a warning.
MIN_RELIABLE_TRIALS = 10_000

# Convergence is checked only for runs at least this large.
CONVERGENCE_MIN_TRIALS = 1_000_000
CONVERGENCE_TOLERANCE = 0.5  # percentage points


def run_trials(strategy: Strategy, n_trials: int, rng: np.random.Generator) -> int:
    """
    Run independent trials of one strategy and count the wins.

    Every trial draws a fresh arrangement and initial pick from *rng*; the
    switch strategy additionally draws the host's reveal from *rng*.

    Parameters
    ----------
    strategy : Strategy or {'stay', 'switch'}
        Strategy to play.
    n_trials : int
        Number of trials.
    rng : numpy.random.Generator
        Random stream, consumed sequentially.

    Returns
    -------
    int
        Number of trials won.
    """
    strategy = Strategy(strategy)
    n_trials = validate_n_trials(n_trials)
    generator = ScenarioGenerator(rng)

    wins = 0
    if strategy is Strategy.STAY:
        for _ in range(n_trials):
            arrangement, initial_pick = generator.draw()
            wins += arrangement[initial_pick]
    else:
        for _ in range(n_trials):
            arrangement, initial_pick = generator.draw()
            wins += _play_switch(arrangement, initial_pick, rng).outcome
    return wins


def partition_trials(n_trials: int, n_jobs: int) -> List[int]:
    """
    Split *n_trials* into at most *n_jobs* non-empty chunks.

    Chunk sizes differ by at most one and sum to *n_trials*.

    >>> partition_trials(10, 3)
    [4, 3, 3]
    """
    n_trials = validate_n_trials(n_trials)
    n_jobs = min(validate_n_jobs(n_jobs), n_trials)
    base, extra = divmod(n_trials, n_jobs)
    return [base + (1 if i < extra else 0) for i in range(n_jobs)]


def _run_chunk(task: Tuple[int, np.random.SeedSequence]) -> Tuple[int, int]:
    """Worker entry point: stay then switch trials on one child stream."""
    n_trials, seed_seq = task
    rng = np.random.default_rng(seed_seq)
    stay_wins = run_trials(Strategy.STAY, n_trials, rng)
    switch_wins = run_trials(Strategy.SWITCH, n_trials, rng)
    return stay_wins, switch_wins


def simulate(
    n_trials: int = DEFAULT_N_TRIALS,
    seed: Optional[int] = None,
    n_jobs: int = 1,
) -> SimulationResults:
    """
    Estimate the stay and switch win rates by Monte Carlo simulation.

    Runs *n_trials* independent stay trials and, with separate random
    draws, *n_trials* independent switch trials.

    Parameters
    ----------
    n_trials : int, default 10_000_000
        Trials per strategy.
    seed : int, optional
        Seed of the root random stream. If not specified, a seed is drawn
        from OS entropy and recorded on the results so the run can be
        reproduced.
    n_jobs : int, default 1
        Worker processes. With 1, a single stream is consumed by the stay
        loop and then the switch loop. With more, trials are partitioned
        across workers, each seeded with a child of
        ``numpy.random.SeedSequence(seed)``, and partial tallies are summed.

    Returns
    -------
    SimulationResults
        Tallies and observed win rates.

    Raises
    ------
    InvalidParameterError
        If *n_trials*, *seed* or *n_jobs* is invalid.
    SimulationError
        If a trial loop or worker process fails.

    Warns
    -----
    SmallSampleWarning
        If *n_trials* is below ``MIN_RELIABLE_TRIALS``.
    ConvergenceWarning
        If a run of at least ``CONVERGENCE_MIN_TRIALS`` trials lands more
        than ``CONVERGENCE_TOLERANCE`` percentage points from theory.

    Examples
    --------
    >>> results = simulate(1_000_000, seed=12345)
    >>> print(results.summary())  # doctest: +SKIP
    Monty Hall Problem Proof
    Experimenting with 1000000 Trials
    ...
    """
    n_trials = validate_n_trials(n_trials)
    seed = validate_seed(seed)
    n_jobs = validate_n_jobs(n_jobs)

    actual_seed = seed if seed is not None else int(np.random.SeedSequence().entropy)

    if n_trials < MIN_RELIABLE_TRIALS:
        warnings.warn(
            f"Only {n_trials} trials per strategy; observed win rates may lie far "
            f"from 33.33%/66.66%. Use at least {MIN_RELIABLE_TRIALS} trials.",
            SmallSampleWarning,
            stacklevel=2
        )

    logger.info(
        "Running %d trials per strategy (seed=%d, n_jobs=%d)",
        n_trials, actual_seed, n_jobs,
    )

    try:
        if n_jobs == 1:
            rng = np.random.default_rng(actual_seed)
            stay_wins = run_trials(Strategy.STAY, n_trials, rng)
            switch_wins = run_trials(Strategy.SWITCH, n_trials, rng)
        else:
            stay_wins, switch_wins = _simulate_parallel(n_trials, actual_seed, n_jobs)
    except MontyHallError:
        raise
    except Exception as exc:
        raise SimulationError(
            f"Simulation aborted after a {type(exc).__name__}: {exc}"
        ) from exc

    logger.info("stay: %d/%d wins, switch: %d/%d wins",
                stay_wins, n_trials, switch_wins, n_trials)

    results = SimulationResults(
        {'stay_wins': stay_wins, 'switch_wins': switch_wins},
        {'n_trials': n_trials, 'seed': actual_seed, 'n_jobs': n_jobs},
    )

    if n_trials >= CONVERGENCE_MIN_TRIALS:
        for strategy in Strategy:
            deviation = results.deviation(strategy)
            if abs(deviation) > CONVERGENCE_TOLERANCE:
                warnings.warn(
                    f"Observed {strategy.value} win rate "
                    f"{results.probability(strategy):.2%} deviates "
                    f"{deviation:+.2f} percentage points from "
                    f"{strategy.theoretical_probability:.2%} over {n_trials} trials.",
                    ConvergenceWarning,
                    stacklevel=2
                )

    return results


def _simulate_parallel(n_trials: int, seed: int, n_jobs: int) -> Tuple[int, int]:
    chunks = partition_trials(n_trials, n_jobs)
    children = np.random.SeedSequence(seed).spawn(len(chunks))
    tasks = list(zip(chunks, children))
    logger.debug("Partitioned %d trials into chunks %s", n_trials, chunks)

    with mp.Pool(processes=len(tasks)) as pool:
        partials = pool.map(_run_chunk, tasks)

    totals = np.sum(np.asarray(partials, dtype=np.int64), axis=0)
    return int(totals[0]), int(totals[1])
