"""
Simulation driver tests.

Reproducibility, independence of the two experiments, parallel
partitioning, warnings, error wrapping, and the law-of-large-numbers
convergence of both win rates.
"""

import logging
import warnings

import numpy as np
import pytest

from montyhall import (
    ConvergenceWarning,
    InvalidParameterError,
    SimulationError,
    SimulationResults,
    SmallSampleWarning,
    Strategy,
    partition_trials,
    run_trials,
    simulate,
)
from montyhall import simulation
from montyhall.simulation import _run_chunk

from conftest import FailingSource, FixedSource


class TestRunTrials:

    def test_fixed_zero_source(self):
        # Car behind door 0, pick 0, host opens door 1: stay always wins,
        # switch always loses.
        assert run_trials(Strategy.STAY, 25, FixedSource(0)) == 25
        assert run_trials(Strategy.SWITCH, 25, FixedSource(0)) == 0

    def test_stay_draws_two_per_trial_switch_three(self):
        stay_source, switch_source = FixedSource(0), FixedSource(0)
        run_trials('stay', 10, stay_source)
        run_trials('switch', 10, switch_source)
        assert len(stay_source.calls) == 20
        assert len(switch_source.calls) == 30

    def test_wins_bounded(self, rng):
        wins = run_trials(Strategy.SWITCH, 1000, rng)
        assert 0 <= wins <= 1000

    def test_reproducible(self):
        a = run_trials(Strategy.SWITCH, 2000, np.random.default_rng(5))
        b = run_trials(Strategy.SWITCH, 2000, np.random.default_rng(5))
        assert a == b

    def test_rejects_bad_count(self, rng):
        with pytest.raises(InvalidParameterError):
            run_trials(Strategy.STAY, 0, rng)


class TestPartition:

    @pytest.mark.parametrize('n_trials,n_jobs,expected', [
        (10, 3, [4, 3, 3]),
        (9, 3, [3, 3, 3]),
        (2, 4, [1, 1]),
        (5, 1, [5]),
    ])
    def test_partition(self, n_trials, n_jobs, expected):
        assert partition_trials(n_trials, n_jobs) == expected

    def test_partition_sums_to_total(self):
        chunks = partition_trials(1_000_003, 8)
        assert sum(chunks) == 1_000_003
        assert max(chunks) - min(chunks) <= 1


class TestSimulate:

    def test_returns_results(self):
        results = simulate(20_000, seed=1)
        assert isinstance(results, SimulationResults)
        assert results.n_trials == 20_000
        assert results.seed == 1
        assert results.n_jobs == 1

    def test_same_seed_same_tallies(self):
        a = simulate(20_000, seed=99)
        b = simulate(20_000, seed=99)
        assert (a.stay_wins, a.switch_wins) == (b.stay_wins, b.switch_wins)

    def test_different_seeds_differ(self):
        a = simulate(20_000, seed=1)
        b = simulate(20_000, seed=2)
        assert (a.stay_wins, a.switch_wins) != (b.stay_wins, b.switch_wins)

    def test_sequential_stream_consumed_by_stay_then_switch(self):
        n = 5_000
        rng = np.random.default_rng(123)
        stay = run_trials(Strategy.STAY, n, rng)
        switch = run_trials(Strategy.SWITCH, n, rng)
        with warnings.catch_warnings():
            warnings.simplefilter('ignore', SmallSampleWarning)
            results = simulate(n, seed=123)
        assert (results.stay_wins, results.switch_wins) == (stay, switch)

    def test_experiments_use_distinct_draws(self):
        # Replaying the stay draws for the switch loop would make
        # switch_wins == n - stay_wins in every run.
        complementary = 0
        for seed in range(20):
            r = simulate(10_000, seed=seed)
            complementary += r.switch_wins == r.n_trials - r.stay_wins
        assert complementary < 5

    def test_unseeded_run_records_seed(self):
        results = simulate(10_000)
        assert isinstance(results.seed, int)
        replay = simulate(10_000, seed=results.seed)
        assert (replay.stay_wins, replay.switch_wins) == (results.stay_wins, results.switch_wins)

    def test_loss_rates_complement(self):
        results = simulate(12_345, seed=8)
        for strategy in Strategy:
            assert results.probability(strategy) + results.loss_probability(strategy) == 1

    def test_logs_tallies(self, caplog):
        with caplog.at_level(logging.INFO, logger='montyhall'):
            simulate(10_000, seed=4)
        assert 'Running 10000 trials per strategy' in caplog.text
        assert 'stay:' in caplog.text


class TestParallel:

    def test_parallel_tallies_are_sum_of_chunks(self):
        n, seed, jobs = 30_000, 77, 3
        results = simulate(n, seed=seed, n_jobs=jobs)
        children = np.random.SeedSequence(seed).spawn(jobs)
        partials = [_run_chunk(task) for task in zip(partition_trials(n, jobs), children)]
        assert results.stay_wins == sum(p[0] for p in partials)
        assert results.switch_wins == sum(p[1] for p in partials)
        assert results.n_jobs == jobs

    def test_parallel_reproducible(self):
        a = simulate(20_000, seed=5, n_jobs=2)
        b = simulate(20_000, seed=5, n_jobs=2)
        assert (a.stay_wins, a.switch_wins) == (b.stay_wins, b.switch_wins)

    def test_more_jobs_than_trials(self):
        with warnings.catch_warnings():
            warnings.simplefilter('ignore', SmallSampleWarning)
            results = simulate(3, seed=0, n_jobs=8)
        assert results.n_trials == 3


class TestWarningsAndErrors:

    def test_small_sample_warning(self):
        with pytest.warns(SmallSampleWarning, match='Only 100 trials'):
            simulate(100, seed=0)

    def test_no_warning_for_adequate_sample(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            simulate(10_000, seed=0)

    def test_convergence_warning_on_biased_run(self, monkeypatch):
        monkeypatch.setattr(simulation, 'run_trials', lambda strategy, n, rng: n // 2)
        with pytest.warns(ConvergenceWarning) as record:
            simulate(1_000_000, seed=0)
        assert len(record) == 2

    @pytest.mark.parametrize('kwargs', [
        {'n_trials': 0},
        {'n_trials': -5},
        {'n_trials': 1.5},
        {'n_trials': True},
        {'n_trials': 2**63},
        {'n_trials': 10, 'seed': -1},
        {'n_trials': 10, 'seed': 'abc'},
        {'n_trials': 10, 'n_jobs': 0},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(InvalidParameterError):
            simulate(**kwargs)

    def test_random_source_failure_wrapped(self, monkeypatch):
        monkeypatch.setattr(simulation.np.random, 'default_rng',
                            lambda seed=None: FailingSource(n_ok=10))
        with pytest.raises(SimulationError, match='RuntimeError') as excinfo:
            simulate(10_000, seed=0)
        assert isinstance(excinfo.value.__cause__, RuntimeError)


@pytest.mark.slow
def test_law_of_large_numbers():
    results = simulate(1_000_000, seed=2024, n_jobs=4)
    assert abs(results.stay_probability * 100 - 33.33) < 0.5
    assert abs(results.switch_probability * 100 - 66.66) < 0.5
    assert abs(results.deviation(Strategy.STAY)) < 0.5
    assert abs(results.deviation(Strategy.SWITCH)) < 0.5
