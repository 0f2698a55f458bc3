"""
Demonstration: Sequential vs Parallel Runs

Runs the same experiment on one random stream and split across worker
processes, then shows how the observed win rates settle as the trial
count grows.
"""

import time

import pandas as pd
from montyhall import simulate


def compare_execution(n_trials=2_000_000, seed=2024, n_jobs=4):
    rows = []
    for jobs in (1, n_jobs):
        start = time.perf_counter()
        results = simulate(n_trials, seed=seed, n_jobs=jobs)
        elapsed = time.perf_counter() - start
        rows.append({
            'n_jobs': jobs,
            'stay': results.stay_probability,
            'switch': results.switch_probability,
            'seconds': round(elapsed, 2),
        })
    return pd.DataFrame(rows)


def growth_table(seed=7, sizes=(10_000, 100_000, 1_000_000)):
    frames = []
    for n in sizes:
        df = simulate(n, seed=seed).to_dataframe()
        frames.append(df[['strategy', 'trials', 'observed', 'deviation_pp']])
    return pd.concat(frames, ignore_index=True)


if __name__ == '__main__':
    print("=== Sequential vs parallel ===")
    print(compare_execution().to_string(index=False))
    print()
    print("=== Deviation from theory as N grows ===")
    print(growth_table().to_string(index=False))

    results = simulate(1_000_000, seed=1)
    results.plot(graph_options={'savefig': 'monty_hall.png'})
    print("\nSaved monty_hall.png")
