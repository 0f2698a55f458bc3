"""
Results Container Module

Defines the SimulationResults class for storing, displaying, and exporting
simulation tallies.

"""

from typing import Any, Dict, Optional

import pandas as pd

from .evaluation import Strategy

TITLE = "Monty Hall Problem Proof"

# Printed verbatim; the switch figure is truncated rather than rounded.
THEORETICAL_DISPLAY = {
    Strategy.STAY: "33.33%",
    Strategy.SWITCH: "66.66%",
}


class SimulationResults:
    """
    Container for simulate() tallies

    All attributes are read-only properties. Observed probabilities are
    derived from the win tallies and are never stored separately.

    Attributes
    ----------
    n_trials : int
        Trials run per strategy.
    stay_wins, switch_wins : int
        Number of trials won with each strategy.
    stay_probability, switch_probability : float
        Observed win rates, ``wins / n_trials``.
    stay_loss_probability, switch_loss_probability : float
        Observed loss rates, ``1 - wins / n_trials``.
    seed : int or None
        Seed of the root random stream.
    n_jobs : int
        Number of worker processes used.

    Methods
    -------
    summary() : str
        Six-line text report.
    to_dataframe() : pd.DataFrame
        One row per strategy.
    to_csv(path) : None
        Exports to_dataframe() to CSV.
    plot() : matplotlib.Figure
        Bar chart of observed versus theoretical win rates.

    Examples
    --------
    >>> from montyhall import simulate
    >>> results = simulate(100_000, seed=42)
    >>> print(results.summary())
    >>> results.to_csv('monty_hall.csv')
    """

    def __init__(self, results_dict: Dict[str, Any], metadata: Dict[str, Any]):
        """
        Initialize results object

        Parameters:
            results_dict: Win tallies keyed by 'stay_wins' and 'switch_wins'
            metadata: Run parameters 'n_trials', 'seed' and 'n_jobs'
        """
        self._n_trials = int(metadata['n_trials'])
        self._seed = metadata.get('seed')
        self._n_jobs = int(metadata.get('n_jobs', 1))
        self._wins = {
            Strategy.STAY: int(results_dict['stay_wins']),
            Strategy.SWITCH: int(results_dict['switch_wins']),
        }
        for strategy, wins in self._wins.items():
            if not 0 <= wins <= self._n_trials:
                raise ValueError(
                    f"{strategy.value} wins must lie in [0, {self._n_trials}], got {wins}"
                )

    @property
    def n_trials(self) -> int:
        return self._n_trials

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    @property
    def n_jobs(self) -> int:
        return self._n_jobs

    @property
    def stay_wins(self) -> int:
        return self._wins[Strategy.STAY]

    @property
    def switch_wins(self) -> int:
        return self._wins[Strategy.SWITCH]

    @property
    def stay_probability(self) -> float:
        """Observed stay win rate"""
        return self.probability(Strategy.STAY)

    @property
    def switch_probability(self) -> float:
        """Observed switch win rate"""
        return self.probability(Strategy.SWITCH)

    @property
    def stay_loss_probability(self) -> float:
        return self.loss_probability(Strategy.STAY)

    @property
    def switch_loss_probability(self) -> float:
        return self.loss_probability(Strategy.SWITCH)

    def wins(self, strategy: Strategy) -> int:
        return self._wins[Strategy(strategy)]

    def losses(self, strategy: Strategy) -> int:
        return self._n_trials - self.wins(strategy)

    def probability(self, strategy: Strategy) -> float:
        return self.wins(strategy) / self._n_trials

    def loss_probability(self, strategy: Strategy) -> float:
        # Complement form keeps win + loss rate exactly 1.0 in floating point.
        return 1.0 - self.probability(strategy)

    def deviation(self, strategy: Strategy) -> float:
        """Observed minus theoretical win rate, in percentage points."""
        strategy = Strategy(strategy)
        return (self.probability(strategy) - strategy.theoretical_probability) * 100

    def summary(self) -> str:
        """
        Formatted results summary

        Title, trial count, the two theoretical rates and the two observed
        rates, one per line.
        """
        output = [
            TITLE,
            f"Experimenting with {self.n_trials} Trials",
            "Theoretical probability for winning without switching: "
            f"{THEORETICAL_DISPLAY[Strategy.STAY]}",
            "Theoretical probability for winning with switching: "
            f"{THEORETICAL_DISPLAY[Strategy.SWITCH]}",
            f"Probability of winning without switching: {self.stay_probability * 100:.2f}%",
            f"Probability of winning with switching: {self.switch_probability * 100:.2f}%",
        ]
        return "\n".join(output)

    def __str__(self) -> str:
        return self.summary()

    def __repr__(self) -> str:
        return (
            f"SimulationResults(n_trials={self.n_trials}, stay_wins={self.stay_wins}, "
            f"switch_wins={self.switch_wins}, seed={self.seed}, n_jobs={self.n_jobs})"
        )

    def to_dataframe(self) -> pd.DataFrame:
        rows = []
        for strategy in Strategy:
            rows.append({
                'strategy': strategy.value,
                'trials': self.n_trials,
                'wins': self.wins(strategy),
                'losses': self.losses(strategy),
                'observed': self.probability(strategy),
                'theoretical': strategy.theoretical_probability,
                'deviation_pp': self.deviation(strategy),
            })
        df = pd.DataFrame(rows)
        df.attrs['seed'] = self.seed
        df.attrs['n_jobs'] = self.n_jobs
        return df

    def to_csv(self, path: str):
        self.to_dataframe().to_csv(path, index=False)

    def plot(self, graph_options: Optional[dict] = None):
        """
        Bar chart of observed versus theoretical win rates

        Parameters
        ----------
        graph_options : dict, optional
            Passed to ``plot_results``; 'savefig' writes the figure to disk.

        Returns
        -------
        matplotlib.figure.Figure
        """
        from .visualization import plot_results

        return plot_results(
            self.to_dataframe(), n_trials=self.n_trials, graph_options=graph_options
        )
