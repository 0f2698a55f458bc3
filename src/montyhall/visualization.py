"""
Visualization module for the montyhall package.

Provides a bar chart comparing observed and theoretical win rates.
"""

from typing import Optional

import numpy as np
import pandas as pd

from .exceptions import VisualizationError

_REQUIRED_COLUMNS = ('strategy', 'observed', 'theoretical')


def plot_results(
    summary_df: pd.DataFrame,
    n_trials: Optional[int] = None,
    graph_options: Optional[dict] = None,
):
    """
    Generate plot from a results table

    Parameters
    ----------
    summary_df : pd.DataFrame
        Output of ``SimulationResults.to_dataframe()``.
    n_trials : int, optional
        Trial count shown in the default title.
    graph_options : dict, optional
        'figsize', 'title', 'ylabel', 'legend_loc', 'dpi', 'savefig'

    Returns
    -------
    matplotlib.Figure
        Generated figure
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.ticker import PercentFormatter
    except Exception as exc:
        raise VisualizationError(
            'Install required dependencies: matplotlib>=3.3.'
        ) from exc

    missing = [c for c in _REQUIRED_COLUMNS if c not in summary_df.columns]
    if missing:
        raise VisualizationError(f"Plot data missing required columns: {missing}")

    opts = {
        'figsize': (8, 5),
        'title': f"Monty Hall: {n_trials} trials per strategy" if n_trials else None,
        'ylabel': 'Win rate',
        'legend_loc': 'upper left',
        'dpi': 100,
        'savefig': None,
    }
    if graph_options:
        opts.update(graph_options)

    labels = summary_df['strategy'].tolist()
    observed = summary_df['observed'].to_numpy(dtype=float)
    theoretical = summary_df['theoretical'].to_numpy(dtype=float)
    x = np.arange(len(labels))
    width = 0.35

    fig, ax = plt.subplots(figsize=opts['figsize'], dpi=opts['dpi'])

    bars = ax.bar(x - width / 2, observed, width, color='tab:blue', label='Observed')
    ax.bar(x + width / 2, theoretical, width, color='tab:gray', alpha=0.7, label='Theoretical')
    ax.bar_label(bars, labels=[f"{p:.2%}" for p in observed], padding=2)

    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_ylim(0, 1)
    ax.set_ylabel(opts['ylabel'])
    ax.yaxis.set_major_formatter(PercentFormatter(xmax=1.0))

    if opts['title']:
        ax.set_title(opts['title'])

    ax.legend(loc=opts['legend_loc'], frameon=True)
    fig.tight_layout()

    if opts['savefig']:
        fig.savefig(opts['savefig'], dpi=opts['dpi'])

    return fig
