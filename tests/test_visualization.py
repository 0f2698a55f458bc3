import builtins

import matplotlib
matplotlib.use('Agg')
import pandas as pd
import pytest

from montyhall import SimulationResults, VisualizationError
from montyhall.visualization import plot_results


def _results():
    return SimulationResults(
        {'stay_wins': 3_340, 'switch_wins': 6_650},
        {'n_trials': 10_000, 'seed': 1, 'n_jobs': 1},
    )


def test_plot_elements_and_savefig(tmp_path):
    out = tmp_path / 'chart.png'
    fig = _results().plot(graph_options={'dpi': 80, 'savefig': str(out)})
    ax = fig.axes[0]

    assert [t.get_text() for t in ax.get_xticklabels()] == ['stay', 'switch']
    assert ax.get_title() == 'Monty Hall: 10000 trials per strategy'
    assert len(ax.patches) == 4
    assert out.exists()


def test_missing_columns():
    with pytest.raises(VisualizationError, match='missing required columns'):
        plot_results(pd.DataFrame({'strategy': ['stay']}))


def test_missing_matplotlib(monkeypatch):
    real_import = builtins.__import__

    def fake_import(name, *args, **kwargs):
        if name.startswith('matplotlib'):
            raise ImportError(name)
        return real_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, '__import__', fake_import)
    with pytest.raises(VisualizationError, match='matplotlib'):
        _results().plot()
