"""
Cumulative emissions chart: ICE and BEV curves against distance.

Renders to PNG with matplotlib on the Agg backend. Figures are built
with the object API (no pyplot state), so concurrent requests do not
share a current figure.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import io

import numpy as np
import matplotlib
matplotlib.use('Agg')
from matplotlib.figure import Figure

from emissions.records import BreakEvenStatus

ICE_COLOR = '#fd7e14'
BEV_COLOR = '#20c997'
BREAK_EVEN_COLOR = '#dc3545'

DEFAULT_SIZE = (8.0, 5.0)  # inches
DEFAULT_DPI = 100


def _padded_range(values, frac):
    """(lo, hi) widened by frac of the span, never below zero."""
    lo = float(np.min(values))
    hi = float(np.max(values))
    span = hi - lo
    if span == 0:
        span = abs(hi) or 1.0
    return max(0.0, lo - span * frac), hi + span * frac


def build_figure(result, size=DEFAULT_SIZE, dpi=DEFAULT_DPI):
    """
    Build the emissions chart for a CalculationResult.

    Parameters
    ----------
    result : CalculationResult
    size : tuple of float
        Figure size in inches.
    dpi : int
        Output resolution.

    Returns
    -------
    matplotlib.figure.Figure
    """
    distances = np.asarray([row.distance for row in result.series], dtype=float)
    e_ice = np.asarray([row.e_ice for row in result.series], dtype=float)
    e_bev = np.asarray([row.e_bev for row in result.series], dtype=float)

    fig = Figure(figsize=size, dpi=dpi)
    ax = fig.add_subplot(1, 1, 1)

    ax.plot(distances, e_ice, '-o', color=ICE_COLOR, lw=2.5, ms=4, label='ICE')
    ax.plot(distances, e_bev, '-o', color=BEV_COLOR, lw=2.5, ms=4, label='BEV')

    x_lo, x_hi = _padded_range(distances, 0.05)

    # Marker only inside the plotted range; far-off text breaks layout
    d_star = result.break_even_distance
    if (result.break_even_status is BreakEvenStatus.FINITE
            and x_lo <= d_star <= x_hi):
        ax.axvline(d_star, color=BREAK_EVEN_COLOR, lw=1.5, ls='--')
        ax.annotate('Break-even: {:,.0f} km'.format(d_star),
                    xy=(d_star, 1.0), xycoords=('data', 'axes fraction'),
                    xytext=(0, 4), textcoords='offset points',
                    ha='center', va='bottom', fontsize=9,
                    color=BREAK_EVEN_COLOR)

    ax.set_xlim(x_lo, x_hi)
    ax.set_ylim(*_padded_range(np.concatenate([e_ice, e_bev]), 0.10))
    ax.set_xlabel('Distance (km)')
    ax.set_ylabel('Cumulative CO2 emissions (kgCO2e)')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper left')
    fig.tight_layout()
    return fig


def render_png(result, size=DEFAULT_SIZE, dpi=DEFAULT_DPI):
    """Return the chart as PNG bytes."""
    fig = build_figure(result, size=size, dpi=dpi)
    buf = io.BytesIO()
    fig.savefig(buf, format='png')
    return buf.getvalue()
