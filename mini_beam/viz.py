"""
VISUALIZATION: PLOTTING ANALYSIS RESULTS
========================================

PURPOSE:
--------
Draw sampled (x[], y[]) series as charts. The numeric core returns full
precision values; this module is where values are rounded for display.

- plot_series():        one series onto one axes (line, bar or scatter)
- plot_beam_diagrams(): deflection, bending moment and shear force for one
                        beam, stacked in a single figure
- save_figure():        write a figure to disk and release it

PLOT OPTIONS:
-------------
    type     chart kind               default 'line'
    label    legend entry             default 'Analysis Result'
    color    stroke color             default 'blue'
    x_label  x axis title             default 'Position (x)'
    y_label  y axis title             default 'Value (y)'
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import matplotlib.pyplot as plt

from .analysis import Quantity, analyze
from .config import CONFIG
from .model import Beam
from .sampling import Series, default_step, round_series, to_series

logger = logging.getLogger(__name__)

CHART_TYPES = ('line', 'bar', 'scatter')

COLORS = {
    'deflection': '#2C3E50',       # Dark blue-gray
    'bending-moment': '#E74C3C',   # Coral red
    'shear-force': '#27AE60',      # Green
    'baseline': '#7F8C8D',         # Gray
    'support': '#8B7355',          # Earth brown
}

AXIS_LABELS = {
    'deflection': 'Deflection (mm)',
    'bending-moment': 'Bending moment (kN·m)',
    'shear-force': 'Shear force (kN)',
}


@dataclass(frozen=True)
class PlotOptions:
    type: str = 'line'
    label: str = 'Analysis Result'
    color: str = 'blue'
    x_label: str = 'Position (x)'
    y_label: str = 'Value (y)'

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, str]]) -> "PlotOptions":
        """
        Build options from a plain mapping. Missing keys keep their defaults;
        'xLabel' and 'yLabel' are accepted as aliases of x_label and y_label.
        """
        if not options:
            return cls()
        aliases = {'xLabel': 'x_label', 'yLabel': 'y_label'}
        values = {aliases.get(k, k): v for k, v in options.items() if v is not None}
        unknown = set(values) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown plot options: {sorted(unknown)}")
        return cls(**values)


def plot_series(series: Series, options=None, ax=None, decimals: Optional[int] = None):
    """
    Draw a sampled series.

    Parameters:
    -----------
    series : Series
        x and y arrays of equal length
    options : PlotOptions or mapping, optional
    ax : matplotlib Axes, optional
        Caller-owned axes to draw into; a new figure is created when omitted
    decimals : int, optional
        Round y values before drawing

    Returns:
    --------
    matplotlib Axes
    """
    if not isinstance(options, PlotOptions):
        options = PlotOptions.from_mapping(options)
    if options.type not in CHART_TYPES:
        raise ValueError(f"Unknown chart type {options.type!r}. Expected one of {CHART_TYPES}")
    if len(series.x) != len(series.y):
        raise ValueError(f"x and y lengths differ ({len(series.x)} != {len(series.y)})")

    if decimals is not None:
        series = round_series(series, decimals)

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 4))

    if options.type == 'line':
        ax.plot(series.x, series.y, color=options.color, linewidth=2, label=options.label)
    elif options.type == 'bar':
        width = (series.x[1] - series.x[0]) * 0.8 if len(series.x) > 1 else 0.8
        ax.bar(series.x, series.y, width=width, color=options.color, label=options.label)
    else:
        ax.scatter(series.x, series.y, color=options.color, s=12, label=options.label)

    ax.set_xlabel(options.x_label)
    ax.set_ylabel(options.y_label)
    ax.grid(True, alpha=0.3, linestyle='--')
    ax.legend(loc='best', fontsize=9, framealpha=0.9)
    return ax


def plot_beam_diagrams(
    beam: Beam,
    load,
    condition,
    n_points: Optional[int] = None,
    j2: float = 1.0,
    title: Optional[str] = None,
    step: Optional[float] = None,
):
    """
    Plot deflection, bending moment and shear force diagrams for one beam.

    Supports are marked on every axes with triangles at x = 0, L1 (and
    L1 + L2 for the two-span condition).

    step, when given, sets the sample spacing directly and n_points is
    ignored.

    Returns:
    --------
    matplotlib Figure
    """
    if step is None:
        step = default_step(beam, condition, n_points or CONFIG.default_n_points)

    fig, axes = plt.subplots(3, 1, figsize=CONFIG.figure_size, sharex=True)

    results = [analyze(beam, load, condition, q, j2=j2) for q in Quantity]
    supports = [0.0, beam.primary_span]
    if results[0].condition == 'two-span-unequal':
        supports.append(beam.primary_span + beam.secondary_span)
    stop = supports[-1]

    for ax, result in zip(axes, results):
        series = to_series(result.sample(0.0, stop, step))
        options = PlotOptions(
            label=result.quantity.replace('-', ' ').capitalize(),
            color=COLORS[result.quantity],
            x_label='Position x (m)',
            y_label=AXIS_LABELS[result.quantity],
        )
        plot_series(series, options, ax=ax, decimals=CONFIG.display_decimals)
        ax.fill_between(series.x, series.y, 0.0, color=options.color, alpha=0.15)
        ax.axhline(0.0, color=COLORS['baseline'], linewidth=1)
        ax.plot(supports, [0.0] * len(supports), '^', color=COLORS['support'],
                markersize=10, zorder=3)
        logger.debug("Plotted %s with %d points", result.quantity, len(series.x))

    # label only the bottom axes since x is shared
    for ax in axes[:-1]:
        ax.set_xlabel('')

    fig.suptitle(title or f"{results[0].condition} beam, load = {load}", fontweight='bold')
    fig.tight_layout()
    return fig


def save_figure(fig, outpath: str, dpi: int = 150):
    os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
    fig.savefig(outpath, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
    logger.info("Saved figure to %s", outpath)
