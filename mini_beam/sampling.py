# mini_beam/sampling.py
"""
Sample an equation over a range of positions.

Evaluators are pure, so a range of x can be walked any number of times.
`sample()` returns a lazy, restartable iterable of Points; `to_series` and
`to_frame` collect the points into numpy arrays or a pandas DataFrame for
plotting and tabulation.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np
import pandas as pd

from .analysis import SupportCondition
from .model import Beam, Equation, Point


@dataclass(frozen=True)
class Samples:
    """Positions start, start+step, ... up to stop (inclusive when on the grid)."""
    equation: Equation
    start: float
    stop: float
    step: float

    def __post_init__(self):
        if not self.step > 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.stop < self.start:
            raise ValueError(f"stop ({self.stop}) must not be less than start ({self.start})")

    def __len__(self) -> int:
        # small tolerance so that e.g. 0..4 in steps of 0.1 includes 4.0
        return int(math.floor((self.stop - self.start) / self.step + 1e-9)) + 1

    def positions(self) -> np.ndarray:
        return self.start + self.step * np.arange(len(self), dtype=float)

    def __iter__(self) -> Iterator[Point]:
        for i in range(len(self)):
            yield self.equation(self.start + i * self.step)


@dataclass(frozen=True)
class Series:
    """Sampled (x[], y[]) arrays, the shape the plotting adapter consumes."""
    x: np.ndarray
    y: np.ndarray


def sample(equation: Equation, start: float, stop: float, step: float) -> Samples:
    return Samples(equation=equation, start=start, stop=stop, step=step)


def to_series(points: Iterable[Point]) -> Series:
    points = list(points)
    x = np.array([p.x for p in points], dtype=float)
    y = np.array([p.y for p in points], dtype=float)
    return Series(x=x, y=y)


def to_frame(points: Iterable[Point], y_name: str = "y") -> pd.DataFrame:
    series = to_series(points)
    return pd.DataFrame({"x": series.x, y_name: series.y})


def round_series(series: Series, decimals: int = 2) -> Series:
    """Round y values for display; the numeric core never rounds."""
    return Series(x=series.x, y=np.round(series.y, decimals))


def default_step(beam: Beam, condition, n_points: int = 41) -> float:
    """Step that spreads n_points samples over the loaded length of the beam."""
    if n_points < 2:
        raise ValueError(f"n_points must be at least 2, got {n_points}")
    condition = SupportCondition.parse(condition)
    if condition is SupportCondition.TWO_SPAN_UNEQUAL:
        length = beam.primary_span + beam.secondary_span
    else:
        length = beam.primary_span
    return length / (n_points - 1)
