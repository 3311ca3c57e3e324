# mini_beam - Closed-form beam analysis
"""
MINI-BEAM: Closed-Form Beam Deflection, Moment and Shear
========================================================

This package provides:
- Simply supported single-span beams under UDL
- Two-span continuous beams with unequal spans (three-moment equation)
- Sampling of the resulting equations into (x, y) series
- Plotting of the series with matplotlib

ARCHITECTURE:
-------------
    model.py              Material, Beam, TwoSpanLoad, Point, AnalysisResult
    catalog.py            Named materials
    units.py              Unit-conversion constants
    simply_supported.py   Single span equations
    two_span.py           Two-span reactions and equations
    analysis.py           Support condition dispatch (get_deflection, ...)
    sampling.py           Lazy sampling, numpy/pandas conversion
    viz.py                Plotting adapter
    cli.py                Command line front end
"""

import logging

from .model import Material, Beam, TwoSpanLoad, Reactions, Point, AnalysisResult
from .analysis import (
    InvalidCondition,
    SupportCondition,
    Quantity,
    analyze,
    get_deflection,
    get_bending_moment,
    get_shear_force,
)
from .two_span import support_reactions
from .sampling import sample, to_series, to_frame

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Material',
    'Beam',
    'TwoSpanLoad',
    'Reactions',
    'Point',
    'AnalysisResult',
    'InvalidCondition',
    'SupportCondition',
    'Quantity',
    'analyze',
    'get_deflection',
    'get_bending_moment',
    'get_shear_force',
    'support_reactions',
    'sample',
    'to_series',
    'to_frame',
]
