# mini_beam/simply_supported.py
"""
SIMPLY SUPPORTED BEAM WITH UNIFORM DISTRIBUTED LOAD
===================================================

Closed-form Euler–Bernoulli results for a single span L resting on two
pinned supports and carrying a uniform load w over its full length:

- Deflection:      y(x) = -(w·x / 24EI)·(L³ - 2Lx² + x³)
- Bending moment:  M(x) = -(w·x / 2)·(L - x)
- Shear force:     V(x) = w·(L/2 - x)

SIGN CONVENTION:
----------------
- w > 0: load acting downward
- Deflection is negative when the beam sags
- Moments are negative under sagging (hogging positive)

UNITS:
------
L in m, w in kN/m, EI in kN·m². Deflection is reported in millimetres.

Every quantity is zero outside 0 ≤ x ≤ L.
"""

import logging
from numbers import Real

from .model import Beam, Point, TwoSpanLoad
from .units import MM_PER_M

logger = logging.getLogger(__name__)


def _span(beam: Beam) -> float:
    L = beam.primary_span
    if L <= 0:
        raise ValueError(f"primary_span must be positive, got {L}")
    return L


def _stiffness(beam: Beam) -> float:
    EI = beam.material.properties["EI"]
    if EI <= 0:
        raise ValueError(f"EI must be positive, got {EI}")
    return EI


def _scalar_load(load) -> float:
    if isinstance(load, TwoSpanLoad):
        raise TypeError(
            f"simply-supported analysis takes a single UDL value, got {load!r}"
        )
    if not isinstance(load, Real):
        raise TypeError(f"load must be a number, got {type(load)}")
    return float(load)


def deflection_equation(beam: Beam, load: float):
    """
    Build y(x) for a simply supported beam under UDL.

    Parameters:
    -----------
    beam : Beam
        Uses primary_span (m) and material.properties["EI"] (kN·m²)
    load : float
        Uniform distributed load w (kN/m, downward positive)

    Returns:
    --------
    Callable[[float], Point]
        Evaluator returning the deflection in mm at position x (m)
    """
    L = _span(beam)
    w = _scalar_load(load)
    EI = _stiffness(beam)

    def equation(x: float) -> Point:
        y = 0.0
        if 0 <= x <= L:
            y = -((w * x) / (24 * EI)) * (L**3 - 2 * L * x**2 + x**3) * MM_PER_M
        return Point(x=x, y=y)

    return equation


def bending_moment_equation(beam: Beam, load: float):
    """Build M(x) for a simply supported beam under UDL (kN·m)."""
    L = _span(beam)
    w = _scalar_load(load)

    def equation(x: float) -> Point:
        M = 0.0
        if 0 <= x <= L:
            M = -((w * x) / 2) * (L - x)
        return Point(x=x, y=M)

    return equation


def shear_force_equation(beam: Beam, load: float):
    """Build V(x) for a simply supported beam under UDL (kN)."""
    L = _span(beam)
    w = _scalar_load(load)

    def equation(x: float) -> Point:
        V = 0.0
        if 0 <= x <= L:
            V = w * ((L / 2) - x)
        return Point(x=x, y=V)

    return equation


def max_deflection(beam: Beam, load: float) -> float:
    """Midspan deflection 5wL⁴/(384EI) in mm (negative = sag)."""
    L = _span(beam)
    w = _scalar_load(load)
    EI = _stiffness(beam)
    delta = -5 * w * L**4 / (384 * EI) * MM_PER_M
    logger.debug("Simply supported max deflection: L=%s w=%s EI=%s -> %s mm", L, w, EI, delta)
    return delta
