# mini_beam/two_span.py
"""
TWO-SPAN CONTINUOUS BEAM WITH UNEQUAL SPANS
===========================================

A beam over three supports (A at x=0, B at x=L1, C at x=L1+L2) carrying a
uniform load w1 on span 1 and w2 on span 2. The beam is statically
indeterminate to the first degree; the interior support moment comes from
the three-moment (Clapeyron) equation with pinned ends (M_A = M_C = 0):

    2·M1·(L1 + L2) = -(w1·L1³ + w2·L2³) / 4

    M1 = -(w1·L1³ + w2·L2³) / (8·(L1 + L2))

Support reactions then follow from each span's moment equilibrium about the
interior support and from vertical equilibrium:

    R1 = M1/L1 + w1·L1/2
    R3 = M1/L2 + w2·L2/2
    R2 = w1·L1 + w2·L2 - R1 - R3

UNITS:
------
Spans in m, loads in kN/m, EI in N·mm² (converted to kN·m² internally).
Deflections are reported in mm and multiplied by the caller's scale factor j2.

SIGN CONVENTION:
----------------
Reactions upward positive, loads downward positive, sagging moment positive,
deflection negative when the beam sags.
"""

import logging
from numbers import Real

from .model import Beam, Point, Reactions, TwoSpanLoad
from .units import MM_PER_M, n_mm2_to_kn_m2

logger = logging.getLogger(__name__)


def as_two_span_load(load) -> TwoSpanLoad:
    """Normalise a scalar UDL or a TwoSpanLoad to a TwoSpanLoad."""
    if isinstance(load, TwoSpanLoad):
        return load
    if isinstance(load, Real):
        return TwoSpanLoad.uniform(float(load))
    raise TypeError(f"load must be a number or TwoSpanLoad, got {type(load)}")


def _spans(beam: Beam):
    L1 = beam.primary_span
    L2 = beam.secondary_span
    if L1 <= 0:
        raise ValueError(f"primary_span must be positive, got {L1}")
    if L2 <= 0:
        raise ValueError(f"secondary_span must be positive, got {L2}")
    return L1, L2


def support_reactions(beam: Beam, load) -> Reactions:
    """
    Solve the reactions of a two-span continuous beam.

    Parameters:
    -----------
    beam : Beam
        primary_span = L1, secondary_span = L2 (m)
    load : float or TwoSpanLoad
        A bare number loads both spans equally

    Returns:
    --------
    Reactions
        R1 (end support), R2 (interior support), R3 (far end support) in kN
        and the interior support moment M1 in kN·m (negative = hogging)
    """
    L1, L2 = _spans(beam)
    load = as_two_span_load(load)
    w1, w2 = load.w1, load.w2

    M1 = -(w2 * L2**3 + w1 * L1**3) / (8 * (L1 + L2))
    R1 = M1 / L1 + w1 * L1 / 2
    R3 = M1 / L2 + w2 * L2 / 2
    R2 = w1 * L1 + w2 * L2 - R1 - R3

    logger.debug(
        "Two-span reactions L1=%s L2=%s w1=%s w2=%s: R1=%.4f R2=%.4f R3=%.4f M1=%.4f",
        L1, L2, w1, w2, R1, R2, R3, M1,
    )
    return Reactions(R1=R1, R2=R2, R3=R3, M1=M1)


def deflection_equation(beam: Beam, load, j2: float = 1.0):
    """
    Build y(x) for the two-span beam.

    The elastic curve is written with Macaulay brackets <x - L1>:

        EI·y = R1·x³/6 - w1·x⁴/24 + w1·<x-L1>⁴/24
               + R2·<x-L1>³/6 - w2·<x-L1>⁴/24 + C1·x

    The w1 term is cancelled past L1 so span 1's load stops at the interior
    support. y(0) = 0 removes the constant term and y(L1) = 0 fixes
    C1 = -R1·L1²/6 + w1·L1³/24; y(L1+L2) = 0 then holds through the
    three-moment reactions.

    Parameters:
    -----------
    j2 : float
        Extra scale factor applied to the final deflection (1.0 = none)
    """
    L1, L2 = _spans(beam)
    L = L1 + L2
    load = as_two_span_load(load)
    w1, w2 = load.w1, load.w2
    EI = beam.material.properties["EI"]
    if EI <= 0:
        raise ValueError(f"EI must be positive, got {EI}")
    EI_kNm2 = n_mm2_to_kn_m2(EI)

    r = support_reactions(beam, load)
    R1, R2 = r.R1, r.R2
    C1 = -R1 * L1**2 / 6 + w1 * L1**3 / 24

    def equation(x: float) -> Point:
        y = 0.0
        if 0 <= x <= L1:
            EIy = R1 * x**3 / 6 - w1 * x**4 / 24 + C1 * x
            y = EIy / EI_kNm2 * MM_PER_M * j2
        elif L1 < x <= L:
            a = x - L1
            EIy = (
                R1 * x**3 / 6
                - w1 * x**4 / 24
                + w1 * a**4 / 24
                + R2 * a**3 / 6
                - w2 * a**4 / 24
                + C1 * x
            )
            y = EIy / EI_kNm2 * MM_PER_M * j2
        return Point(x=x, y=y)

    return equation


def bending_moment_equation(beam: Beam, load):
    """Build M(x) for the two-span beam (kN·m, sagging positive)."""
    L1, L2 = _spans(beam)
    L = L1 + L2
    load = as_two_span_load(load)
    w1, w2 = load.w1, load.w2
    r = support_reactions(beam, load)
    R1, R2 = r.R1, r.R2

    def equation(x: float) -> Point:
        M = 0.0
        if 0 < x <= L1:
            M = R1 * x - (w1 * x**2) / 2
        elif L1 < x <= L:
            x2 = x - L1
            M = R1 * x + R2 * x2 - (w1 * L1**2) / 2 - (w2 * x2**2) / 2
        return Point(x=x, y=M)

    return equation


def shear_force_equation(beam: Beam, load):
    """Build V(x) for the two-span beam (kN)."""
    L1, L2 = _spans(beam)
    L = L1 + L2
    load = as_two_span_load(load)
    w1, w2 = load.w1, load.w2
    r = support_reactions(beam, load)
    R1, R2, R3 = r.R1, r.R2, r.R3

    def equation(x: float) -> Point:
        V = 0.0
        if x == 0:
            V = R1
        elif 0 < x < L1:
            V = R1 - w1 * x
        elif x == L1:
            V = R1 - w1 * L1
        elif L1 < x <= L:
            V = R1 + R2 - w1 * L1 - w2 * (x - L1)
        elif x > L:
            V = R1 + R2 + R3 - w1 * L1 - w2 * L2
        return Point(x=x, y=V)

    return equation
