# File: tests/test_two_span.py
"""
TEST: TWO-SPAN CONTINUOUS BEAM WITH UNEQUAL SPANS
==================================================

Reactions come from the three-moment equation. We check them against the
textbook two-equal-span case (3wL/8, 10wL/8, 3wL/8), then verify:

1. Equilibrium: R1 + R2 + R3 = w1·L1 + w2·L2
2. Compatibility: deflection is zero at all three supports
3. Continuity of the bending moment at the interior support
4. Shear steps by R2 at the interior support and closes to zero past the end
"""

import numpy as np
import pytest

from mini_beam.model import Beam, Material, TwoSpanLoad
from mini_beam import two_span
from mini_beam.units import MM_PER_M, N_MM2_PER_KN_M2


EI_KNM2 = 5000.0
EI = EI_KNM2 * N_MM2_PER_KN_M2  # two-span stiffness is given in N·mm²


def make_beam(L1=4.0, L2=6.0, ei=EI):
    return Beam(primary_span=L1, secondary_span=L2,
                material=Material("test", {"EI": ei}))


def test_equal_spans_textbook_reactions():
    """
    Two equal spans L under UDL w:
    - End reactions: 3wL/8
    - Interior reaction: 10wL/8
    - Interior support moment: -wL²/8 (hogging)
    """
    L, w = 4.0, 10.0
    r = two_span.support_reactions(make_beam(L, L), w)

    assert np.isclose(r.R1, 3 * w * L / 8)   # 15 kN
    assert np.isclose(r.R2, 10 * w * L / 8)  # 50 kN
    assert np.isclose(r.R3, 3 * w * L / 8)
    assert np.isclose(r.M1, -w * L**2 / 8)   # -20 kN·m
    print(f"✓ Reactions: R1={r.R1:.2f}, R2={r.R2:.2f}, R3={r.R3:.2f} kN")


def test_unequal_spans_reactions():
    """
    L1 = 4, L2 = 6, w = 10:
    M1 = -(10·216 + 10·64) / (8·10) = -35
    R1 = -35/4 + 20 = 11.25
    R3 = -35/6 + 30 = 24.1667
    R2 = 100 - R1 - R3 = 64.5833
    """
    r = two_span.support_reactions(make_beam(), 10.0)

    assert np.isclose(r.M1, -35.0)
    assert np.isclose(r.R1, 11.25)
    assert np.isclose(r.R3, 30.0 - 35.0 / 6.0)
    assert np.isclose(r.R2, 100.0 - 11.25 - (30.0 - 35.0 / 6.0))


def test_scalar_load_matches_uniform_two_span_load():
    beam = make_beam()
    assert two_span.support_reactions(beam, 7.5) == two_span.support_reactions(
        beam, TwoSpanLoad.uniform(7.5)
    )


@pytest.mark.parametrize("load", [10.0, TwoSpanLoad(5.0, 8.0), TwoSpanLoad(12.0, 0.0)])
def test_reactions_satisfy_vertical_equilibrium(load):
    """Sum of reactions equals the total applied load."""
    beam = make_beam()
    load = two_span.as_two_span_load(load)
    r = two_span.support_reactions(beam, load)

    total_load = load.w1 * beam.primary_span + load.w2 * beam.secondary_span
    assert np.isclose(r.total, total_load, rtol=1e-12)


@pytest.mark.parametrize("load", [10.0, TwoSpanLoad(5.0, 8.0)])
def test_deflection_zero_at_supports(load):
    """
    Compatibility: the beam cannot move at any of its three supports.
    y(L1+L2) = 0 only holds if the three-moment reactions are right.
    """
    L1, L2 = 4.0, 6.0
    y = two_span.deflection_equation(make_beam(L1, L2), load)

    assert y(0.0).y == 0.0
    assert np.isclose(y(L1).y, 0.0, atol=1e-9)
    assert np.isclose(y(L1 + L2).y, 0.0, atol=1e-9)
    print("✓ Deflection vanishes at all three supports")


def test_deflection_zero_outside_beam():
    y = two_span.deflection_equation(make_beam(), 10.0)
    assert y(-0.5).y == 0.0
    assert y(10.5).y == 0.0


def test_equal_spans_max_deflection():
    """
    Two equal spans under UDL: maximum sag is wL⁴/(184.6EI) at x = 0.4215L.
    Stiffness is converted N·mm² → kN·m² and the result reported in mm.
    """
    L, w = 4.0, 10.0
    y = two_span.deflection_equation(make_beam(L, L), w)

    xs = np.linspace(0.0, L, 2001)
    ys = np.array([y(x).y for x in xs])

    delta_expected = -0.0054161 * w * L**4 / EI_KNM2 * MM_PER_M
    assert np.isclose(ys.min(), delta_expected, rtol=1e-3)
    assert np.isclose(xs[np.argmin(ys)], 0.4215 * L, atol=2e-3 * L)


def test_equal_spans_deflection_is_symmetric():
    L = 5.0
    y = two_span.deflection_equation(make_beam(L, L), 10.0)
    for x in np.linspace(0.0, L, 11):
        assert np.isclose(y(x).y, y(2 * L - x).y, atol=1e-9)


def test_j2_scales_deflection():
    beam = make_beam()
    y1 = two_span.deflection_equation(beam, 10.0)
    y2 = two_span.deflection_equation(beam, 10.0, j2=2.5)
    for x in (1.0, 3.3, 7.0):
        assert np.isclose(y2(x).y, 2.5 * y1(x).y)


def test_bending_moment_values():
    """
    Span 1: M = R1·x - w1·x²/2
    Span 2: M = R1·x + R2·(x-L1) - w1·L1²/2 - w2·(x-L1)²/2
    Zero at x = 0 and beyond the far support.
    """
    L1, L2 = 4.0, 6.0
    load = TwoSpanLoad(5.0, 8.0)
    r = two_span.support_reactions(make_beam(L1, L2), load)
    M = two_span.bending_moment_equation(make_beam(L1, L2), load)

    assert M(0.0).y == 0.0
    assert np.isclose(M(2.0).y, r.R1 * 2.0 - 5.0 * 4.0 / 2)

    x = 7.0
    x2 = x - L1
    expected = r.R1 * x + r.R2 * x2 - 5.0 * L1**2 / 2 - 8.0 * x2**2 / 2
    assert np.isclose(M(x).y, expected)

    assert M(L1 + L2 + 0.1).y == 0.0
    assert M(-1.0).y == 0.0


def test_bending_moment_continuous_at_interior_support():
    """
    Both segment formulas give the same moment at x = L1, and that value is
    the interior support moment M1 from the three-moment equation.
    """
    L1 = 4.0
    beam = make_beam(L1, 6.0)
    load = TwoSpanLoad(5.0, 8.0)
    r = two_span.support_reactions(beam, load)
    M = two_span.bending_moment_equation(beam, load)

    assert np.isclose(M(L1).y, r.M1)
    assert np.isclose(M(L1 + 1e-9).y, M(L1).y, atol=1e-6)
    print(f"✓ Moment continuous at interior support: {r.M1:.3f} kN·m")


def test_shear_force_values():
    L1, L2 = 4.0, 6.0
    beam = make_beam(L1, L2)
    r = two_span.support_reactions(beam, 10.0)
    V = two_span.shear_force_equation(beam, 10.0)

    assert np.isclose(V(0.0).y, r.R1)
    assert np.isclose(V(2.0).y, r.R1 - 20.0)
    assert np.isclose(V(L1).y, r.R1 - 40.0)
    assert np.isclose(V(5.0).y, r.R1 + r.R2 - 40.0 - 10.0)
    # just left of the far support the shear equals -R3
    assert np.isclose(V(L1 + L2).y, -r.R3)
    assert V(-1.0).y == 0.0


def test_shear_force_second_span_reachable():
    """Positions strictly between the interior and far support use span 2's formula."""
    L1, L2 = 4.0, 6.0
    beam = make_beam(L1, L2)
    r = two_span.support_reactions(beam, 10.0)
    V = two_span.shear_force_equation(beam, 10.0)

    jump = V(L1 + 1e-9).y - V(L1).y
    assert np.isclose(jump, r.R2, atol=1e-6), "Shear should jump by R2 at the interior support"


def test_shear_force_beyond_far_support_is_zero():
    """All reactions and loads included: the free body is in equilibrium."""
    V = two_span.shear_force_equation(make_beam(), TwoSpanLoad(5.0, 8.0))
    assert np.isclose(V(11.0).y, 0.0, atol=1e-9)


def test_results_are_full_precision_floats():
    V = two_span.shear_force_equation(make_beam(), 10.0)
    p = V(1.0 / 3.0)
    assert isinstance(p.y, float)
    assert p.y != round(p.y, 2)


def test_invalid_inputs():
    with pytest.raises(ValueError, match="secondary_span must be positive"):
        two_span.support_reactions(make_beam(4.0, 0.0), 10.0)

    with pytest.raises(ValueError, match="primary_span must be positive"):
        two_span.shear_force_equation(make_beam(-4.0, 6.0), 10.0)

    with pytest.raises(ValueError, match="EI must be positive"):
        two_span.deflection_equation(make_beam(ei=0.0), 10.0)

    with pytest.raises(TypeError):
        two_span.support_reactions(make_beam(), "10")
