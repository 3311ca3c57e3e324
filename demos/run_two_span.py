# File: demos/run_two_span.py
"""
DEMO: TWO-SPAN CONTINUOUS BEAM WITH UNEQUAL SPANS
=================================================

A beam runs over three supports with spans of 4 m and 6 m. The spans carry
different uniform loads. The interior support makes the beam statically
indeterminate, so the reactions come from the three-moment equation.

We print:
- The support reactions and the interior support moment
- An equilibrium check (reactions balance the applied load)
- Deflection at the supports (should be zero)

Then plot the deflection, bending moment and shear force diagrams.

Usage:
  python demos/run_two_span.py
  python demos/run_two_span.py --out artifacts/two_span.png
"""

import argparse
import logging

import matplotlib.pyplot as plt

from mini_beam.catalog import GLULAM_90x360
from mini_beam.model import Beam, Material, TwoSpanLoad
from mini_beam.analysis import get_deflection
from mini_beam.sampling import to_frame
from mini_beam.two_span import support_reactions
from mini_beam.units import kn_m2_to_n_mm2
from mini_beam.viz import plot_beam_diagrams, save_figure


def main():
    parser = argparse.ArgumentParser(description='Two-span continuous beam demo')
    parser.add_argument('--out', help='Save the diagrams instead of showing them')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print("=" * 70)
    print("DEMO: TWO-SPAN CONTINUOUS BEAM, UNEQUAL SPANS")
    print("=" * 70)
    print()

    # ========================================================================
    # STEP 1: DEFINE THE PHYSICAL PROBLEM
    # ========================================================================
    L1, L2 = 4.0, 6.0
    load = TwoSpanLoad(w1=5.0, w2=8.0)  # kN/m

    # catalog stiffness is kN·m²; the two-span equations take N·mm²
    EI = kn_m2_to_n_mm2(GLULAM_90x360.EI)
    beam = Beam(primary_span=L1, secondary_span=L2,
                material=Material(GLULAM_90x360.name, {"EI": EI}))

    print(f"Spans:          L1 = {L1:.2f} m, L2 = {L2:.2f} m")
    print(f"Loads:          w1 = {load.w1:.2f} kN/m, w2 = {load.w2:.2f} kN/m")
    print(f"Material:       {GLULAM_90x360.name} (EI = {GLULAM_90x360.EI:.1f} kN·m²)")
    print()

    # ========================================================================
    # STEP 2: REACTIONS FROM THE THREE-MOMENT EQUATION
    # ========================================================================
    r = support_reactions(beam, load)
    total_load = load.w1 * L1 + load.w2 * L2

    print("STEP 2: Support reactions")
    print("-" * 70)
    print(f"R1 = {r.R1:8.3f} kN")
    print(f"R2 = {r.R2:8.3f} kN")
    print(f"R3 = {r.R3:8.3f} kN")
    print(f"M1 = {r.M1:8.3f} kN·m (interior support)")
    print(f"Equilibrium: ΣR = {r.total:.3f} kN, applied = {total_load:.3f} kN")
    print()

    # ========================================================================
    # STEP 3: DEFLECTED SHAPE
    # ========================================================================
    y = get_deflection(beam, load, "two-span-unequal")
    df = to_frame(y.sample(0.0, L1 + L2, 0.05), y_name="deflection_mm")
    worst = df.loc[df["deflection_mm"].idxmin()]

    print("STEP 3: Deflection")
    print("-" * 70)
    for x in (0.0, L1, L1 + L2):
        print(f"y({x:.1f}) = {y(x).y:.6f} mm (support)")
    print(f"Max sag: {worst['deflection_mm']:.3f} mm at x = {worst['x']:.2f} m")
    print()

    # ========================================================================
    # STEP 4: PLOT
    # ========================================================================
    fig = plot_beam_diagrams(beam, load, "two-span-unequal", n_points=201,
                             title="Two-Span Continuous Beam")
    if args.out:
        save_figure(fig, args.out)
        print(f"Saved: {args.out}")
    else:
        plt.show()


if __name__ == "__main__":
    main()
