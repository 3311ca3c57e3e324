import matplotlib.pyplot as plt

from mini_beam.model import Beam, Material
from mini_beam.analysis import get_deflection, get_bending_moment, get_shear_force
from mini_beam.simply_supported import max_deflection
from mini_beam.viz import plot_beam_diagrams


def main():
    """
    VISUAL DEMONSTRATION OF SIMPLY SUPPORTED BEAM UNDER UDL
    =======================================================
    Evaluate the closed-form equations at the supports and midspan,
    compare against textbook values, then draw the three diagrams.
    """

    # ========================================================================
    # SETUP
    # ========================================================================
    L = 4.0      # Beam length (m)
    EI = 5000.0  # Flexural stiffness (kN·m²)
    w = 10.0     # Uniform load (kN/m), downward

    beam = Beam(primary_span=L, material=Material("demo", {"EI": EI}))

    y = get_deflection(beam, w, "simply-supported").equation
    M = get_bending_moment(beam, w, "simply-supported").equation
    V = get_shear_force(beam, w, "simply-supported").equation

    # ========================================================================
    # PRINT RESULTS
    # ========================================================================
    print("Simply Supported Beam - Uniform Distributed Load")
    print("=" * 50)
    print(f"Left support shear (kN):    {V(0.0).y:.2f}")
    print(f"Right support shear (kN):   {V(L).y:.2f}")
    print(f"Midspan moment (kN·m):      {M(L / 2).y:.2f}")
    print(f"Midspan deflection (mm):    {y(L / 2).y:.3f}")
    print()
    print("Expected (from textbook):")
    print(f"Reactions: {w * L / 2:.2f} kN each (each support takes half)")
    print(f"Max moment: {w * L**2 / 8:.2f} kN·m")
    print(f"Max deflection: {max_deflection(beam, w):.3f} mm")

    # ========================================================================
    # DRAW THE PICTURE
    # ========================================================================
    plot_beam_diagrams(beam, w, "simply-supported", n_points=81,
                       title="Simply Supported Beam - UDL")
    plt.show()


if __name__ == "__main__":
    main()
