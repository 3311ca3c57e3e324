"""
CATALOG: NAMED BEAM MATERIALS
=============================

A small library of beam materials so demos and the command line can refer to
"steel-ub-254x146x31" instead of repeating stiffness values.

Each entry is a Material whose properties hold:
- EI: flexural stiffness (kN·m²) = E × I of the member
- GA: shear stiffness (kN) = G × A of the member

ENGINEERING CONTEXT:
--------------------
- Steel UB 254x146x31: E = 210 GPa, I = 4413 cm⁴, A = 39.7 cm²
- Glulam GL24h 90x360: E = 11.5 GPa, I = b·d³/12, A = b·d
- Concrete C30/37 300x500 (uncracked): E = 33 GPa, I = b·d³/12, A = b·d

Stiffness here is in kN·m², the unit the simply supported equations expect.
The two-span equations take N·mm²; convert with units.kn_m2_to_n_mm2.
"""

from .model import Material


def _rectangle(E_kPa: float, G_kPa: float, b: float, d: float) -> dict:
    I = b * d**3 / 12
    A = b * d
    return {"EI": E_kPa * I, "GA": G_kPa * A}


STEEL_UB_254 = Material(
    name="steel-ub-254x146x31",
    properties={"EI": 210e6 * 4413e-8, "GA": 81e6 * 39.7e-4},
)

GLULAM_90x360 = Material(
    name="glulam-gl24h-90x360",
    properties=_rectangle(11.5e6, 0.65e6, 0.090, 0.360),
)

CONCRETE_300x500 = Material(
    name="concrete-c30-300x500",
    properties=_rectangle(33e6, 13.75e6, 0.300, 0.500),
)

MATERIALS = {m.name: m for m in (STEEL_UB_254, GLULAM_90x360, CONCRETE_300x500)}

DEFAULT_MATERIAL = STEEL_UB_254


def get_material(name: str) -> Material:
    try:
        return MATERIALS[name]
    except KeyError:
        raise KeyError(
            f"Unknown material {name!r}. Available: {sorted(MATERIALS)}"
        ) from None
