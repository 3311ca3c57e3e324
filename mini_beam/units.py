# unit-conversion constants used by the closed-form equations

# Lengths are entered in metres, deflections are reported in millimetres.
MM_PER_M = 1000.0

# Two-span stiffness is entered in N·mm² and converted to kN·m²:
# 1 N·mm² = 1e-3 kN × 1e-6 m² = 1e-9 kN·m²
N_MM2_PER_KN_M2 = 1e9


def n_mm2_to_kn_m2(EI: float) -> float:
    """Convert a flexural stiffness from N·mm² to kN·m²."""
    return EI / N_MM2_PER_KN_M2


def kn_m2_to_n_mm2(EI: float) -> float:
    """Convert a flexural stiffness from kN·m² to N·mm²."""
    return EI * N_MM2_PER_KN_M2
