# mini_beam/analysis.py
"""
ANALYSIS ENGINE: SUPPORT CONDITION DISPATCH
===========================================

Given a beam, a load and a support condition, return an AnalysisResult
whose `equation(x)` evaluates one quantity (deflection, bending moment or
shear force) at position x.

    result = get_deflection(beam, 10.0, "simply-supported")
    result.equation(2.0)          # Point(x=2.0, y=-...)

Supported conditions:
- "simply-supported"  single span, UDL            (simply_supported.py)
- "two-span-unequal"  two-span continuous, UDL    (two_span.py)

Any other condition raises InvalidCondition before anything is computed.
"""

import logging
from enum import Enum

from . import simply_supported, two_span
from .model import AnalysisResult, Beam

logger = logging.getLogger(__name__)


class InvalidCondition(ValueError):
    pass


class SupportCondition(str, Enum):
    SIMPLY_SUPPORTED = "simply-supported"
    TWO_SPAN_UNEQUAL = "two-span-unequal"

    @classmethod
    def parse(cls, value) -> "SupportCondition":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(c.value for c in cls)
            raise InvalidCondition(
                f"Invalid condition {value!r} (expected one of: {known})"
            ) from None


class Quantity(str, Enum):
    DEFLECTION = "deflection"
    BENDING_MOMENT = "bending-moment"
    SHEAR_FORCE = "shear-force"


def _simply_supported(beam, load, quantity):
    if quantity is Quantity.DEFLECTION:
        return simply_supported.deflection_equation(beam, load)
    if quantity is Quantity.BENDING_MOMENT:
        return simply_supported.bending_moment_equation(beam, load)
    return simply_supported.shear_force_equation(beam, load)


def _two_span_unequal(beam, load, quantity, j2):
    if quantity is Quantity.DEFLECTION:
        return two_span.deflection_equation(beam, load, j2=j2)
    if quantity is Quantity.BENDING_MOMENT:
        return two_span.bending_moment_equation(beam, load)
    return two_span.shear_force_equation(beam, load)


def analyze(beam: Beam, load, condition, quantity, j2: float = 1.0) -> AnalysisResult:
    """
    Build the evaluator for one quantity under one support condition.

    Parameters:
    -----------
    beam : Beam
    load : float or TwoSpanLoad
        Uniform distributed load. "two-span-unequal" also accepts a
        TwoSpanLoad(w1, w2) for different loads per span.
    condition : str or SupportCondition
    quantity : str or Quantity
    j2 : float
        Deflection scale factor (two-span deflection only)

    Raises:
    -------
    InvalidCondition
        If condition is not a supported support condition
    """
    condition = SupportCondition.parse(condition)
    quantity = Quantity(quantity)

    if condition is SupportCondition.SIMPLY_SUPPORTED:
        equation = _simply_supported(beam, load, quantity)
    elif condition is SupportCondition.TWO_SPAN_UNEQUAL:
        equation = _two_span_unequal(beam, load, quantity, j2)
    else:
        raise InvalidCondition(f"Invalid condition {condition!r}")

    logger.debug("Built %s equation for %s (load=%r)", quantity.value, condition.value, load)
    return AnalysisResult(
        beam=beam,
        load=load,
        equation=equation,
        quantity=quantity.value,
        condition=condition.value,
    )


def get_deflection(beam: Beam, load, condition, j2: float = 1.0) -> AnalysisResult:
    return analyze(beam, load, condition, Quantity.DEFLECTION, j2=j2)


def get_bending_moment(beam: Beam, load, condition) -> AnalysisResult:
    return analyze(beam, load, condition, Quantity.BENDING_MOMENT)


def get_shear_force(beam: Beam, load, condition) -> AnalysisResult:
    return analyze(beam, load, condition, Quantity.SHEAR_FORCE)
