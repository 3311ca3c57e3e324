# Material, Beam, loads and analysis results (frozen dataclasses)

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Union


@dataclass(frozen=True)
class Material:
    """
    Beam material: a name plus a table of stiffness properties.

    properties maps a property symbol to its value, e.g.
    {"EI": 5000.0, "GA": 1.2e5}. The mapping is copied into a read-only
    view so a Material cannot change after construction.
    """
    name: str
    properties: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def EI(self) -> float:
        return self.properties["EI"]


@dataclass(frozen=True)
class Beam:
    """
    primary_span:   span 1 length (m)
    material:       stiffness properties
    secondary_span: span 2 length (m), ignored by single-span conditions
    """
    primary_span: float
    material: Material
    secondary_span: float = 0.0

    @property
    def total_length(self) -> float:
        return self.primary_span + self.secondary_span


@dataclass(frozen=True)
class TwoSpanLoad:
    """Uniform distributed load on each span of a two-span beam."""
    w1: float
    w2: float

    @classmethod
    def uniform(cls, w: float) -> "TwoSpanLoad":
        return cls(w1=w, w2=w)


@dataclass(frozen=True)
class Reactions:
    """Support reactions of a two-span beam and the interior support moment."""
    R1: float
    R2: float
    R3: float
    M1: float

    @property
    def total(self) -> float:
        return self.R1 + self.R2 + self.R3


@dataclass(frozen=True)
class Point:
    """A single evaluated sample."""
    x: float
    y: float


Load = Union[float, TwoSpanLoad]
Equation = Callable[[float], Point]


@dataclass(frozen=True)
class AnalysisResult:
    """Inputs of one analysis call bundled with the evaluator it produced."""
    beam: Beam
    load: Load
    equation: Equation
    quantity: str = ""
    condition: str = ""

    def __call__(self, x: float) -> Point:
        return self.equation(x)

    def sample(self, start: float, stop: float, step: float):
        from .sampling import sample
        return sample(self.equation, start, stop, step)
