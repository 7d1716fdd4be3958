from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from beamcee.domain.loads import Load


class BeamType(str, Enum):
    SIMPLY_SUPPORTED = "simply-supported"
    CANTILEVER = "cantilever"
    FIXED = "fixed"


@dataclass(frozen=True)
class BeamDescription:
    """
    Entrada del motor, en unidades de usuario:
      - length [m]
      - elastic_modulus [MPa]
      - moment_of_inertia [mm4]
      - cargas en kN / kN/m
    Apoyos opcionales: por defecto 0 y length.
    """
    length: float
    elastic_modulus: float
    moment_of_inertia: float
    beam_type: BeamType
    loads: Tuple[Load, ...]
    left_support_position: Optional[float] = None
    right_support_position: Optional[float] = None

    @property
    def left_support(self) -> float:
        if self.left_support_position is None:
            return 0.0
        return float(self.left_support_position)

    @property
    def right_support(self) -> float:
        if self.right_support_position is None:
            return float(self.length)
        return float(self.right_support_position)


@dataclass(frozen=True)
class NormalizedBeam:
    """
    Misma viga en SI: E [Pa], I [m4], cargas en N o N/m.
    Los apoyos ya vienen resueltos (sin None).
    """
    length: float
    elastic_modulus: float
    moment_of_inertia: float
    beam_type: BeamType
    loads: Tuple[Load, ...]
    left_support: float
    right_support: float

    @property
    def EI(self) -> float:
        return self.elastic_modulus * self.moment_of_inertia

    def span_bounds(self) -> Tuple[float, float]:
        """
        Tramo considerado para reacciones y deformaciones.
        Voladizo: empotramiento en el apoyo izquierdo, extremo libre en length.
        """
        if self.beam_type == BeamType.CANTILEVER:
            return self.left_support, float(self.length)
        return self.left_support, self.right_support

    @property
    def span(self) -> float:
        lo, hi = self.span_bounds()
        return hi - lo
