from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _add_optional(a: Optional[float], b: Optional[float]) -> Optional[float]:
    if a is None and b is None:
        return None
    return (a or 0.0) + (b or 0.0)


@dataclass(frozen=True)
class Reactions:
    """
    Reacciones en N y N·m.
      - simplemente apoyada: R1, R2
      - voladizo: R1, M1 (M1 = F*brazo, magnitud del momento de empotramiento), R2 = 0
      - biempotrada: R1, R2, M1 (<= 0, negativo), M2 (>= 0), convención de tabla
    """
    R1: float = 0.0
    R2: float = 0.0
    M1: Optional[float] = None
    M2: Optional[float] = None

    def __add__(self, other: "Reactions") -> "Reactions":
        return Reactions(
            R1=self.R1 + other.R1,
            R2=self.R2 + other.R2,
            M1=_add_optional(self.M1, other.M1),
            M2=_add_optional(self.M2, other.M2),
        )

    def as_dict(self) -> Dict[str, float]:
        out = {"R1": self.R1, "R2": self.R2}
        if self.M1 is not None:
            out["M1"] = self.M1
        if self.M2 is not None:
            out["M2"] = self.M2
        return out


@dataclass(frozen=True)
class ResultPoint:
    x: float  # m
    y: float  # mm (deflexión) o grados (giro)


@dataclass(frozen=True)
class ResponseSummary:
    left_end: float
    right_end: float
    midspan: float
    max_value: float
    max_position: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "leftEnd": self.left_end,
            "rightEnd": self.right_end,
            "midspan": self.midspan,
            "maxValue": self.max_value,
            "maxPosition": self.max_position,
        }


@dataclass(frozen=True)
class CalculationStep:
    title: str
    description: str
    formula: Optional[str] = None
    result: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        out = {"title": self.title, "description": self.description}
        if self.formula is not None:
            out["formula"] = self.formula
        if self.result is not None:
            out["result"] = self.result
        return out


@dataclass(frozen=True)
class AnalysisResult:
    deflection: ResponseSummary        # mm
    slope: ResponseSummary             # grados
    deflection_points: List[ResultPoint]
    slope_points: List[ResultPoint]
    steps: List[CalculationStep]
    reactions: Reactions               # N, N·m
    notes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Forma camelCase que consume la capa de exportación."""
        return {
            "deflection": self.deflection.to_dict(),
            "slope": self.slope.to_dict(),
            "deflectionPoints": [{"x": p.x, "y": p.y} for p in self.deflection_points],
            "slopePoints": [{"x": p.x, "y": p.y} for p in self.slope_points],
            "steps": [s.to_dict() for s in self.steps],
            "reactions": self.reactions.as_dict(),
            "notes": list(self.notes),
        }
