from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, List, Tuple, Union

# Término de Macaulay escalado: q(ξ) = c * <ξ - s>^p / p!   (p = -1 => delta)
SingularityTerm = Tuple[float, float, int]


@dataclass(frozen=True)
class PointLoad:
    """
    Carga puntual hacia abajo (+).
    magnitude: kN en BeamDescription, N en NormalizedBeam.
    """
    kind: ClassVar[str] = "point-load"

    magnitude: float
    position: float

    def extent(self) -> Tuple[float, float]:
        return self.position, self.position

    def resultant(self) -> float:
        return float(self.magnitude)

    def centroid(self) -> float:
        return float(self.position)

    def scaled(self, factor: float) -> "PointLoad":
        return replace(self, magnitude=float(self.magnitude) * factor)

    def shifted(self, dx: float) -> "PointLoad":
        return replace(self, position=float(self.position) + dx)

    def clip(self, lo: float, hi: float) -> List["Load"]:
        if self.position < lo or self.position > hi:
            return []
        return [self]

    def singularity_terms(self) -> List[SingularityTerm]:
        return [(float(self.magnitude), float(self.position), -1)]


@dataclass(frozen=True)
class UniformLoad:
    """Carga uniforme w sobre [start_position, end_position] (kN/m o N/m)."""
    kind: ClassVar[str] = "uniform-load"

    magnitude: float
    start_position: float
    end_position: float

    @property
    def width(self) -> float:
        return float(self.end_position) - float(self.start_position)

    def extent(self) -> Tuple[float, float]:
        return self.start_position, self.end_position

    def resultant(self) -> float:
        return float(self.magnitude) * self.width

    def centroid(self) -> float:
        return 0.5 * (float(self.start_position) + float(self.end_position))

    def scaled(self, factor: float) -> "UniformLoad":
        return replace(self, magnitude=float(self.magnitude) * factor)

    def shifted(self, dx: float) -> "UniformLoad":
        return replace(
            self,
            start_position=float(self.start_position) + dx,
            end_position=float(self.end_position) + dx,
        )

    def clip(self, lo: float, hi: float) -> List["Load"]:
        a = max(float(self.start_position), lo)
        b = min(float(self.end_position), hi)
        if a >= b:
            return []
        if a == self.start_position and b == self.end_position:
            return [self]
        return [replace(self, start_position=a, end_position=b)]

    def singularity_terms(self) -> List[SingularityTerm]:
        w = float(self.magnitude)
        return [
            (w, float(self.start_position), 0),
            (-w, float(self.end_position), 0),
        ]


@dataclass(frozen=True)
class TriangularLoad:
    """
    Carga triangular: intensidad 0 en start_position y `magnitude` en end_position.
    Resultante = w*c/2 aplicada a c/3 del extremo mayor.
    """
    kind: ClassVar[str] = "triangular-load"

    magnitude: float
    start_position: float
    end_position: float

    @property
    def width(self) -> float:
        return float(self.end_position) - float(self.start_position)

    def extent(self) -> Tuple[float, float]:
        return self.start_position, self.end_position

    def intensity_at(self, x: float) -> float:
        return float(self.magnitude) * (x - float(self.start_position)) / self.width

    def resultant(self) -> float:
        return float(self.magnitude) * self.width / 2.0

    def centroid(self) -> float:
        return float(self.end_position) - self.width / 3.0

    def scaled(self, factor: float) -> "TriangularLoad":
        return replace(self, magnitude=float(self.magnitude) * factor)

    def shifted(self, dx: float) -> "TriangularLoad":
        return replace(
            self,
            start_position=float(self.start_position) + dx,
            end_position=float(self.end_position) + dx,
        )

    def clip(self, lo: float, hi: float) -> List["Load"]:
        """
        Recorte exacto: el tramo que queda es un trapecio = uniforme + triangular.
        """
        a = max(float(self.start_position), lo)
        b = min(float(self.end_position), hi)
        if a >= b:
            return []
        if a == self.start_position and b == self.end_position:
            return [self]

        q_a = self.intensity_at(a)
        q_b = self.intensity_at(b)
        out: List[Load] = []
        if q_a > 0.0:
            out.append(UniformLoad(magnitude=q_a, start_position=a, end_position=b))
        out.append(TriangularLoad(magnitude=q_b - q_a, start_position=a, end_position=b))
        return out

    def singularity_terms(self) -> List[SingularityTerm]:
        w = float(self.magnitude)
        k = w / self.width
        a = float(self.start_position)
        b = float(self.end_position)
        # rampa desde a, rampa opuesta desde b y escalón -w en b
        return [(k, a, 1), (-k, b, 1), (-w, b, 0)]


Load = Union[PointLoad, UniformLoad, TriangularLoad]
