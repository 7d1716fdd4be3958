from __future__ import annotations

from enum import Enum

from beamcee.domain.beam import BeamType
from beamcee.domain.loads import Load, PointLoad, TriangularLoad, UniformLoad


class FormulaVariant(str, Enum):
    EXACT = "exact"                        # fórmula cerrada propia del par (apoyo, carga)
    FULL_SPAN = "full-span"                # distribuida uniforme en todo el tramo
    EQUIVALENT_POINT = "equivalent-point"  # resultante en el centroide + fórmula de puntual
    HYBRID = "hybrid"                      # exacta dentro de la carga, equivalente fuera


def covers_span(load: Load, span: float, tol: float) -> bool:
    """`load` en coordenadas locales; True si cubre [0, span]."""
    if isinstance(load, PointLoad):
        return False
    a, b = load.extent()
    return abs(a) <= tol and abs(b - span) <= tol


def formula_variant(beam_type: BeamType, load: Load, span: float, tol: float) -> FormulaVariant:
    """
    Rama de fórmula usada por reacciones/deformaciones para una carga ya
    localizada. El generador de pasos usa la misma selección.
    """
    if isinstance(load, PointLoad):
        return FormulaVariant.EXACT

    full = isinstance(load, UniformLoad) and covers_span(load, span, tol)

    if beam_type == BeamType.SIMPLY_SUPPORTED:
        if isinstance(load, TriangularLoad):
            return FormulaVariant.HYBRID
        return FormulaVariant.FULL_SPAN if full else FormulaVariant.EQUIVALENT_POINT

    if beam_type == BeamType.CANTILEVER:
        return FormulaVariant.FULL_SPAN if full else FormulaVariant.EXACT

    # biempotrada
    return FormulaVariant.FULL_SPAN if full else FormulaVariant.EQUIVALENT_POINT


def equivalent_point(load: Load) -> PointLoad:
    return PointLoad(magnitude=load.resultant(), position=load.centroid())
