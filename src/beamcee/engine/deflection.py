"""
Deflexión δ(x) [m, + hacia abajo] y giro θ(x) = dδ/dx [rad].

Cada par (tipo de viga, tipo de carga) tiene su fórmula cerrada (doble
integración de M/EI, equivalente a viga conjugada). Las cargas se superponen
sumando. Todas las fórmulas trabajan en coordenadas locales del tramo:
u = x - apoyo izquierdo, S = luz.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple

from beamcee.domain.beam import BeamType, NormalizedBeam
from beamcee.domain.loads import Load, PointLoad, TriangularLoad, UniformLoad
from beamcee.engine.normalize import BeamLike, as_normalized, localized_loads
from beamcee.engine.reactions import fixed_end_full_uniform, fixed_end_point
from beamcee.engine.settings import DEFAULT_SETTINGS, AnalysisSettings
from beamcee.engine.singularity import DEFLECTION, SLOPE, load_effect
from beamcee.engine.variants import FormulaVariant, equivalent_point, formula_variant

logger = logging.getLogger(__name__)

Response = Tuple[float, float]  # (deflexión, giro)
Formula = Callable[[Load, float, float, float, float], Response]


# -------------------------
# Simplemente apoyada
# -------------------------
def _ss_point(P: float, a: float, u: float, S: float, EI: float) -> Response:
    """Tabla de vigas: puntual P a distancia a, b = S - a."""
    b = S - a
    k = 6.0 * EI * S
    if u <= a:
        d = P * b * u * (S * S - b * b - u * u) / k
        t = P * b * (S * S - b * b - 3.0 * u * u) / k
    else:
        v = S - u
        d = P * a * v * (S * S - a * a - v * v) / k
        t = -P * a * (S * S - a * a - 3.0 * v * v) / k
    return d, t


def _ss_full_uniform(w: float, u: float, S: float, EI: float) -> Response:
    d = w * u * (S ** 3 - 2.0 * S * u * u + u ** 3) / (24.0 * EI)
    t = w * (S ** 3 - 6.0 * S * u * u + 4.0 * u ** 3) / (24.0 * EI)
    return d, t


def _ss_integrated(load: Load, u: float, S: float, EI: float) -> Response:
    """
    Integración exacta de EI δ'' = -(R1 u - Mq(u)) con δ(0) = δ(S) = 0.
    """
    R1 = load.resultant() * (S - load.centroid()) / S
    C1 = (R1 * S ** 3 / 6.0 - load_effect(load, S, DEFLECTION)) / S
    d = (-R1 * u ** 3 / 6.0 + load_effect(load, u, DEFLECTION) + C1 * u) / EI
    t = (-R1 * u * u / 2.0 + load_effect(load, u, SLOPE) + C1) / EI
    return d, t


def ss_point(load: Load, u: float, S: float, EI: float, tol: float) -> Response:
    return _ss_point(load.resultant(), load.centroid(), u, S, EI)


def ss_uniform(load: Load, u: float, S: float, EI: float, tol: float) -> Response:
    variant = formula_variant(BeamType.SIMPLY_SUPPORTED, load, S, tol)
    if variant == FormulaVariant.FULL_SPAN:
        return _ss_full_uniform(float(load.magnitude), u, S, EI)
    return _ss_point(load.resultant(), load.centroid(), u, S, EI)


def ss_triangular(load: Load, u: float, S: float, EI: float, tol: float) -> Response:
    """Exacta dentro de [inicio, fin] de la carga; puntual equivalente fuera."""
    a, b = load.extent()
    if a <= u <= b:
        return _ss_integrated(load, u, S, EI)
    return _ss_point(load.resultant(), load.centroid(), u, S, EI)


# -------------------------
# Voladizo (empotrado en u = 0)
# -------------------------
def cantilever_point(load: Load, u: float, S: float, EI: float, tol: float) -> Response:
    P = load.resultant()
    a = load.centroid()
    if u <= a:
        d = P * u * u * (3.0 * a - u) / (6.0 * EI)
        t = P * u * (2.0 * a - u) / (2.0 * EI)
    else:
        # tramo descargado: recta tangente
        d = P * a * a * (3.0 * u - a) / (6.0 * EI)
        t = P * a * a / (2.0 * EI)
    return d, t


def cantilever_distributed(load: Load, u: float, S: float, EI: float, tol: float) -> Response:
    """
    EI δ'' = -M = M1 - R1 u + Mq(u), con δ(0) = θ(0) = 0,
    R1 = F y M1 = F * centroide. Más allá del fin de la carga M = 0.
    """
    R1 = load.resultant()
    M1 = R1 * load.centroid()
    d = (M1 * u * u / 2.0 - R1 * u ** 3 / 6.0 + load_effect(load, u, DEFLECTION)) / EI
    t = (M1 * u - R1 * u * u / 2.0 + load_effect(load, u, SLOPE)) / EI
    return d, t


# -------------------------
# Biempotrada
# -------------------------
def _fixed_moment_area(load: Load, R1: float, M1: float, u: float, EI: float) -> Response:
    """EI δ'' = -(R1 u + M1 - Mq(u)), con δ(0) = θ(0) = 0."""
    d = (-(M1 * u * u / 2.0 + R1 * u ** 3 / 6.0) + load_effect(load, u, DEFLECTION)) / EI
    t = (-(M1 * u + R1 * u * u / 2.0) + load_effect(load, u, SLOPE)) / EI
    return d, t


def fixed_point(load: Load, u: float, S: float, EI: float, tol: float) -> Response:
    R = fixed_end_point(load.resultant(), load.centroid(), S)
    return _fixed_moment_area(load, R.R1, R.M1, u, EI)


def fixed_distributed(load: Load, u: float, S: float, EI: float, tol: float) -> Response:
    variant = formula_variant(BeamType.FIXED, load, S, tol)
    if variant == FormulaVariant.FULL_SPAN:
        R = fixed_end_full_uniform(float(load.magnitude), S)
        return _fixed_moment_area(load, R.R1, R.M1, u, EI)
    return fixed_point(equivalent_point(load), u, S, EI, tol)


FORMULAS: Dict[Tuple[BeamType, str], Formula] = {
    (BeamType.SIMPLY_SUPPORTED, PointLoad.kind): ss_point,
    (BeamType.SIMPLY_SUPPORTED, UniformLoad.kind): ss_uniform,
    (BeamType.SIMPLY_SUPPORTED, TriangularLoad.kind): ss_triangular,
    (BeamType.CANTILEVER, PointLoad.kind): cantilever_point,
    (BeamType.CANTILEVER, UniformLoad.kind): cantilever_distributed,
    (BeamType.CANTILEVER, TriangularLoad.kind): cantilever_distributed,
    (BeamType.FIXED, PointLoad.kind): fixed_point,
    (BeamType.FIXED, UniformLoad.kind): fixed_distributed,
    (BeamType.FIXED, TriangularLoad.kind): fixed_distributed,
}


def _superpose(beam: NormalizedBeam, u: float, tol: float) -> Response:
    S = beam.span
    EI = beam.EI
    d_total = 0.0
    t_total = 0.0
    for piece in localized_loads(beam):
        formula = FORMULAS[(beam.beam_type, type(piece).kind)]
        d, t = formula(piece, u, S, EI, tol)
        d_total += d
        t_total += t
    return d_total, t_total


def response_at(
    beam: BeamLike,
    x: float,
    settings: Optional[AnalysisSettings] = None,
) -> Response:
    """
    (δ, θ) en la posición global x.
    Fuera del tramo:
      - simplemente apoyada: voladizo rígido sobre la tangente del apoyo
      - biempotrada: 0
      - voladizo: 0 detrás del empotramiento
    """
    settings = settings or DEFAULT_SETTINGS
    nb = as_normalized(beam)
    lo, _ = nb.span_bounds()
    S = nb.span
    u = float(x) - lo
    tol = settings.length_tol

    if u < 0.0:
        if nb.beam_type == BeamType.SIMPLY_SUPPORTED:
            _, t0 = _superpose(nb, 0.0, tol)
            return t0 * u, t0
        return 0.0, 0.0

    if u > S:
        if nb.beam_type == BeamType.SIMPLY_SUPPORTED:
            _, tS = _superpose(nb, S, tol)
            return tS * (u - S), tS
        if nb.beam_type == BeamType.FIXED:
            return 0.0, 0.0

    return _superpose(nb, u, tol)


def deflection_at(beam: BeamLike, x: float, settings: Optional[AnalysisSettings] = None) -> float:
    return response_at(beam, x, settings)[0]


def slope_at(beam: BeamLike, x: float, settings: Optional[AnalysisSettings] = None) -> float:
    return response_at(beam, x, settings)[1]
