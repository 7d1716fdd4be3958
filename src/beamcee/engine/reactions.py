from __future__ import annotations

import logging
from typing import Optional

from beamcee.domain.beam import BeamDescription, BeamType, NormalizedBeam
from beamcee.domain.loads import Load, UniformLoad
from beamcee.domain.results import Reactions
from beamcee.engine.normalize import KN_TO_N, BeamLike, as_normalized, localize_load
from beamcee.engine.settings import DEFAULT_SETTINGS, AnalysisSettings
from beamcee.engine.variants import FormulaVariant, equivalent_point, formula_variant

logger = logging.getLogger(__name__)


def zero_reactions(beam_type: BeamType) -> Reactions:
    if beam_type == BeamType.CANTILEVER:
        return Reactions(R1=0.0, R2=0.0, M1=0.0)
    if beam_type == BeamType.FIXED:
        return Reactions(R1=0.0, R2=0.0, M1=0.0, M2=0.0)
    return Reactions(R1=0.0, R2=0.0)


def fixed_end_point(F: float, a: float, L: float) -> Reactions:
    """
    Biempotrada con puntual F a distancia a del apoyo izquierdo (b = L - a):
      R1 = F b²(3a+b)/L³,  R2 = F a²(a+3b)/L³
      M1 = -F a b²/L²,     M2 = F a² b/L²
    """
    b = L - a
    L2 = L * L
    return Reactions(
        R1=F * b * b * (3.0 * a + b) / (L2 * L),
        R2=F * a * a * (a + 3.0 * b) / (L2 * L),
        M1=-F * a * b * b / L2,
        M2=F * a * a * b / L2,
    )


def fixed_end_full_uniform(w: float, L: float) -> Reactions:
    return Reactions(
        R1=w * L / 2.0,
        R2=w * L / 2.0,
        M1=-w * L * L / 12.0,
        M2=w * L * L / 12.0,
    )


def _simply_supported(piece: Load, span: float) -> Reactions:
    F = piece.resultant()
    R2 = F * piece.centroid() / span
    return Reactions(R1=F - R2, R2=R2)


def _cantilever(piece: Load) -> Reactions:
    F = piece.resultant()
    return Reactions(R1=F, R2=0.0, M1=F * piece.centroid())


def _fixed(piece: Load, span: float, tol: float) -> Reactions:
    variant = formula_variant(BeamType.FIXED, piece, span, tol)
    if variant == FormulaVariant.FULL_SPAN and isinstance(piece, UniformLoad):
        return fixed_end_full_uniform(float(piece.magnitude), span)
    if variant == FormulaVariant.EQUIVALENT_POINT:
        logger.debug("Biempotrada: %s aproximada por puntual equivalente", type(piece).kind)
        piece = equivalent_point(piece)
    return fixed_end_point(piece.resultant(), piece.centroid(), span)


def piece_reactions(beam: NormalizedBeam, piece: Load, tol: float) -> Reactions:
    """Reacciones de una carga ya localizada (coordenadas del tramo)."""
    span = beam.span
    if beam.beam_type == BeamType.SIMPLY_SUPPORTED:
        return _simply_supported(piece, span)
    if beam.beam_type == BeamType.CANTILEVER:
        return _cantilever(piece)
    return _fixed(piece, span, tol)


def reactions_for_load(
    beam: BeamLike,
    load: Load,
    settings: Optional[AnalysisSettings] = None,
) -> Reactions:
    """
    Reacciones (N, N·m) de una sola carga. `load` en las mismas unidades que `beam`.
    Una carga fuera del tramo aporta cero.
    """
    settings = settings or DEFAULT_SETTINGS
    nb = as_normalized(beam)
    if isinstance(beam, BeamDescription):
        load = load.scaled(KN_TO_N)

    total = zero_reactions(nb.beam_type)
    for piece in localize_load(nb, load):
        total = total + piece_reactions(nb, piece, settings.length_tol)
    return total


def total_reactions(beam: BeamLike, settings: Optional[AnalysisSettings] = None) -> Reactions:
    """Superposición: suma de las reacciones de cada carga."""
    settings = settings or DEFAULT_SETTINGS
    nb = as_normalized(beam)
    total = zero_reactions(nb.beam_type)
    for ld in nb.loads:
        for piece in localize_load(nb, ld):
            total = total + piece_reactions(nb, piece, settings.length_tol)
    return total
