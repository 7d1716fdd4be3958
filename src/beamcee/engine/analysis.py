from __future__ import annotations

import logging
from typing import List, Optional

from beamcee.domain.beam import NormalizedBeam
from beamcee.domain.results import AnalysisResult
from beamcee.engine.normalize import BeamLike, as_normalized, localize_load, span_notes
from beamcee.engine.reactions import total_reactions
from beamcee.engine.sampler import deflection_summary, sample_deflection, sample_slope, slope_summary
from beamcee.engine.settings import DEFAULT_SETTINGS, AnalysisSettings
from beamcee.engine.steps import APPROXIMATION_NOTES, generate_steps
from beamcee.engine.variants import formula_variant

logger = logging.getLogger(__name__)


def _approximation_notes(beam: NormalizedBeam, tol: float) -> List[str]:
    notes: List[str] = []
    for i, ld in enumerate(beam.loads, start=1):
        for piece in localize_load(beam, ld):
            variant = formula_variant(beam.beam_type, piece, beam.span, tol)
            if variant in APPROXIMATION_NOTES:
                notes.append(f"Load {i} ({type(ld).kind}): {APPROXIMATION_NOTES[variant]}")
                break
    return notes


def perform_calculations(
    beam: BeamLike,
    settings: Optional[AnalysisSettings] = None,
) -> AnalysisResult:
    """
    Pipeline completo: normalizar -> reacciones -> muestreo de δ y θ ->
    resumen -> pasos. Sin estado: misma entrada => mismo resultado.
    """
    settings = settings or DEFAULT_SETTINGS
    settings.validate()

    nb = as_normalized(beam)
    logger.debug(
        "Análisis %s: L=%g m, EI=%g N·m², %d carga(s)",
        nb.beam_type.value, nb.length, nb.EI, len(nb.loads),
    )

    reactions = total_reactions(nb, settings)

    deflection_points = sample_deflection(nb, settings.n_samples, settings)
    slope_points = sample_slope(nb, settings.n_samples, settings)
    deflection = deflection_summary(nb, deflection_points, settings)
    slope = slope_summary(nb, slope_points, settings)

    steps = generate_steps(nb, reactions, deflection, slope, settings)

    notes = span_notes(nb)
    notes.extend(_approximation_notes(nb, settings.length_tol))

    return AnalysisResult(
        deflection=deflection,
        slope=slope,
        deflection_points=deflection_points,
        slope_points=slope_points,
        steps=steps,
        reactions=reactions,
        notes=notes,
    )
