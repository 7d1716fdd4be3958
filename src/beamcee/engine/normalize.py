from __future__ import annotations

import logging
from typing import List, Union

from beamcee.domain.beam import BeamDescription, NormalizedBeam
from beamcee.domain.loads import Load

logger = logging.getLogger(__name__)

MPA_TO_PA = 1e6
MM4_TO_M4 = 1e-12
KN_TO_N = 1000.0

BeamLike = Union[BeamDescription, NormalizedBeam]


def normalize(beam: BeamDescription) -> NormalizedBeam:
    """
    Unidades de usuario -> SI. No valida: asume entrada bien formada.
    Las cargas se reescalan (kN -> N, kN/m -> N/m); posiciones en m sin cambios.
    """
    return NormalizedBeam(
        length=float(beam.length),
        elastic_modulus=float(beam.elastic_modulus) * MPA_TO_PA,
        moment_of_inertia=float(beam.moment_of_inertia) * MM4_TO_M4,
        beam_type=beam.beam_type,
        loads=tuple(ld.scaled(KN_TO_N) for ld in beam.loads),
        left_support=beam.left_support,
        right_support=beam.right_support,
    )


def as_normalized(beam: BeamLike) -> NormalizedBeam:
    if isinstance(beam, NormalizedBeam):
        return beam
    return normalize(beam)


def localize_load(beam: NormalizedBeam, load: Load) -> List[Load]:
    """
    Recorta la carga al tramo considerado y la pasa a coordenadas locales
    (origen en el apoyo izquierdo / empotramiento).
    Lista vacía => la carga no actúa sobre el tramo.
    """
    lo, hi = beam.span_bounds()
    return [piece.shifted(-lo) for piece in load.clip(lo, hi)]


def localized_loads(beam: NormalizedBeam) -> List[Load]:
    out: List[Load] = []
    for ld in beam.loads:
        out.extend(localize_load(beam, ld))
    return out


def span_notes(beam: NormalizedBeam) -> List[str]:
    """Notas de cargas ignoradas o recortadas contra el tramo."""
    lo, hi = beam.span_bounds()
    notes: List[str] = []

    for i, ld in enumerate(beam.loads, start=1):
        x1, x2 = ld.extent()
        pieces = ld.clip(lo, hi)
        if not pieces:
            msg = f"Load {i} ({type(ld).kind}) ignored: outside the span [{lo:g}, {hi:g}] m."
            notes.append(msg)
            logger.debug(msg)
            continue

        if x1 < lo or x2 > hi:
            msg = (
                f"Load {i} ({type(ld).kind}) clipped from [{x1:g}, {x2:g}] m "
                f"to [{max(x1, lo):g}, {min(x2, hi):g}] m."
            )
            notes.append(msg)
            logger.debug(msg)

    return notes
