from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from beamcee.domain.beam import BeamType, NormalizedBeam
from beamcee.domain.loads import Load
from beamcee.domain.results import Reactions
from beamcee.engine.normalize import BeamLike, as_normalized, localized_loads
from beamcee.engine.reactions import total_reactions
from beamcee.engine.settings import DEFAULT_SETTINGS, AnalysisSettings
from beamcee.engine.singularity import MOMENT, SHEAR, loads_effect, loads_effect_array


def _end_moment(beam: NormalizedBeam, R: Reactions) -> float:
    """
    Término constante del diagrama de momentos (flector + positivo):
      - voladizo: -M1 (M1 es la magnitud del momento de empotramiento)
      - biempotrada: +M1 (M1 <= 0 ya trae el signo de momento negativo)
    """
    if beam.beam_type == BeamType.CANTILEVER:
        return -(R.M1 or 0.0)
    if beam.beam_type == BeamType.FIXED:
        return R.M1 or 0.0
    return 0.0


def _context(beam: BeamLike) -> Tuple[NormalizedBeam, List[Load], Reactions]:
    nb = as_normalized(beam)
    return nb, localized_loads(nb), total_reactions(nb)


def bending_moment_at(beam: BeamLike, x: float) -> float:
    """
    M(x) [N·m], flector positivo.
      M(u) = R1*u + M_extremo - Mq(u),  u = x - apoyo izquierdo.
    Fuera del tramo considerado vale 0 (sólo se cuentan cargas dentro del tramo).
    """
    nb, pieces, R = _context(beam)
    lo, _ = nb.span_bounds()
    u = float(x) - lo
    if u < 0.0 or u > nb.span:
        return 0.0
    return R.R1 * u + _end_moment(nb, R) - loads_effect(pieces, u, MOMENT)


def shear_at(beam: BeamLike, x: float) -> float:
    """
    V(x) [N]: R1 menos las cargas a la izquierda de x.
    En voladizo equivale a la suma de cargas a la derecha de x.
    """
    nb, pieces, R = _context(beam)
    lo, _ = nb.span_bounds()
    u = float(x) - lo
    if u < 0.0 or u > nb.span:
        return 0.0
    return R.R1 - loads_effect(pieces, u, SHEAR)


@dataclass(frozen=True)
class ForceDiagram:
    """Muestras de V [kN] y M [kN·m] sobre [0, L]."""
    x: np.ndarray
    shear: np.ndarray
    moment: np.ndarray


def sample_internal_forces(
    beam: BeamLike,
    n: Optional[int] = None,
    settings: Optional[AnalysisSettings] = None,
) -> ForceDiagram:
    settings = settings or DEFAULT_SETTINGS
    if n is None:
        n = settings.n_samples

    nb, pieces, R = _context(beam)
    lo, _ = nb.span_bounds()

    x = np.linspace(0.0, float(nb.length), int(n) + 1)
    u = x - lo
    inside = (u >= 0.0) & (u <= nb.span)

    V = R.R1 - loads_effect_array(pieces, u, SHEAR)
    M = R.R1 * u + _end_moment(nb, R) - loads_effect_array(pieces, u, MOMENT)

    V = np.where(inside, V, 0.0) / 1000.0
    M = np.where(inside, M, 0.0) / 1000.0
    return ForceDiagram(x=x, shear=V, moment=M)
