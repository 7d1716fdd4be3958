from __future__ import annotations

from typing import Callable, List, Optional

import numpy as np

from beamcee.domain.results import ResponseSummary, ResultPoint
from beamcee.engine.deflection import deflection_at, slope_at
from beamcee.engine.normalize import BeamLike, as_normalized
from beamcee.engine.settings import DEFAULT_SETTINGS, AnalysisSettings

# Conversión a unidades de salida (sólo en este borde)
M_TO_MM = 1000.0
RAD_TO_DEG = 180.0 / np.pi

Evaluator = Callable[[BeamLike, float, Optional[AnalysisSettings]], float]


def sample_curve(
    beam: BeamLike,
    evaluator: Evaluator,
    n: int = 100,
    scale: float = 1.0,
    settings: Optional[AnalysisSettings] = None,
) -> List[ResultPoint]:
    """n+1 puntos equiespaciados sobre [0, L], extremos incluidos."""
    nb = as_normalized(beam)
    xs = np.linspace(0.0, float(nb.length), int(n) + 1)
    return [ResultPoint(x=float(x), y=float(evaluator(nb, float(x), settings)) * scale) for x in xs]


def sample_deflection(
    beam: BeamLike,
    n: int = 100,
    settings: Optional[AnalysisSettings] = None,
) -> List[ResultPoint]:
    return sample_curve(beam, deflection_at, n=n, scale=M_TO_MM, settings=settings)


def sample_slope(
    beam: BeamLike,
    n: int = 100,
    settings: Optional[AnalysisSettings] = None,
) -> List[ResultPoint]:
    return sample_curve(beam, slope_at, n=n, scale=RAD_TO_DEG, settings=settings)


def summarize_curve(
    beam: BeamLike,
    evaluator: Evaluator,
    points: List[ResultPoint],
    scale: float = 1.0,
    settings: Optional[AnalysisSettings] = None,
) -> ResponseSummary:
    """
    Extremos, centro de luz y máximo muestreado.
    El máximo es la muestra de mayor |y| (la primera si hay empate), no un
    extremo analítico: picos entre muestras pueden no capturarse.
    """
    nb = as_normalized(beam)
    L = float(nb.length)

    ys = np.asarray([p.y for p in points], dtype=float)
    k = int(np.argmax(np.abs(ys))) if ys.size else 0

    return ResponseSummary(
        left_end=float(evaluator(nb, 0.0, settings)) * scale,
        right_end=float(evaluator(nb, L, settings)) * scale,
        midspan=float(evaluator(nb, 0.5 * L, settings)) * scale,
        max_value=float(ys[k]) if ys.size else 0.0,
        max_position=float(points[k].x) if points else 0.0,
    )


def deflection_summary(
    beam: BeamLike,
    points: Optional[List[ResultPoint]] = None,
    settings: Optional[AnalysisSettings] = None,
) -> ResponseSummary:
    settings = settings or DEFAULT_SETTINGS
    if points is None:
        points = sample_deflection(beam, settings.n_samples, settings)
    return summarize_curve(beam, deflection_at, points, scale=M_TO_MM, settings=settings)


def slope_summary(
    beam: BeamLike,
    points: Optional[List[ResultPoint]] = None,
    settings: Optional[AnalysisSettings] = None,
) -> ResponseSummary:
    settings = settings or DEFAULT_SETTINGS
    if points is None:
        points = sample_slope(beam, settings.n_samples, settings)
    return summarize_curve(beam, slope_at, points, scale=RAD_TO_DEG, settings=settings)
