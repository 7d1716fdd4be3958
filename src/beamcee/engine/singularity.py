"""
Funciones de singularidad (Macaulay) para el lado "cargas" de la estática.

Cada carga se descompone en términos  q(ξ) = c * <ξ - s>^p / p!  (p = -1: delta).
Integrando desde el origen local hasta u:

    order 0 (SHEAR)      Vq(u)  = ∫ q
    order 1 (MOMENT)     Mq(u)  = ∫ Vq        (momento de las cargas a la izquierda de u)
    order 2 (SLOPE)      I1(u)  = ∫ Mq
    order 3 (DEFLECTION) I2(u)  = ∫ I1

y cada término aporta  c * <u - s>^(p+order+1) / (p+order+1)!.
"""
from __future__ import annotations

from math import factorial
from typing import Iterable

import numpy as np

from beamcee.domain.loads import Load

SHEAR = 0
MOMENT = 1
SLOPE = 2
DEFLECTION = 3


def bracket(u: float, s: float, n: int) -> float:
    """<u - s>^n, con <u - s>^0 = 1 sólo para u > s."""
    if u <= s:
        return 0.0
    return (u - s) ** n


def load_effect(load: Load, u: float, order: int) -> float:
    total = 0.0
    for c, s, p in load.singularity_terms():
        n = p + order + 1
        total += c * bracket(u, s, n) / factorial(n)
    return total


def loads_effect(loads: Iterable[Load], u: float, order: int) -> float:
    return sum(load_effect(ld, u, order) for ld in loads)


def loads_effect_array(loads: Iterable[Load], u: np.ndarray, order: int) -> np.ndarray:
    """Versión vectorizada de loads_effect sobre un arreglo de posiciones locales."""
    u = np.asarray(u, dtype=float)
    out = np.zeros_like(u)
    for ld in loads:
        for c, s, p in ld.singularity_terms():
            n = p + order + 1
            du = u - s
            out += c * np.where(du > 0.0, np.abs(du) ** n, 0.0) / factorial(n)
    return out
