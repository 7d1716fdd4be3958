# path: src/beamcee/services/validation.py
from __future__ import annotations

from typing import List

from beamcee.domain.beam import BeamDescription, BeamType
from beamcee.domain.loads import PointLoad


class InvalidBeamError(ValueError):
    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("Viga inválida:\n" + "\n".join(f"- {p}" for p in self.problems))


def validate_beam(beam: BeamDescription) -> List[str]:
    """
    Chequeos del lado del llamador (el motor no los repite).
    Devuelve la lista de problemas; vacía => entrada válida.
    """
    problems: List[str] = []
    L = float(beam.length)

    if L <= 0:
        problems.append(f"length must be positive (got {beam.length:g} m)")
    if beam.elastic_modulus <= 0:
        problems.append(f"elastic modulus must be positive (got {beam.elastic_modulus:g} MPa)")
    if beam.moment_of_inertia <= 0:
        problems.append(f"moment of inertia must be positive (got {beam.moment_of_inertia:g} mm4)")
    if not beam.loads:
        problems.append("at least one load is required")

    if beam.beam_type != BeamType.CANTILEVER:
        lo, hi = beam.left_support, beam.right_support
        if not (0.0 <= lo < hi <= L):
            problems.append(
                f"supports must satisfy 0 <= left < right <= length (got {lo:g}, {hi:g})"
            )
    elif not (0.0 <= beam.left_support < L):
        problems.append(f"fixed end must lie in [0, length) (got {beam.left_support:g})")

    for i, ld in enumerate(beam.loads, start=1):
        if ld.magnitude <= 0:
            problems.append(f"load {i}: magnitude must be positive (got {ld.magnitude:g})")
        if isinstance(ld, PointLoad):
            if not (0.0 <= ld.position <= L):
                problems.append(f"load {i}: position {ld.position:g} m outside [0, {L:g}]")
            continue
        a, b = ld.extent()
        if a >= b:
            problems.append(f"load {i}: start {a:g} m must be lower than end {b:g} m")
        if a < 0.0 or b > L:
            problems.append(f"load {i}: extent [{a:g}, {b:g}] m outside [0, {L:g}]")

    return problems


def ensure_valid(beam: BeamDescription) -> BeamDescription:
    problems = validate_beam(beam)
    if problems:
        raise InvalidBeamError(problems)
    return beam
