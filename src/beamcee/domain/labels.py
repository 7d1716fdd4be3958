from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from beamcee.domain.beam import BeamDescription, BeamType
from beamcee.domain.loads import Load, PointLoad, TriangularLoad, UniformLoad
from beamcee.domain.results import AnalysisResult

LOAD_KINDS: Dict[str, type] = {
    PointLoad.kind: PointLoad,
    UniformLoad.kind: UniformLoad,
    TriangularLoad.kind: TriangularLoad,
}

# Alias aceptados además de los tags canónicos
BEAM_TYPE_ALIASES: Dict[str, BeamType] = {
    "simply-supported": BeamType.SIMPLY_SUPPORTED,
    "simply_supported": BeamType.SIMPLY_SUPPORTED,
    "cantilever": BeamType.CANTILEVER,
    "fixed": BeamType.FIXED,
    "fixed-fixed": BeamType.FIXED,
}


def parse_beam_type(tag: str) -> BeamType:
    key = (tag or "").strip().lower()
    if key not in BEAM_TYPE_ALIASES:
        raise ValueError(f"Tipo de viga desconocido: {tag!r}")
    return BEAM_TYPE_ALIASES[key]


def load_kind(load: Load) -> str:
    return type(load).kind


def _opt_float(data: Mapping[str, Any], key: str) -> Optional[float]:
    v = data.get(key)
    if v is None:
        return None
    return float(v)


def load_from_dict(data: Mapping[str, Any], beam_length: float) -> Load:
    """
    Convierte una carga en formato de la UI ({type, magnitude, position,
    startPosition, endPosition}) a la dataclass correspondiente.
    Extremos ausentes de una distribuida => 0 y beam_length.
    """
    tag = (data.get("type") or "").strip().lower()
    if tag not in LOAD_KINDS:
        raise ValueError(f"Tipo de carga desconocido: {data.get('type')!r}")

    magnitude = float(data.get("magnitude", 0.0))
    if tag == PointLoad.kind:
        pos = _opt_float(data, "position")
        if pos is None:
            raise ValueError("Carga puntual sin 'position'.")
        return PointLoad(magnitude=magnitude, position=pos)

    start = _opt_float(data, "startPosition")
    end = _opt_float(data, "endPosition")
    cls = LOAD_KINDS[tag]
    return cls(
        magnitude=magnitude,
        start_position=0.0 if start is None else start,
        end_position=float(beam_length) if end is None else end,
    )


def beam_from_dict(data: Mapping[str, Any]) -> BeamDescription:
    length = float(data["length"])
    loads: List[Load] = [load_from_dict(d, length) for d in data.get("loads", [])]
    return BeamDescription(
        length=length,
        elastic_modulus=float(data["elasticModulus"]),
        moment_of_inertia=float(data["momentOfInertia"]),
        beam_type=parse_beam_type(data.get("beamType", "")),
        loads=tuple(loads),
        left_support_position=_opt_float(data, "leftSupportPosition"),
        right_support_position=_opt_float(data, "rightSupportPosition"),
    )


def load_to_dict(load: Load) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": load_kind(load), "magnitude": load.magnitude}
    if isinstance(load, PointLoad):
        out["position"] = load.position
    else:
        out["startPosition"] = load.start_position
        out["endPosition"] = load.end_position
    return out


def beam_to_dict(beam: BeamDescription) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "length": beam.length,
        "elasticModulus": beam.elastic_modulus,
        "momentOfInertia": beam.moment_of_inertia,
        "beamType": beam.beam_type.value,
        "loads": [load_to_dict(ld) for ld in beam.loads],
    }
    if beam.left_support_position is not None:
        out["leftSupportPosition"] = beam.left_support_position
    if beam.right_support_position is not None:
        out["rightSupportPosition"] = beam.right_support_position
    return out


def analysis_document(beam: BeamDescription, result: AnalysisResult) -> Dict[str, Any]:
    """Documento de exportación: parámetros de entrada + resultados."""
    return {"parameters": beam_to_dict(beam), "results": result.to_dict()}
