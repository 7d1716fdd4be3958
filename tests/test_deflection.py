# path: tests/test_deflection.py
import numpy as np
import pytest

from beamcee.domain.beam import BeamDescription, BeamType
from beamcee.domain.loads import PointLoad, TriangularLoad, UniformLoad
from beamcee.engine.deflection import deflection_at, slope_at
from beamcee.engine.normalize import normalize

E_MPA = 200000.0
I_MM4 = 4e7
EI = E_MPA * 1e6 * I_MM4 * 1e-12  # 8e6 N·m²


def _beam(beam_type, loads, length=5.0, left=None, right=None):
    return BeamDescription(
        length=length,
        elastic_modulus=E_MPA,
        moment_of_inertia=I_MM4,
        beam_type=beam_type,
        loads=tuple(loads),
        left_support_position=left,
        right_support_position=right,
    )


MIXED = [PointLoad(8.0, 1.3), UniformLoad(2.0, 0.7, 3.9), TriangularLoad(5.0, 2.2, 4.6)]


def test_simply_supported_midspan_point_matches_pl3_over_48ei():
    beam = _beam(BeamType.SIMPLY_SUPPORTED, [PointLoad(10.0, 2.5)])
    expected = 10000.0 * 5.0 ** 3 / (48.0 * EI)
    assert deflection_at(beam, 2.5) == pytest.approx(expected, rel=1e-9)
    assert slope_at(beam, 2.5) == pytest.approx(0.0, abs=1e-15)
    assert slope_at(beam, 0.0) == pytest.approx(10000.0 * 25.0 / (16.0 * EI))


def test_simply_supported_point_is_symmetric():
    beam = _beam(BeamType.SIMPLY_SUPPORTED, [PointLoad(10.0, 2.5)])
    for x in np.linspace(0.0, 5.0, 21):
        assert deflection_at(beam, x) == pytest.approx(deflection_at(beam, 5.0 - x), rel=1e-9, abs=1e-15)


def test_simply_supported_full_uniform_quartic():
    beam = _beam(BeamType.SIMPLY_SUPPORTED, [UniformLoad(4.0, 0.0, 5.0)])
    w = 4000.0
    assert deflection_at(beam, 2.5) == pytest.approx(5.0 * w * 5.0 ** 4 / (384.0 * EI))
    assert slope_at(beam, 0.0) == pytest.approx(w * 5.0 ** 3 / (24.0 * EI))


def test_simply_supported_partial_uniform_is_equivalent_point_load():
    partial = _beam(BeamType.SIMPLY_SUPPORTED, [UniformLoad(3.0, 1.0, 3.0)])
    point = _beam(BeamType.SIMPLY_SUPPORTED, [PointLoad(6.0, 2.0)])
    for x in (0.5, 2.0, 4.1):
        assert deflection_at(partial, x) == pytest.approx(deflection_at(point, x))
        assert slope_at(partial, x) == pytest.approx(slope_at(point, x))


def test_simply_supported_full_triangular_is_exact_inside_load():
    w = 6000.0
    beam = _beam(BeamType.SIMPLY_SUPPORTED, [TriangularLoad(6.0, 0.0, 5.0)])
    assert deflection_at(beam, 2.5) == pytest.approx(5.0 * w * 5.0 ** 4 / (768.0 * EI))
    # giro en el apoyo izquierdo: 7wL³/(360EI)
    assert slope_at(beam, 0.0) == pytest.approx(7.0 * w * 5.0 ** 3 / (360.0 * EI))


def test_simply_supported_triangular_outside_load_uses_equivalent_point():
    tri = _beam(BeamType.SIMPLY_SUPPORTED, [TriangularLoad(4.0, 2.0, 5.0)])
    point = _beam(BeamType.SIMPLY_SUPPORTED, [PointLoad(6.0, 4.0)])
    assert deflection_at(tri, 1.0) == pytest.approx(deflection_at(point, 1.0))


def test_cantilever_tip_load_matches_pl3_over_3ei():
    beam = _beam(BeamType.CANTILEVER, [PointLoad(5.0, 2.0)], length=2.0)
    P = 5000.0
    assert deflection_at(beam, 2.0) == pytest.approx(P * 8.0 / (3.0 * EI))
    assert slope_at(beam, 2.0) == pytest.approx(P * 4.0 / (2.0 * EI))


def test_cantilever_full_uniform_tip():
    beam = _beam(BeamType.CANTILEVER, [UniformLoad(2.0, 0.0, 3.0)], length=3.0)
    w = 2000.0
    assert deflection_at(beam, 3.0) == pytest.approx(w * 3.0 ** 4 / (8.0 * EI))
    assert slope_at(beam, 3.0) == pytest.approx(w * 3.0 ** 3 / (6.0 * EI))


def test_cantilever_triangular_peak_at_free_end():
    beam = _beam(BeamType.CANTILEVER, [TriangularLoad(3.0, 0.0, 2.0)], length=2.0)
    w = 3000.0
    assert deflection_at(beam, 2.0) == pytest.approx(11.0 * w * 2.0 ** 4 / (120.0 * EI))


def test_cantilever_partial_uniform_from_fixed_end():
    beam = _beam(BeamType.CANTILEVER, [UniformLoad(2.0, 0.0, 1.5)], length=4.0)
    w, a, L = 2000.0, 1.5, 4.0
    assert deflection_at(beam, L) == pytest.approx(w * a ** 3 * (4.0 * L - a) / (24.0 * EI))


def test_cantilever_slope_saturates_beyond_the_load():
    beam = _beam(BeamType.CANTILEVER, [PointLoad(4.0, 1.0), UniformLoad(1.0, 0.2, 1.2)], length=3.0)
    t_end = slope_at(beam, 3.0)
    assert slope_at(beam, 1.5) == pytest.approx(t_end)
    # tramo descargado: recta tangente
    assert deflection_at(beam, 3.0) - deflection_at(beam, 2.0) == pytest.approx(t_end * 1.0)


def test_cantilever_fixed_end_invariant_with_offset_support():
    beam = _beam(BeamType.CANTILEVER, [PointLoad(3.0, 4.0), TriangularLoad(2.0, 1.5, 3.5)], left=1.0)
    assert deflection_at(beam, 1.0) == pytest.approx(0.0, abs=1e-15)
    assert slope_at(beam, 1.0) == pytest.approx(0.0, abs=1e-15)
    assert deflection_at(beam, 0.5) == 0.0
    # sólo la puntual (a = 3 m del empotramiento) ya da P a²(3u - a)/(6EI) en u = 4
    assert deflection_at(beam, 5.0) > 3000.0 * 9.0 * 9.0 / (6.0 * EI)


def test_fixed_point_midspan_matches_pl3_over_192ei():
    beam = _beam(BeamType.FIXED, [PointLoad(10.0, 2.5)])
    assert deflection_at(beam, 2.5) == pytest.approx(10000.0 * 125.0 / (192.0 * EI))


def test_fixed_full_uniform_midspan():
    beam = _beam(BeamType.FIXED, [UniformLoad(4.0, 0.0, 5.0)])
    assert deflection_at(beam, 2.5) == pytest.approx(4000.0 * 5.0 ** 4 / (384.0 * EI))


def test_fixed_partial_loads_use_equivalent_point_load():
    tri = _beam(BeamType.FIXED, [TriangularLoad(3.0, 1.0, 4.0)])
    point = _beam(BeamType.FIXED, [PointLoad(4.5, 3.0)])
    for x in (0.5, 2.0, 3.5):
        assert deflection_at(tri, x) == pytest.approx(deflection_at(point, x))


@pytest.mark.parametrize("beam_type", [BeamType.SIMPLY_SUPPORTED, BeamType.FIXED])
def test_supports_do_not_deflect(beam_type):
    beam = _beam(beam_type, MIXED)
    assert deflection_at(beam, 0.0) == pytest.approx(0.0, abs=1e-15)
    assert deflection_at(beam, 5.0) == pytest.approx(0.0, abs=1e-15)


def test_fixed_ends_do_not_rotate():
    beam = _beam(BeamType.FIXED, MIXED)
    assert slope_at(beam, 0.0) == pytest.approx(0.0, abs=1e-15)
    assert slope_at(beam, 5.0) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("beam_type", list(BeamType))
def test_superposition_of_disjoint_load_sets(beam_type):
    a = MIXED[:1]
    b = MIXED[1:]
    both = _beam(beam_type, a + b)
    only_a = _beam(beam_type, a)
    only_b = _beam(beam_type, b)
    for x in np.linspace(0.0, 5.0, 11):
        assert deflection_at(both, x) == pytest.approx(
            deflection_at(only_a, x) + deflection_at(only_b, x), rel=1e-9, abs=1e-15
        )


def test_downward_loads_deflect_downward():
    for beam_type in BeamType:
        beam = _beam(beam_type, MIXED)
        assert deflection_at(beam, 2.5) > 0.0


def test_simply_supported_overhang_follows_support_tangent():
    beam = _beam(BeamType.SIMPLY_SUPPORTED, [PointLoad(10.0, 3.0)], length=6.0, left=1.0, right=5.0)
    theta = 10000.0 * 16.0 / (16.0 * EI)
    assert deflection_at(beam, 1.0) == pytest.approx(0.0, abs=1e-15)
    assert deflection_at(beam, 5.0) == pytest.approx(0.0, abs=1e-15)
    assert deflection_at(beam, 0.0) == pytest.approx(-theta)
    assert deflection_at(beam, 6.0) == pytest.approx(-theta)


def test_evaluators_accept_normalized_beam():
    beam = _beam(BeamType.SIMPLY_SUPPORTED, MIXED)
    nb = normalize(beam)
    assert deflection_at(nb, 1.7) == deflection_at(beam, 1.7)
    assert slope_at(nb, 1.7) == slope_at(beam, 1.7)
