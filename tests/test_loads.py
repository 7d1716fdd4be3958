# path: tests/test_loads.py
import numpy as np
import pytest

from beamcee.domain.loads import PointLoad, TriangularLoad, UniformLoad
from beamcee.engine.singularity import DEFLECTION, MOMENT, SHEAR, load_effect, loads_effect_array


def test_resultants_and_centroids():
    assert UniformLoad(2.0, 1.0, 4.0).resultant() == pytest.approx(6.0)
    assert UniformLoad(2.0, 1.0, 4.0).centroid() == pytest.approx(2.5)
    tri = TriangularLoad(3.0, 0.0, 6.0)
    assert tri.resultant() == pytest.approx(9.0)
    assert tri.centroid() == pytest.approx(4.0)
    assert tri.intensity_at(2.0) == pytest.approx(1.0)


def test_clip_outside_and_inside():
    assert PointLoad(1.0, 7.0).clip(0.0, 5.0) == []
    assert UniformLoad(1.0, 5.0, 6.0).clip(0.0, 5.0) == []
    ld = UniformLoad(1.0, 1.0, 2.0)
    assert ld.clip(0.0, 5.0) == [ld]
    assert UniformLoad(1.0, -1.0, 2.0).clip(0.0, 5.0) == [UniformLoad(1.0, 0.0, 2.0)]


def test_clipped_triangle_becomes_trapezoid():
    tri = TriangularLoad(6.0, 0.0, 6.0)
    parts = tri.clip(2.0, 5.0)
    assert parts == [UniformLoad(2.0, 2.0, 5.0), TriangularLoad(3.0, 2.0, 5.0)]
    # misma resultante que la porción del triángulo entre 2 y 5
    assert sum(p.resultant() for p in parts) == pytest.approx(0.5 * (2.0 + 5.0) * 3.0)

    left = tri.clip(0.0, 3.0)
    assert left == [TriangularLoad(3.0, 0.0, 3.0)]


def test_singularity_integrals_of_a_triangle():
    tri = TriangularLoad(3.0, 1.0, 4.0)
    assert load_effect(tri, 0.5, SHEAR) == 0.0
    assert load_effect(tri, 4.0, SHEAR) == pytest.approx(4.5)
    assert load_effect(tri, 6.0, SHEAR) == pytest.approx(4.5)
    # momento respecto de u = 6: F * (6 - 3)
    assert load_effect(tri, 6.0, MOMENT) == pytest.approx(13.5)


def test_vectorized_effect_matches_scalar():
    loads = [PointLoad(2.0, 1.0), UniformLoad(1.5, 0.5, 3.0), TriangularLoad(3.0, 1.0, 4.0)]
    u = np.linspace(0.0, 5.0, 26)
    for order in (SHEAR, MOMENT, DEFLECTION):
        expected = [sum(load_effect(ld, x, order) for ld in loads) for x in u]
        np.testing.assert_allclose(loads_effect_array(loads, u, order), expected, rtol=1e-12, atol=1e-12)
