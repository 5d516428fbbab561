import numpy as np
import pytest

from forcegraph.model.geometry import as_vector3, cubic_bezier, length, normalize, normalize_rows


def test_as_vector3_copies_input():
    source = np.array([1.0, 2.0, 3.0])
    vec = as_vector3(source)
    vec[0] = 10.0
    assert source[0] == 1.0
    assert vec.dtype == np.float64


@pytest.mark.parametrize("values", [(1.0, 2.0), (1.0, 2.0, 3.0, 4.0), [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]])
def test_as_vector3_rejects_wrong_size(values):
    with pytest.raises(ValueError):
        as_vector3(values)


def test_normalize_unit_length():
    vec = normalize(np.array([3.0, 0.0, 4.0]))
    np.testing.assert_allclose(vec, [0.6, 0.0, 0.8])
    assert length(vec) == pytest.approx(1.0)


def test_normalize_zero_vector_is_zero():
    vec = normalize(np.zeros(3))
    assert np.all(np.isfinite(vec))
    np.testing.assert_array_equal(vec, np.zeros(3))


def test_normalize_rows_keeps_zero_rows():
    rows = np.array([[0.0, 0.0, 2.0], [0.0, 0.0, 0.0]])
    np.testing.assert_array_equal(normalize_rows(rows), [[0.0, 0.0, 1.0], [0.0, 0.0, 0.0]])


def test_cubic_bezier_endpoints_and_midpoint():
    ctrl = np.array([
        [0.0, 0.0, 0.0],
        [1.0, 2.0, 0.0],
        [3.0, 2.0, 0.0],
        [4.0, 0.0, 0.0],
    ])
    points = cubic_bezier(ctrl, 50)

    assert points.shape == (51, 3)
    np.testing.assert_array_equal(points[0], ctrl[0])
    np.testing.assert_allclose(points[-1], ctrl[-1])
    # B(0.5) = (P0 + 3 P1 + 3 P2 + P3) / 8
    np.testing.assert_allclose(points[25], (ctrl[0] + 3 * ctrl[1] + 3 * ctrl[2] + ctrl[3]) / 8.0)
