import pytest

from forcegraph.config import CurveParameters, PhysicsParameters


def test_defaults():
    params = PhysicsParameters()
    assert params.repulsion_strength == 50.0
    assert params.spring_strength == 0.1
    assert params.rest_length == 2.0
    assert params.control_point_attraction == 5.0
    assert params.damping == 0.9
    assert params.time_step == pytest.approx(1.0 / 60.0)
    assert params.min_distance == 0.1

    curve = CurveParameters()
    assert (curve.extend_ratio, curve.approach_ratio, curve.segments) == (0.4, 0.3, 50)
    assert curve.n_points == 51


@pytest.mark.parametrize("kwargs", [
    {"time_step": 0.0},
    {"min_distance": -0.1},
    {"damping": 1.5},
    {"damping": -0.1},
    {"rest_length": -1.0},
])
def test_invalid_physics_parameters(kwargs):
    with pytest.raises(ValueError):
        PhysicsParameters(**kwargs)


def test_invalid_curve_segments():
    with pytest.raises(ValueError):
        CurveParameters(segments=0)


def test_parameters_are_immutable():
    params = PhysicsParameters()
    with pytest.raises(AttributeError):
        params.damping = 0.5
