import numpy as np
import pytest

from forcegraph.model.edge import CurvedEdge, Hint
from forcegraph.model.node import GraphNode
from forcegraph.model.prism import TriangularPrism


@pytest.fixture
def prism() -> TriangularPrism:
    return TriangularPrism((1.0, 2.0, 3.0), port_indices=(10, 11))


def test_ports_lie_on_hypotenuse(prism):
    np.testing.assert_allclose(prism.port1.position, [1.75, 2.25, 3.25])
    np.testing.assert_allclose(prism.port2.position, [1.25, 2.75, 3.25])
    for port in prism.ports:
        local = port.position - prism.position
        assert local[0] + local[1] == pytest.approx(1.0)


def test_ports_are_small_nodes(prism):
    assert (prism.port1.uid, prism.port2.uid) == (10, 11)
    assert prism.port1.radius == pytest.approx(0.1)
    assert prism.port1.color == prism.color


def test_port_directions_are_outward_normal(prism):
    expected = np.array([1.0, 1.0, 0.0]) / np.sqrt(2.0)
    np.testing.assert_allclose(prism.port1_direction(), expected)
    np.testing.assert_allclose(prism.port2_direction(), expected)


def test_port_hint_drives_edge(prism):
    target = GraphNode(0, (5.0, 2.0, 3.0))
    edge = CurvedEdge(prism.port1, target, hint=prism.port_hint(prism.port1))

    assert isinstance(edge.hint, Hint)
    start = edge.control_point_a() - prism.port1.position
    np.testing.assert_allclose(start / np.linalg.norm(start), prism.port1_direction())


def test_port_hint_rejects_foreign_node(prism):
    with pytest.raises(ValueError):
        prism.port_hint(GraphNode(0, (0.0, 0.0, 0.0)))


def test_vertices_and_faces(prism):
    vertices = prism.vertices
    assert vertices.shape == (6, 3)
    np.testing.assert_allclose(vertices[0], prism.position)
    np.testing.assert_allclose(vertices[5], prism.position + [0.0, 1.0, 0.5])

    faces = TriangularPrism.faces()
    # 2 triangles + 3 quads in VTK padding format
    assert len(faces) == 2 * 4 + 3 * 5
    assert faces.max() == 5


def test_invalid_depth():
    with pytest.raises(ValueError):
        TriangularPrism((0.0, 0.0, 0.0), port_indices=(0, 1), depth=0.0)
