import numpy as np
import pytest

from forcegraph.main import load_engine, run_headless
from forcegraph.model.node import GraphNode
from forcegraph.model.scene import SceneGraph, build_demo_scene
from forcegraph.physics.engine import PhysicsEngine


@pytest.fixture
def demo() -> SceneGraph:
    return build_demo_scene()


def test_demo_scene_contents(demo):
    assert len(demo.prisms) == 1
    assert len(demo.nodes) == 7
    assert len(demo.edges) == 6
    prism = demo.prisms[0]
    assert demo.fixed == {2, prism.port1.uid, prism.port2.uid}


def test_populate_registers_everything(demo):
    engine = PhysicsEngine()
    demo.populate(engine)

    assert engine.nodes == demo.nodes
    assert engine.edges == demo.edges
    for node in demo.nodes:
        assert engine.is_fixed(node) == (node.uid in demo.fixed)


def test_add_edge_passes_curve_options():
    scene = SceneGraph()
    a = scene.add_node(GraphNode(0, (0.0, 0.0, 0.0)))
    b = scene.add_node(GraphNode(1, (1.0, 0.0, 0.0)))
    edge = scene.add_edge(a, b, color="#ff0000")
    assert edge.color == "#ff0000"
    assert scene.edges == [edge]


def test_demo_relaxation_keeps_pins(demo):
    engine = load_engine(demo)
    pinned = {node.uid: node.position.copy() for node in demo.nodes if node.uid in demo.fixed}

    engine.run(200)

    for node in demo.nodes:
        assert np.all(np.isfinite(node.position))
        if node.uid in pinned:
            np.testing.assert_array_equal(node.position, pinned[node.uid])
    for edge in demo.edges:
        np.testing.assert_allclose(edge.points[-1], edge.target.position)


def test_run_headless_returns_energy():
    energy = run_headless(20)
    assert np.isfinite(energy)
    assert energy >= 0.0
