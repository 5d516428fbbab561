import pytest

from forcegraph.config import PhysicsParameters
from forcegraph.model.node import GraphNode
from forcegraph.physics.engine import PhysicsEngine


@pytest.fixture
def engine() -> PhysicsEngine:
    return PhysicsEngine()


@pytest.fixture
def pair():
    """Two free nodes on the X axis, 4 apart."""
    return GraphNode(0, (-2.0, 0.0, 0.0)), GraphNode(1, (2.0, 0.0, 0.0))


@pytest.fixture
def only():
    """Factory of parameters with every force switched off except the ones given."""
    def make(**strengths) -> PhysicsParameters:
        values = dict(repulsion_strength=0.0, spring_strength=0.0, control_point_attraction=0.0)
        values.update(strengths)
        return PhysicsParameters(**values)
    return make
