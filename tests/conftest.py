"""
Shared fixtures for ClusterPulse tests.
"""

import pytest

from clusterpulse.config import reset_config
from clusterpulse.nodes import NodeInfo, NodeRole, reset_node_formatter


# ==================== Fixtures ====================

@pytest.fixture(autouse=True)
def _reset_globals():
    """Keep global config and formatter from leaking between tests."""
    reset_config()
    reset_node_formatter()
    yield
    reset_config()
    reset_node_formatter()


@pytest.fixture
def node():
    """A master-eligible node with attributes."""
    return NodeInfo(
        id="n1-uuid",
        name="node-1",
        host="10.0.0.5",
        port=9300,
        role=NodeRole.MASTER_ELIGIBLE,
        version="1.4.0",
        attributes={"zone": "us-east-1a", "rack": "r1"},
    )


@pytest.fixture
def bare_node():
    """A node without a name or attributes."""
    return NodeInfo(id="n2-uuid", host="10.0.0.6", port=9301)
