"""
ClusterPulse Nodes

Node descriptors referenced by cluster lifecycle events, and the
formatter that renders them into descriptions and documents.
"""

from clusterpulse.nodes.types import (
    NodeInfo,
    NodeRole,
    NodeStatus,
)
from clusterpulse.nodes.formatting import (
    NodeFormatter,
    get_node_formatter,
    render_concise,
    render_structured,
    reset_node_formatter,
    set_node_formatter,
)

__all__ = [
    "NodeInfo",
    "NodeRole",
    "NodeStatus",
    "NodeFormatter",
    "get_node_formatter",
    "set_node_formatter",
    "reset_node_formatter",
    "render_concise",
    "render_structured",
]
