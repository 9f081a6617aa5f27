"""
ClusterPulse Node Formatting

Renders a node descriptor two ways:
- a concise, human-readable identity used in event descriptions
- a structured sub-document written into an open builder object

Agents that track nodes with their own descriptor type can install a
custom ``NodeFormatter`` through :func:`set_node_formatter`.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import structlog

from clusterpulse.nodes.types import NodeInfo
from clusterpulse.xcontent.builder import DocumentBuilder

logger = structlog.get_logger(__name__)


class NodeFormatter:
    """Default formatter for :class:`NodeInfo` descriptors."""

    def render_concise(self, node: NodeInfo) -> str:
        """Render ``[name][id][host:port]``; the name part is skipped when empty."""
        parts = [node.name, node.id, node.address] if node.name else [node.id, node.address]
        return "".join(f"[{part}]" for part in parts)

    def render_structured(
        self,
        node: NodeInfo,
        builder: DocumentBuilder,
        params: Optional[Mapping[str, Any]] = None,
    ) -> DocumentBuilder:
        """Write the node identity fields into the currently open object."""
        params = params or {}

        builder.field("id", node.id)
        builder.field("name", node.name)
        builder.field("transport_address", node.address)
        builder.field("host", node.host)
        builder.field("port", node.port)
        builder.field("master_node", node.is_master)
        builder.field("version", node.version)

        if params.get("node_attributes", True) and node.attributes:
            builder.start_object("attributes")
            for key in sorted(node.attributes):
                builder.field(key, node.attributes[key])
            builder.end_object()

        return builder


# =============================================================================
# Global formatter
# =============================================================================

_formatter: Optional[NodeFormatter] = None


def get_node_formatter() -> NodeFormatter:
    """Get the global node formatter instance."""
    global _formatter
    if _formatter is None:
        _formatter = NodeFormatter()
    return _formatter


def set_node_formatter(formatter: NodeFormatter) -> None:
    """Set the global node formatter instance."""
    global _formatter
    _formatter = formatter
    logger.info("node_formatter.replaced", formatter=type(formatter).__name__)


def reset_node_formatter() -> None:
    """Reset the global node formatter to the default."""
    global _formatter
    _formatter = None


def render_concise(node: NodeInfo) -> str:
    """Render ``node`` with the global formatter for event descriptions."""
    return get_node_formatter().render_concise(node)


def render_structured(
    node: NodeInfo,
    builder: DocumentBuilder,
    params: Optional[Mapping[str, Any]] = None,
) -> DocumentBuilder:
    """Write ``node`` into the open object of ``builder`` with the global formatter."""
    return get_node_formatter().render_structured(node, builder, params)
