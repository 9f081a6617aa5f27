"""
ClusterPulse - Cluster Lifecycle Events

Event model for a cluster monitoring agent:
- Typed, immutable topology events (master election, node join/leave)
- Ordered document serialization with a fixed envelope
- Pluggable node formatting for descriptions and node sub-documents
"""

__version__ = "1.0.0"
__author__ = "ClusterPulse Team"

from clusterpulse.config import ClusterPulseConfig
from clusterpulse.events import ElectedAsMaster, Event, NodeEvent, NodeJoinLeave, serialize_event

__all__ = [
    "ClusterPulseConfig",
    "Event",
    "NodeEvent",
    "ElectedAsMaster",
    "NodeJoinLeave",
    "serialize_event",
    "__version__",
]
