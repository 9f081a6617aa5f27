"""
ClusterPulse Cluster Events

Immutable facts about cluster topology changes and their document
serialization:

- **Event**: common envelope (timestamp, cluster name, ``type``)
- **NodeEvent**: node topology events (``event``, ``event_source``)
- **ElectedAsMaster**, **NodeJoinLeave**: concrete node events
- **serialize_event**: full document with ``@timestamp`` for exporters
"""

from clusterpulse.events.base import BodyWriter, Event
from clusterpulse.events.node import (
    NODE_EVENT_TYPE,
    ElectedAsMaster,
    NodeEvent,
    NodeJoinLeave,
)
from clusterpulse.events.document import (
    TIMESTAMP_FIELD,
    build_event_document,
    event_to_dict,
    format_timestamp,
    serialize_event,
)

__all__ = [
    "BodyWriter",
    "Event",
    "NODE_EVENT_TYPE",
    "NodeEvent",
    "ElectedAsMaster",
    "NodeJoinLeave",
    "TIMESTAMP_FIELD",
    "build_event_document",
    "event_to_dict",
    "format_timestamp",
    "serialize_event",
]
