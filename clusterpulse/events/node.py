"""
ClusterPulse Node Events

Topology events about individual nodes: master election, joins and
departures. All node events share the ``node_event`` type so an exporter
can route them identically; the ``event`` field tells them apart.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from clusterpulse.events.base import Event
from clusterpulse.nodes.formatting import render_concise, render_structured
from clusterpulse.nodes.types import NodeInfo
from clusterpulse.xcontent.builder import DocumentBuilder

NODE_EVENT_TYPE = "node_event"


@dataclass(frozen=True, eq=False)
class NodeEvent(Event):
    """
    Base for node topology events.

    Attributes:
        event_source: What produced the event (e.g. ``"zen-discovery"``).
    """
    event_source: str = field(kw_only=True)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.event_source is None:
            raise TypeError(f"{type(self).__name__}: event_source must not be None")

    def type(self) -> str:
        return NODE_EVENT_TYPE

    @abstractmethod
    def event_kind(self) -> str:
        """Sub-kind written to the ``event`` field."""

    def _write_fields(
        self,
        builder: DocumentBuilder,
        params: Optional[Mapping[str, Any]],
    ) -> None:
        builder.field("event", self.event_kind())
        builder.field("event_source", self.event_source)


@dataclass(frozen=True, eq=False)
class ElectedAsMaster(NodeEvent):
    """A node won the master election."""
    node: NodeInfo

    def event_kind(self) -> str:
        return "elected_as_master"

    def concise_description(self) -> str:
        return render_concise(self.node) + " became master"

    # The node is not written here; the exporter attaches node identity itself.


@dataclass(frozen=True, eq=False)
class NodeJoinLeave(NodeEvent):
    """A node joined (``joined=True``) or left the cluster."""
    node: NodeInfo
    joined: bool

    def event_kind(self) -> str:
        return "node_joined" if self.joined else "node_left"

    def concise_description(self) -> str:
        return render_concise(self.node) + (" joined" if self.joined else " left")

    def _write_fields(
        self,
        builder: DocumentBuilder,
        params: Optional[Mapping[str, Any]],
    ) -> None:
        builder.start_object("node")
        render_structured(self.node, builder, params)
        builder.end_object()
