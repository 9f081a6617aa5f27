"""
ClusterPulse Event Envelope

Base type for every cluster lifecycle event.

An event is an immutable fact captured at the moment it was observed.
Serialization writes an envelope shared by all events followed by the
fields of each class level, from the root of the hierarchy down to the
concrete event:

    Event._write_fields          -> type
    NodeEvent._write_fields      -> event, event_source
    NodeJoinLeave._write_fields  -> node { ... }

Each level defines at most one ``_write_fields`` and never calls its
parent's; the writers are collected into a fixed sequence when the class
is created and :meth:`Event.add_body` runs them in that order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Mapping, Optional, Tuple

from clusterpulse.xcontent.builder import DocumentBuilder

BodyWriter = Callable[["Event", DocumentBuilder, Optional[Mapping[str, Any]]], None]


@dataclass(frozen=True, eq=False)
class Event(ABC):
    """
    Common envelope for cluster events.

    Attributes:
        timestamp: Milliseconds since the epoch. Not range-checked.
        cluster_name: Name of the monitored cluster.
    """
    timestamp: int
    cluster_name: str

    _body_writers: ClassVar[Tuple[BodyWriter, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._body_writers = tuple(
            klass.__dict__["_write_fields"]
            for klass in reversed(cls.__mro__)
            if "_write_fields" in klass.__dict__
        )

    def __post_init__(self) -> None:
        if self.cluster_name is None:
            raise TypeError(f"{type(self).__name__}: cluster_name must not be None")

    def __str__(self) -> str:
        return self.concise_description()

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    @abstractmethod
    def type(self) -> str:
        """Top-level discriminator shared by a whole branch of events."""

    @abstractmethod
    def concise_description(self) -> str:
        """One-line human readable summary of the event."""

    @classmethod
    def body_writers(cls) -> Tuple[BodyWriter, ...]:
        """Field writers in the order ``add_body`` runs them."""
        return cls._body_writers

    def add_body(
        self,
        builder: DocumentBuilder,
        params: Optional[Mapping[str, Any]] = None,
    ) -> DocumentBuilder:
        """
        Append this event's fields to the open object in ``builder``.

        Base fields are written first and the most derived fields last.
        Builder errors propagate unchanged.
        """
        for writer in self._body_writers:
            writer(self, builder, params)
        return builder

    def _write_fields(
        self,
        builder: DocumentBuilder,
        params: Optional[Mapping[str, Any]],
    ) -> None:
        builder.field("type", self.type())
