"""
ClusterPulse Event Documents

Wraps an event body into a complete document: opens the root object,
writes ``@timestamp``, lets the event append its own fields, and closes
the root. Each call uses its own builder, so one event may be serialized
from several threads at once.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional, Union

import structlog

from clusterpulse.config import ClusterPulseConfig, get_config
from clusterpulse.events.base import Event
from clusterpulse.xcontent.builder import DocumentBuilder, DocumentBuilderError

logger = structlog.get_logger(__name__)

TIMESTAMP_FIELD = "@timestamp"
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_timestamp(timestamp: int, timestamp_format: str = "epoch_millis") -> Union[int, str]:
    """Render epoch milliseconds as configured (``2014-01-01T00:00:00.000Z`` for iso8601)."""
    if timestamp_format == "epoch_millis":
        return timestamp
    if timestamp_format == "iso8601":
        try:
            moment = _EPOCH + timedelta(milliseconds=timestamp)
        except (ValueError, OverflowError, OSError) as e:
            raise DocumentBuilderError(
                f"timestamp {timestamp} cannot be rendered as iso8601: {e}",
                TIMESTAMP_FIELD,
            ) from e
        return (
            f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
            f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
            f".{moment.microsecond // 1000:03d}Z"
        )
    raise ValueError(f"Unknown timestamp format: {timestamp_format}")


def build_event_document(
    event: Event,
    params: Optional[Mapping[str, Any]] = None,
    config: Optional[ClusterPulseConfig] = None,
) -> DocumentBuilder:
    """Write ``event`` into a fresh builder and return the closed builder."""
    settings = (config or get_config()).serialization
    if params is None:
        params = settings.to_params()

    builder = DocumentBuilder(max_depth=settings.max_depth)
    try:
        builder.start_object()
        builder.field(TIMESTAMP_FIELD, format_timestamp(event.timestamp, settings.timestamp_format))
        event.add_body(builder, params)
        builder.end_object()
    except DocumentBuilderError as e:
        logger.warning(
            "events.serialize_failed",
            event_type=event.type(),
            cluster=event.cluster_name,
            error=str(e),
        )
        raise
    return builder


def serialize_event(
    event: Event,
    params: Optional[Mapping[str, Any]] = None,
    config: Optional[ClusterPulseConfig] = None,
) -> bytes:
    """Serialize ``event`` into an encoded JSON document."""
    config = config or get_config()
    builder = build_event_document(event, params=params, config=config)
    document = builder.to_bytes(pretty=config.serialization.pretty)

    logger.debug(
        "events.serialized",
        event_type=event.type(),
        cluster=event.cluster_name,
        size_bytes=len(document),
    )
    return document


def event_to_dict(
    event: Event,
    params: Optional[Mapping[str, Any]] = None,
    config: Optional[ClusterPulseConfig] = None,
) -> Dict[str, Any]:
    """Same document as :func:`serialize_event`, as a dict."""
    return build_event_document(event, params=params, config=config).to_dict()
