"""
ClusterPulse Structured Content

Ordered document builder used to serialize cluster events.
"""

from clusterpulse.xcontent.builder import (
    DEFAULT_MAX_DEPTH,
    DocumentBuilder,
    DocumentBuilderError,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DocumentBuilder",
    "DocumentBuilderError",
]
