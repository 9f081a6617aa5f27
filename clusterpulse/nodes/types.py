"""
ClusterPulse Node Types

Descriptor types for the nodes that appear in cluster lifecycle events.
A ``NodeInfo`` is owned by whoever tracks cluster membership; events only
borrow a reference to it for description and serialization.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


# =============================================================================
# Node Types
# =============================================================================


class NodeRole(str, Enum):
    """Role of a node in the cluster."""
    MASTER = "master"                     # Currently elected master
    MASTER_ELIGIBLE = "master_eligible"   # May win a master election
    DATA = "data"                         # Holds data, never votes
    CLIENT = "client"                     # Coordinating only


class NodeStatus(str, Enum):
    """Status of a node."""
    JOINING = "joining"
    ACTIVE = "active"
    LEAVING = "leaving"
    LEFT = "left"


# =============================================================================
# Node Info
# =============================================================================


@dataclass
class NodeInfo:
    """Identity of a cluster node as seen by the monitoring agent."""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""
    host: str = "localhost"
    port: int = 9300

    # Role and status
    role: NodeRole = NodeRole.MASTER_ELIGIBLE
    status: NodeStatus = NodeStatus.ACTIVE

    # Version info
    version: str = "1.0.0"

    # Free-form node attributes (rack, zone, ...)
    attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def is_master(self) -> bool:
        return self.role == NodeRole.MASTER
