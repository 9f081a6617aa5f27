"""
ClusterPulse Configuration

Type-safe settings with Pydantic, loadable from the environment
(``CLUSTERPULSE_`` prefix, ``__`` for nested fields) or a JSON file.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class LogLevel(str, Enum):
    """Logging levels for ClusterPulse."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class SerializationConfig(BaseModel):
    """How events are rendered into documents."""
    timestamp_format: Literal["epoch_millis", "iso8601"] = "epoch_millis"
    pretty: bool = False
    max_depth: int = Field(default=32, ge=1, le=128, description="Max object nesting")
    node_attributes: bool = Field(default=True, description="Write node attributes")

    def to_params(self) -> Dict[str, Any]:
        """Render params handed to ``Event.add_body``."""
        return {"node_attributes": self.node_attributes}


class ClusterPulseConfig(BaseSettings):
    """
    Main ClusterPulse configuration.

    Environment variables are prefixed with CLUSTERPULSE_
    (e.g., CLUSTERPULSE_SERIALIZATION__PRETTY=true)
    """
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] = "json"

    serialization: SerializationConfig = Field(default_factory=SerializationConfig)

    model_config = {
        "env_prefix": "CLUSTERPULSE_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
    }

    @classmethod
    def from_file(cls, config_path: Path) -> "ClusterPulseConfig":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            config_data = json.load(f)

        return cls(**config_data)


# Global configuration instance (lazy loaded)
_config: Optional[ClusterPulseConfig] = None


def get_config() -> ClusterPulseConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ClusterPulseConfig()
    return _config


def set_config(config: ClusterPulseConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration to default."""
    global _config
    _config = None
