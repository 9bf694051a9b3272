"""Configuration settings for the reflexion graph."""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

LOG_LEVEL_ENV = "REFLEXION_LOG_LEVEL"


@dataclass
class ReflexionGraphConfig:
    """Configuration class for ReflexionGraph settings."""

    log_level: str = "INFO"

    # Soft size limits: crossing them logs a warning, inserts still succeed
    max_nodes: int = 10000
    max_edges: int = 50000

    def __post_init__(self):
        """Apply environment overrides and validate."""
        env_level = os.getenv(LOG_LEVEL_ENV)
        if env_level:
            self.log_level = env_level

        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "log_level": self.log_level,
            "max_nodes": self.max_nodes,
            "max_edges": self.max_edges,
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ReflexionGraphConfig":
        """Create configuration from dictionary."""
        return cls(**config_dict)


def load_config(env_file: Optional[Union[str, os.PathLike]] = None) -> ReflexionGraphConfig:
    """Load ``.env`` settings into the environment, then build the config."""
    load_dotenv(env_file)
    return ReflexionGraphConfig()
