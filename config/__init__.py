"""
Configuration management for the index control server.
"""

from .environments import (
    get_current_environment,
    get_defaults,
    get_elasticsearch_config,
    get_environment_config,
    get_log_level,
)

__all__ = [
    "get_current_environment",
    "get_defaults",
    "get_elasticsearch_config",
    "get_environment_config",
    "get_log_level",
]
