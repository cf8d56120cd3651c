"""
Environment configuration management.
"""

import os
from typing import Dict, Any, Optional


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _build_config() -> Dict[str, Any]:
    # Read at call time so values loaded by load_dotenv() are honoured
    return {
        "name": "default",
        "elasticsearch": {
            "url": os.getenv("ELASTIC_URL", os.getenv("ELASTICSEARCH_URL", "http://localhost:9200")),
            "username": os.getenv("ELASTIC_USERNAME", os.getenv("ELASTICSEARCH_USERNAME")),
            "password": os.getenv("ELASTIC_PASSWORD", os.getenv("ELASTICSEARCH_PASSWORD")),
            "api_key": os.getenv("ELASTIC_API_KEY", os.getenv("ELASTICSEARCH_API_KEY")),
            "timeout_ms": int(os.getenv("ELASTIC_TIMEOUT", os.getenv("ELASTICSEARCH_TIMEOUT", "30000"))),
            "verify_certs": _env_flag("ELASTIC_VERIFY_CERTS", True),
            "ca_certs": os.getenv("ELASTIC_CA_CERTS"),
        },
        "defaults": {
            "default_size": 10,
            "max_results": int(os.getenv("ELASTIC_MAX_RESULTS", "1000")),
        },
        "logging": {
            "level": os.getenv("ELASTIC_LOG_LEVEL", "WARNING").upper(),
        },
    }


def get_current_environment() -> str:
    """
    Get the current environment name.

    Returns:
        Always returns 'default' since we use a single environment
    """
    return "default"


def get_environment_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get configuration for the environment.

    Args:
        environment: Ignored (kept for compatibility)

    Returns:
        Environment configuration dictionary
    """
    return _build_config()


def get_elasticsearch_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get Elasticsearch connection configuration.

    Args:
        environment: Ignored (kept for compatibility)

    Returns:
        Elasticsearch configuration dictionary
    """
    return get_environment_config(environment)["elasticsearch"]


def get_defaults(environment: Optional[str] = None) -> Dict[str, Any]:
    """Result size defaults used by the tool layer."""
    return get_environment_config(environment)["defaults"]


def get_log_level(environment: Optional[str] = None) -> str:
    """Root log level name, e.g. "WARNING"."""
    return get_environment_config(environment)["logging"]["level"]
