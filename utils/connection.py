"""
Elasticsearch connection management.
"""

import logging
from typing import Optional

from elasticsearch import ApiError, Elasticsearch, TransportError

from config.environments import get_elasticsearch_config


logger = logging.getLogger(__name__)


def get_elasticsearch_client(environment: Optional[str] = None) -> Elasticsearch:
    """
    Create an Elasticsearch client for the specified environment.

    Args:
        environment: Environment name (uses current if not specified)

    Returns:
        Configured Elasticsearch client
    """
    config = get_elasticsearch_config(environment)

    params = {
        "hosts": [config["url"]],
        "request_timeout": config["timeout_ms"] / 1000.0,
        "verify_certs": config.get("verify_certs", True),
    }

    if config.get("ca_certs"):
        params["ca_certs"] = config["ca_certs"]

    if config.get("api_key"):
        params["api_key"] = config["api_key"]
    elif config.get("username") and config.get("password"):
        params["basic_auth"] = (config["username"], config["password"])

    return Elasticsearch(**params)


def test_connection(environment: Optional[str] = None) -> bool:
    """
    Test Elasticsearch connection.

    Args:
        environment: Environment name (uses current if not specified)

    Returns:
        True if the cluster answered
    """
    es = get_elasticsearch_client(environment)

    try:
        response = es.info()
        return "version" in response
    except (ApiError, TransportError) as e:
        logger.warning("Elasticsearch connection check failed: %s", e)
        return False
    finally:
        es.close()
