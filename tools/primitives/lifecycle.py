"""
Primitive index lifecycle operations.
"""

from contextlib import contextmanager
from typing import Dict, Any, Iterator, Optional

from core.client import Client
from core.index import Index
from index_types.primitives import CreateOptions
from utils.validation import validate_index_pattern


@contextmanager
def open_index(index_name: str, environment: Optional[str] = None) -> Iterator[Index]:
    """
    Validate an index name and yield a handle on it.

    The client behind the handle is closed when the block exits.

    Args:
        index_name: Concrete index or alias name (no wildcards)
        environment: Environment name (uses current if not specified)

    Yields:
        Index handle bound to a client for the environment

    Raises:
        ValueError: If the name is invalid
    """
    validate_index_pattern(index_name)
    with Client.from_environment(environment) as client:
        yield client.get_index(index_name)


def create_index(
    index_name: str,
    settings: Optional[Dict[str, Any]] = None,
    mappings: Optional[Dict[str, Any]] = None,
    recreate: bool = False,
    routing: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create an index, optionally deleting it first.

    Args:
        index_name: Index to create
        settings: Index settings (shards, replicas, analysis...)
        mappings: Field mappings
        recreate: Delete the index first if it exists
        routing: Routing value for the create request

    Returns:
        Dict with index name, acknowledged flag and HTTP status
    """
    body: Dict[str, Any] = {}
    if settings:
        body["settings"] = settings
    if mappings:
        body["mappings"] = mappings

    with open_index(index_name) as index:
        response = index.create(body, CreateOptions(recreate=recreate, routing=routing))

    return {
        "index": index.name,
        "acknowledged": response.data.get("acknowledged", False),
        "status": response.status,
    }


def delete_index(index_name: str) -> Dict[str, Any]:
    """
    Delete an index.

    Raises:
        IndexNotFoundError: If the index does not exist
    """
    with open_index(index_name) as index:
        response = index.delete()

    return {
        "index": index.name,
        "acknowledged": response.data.get("acknowledged", False),
    }


def index_exists(index_name: str) -> bool:
    """Check whether an index (or alias) exists."""
    with open_index(index_name) as index:
        return index.exists()


def refresh_index(index_name: str) -> Dict[str, Any]:
    """Make recent writes visible to search."""
    with open_index(index_name) as index:
        response = index.refresh()

    return {
        "index": index.name,
        "shards": response.data.get("_shards", {}),
    }
