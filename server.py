"""
FastMCP Elasticsearch index control server.

This server exposes index-scoped operations as tools:
- health: Check Elasticsearch connectivity
- lifecycle: create, delete, check and refresh indices
- aliases: add (optionally swapping atomically), remove and list aliases
- search: search, count and delete-by-query within one index
- introspection: mappings, settings, stats and analyzer output
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

load_dotenv()

from config import get_current_environment, get_log_level
from tools.primitives import (
    add_index_alias,
    analyze_text,
    count_index,
    create_index,
    delete_index,
    delete_index_by_query,
    get_index_mapping,
    get_index_settings,
    get_index_stats,
    index_exists,
    list_index_aliases,
    refresh_index,
    remove_index_alias,
    search_index,
)
from utils import test_connection

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

mcp = FastMCP("es-index-control")


# ========== HEALTH TOOL ==========

@mcp.tool()
def health() -> Dict[str, Any]:
    """
    Check Elasticsearch connectivity for the current environment.
    """
    env = get_current_environment()
    connected = test_connection()

    return {
        "overall_status": "healthy" if connected else "degraded",
        "environment": env,
        "services": {
            "elasticsearch": {
                "service": "elasticsearch",
                "connected": connected,
            },
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ========== LIFECYCLE TOOLS ==========

@mcp.tool()
def create_index_tool(
    index_name: str,
    settings: Optional[Dict[str, Any]] = None,
    mappings: Optional[Dict[str, Any]] = None,
    recreate: bool = False,
    routing: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create an index.

    Args:
        index_name: Index to create
        settings: Index settings (e.g. {"number_of_shards": 1})
        mappings: Field mappings (e.g. {"properties": {...}})
        recreate: Delete the index first if it already exists
        routing: Optional routing value
    """
    return create_index(
        index_name=index_name,
        settings=settings,
        mappings=mappings,
        recreate=recreate,
        routing=routing,
    )


@mcp.tool()
def delete_index_tool(index_name: str) -> Dict[str, Any]:
    """Delete an index."""
    return delete_index(index_name)


@mcp.tool()
def index_exists_tool(index_name: str) -> bool:
    """Check whether an index or alias exists."""
    return index_exists(index_name)


@mcp.tool()
def refresh_index_tool(index_name: str) -> Dict[str, Any]:
    """Refresh an index so recent writes become searchable."""
    return refresh_index(index_name)


# ========== ALIAS TOOLS ==========

@mcp.tool()
def add_alias_tool(index_name: str, alias: str, replace: bool = False) -> Dict[str, Any]:
    """
    Point an alias at an index.

    Args:
        index_name: Index that receives the alias
        alias: Alias name
        replace: Move the alias atomically from the indices that hold it
    """
    return add_index_alias(index_name, alias, replace=replace)


@mcp.tool()
def remove_alias_tool(index_name: str, alias: str) -> Dict[str, Any]:
    """Remove an alias from an index."""
    return remove_index_alias(index_name, alias)


@mcp.tool()
def list_aliases_tool(index_name: str) -> List[str]:
    """List the aliases pointing at an index."""
    return list_index_aliases(index_name)


# ========== SEARCH TOOLS ==========

@mcp.tool()
def search_index_tool(
    index_name: str,
    query: Optional[Dict[str, Any]] = None,
    query_string: Optional[str] = None,
    size: Optional[int] = None,
    from_offset: int = 0,
    sort: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Search one index.

    Args:
        index_name: Index or alias to search
        query: Elasticsearch Query DSL clause
        query_string: Lucene query string (used when query is not given)
        size: Number of results
        from_offset: Pagination offset
        sort: Sort criteria
    """
    return search_index(
        index_name=index_name,
        query=query,
        query_string=query_string,
        size=size,
        from_=from_offset,
        sort=sort,
    )


@mcp.tool()
def count_documents_tool(
    index_name: str,
    query: Optional[Dict[str, Any]] = None,
    query_string: Optional[str] = None,
) -> int:
    """Count documents matching a query (all documents if none given)."""
    return count_index(index_name, query=query, query_string=query_string)


@mcp.tool()
def delete_by_query_tool(
    index_name: str,
    query: Optional[Dict[str, Any]] = None,
    query_string: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Delete the documents matching a query.

    A query_string is sent as the q parameter, a query as the request body.
    One of them is required.
    """
    return delete_index_by_query(index_name, query=query, query_string=query_string)


# ========== INTROSPECTION TOOLS ==========

@mcp.tool()
def get_mapping_tool(index_name: str) -> Dict[str, Any]:
    """Field mappings of an index."""
    return get_index_mapping(index_name)


@mcp.tool()
def get_settings_tool(index_name: str) -> Dict[str, Any]:
    """Index settings."""
    return get_index_settings(index_name)


@mcp.tool()
def get_stats_tool(index_name: str) -> Dict[str, Any]:
    """Primaries statistics of an index."""
    return get_index_stats(index_name)


@mcp.tool()
def analyze_text_tool(
    index_name: str,
    text: str,
    analyzer: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Run text through an index analyzer and return its tokens."""
    return analyze_text(index_name, text, analyzer=analyzer)


if __name__ == "__main__":
    mcp.run()
