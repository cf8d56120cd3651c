"""
Primitive search operations scoped to one index.
"""

from typing import Dict, Any, List, Optional

from config.environments import get_defaults
from utils.query_builder import create_query
from utils.validation import validate_size

from .lifecycle import open_index


def search_index(
    index_name: str,
    query: Optional[Dict[str, Any]] = None,
    query_string: Optional[str] = None,
    size: Optional[int] = None,
    from_: int = 0,
    sort: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Search one index.

    Args:
        index_name: Index or alias to search
        query: Elasticsearch Query DSL clause or full body
        query_string: Lucene query string, used when query is not given
        size: Number of results (clamped to the configured maximum)
        from_: Offset for pagination
        sort: Sort criteria

    Returns:
        Dict with took, timed_out, total and hits
    """
    defaults = get_defaults()
    if size is None:
        size = defaults["default_size"]

    search_query = create_query(query if query is not None else query_string)
    search_query.set_size(validate_size(size, max_size=defaults["max_results"]))
    search_query.set_from(max(0, from_))
    if sort:
        search_query.set_sort(sort)

    with open_index(index_name) as index:
        return index.search(search_query).to_dict()


def count_index(
    index_name: str,
    query: Optional[Dict[str, Any]] = None,
    query_string: Optional[str] = None,
) -> int:
    """Count the documents of an index matching a query (all if none)."""
    with open_index(index_name) as index:
        return index.count(query if query is not None else query_string)


def delete_index_by_query(
    index_name: str,
    query: Optional[Dict[str, Any]] = None,
    query_string: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Delete the documents of an index matching a query.

    Args:
        index_name: Index to delete from
        query: Query DSL clause, sent as request body
        query_string: Lucene query string, sent as the q parameter

    Returns:
        Engine response body

    Raises:
        ValueError: If neither query nor query_string is given
    """
    if not query and not query_string:
        raise ValueError("Either query or query_string is required")

    with open_index(index_name) as index:
        return index.delete_by_query(query if query else query_string).data
