"""
Primitive tools for index-scoped Elasticsearch operations.
"""

from .lifecycle import create_index, delete_index, index_exists, refresh_index
from .aliases import add_index_alias, remove_index_alias, list_index_aliases
from .search import search_index, count_index, delete_index_by_query
from .mapping import get_index_mapping, get_index_settings, get_index_stats, analyze_text

__all__ = [
    # Lifecycle operations
    "create_index",
    "delete_index",
    "index_exists",
    "refresh_index",
    # Alias operations
    "add_index_alias",
    "remove_index_alias",
    "list_index_aliases",
    # Search operations
    "search_index",
    "count_index",
    "delete_index_by_query",
    # Mapping operations
    "get_index_mapping",
    "get_index_settings",
    "get_index_stats",
    "analyze_text",
]
