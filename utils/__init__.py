"""
Utility functions for the index control server.
"""

from .connection import get_elasticsearch_client, test_connection
from .validation import (
    validate_index_name,
    validate_index_pattern,
    validate_alias_name,
    validate_size,
    clamp_value,
)
from .query_builder import (
    build_match_all_query,
    build_query_string_query,
    normalize_query,
    to_query_document,
    create_query,
)
from .response_parser import (
    first_entry,
    extract_mappings,
    extract_alias_names,
    extract_index_settings,
    extract_stats_entry,
    extract_count,
)

__all__ = [
    # Connection
    "get_elasticsearch_client",
    "test_connection",
    # Validation
    "validate_index_name",
    "validate_index_pattern",
    "validate_alias_name",
    "validate_size",
    "clamp_value",
    # Query building
    "build_match_all_query",
    "build_query_string_query",
    "normalize_query",
    "to_query_document",
    "create_query",
    # Response parsing
    "first_entry",
    "extract_mappings",
    "extract_alias_names",
    "extract_index_settings",
    "extract_stats_entry",
    "extract_count",
]
