"""
Response unwrapping utilities for Elasticsearch.
"""

from typing import Any, Dict, List


def first_entry(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return the value of the first key of an index-keyed response.

    Responses addressed through an alias are keyed by the real index name,
    which the caller cannot predict, so the first entry is taken whatever
    its key. A wildcard pattern matching several indices would make this
    ambiguous.

    Args:
        data: Response body keyed by index name

    Returns:
        First entry, or an empty dict
    """
    if not data:
        return {}
    return next(iter(data.values())) or {}


def extract_mappings(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract the mappings from a ``_mapping`` response.

    Args:
        data: Elasticsearch response

    Returns:
        Mappings dict (empty if absent)
    """
    return first_entry(data).get("mappings", {})


def extract_alias_names(data: Dict[str, Any], index_name: str) -> List[str]:
    """
    Extract the alias names held by one index from an ``_alias`` response.

    Args:
        data: Response body keyed by index name
        index_name: Index whose entry should be read

    Returns:
        Alias names in response order
    """
    entry = (data or {}).get(index_name)
    if not entry:
        return []
    aliases = entry.get("aliases")
    if not aliases:
        return []
    return list(aliases.keys())


def extract_index_settings(data: Dict[str, Any]) -> Dict[str, Any]:
    """Extract the ``index`` settings block from a ``_settings`` response."""
    return first_entry(data).get("settings", {}).get("index", {})


def extract_stats_entry(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract the stats of the addressed index from a ``_stats`` response.

    Returns:
        Dict with "index" (real index name) and "data" keys
    """
    indices = data.get("indices", {})
    if not indices:
        return {"index": None, "data": {}}
    name = next(iter(indices))
    return {"index": name, "data": indices[name]}


def extract_count(data: Dict[str, Any]) -> int:
    """Extract the document count from a ``_count`` response."""
    return int(data.get("count", 0))
