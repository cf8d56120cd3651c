"""
Primitive alias operations.
"""

from typing import Dict, Any, List

from utils.validation import validate_alias_name

from .lifecycle import open_index


def add_index_alias(
    index_name: str,
    alias: str,
    replace: bool = False,
) -> Dict[str, Any]:
    """
    Point an alias at an index.

    With replace, the alias is moved: every index holding it loses it in
    the same atomic request.

    Args:
        index_name: Index that receives the alias
        alias: Alias name
        replace: Move the alias instead of adding a holder

    Returns:
        Dict with index, alias, replace flag and acknowledged flag
    """
    validate_alias_name(alias)
    with open_index(index_name) as index:
        response = index.add_alias(alias, replace=replace)

    return {
        "index": index.name,
        "alias": alias,
        "replaced": replace,
        "acknowledged": response.data.get("acknowledged", False),
    }


def remove_index_alias(index_name: str, alias: str) -> Dict[str, Any]:
    """Remove an alias from an index."""
    validate_alias_name(alias)
    with open_index(index_name) as index:
        response = index.remove_alias(alias)

    return {
        "index": index.name,
        "alias": alias,
        "acknowledged": response.data.get("acknowledged", False),
    }


def list_index_aliases(index_name: str) -> List[str]:
    """Aliases currently pointing at an index."""
    with open_index(index_name) as index:
        return index.get_aliases()
