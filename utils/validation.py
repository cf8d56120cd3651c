"""
Input validation utilities.
"""

import re
from typing import Any

from index_types.errors import InvalidError


def validate_index_name(name: Any) -> str:
    """
    Coerce a scalar index name to str.

    Args:
        name: Index name (str, int or float)

    Returns:
        The name as a string

    Raises:
        InvalidError: If name is not a scalar
    """
    # bool is an int subclass but never a sensible index name
    if isinstance(name, bool) or not isinstance(name, (str, int, float)):
        raise InvalidError("Index name should be a scalar type")
    return str(name)


def validate_index_pattern(pattern: str, allow_wildcards: bool = False) -> None:
    """
    Validate an Elasticsearch index name or pattern.

    Args:
        pattern: Index name or pattern to validate
        allow_wildcards: Whether "*" is accepted

    Raises:
        ValueError: If pattern is invalid
    """
    if not pattern:
        raise ValueError("Index pattern cannot be empty")

    if pattern.startswith("_"):
        raise ValueError("Index pattern cannot start with underscore")

    allowed = r'[^a-zA-Z0-9\-_.*]' if allow_wildcards else r'[^a-zA-Z0-9\-_.]'
    invalid_chars = re.findall(allowed, pattern)
    if invalid_chars:
        raise ValueError(f"Invalid characters in index pattern: {invalid_chars}")


def validate_alias_name(alias: str) -> None:
    """
    Validate an alias name; same rules as index names, no wildcards.

    Raises:
        ValueError: If alias is invalid
    """
    if not alias:
        raise ValueError("Alias name cannot be empty")
    validate_index_pattern(alias)


def validate_size(size: int, max_size: int = 10000) -> int:
    """
    Validate and clamp size parameter.

    Args:
        size: Requested size
        max_size: Maximum allowed size

    Returns:
        Valid size value
    """
    return clamp_value(size, min_value=1, max_value=max_size)


def clamp_value(value: Any, min_value: Any, max_value: Any) -> Any:
    """
    Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_value, min(value, max_value))
