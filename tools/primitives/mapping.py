"""
Primitive mapping, settings, stats and analysis operations.
"""

from dataclasses import asdict
from typing import Dict, Any, List, Optional

from .lifecycle import open_index


def get_index_mapping(index_name: str) -> Dict[str, Any]:
    """Field mappings of an index (or of the index behind an alias)."""
    with open_index(index_name) as index:
        return index.get_mapping()


def get_index_settings(index_name: str) -> Dict[str, Any]:
    """The ``index`` settings block of an index."""
    with open_index(index_name) as index:
        return index.get_settings().get()


def get_index_stats(index_name: str) -> Dict[str, Any]:
    """Primaries statistics of an index."""
    with open_index(index_name) as index:
        return asdict(index.get_stats().get())


def analyze_text(
    index_name: str,
    text: str,
    analyzer: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Run text through an index analyzer.

    Args:
        index_name: Index whose analyzers are used
        text: Text to analyze
        analyzer: Analyzer name (index default if not given)

    Returns:
        Token dicts as returned by the engine
    """
    args = {"analyzer": analyzer} if analyzer else {}
    with open_index(index_name) as index:
        return index.analyze(text, args)
