"""
Query representations accepted by the search family.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class Query:
    """
    Search body builder.

    Holds the full ``_search`` body; the query clause lives under the
    ``query`` key and defaults to ``match_all``.
    """
    params: Dict[str, Any] = field(default_factory=lambda: {"query": {"match_all": {}}})

    def set_query(self, clause: Dict[str, Any]) -> "Query":
        self.params["query"] = clause
        return self

    def get_query(self) -> Dict[str, Any]:
        return self.params.get("query", {"match_all": {}})

    def set_size(self, size: int) -> "Query":
        self.params["size"] = int(size)
        return self

    def set_from(self, from_: int) -> "Query":
        self.params["from"] = int(from_)
        return self

    def set_sort(self, sort: List[Dict[str, Any]]) -> "Query":
        self.params["sort"] = sort
        return self

    def set_source(self, source: Union[bool, List[str], Dict[str, Any]]) -> "Query":
        self.params["_source"] = source
        return self

    def set_highlight(self, highlight: Dict[str, Any]) -> "Query":
        self.params["highlight"] = highlight
        return self

    def set_explain(self, explain: bool = True) -> "Query":
        self.params["explain"] = bool(explain)
        return self

    def add_aggregation(self, name: str, aggregation: Dict[str, Any]) -> "Query":
        self.params.setdefault("aggs", {})[name] = aggregation
        return self

    def has_param(self, key: str) -> bool:
        return key in self.params

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a ``_search`` body."""
        return copy.deepcopy(self.params)


@dataclass(frozen=True)
class RawString:
    """Query string syntax, e.g. ``title:foo``."""
    text: str


@dataclass(frozen=True)
class Structured:
    """A query document given as a mapping."""
    document: Dict[str, Any]


@dataclass(frozen=True)
class Builder:
    """A pre-built Query object."""
    query: Query


QueryInput = Union[RawString, Structured, Builder]

# Anything a caller may pass where a query is expected
QueryLike = Optional[Union[str, Dict[str, Any], Query, RawString, Structured, Builder]]
