"""
Primitive layer type definitions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from .errors import InvalidError, InvalidOptionError


class Method(str, Enum):
    """HTTP methods understood by the REST surface."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"


def stringify_param(value: Any) -> str:
    """Render a query parameter the way the engine expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(stringify_param(item) for item in value)
    return str(value)


@dataclass
class Request:
    """A single outgoing request against the engine."""
    path: str
    method: Method = Method.GET
    body: Union[Dict[str, Any], List[Any], str, None] = field(default_factory=dict)
    query: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.method = Method(self.method)
        self.query = {
            str(key): stringify_param(value)
            for key, value in (self.query or {}).items()
            if value is not None
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict, mostly for logging."""
        return {
            "path": self.path,
            "method": self.method.value,
            "body": self.body,
            "query": self.query,
        }


@dataclass
class Response:
    """Engine response: parsed body plus transfer metadata."""
    data: Any
    status: int
    transfer_info: Dict[str, Any] = field(default_factory=dict)

    def is_ok(self) -> bool:
        """True for any 2xx status."""
        return 200 <= self.status < 300


@dataclass(frozen=True)
class CreateOptions:
    """Validated options for index creation."""
    recreate: bool = False
    routing: Optional[str] = None

    @classmethod
    def from_value(cls, options: Any) -> "CreateOptions":
        """
        Build options from the loose forms accepted by ``Index.create``.

        Args:
            options: None, a bool (recreate flag), a mapping with the keys
                ``recreate`` and ``routing``, or a CreateOptions instance

        Returns:
            CreateOptions

        Raises:
            InvalidOptionError: If the mapping holds an unknown key
            InvalidError: If options has an unsupported type
        """
        if options is None:
            return cls()
        if isinstance(options, CreateOptions):
            return options
        if isinstance(options, bool):
            return cls(recreate=options)
        if isinstance(options, Mapping):
            recreate = False
            routing = None
            for key, value in options.items():
                if key == "recreate":
                    recreate = bool(value)
                elif key == "routing":
                    routing = None if value is None else str(value)
                else:
                    raise InvalidOptionError(str(key))
            return cls(recreate=recreate, routing=routing)

        raise InvalidError(
            f"Create options must be a bool or a mapping, got {type(options).__name__}"
        )

    def to_query(self) -> Dict[str, str]:
        """Query parameters for the create request."""
        if self.routing is None:
            return {}
        return {"routing": self.routing}


@dataclass(frozen=True)
class AliasAction:
    """One entry of an ``_aliases`` action list."""
    action: str
    index: str
    alias: str

    @classmethod
    def add(cls, index: str, alias: str) -> "AliasAction":
        return cls("add", index, alias)

    @classmethod
    def remove(cls, index: str, alias: str) -> "AliasAction":
        return cls("remove", index, alias)

    def to_dict(self) -> Dict[str, Any]:
        return {self.action: {"index": self.index, "alias": self.alias}}


@dataclass
class Document:
    """A document handed to the bulk executor."""
    id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)
    index: Optional[str] = None
    routing: Optional[str] = None

    def set_index(self, index: str) -> "Document":
        self.index = index
        return self

    def to_action_metadata(self) -> Dict[str, Any]:
        """Metadata line of a bulk operation."""
        metadata: Dict[str, Any] = {"_index": self.index}
        if self.id is not None:
            metadata["_id"] = self.id
        if self.routing is not None:
            metadata["routing"] = self.routing
        return metadata


@dataclass
class ResultSet:
    """Search results for a query."""
    took: int
    timed_out: bool
    total: int
    hits: List[Dict[str, Any]]
    aggregations: Optional[Dict[str, Any]] = None
    scroll_id: Optional[str] = None
    response: Optional[Response] = None
    query: Any = None

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        response: Optional[Response] = None,
        query: Any = None,
    ) -> "ResultSet":
        """Create from a search response body."""
        hits_data = data.get("hits", {})
        total = hits_data.get("total", 0)
        if isinstance(total, dict):
            total = total.get("value", 0)

        return cls(
            took=data.get("took", 0),
            timed_out=data.get("timed_out", False),
            total=total,
            hits=[hit for hit in hits_data.get("hits", [])],
            aggregations=data.get("aggregations"),
            scroll_id=data.get("_scroll_id"),
            response=response,
            query=query,
        )

    def __len__(self) -> int:
        return len(self.hits)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly summary."""
        result = {
            "took": self.took,
            "timed_out": self.timed_out,
            "total": self.total,
            "hits": self.hits,
        }
        if self.aggregations is not None:
            result["aggregations"] = self.aggregations
        return result


@dataclass
class IndexStats:
    """Elasticsearch index statistics."""
    index: str
    docs_count: int
    docs_deleted: int
    store_size_bytes: int
    indexing_index_total: int
    indexing_index_time_ms: int
    search_query_total: int
    search_query_time_ms: int
    segments_count: int

    @classmethod
    def from_dict(cls, index: str, data: Dict[str, Any]) -> "IndexStats":
        """Create from one entry of a ``_stats`` response."""
        primaries = data.get("primaries", {})
        docs = primaries.get("docs", {})
        store = primaries.get("store", {})
        indexing = primaries.get("indexing", {})
        search = primaries.get("search", {})
        segments = primaries.get("segments", {})

        return cls(
            index=index,
            docs_count=docs.get("count", 0),
            docs_deleted=docs.get("deleted", 0),
            store_size_bytes=store.get("size_in_bytes", 0),
            indexing_index_total=indexing.get("index_total", 0),
            indexing_index_time_ms=indexing.get("index_time_in_millis", 0),
            search_query_total=search.get("query_total", 0),
            search_query_time_ms=search.get("query_time_in_millis", 0),
            segments_count=segments.get("count", 0),
        )


@dataclass
class BulkResponse:
    """Outcome of a ``_bulk`` request."""
    took: int
    errors: bool
    items: List[Dict[str, Any]]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BulkResponse":
        return cls(
            took=data.get("took", 0),
            errors=bool(data.get("errors", False)),
            items=list(data.get("items", [])),
        )

    def failed_items(self) -> List[Dict[str, Any]]:
        """Per-item results that carry an error, tagged with their operation."""
        failed = []
        for item in self.items:
            for operation, result in item.items():
                if "error" in result:
                    failed.append({"operation": operation, **result})
        return failed
