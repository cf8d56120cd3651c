"""
Type definitions for index operations.
"""

from .errors import (
    IndexControlError,
    InvalidError,
    InvalidOptionError,
    ResponseError,
    IndexNotFoundError,
    BulkResponseError,
)

from .primitives import (
    Method,
    Request,
    Response,
    CreateOptions,
    AliasAction,
    Document,
    ResultSet,
    IndexStats,
    BulkResponse,
)

from .query import (
    Query,
    RawString,
    Structured,
    Builder,
    QueryInput,
    QueryLike,
)

__all__ = [
    # Errors
    "IndexControlError",
    "InvalidError",
    "InvalidOptionError",
    "ResponseError",
    "IndexNotFoundError",
    "BulkResponseError",
    # Primitives
    "Method",
    "Request",
    "Response",
    "CreateOptions",
    "AliasAction",
    "Document",
    "ResultSet",
    "IndexStats",
    "BulkResponse",
    # Queries
    "Query",
    "RawString",
    "Structured",
    "Builder",
    "QueryInput",
    "QueryLike",
]
