"""
Query normalization utilities.

Every query argument (placeholder, raw query string, mapping or Query
object) is tagged with one of the variants from ``index_types.query``
and rendered into a single wire document from there.
"""

import copy
from collections.abc import Mapping
from typing import Any, Dict

from index_types.errors import InvalidError
from index_types.query import Builder, Query, QueryInput, QueryLike, RawString, Structured


def build_match_all_query() -> Dict[str, Any]:
    """Query clause matching every document."""
    return {"match_all": {}}


def build_query_string_query(text: str) -> Dict[str, Any]:
    """
    Build a query_string clause.

    Args:
        text: Lucene query string syntax (e.g. "title:foo")

    Returns:
        Query string clause dict
    """
    return {"query_string": {"query": text}}


def normalize_query(query: QueryLike) -> QueryInput:
    """
    Tag a loosely typed query argument.

    Args:
        query: None, "", a query string, a mapping, a Query, or an
            already tagged variant

    Returns:
        RawString, Structured or Builder

    Raises:
        InvalidError: If the argument is of an unsupported type
    """
    if isinstance(query, (RawString, Structured, Builder)):
        return query
    if query is None or (isinstance(query, (str, Mapping)) and not query):
        return Structured(build_match_all_query())
    if isinstance(query, str):
        return RawString(query)
    if isinstance(query, Mapping):
        return Structured(dict(query))
    if isinstance(query, Query):
        return Builder(query)

    raise InvalidError(f"Unsupported query type: {type(query).__name__}")


def to_query_document(query: QueryLike) -> Dict[str, Any]:
    """
    Render any query argument into its query clause.

    A mapping with a top-level "query" key is taken as a full search body
    and only its clause is returned.
    """
    variant = normalize_query(query)

    if isinstance(variant, RawString):
        return build_query_string_query(variant.text)
    if isinstance(variant, Builder):
        return variant.query.get_query()

    document = variant.document
    if "query" in document:
        return document["query"]
    return document


def create_query(query: QueryLike) -> Query:
    """
    Wrap any query argument in a Query builder.

    Query objects are returned as they are, mappings with a "query" key
    become the full search body, everything else becomes the clause.
    """
    variant = normalize_query(query)

    if isinstance(variant, Builder):
        return variant.query
    if isinstance(variant, Structured) and "query" in variant.document:
        return Query(params=copy.deepcopy(variant.document))
    return Query().set_query(to_query_document(variant))
