"""
Search over one or more indices.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from index_types.errors import InvalidError, InvalidOptionError
from index_types.primitives import Method, Response, ResultSet
from index_types.query import Query, QueryLike
from utils.query_builder import create_query
from utils.response_parser import extract_count

if TYPE_CHECKING:
    from core.client import Client
    from core.index import Index


logger = logging.getLogger(__name__)

# Options sent as URL parameters rather than in the body
URL_OPTIONS = (
    "routing",
    "preference",
    "search_type",
    "timeout",
    "scroll",
    "request_cache",
    "terminate_after",
)


class ResultSetBuilder(ABC):
    """Turns a search response into a ResultSet."""

    @abstractmethod
    def build_result_set(self, response: Response, query: Query) -> ResultSet:
        ...


class DefaultResultSetBuilder(ResultSetBuilder):
    def build_result_set(self, response: Response, query: Query) -> ResultSet:
        return ResultSet.from_dict(response.data or {}, response=response, query=query)


class Search:
    """
    A search request being assembled.

    Args:
        client: Shared REST client
        builder: Result set builder (DefaultResultSetBuilder if omitted)
    """

    def __init__(self, client: "Client", builder: Optional[ResultSetBuilder] = None):
        self._client = client
        self._builder = builder or DefaultResultSetBuilder()
        self._indices: List[str] = []
        self._query = Query()
        self._options: Dict[str, Any] = {}

    @property
    def indices(self) -> List[str]:
        return list(self._indices)

    @property
    def query(self) -> Query:
        return self._query

    @property
    def options(self) -> Dict[str, Any]:
        return dict(self._options)

    def add_index(self, index: Union["Index", str]) -> "Search":
        name = index if isinstance(index, str) else index.name
        if not name:
            raise InvalidError("Index name cannot be empty")
        if name not in self._indices:
            self._indices.append(name)
        return self

    def set_query(self, query: QueryLike) -> "Search":
        self._query = create_query(query)
        return self

    def set_option(self, key: str, value: Any) -> "Search":
        if key not in URL_OPTIONS:
            raise InvalidOptionError(key)
        self._options[key] = value
        return self

    def set_options_and_query(
        self,
        options: Union[None, int, Dict[str, Any]] = None,
        query: QueryLike = "",
    ) -> "Search":
        """
        Apply a query and its options in one go.

        Args:
            options: None, an int result limit, or a mapping where "limit",
                "from" and "explain" shape the body and the remaining keys
                are URL options
            query: Any accepted query form

        Raises:
            InvalidOptionError: If a mapping key is not a known option
        """
        self.set_query(query)

        if options is None:
            return self
        if isinstance(options, bool) or not isinstance(options, (int, dict)):
            raise InvalidError(
                f"Search options must be an int or a mapping, got {type(options).__name__}"
            )
        if isinstance(options, int):
            self._query.set_size(options)
            return self

        remaining = dict(options)
        if "limit" in remaining:
            self._query.set_size(remaining.pop("limit"))
        if "from" in remaining:
            self._query.set_from(remaining.pop("from"))
        if "explain" in remaining:
            self._query.set_explain(remaining.pop("explain"))

        for key, value in remaining.items():
            self.set_option(key, value)
        return self

    def get_path(self, endpoint: str = "_search") -> str:
        if not self._indices:
            return endpoint
        return f"{','.join(self._indices)}/{endpoint}"

    def search(self) -> ResultSet:
        """Run the search."""
        path = self.get_path("_search")
        logger.debug("Searching %s", path)
        response = self._client.request(path, Method.POST, self._query.to_dict(), self._options)
        return self._builder.build_result_set(response, self._query)

    def count(self) -> int:
        """Count the documents matching the query."""
        options = {key: value for key, value in self._options.items() if key != "scroll"}
        response = self._client.request(
            self.get_path("_count"),
            Method.POST,
            {"query": self._query.get_query()},
            options,
        )
        return extract_count(response.data)
