"""
Index handle.

All communication to and from a single index goes through this object.
Index-scoped requests are built by prefixing a relative path with the
index name; alias writes are cluster-level and go through the client.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Union

from core.search import ResultSetBuilder, Search
from core.settings import IndexSettings
from core.stats import IndexStatsResource
from core.status import Status
from index_types.errors import IndexNotFoundError
from index_types.primitives import (
    AliasAction,
    BulkResponse,
    CreateOptions,
    Document,
    Method,
    Response,
    ResultSet,
)
from index_types.query import QueryLike, RawString
from utils.query_builder import normalize_query, to_query_document
from utils.response_parser import extract_alias_names, extract_mappings
from utils.validation import validate_index_name

if TYPE_CHECKING:
    from core.client import Client


logger = logging.getLogger(__name__)


class Index:
    """
    Handle on one index.

    Args:
        client: Shared REST client
        name: Index name; any scalar is accepted and stored as str

    Raises:
        InvalidError: If name is not a scalar
    """

    def __init__(self, client: "Client", name: Union[str, int, float]):
        self._client = client
        self._name = validate_index_name(name)

    def __repr__(self) -> str:
        return f"Index({self._name!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def client(self) -> "Client":
        return self._client

    def request(
        self,
        path: str,
        method: Union[Method, str],
        body: Any = None,
        query: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """
        Make a request scoped to this index.

        Args:
            path: Path relative to the index, e.g. "_mapping"
            method: HTTP method
            body: Mapping or raw string body
            query: Query parameters

        Returns:
            Response from the client
        """
        path = f"{self._name}/{path}"
        return self._client.request(path, method, body if body is not None else {}, query or {})

    # Lifecycle

    def create(
        self,
        args: Optional[Dict[str, Any]] = None,
        options: Union[None, bool, Dict[str, Any], CreateOptions] = None,
    ) -> Response:
        """
        Create the index.

        Args:
            args: Creation body (settings, mappings)
            options: True to delete the index first, or a mapping with
                "recreate" and/or "routing". A mapping "recreate" value is
                read as a flag, so {"recreate": False} skips the delete
                where a bare key presence would not

        Returns:
            Response of the PUT request

        Raises:
            InvalidOptionError: If options holds an unknown key; no request
                is issued in that case
            ResponseError: If deletion fails for another reason than a
                missing index, or if creation fails
        """
        create_options = CreateOptions.from_value(options)

        if create_options.recreate:
            self._delete_if_exists()

        response = self.request("", Method.PUT, args or {}, create_options.to_query())
        logger.info("Created index %s", self._name)
        return response

    def _delete_if_exists(self) -> None:
        try:
            self.delete()
        except IndexNotFoundError:
            logger.debug("Index %s does not exist, nothing to delete", self._name)

    def delete(self) -> Response:
        """Delete the index."""
        response = self.request("", Method.DELETE)
        logger.info("Deleted index %s", self._name)
        return response

    def exists(self) -> bool:
        """True if the index exists; only a 200 status counts."""
        response = self._client.request(self._name, Method.HEAD)
        return response.status == 200

    def open(self) -> Response:
        return self.request("_open", Method.POST)

    def close(self) -> Response:
        return self.request("_close", Method.POST)

    def refresh(self) -> Response:
        return self.request("_refresh", Method.POST, {})

    def optimize(self, args: Optional[Dict[str, Any]] = None) -> Response:
        """Optimize the index; args are passed as query parameters."""
        return self.request("_optimize", Method.POST, {}, args or {})

    def flush(self, refresh: bool = False) -> Response:
        return self.request("_flush", Method.POST, {}, {"refresh": refresh})

    def clear_cache(self) -> Response:
        return self.request("_cache/clear", Method.POST)

    # Aliases

    def add_alias(self, name: str, replace: bool = False) -> Response:
        """
        Point an alias at this index.

        With replace, the alias is removed from every index currently holding
        it in the same request, so the engine applies the swap atomically.

        Args:
            name: Alias name
            replace: Move the alias here instead of adding another holder

        Returns:
            Response of the ``_aliases`` request
        """
        actions: List[AliasAction] = []

        if replace:
            for index in Status(self._client).get_indices_with_alias(name):
                actions.append(AliasAction.remove(index.name, name))

        actions.append(AliasAction.add(self._name, name))

        logger.info(
            "Posting %d alias action(s) for alias %s on index %s",
            len(actions), name, self._name,
        )
        return self._client.request(
            "_aliases", Method.POST, {"actions": [action.to_dict() for action in actions]}
        )

    def remove_alias(self, name: str) -> Response:
        """Remove an alias pointing to this index."""
        action = AliasAction.remove(self._name, name)
        logger.info("Removing alias %s from index %s", name, self._name)
        return self._client.request("_aliases", Method.POST, {"actions": [action.to_dict()]})

    def get_aliases(self) -> List[str]:
        """Names of the aliases pointing to this index."""
        response = self.request("_alias/*", Method.GET)
        return extract_alias_names(response.data, self._name)

    def has_alias(self, name: str) -> bool:
        return name in self.get_aliases()

    # Search family

    def create_search(
        self,
        query: QueryLike = "",
        options: Union[None, int, Dict[str, Any]] = None,
        builder: Optional[ResultSetBuilder] = None,
    ) -> Search:
        """Build a Search bound to this index without running it."""
        search = Search(self._client, builder)
        search.add_index(self)
        search.set_options_and_query(options, query)
        return search

    def search(
        self,
        query: QueryLike = "",
        options: Union[None, int, Dict[str, Any]] = None,
    ) -> ResultSet:
        """
        Search this index.

        Args:
            query: Query string, query mapping or Query object
            options: Result limit or mapping of search options

        Returns:
            ResultSet
        """
        return self.create_search(query, options).search()

    def count(self, query: QueryLike = "") -> int:
        """Number of documents matching the query."""
        return self.create_search(query).count()

    def delete_by_query(
        self,
        query: QueryLike,
        options: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """
        Delete the documents matching a query.

        A query string, the empty string included, is sent as the ``q``
        parameter with an empty body since the endpoint does not accept
        query_string clauses. Anything else is sent as a ``{"query": ...}``
        body; None becomes match_all.

        Args:
            query: Query string, query mapping or Query object
            options: Extra query parameters

        Returns:
            Response of the DELETE request
        """
        params = dict(options or {})

        if isinstance(query, (str, RawString)):
            params["q"] = query if isinstance(query, str) else query.text
            return self.request("_query", Method.DELETE, {}, params)

        clause = to_query_document(normalize_query(query))
        return self.request("_query", Method.DELETE, {"query": clause}, params)

    # Mapping, settings, stats, analysis

    def get_mapping(self) -> Dict[str, Any]:
        """
        Mappings of the index.

        When the name is an alias, the response is keyed by the real index
        name, so the first entry is taken whatever its key. A wildcard name
        matching several indices yields the mappings of only one of them.
        """
        response = self.request("_mapping", Method.GET)
        return extract_mappings(response.data)

    def get_settings(self) -> IndexSettings:
        return IndexSettings(self)

    def set_settings(self, data: Dict[str, Any]) -> Response:
        """Change index settings at runtime."""
        return self.request("_settings", Method.PUT, data)

    def get_stats(self) -> IndexStatsResource:
        return IndexStatsResource(self)

    def analyze(self, text: str, args: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Analyze a string with the index analyzers.

        Args:
            text: Text to analyze, sent as the raw body
            args: Query parameters such as "analyzer"

        Returns:
            Tokens produced by the engine
        """
        response = self.request("_analyze", Method.POST, text, args or {})
        return response.data["tokens"]

    # Bulk documents

    def add_documents(self, docs: Sequence[Document]) -> BulkResponse:
        return self._client.add_documents(self._stamp(docs))

    def update_documents(self, docs: Sequence[Document]) -> BulkResponse:
        return self._client.update_documents(self._stamp(docs))

    def delete_documents(self, docs: Sequence[Document]) -> BulkResponse:
        return self._client.delete_documents(self._stamp(docs))

    def _stamp(self, docs: Sequence[Document]) -> Sequence[Document]:
        for doc in docs:
            doc.set_index(self._name)
        return docs
