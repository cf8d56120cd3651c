"""
REST client shared by every index handle.

The client is the only place that talks to the engine: index handles,
searches and status lookups all go through ``Client.request``, bulk
document writes through the ``*_documents`` methods.
"""

import logging
from typing import Any, Dict, Iterable, Optional, Union

from elasticsearch import ApiError, Elasticsearch

from core.index import Index
from core.status import Status
from index_types.errors import BulkResponseError, IndexNotFoundError, InvalidError, ResponseError
from index_types.primitives import BulkResponse, Document, Method, Request, Response
from utils import connection


logger = logging.getLogger(__name__)

JSON_HEADERS = {"accept": "application/json", "content-type": "application/json"}

# Error types the engine uses for a missing index (current and 1.x style)
INDEX_NOT_FOUND_TYPES = ("index_not_found_exception", "IndexMissingException")


class Client:
    """Thin REST client over elasticsearch-py's low-level transport."""

    def __init__(self, es: Elasticsearch):
        self._es = es

    @classmethod
    def from_environment(cls, environment: Optional[str] = None) -> "Client":
        """Build a client from the environment configuration."""
        return cls(connection.get_elasticsearch_client(environment))

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    @property
    def es(self) -> Elasticsearch:
        return self._es

    def close(self) -> None:
        """Close the underlying transport and its connection pool."""
        self._es.close()

    def get_index(self, name: Union[str, int, float]) -> Index:
        return Index(self, name)

    def get_status(self) -> Status:
        return Status(self)

    def request(
        self,
        path: str,
        method: Union[Method, str] = Method.GET,
        body: Any = None,
        query: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """
        Issue a request against the engine.

        Args:
            path: Path relative to the cluster root (no leading slash needed)
            method: HTTP method
            body: Mapping, list or raw string body
            query: Query parameters

        Returns:
            Response with parsed body and status

        Raises:
            ResponseError: If the engine answers with an error status
                (never raised for HEAD requests)
            IndexNotFoundError: If the addressed index does not exist
        """
        request = Request(
            path=path,
            method=method,
            body=body if body is not None else {},
            query=query or {},
        )
        return self.send(request)

    def send(self, request: Request) -> Response:
        """Send a prepared request descriptor."""
        target = request.path if request.path.startswith("/") else f"/{request.path}"
        logger.debug("%s %s %s", request.method.value, target, request.query or "")

        try:
            api_response = self._es.perform_request(
                request.method.value,
                target,
                params=request.query or None,
                headers=dict(JSON_HEADERS),
                body=request.body or None,
            )
        except ApiError as e:
            # An existence check carries its answer in the status code
            if request.method is Method.HEAD:
                return Response(data={}, status=e.meta.status, transfer_info=_transfer_info(e.meta))
            raise _translate_error(request, e) from e

        data = {} if request.method is Method.HEAD else api_response.body
        return Response(
            data=data,
            status=api_response.meta.status,
            transfer_info=_transfer_info(api_response.meta),
        )

    def add_documents(self, docs: Iterable[Document]) -> BulkResponse:
        """Index documents through ``_bulk``."""
        return self._bulk("index", docs)

    def update_documents(self, docs: Iterable[Document]) -> BulkResponse:
        """Partially update documents through ``_bulk``."""
        return self._bulk("update", docs)

    def delete_documents(self, docs: Iterable[Document]) -> BulkResponse:
        """Delete documents through ``_bulk``."""
        return self._bulk("delete", docs)

    def _bulk(self, operation: str, docs: Iterable[Document]) -> BulkResponse:
        docs = list(docs)
        if not docs:
            raise InvalidError("Array has to consist of at least one element")

        operations = []
        for doc in docs:
            operations.append({operation: doc.to_action_metadata()})
            if operation == "index":
                operations.append(doc.data)
            elif operation == "update":
                operations.append({"doc": doc.data})

        request = Request(path="_bulk", method=Method.POST, body=operations)
        logger.debug("Bulk %s of %d documents", operation, len(docs))

        try:
            response = self._es.bulk(operations=operations)
        except ApiError as e:
            raise _translate_error(request, e) from e

        bulk_response = BulkResponse.from_dict(getattr(response, "body", response))
        if bulk_response.errors:
            failed = bulk_response.failed_items()
            raise BulkResponseError(
                f"Bulk {operation} failed for {len(failed)} of {len(docs)} documents",
                bulk_response,
            )
        return bulk_response


def _transfer_info(meta: Any) -> Dict[str, Any]:
    return {
        "http_code": meta.status,
        "duration": getattr(meta, "duration", None),
    }


def _error_type(error: ApiError) -> Optional[str]:
    body = error.body
    if isinstance(body, dict):
        detail = body.get("error")
        if isinstance(detail, dict):
            return detail.get("type")
        if isinstance(detail, str):
            return detail
    return error.message


def _translate_error(request: Request, error: ApiError) -> ResponseError:
    status = error.meta.status
    error_type = _error_type(error)

    error_class = ResponseError
    if status == 404 and error_type and error_type.startswith(INDEX_NOT_FOUND_TYPES):
        error_class = IndexNotFoundError

    return error_class(
        f"{request.method.value} /{request.path.lstrip('/')} failed with status {status}: {error_type}",
        status=status,
        error_type=error_type,
        body=error.body,
        request=request,
    )
