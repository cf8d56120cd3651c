"""
Cluster-level alias status lookups.
"""

from typing import TYPE_CHECKING, List

from index_types.errors import ResponseError
from index_types.primitives import Method

if TYPE_CHECKING:
    from core.client import Client
    from core.index import Index


class Status:
    """Answers which indices exist and which of them hold an alias."""

    def __init__(self, client: "Client"):
        self._client = client

    def get_indices_with_alias(self, alias: str) -> List["Index"]:
        """
        Indices currently holding an alias.

        Args:
            alias: Alias name

        Returns:
            Index handles, empty if the alias does not exist

        Raises:
            ResponseError: For any engine error other than a missing alias
        """
        from core.index import Index

        try:
            response = self._client.request(f"_alias/{alias}", Method.GET)
        except ResponseError as e:
            if e.status == 404:
                return []
            raise

        return [Index(self._client, name) for name in (response.data or {})]

    def alias_exists(self, alias: str) -> bool:
        return bool(self.get_indices_with_alias(alias))

    def get_index_names(self) -> List[str]:
        """Names of all indices in the cluster."""
        response = self._client.request("_alias", Method.GET)
        return list((response.data or {}).keys())
