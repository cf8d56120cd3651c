"""
Index statistics accessor.
"""

from typing import TYPE_CHECKING, Any, Dict

from index_types.primitives import IndexStats, Method
from utils.response_parser import extract_stats_entry

if TYPE_CHECKING:
    from core.index import Index


class IndexStatsResource:
    """Fetches ``_stats`` for one index on demand."""

    def __init__(self, index: "Index"):
        self._index = index

    @property
    def index(self) -> "Index":
        return self._index

    def get_raw(self) -> Dict[str, Any]:
        return self._index.request("_stats", Method.GET).data

    def get(self) -> IndexStats:
        """
        Primaries statistics of the index.

        The entry is looked up by position, so an alias resolves to the
        stats of its real index.
        """
        entry = extract_stats_entry(self.get_raw())
        return IndexStats.from_dict(entry["index"] or self._index.name, entry["data"])
