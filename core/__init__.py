"""
Index control core: REST client, index handle and their collaborators.
"""

from .client import Client
from .index import Index
from .search import DefaultResultSetBuilder, ResultSetBuilder, Search
from .settings import IndexSettings
from .stats import IndexStatsResource
from .status import Status

__all__ = [
    "Client",
    "Index",
    "Search",
    "ResultSetBuilder",
    "DefaultResultSetBuilder",
    "IndexSettings",
    "IndexStatsResource",
    "Status",
]
