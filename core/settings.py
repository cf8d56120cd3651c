"""
Index settings accessor.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

from index_types.primitives import Method, Response
from utils.response_parser import extract_index_settings

if TYPE_CHECKING:
    from core.index import Index


class IndexSettings:
    """
    Reads and writes the settings of one index.

    No request is made until a getter or setter is called, and nothing
    is cached between calls.
    """

    def __init__(self, index: "Index"):
        self._index = index

    @property
    def index(self) -> "Index":
        return self._index

    def get(self, setting: Optional[str] = None) -> Any:
        """
        Current index settings.

        Args:
            setting: Optional key, with or without the "index." prefix

        Returns:
            The whole ``index`` settings block, or the single value
            (None when the key is unset)
        """
        response = self._index.request("_settings", Method.GET)
        settings = extract_index_settings(response.data)

        if setting is None:
            return settings
        if setting.startswith("index."):
            setting = setting[len("index."):]
        return settings.get(setting)

    def set(self, data: Dict[str, Any]) -> Response:
        return self._index.request("_settings", Method.PUT, data)

    def get_number_of_replicas(self) -> int:
        return int(self.get("number_of_replicas") or 0)

    def set_number_of_replicas(self, replicas: int) -> Response:
        return self.set({"index": {"number_of_replicas": int(replicas)}})

    def get_refresh_interval(self) -> str:
        # unset means the engine default
        return self.get("refresh_interval") or "1s"

    def set_refresh_interval(self, interval: str) -> Response:
        return self.set({"index": {"refresh_interval": interval}})
