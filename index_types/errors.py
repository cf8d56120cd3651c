"""
Exception hierarchy for index operations.
"""

from typing import Any, Optional


class IndexControlError(Exception):
    """Base class for all index control errors."""


class InvalidError(IndexControlError, ValueError):
    """Raised for caller mistakes: bad names, bad query types, empty input."""


class InvalidOptionError(InvalidError):
    """Raised when an unrecognized option key is passed."""

    def __init__(self, option: str):
        super().__init__(f"Invalid option {option}")
        self.option = option


class ResponseError(IndexControlError):
    """Engine returned an error status for a request."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        error_type: Optional[str] = None,
        body: Any = None,
        request: Any = None,
    ):
        super().__init__(message)
        self.status = status
        self.error_type = error_type
        self.body = body
        self.request = request


class IndexNotFoundError(ResponseError):
    """The addressed index does not exist."""


class BulkResponseError(ResponseError):
    """A bulk request completed with one or more failed items."""

    def __init__(self, message: str, bulk_response: Any = None):
        super().__init__(message, status=200, body=bulk_response)
        self.bulk_response = bulk_response
