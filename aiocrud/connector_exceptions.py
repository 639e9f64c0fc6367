"""Connector related errors."""

from typing import Any, Optional

from multidict import CIMultiDictProxy
from yarl import URL

__all__ = (
    "ConnectorError",
    "OperationNotImplemented",
    "ConnectorConfigurationError",
    "ResponseError",
)


class ConnectorError(Exception):
    """Base class for connector errors."""


class OperationNotImplemented(ConnectorError, NotImplementedError):
    """The terminal transport has no handler for an operation.

    Raised when the operation is awaited, never at construction time.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} not implemented")


class ConnectorConfigurationError(ConnectorError, TypeError):
    """A connector chain was assembled incorrectly.

    Raised synchronously by the call that builds the chain.
    """


class ResponseError(ConnectorError):
    """The backend answered with a status outside of the 2xx range.

    status: HTTP status code
    data: decoded response body
    """

    def __init__(
        self,
        status: int,
        data: Any = None,
        *,
        headers: Optional[CIMultiDictProxy[str]] = None,
        method: str = "",
        url: Optional[URL] = None,
    ) -> None:
        self.status = status
        self.data = data
        self.headers = headers
        self.method = method
        self.url = url
        super().__init__(f"{status}, method={method!r}, url={str(url)!r}")

    def __repr__(self) -> str:
        return f"<ResponseError status={self.status} url={str(self.url)!r}>"
