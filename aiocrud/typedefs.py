from collections.abc import Awaitable, Callable, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, Literal, Union

from yarl import URL

if TYPE_CHECKING:
    from .connector import Connector
    from .middlewares import PartialConnector

StrOrURL = str | URL

Operation = Literal["create", "read", "update", "delete"]

# Requests are plain mutable mappings; keys in use are
# ``url``, ``http_method``, ``data``, ``headers`` and ``params``.
CrudRequest = MutableMapping[str, Any]

OperationHandler = Callable[..., Awaitable[Any]]

PartialConnectorLike = Union["PartialConnector", Mapping[str, OperationHandler]]

MiddlewareFactory = Callable[["Connector"], PartialConnectorLike]
