"""CRUD connectors and middleware composition."""

from collections.abc import Iterable, Mapping
from typing import Any, Optional, Tuple, Union

from . import hdrs
from .abc import AbstractTransport
from .connector_exceptions import ConnectorConfigurationError
from .helpers import ensure_request
from .http_transport import HttpResponse
from .log import connector_logger
from .middlewares import NOT_IMPLEMENTED, PartialConnector, as_partial_connector
from .typedefs import CrudRequest, MiddlewareFactory, OperationHandler

__all__ = ("Connector", "create_frontend_connector", "response_data")

Transport = Union[AbstractTransport, PartialConnector, Mapping[str, OperationHandler]]


def response_data(response: Any) -> Any:
    """Return the payload of a backend *response*.

    ``HttpResponse.data`` and the ``"data"`` item of a mapping are
    unwrapped; anything else is returned as is.
    """
    if isinstance(response, HttpResponse):
        return response.data
    if isinstance(response, Mapping) and "data" in response:
        return response["data"]
    return response


class Connector:
    """Immutable CRUD connector.

    Exposes the four operations as coroutines. :meth:`use` wraps the
    connector in a middleware layer and :meth:`with_params` (or calling
    the connector) curries identifiers into ``req["params"]``. Both
    return new connectors; the receiver is never changed.

    A frontend connector resolves with the response payload (see
    :func:`response_data`). Middleware factories are handed a backend
    view of the chain instead, whose operations resolve with the full
    response.
    """

    __slots__ = ("_handlers", "_params", "_frontend")

    def __init__(
        self,
        handlers: PartialConnector,
        params: Tuple[Any, ...] = (),
        *,
        frontend: bool = True,
    ) -> None:
        # every handler of *handlers* is set
        object.__setattr__(self, "_handlers", handlers)
        object.__setattr__(self, "_params", params)
        object.__setattr__(self, "_frontend", frontend)

    def __setattr__(self, name: str, val: Any) -> None:
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __repr__(self) -> str:
        name = "Connector" if self._frontend else "Connector backend"
        if self._params:
            return f"<{name} params={self._params!r}>"
        return f"<{name}>"

    @property
    def params(self) -> Tuple[Any, ...]:
        """Identifiers accumulated by parametrization, in call order."""
        return self._params

    @property
    def frontend(self) -> bool:
        return self._frontend

    def _prepare(self, req: Optional[CrudRequest]) -> CrudRequest:
        req = ensure_request(req)
        if self._params:
            # the caller's mapping is left untouched
            req = {**req, "params": list(self._params)}
        return req

    def _result(self, response: Any) -> Any:
        if self._frontend:
            return response_data(response)
        return response

    async def create(self, req: Optional[CrudRequest] = None) -> Any:
        response = await self._handlers.create(self._prepare(req))  # type: ignore[misc]
        return self._result(response)

    async def read(self, req: Optional[CrudRequest] = None) -> Any:
        response = await self._handlers.read(self._prepare(req))  # type: ignore[misc]
        return self._result(response)

    async def update(self, req: Optional[CrudRequest] = None) -> Any:
        response = await self._handlers.update(self._prepare(req))  # type: ignore[misc]
        return self._result(response)

    async def delete(self, req: Optional[CrudRequest] = None) -> Any:
        response = await self._handlers.delete(self._prepare(req))  # type: ignore[misc]
        return self._result(response)

    def handler(self, operation: str) -> OperationHandler:
        """Return the coroutine method implementing *operation*."""
        if operation == hdrs.CRUD_CREATE:
            return self.create
        if operation == hdrs.CRUD_READ:
            return self.read
        if operation == hdrs.CRUD_UPDATE:
            return self.update
        if operation == hdrs.CRUD_DELETE:
            return self.delete
        raise ValueError(f"Unknown connector operation {operation!r}")

    def use(self, factory: MiddlewareFactory) -> "Connector":
        """Return a new connector with *factory*'s layer outermost.

        The factory receives a backend view of the current chain as
        ``next``. Operations it leaves unset fall through to ``next``.
        Accumulated params are kept and still injected before any layer
        sees the request.
        """
        inner = Connector(self._handlers, frontend=False)
        partial = as_partial_connector(factory(inner))
        connector_logger.debug(
            "Composed middleware %s over %r",
            getattr(factory, "__name__", factory),
            inner,
        )
        return Connector(
            partial.merge(self._handlers), self._params, frontend=self._frontend
        )

    def with_params(self, *params: Any) -> "Connector":
        """Return a new connector with *params* appended to the current ones."""
        return Connector(
            self._handlers, self._params + params, frontend=self._frontend
        )

    def __call__(self, *params: Any) -> "Connector":
        return self.with_params(*params)


def create_frontend_connector(
    transport: Optional[Transport] = None,
    *,
    middlewares: Iterable[MiddlewareFactory] = (),
) -> Connector:
    """Build the root connector over *transport*.

    Operations the transport does not provide raise
    :exc:`~aiocrud.OperationNotImplemented` when awaited. *middlewares*
    are applied with :meth:`Connector.use` in order, so the last one is
    outermost. Operations of the returned connector resolve with the
    response payload.
    """
    if isinstance(transport, Connector):
        raise ConnectorConfigurationError(
            "Only one frontend connector may be constructed"
        )

    if transport is None:
        handlers = NOT_IMPLEMENTED
    elif isinstance(transport, AbstractTransport):
        handlers = PartialConnector.from_transport(transport)
    elif isinstance(transport, (PartialConnector, Mapping)):
        handlers = as_partial_connector(transport).merge(NOT_IMPLEMENTED)
    else:
        raise ConnectorConfigurationError(f"Unsupported transport {transport!r}")

    connector = Connector(handlers)
    for factory in middlewares:
        connector = connector.use(factory)
    return connector
