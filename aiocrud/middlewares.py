"""Connector middleware support."""

from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any, Optional

from . import hdrs
from .abc import AbstractTransport
from .connector_exceptions import ConnectorConfigurationError, OperationNotImplemented
from .helpers import ensure_request, frozen_dataclass_decorator
from .typedefs import CrudRequest, MiddlewareFactory, OperationHandler

if TYPE_CHECKING:
    from .connector import Connector

__all__ = ("PartialConnector", "connector_middleware")

# Around-style middleware: receives the operation name, the request and
# the inner handler for that operation.
AroundMiddleware = Callable[[str, CrudRequest, OperationHandler], Awaitable[Any]]


@frozen_dataclass_decorator
class PartialConnector:
    """One optional handler per CRUD operation.

    Middleware factories return an instance of this class. Unset fields
    fall through to the wrapped connector for that operation only.
    """

    create: Optional[OperationHandler] = None
    read: Optional[OperationHandler] = None
    update: Optional[OperationHandler] = None
    delete: Optional[OperationHandler] = None

    @classmethod
    def from_mapping(cls, handlers: Mapping[str, OperationHandler]) -> "PartialConnector":
        unknown = set(handlers).difference(hdrs.CRUD_ALL)
        if unknown:
            raise ConnectorConfigurationError(
                "Unknown connector operations: {}".format(", ".join(sorted(unknown)))
            )
        return cls(**handlers)

    @classmethod
    def from_transport(cls, transport: AbstractTransport) -> "PartialConnector":
        return cls(
            create=transport.create,
            read=transport.read,
            update=transport.update,
            delete=transport.delete,
        )

    def merge(self, fallback: "PartialConnector") -> "PartialConnector":
        """Return a copy with every unset handler taken from *fallback*."""
        return PartialConnector(
            create=self.create if self.create is not None else fallback.create,
            read=self.read if self.read is not None else fallback.read,
            update=self.update if self.update is not None else fallback.update,
            delete=self.delete if self.delete is not None else fallback.delete,
        )


def _not_implemented(operation: str) -> OperationHandler:
    async def handler(req: Optional[CrudRequest] = None) -> Any:
        raise OperationNotImplemented(operation)

    handler.__name__ = handler.__qualname__ = f"{operation}_not_implemented"
    return handler


NOT_IMPLEMENTED = PartialConnector(
    create=_not_implemented(hdrs.CRUD_CREATE),
    read=_not_implemented(hdrs.CRUD_READ),
    update=_not_implemented(hdrs.CRUD_UPDATE),
    delete=_not_implemented(hdrs.CRUD_DELETE),
)


def as_partial_connector(value: Any) -> PartialConnector:
    """Normalize what a middleware factory returned."""
    if isinstance(value, PartialConnector):
        return value
    if isinstance(value, Mapping):
        return PartialConnector.from_mapping(value)
    raise ConnectorConfigurationError(
        "Middleware factory must return a PartialConnector or a mapping "
        f"of operation handlers, got {value!r}"
    )


def connector_middleware(
    func: Optional[AroundMiddleware] = None,
    *,
    operations: Iterable[str] = hdrs.CRUD_ALL,
) -> Any:
    """
    Decorator turning an around-style coroutine into a middleware factory.

    The decorated coroutine is called as ``func(operation, req, handler)``
    for each of *operations*, where ``handler`` is the inner connector's
    handler for that operation. Operations left out fall through.

    Usable bare (``@connector_middleware``) or with arguments
    (``@connector_middleware(operations=("create",))``).
    """
    selected = tuple(operations)
    unknown = set(selected).difference(hdrs.CRUD_ALL)
    if unknown:
        raise ConnectorConfigurationError(
            "Unknown connector operations: {}".format(", ".join(sorted(unknown)))
        )

    def decorator(mw: AroundMiddleware) -> MiddlewareFactory:
        def factory(next: "Connector") -> PartialConnector:
            def make_wrapper(operation: str) -> OperationHandler:
                inner = next.handler(operation)

                async def wrapped(req: Optional[CrudRequest] = None) -> Any:
                    return await mw(operation, ensure_request(req), inner)

                return wrapped

            return PartialConnector.from_mapping(
                {operation: make_wrapper(operation) for operation in selected}
            )

        factory.__name__ = getattr(mw, "__name__", factory.__name__)
        factory.__doc__ = mw.__doc__
        return factory

    if func is not None:
        return decorator(func)
    return decorator
