"""CRUD operation to HTTP method mapping middleware."""

import dataclasses
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, Union

from . import hdrs
from .helpers import frozen_dataclass_decorator
from .middlewares import PartialConnector
from .typedefs import CrudRequest, MiddlewareFactory

if TYPE_CHECKING:
    from .connector import Connector

__all__ = ("HttpMethodMapping", "crud_to_http")


@frozen_dataclass_decorator
class HttpMethodMapping:
    create: str = hdrs.METH_POST
    read: str = hdrs.METH_GET
    update: str = hdrs.METH_PATCH
    delete: str = hdrs.METH_DELETE

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            object.__setattr__(self, field.name, getattr(self, field.name).upper())


DEFAULT_MAPPING = HttpMethodMapping()


def crud_to_http(
    mapping: Optional[Union[HttpMethodMapping, Mapping[str, str]]] = None,
    **overrides: str,
) -> MiddlewareFactory:
    """Return a middleware setting ``req["http_method"]`` for every operation.

    Resolution order is defaults, then *mapping*, then *overrides*; keys
    that are not given keep the default verb.
    """
    if mapping is None:
        config = DEFAULT_MAPPING
    elif isinstance(mapping, HttpMethodMapping):
        config = mapping
    else:
        config = HttpMethodMapping(**mapping)
    if overrides:
        config = dataclasses.replace(config, **overrides)

    def crud_to_http_middleware(next: "Connector") -> PartialConnector:
        async def create(req: CrudRequest) -> Any:
            req["http_method"] = config.create
            return await next.create(req)

        async def read(req: CrudRequest) -> Any:
            req["http_method"] = config.read
            return await next.read(req)

        async def update(req: CrudRequest) -> Any:
            req["http_method"] = config.update
            return await next.update(req)

        async def delete(req: CrudRequest) -> Any:
            req["http_method"] = config.delete
            return await next.delete(req)

        return PartialConnector(create=create, read=read, update=update, delete=delete)

    return crud_to_http_middleware
