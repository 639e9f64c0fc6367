from abc import ABC
from typing import Any, Optional

from . import hdrs
from .connector_exceptions import OperationNotImplemented
from .typedefs import CrudRequest


class AbstractTransport(ABC):
    """Terminal collaborator that performs the actual I/O.

    Subclasses override any subset of the four operations; the rest
    raise :exc:`OperationNotImplemented` when awaited.
    """

    async def create(self, req: Optional[CrudRequest] = None) -> Any:
        raise OperationNotImplemented(hdrs.CRUD_CREATE)

    async def read(self, req: Optional[CrudRequest] = None) -> Any:
        raise OperationNotImplemented(hdrs.CRUD_READ)

    async def update(self, req: Optional[CrudRequest] = None) -> Any:
        raise OperationNotImplemented(hdrs.CRUD_UPDATE)

    async def delete(self, req: Optional[CrudRequest] = None) -> Any:
        raise OperationNotImplemented(hdrs.CRUD_DELETE)
