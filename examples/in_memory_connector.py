#!/usr/bin/env python3
"""
Example of a CRUD connector over an in-memory transport.

Shows parametrization (``connector("users", 1)``) together with a
validation middleware that short-circuits bad requests and a timeout
middleware that races the inner layers.
"""

import asyncio
from typing import Any, Dict, Tuple

from aiocrud import (
    AbstractTransport,
    Connector,
    CrudRequest,
    OperationHandler,
    PartialConnector,
    connector_middleware,
    create_frontend_connector,
)


class ValidationError(Exception):
    """The request payload was rejected before reaching the transport."""


class InMemoryTransport(AbstractTransport):
    """Stores records under the tuple of request params."""

    def __init__(self) -> None:
        self.records: Dict[Tuple[Any, ...], Dict[str, Any]] = {}

    async def create(self, req: Any = None) -> Dict[str, Any]:
        self.records[tuple(req["params"])] = dict(req["data"])
        return self.records[tuple(req["params"])]

    async def read(self, req: Any = None) -> Dict[str, Any]:
        await asyncio.sleep(req.get("delay", 0))
        return self.records[tuple(req["params"])]

    async def update(self, req: Any = None) -> Dict[str, Any]:
        record = self.records[tuple(req["params"])]
        record.update(req["data"])
        return record

    # delete is left out and raises OperationNotImplemented


def require_name(next: Connector) -> PartialConnector:
    """Reject creates without a name."""

    async def create(req: CrudRequest) -> Any:
        if not req.get("data", {}).get("name"):
            raise ValidationError("name is required")
        return await next.create(req)

    return PartialConnector(create=create)


@connector_middleware(operations=("read",))
async def timeout(operation: str, req: CrudRequest, handler: OperationHandler) -> Any:
    return await asyncio.wait_for(handler(req), timeout=0.1)


async def main() -> None:
    connector = create_frontend_connector(InMemoryTransport()).use(require_name).use(timeout)
    users = connector("users")

    created = await users(1).create({"data": {"name": "Alice"}})
    print(f"Created: {created}")

    updated = await users(1).update({"data": {"email": "alice@example.com"}})
    print(f"Updated: {updated}")

    print(f"Read: {await connector('users', 1).read()}")

    try:
        await users(2).create({"data": {}})
    except ValidationError as exc:
        print(f"Rejected: {exc}")

    try:
        await users(1).read({"delay": 1})
    except asyncio.TimeoutError:
        print("Read timed out")

    try:
        await users(1).delete()
    except NotImplementedError as exc:
        print(f"Delete: {exc}")


if __name__ == "__main__":
    asyncio.run(main())
