#!/usr/bin/env python3
"""
Example of a logging middleware on an HTTP backed CRUD connector.

The middleware logs the operation, the resolved HTTP method and the
time spent in the inner layers. It sits inside the verb mapper so
it sees the method the request is going to be sent with.

This example includes a test server with a small REST-ish API.
"""

import asyncio
import logging
import time
from typing import Any, Dict

from aiohttp import ClientSession, web

from aiocrud import (
    Connector,
    PartialConnector,
    ResponseError,
    create_backend_connector,
    create_frontend_connector,
    crud_to_http,
)

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
_LOGGER = logging.getLogger(__name__)


def logging_middleware(next: Connector) -> PartialConnector:
    """Log every operation with its timing."""

    def wrap(operation: str) -> Any:
        inner = next.handler(operation)

        async def handler(req: Dict[str, Any]) -> Any:
            start_time = time.monotonic()
            _LOGGER.info("[%s] %s %s", operation.upper(), req.get("http_method"), req.get("url"))
            try:
                response = await inner(req)
            except ResponseError as exc:
                _LOGGER.info("[%s] failed with status %s", operation.upper(), exc.status)
                raise
            _LOGGER.info(
                "[%s] status %s in %.3fs",
                operation.upper(),
                response.status,
                time.monotonic() - start_time,
            )
            return response

        return handler

    return PartialConnector(
        create=wrap("create"),
        read=wrap("read"),
        update=wrap("update"),
        delete=wrap("delete"),
    )


class TestServer:
    """Test server for the logging middleware demo."""

    def __init__(self) -> None:
        self.items: Dict[str, Dict[str, Any]] = {}

    async def handle_create(self, request: web.Request) -> web.Response:
        data = await request.json()
        self.items[data["name"]] = data
        return web.json_response(data, status=201)

    async def handle_read(self, request: web.Request) -> web.Response:
        name = request.match_info["name"]
        if name not in self.items:
            return web.Response(status=404, text=f"{name} not found")
        return web.json_response(self.items[name])

    async def handle_update(self, request: web.Request) -> web.Response:
        name = request.match_info["name"]
        self.items[name].update(await request.json())
        return web.json_response(self.items[name])

    async def handle_delete(self, request: web.Request) -> web.Response:
        self.items.pop(request.match_info["name"], None)
        return web.Response(status=204)


async def run_test_server() -> web.AppRunner:
    """Run a simple test server on a free port."""
    app = web.Application()
    server = TestServer()
    app.router.add_post("/items/", server.handle_create)
    app.router.add_get("/items/{name}", server.handle_read)
    app.router.add_patch("/items/{name}", server.handle_update)
    app.router.add_delete("/items/{name}", server.handle_delete)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    return runner


async def run_tests(base_url: str) -> None:
    async with ClientSession() as session:
        connector = create_frontend_connector(
            create_backend_connector(session, base_url=base_url),
            middlewares=(logging_middleware, crud_to_http()),
        )

        print("\n=== Create ===")
        item = await connector.create({"url": "/items/", "data": {"name": "apple", "qty": 1}})
        print(f"Created: {item}")

        print("\n=== Read ===")
        item = await connector.read({"url": "/items/apple"})
        print(f"Read: {item}")

        print("\n=== Update ===")
        item = await connector.update({"url": "/items/apple", "data": {"qty": 5}})
        print(f"Updated: {item}")

        print("\n=== Delete ===")
        await connector.delete({"url": "/items/apple"})
        print("Deleted")

        print("\n=== Read missing ===")
        try:
            await connector.read({"url": "/items/apple"})
        except ResponseError as exc:
            print(f"Error: {exc.status} {exc.data}")


async def main() -> None:
    runner = await run_test_server()
    host, port = runner.addresses[0][:2]
    try:
        await run_tests(f"http://{host}:{port}")
    finally:
        await runner.cleanup()


if __name__ == "__main__":
    asyncio.run(main())
