"""HTTP transport backed by an aiohttp client session."""

from collections.abc import Mapping
from typing import Any, Optional

from aiohttp import ClientSession
from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL

from . import hdrs
from .abc import AbstractTransport
from .connector_exceptions import ResponseError
from .crud_to_http import DEFAULT_MAPPING
from .helpers import ensure_request, frozen_dataclass_decorator, join_url
from .log import transport_logger
from .typedefs import CrudRequest, StrOrURL

__all__ = ("HttpResponse", "HttpTransport", "create_backend_connector")


@frozen_dataclass_decorator
class HttpResponse:
    status: int
    headers: "CIMultiDictProxy[str]"
    data: Any
    method: str
    url: URL

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HttpTransport(AbstractTransport):
    """Send every CRUD operation as an HTTP request.

    The session is owned by the caller and is never closed here.
    The HTTP method comes from ``req["http_method"]``, falling back to the
    default verb of the operation.
    """

    def __init__(
        self,
        session: ClientSession,
        *,
        base_url: Optional[StrOrURL] = None,
        headers: Optional[Mapping[str, str]] = None,
        xsrf_cookie_name: Optional[str] = hdrs.XSRF_COOKIE,
        xsrf_header_name: str = hdrs.X_XSRF_TOKEN,
    ) -> None:
        self._session = session
        self._base_url = base_url
        self._headers: CIMultiDict[str] = CIMultiDict(headers or {})
        self._xsrf_cookie_name = xsrf_cookie_name
        self._xsrf_header_name = xsrf_header_name

    @property
    def session(self) -> ClientSession:
        return self._session

    async def create(self, req: Optional[CrudRequest] = None) -> HttpResponse:
        return await self._request(DEFAULT_MAPPING.create, req)

    async def read(self, req: Optional[CrudRequest] = None) -> HttpResponse:
        return await self._request(DEFAULT_MAPPING.read, req)

    async def update(self, req: Optional[CrudRequest] = None) -> HttpResponse:
        return await self._request(DEFAULT_MAPPING.update, req)

    async def delete(self, req: Optional[CrudRequest] = None) -> HttpResponse:
        return await self._request(DEFAULT_MAPPING.delete, req)

    def _build_headers(self, url: URL, extra: Optional[Mapping[str, str]]) -> "CIMultiDict[str]":
        headers = CIMultiDict(self._headers)
        if extra:
            # request headers replace configured ones
            for key, value in extra.items():
                headers[key] = value
        if self._xsrf_cookie_name is not None:
            cookies = self._session.cookie_jar.filter_cookies(url)
            morsel = cookies.get(self._xsrf_cookie_name)
            if morsel is not None:
                headers[self._xsrf_header_name] = morsel.value
        return headers

    async def _request(self, default_method: str, req: Optional[CrudRequest]) -> HttpResponse:
        req = ensure_request(req)
        method = (req.get("http_method") or default_method).upper()
        url = join_url(self._base_url, req.get("url", ""))
        headers = self._build_headers(url, req.get("headers"))

        kwargs: dict[str, Any] = {"headers": headers}
        data = req.get("data")
        if isinstance(data, (str, bytes, bytearray)):
            kwargs["data"] = data
        elif data is not None:
            kwargs["json"] = data

        transport_logger.debug("%s %s", method, url)
        async with self._session.request(method, url, **kwargs) as resp:
            if resp.content_type == "application/json":
                body = await resp.json()
            else:
                body = await resp.text()
            response = HttpResponse(
                status=resp.status,
                headers=resp.headers,
                data=body,
                method=method,
                url=resp.url,
            )

        transport_logger.debug("%s %s -> %d", method, url, response.status)
        if not response.ok:
            raise ResponseError(
                response.status,
                response.data,
                headers=response.headers,
                method=method,
                url=response.url,
            )
        return response


def create_backend_connector(session: ClientSession, **config: Any) -> HttpTransport:
    """Return the HTTP backend for :func:`~aiocrud.create_frontend_connector`.

    *config* is passed to :class:`HttpTransport`. Its operations resolve
    with the full :class:`HttpResponse`.
    """
    return HttpTransport(session, **config)
