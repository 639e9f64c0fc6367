"""CRUD operation names and HTTP constants."""

from typing import Final, Tuple

from multidict import istr

CRUD_CREATE: Final[str] = "create"
CRUD_READ: Final[str] = "read"
CRUD_UPDATE: Final[str] = "update"
CRUD_DELETE: Final[str] = "delete"

CRUD_ALL: Final[Tuple[str, ...]] = (CRUD_CREATE, CRUD_READ, CRUD_UPDATE, CRUD_DELETE)

METH_DELETE: Final[str] = "DELETE"
METH_GET: Final[str] = "GET"
METH_PATCH: Final[str] = "PATCH"
METH_POST: Final[str] = "POST"

X_XSRF_TOKEN: Final[str] = istr("X-XSRF-TOKEN")

XSRF_COOKIE: Final[str] = "XSRF-TOKEN"
