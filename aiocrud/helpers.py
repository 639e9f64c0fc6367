"""Various helper functions"""

import dataclasses
import functools
from collections.abc import MutableMapping
from typing import Any, Optional

from yarl import URL

from .typedefs import CrudRequest, StrOrURL

sentinel: Any = object()

frozen_dataclass_decorator = functools.partial(
    dataclasses.dataclass, frozen=True, slots=True
)


def ensure_request(req: Optional[CrudRequest]) -> CrudRequest:
    """Return *req*, or a fresh request when the caller passed nothing."""
    if req is None:
        return {}
    if not isinstance(req, MutableMapping):
        raise TypeError(f"Request must be a mutable mapping, got {req!r}")
    return req


def join_url(base_url: Optional[StrOrURL], url: StrOrURL) -> URL:
    """Join *url* onto *base_url* the way HTTP clients combine base URLs.

    Absolute URLs are returned untouched. Otherwise exactly one slash
    separates the base path from the relative path.
    """
    target = URL(url) if isinstance(url, str) else url
    if base_url is None or target.is_absolute():
        return target
    base = str(base_url).rstrip("/")
    return URL(f"{base}/{str(target).lstrip('/')}")
