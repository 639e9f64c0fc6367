from typing import Iterator

import pytest
from blockbuster import blockbuster_ctx

from aiocrud import PartialConnector
from aiocrud.test_utils import make_mocked_transport

pytest_plugins = ("aiohttp.pytest_plugin", "pytester")


@pytest.fixture(autouse=True)
def blockbuster(request: pytest.FixtureRequest) -> Iterator[None]:
    # Examples run in subprocesses, nothing to watch there.
    if request.node.get_closest_marker("example") is not None:
        yield
        return
    with blockbuster_ctx("aiocrud", excluded_modules=["aiocrud.test_utils"]):
        yield


@pytest.fixture
def transport() -> PartialConnector:
    return make_mocked_transport()
