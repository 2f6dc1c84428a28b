# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Fixtures for the favicon pipeline integration tests."""

import asyncio
from typing import Callable

import httpx
import pytest

from sitefavicon.favicon.pipeline import FaviconPipeline
from sitefavicon.utils.storage.local_store import LocalAssetStore
from tests.integration.favicon.util import SlowResponse

Routes = dict[str, httpx.Response | SlowResponse | Callable[[httpx.Request], httpx.Response]]


@pytest.fixture(name="store")
def fixture_store(tmp_path) -> LocalAssetStore:
    """Create a filesystem store in a temporary directory."""
    return LocalAssetStore(str(tmp_path), "https://assets.example.test")


@pytest.fixture(name="http_client_factory")
def fixture_http_client_factory():
    """Return a function building an AsyncClient that serves the given URL -> response routes.

    Unknown URLs answer 404. Requested URLs are recorded on `client.requested`.
    """

    def _create(routes: Routes) -> httpx.AsyncClient:
        requested: list[str] = []

        async def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            requested.append(url)
            route = routes.get(url)
            if route is None:
                return httpx.Response(404)
            if isinstance(route, SlowResponse):
                await asyncio.sleep(route.delay)
                return httpx.Response(200, text="<html></html>")
            if callable(route):
                return route(request)
            return route

        client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler), follow_redirects=True
        )
        client.requested = requested  # type: ignore[attr-defined]
        return client

    return _create


@pytest.fixture(name="pipeline")
def fixture_pipeline(store, metrics_client_mock) -> FaviconPipeline:
    """Create a pipeline with a short timeout and the canonical sizes."""
    return FaviconPipeline(
        store,
        sizes=[16, 32, 64],
        timeout_ms=200,
        namespace="projects",
        metrics_client=metrics_client_mock,
    )
