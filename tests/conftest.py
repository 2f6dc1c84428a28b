# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations shared by the unit and integration tests."""

import os
from io import BytesIO
from logging import LogRecord
from typing import Callable

import aiodogstatsd
import pytest
from PIL import Image as PILImage

# Settings are loaded lazily, so this takes effect before the first access.
os.environ.setdefault("SITEFAVICON_ENV", "testing")

FilterCaplogFixture = Callable[[list[LogRecord], str], list[LogRecord]]
MakePngFixture = Callable[..., bytes]


@pytest.fixture(scope="session", name="filter_caplog")
def fixture_filter_caplog() -> FilterCaplogFixture:
    """
    Return a function that will filter pytest captured log records for a given logger
    name
    """

    def filter_caplog(records: list[LogRecord], logger_name: str) -> list[LogRecord]:
        """
        Filter pytest captured log records for a given logger name
        """
        return [record for record in records if record.name == logger_name]

    return filter_caplog


@pytest.fixture(scope="session", name="make_png")
def fixture_make_png() -> MakePngFixture:
    """Return a function that encodes a solid colour RGBA image of the given size as PNG."""

    def make_png(
        width: int, height: int, color: tuple[int, int, int, int] = (200, 30, 30, 255)
    ) -> bytes:
        buffer = BytesIO()
        PILImage.new("RGBA", (width, height), color).save(buffer, format="PNG")
        return buffer.getvalue()

    return make_png


@pytest.fixture(name="metrics_client_mock")
def fixture_metrics_client_mock(mocker):
    """Return a mock StatsD client so tests never touch a socket."""
    return mocker.MagicMock(spec_set=aiodogstatsd.Client)
