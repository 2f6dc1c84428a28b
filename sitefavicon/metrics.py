"""StatsD client shared by every favicon resolution in the process."""

import logging
from functools import cache
from typing import Mapping

import aiodogstatsd

from sitefavicon.configs import settings

logger = logging.getLogger(__name__)

# Type definition for tags in aiodogstatsd metrics
MetricTags = Mapping[str, float | int | str]


@cache
def get_metrics_client() -> aiodogstatsd.Client:
    """Return the process-wide StatsD client, built from the `metrics` settings."""
    constant_tags: MetricTags = {"application": "sitefavicon"}

    return aiodogstatsd.Client(
        host=settings.metrics.host,
        port=settings.metrics.port,
        namespace="sitefavicon",
        constant_tags=constant_tags,
    )


async def configure_metrics() -> None:
    """Connect the metrics client. Call once per process before resolving favicons."""
    client = get_metrics_client()
    if settings.metrics.dev_logger:
        client._protocol = _LocalDatagramLogger()
    await client.connect()


class _LocalDatagramLogger(aiodogstatsd.client.DatagramProtocol):
    """Datagram protocol that writes each StatsD packet to the debug log instead of UDP."""

    def send(self, data: bytes) -> None:
        logger.debug("statsd packet", extra={"packet": data.decode("utf8")})

    def error_received(self, exc) -> None:
        logger.exception(exc)
