"""Resolve a site's favicon into stored canonical variants"""

import logging
from typing import Any, Optional

import httpx

from sitefavicon.configs import settings
from sitefavicon.exceptions import FaviconError
from sitefavicon.favicon.collector import FaviconCollector
from sitefavicon.favicon.constants import (
    FALLBACK_SOURCE,
    VARIANT_CONTENT_TYPE,
    VARIANT_EXTENSION,
)
from sitefavicon.favicon.downloader import AsyncFaviconDownloader
from sitefavicon.favicon.fallback import FallbackGenerator
from sitefavicon.favicon.models import Candidate, FaviconResult, VariantSet
from sitefavicon.favicon.renderer import VariantRenderer
from sitefavicon.favicon.selector import FaviconSelector
from sitefavicon.metrics import get_metrics_client
from sitefavicon.utils.http_client import create_http_client
from sitefavicon.utils.storage.models import BaseAssetStore, Image

logger = logging.getLogger(__name__)

Logger = logging.Logger | logging.LoggerAdapter


class FaviconPipeline:
    """Fetch the homepage, try ranked candidates one by one and fall back to a
    generated icon when none of them can be fetched and rendered.

    Only asset store failures, or a failure to generate the fallback icon,
    reach the caller. Everything else degrades to the next candidate or to the
    fallback.
    """

    store: BaseAssetStore
    timeout_ms: int
    namespace: str
    user_agent: str

    def __init__(
        self,
        store: BaseAssetStore,
        sizes: Optional[list[int]] = None,
        timeout_ms: Optional[int] = None,
        namespace: Optional[str] = None,
        user_agent: Optional[str] = None,
        collector: Optional[FaviconCollector] = None,
        renderer: Optional[VariantRenderer] = None,
        fallback_generator: Optional[FallbackGenerator] = None,
        metrics_client: Any = None,
    ) -> None:
        job_settings = settings.favicon
        self.store = store
        self.timeout_ms = int(timeout_ms or job_settings.fetch_timeout_ms)
        self.namespace = namespace or job_settings.namespace
        self.user_agent = user_agent or job_settings.user_agent
        self.collector = collector or FaviconCollector()
        self.renderer = renderer or VariantRenderer(sizes or list(job_settings.sizes))
        self.fallback_generator = fallback_generator or FallbackGenerator()
        self.metrics_client = metrics_client or get_metrics_client()

    async def resolve_favicon(
        self,
        site_id: str,
        site_url: str,
        logger: Logger = logger,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> FaviconResult:
        """Resolve, render and store the favicon of `site_url` for `site_id`.

        An injected `http_client` is left open; otherwise a client is created
        for this run and closed before returning.
        """
        self.metrics_client.increment("favicon.requests")
        with self.metrics_client.timeit("favicon.resolve_time"):
            if http_client is not None:
                return await self._resolve(site_id, site_url, logger, http_client)

            timeout_sec = self.timeout_ms / 1000
            async with create_http_client(
                self.user_agent, request_timeout=timeout_sec, connect_timeout=timeout_sec
            ) as session:
                return await self._resolve(site_id, site_url, logger, session)

    async def _resolve(
        self, site_id: str, site_url: str, logger: Logger, session: httpx.AsyncClient
    ) -> FaviconResult:
        downloader = AsyncFaviconDownloader(session, self.timeout_ms)

        try:
            html = await downloader.fetch_text(site_url)
            candidates = FaviconSelector.rank_candidates(
                self.collector.collect_candidates(site_url, html)
            )
        except FaviconError as e:
            logger.warning(
                "Failed to fetch homepage HTML, using fallback favicon",
                extra={"site_id": site_id, "site_url": site_url, "error": str(e)},
            )
            return await self._store_fallback(site_id, site_url)

        for candidate in candidates:
            variants = await self._try_candidate(site_id, candidate, downloader, logger)
            if variants is not None:
                url = self._store_variants(site_id, variants)
                self.metrics_client.increment("favicon.resolved")
                return FaviconResult(url=url, source_url=candidate.url, is_fallback=False)

        logger.warning(
            "No valid favicon candidates found, using fallback",
            extra={"site_id": site_id, "site_url": site_url, "candidates": len(candidates)},
        )
        return await self._store_fallback(site_id, site_url)

    async def _try_candidate(
        self,
        site_id: str,
        candidate: Candidate,
        downloader: AsyncFaviconDownloader,
        logger: Logger,
    ) -> VariantSet | None:
        """Fetch and render one candidate, or return None if either step fails."""
        try:
            image = await downloader.download_favicon(candidate.url)
            return await self.renderer.render_variants(image.content, image.content_type)
        except FaviconError as e:
            self.metrics_client.increment("favicon.candidate_failures")
            logger.warning(
                "Failed to process favicon candidate",
                extra={"site_id": site_id, "candidate": candidate.url, "error": str(e)},
            )
            return None

    async def _store_fallback(self, site_id: str, site_url: str) -> FaviconResult:
        self.metrics_client.increment("favicon.fallback")
        content = self.fallback_generator.generate(site_url)
        variants = await self.renderer.render_variants(content, VARIANT_CONTENT_TYPE)
        url = self._store_variants(site_id, variants)
        return FaviconResult(url=url, source_url=FALLBACK_SOURCE, is_fallback=True)

    def _store_variants(self, site_id: str, variants: VariantSet) -> str:
        """Write every variant and return the URL of the last one written."""
        canonical_url = ""
        for size, content in variants.items():
            canonical_url = self.store.save_image(
                Image(content=content, content_type=VARIANT_CONTENT_TYPE),
                self.variant_path(site_id, size),
            )
        return canonical_url

    def variant_path(self, site_id: str, size: int) -> str:
        """Return the store path of one variant."""
        return f"{self.namespace}/{site_id}/favicon-{size}.{VARIANT_EXTENSION}"


async def resolve_favicon(
    site_id: str,
    site_url: str,
    store: BaseAssetStore,
    logger: Logger = logger,
    http_client: Optional[httpx.AsyncClient] = None,
    **pipeline_options: Any,
) -> FaviconResult:
    """Resolve the favicon of one site with a pipeline configured from settings.

    `pipeline_options` are passed to `FaviconPipeline`.
    """
    pipeline = FaviconPipeline(store, **pipeline_options)
    return await pipeline.resolve_favicon(site_id, site_url, logger, http_client)
