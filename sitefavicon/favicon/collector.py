"""Collect favicon candidates declared by a homepage"""

import logging
from typing import Optional

from sitefavicon.exceptions import ResolutionFailed
from sitefavicon.favicon.constants import (
    DEFAULT_FAVICON_FORMAT_SCORE,
    DEFAULT_FAVICON_ORDER,
    DEFAULT_FAVICON_PATH,
    DEFAULT_FAVICON_REL_SCORE,
    DEFAULT_FAVICON_SIZE,
    ICON_REL_MARKER,
)
from sitefavicon.favicon.models import Candidate, LinkData
from sitefavicon.favicon.scraper import FaviconScraper
from sitefavicon.favicon.utils import format_score, parse_size, rel_score, resolve_url

logger = logging.getLogger(__name__)


class FaviconCollector:
    """Turn icon link declarations plus the implicit /favicon.ico into unranked candidates."""

    def __init__(self, favicon_scraper: Optional[FaviconScraper] = None) -> None:
        self.favicon_scraper = favicon_scraper or FaviconScraper()

    def collect_candidates(self, base_url: str, html: str) -> list[Candidate]:
        """Return deduplicated candidates in discovery order.

        The first declaration of a URL wins. Unresolvable hrefs are dropped.
        """
        candidates: dict[str, Candidate] = {}

        for link in self.favicon_scraper.scrape_link_data(html):
            candidate = self._candidate_from_link(base_url, link)
            if candidate is not None and candidate.url not in candidates:
                candidates[candidate.url] = candidate

        default_favicon = self._default_candidate(base_url)
        if default_favicon is not None and default_favicon.url not in candidates:
            candidates[default_favicon.url] = default_favicon

        return list(candidates.values())

    def _candidate_from_link(self, base_url: str, link: LinkData) -> Candidate | None:
        rel = link.rel.lower()
        if ICON_REL_MARKER not in rel or not link.href:
            return None

        try:
            url = resolve_url(base_url, link.href)
        except ResolutionFailed as e:
            logger.debug(f"Skipping icon link: {e}")
            return None

        return Candidate(
            url=url,
            declared_size=parse_size(link.sizes),
            format_score=format_score(link.type),
            rel_score=rel_score(rel),
            discovery_order=link.order,
        )

    @staticmethod
    def _default_candidate(base_url: str) -> Candidate | None:
        try:
            url = resolve_url(base_url, DEFAULT_FAVICON_PATH)
        except ResolutionFailed as e:
            logger.debug(f"No default favicon candidate: {e}")
            return None

        return Candidate(
            url=url,
            declared_size=DEFAULT_FAVICON_SIZE,
            format_score=DEFAULT_FAVICON_FORMAT_SCORE,
            rel_score=DEFAULT_FAVICON_REL_SCORE,
            discovery_order=DEFAULT_FAVICON_ORDER,
        )
