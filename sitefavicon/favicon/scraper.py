"""Favicon scraper for extracting link declarations from a homepage"""

import logging

from bs4 import BeautifulSoup

from sitefavicon.favicon.constants import LINK_SELECTOR, PARSER
from sitefavicon.favicon.models import LinkData

logger = logging.getLogger(__name__)


def _attr_text(value) -> str | None:
    """Flatten BeautifulSoup attribute values; multi-valued ones such as rel are lists."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


class FaviconScraper:
    """Parse HTML and list every `<link>` that declares a relation."""

    def __init__(self, parser: str = PARSER) -> None:
        self.parser = parser

    def parse(self, html: str) -> BeautifulSoup:
        """Parse a document."""
        return BeautifulSoup(html, self.parser)

    def scrape_link_data(self, html: str) -> list[LinkData]:
        """Return rel, href, sizes and type of each `link[rel]`, in document order."""
        page = self.parse(html)
        links = []
        for order, link in enumerate(page.select(LINK_SELECTOR)):
            links.append(
                LinkData(
                    rel=_attr_text(link.get("rel")) or "",
                    href=_attr_text(link.get("href")),
                    sizes=_attr_text(link.get("sizes")),
                    type=_attr_text(link.get("type")),
                    order=order,
                )
            )
        logger.debug(f"Scraped {len(links)} link declarations")
        return links
