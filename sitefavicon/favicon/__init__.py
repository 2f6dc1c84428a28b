"""Favicon discovery, ranking, rendering and fallback components"""

from sitefavicon.favicon.collector import FaviconCollector
from sitefavicon.favicon.downloader import AsyncFaviconDownloader
from sitefavicon.favicon.fallback import FallbackGenerator
from sitefavicon.favicon.models import Candidate, FaviconResult
from sitefavicon.favicon.pipeline import FaviconPipeline, resolve_favicon
from sitefavicon.favicon.renderer import VariantRenderer
from sitefavicon.favicon.scraper import FaviconScraper
from sitefavicon.favicon.selector import FaviconSelector

__all__ = [
    "AsyncFaviconDownloader",
    "Candidate",
    "FallbackGenerator",
    "FaviconCollector",
    "FaviconPipeline",
    "FaviconResult",
    "FaviconScraper",
    "FaviconSelector",
    "VariantRenderer",
    "resolve_favicon",
]
