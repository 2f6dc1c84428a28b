"""Data models for the favicon pipeline"""

from pydantic import BaseModel


class LinkData(BaseModel):
    """Attributes of one `<link rel=...>` element, in document order."""

    rel: str
    href: str | None = None
    sizes: str | None = None
    type: str | None = None
    order: int


class Candidate(BaseModel):
    """A discovered, not yet validated favicon source."""

    url: str
    declared_size: int
    format_score: int
    rel_score: int
    discovery_order: int


class FaviconResult(BaseModel):
    """Outcome of one pipeline run."""

    url: str
    source_url: str
    is_fallback: bool


# Canonical size -> PNG bytes, one entry per configured size
VariantSet = dict[int, bytes]
