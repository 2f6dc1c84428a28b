"""URL and attribute parsing helpers for favicon candidates"""

import re
from urllib.parse import urljoin, urlparse

import httpx

from sitefavicon.exceptions import ResolutionFailed
from sitefavicon.favicon.constants import ANY_SIZE, FORMAT_SCORES, REL_SCORES

_LEADING_INT = re.compile(r"^[+-]?\d+")


def resolve_url(base_url: str, href: str) -> str:
    """Resolve `href` against `base_url` into an absolute http(s) URL.

    Raises:
        ResolutionFailed: if the result is malformed, has no host, or uses
            another scheme (data:, javascript:, mailto: ...).
    """
    try:
        resolved = urljoin(base_url, href.strip())
        parsed = urlparse(resolved)
        # Accessing port validates it, urlparse is lazy about that.
        parsed.port
    except ValueError as ex:
        raise ResolutionFailed(f"Cannot resolve {href!r} against {base_url!r}: {ex}") from ex

    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise ResolutionFailed(f"Cannot resolve {href!r} against {base_url!r}")

    # httpx is stricter than urlparse: control characters, invalid IDNA
    # labels and overlong URLs are only caught here.
    try:
        httpx.URL(resolved).host
    except (httpx.InvalidURL, UnicodeError) as ex:
        raise ResolutionFailed(f"Cannot resolve {href!r} against {base_url!r}: {ex}") from ex
    return resolved


def parse_size(value: str | None) -> int:
    """Return the declared pixel width of a `sizes` attribute.

    "any" maps to ANY_SIZE, otherwise the leading integer of the first
    `WxH` token is used and anything unparseable is 0.
    """
    if not value or not value.strip():
        return 0
    value = value.strip().lower()
    if value == "any":
        return ANY_SIZE
    first_pair = value.split()[0]
    match = _LEADING_INT.match(first_pair.split("x")[0])
    return int(match.group()) if match else 0


def format_score(type_attr: str | None) -> int:
    """Score the desirability of an icon's declared MIME type."""
    if not type_attr:
        return 0
    type_attr = type_attr.lower()
    for needles, score in FORMAT_SCORES:
        if any(needle in type_attr for needle in needles):
            return score
    return 0


def rel_score(rel_attr: str) -> int:
    """Score the desirability of an icon's link relation."""
    rel_attr = rel_attr.lower()
    for needle, score in REL_SCORES:
        if needle in rel_attr:
            return score
    return 0
