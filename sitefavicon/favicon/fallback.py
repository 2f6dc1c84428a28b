"""Generate a deterministic placeholder icon from a site's hostname"""

import logging
import re
from html import escape

import cairosvg
import httpx

from sitefavicon.favicon.constants import (
    FALLBACK_CANVAS_SIZE,
    FALLBACK_COLORS,
    FALLBACK_LABEL,
    FALLBACK_SEED,
)

logger = logging.getLogger(__name__)

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")

_SVG_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<svg width="{size}" height="{size}" viewBox="0 0 {size} {size}" xmlns="http://www.w3.org/2000/svg">
  <rect width="{size}" height="{size}" rx="{radius}" fill="{color}" />
  <text x="50%" y="50%" dominant-baseline="central" text-anchor="middle" fill="white" font-size="{font_size}" font-family="Inter, Arial, sans-serif" font-weight="600">{label}</text>
</svg>"""


def hash_string(value: str) -> int:
    """Rolling `h * 31 + c` hash wrapped to a signed 32-bit integer, returned as its absolute value."""
    hash_value = 0
    for char in value:
        hash_value = (hash_value * 31 + ord(char)) & 0xFFFFFFFF
    if hash_value >= 0x80000000:
        hash_value -= 0x100000000
    return abs(hash_value)


class FallbackGenerator:
    """Build a rounded-square icon with the site's initial on a palette colour."""

    palette: list[str]
    canvas_size: int

    def __init__(
        self, palette: list[str] | None = None, canvas_size: int = FALLBACK_CANVAS_SIZE
    ) -> None:
        self.palette = palette or FALLBACK_COLORS
        self.canvas_size = canvas_size

    @staticmethod
    def seed_and_label(site_url: str) -> tuple[str, str]:
        """Return the hash seed and the glyph for `site_url`.

        The seed is the ASCII (punycode) hostname without a leading "www.";
        unparseable URLs use a fixed seed and glyph.
        """
        try:
            hostname = httpx.URL(site_url).raw_host.decode("ascii")
        except (httpx.InvalidURL, UnicodeError):
            hostname = None

        if not hostname:
            return FALLBACK_SEED, FALLBACK_LABEL

        hostname = hostname.removeprefix("www.")
        alphanumeric = _NON_ALPHANUMERIC.sub("", hostname)
        label = alphanumeric[:1].upper() or FALLBACK_LABEL
        return hostname, label

    def pick_color(self, seed: str) -> str:
        """Pick the palette colour for a seed."""
        return self.palette[hash_string(seed) % len(self.palette)]

    def build_svg(self, label: str, color: str) -> str:
        """Render the placeholder as an SVG document."""
        return _SVG_TEMPLATE.format(
            size=self.canvas_size,
            radius=round(self.canvas_size * 12 / 64),
            font_size=self.canvas_size // 2,
            color=color,
            label=escape(label),
        )

    def generate(self, site_url: str) -> bytes:
        """Return the placeholder rasterized as PNG bytes."""
        seed, label = self.seed_and_label(site_url)
        color = self.pick_color(seed)
        logger.debug(f"Generating fallback favicon {label!r} in {color} for seed {seed!r}")
        svg = self.build_svg(label, color)
        return bytes(
            cairosvg.svg2png(
                bytestring=svg.encode("utf-8"),
                output_width=self.canvas_size,
                output_height=self.canvas_size,
            )
        )
