"""Render a source image into the canonical square favicon variants"""

import asyncio
import logging
import re
from io import BytesIO

import cairosvg
from bs4 import BeautifulSoup
from PIL import Image as PILImage

from sitefavicon.exceptions import DecodeFailed
from sitefavicon.favicon.constants import PARSER, SVG_RASTER_WIDTH
from sitefavicon.favicon.models import VariantSet

logger = logging.getLogger(__name__)

# Errors Pillow raises for unreadable, truncated or oversized input
_PIL_DECODE_ERRORS = (OSError, ValueError, SyntaxError, PILImage.DecompressionBombError)

TRANSPARENT = (255, 255, 255, 0)

_SVG_LENGTH = re.compile(
    r"^\s*((?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?)\s*(?:px)?\s*$", re.IGNORECASE
)
_SVG_VIEWBOX_SEPARATOR = re.compile(r"[\s,]+")


def is_svg(content: bytes, content_type: str = "") -> bool:
    """Detect SVG from the served content type or the document head."""
    return "svg" in content_type.lower() or b"<svg" in content[:4096].lower()


def _svg_length(value: str | None) -> float | None:
    match = _SVG_LENGTH.match(value or "")
    if not match:
        return None
    length = float(match.group(1))
    return length if 0 < length < float("inf") else None


def svg_raster_size(content: bytes) -> tuple[int, int]:
    """Return the (width, height) to rasterize an SVG at, its longer side SVG_RASTER_WIDTH.

    The aspect ratio comes from the root `width` and `height` when both are
    pixel lengths, otherwise from its `viewBox`. An SVG with neither is
    rasterized into a square.
    """
    root = BeautifulSoup(content, PARSER).find("svg")
    if root is None:
        return SVG_RASTER_WIDTH, SVG_RASTER_WIDTH

    width, height = _svg_length(root.get("width")), _svg_length(root.get("height"))
    if width is None or height is None:
        viewbox = _SVG_VIEWBOX_SEPARATOR.split((root.get("viewbox") or "").strip())
        if len(viewbox) != 4:
            return SVG_RASTER_WIDTH, SVG_RASTER_WIDTH
        width, height = _svg_length(viewbox[2]), _svg_length(viewbox[3])
        if width is None or height is None:
            return SVG_RASTER_WIDTH, SVG_RASTER_WIDTH

    if width >= height:
        return SVG_RASTER_WIDTH, max(1, round(SVG_RASTER_WIDTH * height / width))
    return max(1, round(SVG_RASTER_WIDTH * width / height)), SVG_RASTER_WIDTH


class VariantRenderer:
    """Fit a source image into transparent square canvases, one PNG per size."""

    sizes: list[int]

    def __init__(self, sizes: list[int]) -> None:
        if not sizes:
            raise ValueError("At least one variant size is required")
        self.sizes = [int(size) for size in sizes]

    async def render_variants(self, content: bytes, content_type: str = "") -> VariantSet:
        """Render every size concurrently.

        Raises:
            DecodeFailed: if the source cannot be decoded or any size fails, in
                which case no variant is returned.
        """
        source = await asyncio.to_thread(self.decode, content, content_type)
        try:
            # Every thread must finish before `source` is closed.
            rendered = await asyncio.gather(
                *(asyncio.to_thread(self.render_variant, source, size) for size in self.sizes),
                return_exceptions=True,
            )
        finally:
            source.close()

        for result in rendered:
            if isinstance(result, BaseException):
                raise result
        return dict(zip(self.sizes, rendered))

    def decode(self, content: bytes, content_type: str = "") -> PILImage.Image:
        """Decode bytes into an RGBA image. SVG is rasterized first, animations keep frame 0."""
        if not content:
            raise DecodeFailed("Empty image content")

        if is_svg(content, content_type):
            output_width, output_height = svg_raster_size(content)
            try:
                content = cairosvg.svg2png(
                    bytestring=content, output_width=output_width, output_height=output_height
                )
            except Exception as e:
                raise DecodeFailed(f"Cannot rasterize SVG: {e}") from e

        try:
            with PILImage.open(BytesIO(content)) as image:
                image.load()
                return image.convert("RGBA")
        except _PIL_DECODE_ERRORS as e:
            raise DecodeFailed(f"Cannot decode image: {e}") from e

    @staticmethod
    def render_variant(source: PILImage.Image, size: int) -> bytes:
        """Contain-fit `source` in a `size` x `size` transparent canvas and encode as PNG."""
        width, height = source.size
        ratio = min(size / width, size / height)
        fitted_size = (max(1, round(width * ratio)), max(1, round(height * ratio)))

        try:
            fitted = source.resize(fitted_size, PILImage.Resampling.LANCZOS)
            canvas = PILImage.new("RGBA", (size, size), TRANSPARENT)
            canvas.paste(fitted, ((size - fitted_size[0]) // 2, (size - fitted_size[1]) // 2))

            buffer = BytesIO()
            canvas.save(buffer, format="PNG")
        except _PIL_DECODE_ERRORS as e:
            raise DecodeFailed(f"Cannot render {size}x{size} variant: {e}") from e

        return buffer.getvalue()
