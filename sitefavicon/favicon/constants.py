"""Constants for the favicon pipeline"""

# Scraper selector: every link carrying a rel, icon filtering happens in the collector
LINK_SELECTOR: str = "link[rel]"

PARSER: str = "html.parser"

# Substring a link relation must contain to be an icon declaration
ICON_REL_MARKER: str = "icon"

# Declared size assumed for sizes="any" (scalable icons)
ANY_SIZE: int = 512

# Format desirability, checked in order against the lower-cased type attribute
FORMAT_SCORES: list[tuple[tuple[str, ...], int]] = [
    (("svg",), 40),
    (("png",), 30),
    (("jpeg", "jpg"), 20),
    (("ico",), 10),
]

# Link relation desirability, checked in order against the lower-cased rel attribute
REL_SCORES: list[tuple[str, int]] = [
    ("apple-touch-icon", 35),
    ("shortcut", 25),
    ("mask-icon", 20),
    ("icon", 15),
]

# Implicit /favicon.ico candidate, tried after everything the page declares
DEFAULT_FAVICON_PATH: str = "/favicon.ico"
DEFAULT_FAVICON_SIZE: int = 32
DEFAULT_FAVICON_FORMAT_SCORE: int = 5
DEFAULT_FAVICON_REL_SCORE: int = 10
DEFAULT_FAVICON_ORDER: int = 9999

# Ranking weights
SIZE_WEIGHT: int = 2
ORDER_PENALTY: float = 0.01

# Fallback icon
FALLBACK_SOURCE: str = "fallback:generated"
FALLBACK_SEED: str = "fallback"
FALLBACK_LABEL: str = "S"
FALLBACK_CANVAS_SIZE: int = 64
FALLBACK_COLORS: list[str] = [
    "#2563eb",
    "#7c3aed",
    "#0ea5e9",
    "#059669",
    "#d946ef",
    "#f97316",
]

# Rendered variants
VARIANT_CONTENT_TYPE: str = "image/png"
VARIANT_EXTENSION: str = "png"
# SVG sources are rasterized at this width before being fitted to each size
SVG_RASTER_WIDTH: int = 512
