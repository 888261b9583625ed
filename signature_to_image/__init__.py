"""
signature_to_image: Render Signature Pad strokes or typed names into images
"""

__version__ = "0.1.0"

from .errors import (
    SignatureImageError,
    InvalidInputError,
    FontResolutionError,
    FontNotFoundError,
    FontFileNotFoundError,
    InvalidFontError,
    ConfigError,
)
from .rendering.renderer import SignatureRenderer
from .rendering.segments import LineSegment, parse_segments
from .utils.config import RenderConfig

__all__ = [
    "__version__",
    "SignatureRenderer",
    "RenderConfig",
    "LineSegment",
    "parse_segments",
    "SignatureImageError",
    "InvalidInputError",
    "FontResolutionError",
    "FontNotFoundError",
    "FontFileNotFoundError",
    "InvalidFontError",
    "ConfigError",
]
