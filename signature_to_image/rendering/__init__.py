"""
Signature rasterization: segment parsing, font resolution and drawing.
"""

from .renderer import SignatureRenderer
from .segments import LineSegment, parse_segments
from .output import to_png_bytes, to_array, save_image

__all__ = ["SignatureRenderer", "LineSegment", "parse_segments", "to_png_bytes", "to_array", "save_image"]
