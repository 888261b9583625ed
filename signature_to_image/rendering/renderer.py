"""
Rasterize Signature Pad strokes or a typed name into a Pillow image.
"""

import logging
from typing import Any, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from ..errors import InvalidInputError
from ..utils.config import RenderConfig
from ..utils.config_validation import validate_render_config
from .fonts import FontResolutionFailure, load_font, raise_for_failure, resolve_font
from .segments import LineSegment, SegmentsLike, parse_segments

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)


def _check_target_size(size: Any) -> Tuple[int, int]:
    if not isinstance(size, Sequence) or isinstance(size, str) or len(size) != 2:
        raise InvalidInputError(f"Target size must be a (width, height) pair, got {size!r}")
    width, height = size
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidInputError(f"Target size must hold positive integers, got {size!r}")
    return (width, height)


def clip_segment(
    segment: LineSegment, x_min: float, y_min: float, x_max: float, y_max: float
) -> Optional[Tuple[float, float, float, float]]:
    """
    Clip a segment to an axis-aligned box (Liang-Barsky).

    Returns the clipped (x0, y0, x1, y1), or None when the segment misses the box.
    """
    x0, y0, x1, y1 = segment.lx, segment.ly, segment.mx, segment.my
    dx = x1 - x0
    dy = y1 - y0
    t_enter, t_exit = 0.0, 1.0

    for p, q in ((-dx, x0 - x_min), (dx, x_max - x0), (-dy, y0 - y_min), (dy, y_max - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t_exit:
                return None
            t_enter = max(t_enter, t)
        else:
            if t < t_enter:
                return None
            t_exit = min(t_exit, t)

    return (x0 + t_enter * dx, y0 + t_enter * dy, x0 + t_exit * dx, y0 + t_exit * dy)


class SignatureRenderer:
    """
    Draws signatures onto fresh RGBA canvases.

    Every call allocates its own canvas; the only shared state is the
    RenderConfig, which is read but never modified while rendering.

    Args:
        config: Drawing options; defaults to RenderConfig()
        **overrides: Individual RenderConfig fields to replace
    """

    def __init__(self, config: Optional[RenderConfig] = None, **overrides):
        if config is None:
            config = RenderConfig(**overrides)
        elif overrides:
            config = RenderConfig.from_dict({**config.to_dict(), **overrides})
        validate_render_config(config)
        self.config = config

    def get_blank_canvas(self) -> Image.Image:
        """Canvas of the configured size filled with the background color."""
        validate_render_config(self.config)
        canvas = Image.new("RGBA", self.config.canvas_size, TRANSPARENT)
        canvas.paste(self.config.background_color, (0, 0) + canvas.size)
        return canvas

    def render_from_segments(
        self,
        segments: SegmentsLike,
        target_size: Optional[Tuple[int, int]] = None,
    ) -> Image.Image:
        """
        Draw line segments and optionally fit the result into target_size.

        Args:
            segments: Signature Pad JSON (str/bytes) or a sequence of segment
                mappings / LineSegment, drawn in the given order
            target_size: (width, height) box to scale into, keeping the aspect
                ratio. None keeps the configured canvas size.

        Returns:
            RGBA image

        Raises:
            InvalidInputError: If the segments or target size are malformed
        """
        size = self.config.canvas_size if target_size is None else _check_target_size(target_size)
        lines = parse_segments(segments)

        canvas = self.get_blank_canvas()
        if lines:
            self._draw_segments(canvas, lines)
        logger.debug(f"Rendered {len(lines)} segments on {canvas.size[0]}x{canvas.size[1]} canvas")

        if size == canvas.size:
            return canvas
        with canvas:
            return self._resize_image(canvas, size)

    def render_from_text(self, text: Optional[str], font_path: Optional[str] = None) -> Image.Image:
        """
        Draw a name with a signature-like font at the canvas origin.

        Args:
            text: Name to draw; blank text yields the blank canvas
            font_path: Font file to use instead of the installed font_name

        Returns:
            RGBA image of the configured canvas size

        Raises:
            FontNotFoundError: font_name is not installed and no font_path given
            FontFileNotFoundError: font_path does not point to a file
            InvalidFontError: font_path is not a usable font
        """
        canvas = self.get_blank_canvas()
        if text is None or not text.strip():
            return canvas

        resolution = resolve_font(self.config.font_name, font_path)
        if isinstance(resolution, FontResolutionFailure):
            logger.debug(f"Font resolution failed ({resolution.kind.value}): {resolution.message}")
            raise_for_failure(resolution)

        font = load_font(resolution, self.config.font_size_px)
        if isinstance(font, FontResolutionFailure):
            logger.debug(f"Font loading failed ({font.kind.value}): {font.message}")
            raise_for_failure(font)

        with Image.new("L", canvas.size, 0) as mask:
            draw = ImageDraw.Draw(mask)
            draw.fontmode = "L"
            draw.text((0, 0), text, font=font, fill=255)
            self._composite_pen(canvas, mask)
        logger.debug(f"Rendered text with font {resolution.path}")
        return canvas

    def _draw_segments(self, canvas: Image.Image, segments: Sequence[LineSegment]) -> None:
        """
        Stroke segments onto canvas with anti-aliasing.

        Lines are drawn into a coverage mask oversampled by config.supersample,
        box-filtered down to canvas size and composited in the pen color.
        """
        factor = self.config.supersample
        width, height = canvas.size
        stroke = max(1, round(self.config.pen_width * factor))
        # Map pixel (x, y) to the center of its oversampled block
        offset = (factor - 1) / 2
        # Clip to the canvas padded past the pen width, before oversampling
        pad = self.config.pen_width + 1

        with Image.new("L", (width * factor, height * factor), 0) as mask:
            draw = ImageDraw.Draw(mask)
            for segment in segments:
                clipped = clip_segment(segment, -pad, -pad, width - 1 + pad, height - 1 + pad)
                if clipped is None:
                    continue
                x0, y0, x1, y1 = clipped
                draw.line(
                    [(x0 * factor + offset, y0 * factor + offset), (x1 * factor + offset, y1 * factor + offset)],
                    fill=255,
                    width=stroke,
                )
            with mask.resize(canvas.size, Image.BOX) as coverage:
                self._composite_pen(canvas, coverage)

    def _composite_pen(self, canvas: Image.Image, coverage: Image.Image) -> None:
        """Source-over the pen color onto canvas, using coverage as per-pixel opacity."""
        pen_alpha = self.config.pen_color[3]
        with Image.new("RGBA", canvas.size, self.config.pen_color) as ink:
            if pen_alpha == 255:
                ink.putalpha(coverage)
            else:
                with coverage.point(lambda value: value * pen_alpha // 255) as alpha:
                    ink.putalpha(alpha)
            canvas.alpha_composite(ink)

    @staticmethod
    def _resize_image(image: Image.Image, size: Tuple[int, int]) -> Image.Image:
        """Scale image to fit inside size, preserving aspect ratio (bicubic)."""
        src_width, src_height = image.size
        target_width, target_height = size

        percent = min(target_width / src_width, target_height / src_height)
        dest_width = max(1, int(src_width * percent))
        dest_height = max(1, int(src_height * percent))

        logger.debug(f"Resizing {src_width}x{src_height} -> {dest_width}x{dest_height}")
        return image.resize((dest_width, dest_height), Image.BICUBIC)
