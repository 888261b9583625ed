"""
Lightweight render configuration validation to catch bad values before drawing.
"""

from numbers import Real
from typing import Any

from ..errors import ConfigError


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_render_config(config: Any) -> None:
    """
    Validate a RenderConfig.
    Raises ConfigError on non-positive canvas dimensions, negative widths/sizes
    or an unusable oversampling factor.
    """
    for name in ("canvas_width", "canvas_height"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigError(f"{name} must be a positive integer, got {value!r}")

    for name in ("pen_width", "font_size"):
        value = getattr(config, name)
        if not _is_number(value) or value < 0:
            raise ConfigError(f"{name} must be a non-negative number, got {value!r}")

    if isinstance(config.dpi, bool) or not isinstance(config.dpi, int) or config.dpi <= 0:
        raise ConfigError(f"dpi must be a positive integer, got {config.dpi!r}")

    if isinstance(config.supersample, bool) or not isinstance(config.supersample, int) or config.supersample < 1:
        raise ConfigError(
            f"supersample must be an integer >= 1, got {config.supersample!r}. "
            "Use 1 to disable stroke oversampling."
        )

    if not isinstance(config.font_name, str) or not config.font_name.strip():
        raise ConfigError("font_name must be a non-empty string")
