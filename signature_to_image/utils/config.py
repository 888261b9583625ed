import os
import yaml
from dataclasses import dataclass, asdict
from typing import Dict, Any, Mapping, Optional, Sequence, Tuple, Union
from pathlib import Path

from PIL import ImageColor

from ..errors import ConfigError

Color = Tuple[int, int, int, int]
ColorLike = Union[str, Sequence[int]]

DEFAULT_BACKGROUND_COLOR: Color = (255, 255, 255, 255)
DEFAULT_PEN_COLOR: Color = (20, 83, 148, 255)
MAX_REFERENCE_DEPTH = 10


class Config:
    """Configuration handler with environment variable support."""

    def __init__(self, config_path: str):
        self.config_path = Path(config_path)
        self.config = self._load_config()
        self._resolve_paths()

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f)

        return config or {}

    def _resolve_paths(self):
        """Resolve environment variables and ${output.key} references, including chains."""
        section = 'output'
        if not isinstance(self.config.get(section), dict):
            return
        values = self.config[section]
        marker = f'${{{section}.'
        for key, value in values.items():
            if isinstance(value, str):
                values[key] = os.path.expandvars(value)

        # Self-referencing entries stop expanding after MAX_REFERENCE_DEPTH passes
        for _ in range(MAX_REFERENCE_DEPTH):
            changed = False
            for key, value in values.items():
                if not isinstance(value, str) or marker not in value:
                    continue
                resolved = value
                for replace_key, replace_val in values.items():
                    resolved = resolved.replace(f'${{{section}.{replace_key}}}', str(replace_val))
                if resolved != value:
                    values[key] = resolved
                    changed = True
            if not changed:
                break

    def get(self, key: str, default=None):
        """Get configuration value by dot-notation key."""
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
            if value is None:
                return default
        return value

    def set(self, key: str, value: Any):
        """Set configuration value by dot-notation key."""
        keys = key.split('.')
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

    def __getitem__(self, key):
        return self.config[key]

    def __repr__(self):
        return f"Config({self.config_path})"


def parse_color(value: ColorLike) -> Color:
    """
    Normalize a color to an RGBA tuple.

    Accepts anything PIL.ImageColor understands ("white", "#145394",
    "rgb(20, 83, 148)") or a 3/4 element sequence of 0-255 ints.
    """
    if isinstance(value, str):
        try:
            rgb = ImageColor.getrgb(value)
        except ValueError as e:
            raise ConfigError(f"Unknown color '{value}'") from e
    elif isinstance(value, Sequence) and len(value) in (3, 4):
        rgb = tuple(value)
    else:
        raise ConfigError(f"Color must be a string or an RGB(A) sequence, got {value!r}")

    for channel in rgb:
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
            raise ConfigError(f"Color channels must be ints in [0, 255], got {value!r}")

    if len(rgb) == 3:
        rgb = rgb + (255,)
    return rgb


@dataclass
class RenderConfig:
    """
    Drawing options held by a SignatureRenderer.

    font_size is in points and converted to pixels with dpi.
    supersample is the oversampling factor used to anti-alias strokes.
    """

    background_color: Color = DEFAULT_BACKGROUND_COLOR
    pen_color: Color = DEFAULT_PEN_COLOR
    canvas_width: int = 198
    canvas_height: int = 45
    pen_width: float = 2.0
    font_size: float = 24.0
    font_name: str = "Journal"
    dpi: int = 96
    supersample: int = 4

    def __post_init__(self):
        self.background_color = parse_color(self.background_color)
        self.pen_color = parse_color(self.pen_color)

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return (self.canvas_width, self.canvas_height)

    @property
    def font_size_px(self) -> int:
        return max(1, round(self.font_size * self.dpi / 72))

    @classmethod
    def from_dict(cls, values: Optional[Mapping[str, Any]]) -> "RenderConfig":
        """Build a RenderConfig from a mapping, rejecting unknown keys."""
        values = dict(values or {})
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(f"Unknown render option(s): {', '.join(unknown)}")
        return cls(**values)

    @classmethod
    def from_config(cls, config: Config, section: str = "render") -> "RenderConfig":
        """Build a RenderConfig from the given section of a YAML Config."""
        return cls.from_dict(config.get(section, {}))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
