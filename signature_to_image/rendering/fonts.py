"""
Font lookup for name-based signatures.

Resolution never raises for expected failures; it returns one of
SystemFont, LoadedFont or FontResolutionFailure and lets the caller decide.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from matplotlib import font_manager
from PIL import ImageFont

from ..errors import (
    FontErrorKind,
    FontFileNotFoundError,
    FontNotFoundError,
    FontResolutionError,
    InvalidFontError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SystemFont:
    """An installed font family, found by exact name."""

    name: str
    path: str


@dataclass(frozen=True)
class LoadedFont:
    """A font file supplied by the caller."""

    path: str


@dataclass(frozen=True)
class FontResolutionFailure:
    kind: FontErrorKind
    message: str
    path: Optional[str] = None


ResolvedFont = Union[SystemFont, LoadedFont]
FontResolution = Union[SystemFont, LoadedFont, FontResolutionFailure]

_ERRORS = {
    FontErrorKind.NOT_INSTALLED: FontNotFoundError,
    FontErrorKind.FILE_NOT_FOUND: FontFileNotFoundError,
    FontErrorKind.INVALID_FONT: InvalidFontError,
}


def list_system_fonts() -> List[str]:
    """Sorted, de-duplicated family names of the installed fonts."""
    return sorted({entry.name for entry in font_manager.fontManager.ttflist})


def find_system_font(name: str) -> Optional[SystemFont]:
    """Return the installed font whose family name equals ``name`` exactly."""
    for entry in font_manager.fontManager.ttflist:
        if entry.name == name:
            return SystemFont(name=entry.name, path=entry.fname)
    return None


def resolve_font(font_name: str, font_path: Optional[str] = None) -> FontResolution:
    """
    Decide which font a text signature should use.

    Args:
        font_name: Family name to look up when no file is given
        font_path: Optional font file; takes precedence over font_name

    Returns:
        SystemFont, LoadedFont or FontResolutionFailure
    """
    if font_path is None or not str(font_path).strip():
        system_font = find_system_font(font_name)
        if system_font is None:
            return FontResolutionFailure(
                kind=FontErrorKind.NOT_INSTALLED,
                message=(
                    f"Font '{font_name}' is not installed on the system. "
                    "Provide the full path of the font file instead."
                ),
            )
        return system_font

    path = Path(font_path)
    # Directories and other non-regular files count as missing
    if not path.is_file():
        return FontResolutionFailure(
            kind=FontErrorKind.FILE_NOT_FOUND,
            message=f"Font file '{font_path}' does not exist or permission was denied.",
            path=str(font_path),
        )
    return LoadedFont(path=str(path))


def load_font(resolved: ResolvedFont, size_px: int) -> Union[ImageFont.FreeTypeFont, FontResolutionFailure]:
    """
    Open a resolved font at the given pixel size.

    The file is read into memory and closed before returning.
    """
    try:
        with open(resolved.path, "rb") as handle:
            font = ImageFont.truetype(handle, size_px)
    except (FileNotFoundError, PermissionError):
        return FontResolutionFailure(
            kind=FontErrorKind.FILE_NOT_FOUND,
            message=f"Font file '{resolved.path}' does not exist or permission was denied.",
            path=resolved.path,
        )
    except (OSError, ValueError) as e:
        return FontResolutionFailure(
            kind=FontErrorKind.INVALID_FONT,
            message=f"Font file '{resolved.path}' is either invalid or not supported: {e}",
            path=resolved.path,
        )

    logger.debug(f"Loaded font {resolved.path} at {size_px}px")
    return font


def raise_for_failure(failure: FontResolutionFailure) -> None:
    """Raise the FontResolutionError subclass matching the failure kind."""
    error_cls = _ERRORS.get(failure.kind, FontResolutionError)
    raise error_cls(failure.message, failure.kind, failure.path)
