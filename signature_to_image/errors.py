"""
Exception hierarchy raised by signature_to_image.
"""

from enum import Enum
from typing import Optional


class FontErrorKind(str, Enum):
    """Why a font could not be resolved."""

    NOT_INSTALLED = "not_installed"
    FILE_NOT_FOUND = "file_not_found"
    INVALID_FONT = "invalid_font"


class SignatureImageError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInputError(SignatureImageError, ValueError):
    """Segment data or render arguments do not have the expected shape."""


class ConfigError(SignatureImageError, ValueError):
    """Render configuration holds an invalid value."""


class FontResolutionError(SignatureImageError):
    """
    A font for text rendering could not be obtained.

    Attributes:
        kind: FontErrorKind describing the failure
        path: Font file path involved, if any
    """

    kind = None

    def __init__(self, message: str, kind: Optional[FontErrorKind] = None, path: Optional[str] = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind
        self.path = path


class FontNotFoundError(FontResolutionError):
    """The named font is not installed and no font file was given."""

    kind = FontErrorKind.NOT_INSTALLED


class FontFileNotFoundError(FontResolutionError, FileNotFoundError):
    """The font file path does not exist or is not a regular file."""

    kind = FontErrorKind.FILE_NOT_FOUND


class InvalidFontError(FontResolutionError):
    """The font file exists but cannot be parsed as a font."""

    kind = FontErrorKind.INVALID_FONT
