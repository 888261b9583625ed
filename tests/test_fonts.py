"""
Tests for font resolution.
"""

from pathlib import Path

import matplotlib
import pytest
from PIL import ImageFont

from signature_to_image.errors import (
    FontErrorKind,
    FontFileNotFoundError,
    FontNotFoundError,
    FontResolutionError,
    InvalidFontError,
)
from signature_to_image.rendering.fonts import (
    FontResolutionFailure,
    LoadedFont,
    SystemFont,
    find_system_font,
    list_system_fonts,
    load_font,
    raise_for_failure,
    resolve_font,
)

# Bundled with matplotlib, so always registered with its font manager
INSTALLED_FONT = "DejaVu Sans"
MISSING_FONT = "No Such Signature Font 1f3a"


@pytest.fixture
def font_file():
    return Path(matplotlib.get_data_path()) / "fonts" / "ttf" / "DejaVuSans.ttf"


class TestSystemFonts:
    def test_list_contains_installed_font(self):
        names = list_system_fonts()
        assert INSTALLED_FONT in names
        assert names == sorted(set(names))

    def test_find_exact_name(self):
        font = find_system_font(INSTALLED_FONT)
        assert isinstance(font, SystemFont)
        assert font.name == INSTALLED_FONT
        assert Path(font.path).is_file()

    def test_find_is_exact_match(self):
        assert find_system_font(INSTALLED_FONT.lower()) is None
        assert find_system_font(MISSING_FONT) is None


class TestResolveFont:
    def test_installed_font_without_path(self):
        assert isinstance(resolve_font(INSTALLED_FONT), SystemFont)

    @pytest.mark.parametrize("font_path", [None, "", "   "])
    def test_missing_font_is_a_failure_value(self, font_path):
        result = resolve_font(MISSING_FONT, font_path)
        assert isinstance(result, FontResolutionFailure)
        assert result.kind == FontErrorKind.NOT_INSTALLED
        assert MISSING_FONT in result.message

    def test_path_takes_precedence_over_name(self, font_file):
        result = resolve_font(MISSING_FONT, str(font_file))
        assert result == LoadedFont(path=str(font_file))

    def test_nonexistent_path(self, tmp_path):
        missing = tmp_path / "missing.ttf"
        result = resolve_font(INSTALLED_FONT, str(missing))
        assert isinstance(result, FontResolutionFailure)
        assert result.kind == FontErrorKind.FILE_NOT_FOUND
        assert result.path == str(missing)

    def test_directory_counts_as_missing(self, tmp_path):
        result = resolve_font(INSTALLED_FONT, str(tmp_path))
        assert result.kind == FontErrorKind.FILE_NOT_FOUND


class TestLoadFont:
    def test_loads_valid_file(self, font_file):
        font = load_font(LoadedFont(path=str(font_file)), 32)
        assert isinstance(font, ImageFont.FreeTypeFont)
        assert font.size == 32

    def test_invalid_file(self, tmp_path):
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"this is not a font")
        result = load_font(LoadedFont(path=str(bogus)), 32)
        assert isinstance(result, FontResolutionFailure)
        assert result.kind == FontErrorKind.INVALID_FONT


class TestRaiseForFailure:
    @pytest.mark.parametrize(
        "kind, error_cls",
        [
            (FontErrorKind.NOT_INSTALLED, FontNotFoundError),
            (FontErrorKind.FILE_NOT_FOUND, FontFileNotFoundError),
            (FontErrorKind.INVALID_FONT, InvalidFontError),
        ],
    )
    def test_maps_kind_to_exception(self, kind, error_cls):
        failure = FontResolutionFailure(kind=kind, message="boom", path="x.ttf")
        with pytest.raises(error_cls) as exc_info:
            raise_for_failure(failure)
        assert isinstance(exc_info.value, FontResolutionError)
        assert exc_info.value.kind == kind
        assert exc_info.value.path == "x.ttf"
        assert str(exc_info.value) == "boom"

    def test_file_not_found_is_os_error(self):
        failure = FontResolutionFailure(FontErrorKind.FILE_NOT_FOUND, "gone", "gone.ttf")
        with pytest.raises(FileNotFoundError) as exc_info:
            raise_for_failure(failure)
        assert exc_info.value.path == "gone.ttf"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
