"""
Tests for Signature Pad segment parsing.
"""

import pytest

from signature_to_image.errors import InvalidInputError
from signature_to_image.rendering.segments import LineSegment, parse_segments


class TestParseSegments:
    """Tests for parse_segments."""

    def test_parses_json_in_order(self):
        data = '[{"lx":5,"ly":6,"mx":7,"my":8},{"lx":1,"ly":2,"mx":3,"my":4}]'
        segments = parse_segments(data)
        assert segments == [LineSegment(5, 6, 7, 8), LineSegment(1, 2, 3, 4)]

    def test_accepts_bytes(self):
        assert parse_segments(b'[{"lx":0,"ly":0,"mx":1,"my":1}]') == [LineSegment(0, 0, 1, 1)]

    @pytest.mark.parametrize("data", [None, "", "   ", "[]", []])
    def test_empty_inputs(self, data):
        assert parse_segments(data) == []

    def test_accepts_decoded_mappings_and_segments(self):
        data = [{"lx": 1, "ly": 2, "mx": 3, "my": 4}, LineSegment(9, 9, 9, 9)]
        assert parse_segments(data) == [LineSegment(1, 2, 3, 4), LineSegment(9, 9, 9, 9)]

    def test_extra_keys_ignored_and_integral_floats_accepted(self):
        segments = parse_segments('[{"lx":1.0,"ly":2,"mx":3,"my":4,"pressure":0.5}]')
        assert segments == [LineSegment(1, 2, 3, 4)]
        assert isinstance(segments[0].lx, int)

    def test_invalid_json(self):
        with pytest.raises(InvalidInputError, match="not valid JSON"):
            parse_segments("[{lx: 1}")

    @pytest.mark.parametrize("data", ['{"lx":1,"ly":2,"mx":3,"my":4}', '"text"', "42", 42])
    def test_root_must_be_array(self, data):
        with pytest.raises(InvalidInputError):
            parse_segments(data)

    def test_missing_key_names_index(self):
        with pytest.raises(InvalidInputError, match=r"Segment 1: missing key\(s\) my"):
            parse_segments('[{"lx":1,"ly":2,"mx":3,"my":4},{"lx":1,"ly":2,"mx":3}]')

    @pytest.mark.parametrize("value", ['"1"', "1.5", "true", "null"])
    def test_non_integer_coordinates(self, value):
        with pytest.raises(InvalidInputError, match="'lx' must be an integer"):
            parse_segments('[{"lx":%s,"ly":2,"mx":3,"my":4}]' % value)

    @pytest.mark.parametrize("value", ["9223372036854775808", "-9223372036854775809", "1e300"])
    def test_coordinates_beyond_64_bit_rejected(self, value):
        with pytest.raises(InvalidInputError, match="out of range"):
            parse_segments('[{"lx":%s,"ly":2,"mx":3,"my":4}]' % value)

    def test_large_coordinates_accepted(self):
        segments = parse_segments('[{"lx":-2147483648,"ly":0,"mx":9223372036854775807,"my":0}]')
        assert segments == [LineSegment(-2147483648, 0, 2 ** 63 - 1, 0)]

    def test_item_must_be_object(self):
        with pytest.raises(InvalidInputError, match="expected an object"):
            parse_segments("[[1, 2, 3, 4]]")

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            parse_segments("not json")


class TestLineSegment:
    """Tests for LineSegment."""

    def test_endpoints_and_dict(self):
        segment = LineSegment(1, 2, 3, 4)
        assert segment.start == (1, 2)
        assert segment.end == (3, 4)
        assert segment.to_dict() == {"lx": 1, "ly": 2, "mx": 3, "my": 4}

    def test_is_immutable(self):
        segment = LineSegment(1, 2, 3, 4)
        with pytest.raises(AttributeError):
            segment.lx = 10


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
