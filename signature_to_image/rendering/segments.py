"""
Line segments as exported by Signature Pad.

The widget serializes a signature as a JSON array of objects
``{"lx": .., "ly": .., "mx": .., "my": ..}``, each describing a stroke piece
from (lx, ly) to (mx, my).
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

SEGMENT_KEYS = ("lx", "ly", "mx", "my")
# Coordinates are limited to the signed 64-bit range
COORDINATE_LIMIT = 2 ** 63 - 1

SegmentsLike = Union[None, str, bytes, Sequence[Any]]


def _coerce_coordinate(value: Any, key: str, index: int) -> int:
    if isinstance(value, bool):
        raise InvalidInputError(f"Segment {index}: '{key}' must be an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        if abs(value) > COORDINATE_LIMIT:
            raise InvalidInputError(f"Segment {index}: '{key}' is out of range: {value}")
        return value
    raise InvalidInputError(f"Segment {index}: '{key}' must be an integer, got {value!r}")


@dataclass(frozen=True)
class LineSegment:
    """One stroke segment from (lx, ly) to (mx, my)."""

    lx: int
    ly: int
    mx: int
    my: int

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], index: int = 0) -> "LineSegment":
        if not isinstance(mapping, Mapping):
            raise InvalidInputError(
                f"Segment {index}: expected an object with keys {', '.join(SEGMENT_KEYS)}, "
                f"got {type(mapping).__name__}"
            )
        missing = [key for key in SEGMENT_KEYS if key not in mapping]
        if missing:
            raise InvalidInputError(f"Segment {index}: missing key(s) {', '.join(missing)}")
        return cls(*(_coerce_coordinate(mapping[key], key, index) for key in SEGMENT_KEYS))

    @property
    def start(self) -> Tuple[int, int]:
        return (self.lx, self.ly)

    @property
    def end(self) -> Tuple[int, int]:
        return (self.mx, self.my)

    def to_dict(self) -> Dict[str, int]:
        return {"lx": self.lx, "ly": self.ly, "mx": self.mx, "my": self.my}


def parse_segments(data: SegmentsLike) -> List[LineSegment]:
    """
    Turn Signature Pad output into an ordered list of LineSegment.

    Args:
        data: JSON text/bytes, an already decoded list of mappings, a list of
            LineSegment, or None. Blank text and None mean "no strokes".

    Returns:
        Segments in input order

    Raises:
        InvalidInputError: If the data is not an array of segment objects
    """
    if data is None:
        return []

    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInputError(f"Segment data is not valid UTF-8: {e}") from e

    if isinstance(data, str):
        if not data.strip():
            return []
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"Segment data is not valid JSON: {e}") from e

    if isinstance(data, (str, Mapping)) or not isinstance(data, Sequence):
        raise InvalidInputError(
            f"Segment data must be an array of line objects, got {type(data).__name__}"
        )

    segments = []
    for index, item in enumerate(data):
        if isinstance(item, LineSegment):
            segments.append(item)
        else:
            segments.append(LineSegment.from_mapping(item, index))

    logger.debug(f"Parsed {len(segments)} line segments")
    return segments
