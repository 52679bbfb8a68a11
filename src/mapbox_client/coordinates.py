"""
Coordinate pair codec.

A coordinate pair is an ordered list of floats: ``[lon, lat]`` for a location,
or a full row of a duration matrix. The distance-matrix service answers
``null`` where no path exists, so decoding substitutes ``NO_PATH_DURATION``
for it instead of collapsing it to zero.

Values are held at single precision. Encoding writes each one in its shortest
single-precision form, so ``13.41894`` goes back out as ``13.41894``. The
sentinel goes out as ``-1.0``, never back to ``null``.
"""

from __future__ import annotations

import math
import struct
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

#: Marks an unreachable pair in a duration matrix.
NO_PATH_DURATION = -1.0

_FLOAT32 = struct.Struct("<f")


def to_float32(value: float) -> float:
    """Round a number to the nearest IEEE-754 single-precision value."""
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def shortest_float32(value: float) -> float:
    """Shortest decimal that still rounds to the same single-precision value."""
    for digits in range(1, 10):
        candidate = float(f"{value:.{digits}g}")
        if to_float32(candidate) == value:
            return candidate
    return value


def _decode_element(value: Any) -> float:
    # bool is an int subclass but never a JSON number
    if value is None or isinstance(value, bool):
        return NO_PATH_DURATION
    if isinstance(value, (int, float)):
        try:
            return to_float32(value)
        except (OverflowError, struct.error):
            return math.inf if value > 0 else -math.inf
    return NO_PATH_DURATION


def decode_coordinate_pair(value: Any) -> list[float]:
    """
    Decode one JSON array into a coordinate pair.

    Args:
        value: The already-parsed JSON value.

    Returns:
        List of floats with ``null`` and non-numeric entries replaced by
        ``NO_PATH_DURATION``. Numbers beyond single-precision range become
        infinities of the same sign.

    Raises:
        ValueError: If ``value`` is not an array.
    """
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"coordinate pair must be a JSON array, got {type(value).__name__}")
    return [_decode_element(v) for v in value]


def encode_coordinate_pair(pair: list[float]) -> list[float]:
    return [shortest_float32(v) for v in pair]


#: Pydantic field type applying the codec on validation and serialization.
CoordinatePair = Annotated[
    list[float],
    BeforeValidator(decode_coordinate_pair),
    PlainSerializer(encode_coordinate_pair),
]
