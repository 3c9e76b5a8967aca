"""Hierarchy key string utilities.

This module provides helpers for splitting, parsing and building the
delimiter-joined, marker-terminated keys produced by the engine.
"""

from typing import List, Optional

from thread_keys.models import BASE36_DIGITS

SEGMENT_WIDTH = 2


def strip_end_of_record(
    key: Optional[str],
    end_of_record: str
) -> Optional[str]:
    """Removes a single trailing end-of-record marker.

    Args:
        key: Full key, possibly None.
        end_of_record: Marker character.

    Returns:
        Key without the marker, or the key unchanged if it has none.
    """
    if key and key.endswith(end_of_record):
        return key[:-len(end_of_record)]
    return key


def split_segments(key: str, delimiter: str) -> List[str]:
    """Splits a stripped key into its depth segments."""
    return key.split(delimiter)


def key_depth(key: Optional[str], delimiter: str) -> int:
    """Returns zero-indexed depth encoded by key (0 when unkeyed)."""
    if not key:
        return 0
    return len(split_segments(key, delimiter)) - 1


def parse_segment(segment: str) -> Optional[int]:
    """Parses the leading base-36 digits of a segment.

    Parsing stops at the first character outside the base-36 alphabet,
    so ``'0a'`` gives 10 and ``'1x?'`` gives 69.

    Args:
        segment: Segment text.

    Returns:
        Parsed integer, or None if the segment has no leading digit.
    """
    digits = _leading_digits(segment.strip().lower())
    if not digits:
        return None
    return int(digits, 36)


def _leading_digits(text: str) -> str:
    """Returns the longest base-36 prefix of text."""
    end = 0
    while end < len(text) and text[end] in BASE36_DIGITS:
        end += 1
    return text[:end]


def format_segment(index: int) -> str:
    """Encodes a sibling index as zero-padded lowercase base-36.

    Args:
        index: Non-negative sibling index.

    Returns:
        Encoded segment, at least two characters wide.

    Raises:
        ValueError: If index is negative.
    """
    if index < 0:
        raise ValueError(f"Sibling index must be non-negative: {index}")
    return _to_base36(index).rjust(SEGMENT_WIDTH, '0')


def _to_base36(number: int) -> str:
    """Converts non-negative integer to base-36 text."""
    if number == 0:
        return '0'
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_DIGITS[remainder])
    return ''.join(reversed(digits))


def build_key(prefix: str, index: int, end_of_record: str) -> str:
    """Joins prefix, encoded index and marker into a full key."""
    return prefix + format_segment(index) + end_of_record
