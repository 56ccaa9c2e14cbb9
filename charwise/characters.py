"""
Character Model.

A "character" here is one decoded Unicode code point, never a storage byte
and never a grapheme cluster. Python's ``str`` already indexes by code point,
so the work in this module is about the index contract rather than decoding:

- Negative indices count from the end (-1 is the last character)
- Indices whose absolute value exceeds the length raise OutOfBoundsError
- A slice whose normalized start is past its end wraps around

Usage:
    from charwise.characters import char_at, slice_chars

    char_at("世界", -1)            # '界'
    slice_chars("Hello", -4, -1)   # 'ell'
    slice_chars("Hello", -1, 2)    # 'oHe' (wraps)
"""

import logging
from typing import List, Union

import numpy as np

from .constants import DEFAULT_ENCODING
from .errors import OutOfBoundsError

logger = logging.getLogger(__name__)

Text = Union[str, bytes]


# =============================================================================
# DECODING
# =============================================================================

def as_text(s: Text) -> str:
    """
    Decode input into a character sequence.

    Every character-aware operation calls this once on entry. ``str`` passes
    through untouched; ``bytes`` are decoded as UTF-8.

    Raises:
        TypeError: If s is neither str nor bytes
        UnicodeDecodeError: If bytes are not valid UTF-8
    """
    if isinstance(s, str):
        return s
    if isinstance(s, (bytes, bytearray)):
        return bytes(s).decode(DEFAULT_ENCODING)
    raise TypeError(f"Expected str or bytes, got {type(s).__name__}")


def code_points(s: Text) -> np.ndarray:
    """
    Code points of s as a uint32 array.

    Example:
        >>> code_points("hi")
        array([104, 105], dtype=uint32)
    """
    text = as_text(s)
    return np.fromiter(map(ord, text), dtype=np.uint32, count=len(text))


# =============================================================================
# INDEXED ACCESS
# =============================================================================

def length(s: Text) -> int:
    """Number of characters (code points) in s."""
    return len(as_text(s))


def chars(s: Text) -> List[str]:
    """Every character of s, in order. Empty input gives an empty list."""
    return list(as_text(s))


def _check_bound(index: int, size: int) -> None:
    if abs(index) > size:
        logger.debug("Index %d rejected for length %d", index, size)
        raise OutOfBoundsError(index, size)


def char_at(s: Text, i: int) -> str:
    """
    Return character i of s.

    Args:
        s: Input text
        i: Character index; negative values are offsets from the end

    Returns:
        A single-character string

    Raises:
        OutOfBoundsError: Unless -length(s) <= i < length(s)

    Examples:
        char_at("Hello", 0)    # 'H'
        char_at("Hello", -1)   # 'o'
        char_at("Hello", 8)    # OutOfBoundsError
    """
    text = as_text(s)
    size = len(text)
    if not -size <= i < size:
        logger.debug("Index %d rejected for length %d", i, size)
        raise OutOfBoundsError(i, size)
    return text[i]


def slice_chars(s: Text, start: int, end: int) -> str:
    """
    Return the characters of s in the span [start, end).

    Both bounds may be negative, in which case they are offsets from the end.
    If the normalized start is greater than the normalized end, the span
    wraps: it runs from start to the end of s and continues from the
    beginning up to end.

    Args:
        s: Input text
        start: First character index (inclusive)
        end: Last character index (exclusive)

    Returns:
        The selected substring

    Raises:
        OutOfBoundsError: If abs(start) or abs(end) exceeds length(s)

    Examples:
        slice_chars("Hello", 1, 2)       # 'e'
        slice_chars("Hello", -1, 0)      # 'o'
        slice_chars("Hello", -1, 2)      # 'oHe'
        slice_chars("世界地球風", 1, 3)   # '界地'
    """
    text = as_text(s)
    size = len(text)
    _check_bound(start, size)
    _check_bound(end, size)

    if start < 0:
        start += size
    if end < 0:
        end += size

    if start > end:
        return text[start:] + text[:end]
    return text[start:end]


def reverse(s: Text) -> str:
    """Return s with its characters in reverse order."""
    return as_text(s)[::-1]


# =============================================================================
# CASE MAPPING
# =============================================================================

def _simple_case(c: str, mapped: str) -> str:
    # full case mapping can expand ("ß" -> "SS"); keep c when it does
    return mapped if len(mapped) == 1 else c


def to_upper(s: Text) -> str:
    """
    Upper-case s one character at a time.

    Characters whose upper-case form is longer than one character are left
    unchanged, so length(to_upper(s)) == length(s).

    Example:
        to_upper("straße")   # 'STRAßE'
    """
    return "".join(_simple_case(c, c.upper()) for c in as_text(s))


def to_lower(s: Text) -> str:
    """Lower-case s one character at a time; see to_upper."""
    return "".join(_simple_case(c, c.lower()) for c in as_text(s))
