"""
Padding and capitalisation helpers.

Lengths are always measured in characters, so "世界" padded to 5 gets three
pad characters, not one.
"""

import logging
from typing import List, Sequence

from .characters import Text, as_text, to_upper

logger = logging.getLogger(__name__)


def _check_pad_char(pad_char: str) -> None:
    if not isinstance(pad_char, str) or len(pad_char) != 1:
        raise TypeError(f"pad_char must be a single character, got {pad_char!r}")


def capitalise(s: Text) -> str:
    """Return s with its first character converted to upper case if possible."""
    text = as_text(s)
    if not text:
        return text
    return to_upper(text[0]) + text[1:]


def pad_left(s: Text, pad_char: str, target_len: int) -> str:
    """
    Prefix s with pad_char until it is target_len characters long.

    Never truncates: if s is already at or beyond target_len it is returned
    unchanged.

    Example:
        pad_left("hi", "世", 5)   # '世世世hi'
    """
    _check_pad_char(pad_char)
    text = as_text(s)
    diff = target_len - len(text)
    if diff <= 0:
        return text
    return pad_char * diff + text


def pad_right(s: Text, pad_char: str, target_len: int) -> str:
    """Suffix s with pad_char until it is target_len characters long."""
    _check_pad_char(pad_char)
    text = as_text(s)
    diff = target_len - len(text)
    if diff <= 0:
        return text
    return text + pad_char * diff


def pad_to_longest(strings: Sequence[Text], pad_char: str) -> List[str]:
    """
    Right-pad every string to the character length of the longest one.

    Args:
        strings: Input strings (not modified)
        pad_char: Single padding character

    Returns:
        New list of padded strings, in input order

    Example:
        pad_to_longest(["hi", "世界", "💩💩💩"], " ")
        # ['hi ', '世界 ', '💩💩💩']
    """
    _check_pad_char(pad_char)
    texts = [as_text(s) for s in strings]
    if not texts:
        return []

    longest = max(map(len, texts))
    logger.debug("Padding %d strings to %d characters", len(texts), longest)

    return [pad_right(t, pad_char, longest) for t in texts]
