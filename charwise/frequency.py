"""
Character Set & Frequency.

Deduplication and counting over the characters of a string, with optional
case folding. Folded results always keep the lowercase form.
"""

from typing import Iterable, List

from .characters import Text, as_text, to_lower
from .occurrence import OccurrenceMap, by_occurrence


def unique(items: Iterable[str], fold: bool = False) -> List[str]:
    """
    Remove duplicates while keeping first-appearance order.

    Args:
        items: Characters or words
        fold: Lowercase items (one character at a time) before comparing;
            the lowercase form is kept

    Returns:
        List of distinct items
    """
    seen = set()
    result = []
    for item in items:
        if fold:
            item = to_lower(item)
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def char_set(s: Text, fold: bool = False) -> List[str]:
    """
    Distinct characters of s in order of first appearance.

    Example:
        char_set("Hi, Hello", fold=True)
        # ['h', 'i', ',', ' ', 'e', 'l', 'o']
    """
    return unique(as_text(s), fold)


def chars_by_occurrence(s: Text, fold: bool = False) -> OccurrenceMap:
    """
    Count every character of s.

    No character is filtered out, so the counts always sum to length(s).
    The result is unordered; see occurrence.rank().
    """
    return by_occurrence(as_text(s), fold)
