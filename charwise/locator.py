"""
Nth-Occurrence Locator.

Finds where a substring occurs, in character (code point) positions.

Matches are tested at every character offset, so overlapping occurrences
all count: "aa" occurs in "aaa" at 0 and at 1. The comparison is done on
code-point arrays with a sliding window, which checks every candidate
offset in one vectorized pass.

Empty substring convention (same as str.count / str.find): "" occurs at
every gap between characters and at both ends, i.e. at positions
0..length(s), for length(s) + 1 sites in total.

    nth("hi", "", 1)    # 0
    nth("hi", "", 3)    # 2
    nth("hi", "", -1)   # 2
    nth("hi", "", 4)    # -1

Absence is reported as -1, never as an exception.
"""

from typing import List

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .characters import Text, as_text, code_points
from .constants import NOT_FOUND


def find_all(s: Text, sub: Text) -> List[int]:
    """
    Character positions of every occurrence of sub in s, ascending.

    Args:
        s: Text to search
        sub: Substring to look for; "" matches at every position 0..length(s)

    Returns:
        List of start indices (overlapping matches included)
    """
    text = as_text(s)
    pattern = as_text(sub)

    if pattern == "":
        return list(range(len(text) + 1))
    if len(pattern) > len(text):
        return []

    windows = sliding_window_view(code_points(text), len(pattern))
    hits = np.flatnonzero((windows == code_points(pattern)).all(axis=1))
    return [int(i) for i in hits]


def count_occurrences(s: Text, sub: Text) -> int:
    """Number of (possibly overlapping) occurrences of sub in s."""
    return len(find_all(s, sub))


def nth(s: Text, sub: Text, n: int) -> int:
    """
    Character index of the nth occurrence of sub in s.

    Args:
        s: Text to search
        sub: Substring to look for
        n: Occurrence number; 1 is the first, -1 the last, -2 the one
           before it, and so on

    Returns:
        Start index of the occurrence, or -1 if it does not exist or n is 0

    Examples:
        nth("hi hi hi hi hi", "hi", 5)     # 12
        nth("世界世界世界世界", "世", -2)    # 4
        nth("hi hi hi    hi", "hi", 5)     # -1
    """
    if n == 0:
        return NOT_FOUND

    text = as_text(s)
    pattern = as_text(sub)
    if len(pattern) > len(text):
        return NOT_FOUND

    if pattern == "":
        sites = len(text) + 1
        if abs(n) > sites:
            return NOT_FOUND
        return n - 1 if n > 0 else sites + n

    positions = find_all(text, pattern)
    if abs(n) > len(positions):
        return NOT_FOUND
    return positions[n - 1] if n > 0 else positions[n]
