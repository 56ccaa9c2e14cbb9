"""
Boundary Classifier.

Tags a single character as one of three classes the segmentation engine
works with:

- BOUNDARY: Unicode whitespace, en dash, em dash, forward slash
  (U+001C..U+001F are not whitespace here)
- GRAMMAR: a fixed set of punctuation marks (see constants.GRAMMAR_MARKS)
- ORDINARY: everything else

The two marked classes are literal membership tests; the only Unicode
property consulted is whether the character is blank once trimmed.
"""

from enum import Enum

from .constants import BOUNDARY_SYMBOLS, GRAMMAR_MARKS, NON_SPACE_SEPARATORS


class CharClass(Enum):
    """Segmentation class of a character."""
    BOUNDARY = "boundary"
    GRAMMAR = "grammar"
    ORDINARY = "ordinary"


def is_boundary(c: str) -> bool:
    """True if c separates words."""
    if c in BOUNDARY_SYMBOLS:
        return True
    if c in NON_SPACE_SEPARATORS:
        return False
    return c.strip() == ""


def is_grammar(c: str) -> bool:
    """True if c is a grammar mark."""
    return c in GRAMMAR_MARKS


def classify(c: str) -> CharClass:
    if is_grammar(c):
        return CharClass.GRAMMAR
    if is_boundary(c):
        return CharClass.BOUNDARY
    return CharClass.ORDINARY
