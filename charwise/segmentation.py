"""
Word Segmentation Engine.

Splits a character sequence into words. A word boundary is any Unicode
whitespace, an en dash, an em dash, or a forward slash. Grammar marks
(``!?,.'"[]()*~{}:;-<>+=|%&@#$^\\```) are dropped when they sit on a
boundary and kept when they sit inside a word:

    words('"Here\\'s a sentence," said the narrator/programmer.')
    # ["Here's", 'a', 'sentence', 'said', 'the', 'narrator', 'programmer']

A grammar mark sits on a boundary when any of these hold:
- the scan is currently preceded by a boundary (start of text counts)
- the run of consecutive grammar marks starting at it reaches the end
- some mark in that run is immediately followed by a boundary character

So the apostrophe in "it's" is kept, the trailing "," and "." are not, and
"Status::(happy)" becomes ["Status::(happy"].

Characters are code points; combining sequences are not merged.

Usage:
    from charwise.segmentation import words, word_count, word_set

    words("it's grammar!")                      # ["it's", 'grammar']
    word_count("hi,,    my name is thing")      # 5
    word_set("REALLY, Really, really...", True) # ['really']
"""

import logging
from typing import Iterator, List, Sequence, Tuple

from .boundary import is_boundary, is_grammar
from .characters import Text, as_text
from .frequency import unique
from .occurrence import OccurrenceMap, by_occurrence

logger = logging.getLogger(__name__)


# =============================================================================
# SCAN
# =============================================================================

def _grammar_on_boundary(cc: Sequence[str], i: int, preceded_by_boundary: bool) -> bool:
    """True if cc[i] is a grammar mark that should be absorbed."""
    while is_grammar(cc[i]):
        if preceded_by_boundary:
            return True
        nxt = i + 1
        if nxt == len(cc) or is_boundary(cc[nxt]):
            return True
        i = nxt
    return False


def _scan(cc: Sequence[str]) -> Iterator[Tuple[str, bool]]:
    """
    Walk cc and yield every character that belongs to a word.

    Yields:
        (character, opens_token) pairs; opens_token is True for the first
        character of each word
    """
    preceded_by_boundary = True
    for i, c in enumerate(cc):
        if _grammar_on_boundary(cc, i, preceded_by_boundary):
            continue
        if is_boundary(c):
            preceded_by_boundary = True
            continue
        yield c, preceded_by_boundary
        preceded_by_boundary = False


# =============================================================================
# PUBLIC OPERATIONS
# =============================================================================

def words(s: Text) -> List[str]:
    """
    Words of s in order of appearance.

    Returns:
        List of words; empty for empty or whitespace-only input
    """
    text = as_text(s)
    tokens: List[List[str]] = []
    for c, opens in _scan(text):
        if opens:
            tokens.append([c])
        else:
            tokens[-1].append(c)

    logger.debug("Segmented %d characters into %d words", len(text), len(tokens))
    return ["".join(t) for t in tokens]


def word_count(s: Text) -> int:
    """
    Number of words in s.

    Runs the same scan as words() but only counts token openings, so
    word_count(s) == len(words(s)) for every input.
    """
    return sum(1 for _, opens in _scan(as_text(s)) if opens)


def word_set(s: Text, fold: bool = False) -> List[str]:
    """
    Distinct words of s in order of first appearance.

    With fold=True, words differing only in case collapse into a single
    lowercase entry:

        word_set("hello, Hello, hELlo there!", fold=True)   # ['hello', 'there']
    """
    return unique(words(s), fold)


def words_by_occurrence(s: Text, fold: bool = False) -> OccurrenceMap:
    """
    Count every word of s.

    The counts sum to word_count(s). The result is unordered; see
    occurrence.rank().
    """
    return by_occurrence(words(s), fold)
