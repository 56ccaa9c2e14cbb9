"""
Charwise - Unicode-correct character and word utilities

Length, indexing, slicing, word segmentation and occurrence counting that
work on characters (code points) rather than bytes.

================================================================================
ARCHITECTURE
================================================================================

Data flows one way, and every operation is a pure function:

    input (str | bytes) → characters → (boundary classes →) words
                                     ↘ character / word occurrence counts

- characters: decoding, length, indexed access, wrapping slices, reverse
- boundary: BOUNDARY / GRAMMAR / ORDINARY classification of one character
- segmentation: words, word_count, word_set, words_by_occurrence
- frequency: char_set, chars_by_occurrence
- occurrence: Occurrence records, unordered OccurrenceMap, ranking comparator
- locator: nth occurrence of a substring (overlapping, empty-substring aware)
- padding, splitting: capitalise, pad_*, split_before

Usage:
    import charwise

    charwise.words("it's grammar!")           # ["it's", 'grammar']
    charwise.slice_chars("Hello", -1, 2)      # 'oHe'
    charwise.nth("hi hi hi hi hi", "hi", 5)   # 12
    charwise.rank(charwise.words_by_occurrence("a b a"))
"""

import logging

__version__ = "0.1.0"

from .errors import CharwiseError, OutOfBoundsError
from .characters import as_text, code_points, length, chars, char_at, slice_chars, reverse, to_upper, to_lower
from .boundary import CharClass, classify, is_boundary, is_grammar
from .occurrence import Occurrence, OccurrenceMap, by_occurrence, compare_occurrences, rank
from .frequency import unique, char_set, chars_by_occurrence
from .segmentation import words, word_count, word_set, words_by_occurrence
from .locator import nth, find_all, count_occurrences
from .padding import capitalise, pad_left, pad_right, pad_to_longest
from .splitting import split_before

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "CharwiseError",
    "OutOfBoundsError",
    # Character model
    "as_text",
    "code_points",
    "length",
    "chars",
    "char_at",
    "slice_chars",
    "reverse",
    "to_upper",
    "to_lower",
    # Classification
    "CharClass",
    "classify",
    "is_boundary",
    "is_grammar",
    # Occurrences
    "Occurrence",
    "OccurrenceMap",
    "by_occurrence",
    "compare_occurrences",
    "rank",
    # Sets & frequency
    "unique",
    "char_set",
    "chars_by_occurrence",
    # Words
    "words",
    "word_count",
    "word_set",
    "words_by_occurrence",
    # Locator
    "nth",
    "find_all",
    "count_occurrences",
    # Formatting
    "capitalise",
    "pad_left",
    "pad_right",
    "pad_to_longest",
    "split_before",
]
