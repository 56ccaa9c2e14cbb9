# charwise/constants.py
"""
Charwise Constants

This module defines the fixed tables the segmentation engine is built on:

CLASSIFICATION TABLES
- GRAMMAR_MARKS: punctuation absorbed at word edges, kept inside words
- BOUNDARY_SYMBOLS: non-whitespace characters that separate words

LOCATOR
- NOT_FOUND: sentinel returned when an occurrence does not exist

DECODING
- DEFAULT_ENCODING: encoding applied to bytes input

Both tables are literal membership sets, not Unicode property lookups.
"""


# =============================================================================
# CLASSIFICATION TABLES
# =============================================================================

GRAMMAR_MARKS = frozenset("!?,.'\"[]()*~{}:;-<>+=|%&@#$^\\`")

# en dash, em dash, forward slash (whitespace is handled separately)
BOUNDARY_SYMBOLS = frozenset("–—/")

# file, group, record and unit separators: str.strip() removes them but they
# are not Unicode White_Space
NON_SPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")

assert not (GRAMMAR_MARKS & BOUNDARY_SYMBOLS), "Grammar marks and boundary symbols must be disjoint"


# =============================================================================
# LOCATOR
# =============================================================================

NOT_FOUND = -1


# =============================================================================
# DECODING
# =============================================================================

DEFAULT_ENCODING = "utf-8"
