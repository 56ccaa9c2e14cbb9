"""
Errors raised by charwise.

Only index validation can fail. Everything else either succeeds or, like
the locator, reports absence through a sentinel value.
"""


class CharwiseError(Exception):
    """Base class for all charwise errors."""


class OutOfBoundsError(CharwiseError, IndexError):
    """
    A character index fell outside the string.

    Attributes:
        index: The offending index, as supplied by the caller
        length: Character length of the string it was applied to
    """

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of bounds for length {length}")
