"""
Split a string before each separator.

This is the mirror image of splitting *after* a separator: the separator
stays attached to the start of the following piece.

    split_before("a,b,c", ",")       # ['a', ',b', ',c']
    split_before("a,b,c", ",", 2)    # ['a', ',b,c']
    split_before("abc", "")          # ['a', 'b', 'c']
    split_before("abcd", "", 2)      # ['a', 'bcd']
"""

from typing import List

from .characters import Text, as_text


def split_before(s: Text, sep: Text, limit: int = -1) -> List[str]:
    """
    Slice s into pieces, each new piece beginning with sep.

    Args:
        s: Text to split
        sep: Separator; "" splits into individual characters
        limit: Maximum number of pieces. 0 returns an empty list, a
            negative value means no limit. When the limit is reached the
            last piece holds the unsplit remainder.

    Returns:
        List of pieces; joining them gives back s
    """
    text = as_text(s)
    separator = as_text(sep)

    if limit == 0:
        return []
    if separator == "":
        return _split_chars(text, limit)

    pieces = []
    start = 0
    search_from = 0
    while limit < 0 or len(pieces) < limit - 1:
        pos = text.find(separator, search_from)
        if pos == -1:
            break
        # a leading separator leaves an empty first piece
        pieces.append(text[start:pos])
        start = pos
        search_from = pos + len(separator)

    pieces.append(text[start:])
    return pieces


def _split_chars(text: str, limit: int) -> List[str]:
    if not text:
        return []
    if limit < 0 or limit >= len(text):
        return list(text)
    head = list(text[:limit - 1])
    return head + [text[limit - 1:]]
