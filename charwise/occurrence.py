"""
Occurrence Ranking.

Aggregates tokens (characters or words) into (key, count) records. The
result is an OccurrenceMap: an ordinary list that is deliberately left
unordered. Ranking is an explicit step the caller takes, either with
``rank()`` or by handing ``compare_occurrences`` to ``sorted``:

    from functools import cmp_to_key

    occ = by_occurrence(["a", "b", "a"])
    ranked = sorted(occ, key=cmp_to_key(compare_occurrences))
    # [Occurrence(key='a', count=2), Occurrence(key='b', count=1)]

Entries with equal counts have no defined order. Callers that need a
deterministic order must add their own secondary key, e.g.
``sorted(occ, key=lambda o: (-o.count, o.key))``.
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Dict, Iterable, List

from .characters import to_lower


@dataclass(frozen=True)
class Occurrence:
    """A key and how many times it occurred in one input."""
    key: str
    count: int


class OccurrenceMap(list):
    """Unordered collection of Occurrence records."""

    def total(self) -> int:
        """Sum of all counts."""
        return sum(o.count for o in self)

    def as_dict(self) -> Dict[str, int]:
        return {o.key: o.count for o in self}


def compare_occurrences(a: Occurrence, b: Occurrence) -> int:
    """
    Comparator ordering occurrences from most to least frequent.

    Returns:
        Negative if a is more frequent than b, positive if less, 0 on a tie
    """
    if a.count > b.count:
        return -1
    if a.count < b.count:
        return 1
    return 0


def by_occurrence(tokens: Iterable[str], fold: bool = False) -> OccurrenceMap:
    """
    Count how often each token occurs.

    Args:
        tokens: Characters or words
        fold: Lowercase every token, one character at a time, before counting

    Returns:
        Unordered OccurrenceMap with one entry per distinct key
    """
    counts: Dict[str, int] = {}
    for token in tokens:
        if fold:
            token = to_lower(token)
        counts[token] = counts.get(token, 0) + 1
    return OccurrenceMap(Occurrence(key=k, count=n) for k, n in counts.items())


def rank(occurrences: Iterable[Occurrence]) -> List[Occurrence]:
    """Return a new list sorted from most to least frequent."""
    return sorted(occurrences, key=cmp_to_key(compare_occurrences))
