"""Map match offsets in a search string back to word indexes."""

from typing import Iterable, Set, Tuple

from .alphabet import SEPARATOR
from .errors import OffsetOutOfRange


def offset_to_word_index(search_string: str, offset: int) -> int:
    """
    Return the index of the word that contains ``offset``.

    The search string looks like `` w1<t1> w2<t2> ... ``: the separators
    before ``offset`` are counted, minus the leading one.

    Raises:
        OffsetOutOfRange: if ``offset`` is not inside ``search_string``
    """
    if offset < 0 or offset >= len(search_string):
        raise OffsetOutOfRange(f"offset {offset} is out of range (0..{len(search_string) - 1})")
    return max(0, search_string.count(SEPARATOR, 0, offset) - 1)


def covered_word_range(search_string: str, start: int, end: int) -> Tuple[int, int]:
    """
    Return the inclusive (first, last) word range covered by a match.

    A match that starts (or ends) with a separator is trimmed by that
    separator first, so `` מים `` covers only the word itself.

    Args:
        search_string: The string the match was found in
        start: Match start offset
        end: Match end offset (exclusive)
    """
    if start < 0 or end > len(search_string) or end < start:
        raise OffsetOutOfRange(f"match [{start}, {end}) is out of range")
    if end > start and search_string[start] == SEPARATOR:
        start += 1
    if end > start and search_string[end - 1] == SEPARATOR:
        end -= 1
    # a match made only of the trailing separator
    last_offset = len(search_string) - 1
    start = min(start, last_offset)
    end = min(end, last_offset)
    return (
        offset_to_word_index(search_string, start),
        offset_to_word_index(search_string, end),
    )


def covered_word_indexes(search_string: str, spans: Iterable[Tuple[int, int]]) -> Set[int]:
    """Collect every word index covered by non-empty ``spans``."""
    covered: Set[int] = set()
    for start, end in spans:
        if end <= start:
            continue
        first, last = covered_word_range(search_string, start, end)
        covered.update(range(first, last + 1))
    return covered


class MatchLocator:
    """Locator bound to a single search string."""

    def __init__(self, search_string: str) -> None:
        self.search_string = search_string

    def offset_to_word_index(self, offset: int) -> int:
        return offset_to_word_index(self.search_string, offset)

    def covered_word_range(self, start: int, end: int) -> Tuple[int, int]:
        return covered_word_range(self.search_string, start, end)

    def covered_word_indexes(self, spans: Iterable[Tuple[int, int]]) -> Set[int]:
        return covered_word_indexes(self.search_string, spans)
