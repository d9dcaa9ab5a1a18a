"""Searchable verse index built from decoded units."""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import structlog

from .alphabet import SEPARATOR
from .corpus import Corpus, Unit
from .normalizer import TextNormalizer, default_normalizer
from .numbering import number_to_hebrew

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Verse:
    """A verse with everything needed to search and display it."""

    index: int
    book: str
    chapter_index: int
    verse_index: int
    words: Tuple[str, ...]
    tags: Tuple[int, ...]
    search_string: str

    @property
    def chapter(self) -> str:
        return number_to_hebrew(self.chapter_index)

    @property
    def verse(self) -> str:
        return number_to_hebrew(self.verse_index)

    @property
    def location(self) -> str:
        return f"{self.book} {self.chapter}:{self.verse}"

    @property
    def text(self) -> str:
        return SEPARATOR.join(self.words)


class SearchIndexBuilder:
    """Builds tag-annotated, vocalization-free search strings."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self.normalizer = normalizer or default_normalizer

    def build_search_string(self, unit: Iterable[Tuple[str, int]]) -> str:
        """
        Build the search string of a unit.

        Every word contributes its searchable form followed by ``<tag>``;
        words are joined by single spaces, with a leading and a trailing
        space, so there is always one more space than there are words.

        Args:
            unit: The unit's (word, tag) pairs

        Returns:
            The search string, e.g. `` בראשית<7225> ברא<1254> ``
        """
        parts = [f"{self.normalizer.make_searchable(word)}<{tag}>" for word, tag in unit]
        if not parts:
            return SEPARATOR
        return SEPARATOR + SEPARATOR.join(parts) + SEPARATOR

    def build_verse(self, index: int, book: str, chapter_index: int, verse_index: int, unit: Unit) -> Verse:
        words = tuple(self.normalizer.normalize(word) for word, _ in unit)
        tags = tuple(tag for _, tag in unit)
        return Verse(
            index=index,
            book=book,
            chapter_index=chapter_index,
            verse_index=verse_index,
            words=words,
            tags=tags,
            search_string=self.build_search_string(unit),
        )

    def build_verse_index(self, corpus: Corpus) -> "VerseIndex":
        """Build the verse index of a whole corpus, in book/chapter/verse order."""
        verses: List[Verse] = []
        for book in corpus:
            for chapter_index, chapter in enumerate(book.chapters):
                for verse_index, unit in enumerate(chapter):
                    verses.append(self.build_verse(len(verses), book.name, chapter_index, verse_index, unit))
        logger.info("Verse index built", total_verses=len(verses), total_books=len(corpus))
        return VerseIndex(verses)


class VerseIndex:
    """Read-only sequence of verses with location lookup."""

    def __init__(self, verses: Iterable[Verse]) -> None:
        self._verses: Tuple[Verse, ...] = tuple(verses)
        self._by_location: Dict[Tuple[str, int, int], Verse] = {
            (verse.book, verse.chapter_index, verse.verse_index): verse for verse in self._verses
        }

    def __len__(self) -> int:
        return len(self._verses)

    def __iter__(self) -> Iterator[Verse]:
        return iter(self._verses)

    def __getitem__(self, index: int) -> Verse:
        return self._verses[index]

    def get_verse(self, book: str, chapter_index: int, verse_index: int) -> Optional[Verse]:
        return self._by_location.get((book, chapter_index, verse_index))

    def get_stats(self) -> Dict[str, int]:
        return {
            "total_verses": len(self._verses),
            "total_words": sum(len(verse.words) for verse in self._verses),
        }


default_builder = SearchIndexBuilder()


def build_search_string(unit: Iterable[Tuple[str, int]]) -> str:
    return default_builder.build_search_string(unit)
