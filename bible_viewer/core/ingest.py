"""Parsing and validation of the corpus TSV and the lexicon Markdown table."""

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Pattern, Tuple, Union

import structlog

from .alphabet import BARE_SHIN, HEBREW_LETTERS, SHIN, SIN
from .codec import MAX_TAG
from .corpus import BSB_BOOK_NAMES_TO_HEBREW, Book, Corpus
from .errors import IngestionError, InvalidCharacter
from .lexicon import WORD_TYPE_INDEXES, Lexicon, LexiconEntry
from .normalizer import TextNormalizer, default_normalizer

logger = structlog.get_logger(__name__)

CORPUS_HEADER = "bookName"

# | אָב | אב | Noun | [ 1 ](https://biblehub.com/hebrew/1.htm) |
LEXICON_ROW_REGEX = re.compile(
    r"^\s*\|\s*(.+?)\s*\|\s*.+?\s*\|\s*(.+?)\s*\|\s*\[\s*(\d+)\s*]\(https://biblehub\.com/hebrew/\d+\.htm\)\s*\|$"
)

# Known BSB words with a shin that has neither a shin dot nor a sin dot.
BARE_SIN_WORDS = ("שֵיבָ֖ה",)
BARE_SHIN_WORDS = ("אִ֥יש", "חמש", "שָמַ֖יִם")
ISSACHAR = "י" + SIN + BARE_SHIN + "כר"
_NOT_LETTER_OR_BARE_SHIN = re.compile(f"[^{BARE_SHIN}{HEBREW_LETTERS}]")


class CorpusParser:
    """Groups corpus rows into books, chapters and verses."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None, book_filter: Optional[str] = None) -> None:
        """
        Initialize the parser.

        Args:
            normalizer: Normalizer applied to every word
            book_filter: Only keep books whose Hebrew name matches this regex
        """
        self.normalizer = normalizer or default_normalizer
        self.book_filter: Optional[Pattern] = re.compile(book_filter) if book_filter else None

    def repair_bare_shin(self, word: str) -> str:
        """
        Give every undotted shin of ``word`` its dot.

        Raises:
            ValueError: if the word is not one of the known exceptions
        """
        fixed = self.normalizer.fix_shin_sin(word)
        if BARE_SHIN not in fixed:
            return fixed
        if ISSACHAR in _NOT_LETTER_OR_BARE_SHIN.sub("", fixed) or word in BARE_SIN_WORDS:
            return fixed.replace(BARE_SHIN, SIN)
        if word in BARE_SHIN_WORDS:
            return fixed.replace(BARE_SHIN, SHIN)
        raise ValueError(f"Found unnormalized ש (without a Sin/Shin point) in word {word!r}")

    def parse_word(self, word: str) -> str:
        try:
            normalized = self.normalizer.normalize(self.repair_bare_shin(word))
        except InvalidCharacter as e:
            raise ValueError(str(e)) from e
        if not normalized:
            raise ValueError("Missing Hebrew word")
        return normalized

    @staticmethod
    def parse_tag(strong: str) -> int:
        strong = strong.strip()
        if not strong:
            return 0
        try:
            tag = int(strong)
        except ValueError:
            raise ValueError(f"Invalid Strong number {strong!r}") from None
        if tag < 0 or tag > MAX_TAG:
            raise ValueError(f"Strong number {tag} is out of range")
        return tag

    @staticmethod
    def parse_sequence(value: str, kind: str) -> int:
        try:
            sequence = int(value)
        except ValueError:
            raise ValueError(f"Invalid {kind} sequence number {value!r}") from None
        if sequence < 1:
            raise ValueError(f"Invalid {kind} sequence number {sequence}, numbering starts at 1")
        return sequence

    def parse(self, lines: Iterable[str]) -> Corpus:
        """
        Parse corpus TSV lines.

        Each row is ``bookName<TAB>chapter<TAB>verse<TAB>word<TAB>strong``.
        Chapters and verses must start at 1 and grow by exactly 1.

        Args:
            lines: Lines of the TSV file, with or without line endings

        Returns:
            The parsed corpus

        Raises:
            IngestionError: on the first malformed row
        """
        books: Dict[str, List[List[List[Tuple[str, int]]]]] = {}
        current_book: Optional[str] = None
        chapters: List[List[List[Tuple[str, int]]]] = []
        chapter_number = 0
        verse_number = 0

        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r\n")
            if not line.strip():
                continue
            fields = line.split("\t")
            if fields[0] == CORPUS_HEADER:
                continue
            try:
                if len(fields) < 4:
                    raise ValueError(f"Expected 5 tab-separated fields, got {len(fields)}")
                book_name, chapter, verse, word = fields[:4]
                strong = fields[4] if len(fields) > 4 else ""

                hebrew_book_name = BSB_BOOK_NAMES_TO_HEBREW.get(book_name)
                if not hebrew_book_name:
                    raise ValueError(f"Unknown BSB book name {book_name!r}")
                if hebrew_book_name != current_book:
                    if hebrew_book_name in books:
                        raise ValueError(f"Book {book_name!r} appears twice")
                    current_book = hebrew_book_name
                    chapters = []
                    books[current_book] = chapters
                    chapter_number = 0
                    verse_number = 0

                chapter_sequence = self.parse_sequence(chapter, "chapter")
                if chapter_sequence != chapter_number:
                    if chapter_sequence != chapter_number + 1:
                        raise ValueError(
                            f"Unexpected chapter sequence number {chapter_sequence}, expected {chapter_number + 1}"
                        )
                    chapter_number = chapter_sequence
                    verse_number = 0
                    chapters.append([])

                verse_sequence = self.parse_sequence(verse, "verse")
                if verse_sequence != verse_number:
                    if verse_sequence != verse_number + 1:
                        raise ValueError(
                            f"Unexpected verse sequence number {verse_sequence}, expected {verse_number + 1}"
                        )
                    verse_number = verse_sequence
                    chapters[-1].append([])

                chapters[-1][-1].append((self.parse_word(word), self.parse_tag(strong)))
            except ValueError as e:
                raise IngestionError(str(e), line_number=line_number, line=line) from e

        corpus = Corpus(
            books=tuple(
                Book(name=name, chapters=tuple(tuple(tuple(verse) for verse in chapter) for chapter in book_chapters))
                for name, book_chapters in books.items()
                if not self.book_filter or self.book_filter.search(name)
            )
        )
        logger.info("Corpus parsed", **corpus.get_stats())
        return corpus


class LexiconParser:
    """Reads Strong's entries from a Markdown table."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self.normalizer = normalizer or default_normalizer

    def parse(self, lines: Iterable[str]) -> Lexicon:
        """
        Parse lexicon Markdown lines; rows that are not entries are skipped.

        Raises:
            IngestionError: on an unknown word type or an invalid word
        """
        entries: List[LexiconEntry] = []
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r\n")
            parsed = LEXICON_ROW_REGEX.match(line)
            if not parsed:
                continue
            word, word_type, strong = parsed.groups()
            if word_type not in WORD_TYPE_INDEXES:
                raise IngestionError(f"Unknown word type {word_type!r}", line_number=line_number, line=line)
            tag = int(strong)
            if tag > MAX_TAG:
                raise IngestionError(f"Strong number {tag} is out of range", line_number=line_number, line=line)
            try:
                normalized = self.normalizer.normalize(word)
            except InvalidCharacter as e:
                raise IngestionError(str(e), line_number=line_number, line=line) from e
            if not normalized:
                raise IngestionError("Missing Hebrew word", line_number=line_number, line=line)
            entries.append(
                LexiconEntry(
                    tag=tag,
                    word=normalized,
                    category=word_type,
                    searchable=self.normalizer.make_searchable(normalized),
                )
            )

        lexicon = Lexicon(entries)
        logger.info("Lexicon parsed", **lexicon.get_stats())
        return lexicon


def parse_corpus(lines: Iterable[str], book_filter: Optional[str] = None) -> Corpus:
    return CorpusParser(book_filter=book_filter).parse(lines)


def parse_lexicon(lines: Iterable[str]) -> Lexicon:
    return LexiconParser().parse(lines)


def load_corpus_file(path: Union[str, Path], book_filter: Optional[str] = None) -> Corpus:
    """Parse a corpus TSV file."""
    logger.info("Loading corpus", path=str(path))
    with open(path, "r", encoding="utf-8") as f:
        return parse_corpus(f, book_filter=book_filter)


def load_lexicon_file(path: Union[str, Path]) -> Lexicon:
    """Parse a lexicon Markdown file."""
    logger.info("Loading lexicon", path=str(path))
    with open(path, "r", encoding="utf-8") as f:
        return parse_lexicon(f)
