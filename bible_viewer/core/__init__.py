"""Core search functionality: codec, normalization, indexing and query compilation."""

from .alphabet import HEBREW_ALPHABET, Alphabet
from .codec import WordCodec
from .engine import SearchEngine
from .errors import (
    BibleViewerError,
    CodecError,
    IngestionError,
    InvalidCharacter,
    LocatorError,
    QueryError,
)
from .index import SearchIndexBuilder, Verse, VerseIndex
from .lexicon import Lexicon, LexiconEntry
from .locator import MatchLocator
from .normalizer import TextNormalizer
from .query import CompiledQuery, QueryCompiler

__all__ = [
    "HEBREW_ALPHABET",
    "Alphabet",
    "WordCodec",
    "SearchEngine",
    "BibleViewerError",
    "CodecError",
    "IngestionError",
    "InvalidCharacter",
    "LocatorError",
    "QueryError",
    "SearchIndexBuilder",
    "Verse",
    "VerseIndex",
    "Lexicon",
    "LexiconEntry",
    "MatchLocator",
    "TextNormalizer",
    "CompiledQuery",
    "QueryCompiler",
]
