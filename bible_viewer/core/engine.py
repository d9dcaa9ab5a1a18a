"""Main search engine implementation."""

import re
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog

from ..models.response import (
    CompileResponse,
    LexiconBlockResponse,
    LexiconEntryResponse,
    SearchResponse,
    VerseResult,
)
from .bundle import read_bundle
from .corpus import Corpus
from .errors import InvalidPattern, QueryError
from .index import SearchIndexBuilder, Verse, VerseIndex
from .ingest import load_corpus_file, load_lexicon_file
from .lexicon import Lexicon, LexiconEntry, compile_anchored
from .locator import covered_word_indexes
from .normalizer import TextNormalizer
from .query import CompiledQuery, QueryCompiler

logger = structlog.get_logger(__name__)

DEFAULT_MAX_RESULTS = 10000


def entry_to_response(entry: LexiconEntry) -> LexiconEntryResponse:
    return LexiconEntryResponse(
        tag=entry.tag,
        word=entry.word,
        searchable=entry.searchable,
        category=entry.category,
        category_hebrew=entry.category_hebrew,
        biblehub_url=None if entry.is_sentinel else entry.biblehub_url,
    )


def blocks_to_response(compiled: CompiledQuery) -> List[LexiconBlockResponse]:
    return [
        LexiconBlockResponse(
            block=block.block,
            replacement=block.replacement,
            tags=[entry.tag for entry in block.entries],
        )
        for block in compiled.lexicon_blocks
    ]


class SearchEngine:
    """Runs extended queries over every verse of a corpus."""

    def __init__(
        self,
        verse_index: VerseIndex,
        lexicon: Lexicon,
        normalizer: Optional[TextNormalizer] = None,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        """
        Initialize the search engine.

        Args:
            verse_index: Verses with their search strings
            lexicon: Strong's number table for <...> blocks and lookups
            normalizer: Normalizer shared with the query compiler
            max_results: Default cap on returned verses
        """
        self.verse_index = verse_index
        self.lexicon = lexicon
        self.compiler = QueryCompiler(lexicon, normalizer)
        self.max_results = max_results

        # Performance tracking
        self._stats = {
            "total_queries": 0,
            "failed_queries": 0,
            "matched_queries": 0,
            "no_matches": 0,
            "truncated_queries": 0,
            "total_execution_time": 0.0,
        }

    @classmethod
    def from_corpus(cls, corpus: Corpus, lexicon: Lexicon, **kwargs: Any) -> "SearchEngine":
        builder = SearchIndexBuilder(kwargs.get("normalizer"))
        return cls(builder.build_verse_index(corpus), lexicon, **kwargs)

    @classmethod
    def from_bundle(cls, path: Union[str, Path], **kwargs: Any) -> "SearchEngine":
        """Load an engine from a JSON bundle."""
        corpus, lexicon = read_bundle(path)
        return cls.from_corpus(corpus, lexicon, **kwargs)

    @classmethod
    def from_sources(
        cls,
        corpus_file: Union[str, Path],
        lexicon_file: Union[str, Path],
        book_filter: Optional[str] = None,
        **kwargs: Any,
    ) -> "SearchEngine":
        """Load an engine straight from the corpus TSV and the lexicon Markdown."""
        corpus = load_corpus_file(corpus_file, book_filter=book_filter)
        lexicon = load_lexicon_file(lexicon_file)
        return cls.from_corpus(corpus, lexicon, **kwargs)

    def compile(self, query: str, verbs_only: bool = False) -> CompiledQuery:
        """
        Compile a query without running it.

        Raises:
            QueryError: if the query cannot be compiled
        """
        return self.compiler.compile(query, verbs_only=verbs_only)

    def explain(self, query: str, verbs_only: bool = False) -> CompileResponse:
        compiled = self.compile(query, verbs_only=verbs_only)
        return CompileResponse(
            query=query,
            pattern=compiled.source,
            verbs_only=compiled.verbs_only,
            lexicon_blocks=blocks_to_response(compiled),
        )

    def search(
        self,
        query: str,
        max_results: Optional[int] = None,
        verbs_only: bool = False,
    ) -> SearchResponse:
        """
        Search every verse for an extended query.

        Args:
            query: Extended search query
            max_results: Maximum number of verses to return
            verbs_only: Restrict every <...> block to verbs

        Returns:
            SearchResponse with matching verses in canonical order

        Raises:
            QueryError: if the query cannot be compiled
        """
        start_time = time.time()
        if max_results is None:
            max_results = self.max_results

        # Update statistics
        self._stats["total_queries"] += 1

        try:
            compiled = self.compile(query, verbs_only=verbs_only)
        except QueryError as e:
            self._stats["failed_queries"] += 1
            logger.info("Query rejected", query=query, reason=e.reason)
            raise

        results: List[VerseResult] = []
        truncated = False
        for verse in self.verse_index:
            result = self._match_verse(compiled, verse)
            if result is None:
                continue
            if len(results) >= max_results:
                truncated = True
                break
            results.append(result)

        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time
        if results:
            self._stats["matched_queries"] += 1
        else:
            self._stats["no_matches"] += 1
        if truncated:
            self._stats["truncated_queries"] += 1

        logger.info(
            "Search completed",
            query=query,
            total_results=len(results),
            truncated=truncated,
            execution_time_ms=round(execution_time, 2),
        )
        return SearchResponse(
            query=query,
            pattern=compiled.source,
            verbs_only=compiled.verbs_only,
            lexicon_blocks=blocks_to_response(compiled),
            execution_time_ms=execution_time,
            total_results=len(results),
            truncated=truncated,
            results=results,
        )

    def _match_verse(self, compiled: CompiledQuery, verse: Verse) -> Optional[VerseResult]:
        """Return the verse result if a non-empty match exists, else None."""
        spans = []
        matched_text = []
        for match in compiled.finditer(verse.search_string):
            if match.end() > match.start():
                spans.append(match.span())
                matched_text.append(match.group(0))
        if not spans:
            return None

        word_indexes = covered_word_indexes(verse.search_string, spans)
        return VerseResult(
            book=verse.book,
            chapter=verse.chapter,
            verse=verse.verse,
            chapter_index=verse.chapter_index,
            verse_index=verse.verse_index,
            location=verse.location,
            words=list(verse.words),
            tags=list(verse.tags),
            matched_word_indexes=sorted(word_indexes),
            matched_text=matched_text,
        )

    def get_entry(self, tag: int) -> Optional[LexiconEntry]:
        return self.lexicon.get(tag)

    def find_entries(self, pattern: str, verbs_only: bool = False) -> List[LexiconEntry]:
        """
        Find lexicon entries by Strong's number or searchable form.

        Args:
            pattern: Pattern as inside a <...> block, e.g. ``אור`` or ``72\\d\\d``
            verbs_only: Keep only verbs

        Returns:
            Matching entries in tag order, possibly empty

        Raises:
            InvalidPattern: if the pattern does not compile
        """
        source = self.compiler.normalize_pattern(pattern, inside_block=True)
        try:
            regex = compile_anchored(source)
        except re.error as e:
            raise InvalidPattern(f"Invalid lexicon pattern: {pattern}: {e}") from e
        return self.lexicon.match(regex, verbs_only=verbs_only)

    def get_verse(self, book: str, chapter_index: int, verse_index: int) -> Optional[Verse]:
        return self.verse_index.get_verse(book, chapter_index, verse_index)

    def book_names(self) -> List[str]:
        names: List[str] = []
        for verse in self.verse_index:
            if not names or names[-1] != verse.book:
                names.append(verse.book)
        return names

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats: Dict[str, Any] = self._stats.copy()

        # Calculate averages
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = stats["total_execution_time"] / stats["total_queries"]
            stats["error_rate"] = stats["failed_queries"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["error_rate"] = 0.0

        stats["index_stats"] = self.verse_index.get_stats()
        stats["lexicon_stats"] = self.lexicon.get_stats()
        return stats

    def reset_stats(self) -> None:
        for key in self._stats:
            self._stats[key] = 0.0 if key == "total_execution_time" else 0
