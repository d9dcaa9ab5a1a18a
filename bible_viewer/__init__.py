"""
Hebrew Bible Viewer - extended regular expression search over the Hebrew Bible.

This package encodes a Strong's-tagged Hebrew corpus into a compact binary
format, and compiles extended search queries (lexicon blocks, matres
lectionis, shin/sin equivalence, root shorthands) into regular expressions
run over per-verse search strings.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .models.response import SearchResponse, VerseResult

__all__ = [
    "SearchEngine",
    "SearchResponse",
    "VerseResult",
]
