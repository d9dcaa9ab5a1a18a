"""Compiler for extended search queries.

An extended query is a regular expression over verse search strings, plus:

    <...>    resolved to the Strong's numbers whose number or searchable
             form matches the inner pattern, e.g. ``<216>`` or ``<אור>``
    @        zero or more of the letters א, ה, ו, י
    #        any single letter
    ש        either shin or sin
    2xy2     the whole query: verbs derived from the two-letter root xy

Bare spaces are word boundaries: a space not preceded by ``>`` accepts any
Strong's number on the word before it.
"""

import re
from dataclasses import dataclass, field
from typing import List, Match, Optional, Pattern, Tuple

import structlog
from rapidfuzz import fuzz, process

from .alphabet import BARE_SHIN, HEBREW_NON_LETTERS_REGEX, SHIN, SIN
from .errors import EmptyQuery, InvalidPattern, NoMatchingEntries
from .lexicon import Lexicon, LexiconEntry, compile_anchored
from .normalizer import TextNormalizer, default_normalizer

logger = structlog.get_logger(__name__)

ROOT_SHORTHAND_REGEX = re.compile(r"2(.)(.)2")

# Word shapes derived from a two-letter root xy.
ROOT_TEMPLATES = (
    "{x}{y}",       # שב
    "נ{x}{y}",      # נשב
    "י{x}{y}",      # ישב
    "{x}ו{y}",      # שוב
    "{x}י{y}",      # שיב
    "{x}{y}ה",      # שבה
    "{x}{y}{y}",    # שבב
    "{x}{y}{x}{y}", # שבשב
)

LEXICON_BLOCK_REGEX = re.compile(r"<(.*?)>")
UNCLOSED_BRACKET_REGEX = re.compile(r"\[[^\]]*$")
WHITESPACE_REGEX = re.compile(r"\s+")
IMPLICIT_BOUNDARY_REGEX = re.compile(r"([^>]) ")

TAG_PLACEHOLDER = r"(?:<\d+>|)"
SHIN_OR_SIN = SIN + SHIN

# (pattern, replacement inside a bracket expression, replacement outside)
SHIN_REWRITES: Tuple[Tuple[Pattern, str, str], ...] = (
    (re.compile(r"(?<!ת)-ת"), "-ר" + SHIN_OR_SIN + "ת", "-ת"),
    (re.compile("-" + BARE_SHIN), "-ר" + SHIN_OR_SIN, "-[" + SHIN_OR_SIN + "]"),
    (re.compile(BARE_SHIN + "-"), SHIN_OR_SIN + "ת-", "[" + SHIN_OR_SIN + "]-"),
    (re.compile(BARE_SHIN), SHIN_OR_SIN, "[" + SHIN_OR_SIN + "]"),
)
MATRES_REWRITE = (re.compile("@"), "אהוי", "[אהוי]*")
ANY_LETTER_REWRITE = (re.compile("#"), "א-ת", "[א-ת" + SHIN + SIN + "]")


@dataclass(frozen=True)
class LexiconBlock:
    """How one ``<...>`` block of a query was resolved."""

    block: str
    replacement: str
    entries: Tuple[LexiconEntry, ...]


@dataclass(frozen=True)
class CompiledQuery:
    """An executable pattern plus what went into it."""

    raw_query: str
    source: str
    pattern: Pattern
    verbs_only: bool = False
    lexicon_blocks: Tuple[LexiconBlock, ...] = field(default_factory=tuple)

    def finditer(self, search_string: str):
        return self.pattern.finditer(search_string)


def replace_in_pattern_source(source: str, regex: Pattern, inside_brackets: str, outside_brackets: str) -> str:
    """
    Replace every match of ``regex`` depending on its bracket context.

    An occurrence is inside a bracket expression when the text before it
    has a ``[`` with no ``]`` after it.

    Args:
        source: Pattern source
        regex: What to replace
        inside_brackets: Replacement inside ``[...]``
        outside_brackets: Replacement elsewhere

    Returns:
        The rewritten source
    """
    def replace(match: Match) -> str:
        before = source[:match.start()]
        if UNCLOSED_BRACKET_REGEX.search(before):
            return inside_brackets
        return outside_brackets

    return regex.sub(replace, source)


def expand_root_shorthand(query: str) -> Optional[str]:
    """Expand a ``2xy2`` query into a lexicon block, or return None."""
    match = ROOT_SHORTHAND_REGEX.fullmatch(query)
    if not match:
        return None
    x, y = match.group(1), match.group(2)
    return "<" + "|".join(template.format(x=x, y=y) for template in ROOT_TEMPLATES) + ">"


class QueryCompiler:
    """Turns extended queries into compiled regular expressions."""

    def __init__(
        self,
        lexicon: Lexicon,
        normalizer: Optional[TextNormalizer] = None,
        max_suggestions: int = 5,
    ) -> None:
        """
        Initialize the compiler.

        Args:
            lexicon: Table used to resolve ``<...>`` blocks
            normalizer: Supplies shin/sin and final-letter normalization
            max_suggestions: Suggestions offered when a block matches nothing
        """
        self.lexicon = lexicon
        self.normalizer = normalizer or default_normalizer
        self.max_suggestions = max_suggestions

    def normalize_pattern(self, source: str, inside_block: bool = False) -> str:
        """
        Apply the letter-equivalence rewrites to a pattern source.

        Outside lexicon blocks, whitespace is also collapsed, points and
        accents are removed, and implicit tag placeholders are inserted.

        Args:
            source: User pattern text
            inside_block: True for the interior of a ``<...>`` block

        Returns:
            The rewritten pattern source
        """
        source = self.normalizer.fix_shin_sin(self.normalizer.finals_to_regulars(source))

        # "standard shin": when inside brackets, do not add brackets
        for regex, inside, outside in SHIN_REWRITES:
            source = replace_in_pattern_source(source, regex, inside, outside)

        if not inside_block:
            source = WHITESPACE_REGEX.sub(" ", source)
            source = HEBREW_NON_LETTERS_REGEX.sub("", source)

        source = replace_in_pattern_source(source, *MATRES_REWRITE)
        source = replace_in_pattern_source(source, *ANY_LETTER_REWRITE)

        if not inside_block:
            source = IMPLICIT_BOUNDARY_REGEX.sub(lambda match: match.group(1) + TAG_PLACEHOLDER + " ", source)

        return source

    def resolve_block(self, block: str, inner: str, verbs_only: bool = False) -> LexiconBlock:
        """
        Resolve one ``<inner>`` block to the tags it stands for.

        Raises:
            InvalidPattern: if ``inner`` is not a valid pattern
            NoMatchingEntries: if no lexicon entry matches
        """
        normalized_inner = self.normalize_pattern(inner, inside_block=True)
        try:
            regex = compile_anchored(normalized_inner)
        except re.error as e:
            raise InvalidPattern(f"Invalid RegExp inside <...>: {block}: {e}") from e

        entries = self.lexicon.match(regex, verbs_only=verbs_only)
        if not entries:
            raise NoMatchingEntries(block, suggestions=self.suggest(inner))

        replacement = "(#+<(" + "|".join(str(entry.tag) for entry in entries) + ")>)"
        return LexiconBlock(block=block, replacement=replacement, entries=tuple(entries))

    def suggest(self, inner: str) -> List[str]:
        """Searchable forms close to a block that matched nothing."""
        letters = self.normalizer.finals_to_regulars(self.normalizer.fix_shin_sin(inner))
        if not letters.strip():
            return []
        matches = process.extract(
            letters,
            self.lexicon.searchable_forms(),
            scorer=fuzz.ratio,
            limit=self.max_suggestions,
            score_cutoff=60,
        )
        return [form for form, _score, _index in matches]

    def compile(self, raw_query: str, verbs_only: bool = False) -> CompiledQuery:
        """
        Compile an extended query.

        Args:
            raw_query: The query as typed by the user
            verbs_only: Restrict every ``<...>`` block to verbs

        Returns:
            CompiledQuery ready to run over search strings

        Raises:
            EmptyQuery: if there is nothing to search for
            InvalidPattern: if the query is not a valid pattern
            NoMatchingEntries: if a ``<...>`` block resolves to nothing
        """
        if not raw_query or not raw_query.strip():
            raise EmptyQuery()

        query = raw_query
        expanded = expand_root_shorthand(raw_query)
        if expanded is not None:
            query = expanded
            verbs_only = True

        blocks: List[LexiconBlock] = []

        def replace_block(match: Match) -> str:
            resolved = self.resolve_block(match.group(0), match.group(1), verbs_only=verbs_only)
            blocks.append(resolved)
            return resolved.replacement

        query = LEXICON_BLOCK_REGEX.sub(replace_block, query)
        source = self.normalize_pattern(query, inside_block=False)

        if not source.strip():
            raise EmptyQuery()

        try:
            pattern = re.compile(source)
        except re.error as e:
            raise InvalidPattern(f"Invalid search pattern: {e}") from e

        logger.debug(
            "Query compiled",
            query=raw_query,
            pattern=source,
            verbs_only=verbs_only,
            lexicon_blocks=len(blocks),
        )
        return CompiledQuery(
            raw_query=raw_query,
            source=source,
            pattern=pattern,
            verbs_only=verbs_only,
            lexicon_blocks=tuple(blocks),
        )
