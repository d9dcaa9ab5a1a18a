"""Immutable Strong's-number lexicon table."""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Pattern, Tuple

from .alphabet import SEPARATOR
from .normalizer import TextNormalizer, default_normalizer

# Ordered: the index of a category is its wire value in the encoded lexicon.
WORD_TYPES: Dict[str, str] = {
    "Verb": "פֹּעַל",
    "Derived-Verb": "פֹּעַל נִגְזָר",
    "Noun": "שֵׁם עֶצֶם",
    "Name": "שֵׁם פְּרָטִי",
    "Adjective": "שֵׁם תֹּאַר",
    "Adverb": "תֹּאַר הַפֹּעַל",
    "Pronoun": "שֵׁם גּוּף",
    "Preposition": "מִלַּת יַחַס",
    "Interjection": "מִלַּת קְרִיאָה",
    "Conjunction": "מִלַּת חִבּוּר",
    "word": "סוג לא ידוע",
}
WORD_TYPE_NAMES: List[str] = list(WORD_TYPES)
WORD_TYPE_INDEXES: Dict[str, int] = {name: index for index, name in enumerate(WORD_TYPE_NAMES)}

VERB = "Verb"
UNKNOWN = "unknown"
UNKNOWN_INDEX = len(WORD_TYPE_NAMES)

if WORD_TYPE_INDEXES[VERB] != 0:
    raise RuntimeError("The 'Verb' word type must have index 0")


def category_index(category: str) -> int:
    """Wire value of a category; the sentinel category maps past the known ones."""
    if category == UNKNOWN:
        return UNKNOWN_INDEX
    return WORD_TYPE_INDEXES[category]


def category_name(index: int) -> str:
    if 0 <= index < len(WORD_TYPE_NAMES):
        return WORD_TYPE_NAMES[index]
    return UNKNOWN


@dataclass(frozen=True)
class LexiconEntry:
    """One Strong's number: its vocalized word, category and searchable form."""

    tag: int
    word: str
    category: str
    searchable: str

    @property
    def is_sentinel(self) -> bool:
        return self.category == UNKNOWN

    @property
    def is_verb(self) -> bool:
        return self.category == VERB

    @property
    def category_hebrew(self) -> str:
        return WORD_TYPES.get(self.category, "לא ידוע")

    @property
    def biblehub_url(self) -> str:
        return f"https://biblehub.com/hebrew/{self.tag}.htm"


def sentinel_entry(tag: int) -> LexiconEntry:
    # a single separator, because the codec can't encode empty words
    return LexiconEntry(tag=tag, word=SEPARATOR, category=UNKNOWN, searchable="")


class Lexicon:
    """Read-only table of lexicon entries indexed by tag.

    Every index from 0 to the highest known tag has an entry; tags missing
    from the source are filled with sentinel entries so lookups never fail
    inside the table's range.
    """

    def __init__(self, entries: Iterable[LexiconEntry] = ()) -> None:
        by_tag: Dict[int, LexiconEntry] = {entry.tag: entry for entry in entries}
        size = max(by_tag) + 1 if by_tag else 0
        self._entries: Tuple[LexiconEntry, ...] = tuple(
            by_tag.get(tag) or sentinel_entry(tag) for tag in range(size)
        )

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Tuple[str, str, int]],
        normalizer: Optional[TextNormalizer] = None,
    ) -> "Lexicon":
        """
        Build a lexicon from (vocalized word, category, tag) rows.

        Args:
            rows: Source rows; words are normalized here
            normalizer: Normalizer for words and searchable forms

        Returns:
            A lexicon covering every tag up to the highest one seen
        """
        normalizer = normalizer or default_normalizer
        entries = []
        for word, category, tag in rows:
            if category == UNKNOWN:
                entries.append(sentinel_entry(tag))
                continue
            normalized = normalizer.normalize(word)
            entries.append(
                LexiconEntry(
                    tag=tag,
                    word=normalized,
                    category=category,
                    searchable=normalizer.make_searchable(normalized),
                )
            )
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LexiconEntry]:
        return iter(self._entries)

    def get(self, tag: int) -> Optional[LexiconEntry]:
        """Return the entry for ``tag``, or None if it is past the table."""
        if 0 <= tag < len(self._entries):
            return self._entries[tag]
        return None

    def match(self, pattern: Pattern, verbs_only: bool = False) -> List[LexiconEntry]:
        """
        Find entries whose tag (as a decimal string) or searchable form fully matches.

        Args:
            pattern: Compiled pattern, matched against the whole string
            verbs_only: Keep only entries of category "Verb"

        Returns:
            Matching entries in tag order
        """
        matches = []
        for entry in self._entries:
            if pattern.fullmatch(str(entry.tag)) or (
                not entry.is_sentinel and pattern.fullmatch(entry.searchable)
            ):
                if verbs_only and not entry.is_verb:
                    continue
                matches.append(entry)
        return matches

    def searchable_forms(self) -> List[str]:
        """All distinct searchable forms, for suggestions."""
        return sorted({entry.searchable for entry in self._entries if entry.searchable})

    def get_stats(self) -> Dict[str, int]:
        sentinels = sum(1 for entry in self._entries if entry.is_sentinel)
        return {
            "total_entries": len(self._entries),
            "defined_entries": len(self._entries) - sentinels,
            "verbs": sum(1 for entry in self._entries if entry.is_verb),
        }


def compile_anchored(source: str) -> Pattern:
    """Compile ``source`` so that it must match a whole string."""
    return re.compile(f"^(?:{source})$")
