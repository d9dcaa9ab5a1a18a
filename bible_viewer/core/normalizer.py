"""Text normalization of annotated Hebrew words into the 7-bit alphabet."""

import re
from typing import Optional

from .alphabet import (
    ACCENTS_REGEX,
    FINALS_TO_REGULARS,
    HEBREW_ALPHABET,
    NON_LETTERS_REGEX,
    POINTS_REGEX,
    SHIN,
    SIN,
    Alphabet,
)
from .errors import InvalidCharacter

# Marks that may sit between a bare shin and its shin/sin dot.
_INTERLEAVED_MARKS = "[\u0590-\u05c1\u05c3-\u05cf\u05eb-\u05ff]*"

SHIN_DOT = "\u05c1"
SIN_DOT = "\u05c2"
MAQAF = "\u05be"
SOF_PASUQ = "\u05c3"
NUN_HAFUKHA = "\u05c6"


class TextNormalizer:
    """Canonicalizes raw annotated Hebrew text into alphabet symbols."""

    def __init__(self, alphabet: Optional[Alphabet] = None) -> None:
        """
        Initialize the normalizer.

        Args:
            alphabet: Alphabet used to validate normalized text
        """
        self.alphabet = alphabet or HEBREW_ALPHABET

        # Compile regex patterns for performance
        self.shin_regex = re.compile(f"\u05e9({_INTERLEAVED_MARKS}){SHIN_DOT}")
        self.sin_regex = re.compile(f"\u05e9({_INTERLEAVED_MARKS}){SIN_DOT}")
        self.maqaf_regex = re.compile(MAQAF)
        # trailing sof-pasuq run, each optionally followed by an open/closed parasha mark
        self.end_of_verse_regex = re.compile(f"(?:{SOF_PASUQ}[פס{NUN_HAFUKHA}]*)+$")

    def fix_shin_sin(self, text: str) -> str:
        """
        Replace shin/sin letter+dot combinations with their single-symbol forms.

        Marks between the letter and the dot are kept, in order, after the
        replacement symbol. Applying this twice is the same as applying it once.

        Args:
            text: Input text

        Returns:
            Text where every dotted shin/sin is a single symbol
        """
        text = self.shin_regex.sub(lambda match: SHIN + match.group(1), text)
        return self.sin_regex.sub(lambda match: SIN + match.group(1), text)

    def normalize(self, text: str) -> str:
        """
        Normalize a word (or any text) into alphabet symbols.

        Args:
            text: Raw annotated text

        Returns:
            Normalized text

        Raises:
            InvalidCharacter: if a resulting character is not in the alphabet
        """
        normalized = self.fix_shin_sin(text)
        normalized = self.maqaf_regex.sub("", normalized)
        normalized = self.end_of_verse_regex.sub("", normalized)

        # Validate that all characters are valid Hebrew characters
        for char in normalized:
            if char not in self.alphabet:
                raise InvalidCharacter(char, normalized)

        return normalized

    def strip_non_letters(self, text: str) -> str:
        """Remove everything that is not a letter (points, accents, separators)."""
        return NON_LETTERS_REGEX.sub("", text)

    def strip_points(self, text: str) -> str:
        return POINTS_REGEX.sub("", text)

    def strip_accents(self, text: str) -> str:
        return ACCENTS_REGEX.sub("", text)

    @staticmethod
    def finals_to_regulars(text: str) -> str:
        """Convert final letters (ךםןףץ) to their regular counterparts (כמנפצ)."""
        return text.translate(FINALS_TO_REGULARS)

    def make_searchable(self, word: str) -> str:
        """
        Build the searchable form of a word: no points, no accents, no finals.

        Args:
            word: A word with vocalization

        Returns:
            The bare letters of the word, final letters replaced by regular ones
        """
        return self.finals_to_regulars(self.strip_non_letters(self.normalize(word)))

    def readable(self, text: str, show_points: bool = True, show_accents: bool = True) -> str:
        """Hide points and/or accents for display."""
        if not show_points:
            text = self.strip_points(text)
        if not show_accents:
            text = self.strip_accents(text)
        return text


default_normalizer = TextNormalizer()


def normalize(text: str) -> str:
    """Normalize ``text`` with the default alphabet."""
    return default_normalizer.normalize(text)


def make_searchable(word: str) -> str:
    return default_normalizer.make_searchable(word)
