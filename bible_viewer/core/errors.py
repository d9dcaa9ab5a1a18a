"""Exception hierarchy for ingestion, codec, query and locator failures."""

from typing import Optional


class BibleViewerError(Exception):
    """Base class for every error raised by the bible viewer core."""


class IngestionError(BibleViewerError):
    """Malformed corpus or lexicon input. The build is aborted."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidCharacter(BibleViewerError):
    """A normalized word contains a character outside the alphabet."""

    def __init__(self, char: str, text: str) -> None:
        self.char = char
        self.text = text
        super().__init__(f"Unknown Hebrew character {char!r} (U+{ord(char):04X}) in word {text!r}")


# --- Codec errors: always a data or programming defect ---

class CodecError(BibleViewerError):
    """Base class for word codec failures."""


class EmptyWord(CodecError):
    """A word has no symbols, so no end-of-word marker can be placed."""


class OutOfRange(CodecError):
    """A tag does not fit in two bytes."""


class TruncatedInput(CodecError):
    """The encoded buffer ends in the middle of a word or a tag."""


class UnknownSymbol(CodecError):
    """A symbol (or a decoded index) has no alphabet entry."""


# --- Query errors: user facing, the caller re-prompts ---

class QueryError(BibleViewerError):
    """Base class for query compilation failures."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class EmptyQuery(QueryError):
    """The query is empty or only whitespace."""

    def __init__(self, reason: str = "Empty search query") -> None:
        super().__init__(reason)


class InvalidPattern(QueryError):
    """The query (or a lexicon block inside it) is not a valid pattern."""


class NoMatchingEntries(QueryError):
    """A lexicon block resolved to no lexicon entries."""

    def __init__(self, block: str, suggestions: Optional[list] = None) -> None:
        self.block = block
        self.suggestions = suggestions or []
        super().__init__(f"No matching Strong's numbers for: {block}")


# --- Locator errors: caller misuse ---

class LocatorError(BibleViewerError):
    """Base class for match locator failures."""


class OffsetOutOfRange(LocatorError):
    """An offset lies outside the search string it was applied to."""
