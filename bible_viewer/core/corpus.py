"""Immutable corpus structures: books of chapters of verses of tagged words."""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

Unit = Tuple[Tuple[str, int], ...]

# BSB English book names to Hebrew names, in canonical order.
BSB_BOOK_NAMES_TO_HEBREW: Dict[str, str] = {
    # תורה
    "Genesis": "בראשית",
    "Exodus": "שמות",
    "Leviticus": "ויקרא",
    "Numbers": "במדבר",
    "Deuteronomy": "דברים",
    # נביאים ראשונים
    "Joshua": "יהושע",
    "Judges": "שופטים",
    "Samuel1": "שמואל-א",
    "Samuel2": "שמואל-ב",
    "Kings1": "מלכים-א",
    "Kings2": "מלכים-ב",
    # נביאים אחרונים
    "Isaiah": "ישעיהו",
    "Jeremiah": "ירמיהו",
    "Ezekiel": "יחזקאל",
    "Hosea": "הושע",
    "Joel": "יואל",
    "Amos": "עמוס",
    "Obadiah": "עובדיה",
    "Jonah": "יונה",
    "Micah": "מיכה",
    "Nahum": "נחום",
    "Habakkuk": "חבקוק",
    "Zephaniah": "צפניה",
    "Haggai": "חגי",
    "Zechariah": "זכריה",
    "Malachi": "מלאכי",
    # כתובים
    "Chronicles1": "דברי-הימים-א",
    "Chronicles2": "דברי-הימים-ב",
    "Psalm": "תהילים",
    "Job": "איוב",
    "Proverbs": "משלי",
    "Ruth": "רות",
    "SongOfSolomon": "שיר-השירים",
    "Ecclesiastes": "קהלת",
    "Lamentations": "איכה",
    "Esther": "אסתר",
    "Daniel": "דניאל",
    "Ezra": "עזרא",
    "Nehemiah": "נחמיה",
}
HEBREW_BOOK_NAMES: List[str] = list(BSB_BOOK_NAMES_TO_HEBREW.values())


@dataclass(frozen=True)
class Book:
    """A book: chapters of verses, each verse a tuple of (word, tag) pairs."""

    name: str
    chapters: Tuple[Tuple[Unit, ...], ...]

    @property
    def verse_count(self) -> int:
        return sum(len(chapter) for chapter in self.chapters)


@dataclass(frozen=True)
class Corpus:
    """All loaded books, in canonical order."""

    books: Tuple[Book, ...]

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)

    def __len__(self) -> int:
        return len(self.books)

    def get_book(self, name: str) -> Optional[Book]:
        for book in self.books:
            if book.name == name:
                return book
        return None

    def book_names(self) -> List[str]:
        return [book.name for book in self.books]

    def get_stats(self) -> Dict[str, int]:
        chapters = sum(len(book.chapters) for book in self.books)
        verses = sum(book.verse_count for book in self.books)
        words = sum(len(verse) for book in self.books for chapter in book.chapters for verse in chapter)
        return {
            "total_books": len(self.books),
            "total_chapters": chapters,
            "total_verses": verses,
            "total_words": words,
        }
