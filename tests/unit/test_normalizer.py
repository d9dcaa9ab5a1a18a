"""Unit tests for text normalization."""

import pytest

from bible_viewer.core.alphabet import SHIN, SIN
from bible_viewer.core.errors import InvalidCharacter
from bible_viewer.core.normalizer import TextNormalizer, make_searchable, normalize

HIRIQ = chr(0x05B4)
QAMATS = chr(0x05B8)
DAGESH = chr(0x05BC)
MAQAF = chr(0x05BE)
SHIN_DOT = chr(0x05C1)
SIN_DOT = chr(0x05C2)
SOF_PASUQ = chr(0x05C3)
NUN_HAFUKHA = chr(0x05C6)
TIPEHA = chr(0x0596)


class TestTextNormalizer:
    """Test cases for the TextNormalizer class."""

    @pytest.fixture
    def normalizer(self):
        return TextNormalizer()

    def test_fix_shin(self, normalizer):
        """Test that a decomposed shin becomes one symbol."""
        assert normalizer.fix_shin_sin("ש" + SHIN_DOT + "ם") == SHIN + "ם"

    def test_fix_sin(self, normalizer):
        assert normalizer.fix_shin_sin("י" + "ש" + SIN_DOT + "ראל") == "י" + SIN + "ראל"

    def test_fix_shin_keeps_interleaved_marks(self, normalizer):
        """Test that marks between the letter and its dot are kept in order."""
        text = "ש" + DAGESH + HIRIQ + SHIN_DOT + "ם"
        assert normalizer.fix_shin_sin(text) == SHIN + DAGESH + HIRIQ + "ם"

    def test_fix_shin_sin_idempotent(self, normalizer):
        text = "ש" + HIRIQ + SHIN_DOT + "ש" + SIN_DOT + "ה"
        once = normalizer.fix_shin_sin(text)
        assert normalizer.fix_shin_sin(once) == once

    def test_normalize_removes_maqaf(self, normalizer):
        assert normalizer.normalize("את" + MAQAF) == "את"

    def test_normalize_removes_end_of_verse(self, normalizer):
        """Test that trailing sof pasuq and parasha marks are removed."""
        assert normalizer.normalize("הארץ" + SOF_PASUQ) == "הארץ"
        assert normalizer.normalize("הארץ" + SOF_PASUQ + "פ") == "הארץ"
        assert normalizer.normalize("הארץ" + SOF_PASUQ + "ס" + SOF_PASUQ) == "הארץ"
        assert normalizer.normalize("הארץ" + SOF_PASUQ + NUN_HAFUKHA) == "הארץ"

    def test_normalize_keeps_points_and_accents(self, normalizer):
        word = "ב" + DAGESH + QAMATS + "ר" + QAMATS + TIPEHA + "א"
        assert normalizer.normalize(word) == word

    @pytest.mark.parametrize("text", [
        "ש" + HIRIQ + SHIN_DOT + "ית",
        "הארץ" + SOF_PASUQ + "פ" + SOF_PASUQ,
        "את" + MAQAF + "ה" + QAMATS + "ר",
        "א" + SOF_PASUQ + "ב",
        "",
    ])
    def test_normalize_idempotent(self, normalizer, text):
        """Test that normalizing twice is the same as normalizing once."""
        once = normalizer.normalize(text)
        assert normalizer.normalize(once) == once

    def test_normalize_rejects_unknown_characters(self, normalizer):
        with pytest.raises(InvalidCharacter) as exc_info:
            normalizer.normalize("abc")
        assert exc_info.value.char == "a"

    def test_normalize_rejects_bare_shin(self, normalizer):
        """Test that a shin with neither dot is not an alphabet symbol."""
        with pytest.raises(InvalidCharacter):
            normalizer.normalize("שלום")

    def test_finals_to_regulars(self, normalizer):
        assert normalizer.finals_to_regulars("ךםןףץ") == "כמנפצ"
        assert normalizer.finals_to_regulars("אלהים") == "אלהימ"

    def test_make_searchable(self, normalizer):
        """Test that searchable forms have letters only, without final forms."""
        word = "ש" + QAMATS + SHIN_DOT + "מ" + HIRIQ + "ים" + SOF_PASUQ
        assert normalizer.make_searchable(word) == SHIN + "מימ"

    def test_strip_points_and_accents(self, normalizer):
        word = "ב" + DAGESH + QAMATS + TIPEHA + "א"
        assert normalizer.strip_points(word) == "ב" + TIPEHA + "א"
        assert normalizer.strip_accents(word) == "ב" + DAGESH + QAMATS + "א"

    def test_readable(self, normalizer):
        word = "ב" + QAMATS + TIPEHA + "א"
        assert normalizer.readable(word) == word
        assert normalizer.readable(word, show_points=False) == "ב" + TIPEHA + "א"
        assert normalizer.readable(word, show_points=False, show_accents=False) == "בא"

    def test_module_helpers(self):
        assert normalize("ש" + SIN_DOT + "ה") == SIN + "ה"
        assert make_searchable("ארץ") == "ארצ"
