"""Shared fixtures: a few verses of Genesis and Exodus with their lexicon."""

import pytest

from bible_viewer.config import configure_logging, get_settings
from bible_viewer.core.alphabet import SHIN, SIN
from bible_viewer.core.bundle import write_bundle
from bible_viewer.core.engine import SearchEngine
from bible_viewer.core.index import SearchIndexBuilder
from bible_viewer.core.ingest import parse_corpus, parse_lexicon

configure_logging(get_settings())

# Points and accents, by code point
SHEVA = chr(0x05B0)
HIRIQ = chr(0x05B4)
TSERE = chr(0x05B5)
SEGOL = chr(0x05B6)
PATAH = chr(0x05B7)
QAMATS = chr(0x05B8)
HOLAM = chr(0x05B9)
DAGESH = chr(0x05BC)
MAQAF = chr(0x05BE)
SHIN_DOT = chr(0x05C1)
SIN_DOT = chr(0x05C2)
SOF_PASUQ = chr(0x05C3)
TIPEHA = chr(0x0596)

# בְּרֵאשִׁית with a decomposed shin
BERESHIT = "ב" + DAGESH + SHEVA + "ר" + TSERE + "א" + "ש" + HIRIQ + SHIN_DOT + "ית"
# הָאָרֶץ׃
HAARETS_END = "ה" + QAMATS + "א" + QAMATS + "ר" + SEGOL + "ץ" + SOF_PASUQ
SHAMAYIM = "ה" + SHIN + "מים"

CORPUS_ROWS = [
    ("Genesis", 1, 1, BERESHIT, "7225"),
    ("Genesis", 1, 1, "ברא", "1254"),
    ("Genesis", 1, 1, "אלהים", "430"),
    ("Genesis", 1, 1, "את", "853"),
    ("Genesis", 1, 1, SHAMAYIM, "8064"),
    ("Genesis", 1, 1, "ואת", "853"),
    ("Genesis", 1, 1, HAARETS_END, "776"),
    ("Genesis", 1, 2, "והארץ", "776"),
    ("Genesis", 1, 2, "היתה", "1961"),
    ("Genesis", 1, 2, "תהו", "8414"),
    ("Genesis", 1, 2, "ובהו", "922"),
    ("Genesis", 1, 3, "ויאמר", "559"),
    ("Genesis", 1, 3, "אלהים", "430"),
    ("Genesis", 1, 3, "יהי", "1961"),
    ("Genesis", 1, 3, "אור", "216"),
    ("Genesis", 1, 3, "ויהי", "1961"),
    ("Genesis", 1, 3, "אור", "216"),
    ("Genesis", 2, 1, "ויכלו", "3615"),
    ("Genesis", 2, 1, SHAMAYIM, "8064"),
    ("Genesis", 2, 1, "והארץ", "776"),
    ("Exodus", 1, 1, "ואלה", "428"),
    ("Exodus", 1, 1, SHIN + "מות", "8034"),
    ("Exodus", 1, 1, "בני", "1121"),
    ("Exodus", 1, 1, "י" + SIN + "ראל", "3478"),
    ("Exodus", 1, 2, "מים", "4325"),
    ("Exodus", 1, 2, "רבים", "7227"),
    ("Exodus", 1, 3, "ו" + SHIN + "ללו", "7997"),
    ("Exodus", 1, 3, SHIN + "לל", "7998"),
    ("Exodus", 1, 3, "ו", ""),
]

LEXICON_ROWS = [
    ("ב" + DAGESH + SHEVA + "ר" + TSERE + "א" + SHIN + HIRIQ + "ית", "Noun", 7225),
    ("ב" + DAGESH + QAMATS + "ר" + QAMATS + "א", "Verb", 1254),
    ("אלהים", "Noun", 430),
    ("את", "Preposition", 853),
    (SHIN + QAMATS + "מ" + PATAH + "י" + HIRIQ + "ם", "Noun", 8064),
    ("ארץ", "Noun", 776),
    ("היה", "Verb", 1961),
    ("תהו", "Noun", 8414),
    ("בהו", "Noun", 922),
    ("אמר", "Verb", 559),
    ("א" + HOLAM + "ור", "Noun", 216),
    ("כלה", "Verb", 3615),
    ("אלה", "Pronoun", 428),
    (SHIN + "ם", "Noun", 8034),
    ("בן", "Noun", 1121),
    ("י" + SIN + "ראל", "Name", 3478),
    ("מים", "Noun", 4325),
    ("רב", "Adjective", 7227),
    ("נ" + SHIN + "ל", "Verb", 5394),
    (SHIN + "לל", "Verb", 7997),
    (SHIN + "לל", "Noun", 7998),
    ("רא" + SHIN, "Noun", 7218),
]


def corpus_tsv_lines(rows=CORPUS_ROWS):
    lines = ["bookName\tchapter\tverse\thebrewWord\tstrongNumber"]
    for book, chapter, verse, word, strong in rows:
        lines.append(f"{book}\t{chapter}\t{verse}\t{word}\t{strong}")
    return lines


def lexicon_markdown_lines(rows=LEXICON_ROWS):
    lines = [
        "| מנוקד | נקי | Type | Strong's number & Biblehub link |",
        "| ----- | --- | ---- | ------------------------------- |",
    ]
    for word, word_type, tag in rows:
        lines.append(f"| {word} | {word} | {word_type} | [ {tag} ](https://biblehub.com/hebrew/{tag}.htm) |")
    return lines


@pytest.fixture
def corpus_lines():
    return corpus_tsv_lines()


@pytest.fixture
def lexicon_lines():
    return lexicon_markdown_lines()


@pytest.fixture
def corpus(corpus_lines):
    return parse_corpus(corpus_lines)


@pytest.fixture
def lexicon(lexicon_lines):
    return parse_lexicon(lexicon_lines)


@pytest.fixture
def verse_index(corpus):
    return SearchIndexBuilder().build_verse_index(corpus)


@pytest.fixture
def engine(verse_index, lexicon):
    """Search engine over the sample verses."""
    return SearchEngine(verse_index, lexicon)


@pytest.fixture
def bundle_file(tmp_path, corpus, lexicon):
    path = tmp_path / "bundle.json"
    write_bundle(path, corpus, lexicon)
    return path
