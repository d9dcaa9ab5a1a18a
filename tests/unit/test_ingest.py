"""Unit tests for corpus and lexicon ingestion."""

import pytest

from bible_viewer.core.alphabet import SHIN, SIN
from bible_viewer.core.errors import IngestionError
from bible_viewer.core.ingest import (
    BARE_SHIN_WORDS,
    CorpusParser,
    load_corpus_file,
    load_lexicon_file,
    parse_corpus,
    parse_lexicon,
)

HEADER = "bookName\tchapter\tverse\thebrewWord\tstrongNumber"
LEXICON_HEADER = "| מנוקד | נקי | Type | Strong's number & Biblehub link |"


def tsv(*rows):
    return [HEADER] + ["\t".join(str(field) for field in row) for row in rows]


def lexicon_row(word, word_type, tag):
    return f"| {word} | {word} | {word_type} | [ {tag} ](https://biblehub.com/hebrew/{tag}.htm) |"


class TestCorpusParser:
    """Test cases for corpus TSV parsing."""

    def test_sample_corpus(self, corpus):
        assert corpus.book_names() == ["בראשית", "שמות"]
        genesis = corpus.get_book("בראשית")
        assert [len(chapter) for chapter in genesis.chapters] == [3, 1]
        assert corpus.get_stats() == {
            "total_books": 2,
            "total_chapters": 3,
            "total_verses": 7,
            "total_words": 29,
        }

    def test_words_are_normalized(self, corpus):
        first_verse = corpus.books[0].chapters[0][0]
        assert first_verse[0][1] == 7225
        assert SHIN in first_verse[0][0]
        assert first_verse[3] == ("את", 853)

    def test_empty_strong_number_is_zero(self, corpus):
        last_verse = corpus.get_book("שמות").chapters[0][2]
        assert last_verse[-1] == ("ו", 0)

    def test_blank_lines_and_crlf(self):
        lines = [HEADER + "\r\n", "\n", "Genesis\t1\t1\tאור\t216\r\n", "   \n"]
        corpus = parse_corpus(lines)
        assert corpus.books[0].chapters == (((("אור", 216),),),)

    def test_chapter_gap(self):
        lines = tsv(("Genesis", 1, 1, "אור", 216), ("Genesis", 3, 1, "אור", 216))
        with pytest.raises(IngestionError) as exc_info:
            parse_corpus(lines)
        assert exc_info.value.line_number == 3
        assert "chapter" in str(exc_info.value)

    def test_first_chapter_must_be_one(self):
        with pytest.raises(IngestionError):
            parse_corpus(tsv(("Genesis", 2, 1, "אור", 216)))

    @pytest.mark.parametrize("chapter, verse", [(0, 1), (1, 0), (-1, 1)])
    def test_sequence_numbers_start_at_one(self, chapter, verse):
        with pytest.raises(IngestionError) as exc_info:
            parse_corpus(tsv(("Genesis", chapter, verse, "אור", 216)))
        assert exc_info.value.line_number == 2
        assert "starts at 1" in str(exc_info.value)

    def test_verse_gap(self):
        lines = tsv(("Genesis", 1, 1, "אור", 216), ("Genesis", 1, 3, "אור", 216))
        with pytest.raises(IngestionError) as exc_info:
            parse_corpus(lines)
        assert "verse" in str(exc_info.value)
        assert exc_info.value.line == "Genesis\t1\t3\tאור\t216"

    def test_verse_restarts_in_new_chapter(self):
        lines = tsv(
            ("Genesis", 1, 1, "אור", 216),
            ("Genesis", 1, 2, "אור", 216),
            ("Genesis", 2, 1, "אור", 216),
        )
        corpus = parse_corpus(lines)
        assert [len(chapter) for chapter in corpus.books[0].chapters] == [2, 1]

    def test_unknown_book(self):
        with pytest.raises(IngestionError) as exc_info:
            parse_corpus(tsv(("Genesys", 1, 1, "אור", 216)))
        assert "Genesys" in str(exc_info.value)

    def test_book_appearing_twice(self):
        lines = tsv(
            ("Genesis", 1, 1, "אור", 216),
            ("Exodus", 1, 1, "אור", 216),
            ("Genesis", 1, 2, "אור", 216),
        )
        with pytest.raises(IngestionError):
            parse_corpus(lines)

    @pytest.mark.parametrize("strong", ["abc", "70000", "-1"])
    def test_invalid_strong_number(self, strong):
        with pytest.raises(IngestionError):
            parse_corpus(tsv(("Genesis", 1, 1, "אור", strong)))

    def test_missing_fields(self):
        with pytest.raises(IngestionError):
            parse_corpus([HEADER, "Genesis\t1\t1"])

    def test_unknown_character(self):
        with pytest.raises(IngestionError):
            parse_corpus(tsv(("Genesis", 1, 1, "light", 216)))

    def test_book_filter(self, corpus_lines):
        corpus = parse_corpus(corpus_lines, book_filter="^שמות$")
        assert corpus.book_names() == ["שמות"]

    def test_load_corpus_file(self, tmp_path, corpus_lines, corpus):
        path = tmp_path / "corpus.tsv"
        path.write_text("\n".join(corpus_lines) + "\n", encoding="utf-8")
        assert load_corpus_file(path) == corpus


class TestBareShinRepair:
    """Test cases for undotted shin handling."""

    @pytest.fixture
    def parser(self):
        return CorpusParser()

    def test_dotted_word_untouched(self, parser):
        assert parser.repair_bare_shin("ה" + SHIN + "מים") == "ה" + SHIN + "מים"

    def test_known_shin_word(self, parser):
        assert parser.repair_bare_shin("חמש") == "חמ" + SHIN

    def test_known_accented_shin_word(self, parser):
        repaired = parser.repair_bare_shin(BARE_SHIN_WORDS[0])
        assert "ש" not in repaired
        assert SHIN in repaired

    def test_issachar(self, parser):
        assert parser.repair_bare_shin("י" + SIN + "שכר") == "י" + SIN + SIN + "כר"

    def test_unknown_word(self, parser):
        with pytest.raises(ValueError):
            parser.repair_bare_shin("שלום")

    def test_unknown_word_in_corpus(self):
        with pytest.raises(IngestionError) as exc_info:
            parse_corpus(tsv(("Genesis", 1, 1, "שלום", 7965)))
        assert exc_info.value.line_number == 2

    def test_parse_tag(self):
        assert CorpusParser.parse_tag("") == 0
        assert CorpusParser.parse_tag(" 430 ") == 430
        assert CorpusParser.parse_tag("65535") == 65535


class TestLexiconParser:
    """Test cases for the lexicon Markdown table."""

    def test_sample_lexicon(self, lexicon):
        assert len(lexicon) == 8415
        assert lexicon.get(216).searchable == "אור"
        assert lexicon.get(216).category == "Noun"

    def test_non_entry_lines_skipped(self):
        lines = [
            "# Strong's Hebrew",
            LEXICON_HEADER,
            "| --- | --- | --- | --- |",
            lexicon_row("אב", "Noun", 1),
            "",
        ]
        lexicon = parse_lexicon(lines)
        assert len(lexicon) == 2
        assert lexicon.get(0).is_sentinel
        assert lexicon.get(1).word == "אב"

    def test_unknown_word_type(self):
        lines = [LEXICON_HEADER, lexicon_row("אב", "Noun", 1), lexicon_row("אם", "Gerund", 2)]
        with pytest.raises(IngestionError) as exc_info:
            parse_lexicon(lines)
        assert exc_info.value.line_number == 3

    def test_word_without_letters(self):
        lines = [LEXICON_HEADER, lexicon_row(chr(0x05C3), "Noun", 5)]
        with pytest.raises(IngestionError) as exc_info:
            parse_lexicon(lines)
        assert exc_info.value.line_number == 2
        assert "Missing Hebrew word" in str(exc_info.value)

    def test_tag_out_of_range(self):
        with pytest.raises(IngestionError):
            parse_lexicon([lexicon_row("אב", "Noun", 70000)])

    def test_load_lexicon_file(self, tmp_path, lexicon_lines, lexicon):
        path = tmp_path / "lexicon.md"
        path.write_text("\n".join(lexicon_lines), encoding="utf-8")
        assert list(load_lexicon_file(path)) == list(lexicon)
