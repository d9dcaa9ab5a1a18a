"""Unit tests for the command line entry point."""

import json

from bible_viewer.cli import main
from bible_viewer.core.bundle import read_bundle


class TestCLI:
    """Test cases for the build, search and lexicon commands."""

    def test_build(self, tmp_path, corpus_lines, lexicon_lines, capsys):
        corpus_file = tmp_path / "corpus.tsv"
        corpus_file.write_text("\n".join(corpus_lines), encoding="utf-8")
        lexicon_file = tmp_path / "lexicon.md"
        lexicon_file.write_text("\n".join(lexicon_lines), encoding="utf-8")
        output = tmp_path / "bundle.json"

        exit_code = main([
            "build",
            "--corpus", str(corpus_file),
            "--lexicon", str(lexicon_file),
            "--output", str(output),
        ])

        assert exit_code == 0
        assert "2 books, 7 verses, 8415 lexicon entries" in capsys.readouterr().out
        corpus, _ = read_bundle(output)
        assert corpus.book_names() == ["בראשית", "שמות"]

    def test_build_bad_corpus(self, tmp_path, lexicon_lines, capsys):
        corpus_file = tmp_path / "corpus.tsv"
        corpus_file.write_text("bookName\nGenesis\t2\t1\tאור\t216\n", encoding="utf-8")
        lexicon_file = tmp_path / "lexicon.md"
        lexicon_file.write_text("\n".join(lexicon_lines), encoding="utf-8")

        exit_code = main([
            "build",
            "--corpus", str(corpus_file),
            "--lexicon", str(lexicon_file),
            "--output", str(tmp_path / "bundle.json"),
        ])

        assert exit_code == 1
        assert "line 2" in capsys.readouterr().err

    def test_search_text(self, bundle_file, capsys):
        assert main(["search", "אור", "--bundle", str(bundle_file)]) == 0
        out = capsys.readouterr().out
        assert "[אור]" in out
        assert out.strip().endswith("1 verses")

    def test_search_json(self, bundle_file, capsys):
        assert main(["search", "מים", "--bundle", str(bundle_file), "--limit", "1", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["total_results"] == 1
        assert data["truncated"] is True

    def test_search_bad_query(self, bundle_file, capsys):
        assert main(["search", "<אוד>", "--bundle", str(bundle_file)]) == 2
        assert "No matching Strong's numbers" in capsys.readouterr().err

    def test_lexicon(self, bundle_file, capsys):
        assert main(["lexicon", "ש.*", "--bundle", str(bundle_file), "--verbs-only", "--format", "json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert [row["tag"] for row in rows] == [7997]
