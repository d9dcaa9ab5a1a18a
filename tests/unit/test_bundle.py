"""Unit tests for the encoded JSON bundle."""

import json

import pytest

from bible_viewer.core.bundle import (
    BUNDLE_VERSION,
    build_bundle,
    decode_lexicon,
    encode_lexicon,
    load_bundle,
    read_bundle,
)
from bible_viewer.core.errors import CodecError, IngestionError


class TestBundle:
    """Test cases for building and loading bundles."""

    def test_bundle_layout(self, corpus, lexicon):
        bundle = build_bundle(corpus, lexicon)
        assert bundle["version"] == BUNDLE_VERSION
        assert [book["name"] for book in bundle["books"]] == ["בראשית", "שמות"]
        assert [len(chapter) for chapter in bundle["books"][0]["chapters"]] == [3, 1]
        assert all(isinstance(verse, str) for verse in bundle["books"][1]["chapters"][0])

    def test_load_restores_corpus_and_lexicon(self, corpus, lexicon):
        loaded_corpus, loaded_lexicon = load_bundle(build_bundle(corpus, lexicon))
        assert loaded_corpus == corpus
        assert list(loaded_lexicon) == list(lexicon)

    def test_lexicon_sentinels_survive(self, lexicon):
        decoded = decode_lexicon(encode_lexicon(lexicon))
        assert len(decoded) == len(lexicon)
        assert decoded.get(1).is_sentinel
        assert decoded.get(8000).is_sentinel
        assert decoded.get(7997).is_verb

    def test_unsupported_version(self, corpus, lexicon):
        bundle = build_bundle(corpus, lexicon)
        bundle["version"] = BUNDLE_VERSION + 1
        with pytest.raises(IngestionError):
            load_bundle(bundle)

    def test_missing_keys(self):
        with pytest.raises(IngestionError):
            load_bundle({"version": BUNDLE_VERSION, "lexicon": ""})

    def test_corrupt_verse(self, lexicon):
        bundle = {
            "version": BUNDLE_VERSION,
            "books": [{"name": "בראשית", "chapters": [["AAAA"]]}],
            "lexicon": encode_lexicon(lexicon),
        }
        with pytest.raises(CodecError):
            load_bundle(bundle)

    def test_write_and_read(self, bundle_file, corpus, lexicon):
        loaded_corpus, loaded_lexicon = read_bundle(bundle_file)
        assert loaded_corpus == corpus
        assert len(loaded_lexicon) == len(lexicon)
        # Hebrew is written as-is, not as escapes
        assert "בראשית" in bundle_file.read_text(encoding="utf-8")

    def test_read_rejects_non_object(self, tmp_path):
        path = tmp_path / "bundle.json"
        path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        with pytest.raises(IngestionError):
            read_bundle(path)
