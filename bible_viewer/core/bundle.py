"""JSON bundle holding the encoded corpus and lexicon.

Layout::

    {
        "version": 1,
        "books": [{"name": "בראשית", "chapters": [["<base64 verse>", ...], ...]}, ...],
        "lexicon": "<base64>"
    }

The lexicon is encoded with the same codec as verses: entry ``i`` is the
word of Strong's number ``i`` with its category index in the tag slot.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import structlog

from .codec import WordCodec, default_codec
from .corpus import Book, Corpus
from .errors import CodecError, IngestionError
from .lexicon import UNKNOWN, Lexicon, LexiconEntry, category_index, category_name, sentinel_entry
from .normalizer import TextNormalizer, default_normalizer

logger = structlog.get_logger(__name__)

BUNDLE_VERSION = 1


def encode_lexicon(lexicon: Lexicon, codec: Optional[WordCodec] = None) -> str:
    codec = codec or default_codec
    return codec.encode_base64((entry.word, category_index(entry.category)) for entry in lexicon)


def decode_lexicon(
    encoded: str,
    codec: Optional[WordCodec] = None,
    normalizer: Optional[TextNormalizer] = None,
) -> Lexicon:
    """Rebuild a lexicon from its wire string; searchable forms are recomputed."""
    codec = codec or default_codec
    normalizer = normalizer or default_normalizer
    entries = []
    for tag, (word, index) in enumerate(codec.decode_base64(encoded)):
        category = category_name(index)
        if category == UNKNOWN:
            entries.append(sentinel_entry(tag))
            continue
        entries.append(
            LexiconEntry(
                tag=tag,
                word=word,
                category=category,
                searchable=normalizer.make_searchable(word),
            )
        )
    return Lexicon(entries)


def build_bundle(corpus: Corpus, lexicon: Lexicon, codec: Optional[WordCodec] = None) -> Dict[str, Any]:
    """
    Encode a corpus and a lexicon into a JSON-ready bundle.

    Args:
        corpus: Parsed corpus
        lexicon: Parsed lexicon
        codec: Word codec, the default one if omitted

    Returns:
        The bundle dictionary
    """
    codec = codec or default_codec
    bundle = {
        "version": BUNDLE_VERSION,
        "books": [
            {
                "name": book.name,
                "chapters": [[codec.encode_base64(verse) for verse in chapter] for chapter in book.chapters],
            }
            for book in corpus
        ],
        "lexicon": encode_lexicon(lexicon, codec),
    }
    logger.info("Bundle built", total_books=len(corpus), total_lexicon_entries=len(lexicon))
    return bundle


def load_bundle(data: Dict[str, Any], codec: Optional[WordCodec] = None) -> Tuple[Corpus, Lexicon]:
    """
    Decode a bundle back into a corpus and a lexicon.

    Raises:
        IngestionError: if the bundle is malformed or of another version
        CodecError: if an encoded verse or the lexicon is corrupt
    """
    codec = codec or default_codec
    version = data.get("version")
    if version != BUNDLE_VERSION:
        raise IngestionError(f"Unsupported bundle version {version!r}, expected {BUNDLE_VERSION}")
    try:
        books = tuple(
            Book(
                name=book["name"],
                chapters=tuple(
                    tuple(tuple(codec.decode_base64(verse)) for verse in chapter) for chapter in book["chapters"]
                ),
            )
            for book in data["books"]
        )
        lexicon = decode_lexicon(data["lexicon"], codec)
    except (KeyError, TypeError) as e:
        raise IngestionError(f"Malformed bundle: {e!r}") from e
    except CodecError:
        logger.error("Corrupt bundle data")
        raise

    corpus = Corpus(books=books)
    logger.info("Bundle loaded", **corpus.get_stats(), total_lexicon_entries=len(lexicon))
    return corpus, lexicon


def write_bundle(path: Union[str, Path], corpus: Corpus, lexicon: Lexicon) -> None:
    bundle = build_bundle(corpus, lexicon)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(bundle, f, ensure_ascii=False)
    logger.info("Bundle written", path=str(path))


def read_bundle(path: Union[str, Path]) -> Tuple[Corpus, Lexicon]:
    logger.info("Reading bundle", path=str(path))
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise IngestionError("Malformed bundle: expected a JSON object")
    return load_bundle(data)
