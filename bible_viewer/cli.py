"""Command line entry point: build the bundle, search it from the terminal."""

import argparse
import json
import sys
from typing import List, Optional

import structlog

from .config import configure_logging, get_settings
from .core.bundle import write_bundle
from .core.engine import SearchEngine
from .core.errors import BibleViewerError, QueryError
from .core.ingest import load_corpus_file, load_lexicon_file

logger = structlog.get_logger(__name__)


def cmd_build(args: argparse.Namespace) -> int:
    corpus = load_corpus_file(args.corpus, book_filter=args.books)
    lexicon = load_lexicon_file(args.lexicon)
    write_bundle(args.output, corpus, lexicon)
    stats = corpus.get_stats()
    print(f"{args.output}: {stats['total_books']} books, {stats['total_verses']} verses, {len(lexicon)} lexicon entries")
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    engine = SearchEngine.from_bundle(args.bundle, max_results=args.limit)
    response = engine.search(args.query, verbs_only=args.verbs_only)
    if args.format == "json":
        print(response.model_dump_json(indent=2))
        return 0

    print(f"pattern: {response.pattern}")
    for result in response.results:
        marked = [
            f"[{word}]" if index in result.matched_word_indexes else word
            for index, word in enumerate(result.words)
        ]
        print(f"{result.location}\t{' '.join(marked)}")
    suffix = " (truncated)" if response.truncated else ""
    print(f"{response.total_results} verses{suffix}")
    return 0


def cmd_lexicon(args: argparse.Namespace) -> int:
    engine = SearchEngine.from_bundle(args.bundle)
    entries = engine.find_entries(args.pattern, verbs_only=args.verbs_only)
    if args.format == "json":
        rows = [
            {"tag": entry.tag, "word": entry.word, "category": entry.category, "searchable": entry.searchable}
            for entry in entries
        ]
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return 0
    for entry in entries:
        print(f"{entry.tag}\t{entry.word}\t{entry.category}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Hebrew Bible viewer: build the encoded bundle and run extended searches."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_cmd_parser = subparsers.add_parser("build", help="Encode the corpus TSV and the lexicon table into a bundle.")
    build_cmd_parser.add_argument("--corpus", default=settings.corpus_file, required=not settings.corpus_file,
                                  help="Corpus TSV (bookName, chapter, verse, word, strong).")
    build_cmd_parser.add_argument("--lexicon", default=settings.lexicon_file, required=not settings.lexicon_file,
                                  help="Lexicon Markdown table.")
    build_cmd_parser.add_argument("--output", default=settings.bundle_file or "bible-bundle.json",
                                  help="Bundle JSON to write.")
    build_cmd_parser.add_argument("--books", default=settings.book_filter,
                                  help="Only keep books whose Hebrew name matches this regex.")
    build_cmd_parser.set_defaults(func=cmd_build)

    search_parser = subparsers.add_parser("search", help="Run an extended query over a bundle.")
    search_parser.add_argument("query", help="Extended search query.")
    search_parser.add_argument("--bundle", default=settings.bundle_file, required=not settings.bundle_file,
                               help="Bundle JSON to search.")
    search_parser.add_argument("--limit", type=int, default=settings.max_search_results, help="Max verses.")
    search_parser.add_argument("--verbs-only", action="store_true", help="Restrict <...> blocks to verbs.")
    search_parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")
    search_parser.set_defaults(func=cmd_search)

    lexicon_parser = subparsers.add_parser("lexicon", help="Find lexicon entries by number or word pattern.")
    lexicon_parser.add_argument("pattern", help="Pattern, as inside a <...> block.")
    lexicon_parser.add_argument("--bundle", default=settings.bundle_file, required=not settings.bundle_file,
                                help="Bundle JSON to read.")
    lexicon_parser.add_argument("--verbs-only", action="store_true", help="Keep only verbs.")
    lexicon_parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")
    lexicon_parser.set_defaults(func=cmd_lexicon)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(get_settings())
    try:
        return args.func(args)
    except QueryError as exc:
        print(f"error: {exc.reason}", file=sys.stderr)
        return 2
    except BibleViewerError as exc:
        logger.error("Command failed", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
