"""
esreview CLI — Command-Line Interface
=====================================

Runs exactly one demonstration operation per invocation.

Usage:
    esreview create
    esreview index
    esreview get 1
    esreview search
    esreview phrase --field content --phrase 好评
    esreview avg --field score
    esreview update
    esreview update-raw
    esreview --hosts http://es1:9200 --index reviews search
"""

import argparse
import logging
from typing import List, Optional


def build_index(args):
    """Connect with the global options and bind the target index."""
    from .cluster import connect
    from .config import load_settings, split_hosts
    from .core import ReviewIndex

    settings = load_settings(
        hosts=split_hosts(args.hosts) if args.hosts else None,
        index=args.index,
        verify=args.check or None
    )
    return ReviewIndex(settings.index, connect(settings))


def cmd_create(index, args):
    """Create the index."""
    from .demo import create_index
    create_index(index)


def cmd_index(index, args):
    """Index the sample review."""
    from .demo import index_document
    index_document(index)


def cmd_get(index, args):
    """Fetch a document by id."""
    from .demo import get_document
    get_document(index, args.id)


def cmd_search(index, args):
    """List every document."""
    from .demo import search_all
    search_all(index)


def cmd_phrase(index, args):
    """Phrase search."""
    from .demo import search_phrase
    search_phrase(index, field=args.field, phrase=args.phrase)


def cmd_avg(index, args):
    """Average of a numeric field."""
    from .demo import average_score
    average_score(index, field=args.field)


def cmd_update(index, args):
    """Update with the revised review."""
    from .demo import update_document
    update_document(index, doc_id=args.id)


def cmd_update_raw(index, args):
    """Update with the preformatted JSON body."""
    from .demo import update_document_raw
    update_document_raw(index, doc_id=args.id)


COMMANDS = {
    "create": cmd_create,
    "index": cmd_index,
    "get": cmd_get,
    "search": cmd_search,
    "phrase": cmd_phrase,
    "avg": cmd_avg,
    "update": cmd_update,
    "update-raw": cmd_update_raw,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esreview",
        description="esreview — Elasticsearch review document walkthrough"
    )

    # Global options
    parser.add_argument(
        "--hosts",
        help="Elasticsearch hosts (comma-separated, default http://localhost:9200)",
        default=None
    )
    parser.add_argument(
        "--index",
        help="Index name (default my-review-1)",
        default=None
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Ping the cluster before running the command"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("create", help="Create the index")
    subparsers.add_parser("index", help="Index the sample review")

    get_parser = subparsers.add_parser("get", help="Fetch a document by id")
    get_parser.add_argument("id", nargs="?", default="1", help="Document id")

    subparsers.add_parser("search", help="Match-all search")

    phrase_parser = subparsers.add_parser("phrase", help="Phrase search")
    phrase_parser.add_argument("--field", default="content", help="Field to search")
    phrase_parser.add_argument("--phrase", default="好评", help="Exact phrase")

    avg_parser = subparsers.add_parser("avg", help="Average aggregation")
    avg_parser.add_argument("--field", default="score", help="Numeric field")

    update_parser = subparsers.add_parser("update", help="Update with a typed review")
    update_parser.add_argument("--id", default="1", help="Document id")

    raw_parser = subparsers.add_parser("update-raw", help="Update with raw JSON")
    raw_parser.add_argument("--id", default="1", help="Document id")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    from .cluster import ConnectionFailed

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )

    if args.command not in COMMANDS:
        parser.print_help()
        return 0

    try:
        index = build_index(args)
    except ConnectionFailed as e:
        print(f"NewClient failed, err: {e}")
        return 1

    try:
        COMMANDS[args.command](index, args)
    finally:
        index.client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
