"""
Check the valency of one or more words.
"""

import sys

from valency.cli.output import console, emit_json, escape
from valency.core.engine import get_engine


def add_subparser(subparsers):
    parser = subparsers.add_parser("check", help="Analyze the valency of words")
    parser.add_argument("words", nargs="+", help="Words to analyze")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.set_defaults(func=run)


def run(args):
    engine = get_engine()
    results = [engine.check(w) for w in args.words]

    if args.json:
        emit_json([r.to_dict() for r in results])
    else:
        for word, result in zip(args.words, results):
            if result.ok:
                console.print(engine.visualize(result.value), markup=False)
            else:
                console.print(f"[red]✗ {escape(repr(word))}: {result.error.value}[/red]")

    if not all(r.ok for r in results):
        sys.exit(1)
