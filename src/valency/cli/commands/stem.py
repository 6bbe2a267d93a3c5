"""
Resolve words to their stems.
"""

from valency.cli.output import console
from valency.core.engine import get_engine


def add_subparser(subparsers):
    parser = subparsers.add_parser("stem", help="Show the stem of each word")
    parser.add_argument("words", nargs="+", help="Words to stem")
    parser.set_defaults(func=run)


def run(args):
    engine = get_engine()
    for word in args.words:
        console.print(f"{word} → {engine.get_stem(word)}", markup=False)
