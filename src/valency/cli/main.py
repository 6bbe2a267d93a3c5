"""
Valency CLI.
"""

import argparse
import logging

from rich.logging import RichHandler

from valency.cli.commands import check, batch, stem, pattern, rank, roles, footprint, lexicon


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(prog="valency", description="Edge valency checker")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    check.add_subparser(subparsers)
    batch.add_subparser(subparsers)
    stem.add_subparser(subparsers)
    pattern.add_subparser(subparsers)
    rank.add_subparser(subparsers)
    roles.add_subparser(subparsers)
    footprint.add_subparser(subparsers)
    lexicon.add_subparser(subparsers)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
