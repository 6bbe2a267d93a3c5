"""
Report the serialized size of the lexicon and stemma.
"""

from valency.cli.output import console, emit_json
from valency.core.engine import get_engine


def add_subparser(subparsers):
    parser = subparsers.add_parser("footprint", help="Show table sizes")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.set_defaults(func=run)


def run(args):
    report = get_engine().memory_footprint()

    if args.json:
        emit_json(report.to_dict())
        return

    console.print(f"lexicon: {report.lexicon_bytes:6d} bytes  ({report.lexicon_kb} KB)")
    console.print(f"stemma:  {report.stemma_bytes:6d} bytes  ({report.stemma_kb} KB)")
    console.print(f"[bold]total:   {report.total_bytes:6d} bytes  ({report.total_kb} KB)[/bold]")
