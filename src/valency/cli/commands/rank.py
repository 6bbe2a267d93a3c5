"""
Rank the verb interpretations of a sentence by ambiguity.
"""

from rich.table import Table

from valency.cli.output import console, emit_json, escape, fail
from valency.core.engine import get_engine
from valency.core.roles import format_roles


def add_subparser(subparsers):
    parser = subparsers.add_parser("rank", help="Rank verb interpretations in a sentence")
    parser.add_argument("sentence", help="Sentence (quote it)")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.set_defaults(func=run)


def run(args):
    result = get_engine().eliminate_ambiguity(args.sentence)
    if not result.ok:
        fail(result, args.sentence)

    if args.json:
        emit_json(result.to_dict()["value"])
        return

    table = Table(title=escape(args.sentence))
    table.add_column("rank", justify="right", style="dim")
    table.add_column("verb", style="bold")
    table.add_column("valency", justify="right")
    table.add_column("roles")
    table.add_column("score", justify="right")

    for i, interp in enumerate(result.value, 1):
        table.add_row(str(i), interp.verb, str(interp.valency), format_roles(interp.roles), f"{interp.score:.2f}")

    console.print(table)
