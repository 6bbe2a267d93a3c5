"""
Show the lexicon pattern for a stem.
"""

from valency.cli.output import console, emit_json, escape, fail
from valency.core.engine import get_engine
from valency.core.roles import format_roles


def add_subparser(subparsers):
    parser = subparsers.add_parser("pattern", help="Show the valency pattern of a stem")
    parser.add_argument("stem", help="Canonical verb stem (exact match)")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.set_defaults(func=run)


def run(args):
    result = get_engine().get_valency_pattern(args.stem)
    if not result.ok:
        fail(result, args.stem)

    pattern = result.value
    if args.json:
        emit_json(pattern.to_dict())
        return

    console.print(f"[bold]{escape(args.stem)}[/bold]  valency {pattern.valency}")
    console.print(f"  required: {format_roles(pattern.required)}")
    console.print(f"  optional: {format_roles(pattern.optional) or '(none)'}")
