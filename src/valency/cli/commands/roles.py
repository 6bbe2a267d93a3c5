"""
Positional semantic role analysis of a sentence.
"""

from valency.cli.output import console, emit_json, fail
from valency.core.engine import get_engine


def add_subparser(subparsers):
    parser = subparsers.add_parser("roles", help="Assign semantic roles around the main verb")
    parser.add_argument("sentence", help="Sentence (quote it)")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.set_defaults(func=run)


def run(args):
    result = get_engine().analyze_roles(args.sentence)
    if not result.ok:
        fail(result, args.sentence)

    role_map = result.value
    if args.json:
        emit_json(role_map.to_dict())
        return

    console.print(f"verb: [bold]{role_map.verb}[/bold]")
    if not role_map.roles:
        console.print("  [dim](no roles assigned)[/dim]")
    for role, token in role_map.roles.items():
        console.print(f"  {role.value:10} {token}", markup=False)
