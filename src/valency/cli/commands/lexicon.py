"""
List lexicon entries with their inflected forms.
"""

from valency.cli.output import console
from valency.core.engine import get_engine
from valency.core.roles import format_roles


def add_subparser(subparsers):
    parser = subparsers.add_parser("lexicon", help="List lexicon entries")
    parser.add_argument("--valency", type=int, default=None, help="Only verbs with this valency")
    parser.set_defaults(func=run)


def run(args):
    engine = get_engine()
    shown = 0

    for stem in engine.lexicon.stems():
        pattern = engine.get_valency_pattern(stem).unwrap()
        if args.valency is not None and pattern.valency != args.valency:
            continue
        forms = ", ".join(engine.stemma.forms_of(stem)) or "-"
        console.print(f"[bold]{stem:14}[/bold] {pattern.valency}  {format_roles(pattern.required)}")
        console.print(f"  [dim]optional: {format_roles(pattern.optional)}  forms: {forms}[/dim]")
        shown += 1

    if shown == 0:
        console.print("No entries.")
