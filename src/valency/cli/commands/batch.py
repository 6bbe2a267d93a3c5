"""
Check many words concurrently.
"""

from rich.table import Table

from valency.cli.output import console, emit_json, escape
from valency.core.config import EngineConfig
from valency.core.engine import Engine


def add_subparser(subparsers):
    parser = subparsers.add_parser("batch", help="Analyze words on a worker pool")
    parser.add_argument("words", nargs="*", help="Words to analyze")
    parser.add_argument("-w", "--workers", type=int, default=None, help="Pool size (default: cpu count)")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.set_defaults(func=run)


def run(args):
    engine = Engine(config=EngineConfig(max_workers=args.workers))
    results = engine.check_batch(args.words)

    if args.json:
        emit_json([r.to_dict() for r in results])
        return

    table = Table(title=f"{len(results)} words")
    table.add_column("#", justify="right", style="dim")
    table.add_column("word")
    table.add_column("stem")
    table.add_column("valency", justify="right")
    table.add_column("score", justify="right")

    for i, (word, result) in enumerate(zip(args.words, results)):
        if result.ok:
            a = result.value
            table.add_row(str(i), escape(word), a.stem, str(a.valency), f"{a.ambiguity_score:.2f}")
        else:
            table.add_row(str(i), escape(word), f"[red]✗ {result.error.value}[/red]", "", "")

    console.print(table)
