"""
Shared console output for commands.
"""

import sys

from rich import print_json
from rich.console import Console
from rich.markup import escape

from valency.core.result import Result

console = Console()


def fail(result: Result, subject: str) -> None:
    console.print(f"[red]✗ {escape(subject)}: {result.error.value}[/red]")
    sys.exit(1)


def emit_json(data) -> None:
    print_json(data=data)
