"""check.py – Parse an argument vector against a flag schema.

Loads ``flagparse.toml``, runs the parser on the arguments given after
``--`` and prints a Rich table of flag results, positional tokens and errors
(or the same data as JSON).  Exits with code 1 when the parse failed.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from flagparse.cli import SchemaOption, get_schema, json_print
from flagparse.parser import ParseOutcome

app = typer.Typer(
    help="Parse an argument vector against a flag schema.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]
  flagparse check -- -v --output=out.txt      Try a command line
  flagparse check --json -- -o                Machine-readable result
  flagparse check -s tool.toml -- --help      Use an explicit schema file""",
)


def _render(console: Console, program: str, outcome: ParseOutcome) -> None:
    """Print flag results, positionals and errors."""
    tbl = Table(title=program or None, show_header=True, header_style="bold")
    tbl.add_column("Flag")
    tbl.add_column("Set", justify="center")
    tbl.add_column("Value")
    for result in outcome.results:
        definition = result.definition
        is_set = "[green]yes[/]" if result.is_set else "[dim]no[/]"
        if result.has_value:
            value = escape(result.value.text)
        elif definition.value is not None and definition.value.default:
            value = f"[dim]{escape(definition.value.default)} (default)[/]"
        else:
            value = ""
        label = definition.label
        if definition.required:
            label += " [yellow]*[/]"
        tbl.add_row(label, is_set, value)
    console.print(tbl)

    if outcome.positionals:
        console.print("[bold]Positional:[/] " + escape(" ".join(outcome.positionals)))

    for err in outcome.errors:
        console.print(f"[red bold]{err.kind.value}:[/red bold] {escape(str(err))}")

    if outcome.success:
        console.print("[green]OK[/]")


@app.command()
def main(
    args: list[str] | None = typer.Argument(
        None, help="Arguments to parse (put them after '--')."
    ),
    schema: Path | None = SchemaOption,
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
) -> None:
    """Parse ARGS against the schema and report what was recognised."""
    loaded = get_schema(schema, json_mode=json_output)
    parser = loaded.build_parser()
    ok = parser.parse([loaded.program or "program", *(args or [])])

    if json_output:
        json_print({"program": loaded.program, **parser.outcome.to_dict()})
    else:
        _render(Console(), loaded.program, parser.outcome)

    if not ok:
        raise typer.Exit(code=1)


def main_entry() -> None:
    """Package entry point for ``flagparse-check``."""
    app()
