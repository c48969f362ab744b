"""main.py – Umbrella CLI entry point for flagparse.

Registers the subcommand typer apps.  Single-command modules are registered
as flat ``app.command()`` entries, avoiding the Typer "group" behaviour of
``add_typer()``; multi-command modules (currently only ``schema``) use
``add_typer()``.
"""

import typer

from flagparse import check, schema

app = typer.Typer(
    help="Declarative command-line flag parsing: try argument vectors against a flag schema.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Typical workflow:[/bold]
  flagparse schema add output --long=--output --value path
  flagparse schema list          Show the declared flags
  flagparse check -- -o out.txt  Parse a command line against the schema

[dim]All subcommands read flagparse.toml from the current directory or a parent.
Run 'flagparse <cmd> --help' for details.[/dim]""",
)

app.command(
    name="check",
    help="Parse an argument vector against a flag schema.",
    epilog=check.app.info.epilog,
)(check.main)
app.add_typer(
    schema.app, name="schema", help="Read and edit flagparse.toml programmatically."
)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
