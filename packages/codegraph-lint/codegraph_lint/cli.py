"""
codegraph-lint CLI

Command-line interface for running no-restricted-properties over
JavaScript / TypeScript files.

Exit codes:
    0  no diagnostics
    1  diagnostics reported
    2  configuration or usage error
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from codegraph_lint.config import get_settings
from codegraph_lint.errors import LintError, SchemaValidationError
from codegraph_lint.index.restriction_index import RestrictionModel
from codegraph_lint.linter import Linter, LintResult
from codegraph_lint.logging import setup_logger
from codegraph_lint.registry.loader import load_restrictions_yaml, parse_restrictions
from codegraph_lint.types.entry import RestrictionEntry

EXIT_CLEAN = 0
EXIT_DIAGNOSTICS = 1
EXIT_USAGE = 2

IGNORED_DIRS = frozenset(["node_modules", ".git", "dist", "build"])

app = typer.Typer(
    name="codegraph-lint",
    help="codegraph-lint - disallow certain properties on certain objects",
    add_completion=False,
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging from settings before any command runs."""
    settings = get_settings()
    setup_logger(level="DEBUG" if verbose else settings.log_level, structured=settings.structured_logs)


@app.command()
def check(
    paths: list[Path] = typer.Argument(..., help="Files or directories to lint"),
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML/JSON restrictions file"),
    rules: list[str] = typer.Option(
        [], "--rule", "-r", help='Inline restriction as JSON, e.g. \'{"object": "foo", "property": "bar"}\''
    ),
    output_format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
):
    """
    Lint files for restricted property accesses.
    """
    if output_format not in ("text", "json"):
        err_console.print(f"[red]Unknown format: {output_format}[/red]")
        raise typer.Exit(EXIT_USAGE)

    try:
        entries = _load_entries(config, rules)
    except LintError as e:
        _print_error(e)
        raise typer.Exit(EXIT_USAGE) from e

    linter = Linter(entries)
    results: list[LintResult] = []

    for file_path in _collect_files(paths):
        try:
            results.append(linter.lint_file(file_path))
        except (LintError, OSError, UnicodeDecodeError) as e:
            err_console.print(f"[yellow]Skipping {escape(str(file_path))}: {escape(str(e))}[/yellow]")

    if output_format == "json":
        _print_json(results)
    else:
        _print_text(results)

    found = any(result.has_diagnostics for result in results)
    raise typer.Exit(EXIT_DIAGNOSTICS if found else EXIT_CLEAN)


@app.command()
def explain(
    config: Path | None = typer.Option(None, "--config", "-c", help="YAML/JSON restrictions file"),
    rules: list[str] = typer.Option([], "--rule", "-r", help="Inline restriction as JSON"),
):
    """
    Show how configured restrictions are compiled.
    """
    try:
        entries = _load_entries(config, rules)
    except LintError as e:
        _print_error(e)
        raise typer.Exit(EXIT_USAGE) from e

    model = RestrictionModel.build(entries)

    table = Table(title=f"Restrictions ({model.size()})")
    table.add_column("Tier", style="cyan")
    table.add_column("Pattern", style="bold")
    table.add_column("Message", style="dim")

    for obj, props in model.scoped.items():
        for prop, message in props.items():
            table.add_row("object.property", escape(f"{obj}.{prop}"), escape(message or ""))
    for prop, message in model.global_properties.items():
        table.add_row("property", escape(f"*.{prop}"), escape(message or ""))
    for obj, message in model.global_objects.items():
        table.add_row("object", escape(f"{obj}.*"), escape(message or ""))

    console.print(table)


# ============================================================
# Helpers
# ============================================================


def _load_entries(config: Path | None, rules: list[str]) -> list[RestrictionEntry]:
    raw: list[object] = []

    for i, rule in enumerate(rules):
        try:
            raw.append(json.loads(rule))
        except json.JSONDecodeError as e:
            raise SchemaValidationError(
                "Invalid --rule JSON",
                [{"source": "--rule", "index": i, "error": str(e)}],
            ) from e

    entries = load_restrictions_yaml(config) if config is not None else []
    inline = parse_restrictions(raw, source="--rule")

    known = set(entries)
    duplicates = [
        {
            "source": "--rule",
            "index": i,
            "error": f"Duplicate restriction '{entry.describe()}' (already defined in {config})",
        }
        for i, entry in enumerate(inline)
        if entry in known
    ]
    if duplicates:
        raise SchemaValidationError(f"Failed to validate {len(duplicates)} restrictions from --rule", duplicates)

    return entries + inline


def _collect_files(paths: list[Path]) -> list[Path]:
    settings = get_settings()
    extensions = {ext.lower() for ext in settings.extensions}
    max_bytes = settings.max_file_size_kb * 1024

    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            candidates = sorted(
                p
                for p in path.rglob("*")
                if p.is_file()
                and p.suffix.lower() in extensions
                and not IGNORED_DIRS.intersection(p.relative_to(path).parts)
            )
        elif path.is_file():
            candidates = [path]
        else:
            err_console.print(f"[yellow]Path not found: {escape(str(path))}[/yellow]")
            continue

        for candidate in candidates:
            if max_bytes and candidate.stat().st_size > max_bytes:
                err_console.print(
                    f"[yellow]Skipping {escape(str(candidate))}: larger than {settings.max_file_size_kb} KB[/yellow]"
                )
                continue
            files.append(candidate)

    return files


def _print_text(results: list[LintResult]) -> None:
    total = 0

    for result in results:
        if not result.diagnostics:
            continue

        console.print(f"\n[bold underline]{escape(result.file_path)}[/bold underline]")
        for diagnostic in result.diagnostics:
            total += 1
            location = f"{diagnostic.span.start_line}:{diagnostic.span.start_col + 1}"
            console.print(
                f"  [dim]{location:>8}[/dim]  [red]error[/red]  {escape(diagnostic.message)}  "
                f"[dim]{diagnostic.rule_id}[/dim]",
                highlight=False,
            )
            source_line = result.source.get_line(diagnostic.span.start_line).strip()
            if source_line:
                console.print(Text(f"            {source_line}", style="dim"))

    if total:
        console.print(f"\n[bold red]✖ {total} problem{'s' if total != 1 else ''}[/bold red]")
    else:
        console.print("[green]No restricted property accesses found.[/green]")


def _print_json(results: list[LintResult]) -> None:
    payload = [
        {
            "file": result.file_path,
            "partial": result.is_partial,
            "diagnostics": [diagnostic.to_dict() for diagnostic in result.diagnostics],
        }
        for result in results
    ]
    # Plain echo: rich would re-wrap long lines
    typer.echo(json.dumps(payload, indent=2))


def _print_error(error: LintError) -> None:
    err_console.print(Text(str(error), style="red"))
    if isinstance(error, SchemaValidationError):
        for detail in error.errors:
            err_console.print(Text(f"  {detail}", style="dim"))


if __name__ == "__main__":
    app()
