#!/usr/bin/env python3
"""
containment CLI - Containment Checks for JSON and YAML Documents

Usage:
    containment run <suite.yaml> [OPTIONS]
    containment validate <suite.yaml>
    containment check <actual-json> <item-json>... [--not]
    containment --version
"""

import json
import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .assertions import AssertionStatus, ContainmentEngine
from .assertions.messages import describe_items
from .reporting import CheckStatus, Reporter, RunStatus
from .runner import run_suite
from .suite import Check, load_suite

app = typer.Typer(
    name="containment",
    help="Containment checks for JSON and YAML documents",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"containment v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    debug: bool = typer.Option(
        False, "--debug",
        help="Log evaluation details"
    ),
):
    """
    containment - Containment checks for JSON and YAML documents

    Check that documents include (or exclude) values, keys and
    key/value subsets, using declarative YAML suites.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _print_check(check: Check, reporter: Reporter) -> None:
    record = reporter.report.get_check(check.id)
    label = f"[bold]{escape(check.id)}[/bold] ({check.mode.value} at {escape(check.path)})"
    if record.status == CheckStatus.PASSED:
        console.print(f"  [green]✅ {label}[/green]")
    elif record.status == CheckStatus.FAILED:
        console.print(f"  [red]❌ {label}[/red]")
        console.print(f"     {escape(record.failure_message or '')}")
        if record.missing:
            console.print(f"     missing: {escape(record.missing)}")
        if record.diff:
            console.print(escape(record.diff))
    elif record.status == CheckStatus.SKIPPED:
        console.print(f"  [yellow]⏭️  {label}[/yellow] {escape(record.failure_message or '')}")
    else:
        console.print(f"  [red]⚠️  {label}[/red] {escape(record.error_message or '')}")


@app.command()
def run(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show failures and final status"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    report_dir: Path = typer.Option(
        Path("reports"), "--report-dir", "-r",
        help="Directory to save JSON reports"
    ),
    no_report: bool = typer.Option(
        False, "--no-report",
        help="Don't save a JSON report file"
    ),
):
    """
    Run a containment suite.

    Evaluate every check against the suite's data and generate
    a run report.
    """
    if not quiet and output != "json":
        console.print(f"\n📄 Loading suite: {suite_file}")

    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(escape(str(validation)))
        raise typer.Exit(code=1)

    live = not quiet and output != "json"
    if live:
        console.print(f"   [green]✅ Valid suite:[/green] {escape(suite.name)} ({len(suite.checks)} checks)\n")

    reporter = run_suite(suite, on_check=_print_check if live else None)
    report = reporter.report

    if output == "json":
        console.print_json(data=report.to_dict())
    elif quiet:
        for record in report.checks:
            if record.status in (CheckStatus.FAILED, CheckStatus.ERROR):
                console.print(escape(f"[{record.check_id}] {record.failure_message or record.error_message}"))
        console.print(f"{report.status.value.upper()}: {report.passed_checks}/{report.total_checks} checks passed")
    else:
        console.print("\n" + escape(report.summary()))

    if not no_report:
        report_dir.mkdir(parents=True, exist_ok=True)
        report_path = report_dir / f"{report.run_id}.json"
        reporter.save_json(report_path)
        if live:
            console.print(f"\n📁 Report saved: {report_path}")

    if report.status == RunStatus.PASSED:
        raise typer.Exit(code=0)
    raise typer.Exit(code=1)


@app.command()
def validate(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a suite YAML file.

    Check the schema and report any errors without running the checks.
    """
    console.print(f"\n📄 Validating: {suite_file}")

    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(escape(str(validation)))
        raise typer.Exit(code=1)

    console.print(f"\n[green]✅ Valid suite:[/green] {escape(suite.name)}")
    if suite.data_file:
        console.print(f"   Data: {suite.data_file}")
    console.print(f"   Checks: {len(suite.checks)}")

    table = Table(title="Checks")
    table.add_column("ID", style="cyan")
    table.add_column("Mode", style="magenta")
    table.add_column("Path")
    table.add_column("Expected")

    for check in suite.checks:
        table.add_row(
            escape(check.id),
            check.mode.value,
            escape(check.path),
            escape(describe_items(check.expected)),
        )

    console.print()
    console.print(table)
    raise typer.Exit(code=0)


@app.command()
def check(
    actual: str = typer.Argument(..., help="Actual value as JSON"),
    items: List[str] = typer.Argument(..., help="Expected items as JSON"),
    negate: bool = typer.Option(
        False, "--not",
        help="Assert that not every item is included"
    ),
    no_diff: bool = typer.Option(
        False, "--no-diff",
        help="Don't print a diff on failure"
    ),
):
    """
    Check one value from the command line.

    Example: containment check '{"a": 1, "b": 2}' '{"a": 1}'
    """
    try:
        actual_value = json.loads(actual)
        expected = [json.loads(item) for item in items]
    except json.JSONDecodeError as e:
        console.print(f"[red]❌ Invalid JSON:[/red] {escape(str(e))}")
        raise typer.Exit(code=2)

    engine = ContainmentEngine(diff=not no_diff)
    if negate:
        result = engine.excludes(actual_value, *expected)
    else:
        result = engine.includes(actual_value, *expected)

    if result.status == AssertionStatus.PASSED:
        console.print(f"[green]✅ {escape(result.message)}[/green]")
        raise typer.Exit(code=0)

    if result.status == AssertionStatus.FAILED:
        console.print(f"[red]❌ {escape(result.message)}[/red]")
        if result.diff:
            console.print(escape(result.diff))
    else:
        console.print(f"[red]⚠️  {escape(result.message)}[/red]")
    raise typer.Exit(code=1)


@app.command()
def info():
    """
    Show information about containment.
    """
    console.print(f"""
[bold]containment[/bold] v{__version__}

Containment checks for JSON and YAML documents

[bold]Features:[/bold]
  • Substring, element, key and key/value subset containment
  • Composable matchers: $within, $contains, $matches, $lt/$gt, $include
  • JSONPath selection of the value under test
  • Readable failure messages with diffs
  • Detailed JSON run reports

[bold]Quick Start:[/bold]
  containment run checks/users.yaml
  containment validate checks/users.yaml
  containment check '[1, 2, 3]' 1 4
""")


if __name__ == "__main__":
    app()
