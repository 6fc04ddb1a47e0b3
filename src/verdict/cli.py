from __future__ import annotations

from pathlib import Path

import typer

from verdict.verbose import LogLevel

app = typer.Typer(name="verdict", help="Evaluate declarative assertion suites")


@app.command()
def run(
    suite: str = typer.Argument(help="Path to check suite YAML"),
    output_dir: str = typer.Option("runs", help="Output directory for logs, junit.xml and summary.json"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Echo run progress to the terminal"
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.DEBUG, "--log-level", help="Level for check diagnostics written to checks.log"
    ),
):
    """Evaluate every case in a check suite."""
    from verdict.config import load_suite
    from verdict.runner import SuiteRunner

    suite_path = Path(suite)
    if not suite_path.exists():
        typer.echo(f"Error: suite file not found: {suite}", err=True)
        raise typer.Exit(1)

    try:
        suite_config = load_suite(suite_path)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    out = Path(output_dir)
    result = SuiteRunner(
        suite_config, output_dir=out, verbose=verbose, check_level=log_level
    ).execute()

    for case in result.cases:
        status = "PASS" if case.all_passed else "FAIL"
        typer.echo(f"{status}  {case.name}")
        for check in case.results:
            if not check.passed:
                typer.echo(f"      {check.name}: {check.message}")

    typer.echo(f"Pass rate: {result.pass_rate:.1f}%")
    typer.echo(f"Report: {out / 'junit.xml'}")
    typer.echo(f"Summary: {out / 'summary.json'}")
    if not verbose:
        typer.echo(f"Run log: {out / 'run.log'}")
    typer.echo(f"Check log: {out / 'checks.log'}")

    if not result.all_passed:
        raise typer.Exit(1)


@app.command()
def schema(
    out: str = typer.Option("verdict-schema.json", "--out", help="Where to write the JSON Schema"),
):
    """Write the JSON Schema of the suite YAML format."""
    from verdict.schema import write_json_schema

    path = Path(out)
    write_json_schema(path)
    typer.echo(f"Schema written: {path}")
