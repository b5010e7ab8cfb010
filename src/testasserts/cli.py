from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="testasserts", help="Equality and hash consistency checks")


@app.callback()
def main() -> None:
    """Equality and hash consistency checks."""


@app.command()
def check(
    path: str = typer.Argument(help="Path to a YAML check file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Append debug output to this file"
    ),
):
    """Evaluate every check declared in a YAML file."""
    from testasserts.checks import evaluate_check
    from testasserts.config import load_checks
    from testasserts.verbose import setup_logger

    check_path = Path(path)
    if not check_path.is_file():
        typer.echo(f"Error: check file not found: {path}", err=True)
        raise typer.Exit(1)

    logger = setup_logger(
        Path(debug_log) if debug_log else None, verbose=verbose
    )
    logger.debug("Loading checks from %s", check_path)

    try:
        check_file = load_checks(check_path)
    except (OSError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    results = [evaluate_check(c) for c in check_file.checks]
    passed = 0
    for result in results:
        if result.passed:
            passed += 1
            typer.echo(f"PASS {result.name}")
        else:
            typer.echo(f"FAIL {result.name}: {result.message}")

    typer.echo(f"{passed}/{len(results)} checks passed")
    if passed != len(results):
        raise typer.Exit(1)
