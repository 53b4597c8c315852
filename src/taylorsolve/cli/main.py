"""Main CLI entry point for taylorsolve."""

import typer
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.table import Table

from ..dynamics import list_available_systems
from ..workflow import run_pipeline_from_config_file

app = typer.Typer(
    name="taylorsolve",
    help="Fixed-step truncated Taylor-series ODE solver",
    add_completion=False,
)

console = Console()


@app.command()
def run(
    config: Path = typer.Argument(..., help="Configuration file path"),
    overrides: Optional[List[str]] = typer.Argument(
        None, help="Config overrides, e.g. simulation.time.dt=0.001"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory"),
    verbose: bool = typer.Option(True, "--verbose/--quiet", "-v/-q", help="Verbose output"),
    save_intermediate: bool = typer.Option(True, "--save/--no-save", help="Save figures and summary"),
):
    """Solve the system described by a configuration file."""
    try:
        results = run_pipeline_from_config_file(
            str(config),
            output_dir=str(output) if output else None,
            overrides=overrides,
            verbose=verbose,
            save_intermediate=save_intermediate,
        )
    except Exception as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    if verbose:
        console.print("[green]✅ Pipeline completed successfully![/green]")
        if save_intermediate:
            console.print(f"Results available in: {results['output_dir']}")


@app.command()
def systems():
    """List the registered systems."""
    table = Table(title="Available systems")
    table.add_column("Name")
    table.add_column("Class")
    table.add_column("Description")
    for name, system_class in sorted(list_available_systems().items()):
        doc = (system_class.__doc__ or "").strip().splitlines()
        table.add_row(name, system_class.__name__, doc[0] if doc else "")
    console.print(table)


def main():
    app()


if __name__ == "__main__":
    main()
