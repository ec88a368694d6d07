"""GitHub Models CLI - Main entry point."""

import typer
from rich.console import Console

from ghmodels import __version__
from ghmodels.cli.commands import run

console = Console()

app = typer.Typer(
    name="ghmodels",
    help="Chat with GitHub Models from the terminal.",
    no_args_is_help=True,
)

app.command(name="run")(run.run)


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]ghmodels[/bold] v{__version__}")


if __name__ == "__main__":
    app()
