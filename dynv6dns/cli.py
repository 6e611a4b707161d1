"""CLI entry point for dynv6dns."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from dynv6dns import __version__
from dynv6dns.commands import records, zones

app = typer.Typer(
    name="dynv6dns",
    help="Manage dynv6 DNS records as generic records.",
    no_args_is_help=True,
)
console = Console()

# Register sub-commands
app.add_typer(records.app, name="records", help="Manage records in a zone")


@app.command()
def version() -> None:
    """Show the dynv6dns version."""
    console.print(f"dynv6dns v{__version__}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log remote calls"),
) -> None:
    """dynv6dns - generic DNS record management for dynv6."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


# Also expose zone listing at root level
app.command(name="zones")(zones.show)

if __name__ == "__main__":
    app()
