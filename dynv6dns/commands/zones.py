"""Zone listing command."""

import typer
from rich.console import Console
from rich.table import Table

from dynv6dns.commands.records import get_provider
from dynv6dns.exceptions import Dynv6DNSError

console = Console()


def show() -> None:
    """List the zones available to the configured token."""
    provider = get_provider()

    try:
        zones = provider.list_zones()
    except Dynv6DNSError as e:
        console.print(f"[red]✗[/red] Failed to list zones: {e}")
        raise typer.Exit(1)
    finally:
        provider.close()

    table = Table()
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("IPv4")
    table.add_column("IPv6 prefix")

    for zone in zones:
        table.add_row(
            str(zone.id),
            zone.name,
            zone.ipv4address or "-",
            zone.ipv6prefix or "-",
        )

    console.print(table)
