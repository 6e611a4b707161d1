"""Record management commands."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from dynv6dns.config import load_records_file, load_settings, parse_record_spec
from dynv6dns.deadline import Deadline
from dynv6dns.exceptions import Dynv6DNSError
from dynv6dns.provider import Provider
from dynv6dns.records import GenericRecord

app = typer.Typer()
console = Console()

FILE_OPTION = typer.Option(None, "--file", "-f", help="YAML file with a 'records' list")
RECORD_OPTION = typer.Option(
    None, "--record", "-r", help="Inline record as 'TYPE NAME DATA' (use @ for the apex)"
)
TIMEOUT_OPTION = typer.Option(None, "--timeout", help="Deadline for the whole operation, in seconds")


def get_provider() -> Provider:
    """Get a provider for the configured dynv6 account."""
    settings = load_settings()

    if not settings.token:
        console.print("[red]✗[/red] dynv6 token not configured")
        console.print("  Set DYNV6_TOKEN (see https://dynv6.com/keys)")
        raise typer.Exit(1)

    return Provider(token=settings.token, settings=settings)


def collect_records(file: Path | None, specs: list[str] | None) -> list[GenericRecord]:
    """Gather records from a records file followed by inline specs."""
    records: list[GenericRecord] = []

    try:
        if file is not None:
            records.extend(load_records_file(file))
        for spec in specs or []:
            records.append(parse_record_spec(spec))
    except (FileNotFoundError, Dynv6DNSError) as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    if not records:
        console.print("[red]✗[/red] No records given; use --file or --record")
        raise typer.Exit(1)

    return records


def print_records(records: list[GenericRecord]) -> None:
    table = Table()
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("Data")
    table.add_column("TTL")

    for record in records:
        table.add_row(
            record.type,
            record.name or "@",
            record.data,
            str(int(record.ttl.total_seconds())),
        )

    console.print(table)


def _deadline(timeout: float | None) -> Deadline | None:
    return Deadline.after(timeout) if timeout is not None else None


@app.command("list")
def list_records(
    zone: str = typer.Argument(..., help="Zone name, e.g. example.dynv6.net"),
    timeout: float | None = TIMEOUT_OPTION,
) -> None:
    """List all records in a zone."""
    provider = get_provider()

    console.print(f"[bold]DNS records for {zone}[/bold]")

    try:
        records = provider.get_records(zone, deadline=_deadline(timeout))
    except Dynv6DNSError as e:
        console.print(f"[red]✗[/red] Failed to list records: {e}")
        raise typer.Exit(1)
    finally:
        provider.close()

    print_records(records)


@app.command()
def append(
    zone: str = typer.Argument(..., help="Zone name"),
    file: Path | None = FILE_OPTION,
    record: list[str] | None = RECORD_OPTION,
    timeout: float | None = TIMEOUT_OPTION,
) -> None:
    """Create records that do not exist yet; existing ones are left alone."""
    desired = collect_records(file, record)
    provider = get_provider()

    try:
        created = provider.append_records(zone, desired, deadline=_deadline(timeout))
    except Dynv6DNSError as e:
        console.print(f"[red]✗[/red] Failed to append records: {e}")
        raise typer.Exit(1)
    finally:
        provider.close()

    console.print(f"[green]✓[/green] Created {len(created)} of {len(desired)} record(s) in {zone}")
    if created:
        print_records(created)


@app.command("set")
def set_records(
    zone: str = typer.Argument(..., help="Zone name"),
    file: Path | None = FILE_OPTION,
    record: list[str] | None = RECORD_OPTION,
    timeout: float | None = TIMEOUT_OPTION,
) -> None:
    """Create or update records so the zone matches the input."""
    desired = collect_records(file, record)
    provider = get_provider()

    try:
        result = provider.set_records(zone, desired, deadline=_deadline(timeout))
    except Dynv6DNSError as e:
        console.print(f"[red]✗[/red] Failed to set records: {e}")
        raise typer.Exit(1)
    finally:
        provider.close()

    console.print(f"[green]✓[/green] Set {len(result)} record(s) in {zone}")
    print_records(result)


@app.command()
def delete(
    zone: str = typer.Argument(..., help="Zone name"),
    file: Path | None = FILE_OPTION,
    record: list[str] | None = RECORD_OPTION,
    timeout: float | None = TIMEOUT_OPTION,
    force: bool = typer.Option(False, "--force", help="Skip confirmation"),
) -> None:
    """Delete records matching the input by type and name."""
    desired = collect_records(file, record)

    if not force:
        confirm = typer.confirm(f"Delete {len(desired)} record(s) from {zone}?")
        if not confirm:
            raise typer.Abort()

    provider = get_provider()

    try:
        deleted = provider.delete_records(zone, desired, deadline=_deadline(timeout))
    except Dynv6DNSError as e:
        console.print(f"[red]✗[/red] Failed to delete records: {e}")
        raise typer.Exit(1)
    finally:
        provider.close()

    console.print(f"[green]✓[/green] Deleted {len(deleted)} record(s) from {zone}")
    if deleted:
        print_records(deleted)
