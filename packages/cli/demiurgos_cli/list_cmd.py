"""List command - Show installed generators."""
import typer
from rich.table import Table

from demiurgos_common import get_settings
from demiurgos_sdk import GeneratorStore

from .utils import console, handle_error, info


def list_generators(
    name: str = typer.Argument(None, help="Only show versions of this generator"),
):
    """
    List installed generators and their versions.

    Examples:
        demiurgos list
        demiurgos list rest-api
    """
    try:
        store = GeneratorStore(get_settings().generators_dir)
        entries = store.list()
        if name:
            entries = [entry for entry in entries if entry.name == name]

        if not entries:
            info(f"No generators installed in {store.root}")
            console.print("  [dim]Install one with: demiurgos install <source>[/dim]")
            return

        table = Table(title="Installed Generators", show_header=True, header_style="bold cyan")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Version", style="green")
        table.add_column("Path", style="dim")
        for entry in entries:
            table.add_row(entry.name, entry.version, str(entry.path))
        console.print(table)

    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e)
