"""Uninstall command - Remove a generator version from the store."""
import typer

from demiurgos_common import get_settings
from demiurgos_sdk import GeneratorStore

from .utils import confirm_action, handle_error, success, warning


def uninstall(
    name: str = typer.Argument(..., help="Installed generator name"),
    version: str = typer.Argument(..., help="Version to remove"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """
    Remove one installed generator version.

    Examples:
        demiurgos uninstall rest-api 1.0.0
        demiurgos uninstall rest-api 1.0.0 --yes
    """
    try:
        if not yes and not confirm_action(f"Remove {name} {version}?", default=False):
            warning("Cancelled")
            raise typer.Exit(0)

        GeneratorStore(get_settings().generators_dir).uninstall(name, version)
        success(f"Removed {name} {version}")

    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e)
