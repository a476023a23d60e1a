"""New command - Scaffold a blank generator package."""
from pathlib import Path

import typer

from demiurgos_common import MANIFEST_FILE, TEMPLATES_DIR
from demiurgos_sdk import scaffold_generator

from .utils import confirm_action, console, handle_error, success, warning


def new(
    name: str = typer.Argument(
        ...,
        help="Generator name (letters, numbers, dots, hyphens, underscores)"
    ),
    output: str = typer.Option(
        ".",
        "--output", "-o",
        help="Directory to create the generator in"
    ),
    force: bool = typer.Option(
        False,
        "--force", "-f",
        help="Write into an existing directory without asking"
    ),
):
    """
    Create a new generator package.

    Examples:
        demiurgos new rest-api
        demiurgos new rest-api --output generators/
        demiurgos new rest-api --force
    """
    try:
        target = Path(output) / name
        if target.exists() and not force:
            if not confirm_action(f"{target} already exists. Overwrite?", default=False):
                warning("Cancelled")
                raise typer.Exit(0)
            force = True

        root = scaffold_generator(name, output, force=force)
        success(f"Created generator {name} in {root}")

        console.print("\n[bold cyan]Next steps:[/bold cyan]")
        console.print(f"  1. Describe your generator in [cyan]{MANIFEST_FILE}[/cyan]")
        console.print(f"  2. Add templates under [cyan]{TEMPLATES_DIR}/[/cyan] (files starting with _ are partials)")
        console.print("  3. Try it out:")
        console.print(f"     [cyan]demiurgos generate --generator-path {root} --config config.json[/cyan]")
        console.print("  4. Install it:")
        console.print(f"     [cyan]demiurgos install {root}[/cyan]")

    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e)
