"""Generate command - Render a project from a generator."""
from contextlib import ExitStack
from typing import Optional

import typer
from rich.markup import escape

from demiurgos_common import get_settings
from demiurgos_sdk import GeneratorStore, generate, load_package, resolve_config

from .install_cmd import build_locator
from .utils import console, error, handle_error, info, success, warning


def generate_project(
    name: Optional[str] = typer.Option(
        None, "--name", "-n", help="Name of an installed generator"
    ),
    version: Optional[str] = typer.Option(
        None, "--version", help="Installed version to use (default: latest)"
    ),
    generator_path: Optional[str] = typer.Option(
        None, "--generator-path", "-g", help="Generator directory on disk"
    ),
    uri: Optional[str] = typer.Option(
        None, "--uri", "-u", help="Git repository or archive URL to generate from without installing"
    ),
    config: str = typer.Option(
        ..., "--config", "-c", help="JSON config file used as template context"
    ),
    output: str = typer.Option(
        ".", "--output", "-o", help="Output folder"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """
    Generate files from a generator and a config document.

    Pick the generator with exactly one of --name, --generator-path or --uri.

    Examples:
        demiurgos generate --name rest-api --config config.json --output out
        demiurgos generate --name rest-api --version 1.2.0 -c config.json
        demiurgos generate --generator-path ./my-generator -c config.json
        demiurgos generate --uri https://github.com/acme/rest-api -c config.json
    """
    try:
        selectors = [s for s in (name, generator_path, uri) if s]
        if len(selectors) != 1:
            error("Specify exactly one of --name, --generator-path or --uri")
            raise typer.Exit(1)
        if version and not name:
            error("--version can only be used together with --name")
            raise typer.Exit(1)

        resolved = resolve_config(config, output_folder=output)
        for problem in resolved.errors:
            warning(f"Entity '{problem.entity}' was not resolved: {escape(problem.message)}")

        with ExitStack() as stack:
            if name:
                package = GeneratorStore(get_settings().generators_dir).get(name, version)
            elif generator_path:
                package = load_package(generator_path)
            else:
                staged = stack.enter_context(build_locator().stage(uri))
                package = load_package(staged.root)

            if verbose:
                info(f"Using {package.name} {package.version} from {package.base_path}")

            with console.status("[bold green]Generating..."):
                report = generate(package, output, resolved.context)

        success(
            f"Generated {package.name} {package.version}: "
            f"{len(report.copied_files)} files copied, "
            f"{len(report.rendered_templates)} templates rendered"
        )
        if verbose:
            for _template, rendered in report.outputs:
                path = getattr(rendered, "path", None)
                if path is not None:
                    label = "skipped" if getattr(rendered, "skipped", False) else "wrote"
                    console.print(f"  [dim]{label}[/dim] {path}")

    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e, verbose)
