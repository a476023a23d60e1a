"""Install command - Add a generator to the local store."""
import typer
from rich.markup import escape

from demiurgos_common import get_settings
from demiurgos_sdk import (
    DefaultArchiveExtractor,
    GeneratorStore,
    GitCloner,
    HttpDownloader,
    SourceLocator,
    install_generator,
)

from .utils import console, handle_error, info, success


def build_locator() -> SourceLocator:
    """Source locator wired from the current settings."""
    settings = get_settings()
    return SourceLocator(
        cloner=GitCloner(executable=settings.git_executable),
        downloader=HttpDownloader(timeout=settings.http_timeout),
        extractor=DefaultArchiveExtractor(),
    )


def install(
    source: str = typer.Argument(
        ...,
        help="Local directory, git repository URL, or .zip/.tar.gz archive URL"
    ),
    force: bool = typer.Option(
        False,
        "--force", "-f",
        help="Replace the installed copy if this name and version already exist"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """
    Install a generator into the local store.

    Examples:
        demiurgos install ./my-generator
        demiurgos install https://github.com/acme/rest-api
        demiurgos install https://example.com/generators/rest-api.tar.gz --force
    """
    try:
        store = GeneratorStore(get_settings().generators_dir)
        if verbose:
            info(f"Installing from {escape(source)} into {store.root}")

        with console.status("[bold green]Installing generator..."):
            result = install_generator(source, store, locator=build_locator(), force=force)

        if result.created:
            success(f"Installed {result.name} {result.version}")
        else:
            info(f"{result.name} {result.version} is already installed (use --force to reinstall)")
        console.print(f"  [dim]{result.path}[/dim]")

    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e, verbose)
