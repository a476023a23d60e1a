"""Demiurgos CLI - Main entry point."""
import typer

from demiurgos_common import configure_logging, get_settings

from . import generate_cmd, info_cmd, install_cmd, list_cmd, new_cmd, uninstall_cmd

app = typer.Typer(
    name="demiurgos",
    help="Demiurgos CLI - Install generators and render projects from templates",
    no_args_is_help=True,
    add_completion=False
)


@app.callback()
def setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON lines"),
):
    """Configure logging once before any command runs."""
    settings = get_settings()
    configure_logging(
        "debug" if verbose else settings.log_level,
        json_format=log_json or settings.log_json,
    )


# Register all commands
app.command()(install_cmd.install)
app.command()(uninstall_cmd.uninstall)
app.command()(new_cmd.new)
app.command(name="generate")(generate_cmd.generate_project)
app.command(name="list")(list_cmd.list_generators)
app.command()(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
