"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from tmexclude import __version__
from tmexclude.cli.commands import rules, run, scan
from tmexclude.core.log import configure_logging, debug_enabled_from_env

# Create main Typer app
app = typer.Typer(
    name="tmexclude",
    help="Exclude dependency directories from Time Machine backups.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tmexclude version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Trace skip and match decisions (also TMEXCLUDE_DEBUG=1).",
        ),
    ] = False,
) -> None:
    """tmexclude - keep reproducible dependency directories out of backups.

    Directories such as node_modules, .venv or vendor are excluded when
    the file that identifies them (package.json, requirements.txt,
    go.mod, ...) sits next to them.
    """
    configure_logging(debug=debug or debug_enabled_from_env())


# Register commands
app.add_typer(run.app, name="run")
app.add_typer(scan.app, name="scan")
app.add_typer(rules.app, name="rules")


if __name__ == "__main__":
    app()
