"""globalog CLI main entry point.

Command-line access to the global logger: emit entries and inspect the
logging configuration.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from .. import __version__
from ..exceptions import GlobalogError
from .commands import config, emit

console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="globalog")
@click.option(
    "--config", "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[Path]) -> None:
    """globalog: process-wide logging from the command line.

    \b
    Examples:
        globalog emit "cache warmed" --level notice --meta entries=120
        globalog config --show
        globalog config --export logging.toml
    """
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file


cli.add_command(emit.emit)
cli.add_command(config.config)


def main() -> None:
    """Console script entry point."""
    try:
        cli(standalone_mode=False, obj={})
    except click.exceptions.Abort:
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except GlobalogError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
