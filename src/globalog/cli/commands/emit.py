"""Emit a single log entry through the global logger."""

from typing import Dict, Tuple

import click

from ...core.config import ConfigManager
from ...logging import Severity, configure_logging, log


def parse_metadata(pairs: Tuple[str, ...]) -> Dict[str, str]:
    """Parse ``key=value`` pairs, preserving their order."""
    metadata = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--meta")
        metadata[key.strip()] = value
    return metadata


@click.command()
@click.argument("message")
@click.option(
    "--level", "-l",
    type=click.Choice([s.label for s in Severity], case_sensitive=False),
    default="info",
    show_default=True,
    help="Severity of the entry",
)
@click.option(
    "--meta", "-m",
    multiple=True,
    metavar="KEY=VALUE",
    help="Metadata to attach (repeatable)",
)
@click.pass_context
def emit(ctx: click.Context, message: str, level: str, meta: Tuple[str, ...]) -> None:
    """Log MESSAGE at the given severity.

    \b
    Examples:
        globalog emit "deploy finished" --level notice -m version=1.4.2
    """
    metadata = parse_metadata(meta)

    config_manager = ConfigManager(ctx.obj.get("config_file"))
    configure_logging(config_manager.load_config().logging)

    log(message, Severity.parse(level), metadata or None)
