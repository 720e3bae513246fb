"""Configuration inspection command."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...core.config import ConfigManager
from ...logging import application_identifier

console = Console()


def show_configuration(config_manager: ConfigManager) -> None:
    """Print the effective logging configuration."""
    logging_config = config_manager.load_config().logging

    table = Table(title="Logging Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    label = logging_config.label
    if label is None:
        label = f"{application_identifier()} (detected)"

    table.add_row("Config file", str(config_manager.config_file))
    table.add_row("Level", logging_config.level)
    table.add_row("Format", logging_config.format)
    table.add_row("Output", ", ".join(logging_config.output))
    table.add_row("File path", str(logging_config.file_path or "-"))
    table.add_row("Label", label)
    table.add_row("Service", f"{logging_config.service_name} {logging_config.version}")

    console.print(table)


@click.command()
@click.option("--show", is_flag=True, help="Show current configuration")
@click.option(
    "--export",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Export configuration to file",
)
@click.pass_context
def config(ctx: click.Context, show: bool, export: Optional[Path]) -> None:
    """Show or export the logging configuration.

    \b
    Examples:
        globalog config --show
        globalog config --export logging.toml
    """
    config_manager = ConfigManager(ctx.obj.get("config_file"))

    if export:
        config_manager.export_config(export)
        console.print(f"[green]Configuration exported to {export}[/green]")

    if show or not export:
        show_configuration(config_manager)
