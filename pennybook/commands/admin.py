"""Admin commands for initializing configuration."""

import sys
from pathlib import Path

from rich.console import Console

from pennybook.config import create_default_config, get_config_path
from pennybook.store import get_data_path

console = Console()


def init_command(force: bool = False, config_path: Path | None = None) -> None:
    """Create the pennybook configuration file."""
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'pennybook init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print(f"[dim]Ledger file: {get_data_path(config_path=config_path)}[/dim]")
