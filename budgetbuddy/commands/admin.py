"""Admin commands: startup bootstrap and explicit init."""

import sqlite3
import sys
import tomllib
from pathlib import Path

import typer
from rich.console import Console

from budgetbuddy.config import create_default_config, database_path, get_config_path, load_config
from budgetbuddy.store.bootstrap import BootstrapError, ensure_database, reset_database
from budgetbuddy.store.queries import count_transactions
from budgetbuddy.store.schema import database_exists

console = Console()


def startup() -> Path:
    """Make sure the database exists before a command touches it.

    A failed bootstrap is fatal: the error is printed and the process exits
    with status 1.

    Returns:
        The database path in use.
    """
    try:
        db_path = database_path(load_config())
        ensure_database(db_path)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file {get_config_path()}: {e}[/red]", style="bold")
        sys.exit(1)
    except BootstrapError as e:
        console.print(f"[red]Startup failed: {e}[/red]", style="bold")
        sys.exit(1)
    return db_path


def init_command(force: bool = False) -> None:
    """Copy the seed database into place and create the config file."""
    config_path = get_config_path()

    try:
        config = load_config(config_path)
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Invalid config file {config_path}: {e}[/red]", style="bold")
        sys.exit(1)

    db_path = database_path(config)

    try:
        if force and database_exists(db_path):
            if not typer.confirm(f"Replace {db_path} with a fresh seed database? All transactions will be lost"):
                console.print("[yellow]Init cancelled[/yellow]")
                return
            reset_database(db_path)
            console.print("[green]✓[/green] Database replaced with a fresh seed copy")
        elif ensure_database(db_path):
            console.print("[green]✓[/green] Database created from seed")
        else:
            count = count_transactions(db_path)
            console.print(f"[dim]Database already exists with {count} transactions (use --force to replace it)[/dim]")

        if not config_path.exists():
            create_default_config(config_path)
            console.print("[green]✓[/green] Config file created (permissions: 600)")

    except BootstrapError as e:
        console.print(f"[red]Initialization failed: {e}[/red]", style="bold")
        sys.exit(1)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[dim]Database: {db_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")
