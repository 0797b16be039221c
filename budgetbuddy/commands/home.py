"""Read-only commands: home screen, monthly summary, transaction and category lists."""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from budgetbuddy.config import database_path, load_config, start_month
from budgetbuddy.dates import format_timestamp, month_label, parse_month, shift_month
from budgetbuddy.domain.models import Month
from budgetbuddy.domain.summary import (
    TransactionsByMonth,
    format_money,
    money_color,
    summary_rows,
    type_color,
)
from budgetbuddy.home import HomeState

console = Console()


def resolve_month(month: str | None) -> Month:
    """Use the given month, or the configured start month.

    Exits with status 1 on an invalid month.
    """
    try:
        if month:
            return parse_month(month)
        return start_month(load_config())
    except ValueError as e:
        console.print(f"[red]Invalid month: {e}[/red]")
        console.print("[dim]Expected format: YYYY-MM[/dim]")
        sys.exit(1)


def load_home(month: Month) -> tuple[HomeState, str]:
    """Fetch home state for a month. Exits with status 1 if the fetch fails.

    Returns:
        Tuple of (state, currency_symbol).
    """
    config = load_config()
    state = HomeState(month, database_path(config))
    if not state.refresh():
        console.print("[red]Could not load data from the database[/red]", style="bold")
        sys.exit(1)
    return state, config["currency"]


def render_summary(by_month: TransactionsByMonth, month: Month, currency: str) -> None:
    """Render the summary card for a month."""
    table = Table(title=f"Summary for {month_label(month)}", show_header=False, min_width=40)
    table.add_column("Label")
    table.add_column("Amount", justify="right")

    for label, value in summary_rows(by_month):
        table.add_row(f"{label}:", f"[bold {money_color(value)}]{format_money(value, currency)}[/]")

    console.print(table)


def render_transactions(state: HomeState, currency: str) -> None:
    """Render the transaction list, newest first."""
    if not state.transactions:
        console.print("[yellow]No transactions found[/yellow]")
        return

    table = Table(title=f"Transactions ({len(state.transactions)})")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")

    for txn in state.transactions:
        amount_display = f"[{type_color(txn.type)}]{format_money(txn.amount, currency)}[/]"
        table.add_row(
            str(txn.id),
            format_timestamp(txn.date),
            escape(state.category_name(txn.category_id)),
            escape(txn.description) if txn.description else "[dim]-[/dim]",
            amount_display,
        )

    console.print(table)


def home_command(month: str | None = None) -> None:
    """Show the monthly summary followed by all transactions."""
    state, currency = load_home(resolve_month(month))
    render_summary(state.by_month, state.month, currency)
    render_transactions(state, currency)


def summary_command(month: str | None = None, previous: bool = False, next: bool = False) -> None:
    """Show the summary card, optionally one month before or after the cursor."""
    if previous and next:
        console.print("[red]Use only one of --previous and --next[/red]")
        sys.exit(1)

    cursor = resolve_month(month)
    if previous:
        cursor = shift_month(cursor, "previous")
    elif next:
        cursor = shift_month(cursor, "next")

    state, currency = load_home(cursor)
    render_summary(state.by_month, state.month, currency)


def list_command() -> None:
    """List all transactions."""
    state, currency = load_home(resolve_month(None))
    render_transactions(state, currency)


def categories_command() -> None:
    """List categories."""
    state, _ = load_home(resolve_month(None))

    if not state.categories:
        console.print("[yellow]No categories found[/yellow]")
        return

    table = Table(title="Categories")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="magenta")
    table.add_column("Type")
    table.add_column("Icon", style="dim")

    for category in state.categories:
        table.add_row(
            str(category.id),
            escape(category.name),
            f"[{type_color(category.type)}]{category.type.value}[/]",
            category.icon or "-",
        )

    console.print(table)
