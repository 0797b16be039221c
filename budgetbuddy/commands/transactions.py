"""Transaction management commands (add, delete)."""

import sqlite3
import sys
from datetime import datetime

from rich.console import Console

from budgetbuddy.commands.home import load_home, render_summary, resolve_month
from budgetbuddy.config import database_path, load_config
from budgetbuddy.dates import format_timestamp, month_of, parse_date, to_timestamp
from budgetbuddy.domain.models import Amount, CategoryId
from budgetbuddy.domain.summary import format_money
from budgetbuddy.domain.transactions import NewTransaction, parse_transaction_type
from budgetbuddy.home import HomeState
from budgetbuddy.store.queries import get_category

console = Console()


def add_command(
    amount: float,
    category_id: int,
    txn_type: str,
    description: str = "",
    date: str | None = None,
) -> None:
    """Add a transaction and show the refreshed summary for its month.

    Args:
        amount: Transaction amount. Stored as given; its sign is not checked against the type.
        category_id: Id of an existing category (see 'budgetbuddy categories').
        txn_type: Income or Expense.
        description: Optional description.
        date: Transaction date (YYYY-MM-DD, DD/MM/YYYY, or other formats). Defaults to now.
    """
    try:
        parsed_type = parse_transaction_type(txn_type)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    try:
        timestamp = parse_date(date) if date else to_timestamp(datetime.now())
    except ValueError as e:
        console.print(f"[red]Invalid date format: {e}[/red]")
        console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
        sys.exit(1)

    config = load_config()
    db_path = database_path(config)
    currency = config["currency"]

    try:
        category = get_category(CategoryId(category_id), db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    if category is None:
        console.print(f"[red]Category {category_id} not found[/red]")
        console.print("[dim]Use 'budgetbuddy categories' to see the available ids[/dim]")
        sys.exit(1)

    if category.type is not parsed_type:
        console.print(
            f"[yellow]Note: category '{category.name}' is for {category.type.value} "
            f"transactions, adding as {parsed_type.value}[/yellow]"
        )

    new = NewTransaction(
        category_id=category.id,
        amount=Amount(amount),
        date=timestamp,
        description=description,
        type=parsed_type,
    )

    state = HomeState(month_of(timestamp), db_path)
    if not state.insert(new):
        console.print("[red]Could not add the transaction[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Transaction added (ID: {state.last_inserted_id}):")
    console.print(f"  Date: {format_timestamp(timestamp)}")
    console.print(f"  Category: {category.name}")
    console.print(f"  Description: {description or '-'}")
    console.print(f"  Amount: {format_money(amount, currency)} ({parsed_type.value})")
    console.print()
    render_summary(state.by_month, state.month, currency)


def delete_command(txn_id: int, month: str | None = None) -> None:
    """Delete a transaction by id and show the refreshed summary.

    Args:
        txn_id: Transaction ID (from 'budgetbuddy list').
        month: Month (YYYY-MM) for the refreshed summary. Defaults to the start month.
    """
    state, currency = load_home(resolve_month(month))

    txn = next((t for t in state.transactions if t.id == txn_id), None)
    if txn is None:
        console.print(f"[yellow]Transaction {txn_id} not found, nothing deleted[/yellow]")
        return

    if not state.delete(txn_id):
        console.print(f"[red]Could not delete transaction {txn_id}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Deleted transaction {txn_id}:")
    console.print(f"  Date: {format_timestamp(txn.date)}")
    console.print(f"  Description: {txn.description or '-'}")
    console.print(f"  Amount: {format_money(txn.amount, currency)} ({txn.type.value})")
    console.print()
    render_summary(state.by_month, state.month, currency)
