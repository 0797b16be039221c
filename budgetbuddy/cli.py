"""CLI entry point for budgetbuddy."""

import tomllib

import typer

from budgetbuddy.commands.admin import init_command, startup
from budgetbuddy.commands.home import categories_command, home_command, list_command, summary_command
from budgetbuddy.commands.transactions import add_command, delete_command
from budgetbuddy.config import load_config
from budgetbuddy.logs import setup_logging

app = typer.Typer(
    name="budgetbuddy",
    help="BudgetBuddy - track income and expenses and see monthly summaries",
    add_completion=False,
)


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Diagnostic log level (default: from config, WARNING)"),
) -> None:
    """BudgetBuddy - track income and expenses and see monthly summaries."""
    if log_level is None:
        try:
            log_level = load_config().get("log_level", "WARNING")
        except tomllib.TOMLDecodeError:
            log_level = "WARNING"

    try:
        setup_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Replace the database with a fresh seed copy"),
) -> None:
    """Create the database from the bundled seed and write the default config."""
    init_command(force)


@app.command(name="home")
def home(
    month: str = typer.Option(None, "--month", help="Month to summarize (YYYY-MM)"),
) -> None:
    """Show your monthly summary and all your transactions."""
    startup()
    home_command(month)


@app.command(name="summary")
def summary(
    month: str = typer.Option(None, "--month", help="Month to summarize (YYYY-MM)"),
    previous: bool = typer.Option(False, "--previous", help="Show the month before"),
    next: bool = typer.Option(False, "--next", help="Show the month after"),
) -> None:
    """Show income, expenses and savings for a month."""
    startup()
    summary_command(month, previous, next)


@app.command(name="list")
def list_transactions() -> None:
    """List your transactions, newest first."""
    startup()
    list_command()


@app.command(name="categories")
def categories() -> None:
    """List the available categories."""
    startup()
    categories_command()


@app.command(name="add")
def add(
    amount: float = typer.Option(..., "--amount", "-a", help="Transaction amount (e.g. --amount=-5 for a refund)"),
    category: int = typer.Option(..., "--category", "-c", help="Category ID (see 'budgetbuddy categories')"),
    txn_type: str = typer.Option(..., "--type", "-t", help="Income or Expense"),
    description: str = typer.Option("", "--description", "-d", help="Description"),
    date: str = typer.Option(None, "--date", help="Transaction date (default: now)"),
) -> None:
    """Add a transaction."""
    startup()
    add_command(amount, category, txn_type, description, date)


@app.command(name="delete")
def delete(
    txn_id: int = typer.Argument(..., help="Transaction ID (see 'budgetbuddy list')"),
    month: str = typer.Option(None, "--month", help="Month to summarize afterwards (YYYY-MM)"),
) -> None:
    """Delete a transaction."""
    startup()
    delete_command(txn_id, month)


if __name__ == "__main__":
    app()
