import logging
import os
from functools import partial
from typing import Callable, Dict, Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from library_system.config import settings
from library_system.library import Library, Result
from library_system.utils.cli_config import CLIConfig, parse_value
from library_system.utils.ui_helpers import (
    OUTPUT_MODE_ENV,
    OUTPUT_MODES,
    print_books,
    print_users,
    set_output_mode,
)
from library_system.utils.validators import ChoiceValidator, NumberValidator, TextValidator

logger = logging.getLogger(__name__)

console = Console()

MENU_ITEMS = [
    ("1", "Add Book", "➕"),
    ("2", "Add User", "👤"),
    ("3", "Borrow Book", "📤"),
    ("4", "Return Book", "📥"),
    ("5", "List Books Sorted", "🔢"),
    ("6", "List Books with Prefix", "🔎"),
    ("7", "List Users Who Borrowed a Book", "📖"),
    ("8", "List All Users", "👥"),
    ("0", "Exit", "🚪"),
]


def configure_logging() -> None:
    level = "DEBUG" if settings.debug else settings.log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.ERROR),
        format="%(levelname)s: %(name)s: %(message)s",
    )


# --- Girdi ve raporlama yardımcıları ---
def _ask(label: str, default: str = "") -> str:
    return Prompt.ask(label, console=console, default=default, show_default=bool(default))


def _ask_int(label: str, error_message: str) -> Optional[int]:
    value = NumberValidator.parse_int(_ask(label))
    if value is None:
        console.print(f"[bold red]{error_message}[/]")
    return value


def _report(result: Result, success_message: str) -> bool:
    if result.ok:
        console.print(f"[green]✅ {success_message}[/]")
        return True
    console.print(f"[bold yellow]⚠️  {escape(result.message)}[/]")
    return False


# --- Menü işlemleri ---
def add_book(lib: Library) -> None:
    """Prompt for id, name and quantity and add the book."""
    book_id = _ask_int("Enter Book ID", "Invalid input for Book ID. Please enter a valid number.")
    if book_id is None:
        return
    # Aynı ID'yi ad sorulmadan önce reddet
    if lib.find_book(book_id) is not None:
        console.print("[bold yellow]⚠️  A book with this ID already exists.[/]")
        return

    name = _ask("Enter Book Name")
    if not TextValidator.validate_name(name):
        console.print("[bold red]Book name cannot be empty.[/]")
        return

    quantity = _ask_int("Enter Quantity", "Invalid input for Quantity. Please enter a valid number.")
    if quantity is None:
        return
    if quantity < 0:
        console.print("[bold red]Quantity cannot be negative.[/]")
        return

    _report(lib.add_book(book_id, name, quantity), "Book added successfully.")


def add_user(lib: Library) -> None:
    user_id = _ask_int("Enter User ID", "Invalid input for User ID. Please enter a valid number.")
    if user_id is None:
        return
    if lib.find_user(user_id) is not None:
        console.print("[bold yellow]⚠️  A user with this ID already exists.[/]")
        return

    name = _ask("Enter User Name")
    if not TextValidator.validate_name(name):
        console.print("[bold red]User name cannot be empty.[/]")
        return

    _report(lib.add_user(user_id, name), "User added successfully.")


def borrow_book(lib: Library) -> None:
    user_id = _ask_int("Enter User ID", "Invalid User ID.")
    if user_id is None:
        return
    book_id = _ask_int("Enter Book ID", "Invalid Book ID.")
    if book_id is None:
        return
    _report(lib.borrow_book(user_id, book_id), "Book borrowed successfully.")


def return_book(lib: Library) -> None:
    user_id = _ask_int("Enter User ID", "Invalid User ID.")
    if user_id is None:
        return
    book_id = _ask_int("Enter Book ID", "Invalid Book ID.")
    if book_id is None:
        return
    _report(lib.return_book(user_id, book_id), "Book returned successfully.")


def list_books_sorted(lib: Library, prefs: Optional[CLIConfig] = None) -> None:
    default_sort = prefs.get("preferences.default_sort", "") if prefs else ""
    default = {"id": ChoiceValidator.SORT_BY_ID, "name": ChoiceValidator.SORT_BY_NAME}.get(default_sort, "")
    by_id = ChoiceValidator.parse_sort_choice(_ask("Sort by (1 = ID, 2 = Name)", default=default))
    if by_id is None:
        console.print("[bold red]Invalid choice. Please enter 1 or 2.[/]")
        return
    print_books(lib.list_books_sorted(by_id), f"Books sorted by {'ID' if by_id else 'Name'}")


def list_books_by_prefix(lib: Library) -> None:
    prefix = _ask("Enter book prefix")
    if not TextValidator.validate_prefix(prefix):
        console.print("[bold red]Prefix cannot be empty.[/]")
        return
    print_books(
        lib.list_books_by_prefix(prefix),
        f"Books with the prefix '{prefix}'",
        empty_message="No books found with the given prefix.",
    )


def list_users_by_book(lib: Library) -> None:
    book_name = _ask("Enter book name")
    if not TextValidator.validate_name(book_name):
        console.print("[bold red]Book name cannot be empty.[/]")
        return
    result = lib.list_users_by_book(book_name)
    if not result.ok:
        console.print(f"[bold yellow]⚠️  {escape(result.message)}[/]")
        return
    print_users(
        result.value or [],
        f"Users who borrowed the book '{book_name}'",
        empty_message=f"No users have borrowed the book '{book_name}'.",
        with_borrowed=False,
    )


def list_all_users(lib: Library) -> None:
    print_users(lib.list_all_users(), "All users with borrowed books", empty_message="No users registered.")


HANDLERS: Dict[str, Callable[[Library], None]] = {
    "1": add_book,
    "2": add_user,
    "3": borrow_book,
    "4": return_book,
    "6": list_books_by_prefix,
    "7": list_users_by_book,
    "8": list_all_users,
}


def render_menu(prefs: CLIConfig) -> None:
    show_emojis = prefs.get("preferences.show_emojis", True)
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon in MENU_ITEMS:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}" if show_emojis else label)

    console.print(Panel(
        table,
        title=settings.app_name,
        border_style=prefs.get("ui_settings.border_style", "cyan"),
        box=box.HEAVY,
        padding=(1, 2),
    ))


def run_menu(lib: Optional[Library] = None, prefs: Optional[CLIConfig] = None) -> Library:
    """Interactive menu loop over a single in-memory Library."""
    lib = lib if lib is not None else Library()
    prefs = prefs if prefs is not None else CLIConfig()
    choices = [key for key, _, _ in MENU_ITEMS]
    handlers = {**HANDLERS, "5": partial(list_books_sorted, prefs=prefs)}

    while True:
        try:
            if prefs.get("ui_settings.clear_screen", True):
                console.clear()
            render_menu(prefs)
            choice = Prompt.ask("Please choose an option", choices=choices, console=console)

            if choice == "0":
                console.print("[green]Exiting the program...[/]")
                break

            try:
                handlers[choice](lib)
            except (EOFError, KeyboardInterrupt):
                raise
            except Exception as e:
                # Bellek içi durum değişmez; hata raporlanır ve menüye dönülür
                logger.exception(f"Menu action {choice} failed")
                console.print(f"[bold red]An unexpected error occurred:[/] {escape(str(e))}")

            if console.is_terminal:
                Prompt.ask("\n[dim]Press Enter to return to the menu[/]", console=console,
                           default="", show_default=False)
            else:
                console.print()
        except (EOFError, KeyboardInterrupt):
            console.print("\n[green]Exiting the program...[/]")
            break

    return lib


# --- Typer CLI Uygulaması ---
app = typer.Typer(help="Library System CLI")


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    version: bool = typer.Option(False, "--version", help="Show the version and exit"),
):
    """Interactive library inventory and borrowing manager."""
    if version:
        print(f"{settings.app_name} {settings.app_version}")
        raise typer.Exit()

    configure_logging()
    prefs = CLIConfig()
    if output:
        if not set_output_mode(output):
            console.print(f"[yellow]Unknown output mode '{escape(output)}'. Choose one of: {', '.join(OUTPUT_MODES)}.[/]")
    elif OUTPUT_MODE_ENV not in os.environ:
        set_output_mode(prefs.get("preferences.default_output_mode", settings.output_mode))

    if ctx.invoked_subcommand is None:
        run_menu(prefs=prefs)


@app.command("menu")
def cli_menu():
    """Start the interactive menu."""
    run_menu()


@app.command("config")
def cli_config(
    action: str = typer.Argument(..., help="Action: show, get, set, reset"),
    key: Optional[str] = typer.Argument(None, help="Configuration key (dot notation)"),
    value: Optional[str] = typer.Argument(None, help="Configuration value"),
):
    """Manage CLI configuration and preferences."""
    config_manager = CLIConfig()

    if action == "show":
        config_manager.show_config()

    elif action == "get":
        if not key:
            print("Error: 'get' requires a key")
            return
        found = config_manager.get(key)
        if found is not None:
            print(f"{key}: {found}")
        else:
            print(f"Key '{key}' not found")

    elif action == "set":
        if not key or value is None:
            print("Error: 'set' requires both a key and a value")
            return
        parsed_value = parse_value(value)
        config_manager.set(key, parsed_value)
        print(f"{key} set to {parsed_value}")

    elif action == "reset":
        config_manager.reset_to_default()

    else:
        print(f"Unknown action: {action}")
        print("Available actions: show, get, set, reset")


if __name__ == "__main__":
    app()
