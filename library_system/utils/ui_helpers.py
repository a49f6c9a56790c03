import os
import json
from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from library_system.book import Book
from library_system.config import settings
from library_system.user import User

# Environment variable to control CLI output mode
# İzin verilen değerler: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = ("plain", "json", "rich")

NO_BORROWED_BOOKS = "No borrowed books"

_console = Console()

def set_output_mode(mode: str) -> bool:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
        return True
    # Geçersiz değerleri yoksay; mevcut varsayılanı koru
    return False

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def format_book(book: Book) -> str:
    return f"ID: {book.id}, Name: {book.name}, Quantity: {book.quantity}"

def format_user(user: User) -> str:
    borrowed = ", ".join(str(b) for b in user.borrowed_books) if user.borrowed_books else NO_BORROWED_BOOKS
    return f"User ID: {user.id}, Name: {user.name}, Borrowed Books: {borrowed}"

def format_borrower(user: User) -> str:
    return f"User ID: {user.id}, Name: {user.name}"

def print_books(books: List[Book], title: str, empty_message: Optional[str] = None) -> None:
    """Kitap listesini mevcut çıktı moduna göre yazdır.
    - plain: başlık ve her kitap için 'ID: .., Name: .., Quantity: ..' satırı
    - json: id, name, quantity alanlarından oluşan JSON dizisi
    - rich: Rich tablosu
    """
    mode = get_output_mode()

    if not books and empty_message:
        print(empty_message)
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"📚 {escape(title)}", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True, justify="right")
        table.add_column("Name", style="white")
        table.add_column("Quantity", style="white", justify="right")
        for b in books:
            table.add_row(str(b.id), escape(b.name), str(b.quantity))
        _console.print(table)
    else:
        print(f"{title}:")
        for b in books:
            print(format_book(b))

def print_users(users: List[User], title: str, empty_message: Optional[str] = None,
                with_borrowed: bool = True) -> None:
    """Print users in the current output mode.
    with_borrowed=False prints the short borrower line (id and name only).
    """
    mode = get_output_mode()

    if not users and empty_message:
        print(empty_message)
        return

    if mode == "json":
        payload = [u.to_dict() for u in users]
        if not with_borrowed:
            payload = [{"id": u["id"], "name": u["name"]} for u in payload]
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"👥 {escape(title)}", show_lines=True, header_style="bold cyan")
        table.add_column("User ID", style="magenta", no_wrap=True, justify="right")
        table.add_column("Name", style="white")
        if with_borrowed:
            table.add_column("Borrowed Books", style="white")
        for u in users:
            row = [str(u.id), escape(u.name)]
            if with_borrowed:
                row.append(", ".join(str(b) for b in u.borrowed_books) or NO_BORROWED_BOOKS)
            table.add_row(*row)
        _console.print(table)
    else:
        print(f"{title}:")
        for u in users:
            print(format_user(u) if with_borrowed else format_borrower(u))
