import json

from library_system.utils.ui_helpers import (
    NO_BORROWED_BOOKS,
    format_book,
    format_user,
    get_output_mode,
    print_books,
    print_users,
    set_output_mode,
)

def test_output_mode_defaults_to_plain():
    assert get_output_mode() == "plain"

def test_set_output_mode_ignores_unknown_values():
    assert set_output_mode("JSON")
    assert get_output_mode() == "json"
    assert not set_output_mode("xml")
    assert get_output_mode() == "json"

def test_format_lines(scenario_lib):
    scenario_lib.borrow_book(10, 1)
    user = scenario_lib.find_user(10)

    assert format_book(scenario_lib.find_book(1)) == "ID: 1, Name: Dune, Quantity: 1"
    assert format_user(user) == "User ID: 10, Name: Alice, Borrowed Books: 1"

def test_format_user_without_books(scenario_lib):
    assert format_user(scenario_lib.find_user(10)).endswith(f"Borrowed Books: {NO_BORROWED_BOOKS}")

def test_format_user_joins_ids(lib):
    lib.add_book(1, "Dune", 1)
    lib.add_book(2, "Emma", 1)
    lib.add_user(10, "Alice")
    lib.borrow_book(10, 2)
    lib.borrow_book(10, 1)

    assert format_user(lib.find_user(10)) == "User ID: 10, Name: Alice, Borrowed Books: 2, 1"

def test_print_books_plain(scenario_lib, capsys):
    print_books(scenario_lib.list_books_sorted(), "Books sorted by ID")

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Books sorted by ID:",
        "ID: 1, Name: Dune, Quantity: 2",
        "ID: 2, Name: Duty, Quantity: 0",
    ]

def test_print_books_empty_message(capsys):
    print_books([], "Books with the prefix 'x'", empty_message="No books found with the given prefix.")
    assert capsys.readouterr().out.strip() == "No books found with the given prefix."

def test_print_books_json(scenario_lib, capsys):
    set_output_mode("json")
    print_books(scenario_lib.list_books_by_prefix("dun"), "ignored")

    payload = json.loads(capsys.readouterr().out)
    assert payload == [{"id": 1, "name": "Dune", "quantity": 2}]

def test_print_users_json_borrowers_only(scenario_lib, capsys):
    set_output_mode("json")
    scenario_lib.borrow_book(10, 1)
    print_users(scenario_lib.list_borrowers_of(1), "ignored", with_borrowed=False)

    assert json.loads(capsys.readouterr().out) == [{"id": 10, "name": "Alice"}]

def test_print_users_rich(scenario_lib, capsys):
    set_output_mode("rich")
    print_users(scenario_lib.list_all_users(), "All users with borrowed books")

    out = capsys.readouterr().out
    assert "Alice" in out
    assert NO_BORROWED_BOOKS in out
