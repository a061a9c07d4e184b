"""The shop's entry point: the main login and registration menu."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from shopdesk.admin import Admin
from shopdesk.buyer import Buyer
from shopdesk.catalog import DEFAULT_PATH as DEFAULT_CATALOG_PATH
from shopdesk.catalog import Catalog
from shopdesk.console import Console, InputExhausted
from shopdesk.users import DEFAULT_PATH as DEFAULT_USERS_PATH
from shopdesk.users import User, UserExistsError, UserStore

_MENU = (
    "\n=== MAIN MENU ==="
    "\n1. Login"
    "\n2. Register"
    "\n0. Exit"
    "\nEnter choice: "
)


def _read_credentials(console: Console) -> tuple[str, str]:
    console.write("Username: ")
    username = console.read_token()
    console.write("Password: ")
    password = console.read_token()
    return username, password


def _login(console: Console, users: UserStore, catalog_path: str | Path) -> None:
    username, password = _read_credentials(console)
    try:
        role = users.authenticate(username, password)
    except OSError:
        print(f"Error opening {users.path}", file=sys.stderr)
        role = None
    if role is None:
        console.write("Login failed! Invalid credentials.\n")
        return
    console.write(f"Login successful! Welcome, {username}!\n")
    user: User = Admin(username, password) if role == "admin" else Buyer(username, password)
    catalog = Catalog(catalog_path)
    catalog.load()
    user.show_menu(catalog, console)


def _register(console: Console, users: UserStore) -> None:
    username, password = _read_credentials(console)
    try:
        users.register(username, password)
    except UserExistsError:
        console.write("User already exists!\n")
    except OSError:
        print(f"Error opening {users.path} for writing", file=sys.stderr)
    else:
        console.write("Registration successful! You can now login.\n")
        return
    console.write("Registration failed! Username may already exist.\n")


def run(console: Console, users: UserStore, catalog_path: str | Path) -> int:
    """Run the main menu until the user exits or input ends; return the exit status."""
    try:
        while True:
            console.write(_MENU)
            try:
                choice = console.read_int()
            except ValueError:
                choice = None
            if choice == 1:
                _login(console, users, catalog_path)
            elif choice == 2:
                _register(console, users)
            elif choice == 0:
                console.write("Exiting program. Goodbye!\n")
                return 0
            else:
                console.write("Invalid choice! Please select 1-3.\n")
    except InputExhausted:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the shop on standard input and output."""
    parser = argparse.ArgumentParser(prog="shopdesk", description="A small console shop.")
    parser.add_argument("--users", default=DEFAULT_USERS_PATH, help="account file")
    parser.add_argument("--products", default=DEFAULT_CATALOG_PATH, help="product file")
    args = parser.parse_args(argv)
    return run(Console(), UserStore(args.users), args.products)


if __name__ == "__main__":
    raise SystemExit(main())