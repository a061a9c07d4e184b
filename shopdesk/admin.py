"""The administrator's menu for maintaining the catalogue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shopdesk.product import Product
from shopdesk.users import User

if TYPE_CHECKING:
    from shopdesk.catalog import Catalog
    from shopdesk.console import Console

_MENU = (
    "\n=== ADMIN MENU ==="
    "\n1. Add product"
    "\n2. Remove product"
    "\n3. Edit product"
    "\n4. View all products"
    "\n0. Exit"
    "\nEnter choice: "
)


class Admin(User):
    """A user who can add, remove, edit and list products."""

    def show_menu(self, catalog: Catalog, console: Console) -> None:
        """Run the admin menu until the user logs out, then save the catalogue."""
        actions = {
            1: self.add_product,
            2: self.remove_product,
            3: self.edit_product,
            4: self.view_all_products,
        }
        while True:
            console.write(_MENU)
            try:
                choice = console.read_int()
            except ValueError:
                console.write("Invalid choice!\n")
                continue
            if choice == 0:
                console.write("Logging out...\n")
                break
            action = actions.get(choice)
            if action is None:
                console.write("Invalid choice!\n")
                continue
            try:
                action(catalog, console)
            except ValueError as error:
                console.write(f"Invalid input: {error}\n")
        catalog.save()

    def add_product(self, catalog: Catalog, console: Console) -> None:
        """Ask for a new product's details and add it to the catalogue."""
        console.write("Enter product ID: ")
        product_id = console.read_int()
        console.write("Enter product name: ")
        name = console.read_line()
        console.write("Enter price: ")
        price = console.read_float()
        console.write("Enter quantity: ")
        quantity = console.read_int()
        catalog.add(Product(product_id, name, price, quantity))

    def remove_product(self, catalog: Catalog, console: Console) -> None:
        """Ask for a product id and remove every product carrying it."""
        console.write("Enter product ID to remove: ")
        catalog.remove(console.read_int())

    def edit_product(self, catalog: Catalog, console: Console) -> None:
        """Ask for a product id, a new price and quantity, and apply them if it exists."""
        console.write("Enter product ID to edit: ")
        product_id = console.read_int()
        console.write("Enter new price: ")
        new_price = console.read_float()
        console.write("Enter new quantity: ")
        new_quantity = console.read_int()
        product = catalog.find(product_id)
        if product is not None:
            product.price = new_price
            product.quantity = new_quantity

    def view_all_products(self, catalog: Catalog, console: Console) -> None:
        """List every product in the catalogue."""
        for line in catalog.describe_all():
            console.write(line + "\n")