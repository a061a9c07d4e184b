"""The buyer's menu: browsing, a cart and checkout."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shopdesk.product import format_number
from shopdesk.users import User

if TYPE_CHECKING:
    from shopdesk.catalog import Catalog
    from shopdesk.console import Console

_MENU = (
    "\n=== BUYER MENU ==="
    "\n1. View products"
    "\n2. Add to cart"
    "\n3. View cart"
    "\n4. Checkout"
    "\n0. Exit"
    "\nEnter choice: "
)


class Buyer(User):
    """A user who collects product ids in a cart and buys them."""

    def __init__(self, username: str, password: str) -> None:
        super().__init__(username, password)
        self.cart: list[int] = []

    def show_menu(self, catalog: Catalog, console: Console) -> None:
        """Run the buyer menu until the user logs out."""
        actions = {
            1: self.view_products,
            2: self.add_to_cart,
            3: self.view_cart,
            4: self.checkout,
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
                return
            action = actions.get(choice)
            if action is None:
                console.write("Invalid choice!\n")
                continue
            try:
                action(catalog, console)
            except ValueError as error:
                console.write(f"Invalid input: {error}\n")

    def view_products(self, catalog: Catalog, console: Console) -> None:
        """List every product in the catalogue."""
        for line in catalog.describe_all():
            console.write(line + "\n")

    def add_to_cart(self, catalog: Catalog, console: Console) -> None:
        """Ask for a product id and put it in the cart if the product exists."""
        console.write("Enter product ID to add: ")
        product_id = console.read_int()
        if catalog.find(product_id) is not None:
            self.cart.append(product_id)
            console.write("Product added to cart!\n")
        else:
            console.write("Product not found!\n")

    def cart_total(self, catalog: Catalog) -> float:
        """Sum of unit prices of the cart entries still in the catalogue."""
        total = 0.0
        for product_id in self.cart:
            product = catalog.find(product_id)
            if product is not None:
                total += product.price
        return total

    def view_cart(self, catalog: Catalog, console: Console) -> None:
        """Show each cart entry and the total."""
        console.write("\n=== YOUR CART ===\n")
        for product_id in self.cart:
            product = catalog.find(product_id)
            if product is not None:
                console.write(product.describe_in_cart() + "\n")
        console.write(f"Total: {format_number(self.cart_total(catalog))} UAH\n")

    def checkout(self, catalog: Catalog, console: Console) -> None:
        """Show the cart and, on confirmation, take one unit of stock per entry and save."""
        self.view_cart(catalog, console)
        console.write("Confirm purchase (1 - Yes, 0 - No): ")
        confirm = console.read_int()
        if confirm != 1:
            return
        for product_id in self.cart:
            product = catalog.find(product_id)
            if product is not None:
                product.quantity -= 1
        self.cart.clear()
        catalog.save()
        console.write("Purchase completed!\n")