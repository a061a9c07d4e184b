"""Products offered by the shop."""

from __future__ import annotations

from dataclasses import dataclass


def format_number(value: float) -> str:
    """Render a price with up to six significant digits, as listings and files show it."""
    return format(float(value), "g")


@dataclass
class Product:
    """A catalogue entry: identifier, name, unit price and stock quantity."""

    id: int
    name: str
    price: float
    quantity: int

    def describe(self) -> str:
        """One-line summary including the stock quantity."""
        return self._summary(self.quantity)

    def describe_in_cart(self) -> str:
        """One-line summary of a single unit as it sits in a cart."""
        return self._summary(1)

    def _summary(self, quantity: int) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, "
            f"Price: {format_number(self.price)}, Quantity: {quantity}"
        )