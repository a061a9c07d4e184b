"""The product catalogue and its plain-text storage."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from shopdesk.product import Product, format_number

DEFAULT_PATH = "products.txt"


def _parse_line(line: str) -> Product | None:
    parts = line.split(maxsplit=3)
    if len(parts) < 4:
        return None
    try:
        product_id = int(parts[0])
        price = float(parts[1])
        quantity = int(parts[2])
    except ValueError:
        return None
    return Product(product_id, parts[3], price, quantity)


class Catalog:
    """An ordered collection of products backed by a text file.

    Each line of the file holds ``id price quantity name``; the name is the
    rest of the line and may contain spaces.
    """

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self._products: list[Product] = []

    def load(self) -> None:
        """Replace the products with those in the file; keep them if it cannot be opened."""
        try:
            with self.path.open(encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except OSError:
            return
        self._products = [
            product for product in map(_parse_line, lines) if product is not None
        ]

    def save(self) -> None:
        """Write every product to the file, replacing its contents."""
        with self.path.open("w", encoding="utf-8") as handle:
            for product in self._products:
                handle.write(
                    f"{product.id} {format_number(product.price)} "
                    f"{product.quantity} {product.name}\n"
                )

    def add(self, product: Product) -> None:
        """Append a product."""
        self._products.append(product)

    def remove(self, product_id: int) -> bool:
        """Remove every product with this id; report whether any was removed."""
        kept = [product for product in self._products if product.id != product_id]
        removed = len(kept) != len(self._products)
        self._products = kept
        return removed

    def find(self, product_id: int) -> Product | None:
        """The first product with this id, or None."""
        return next(
            (product for product in self._products if product.id == product_id), None
        )

    def describe_all(self) -> list[str]:
        """Summary lines for all products, in catalogue order."""
        return [product.describe() for product in self._products]

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)