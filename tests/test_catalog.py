import pytest

from shopdesk.catalog import Catalog
from shopdesk.product import Product


@pytest.fixture
def catalog(tmp_path):
    return Catalog(tmp_path / "products.txt")


def test_starts_empty(catalog):
    assert len(catalog) == 0
    assert list(catalog) == []


def test_save_writes_one_line_per_product(catalog):
    catalog.add(Product(1, "Green tea", 19.5, 5))
    catalog.add(Product(2, "Blue mug", 80.0, 3))
    catalog.save()
    assert catalog.path.read_text(encoding="utf-8") == "1 19.5 5 Green tea\n2 80 3 Blue mug\n"


def test_round_trip(catalog):
    originals = [Product(1, "Green tea", 19.5, 5), Product(7, "Big  red box", 3.25, 0)]
    for product in originals:
        catalog.add(product)
    catalog.save()
    reloaded = Catalog(catalog.path)
    reloaded.load()
    assert list(reloaded) == originals


def test_load_reads_name_with_spaces(catalog):
    catalog.path.write_text("3 2.5 10   Black   tea leaves\n", encoding="utf-8")
    catalog.load()
    assert list(catalog) == [Product(3, "Black   tea leaves", 2.5, 10)]


def test_load_skips_malformed_lines(catalog):
    catalog.path.write_text(
        "1 2.0 3 Good\n\nabc 1 1 Bad\n4 5.0 6\n5 x 1 Bad\n8 1.5 2 Fine\n",
        encoding="utf-8",
    )
    catalog.load()
    assert [product.id for product in catalog] == [1, 8]


def test_load_missing_file_keeps_products(catalog):
    catalog.add(Product(1, "Tea", 1.0, 1))
    catalog.load()
    assert len(catalog) == 1


def test_load_replaces_existing_products(catalog):
    catalog.path.write_text("9 1 1 Fresh\n", encoding="utf-8")
    catalog.add(Product(1, "Stale", 1.0, 1))
    catalog.load()
    assert [product.name for product in catalog] == ["Fresh"]


def test_remove_existing_and_missing(catalog):
    catalog.add(Product(1, "Tea", 1.0, 1))
    catalog.add(Product(2, "Mug", 2.0, 2))
    assert catalog.remove(1) is True
    assert catalog.remove(1) is False
    assert [product.id for product in catalog] == [2]


def test_remove_drops_all_duplicates(catalog):
    catalog.add(Product(1, "Tea", 1.0, 1))
    catalog.add(Product(1, "Tea again", 1.0, 1))
    assert catalog.remove(1) is True
    assert len(catalog) == 0


def test_find_returns_live_product(catalog):
    catalog.add(Product(1, "Tea", 1.0, 1))
    found = catalog.find(1)
    found.quantity = 40
    assert catalog.find(1).quantity == 40
    assert catalog.find(99) is None


def test_find_returns_first_match(catalog):
    catalog.add(Product(1, "First", 1.0, 1))
    catalog.add(Product(1, "Second", 1.0, 1))
    assert catalog.find(1).name == "First"


def test_describe_all(catalog):
    catalog.add(Product(1, "Tea", 1.5, 4))
    catalog.add(Product(2, "Mug", 2.0, 2))
    assert catalog.describe_all() == [
        "ID: 1, Name: Tea, Price: 1.5, Quantity: 4",
        "ID: 2, Name: Mug, Price: 2, Quantity: 2",
    ]