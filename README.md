# shopdesk

A small interactive console shop. Products are kept in a plain text
catalog file and user accounts in a plain text users file. Each person
logs in either as an administrator or as a buyer.

## Installing

    pip install .

## Running

    shopdesk

By default the program uses `users.txt` and `products.txt` in the current
directory. Other files can be given on the command line:

    shopdesk --users accounts.txt --products stock.txt

The main menu offers:

1. Login
2. Register
0. Exit

Choosing `0`, or reaching the end of input, ends the program. Any other
entry prints `Invalid choice! Please select 1-3.` and shows the menu again.

Registration appends a new account with the role `user`. It is refused
when the same username and password already match an account in the file.
Logging in with an account whose role is `admin` opens the admin menu;
every other role opens the buyer menu. If the users file cannot be read,
an error goes to standard error and the login fails.

### Admin menu

1. Add product: asks for the ID, name, price and quantity.
2. Remove product: removes every product with the given ID.
3. Edit product: sets a new price and quantity on the product with the
   given ID; nothing changes if no product has that ID.
4. View all products.
0. Exit: logs out and writes the catalog back to its file.

### Buyer menu

1. View products.
2. Add to cart: adds a product ID to the cart if that product exists.
3. View cart: lists each cart entry as a single unit, followed by the
   total of their prices in UAH.
4. Checkout: shows the cart, asks for confirmation (`1` to confirm),
   then takes one unit of stock for each cart entry, empties the cart and
   saves the catalog.
0. Exit: logs out. The catalog is saved only by a confirmed checkout.

In both menus, input that is not a number where one is expected prints a
message and returns to the menu.

## File formats

The users file holds one account per line, with whitespace-separated
fields `username password role`:

    alice password admin

Lines with fewer than three fields are ignored.

The products file holds one product per line in the order id, price,
quantity and name. The name is the rest of the line and may contain
spaces:

    1 19.99 10 Blue mug

Lines that do not parse are skipped when loading. Prices are written with
up to six significant digits.

## Using it from Python

```python
from shopdesk.catalog import Catalog
from shopdesk.product import Product

catalog = Catalog("products.txt")
catalog.load()
catalog.add(Product(7, "Tea pot", 250.0, 3))
print(catalog.describe_all())
catalog.save()
```

- `shopdesk.product.Product` is a dataclass with `id`, `name`, `price` and
  `quantity`, plus `describe()` and `describe_in_cart()` summary lines.
- `shopdesk.catalog.Catalog` offers `load`, `save`, `add`, `remove`,
  `find`, `describe_all`, iteration and `len`.
- `shopdesk.users.UserStore` offers `authenticate(username, password)`,
  returning the role or `None`, and `register(username, password, role)`,
  which raises `UserExistsError` for an existing account.
- `shopdesk.admin.Admin` and `shopdesk.buyer.Buyer` implement the two
  menus through `show_menu(catalog, console)`; `Buyer.cart_total(catalog)`
  gives the cart total.
- `shopdesk.cli.run(console, users, catalog_path)` drives the whole menu
  loop through a `shopdesk.console.Console`, which can wrap any pair of
  text streams.

## Limitations

Passwords are stored and compared as plain text, and there is no way to
change or delete an account, or to make a user an administrator, other
than editing the users file by hand. Stock may go below zero at checkout,
since quantities are not checked when items are added to the cart.

## Tests

    pip install .[test]
    pytest