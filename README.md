# ulaznice

A small console program for keeping a register of event tickets, split
into two categories: concerts (`KONCERT`) and football matches
(`NOGOMET`). Each category has its own list of tickets and its own
shopping basket. The prompts and messages are in Croatian.

## Installation

```
pip install .
```

## Running

```
ulaznice
ulaznice --database path/to/ulaznice.txt
```

At start-up the program reads the database file (`ulaznice.txt` in the
current directory unless `--database` names another path) and creates
an empty one if it is missing. It then asks which category to work with
(1 for concerts, 2 for football) and shows the menu:

| Option | Action |
|-------:|--------|
| 1  | Add a ticket (event name, price, number available); it gets the next code |
| 2  | List all tickets in the active category |
| 3  | Update a ticket by its code (an empty name keeps the current one) |
| 4  | Delete a ticket by its code |
| 5  | Add a ticket to the basket (takes one from its available count) |
| 6  | Remove a ticket from the basket (gives one back to its available count) |
| 7  | Show the basket and its total price in EUR |
| 8  | Switch between concerts and football |
| 9  | Sequential (linear) search by exact name |
| 10 | Binary search by exact name (sort by name first) |
| 11 | Sort tickets by name |
| 12 | Sort tickets by code |
| 14 | Show the total number of available tickets |
| 15 | Delete the database file |
| 16 | Rename the database file to `backup_ulaznice.txt` in the same directory |
| 0  | Save and exit |

Option 13 has no action and is answered with "Nepoznata opcija.", like
any other unknown number. A basket holds each ticket code at most once.

Adding and updating a ticket save the register at once; deleting a
ticket does not, so the change is written on exit. Choosing 0, or
reaching the end of input, saves the register before the program ends.

The searches take only the first word of what is typed, so a name that
contains spaces cannot be found with them.

## Database format

The database is a plain text file. It starts with the number of
concert tickets, followed by one line per ticket, and then the same for
football tickets:

```
2
1//Rock Night|25.00|100
2//Jazz Evening|40.50|30
1
1//Derby|15.00|5000
```

Each ticket line has the form `code//name|price|available`. The price is
written with two decimal places. Malformed ticket lines are skipped
when the file is read; at most 100 tickets are kept per category.

## Use as a library

```python
from ulaznice.model import TicketRegistry, binary_search
from ulaznice.basket import Basket

registry = TicketRegistry([])
registry.add("Rock Night", 25.0, 100)
registry.add("Jazz Evening", 40.5, 30)
registry.sort_by_name()
index, steps = binary_search(list(registry), "Rock Night")

basket = Basket()
basket.add(registry.find(1))
print(basket.total_price())
```

- `ulaznice.model`: `Category`, `Ticket`, `TicketRegistry`,
  `linear_search`, `binary_search`, and the errors
  `TicketNotFoundError` and `RegistryFullError`.
- `ulaznice.basket`: `Basket` and `BasketError`.
- `ulaznice.storage`: `load`, `save`, `parse`, `dump`, `format_ticket`,
  `parse_ticket`, `delete_database`, `rename_database` and
  `StorageError`.
- `ulaznice.cli`: `Session`, `MenuOption` and `main`.

## What it does not do

Nothing is sold or paid for: the basket only reserves seats in memory
for the running session and is not saved to the database file. There is
no multi-user access or locking of the database file.