"""Shopping basket that reserves tickets from a registry."""

from __future__ import annotations

from typing import Iterator, List

from ulaznice.model import MAX_TICKETS, Ticket


class BasketError(Exception):
    """A ticket could not be added to or removed from the basket."""


class Basket:
    """Holds at most one of each ticket code, reserving one seat per entry."""

    def __init__(self) -> None:
        self._items: List[Ticket] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Ticket]:
        return iter(self._items)

    def __contains__(self, code: object) -> bool:
        return any(item.code == code for item in self._items)

    def add(self, ticket: Ticket) -> None:
        """Put a ticket in the basket and take one from its availability."""
        if ticket.available <= 0:
            raise BasketError("Nema dostupnih ulaznica ovog tipa.")
        if len(self._items) >= MAX_TICKETS:
            raise BasketError("Kosarica je puna!")
        if ticket.code in self:
            raise BasketError("Ova ulaznica je vec u kosarici.")
        self._items.append(ticket)
        ticket.available -= 1

    def remove(self, code: int) -> Ticket:
        """Take a ticket out of the basket and return its seat."""
        for item in self._items:
            if item.code == code:
                item.available += 1
                self._items.remove(item)
                return item
        raise BasketError(f"Ulaznica s kodom {code} nije pronadena u kosarici.")

    def total_price(self) -> float:
        """Sum of the prices of all tickets in the basket."""
        return sum(item.price for item in self._items)