"""Tickets, their categories and the in-memory ticket registry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from typing import Iterable, Iterator, Optional, Sequence, Tuple

MAX_TICKETS = 100


class Category(Enum):
    """Kind of event a ticket belongs to."""

    CONCERT = 0
    FOOTBALL = 1

    @property
    def label(self) -> str:
        """Upper-case name shown in menus."""
        return "KONCERT" if self is Category.CONCERT else "NOGOMET"

    @property
    def toggled(self) -> "Category":
        """The other category."""
        return Category.FOOTBALL if self is Category.CONCERT else Category.CONCERT


@dataclass
class Ticket:
    """A ticket type for one event."""

    code: int
    name: str
    price: float
    available: int

    def describe(self) -> str:
        """One-line human readable summary."""
        return (
            f"Kod ulaznice: {self.code} // Naziv: {self.name} // "
            f"Cijena: {self.price:.2f} // Dostupno: {self.available}"
        )


class TicketNotFoundError(LookupError):
    """No ticket with the requested code exists."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Ulaznica s kodom {code} nije pronadena.")
        self.code = code


class RegistryFullError(Exception):
    """The registry already holds the maximum number of tickets."""


class TicketRegistry:
    """Ordered collection of tickets of one category."""

    def __init__(self, tickets: Iterable[Ticket] = ()) -> None:
        self._tickets = list(tickets)
        if len(self._tickets) > MAX_TICKETS:
            raise RegistryFullError(f"At most {MAX_TICKETS} tickets can be stored.")

    def __len__(self) -> int:
        return len(self._tickets)

    def __iter__(self) -> Iterator[Ticket]:
        return iter(self._tickets)

    def __getitem__(self, index: int) -> Ticket:
        return self._tickets[index]

    def next_code(self) -> int:
        """Code given to the next added ticket."""
        return len(self._tickets) + 1

    def add(self, name: str, price: float, available: int) -> Ticket:
        """Create a ticket with the next code and store it."""
        if len(self._tickets) >= MAX_TICKETS:
            raise RegistryFullError(f"At most {MAX_TICKETS} tickets can be stored.")
        ticket = Ticket(self.next_code(), name, price, available)
        self._tickets.append(ticket)
        return ticket

    def find(self, code: int) -> Ticket:
        """Return the first ticket with the given code."""
        for ticket in self._tickets:
            if ticket.code == code:
                return ticket
        raise TicketNotFoundError(code)

    def update(self, code: int, name: str, price: float, available: int) -> Ticket:
        """Replace the name, price and availability of a ticket."""
        ticket = self.find(code)
        ticket.name = name
        ticket.price = price
        ticket.available = available
        return ticket

    def remove(self, code: int) -> Ticket:
        """Remove and return the first ticket with the given code."""
        ticket = self.find(code)
        self._tickets.remove(ticket)
        return ticket

    def sort_by_name(self) -> None:
        """Order tickets alphabetically by name."""
        self._tickets.sort(key=attrgetter("name"))

    def sort_by_code(self) -> None:
        """Order tickets by ascending code."""
        self._tickets.sort(key=attrgetter("code"))

    def total_available(self) -> int:
        """Total number of available tickets across all entries."""
        return sum(ticket.available for ticket in self._tickets)


def linear_search(tickets: Iterable[Ticket], name: str) -> Tuple[Optional[int], int]:
    """Scan for an exact name; return (index or None, steps taken)."""
    steps = 0
    for index, ticket in enumerate(tickets):
        steps += 1
        if ticket.name == name:
            return index, steps
    return None, steps


def binary_search(tickets: Sequence[Ticket], name: str) -> Tuple[Optional[int], int]:
    """Bisect a name-sorted sequence; return (index or None, steps taken)."""
    low, high = 0, len(tickets) - 1
    steps = 0
    while low <= high:
        middle = (low + high) // 2
        steps += 1
        current = tickets[middle].name
        if current == name:
            return middle, steps
        if current > name:
            high = middle - 1
        else:
            low = middle + 1
    return None, steps