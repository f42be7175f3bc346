"""Interactive text menu for managing tickets and baskets."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from ulaznice import storage
from ulaznice.basket import Basket, BasketError
from ulaznice.model import (
    Category,
    RegistryFullError,
    Ticket,
    TicketNotFoundError,
    TicketRegistry,
    binary_search,
    linear_search,
)

MAX_INPUT_LENGTH = 99


class MenuOption(IntEnum):
    """Numbers of the main menu entries."""

    EXIT = 0
    ADD = 1
    SHOW = 2
    UPDATE = 3
    REMOVE = 4
    BASKET_ADD = 5
    BASKET_REMOVE = 6
    BASKET_SHOW = 7
    SWITCH_CATEGORY = 8
    LINEAR_SEARCH = 9
    BINARY_SEARCH = 10
    SORT_BY_NAME = 11
    SORT_BY_CODE = 12
    SORT_QUICK = 13
    TOTAL_AVAILABLE = 14
    DELETE_DATABASE = 15
    RENAME_DATABASE = 16


_MENU_LABELS = (
    (MenuOption.ADD, "Dodaj ulaznicu"),
    (MenuOption.SHOW, "Prikazi sve ulaznice"),
    (MenuOption.UPDATE, "Azuriraj ulaznicu"),
    (MenuOption.REMOVE, "Obrisi ulaznicu"),
    (MenuOption.BASKET_ADD, "Dodaj u kosaricu"),
    (MenuOption.BASKET_REMOVE, "Ukloni iz kosarice"),
    (MenuOption.BASKET_SHOW, "Prikazi kosaricu"),
    (MenuOption.SWITCH_CATEGORY, "Promijeni kategoriju"),
    (MenuOption.LINEAR_SEARCH, "Sekvencijalna pretraga"),
    (MenuOption.BINARY_SEARCH, "Binarna pretraga"),
    (MenuOption.SORT_BY_NAME, "Sortiraj ulaznice abecedno"),
    (MenuOption.SORT_BY_CODE, "Sortiraj ulaznice po kodu ulaznice"),
    (MenuOption.TOTAL_AVAILABLE, "Prikazi zbroj dostupnih ulaznica"),
    (MenuOption.DELETE_DATABASE, "Obrisi bazu"),
    (MenuOption.RENAME_DATABASE, "Preimenuj bazu"),
)


def _parse_int(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    tokens = text.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _parse_float(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    tokens = text.split()
    if not tokens:
        return None
    try:
        return float(tokens[0])
    except ValueError:
        return None


class Session:
    """One interactive session over the ticket database."""

    def __init__(
        self,
        path: storage.PathLike = storage.DATABASE,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.path = Path(path)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.category = Category.CONCERT
        self.baskets: Dict[Category, Basket] = {c: Basket() for c in Category}
        try:
            concerts, football = storage.load(self.path)
        except storage.StorageError as exc:
            self._write(f"{exc}\n")
            concerts, football = [], []
        self.registries: Dict[Category, TicketRegistry] = {
            Category.CONCERT: TicketRegistry(concerts),
            Category.FOOTBALL: TicketRegistry(football),
        }
        self._actions: Dict[MenuOption, Callable[[], None]] = {
            MenuOption.EXIT: self._exit,
            MenuOption.ADD: self._add_ticket,
            MenuOption.SHOW: self._show_tickets,
            MenuOption.UPDATE: self._update_ticket,
            MenuOption.REMOVE: self._remove_ticket,
            MenuOption.BASKET_ADD: self._basket_add,
            MenuOption.BASKET_REMOVE: self._basket_remove,
            MenuOption.BASKET_SHOW: self._basket_show,
            MenuOption.SWITCH_CATEGORY: self._switch_category,
            MenuOption.LINEAR_SEARCH: self._linear_search,
            MenuOption.BINARY_SEARCH: self._binary_search,
            MenuOption.SORT_BY_NAME: self._sort_by_name,
            MenuOption.SORT_BY_CODE: self._sort_by_code,
            MenuOption.TOTAL_AVAILABLE: self._total_available,
            MenuOption.DELETE_DATABASE: self._delete_database,
            MenuOption.RENAME_DATABASE: self._rename_database,
        }

    @property
    def registry(self) -> TicketRegistry:
        """Tickets of the active category."""
        return self.registries[self.category]

    @property
    def basket(self) -> Basket:
        """Basket of the active category."""
        return self.baskets[self.category]

    # -- input and output -------------------------------------------------

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _read_line(self, prompt: str) -> Optional[str]:
        self._write(prompt)
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def _read_int_until_valid(self, prompt: str, retry: str) -> int:
        self._write(prompt)
        while True:
            line = self.stdin.readline()
            if not line:
                raise EOFError("input ended")
            value = _parse_int(line)
            if value is not None:
                return value
            self._write(retry)

    def _read_word(self, prompt: str) -> Optional[str]:
        line = self._read_line(prompt)
        if line is None or not line.split():
            return None
        return line.split()[0][:MAX_INPUT_LENGTH]

    def _save(self) -> None:
        try:
            storage.save(
                self.path,
                self.registries[Category.CONCERT],
                self.registries[Category.FOOTBALL],
            )
        except storage.StorageError as exc:
            self._write(f"{exc}\n")

    # -- session flow -----------------------------------------------------

    def choose_category(self) -> Category:
        """Ask for the starting category until 1 or 2 is given."""
        while True:
            line = self._read_line("Odaberite kategoriju:\n1. Koncert\n2. Nogomet\nOdabir: ")
            if line is None:
                raise EOFError("input ended")
            choice = _parse_int(line)
            if choice is None:
                self._write("Neispravan unos. Treba unijeti broj 1 ili 2.\n")
                continue
            if choice in (1, 2):
                self.category = Category.CONCERT if choice == 1 else Category.FOOTBALL
                return self.category

    def _menu_text(self) -> str:
        lines = [f"\n{self.category.label}"]
        lines.extend(f"{option.value}. {label}" for option, label in _MENU_LABELS)
        lines.append(f"{MenuOption.EXIT.value}. Izlaz")
        return "\n".join(lines) + "\nOdabir: "

    def run(self) -> None:
        """Show the menu and carry out choices until the user exits."""
        while True:
            try:
                choice = self._read_int_until_valid(
                    self._menu_text(), "Neispravan unos. Pokusajte ponovo: "
                )
                if not self.handle(choice):
                    return
            except EOFError:
                self.handle(MenuOption.EXIT)
                return

    def handle(self, option: int) -> bool:
        """Carry out one menu option; return False once the session should end."""
        try:
            selected: Optional[MenuOption] = MenuOption(option)
        except ValueError:
            selected = None
        action = self._actions.get(selected) if selected is not None else None
        if action is None:
            self._write("Nepoznata opcija.\n")
            return True
        action()
        return selected is not MenuOption.EXIT

    # -- ticket actions ---------------------------------------------------

    def _add_ticket(self) -> None:
        name = self._read_line("Unesi naziv dogadjaja: ")
        if name is None:
            self._write("Greska pri unosu naziva dogadjaja.\n")
            return
        price = _parse_float(self._read_line("Unesi cijenu: "))
        if price is None:
            self._write("Greska pri unosu cijene.\n")
            return
        available = _parse_int(self._read_line("Unesi broj dostupnih ulaznica: "))
        if available is None:
            self._write("Greska pri unosu broja ulaznica.\n")
            return
        try:
            self.registry.add(name, price, available)
        except RegistryFullError as exc:
            self._write(f"{exc}\n")
            return
        self._save()
        self._write("Ulaznica dodana!\n")

    def _show_tickets(self) -> None:
        self._write("Dostupne ulaznice: \n")
        for ticket in self.registry:
            self._write(ticket.describe() + "\n")

    def _update_ticket(self) -> None:
        code = _parse_int(self._read_line("Unesi kod ulaznice za azuriranje: "))
        if code is None:
            self._write("Neispravan unos koda ulaznice.\n")
            return
        try:
            ticket = self.registry.find(code)
        except TicketNotFoundError:
            self._write("Ulaznica nije pronadena.\n")
            return
        name_line = self._read_line(f"Unesi novi naziv dogadjaja (trenutni: {ticket.name}): ")
        name = name_line if name_line else ticket.name
        price = _parse_float(self._read_line(f"Nova cijena (trenutna: {ticket.price:.2f}): "))
        if price is None:
            self._write("Neispravan unos cijene.\n")
            return
        available = _parse_int(
            self._read_line(f"Novi broj dostupnih ulaznica (trenutno: {ticket.available}): ")
        )
        if available is None:
            self._write("Neispravan unos broja dostupnih ulaznica.\n")
            return
        self.registry.update(code, name, price, available)
        self._write("Ulaznica je uspjesno azurirana.\n")
        self._save()

    def _remove_ticket(self) -> None:
        code = _parse_int(self._read_line("Unesi kod ulaznice za brisanje: "))
        if code is None:
            self._write("Neispravan unos koda ulaznice.\n")
            return
        try:
            self.registry.remove(code)
        except TicketNotFoundError:
            self._write("Ulaznica nije pronadena.\n")
            return
        self._write("Ulaznica obrisana.\n")

    # -- basket actions ---------------------------------------------------

    def _basket_add(self) -> None:
        self._write(f"Broj koncert ulaznica: {len(self.registries[Category.CONCERT])}\n")
        self._write(f"Broj nogomet ulaznica: {len(self.registries[Category.FOOTBALL])}\n")
        self._write(f"Aktivna vrsta: {self.category.value}\n")
        self._show_tickets()
        code = self._read_int_until_valid(
            "\nUnesite kod ulaznice za dodavanje u kosaricu: ",
            "Neispravan unos, treba unijeti broj.\nPokusajte ponovno: ",
        )
        try:
            ticket = self.registry.find(code)
        except TicketNotFoundError as exc:
            self._write(f"{exc}\n")
            return
        try:
            self.basket.add(ticket)
        except BasketError as exc:
            self._write(f"{exc}\n")
            return
        self._write(f"Ulaznica {ticket.name} je dodana u kosaricu.\n")

    def _basket_remove(self) -> None:
        if not len(self.basket):
            self._write("Kosarica je prazna.\n")
            return
        self._basket_show()
        code = self._read_int_until_valid(
            "\nUnesite kod ulaznice za uklanjanje iz kosarice: ",
            "Neispravan unos, treba unijeti broj.\nPokusajte ponovno: ",
        )
        try:
            self.basket.remove(code)
        except BasketError as exc:
            self._write(f"{exc}\n")
            return
        self._write("Ulaznica je uklonjena iz kosarice.\n")

    def _basket_show(self) -> None:
        basket = self.basket
        self._write("\nKosarica\n")
        self._write(f"Kategorija: {self.category.label}\n")
        if not len(basket):
            self._write("Kosarica je prazna.\n")
            return
        items: List[Ticket] = list(basket)
        for number, ticket in enumerate(items, start=1):
            self._write(f"{number:2d}. {ticket.describe()}\n")
        self._write(f"\nUKUPNO: {len(items)} ulaznica, {basket.total_price():.2f} EUR\n")

    def _switch_category(self) -> None:
        self.category = self.category.toggled

    # -- search, sort and totals -----------------------------------------

    def _report_search(self, tickets: Sequence[Ticket], index: Optional[int], steps: int) -> None:
        if index is None:
            self._write("Ulaznica nije pronadjena.\n")
            return
        self._write(f"Ulaznica je pronadjena nakon {steps} koraka na indeksu {index}.\n")
        self._write(tickets[index].describe() + "\n")

    def _linear_search(self) -> None:
        term = self._read_word("Unesi naziv za sekvencijalnu (linearnu) pretragu: ")
        if term is None:
            self._write("Neispravan unos naziva.\n")
            return
        tickets = list(self.registry)
        index, steps = linear_search(tickets, term)
        self._report_search(tickets, index, steps)

    def _binary_search(self) -> None:
        term = self._read_word("Unesi naziv za binarnu pretragu: ")
        if term is None:
            self._write("Neispravan unos naziva.\n")
            return
        tickets = list(self.registry)
        index, steps = binary_search(tickets, term)
        self._report_search(tickets, index, steps)

    def _sort_by_name(self) -> None:
        self.registry.sort_by_name()
        self._write("Ulaznice sortirane biranjem (selection sort).\n")

    def _sort_by_code(self) -> None:
        self.registry.sort_by_code()
        self._write("Ulaznice sortirane po kodu ulaznice.\n")

    def _total_available(self) -> None:
        self._write(f"Ukupan broj dostupnih ulaznica: {self.registry.total_available()}\n")

    # -- database file ----------------------------------------------------

    def _delete_database(self) -> None:
        try:
            storage.delete_database(self.path)
        except storage.StorageError as exc:
            self._write(f"{exc}\n")
            return
        self._write("Datoteka uspjesno obrisana.\n")

    def _rename_database(self) -> None:
        try:
            storage.rename_database(self.path, self.path.with_name(storage.BACKUP))
        except storage.StorageError as exc:
            self._write(f"{exc}\n")
            return
        self._write("Datoteka uspjesno preimenovana.\n")

    def _exit(self) -> None:
        self._save()
        self._write("Izlaz.\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive ticket menu."""
    parser = argparse.ArgumentParser(prog="ulaznice", description="Ticket sales menu.")
    parser.add_argument(
        "--database",
        default=storage.DATABASE,
        help="path of the ticket database file",
    )
    args = parser.parse_args(argv)
    session = Session(args.database)
    try:
        session.choose_category()
    except EOFError:
        return 0
    session.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())