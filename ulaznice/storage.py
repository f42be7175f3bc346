"""Reading and writing the plain-text ticket database."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from ulaznice.model import MAX_TICKETS, Ticket

DATABASE = "ulaznice.txt"
BACKUP = "backup_ulaznice.txt"
MAX_NAME_LENGTH = 100

PathLike = Union[str, "os.PathLike[str]"]


class StorageError(Exception):
    """The database could not be read, written or parsed."""


def format_ticket(ticket: Ticket) -> str:
    """Render one ticket as a database line, without newline."""
    return f"{ticket.code}//{ticket.name}|{ticket.price:.2f}|{ticket.available}"


def parse_ticket(line: str) -> Ticket:
    """Parse one database line into a ticket."""
    code_text, separator, rest = line.strip().partition("//")
    fields = rest.split("|")
    if not separator or len(fields) != 3:
        raise StorageError(f"Malformed ticket line: {line!r}")
    name, price_text, available_text = fields
    if not name or len(name) > MAX_NAME_LENGTH:
        raise StorageError(f"Invalid ticket name in line: {line!r}")
    try:
        return Ticket(int(code_text), name, float(price_text), int(available_text))
    except ValueError as exc:
        raise StorageError(f"Malformed ticket line: {line!r}") from exc


def dump(concerts: Iterable[Ticket], football: Iterable[Ticket]) -> str:
    """Serialise both categories into database text."""
    parts: List[str] = []
    for section in (list(concerts), list(football)):
        parts.append(str(len(section)))
        parts.extend(format_ticket(ticket) for ticket in section)
    return "\n".join(parts) + "\n"


def _read_section(lines: Iterator[str], label: str) -> List[Ticket]:
    header = next(lines, None)
    if header is None:
        raise StorageError(f"Greska pri citanju broja {label} ulaznica.")
    try:
        count = int(header)
    except ValueError as exc:
        raise StorageError(f"Greska pri citanju broja {label} ulaznica.") from exc
    if count > MAX_TICKETS:
        raise StorageError(f"Too many {label} tickets: {count}")
    tickets: List[Ticket] = []
    for _ in range(count):
        line = next(lines, None)
        if line is None:
            break
        try:
            tickets.append(parse_ticket(line))
        except StorageError:
            continue
    return tickets


def parse(text: str) -> Tuple[List[Ticket], List[Ticket]]:
    """Parse database text into (concerts, football); malformed records are skipped."""
    if not text:
        return [], []
    lines = (line for line in text.splitlines() if line.strip())
    concerts = _read_section(lines, "koncert")
    football = _read_section(lines, "nogometnih")
    return concerts, football


def load(path: PathLike = DATABASE) -> Tuple[List[Ticket], List[Ticket]]:
    """Load the database, creating an empty one if it does not exist."""
    path = Path(path)
    try:
        if not path.exists():
            path.write_text(dump([], []), encoding="utf-8")
            return [], []
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Greska pri otvaranju datoteke: {exc}") from exc
    return parse(text)


def save(path: PathLike, concerts: Iterable[Ticket], football: Iterable[Ticket]) -> None:
    """Write both categories to the database file."""
    try:
        Path(path).write_text(dump(concerts, football), encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Greska pri otvaranju datoteke za pisanje: {exc}") from exc


def delete_database(path: PathLike = DATABASE) -> None:
    """Delete the database file."""
    try:
        os.remove(path)
    except OSError as exc:
        raise StorageError(f"Ne moze se obrisati datoteka: {exc}") from exc


def rename_database(path: PathLike = DATABASE, backup: PathLike = BACKUP) -> None:
    """Rename the database file to its backup name."""
    try:
        os.rename(path, backup)
    except OSError as exc:
        raise StorageError(f"Greska pri preimenovanju datoteke: {exc}") from exc