import pytest

from ulaznice.model import (
    MAX_TICKETS,
    Category,
    RegistryFullError,
    Ticket,
    TicketNotFoundError,
    TicketRegistry,
    binary_search,
    linear_search,
)


def make_registry():
    registry = TicketRegistry()
    registry.add("Zeppelin", 40.0, 3)
    registry.add("Abba", 25.5, 10)
    registry.add("Metallica", 60.0, 0)
    return registry


def test_codes_follow_count():
    registry = make_registry()
    assert [t.code for t in registry] == list(range(1, len(registry) + 1))


def test_describe_format():
    ticket = Ticket(1, "Koncert", 10.5, 5)
    assert ticket.describe() == "Kod ulaznice: 1 // Naziv: Koncert // Cijena: 10.50 // Dostupno: 5"


def test_find_returns_stored_ticket():
    registry = make_registry()
    assert registry.find(2) is registry[1]


def test_find_missing_raises():
    registry = make_registry()
    with pytest.raises(TicketNotFoundError):
        registry.find(42)


def test_update_changes_fields():
    registry = make_registry()
    registry.update(1, "Queen", 33.25, 7)
    ticket = registry.find(1)
    assert (ticket.name, ticket.price, ticket.available) == ("Queen", 33.25, 7)


def test_update_missing_raises():
    registry = make_registry()
    with pytest.raises(TicketNotFoundError):
        registry.update(99, "x", 1.0, 1)


def test_remove():
    registry = make_registry()
    removed = registry.remove(2)
    assert removed.name == "Abba"
    assert all(t.code != 2 for t in registry)
    with pytest.raises(TicketNotFoundError):
        registry.find(2)


def test_next_code_after_remove():
    registry = make_registry()
    registry.remove(1)
    assert registry.next_code() == len(registry) + 1


def test_sort_by_name_and_code():
    registry = make_registry()
    registry.sort_by_name()
    names = [t.name for t in registry]
    assert names == sorted(names)
    registry.sort_by_code()
    codes = [t.code for t in registry]
    assert codes == sorted(codes)


def test_total_available_tracks_updates():
    assert TicketRegistry().total_available() == 0
    registry = make_registry()
    before = registry.total_available()
    ticket = registry.find(3)
    registry.update(3, ticket.name, ticket.price, ticket.available + 5)
    assert registry.total_available() - before == 5


def test_registry_full():
    registry = TicketRegistry()
    for number in range(MAX_TICKETS):
        registry.add(f"E{number}", 1.0, 1)
    with pytest.raises(RegistryFullError):
        registry.add("extra", 1.0, 1)
    with pytest.raises(RegistryFullError):
        TicketRegistry(Ticket(n, "x", 1.0, 1) for n in range(MAX_TICKETS + 1))


def test_linear_search():
    registry = make_registry()
    for ticket in registry:
        index, steps = linear_search(registry, ticket.name)
        assert registry[index] is ticket
        assert steps == index + 1
    assert linear_search(registry, "Nobody") == (None, len(registry))


def test_binary_search():
    registry = make_registry()
    registry.sort_by_name()
    tickets = list(registry)
    for ticket in tickets:
        index, steps = binary_search(tickets, ticket.name)
        assert tickets[index] is ticket
        assert 1 <= steps <= len(tickets)
    index, _ = binary_search(tickets, "Nobody")
    assert index is None
    assert binary_search([], "x") == (None, 0)


def test_binary_search_hits_middle_first():
    tickets = [Ticket(1, "a", 1.0, 1), Ticket(2, "b", 1.0, 1), Ticket(3, "c", 1.0, 1)]
    assert binary_search(tickets, "b") == (1, 1)


@pytest.mark.parametrize(
    ("category", "label", "other"),
    [
        (Category.CONCERT, "KONCERT", Category.FOOTBALL),
        (Category.FOOTBALL, "NOGOMET", Category.CONCERT),
    ],
)
def test_category_labels(category, label, other):
    looked_up = Category(category.value)
    assert looked_up is category
    assert looked_up.label == label
    assert looked_up.toggled is other
    assert looked_up.toggled.toggled is category