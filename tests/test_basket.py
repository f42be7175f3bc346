import pytest

from ulaznice.basket import Basket, BasketError
from ulaznice.model import MAX_TICKETS, Ticket


def test_add_reserves_seat():
    ticket = Ticket(1, "Abba", 25.5, 4)
    basket = Basket()
    basket.add(ticket)
    assert ticket.available == 3
    assert 1 in basket
    assert list(basket) == [ticket]


def test_add_duplicate_raises():
    ticket = Ticket(1, "Abba", 25.5, 4)
    basket = Basket()
    basket.add(ticket)
    with pytest.raises(BasketError):
        basket.add(ticket)
    assert ticket.available == 3
    assert len(basket) == 1


def test_add_unavailable_raises():
    ticket = Ticket(2, "Sold out", 10.0, 0)
    basket = Basket()
    with pytest.raises(BasketError):
        basket.add(ticket)
    assert 2 not in basket
    assert ticket.available == 0


def test_remove_restores_seat():
    ticket = Ticket(1, "Abba", 25.5, 4)
    basket = Basket()
    basket.add(ticket)
    removed = basket.remove(1)
    assert removed is ticket
    assert ticket.available == 4
    assert 1 not in basket


def test_remove_missing_raises():
    basket = Basket()
    basket.add(Ticket(1, "Abba", 25.5, 4))
    with pytest.raises(BasketError):
        basket.remove(7)
    assert len(basket) == 1


def test_total_price():
    first = Ticket(1, "Abba", 25.5, 4)
    second = Ticket(2, "Queen", 40.25, 2)
    basket = Basket()
    assert basket.total_price() == 0
    basket.add(first)
    basket.add(second)
    assert basket.total_price() == pytest.approx(first.price + second.price)
    assert list(basket) == [first, second]


def test_basket_full():
    basket = Basket()
    for code in range(1, MAX_TICKETS + 1):
        basket.add(Ticket(code, f"E{code}", 1.0, 1))
    extra = Ticket(MAX_TICKETS + 1, "extra", 1.0, 1)
    with pytest.raises(BasketError):
        basket.add(extra)
    assert extra.available == 1
    assert len(basket) == MAX_TICKETS