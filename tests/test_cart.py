"""
Tests for CartStore quantity rules.
"""

from __future__ import annotations

from cafe_order.cart import CartStore


def test_increment_creates_then_adds() -> None:
    cart = CartStore()
    cart.increment("tea")
    assert cart.quantity_of("tea") == 1
    cart.increment("tea")
    assert cart.quantity_of("tea") == 2
    assert not cart.is_empty()


def test_decrement_to_zero_deletes_entry() -> None:
    cart = CartStore()
    cart.increment("tea")
    cart.decrement("tea")
    assert cart.quantity_of("tea") == 0
    assert cart.entries() == []
    assert cart.is_empty()


def test_decrement_absent_is_noop() -> None:
    cart = CartStore()
    cart.decrement("tea")
    assert cart.is_empty()
    assert len(cart) == 0


def test_stored_quantities_stay_positive() -> None:
    """Any mix of increments and decrements never stores a quantity below 1."""
    cart = CartStore()
    ops = ["+a", "-a", "-a", "+b", "+b", "-b", "+a", "-b", "-b", "+c", "-a", "-a"]
    for op in ops:
        if op[0] == "+":
            cart.increment(op[1])
        else:
            cart.decrement(op[1])
        assert all(quantity >= 1 for _, quantity in cart.entries())
    assert dict(cart.entries()) == {"c": 1}


def test_remove_is_idempotent() -> None:
    cart = CartStore()
    cart.increment("tea")
    cart.increment("tea")
    cart.remove("tea")
    cart.remove("tea")
    assert cart.quantity_of("tea") == 0
    assert cart.is_empty()


def test_clear_empties_everything() -> None:
    cart = CartStore()
    for item_id in ("a", "b", "c"):
        cart.increment(item_id)
    cart.clear()
    assert cart.is_empty()
    assert cart.entries() == []


def test_entries_is_restartable_copy() -> None:
    cart = CartStore()
    cart.increment("a")
    cart.increment("b")
    first = cart.entries()
    first.append(("zzz", 9))
    assert sorted(cart.entries()) == [("a", 1), ("b", 1)]
    assert sorted(cart.entries()) == sorted(cart.entries())
