"""Submit checks for the cart and delivery address."""

from __future__ import annotations

from cafe_order.cart import CartStore
from cafe_order.config import MIN_ADDRESS_LENGTH

NO_ITEMS = "no_items"
INVALID_ADDRESS = "invalid_address"

PROBLEM_MESSAGES: dict[str, str] = {
    NO_ITEMS: "Please add at least one item to your order",
    INVALID_ADDRESS: "Please enter a valid delivery address",
}


def validate_address(address: str) -> bool:
    return len(address.strip()) >= MIN_ADDRESS_LENGTH


def _has_items(cart: CartStore) -> bool:
    return any(quantity > 0 for _, quantity in cart.entries())


def validate_submission(cart: CartStore, address: str) -> bool:
    """True when the cart holds something and the address is long enough."""
    return _has_items(cart) and validate_address(address)


def submission_problem(cart: CartStore, address: str) -> str | None:
    """Return the first blocking problem code (items before address), or None."""
    if not _has_items(cart):
        return NO_ITEMS
    if not validate_address(address):
        return INVALID_ADDRESS
    return None
