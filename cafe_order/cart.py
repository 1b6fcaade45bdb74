"""Session cart: item id to positive quantity."""

from __future__ import annotations


class CartStore:
    """Quantities per item id. A stored quantity is always at least 1."""

    def __init__(self) -> None:
        self._quantities: dict[str, int] = {}

    def increment(self, item_id: str) -> None:
        self._quantities[item_id] = self._quantities.get(item_id, 0) + 1

    def decrement(self, item_id: str) -> None:
        quantity = self._quantities.get(item_id)
        if quantity is None:
            return
        if quantity <= 1:
            del self._quantities[item_id]
            return
        self._quantities[item_id] = quantity - 1

    def remove(self, item_id: str) -> None:
        self._quantities.pop(item_id, None)

    def clear(self) -> None:
        self._quantities.clear()

    def quantity_of(self, item_id: str) -> int:
        return self._quantities.get(item_id, 0)

    def is_empty(self) -> bool:
        return not self._quantities

    def entries(self) -> list[tuple[str, int]]:
        """Return a copy of the (item_id, quantity) pairs."""
        return list(self._quantities.items())

    def __len__(self) -> int:
        return len(self._quantities)
