"""Domain models for cafe-order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class MenuItem:
    """A single orderable dish."""

    item_id: str
    title: str
    description: str
    price: int
    image: str


@dataclass(frozen=True)
class Category:
    """A named menu section."""

    name: str
    items: tuple[MenuItem, ...]


@dataclass(frozen=True)
class MenuCatalog:
    """The whole menu, loaded once per session."""

    cafe_name: str
    whatsapp_number: str
    categories: tuple[Category, ...]

    def iter_items(self) -> Iterator[MenuItem]:
        """Yield items in traversal order: category order, then item order."""
        for category in self.categories:
            yield from category.items

    def find_item(self, item_id: str) -> MenuItem | None:
        """Return the first item with the given id, or None."""
        for item in self.iter_items():
            if item.item_id == item_id:
                return item
        return None


@dataclass(frozen=True)
class OrderLine:
    """One priced row of an order."""

    item_id: str
    title: str
    unit_price: int
    quantity: int

    @property
    def line_total(self) -> int:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class OrderSummary:
    """Lines plus totals derived from a cart and a catalog."""

    lines: tuple[OrderLine, ...]
    item_count: int
    grand_total: int

    @property
    def is_empty(self) -> bool:
        return not self.lines
