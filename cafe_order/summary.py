"""Order totals derived from a cart and the menu."""

from __future__ import annotations

from cafe_order.cart import CartStore
from cafe_order.models import MenuCatalog, OrderLine, OrderSummary


def compute_summary(cart: CartStore, catalog: MenuCatalog) -> OrderSummary:
    """
    Build order lines in menu order and total them.

    Lines follow catalog traversal order, and the first catalog item carrying
    an id defines that id's line. Cart ids missing from the catalog are
    skipped. Nothing is cached between calls.
    """
    quantities = {item_id: quantity for item_id, quantity in cart.entries() if quantity > 0}

    lines: list[OrderLine] = []
    seen: set[str] = set()
    for item in catalog.iter_items():
        if item.item_id in seen or item.item_id not in quantities:
            continue
        seen.add(item.item_id)
        lines.append(
            OrderLine(
                item_id=item.item_id,
                title=item.title,
                unit_price=item.price,
                quantity=quantities[item.item_id],
            )
        )

    return OrderSummary(
        lines=tuple(lines),
        item_count=sum(line.quantity for line in lines),
        grand_total=sum(line.line_total for line in lines),
    )
