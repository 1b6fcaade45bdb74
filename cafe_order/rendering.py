"""Rendering helpers for menu, cart and totals."""

from __future__ import annotations

from rich.text import Text

from cafe_order.config import CURRENCY_SYMBOL
from cafe_order.models import Category, MenuItem, OrderLine, OrderSummary

_ACTIVE_TAB_STYLE = "bold #ffffff on #2f6db5"
_PRICE_STYLE = "bold #5fbf72"
_QUANTITY_STYLE = "bold #ffffff on #b23a48"


def format_price(amount: int) -> str:
    return f"{CURRENCY_SYMBOL}{amount}"


def format_item_count(count: int) -> str:
    """Return '1 item' / 'N items'."""
    return f"{count} {'item' if count == 1 else 'items'}"


def format_category_tabs(categories: tuple[Category, ...], active_index: int) -> Text:
    """Render category names as a tab strip, highlighting the active one."""
    text = Text()
    for idx, category in enumerate(categories):
        if idx > 0:
            text.append(" ")
        if idx == active_index:
            text.append(f" {category.name} ", style=_ACTIVE_TAB_STYLE)
        else:
            text.append(f" {category.name} ", style="dim")
    return text


def format_menu_row(item: MenuItem, quantity: int, selected: bool) -> Text:
    """Render one menu item with its price, description and cart quantity."""
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(item.title, style="bold" if selected else "")
    text.append(f"  {format_price(item.price)}", style=_PRICE_STYLE)
    if quantity > 0:
        text.append("  ")
        text.append(f" {quantity} ", style=_QUANTITY_STYLE)
    if item.description:
        text.append(f"\n    {item.description}", style="dim")
    return text


def format_order_line(line: OrderLine, selected: bool = False) -> Text:
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(line.title, style="bold")
    text.append(f"  Qty: {line.quantity}")
    text.append(f" ({format_price(line.unit_price)} each)", style="dim")
    text.append(f"  {format_price(line.line_total)}", style=_PRICE_STYLE)
    return text


def format_totals(summary: OrderSummary) -> Text:
    text = Text()
    text.append(format_item_count(summary.item_count))
    text.append("   Total: ")
    text.append(format_price(summary.grand_total), style=_PRICE_STYLE)
    return text
