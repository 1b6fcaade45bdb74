"""WhatsApp order message and deep link."""

from __future__ import annotations

from urllib.parse import quote

from cafe_order.config import CURRENCY_SYMBOL, WHATSAPP_LINK_BASE
from cafe_order.models import MenuCatalog, OrderSummary

# Characters JavaScript's encodeURIComponent leaves alone, beyond quote()'s own.
_URI_COMPONENT_SAFE = "!*'()"


def compose_message(catalog: MenuCatalog, summary: OrderSummary, address: str) -> str:
    """
    Render the order as the fixed WhatsApp message template.

    Callers check ``validate_submission`` first; an empty summary still
    renders, just without item lines.
    """
    parts = [f"Hello 👋\nI would like to order from {catalog.cafe_name}:\n\n"]

    for line in summary.lines:
        parts.append(f"• {line.title} x {line.quantity} – {CURRENCY_SYMBOL}{line.line_total}\n")

    parts.append(f"\n🛒 Total Items: {summary.item_count}")
    parts.append(f"\n💰 Total Amount: {CURRENCY_SYMBOL}{summary.grand_total}\n")
    parts.append(f"\n📍 Delivery Address:\n{address.strip()}\n")
    parts.append("\nPlease confirm my order. Thank you!")
    return "".join(parts)


def build_deep_link(contact: str, text: str) -> str:
    return f"{WHATSAPP_LINK_BASE}/{contact}?text={quote(text, safe=_URI_COMPONENT_SAFE)}"


def compose_order_link(catalog: MenuCatalog, summary: OrderSummary, address: str) -> str:
    """Compose the order message and wrap it in a deep link to the cafe."""
    return build_deep_link(catalog.whatsapp_number, compose_message(catalog, summary, address))
