"""Runtime configuration defaults for the menu, logging and order link."""

from __future__ import annotations

MENU_PATH = "data/menu.json"
MENU_PATH_ENV = "CAFE_ORDER_MENU_PATH"

DEBUG_LOG_PATH = "/tmp/cafe-order-debug.log"

DEFAULT_CAFE_NAME = "WhatsApp Cafe"
CURRENCY_SYMBOL = "₹"
MIN_ADDRESS_LENGTH = 10

WHATSAPP_LINK_BASE = "https://wa.me"
FALLBACK_IMAGE_URL = "https://images.unsplash.com/photo-1559925393-8be0ec4767c8?w=400&h=300&fit=crop"
