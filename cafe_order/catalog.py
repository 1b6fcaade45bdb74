"""Menu catalog loading and validation."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from cafe_order.config import DEFAULT_CAFE_NAME, FALLBACK_IMAGE_URL, MENU_PATH, MENU_PATH_ENV
from cafe_order.identity import assign_item_ids
from cafe_order.models import Category, MenuCatalog, MenuItem

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """The menu document is missing or malformed."""


def resolve_menu_path() -> Path:
    """
    Resolve the menu document path.

    Resolution order:
    1. CAFE_ORDER_MENU_PATH (if set)
    2. MENU_PATH
    """
    env_override = os.environ.get(MENU_PATH_ENV, "").strip()
    return Path(env_override or MENU_PATH)


def _require_str(value: Any, where: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise CatalogError(f"{where} must be a non-empty string")
    return value.strip()


def _parse_price(value: Any, where: str) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogError(f"{where} must be an integer, got {value!r}")
    if value < 0:
        raise CatalogError(f"{where} must not be negative, got {value}")
    return value


def _parse_contact(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    number = _require_str(value, "whatsappNumber")
    if not number.isdigit():
        raise CatalogError(f"whatsappNumber must contain digits only, got {number!r}")
    return number


def parse_catalog(raw: Any) -> MenuCatalog:
    """Build an immutable catalog from a decoded menu document."""
    if not isinstance(raw, dict):
        raise CatalogError("Menu document must be a JSON object")

    cafe_name = raw.get("cafeName")
    if not isinstance(cafe_name, str) or not cafe_name.strip():
        cafe_name = DEFAULT_CAFE_NAME

    whatsapp_number = _parse_contact(raw.get("whatsappNumber"))

    raw_categories = raw.get("categories")
    if not isinstance(raw_categories, list) or not raw_categories:
        raise CatalogError("No categories found in menu data")

    # First pass: validate fields; ids are assigned across the whole menu afterwards.
    parsed: list[tuple[str, list[dict[str, Any]]]] = []
    for c_idx, raw_category in enumerate(raw_categories):
        where = f"categories[{c_idx}]"
        if not isinstance(raw_category, dict):
            raise CatalogError(f"{where} must be an object")
        name = _require_str(raw_category.get("name"), f"{where}.name")

        raw_items = raw_category.get("items") or []
        if not isinstance(raw_items, list):
            raise CatalogError(f"{where}.items must be a list")

        items: list[dict[str, Any]] = []
        for i_idx, raw_item in enumerate(raw_items):
            item_where = f"{where}.items[{i_idx}]"
            if not isinstance(raw_item, dict):
                raise CatalogError(f"{item_where} must be an object")
            explicit_id = raw_item.get("id")
            if explicit_id is not None:
                explicit_id = _require_str(explicit_id, f"{item_where}.id")
            description = raw_item.get("description")
            image = raw_item.get("image")
            items.append(
                {
                    "id": explicit_id,
                    "title": _require_str(raw_item.get("title"), f"{item_where}.title"),
                    "description": description.strip() if isinstance(description, str) else "",
                    "price": _parse_price(raw_item.get("price"), f"{item_where}.price"),
                    "image": image.strip() if isinstance(image, str) and image.strip() else FALLBACK_IMAGE_URL,
                }
            )
        parsed.append((name, items))

    try:
        item_ids = iter(assign_item_ids((item["title"], item["id"]) for _, items in parsed for item in items))
    except ValueError as exc:
        raise CatalogError(str(exc)) from exc

    categories = tuple(
        Category(
            name=name,
            items=tuple(
                MenuItem(
                    item_id=next(item_ids),
                    title=item["title"],
                    description=item["description"],
                    price=item["price"],
                    image=item["image"],
                )
                for item in items
            ),
        )
        for name, items in parsed
    )
    return MenuCatalog(cafe_name=cafe_name.strip(), whatsapp_number=whatsapp_number, categories=categories)


def load_catalog(path: str | Path | None = None) -> MenuCatalog:
    """Read and parse the menu document from disk."""
    menu_file = Path(path) if path is not None else resolve_menu_path()
    try:
        raw = json.loads(menu_file.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Failed to read menu {menu_file}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Menu {menu_file} is not valid JSON: {exc}") from exc

    catalog = parse_catalog(raw)
    logger.info(
        "catalog_loaded path=%s categories=%d items=%d",
        menu_file,
        len(catalog.categories),
        sum(1 for _ in catalog.iter_items()),
    )
    return catalog
