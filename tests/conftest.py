"""Shared fixtures: a small two-category menu."""

from __future__ import annotations

from typing import Any

import pytest

from cafe_order.catalog import parse_catalog
from cafe_order.models import MenuCatalog


def menu_document() -> dict[str, Any]:
    return {
        "cafeName": "Test Cafe",
        "whatsappNumber": "911234567890",
        "categories": [
            {
                "name": "Drinks",
                "items": [
                    {"title": "Item A", "description": "First", "price": 50, "image": "a.jpg"},
                    {"title": "Item B", "description": "Second", "price": 30, "image": "b.jpg"},
                ],
            },
            {
                "name": "Snacks",
                "items": [
                    {"title": "Samosa", "description": "Crisp", "price": 15, "image": "s.jpg"},
                ],
            },
        ],
    }


@pytest.fixture
def raw_menu() -> dict[str, Any]:
    return menu_document()


@pytest.fixture
def catalog() -> MenuCatalog:
    return parse_catalog(menu_document())
