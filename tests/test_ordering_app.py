"""
Headless tests for the Textual ordering app.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from cafe_order.address_modal import AddressModal
from cafe_order.confirm_modal import ConfirmModal
from cafe_order.ordering_app import CafeOrderApp

from conftest import menu_document


def _app(tmp_path: Path) -> CafeOrderApp:
    menu_file = tmp_path / "menu.json"
    menu_file.write_text(json.dumps(menu_document()), encoding="utf-8")
    app = CafeOrderApp(menu_path=menu_file)
    app.opened_urls = []
    app.open_url = lambda url, **kwargs: app.opened_urls.append(url)
    return app


def test_app_builds_order_and_submits(tmp_path: Path) -> None:
    app = _app(tmp_path)

    async def scenario() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.catalog is not None
            assert app.sub_title == "Test Cafe"

            await pilot.press("a", "a", "j", "a", "x", "a")
            assert dict(app.cart.entries()) == {"item-a": 2, "item-b": 1}

            await pilot.press("ctrl+s")
            assert app.system_status == "Please enter a valid delivery address"
            assert app.last_order_link is None

            await pilot.press("e")
            await pilot.pause()
            assert isinstance(app.screen, AddressModal)
            await pilot.press(*"12lakeroadudaipur")
            await pilot.press("enter")
            await pilot.pause()
            assert app.address == "12lakeroadudaipur"

            await pilot.press("ctrl+s")
            assert app.system_status == "Opening WhatsApp with your order details!"
            assert app.last_order_link.startswith("https://wa.me/911234567890?text=Hello")
            assert "Item%20A%20x%202" in app.last_order_link

    asyncio.run(scenario())


def test_app_rejects_empty_cart_first(tmp_path: Path) -> None:
    app = _app(tmp_path)

    async def scenario() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+s")
            assert app.system_status == "Please add at least one item to your order"

    asyncio.run(scenario())


def test_app_remove_and_clear(tmp_path: Path) -> None:
    app = _app(tmp_path)

    async def scenario() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("a", "a", "d")
            assert app.cart.is_empty()
            assert app.system_status == "Item removed from order"

            await pilot.press("a", "j", "a", "c")
            await pilot.pause()
            assert isinstance(app.screen, ConfirmModal)
            await pilot.press("n")
            await pilot.pause()
            assert len(app.cart) == 2

            await pilot.press("c")
            await pilot.pause()
            await pilot.press("y")
            await pilot.pause()
            assert app.cart.is_empty()
            assert app.system_status == "All items removed from order"

    asyncio.run(scenario())


def test_app_category_switch_targets_new_items(tmp_path: Path) -> None:
    app = _app(tmp_path)

    async def scenario() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("right", "a")
            assert dict(app.cart.entries()) == {"samosa": 1}
            await pilot.press("right")
            assert app.category_index == 0

    asyncio.run(scenario())


def test_app_menu_load_failure_disables_ordering(tmp_path: Path) -> None:
    app = CafeOrderApp(menu_path=tmp_path / "missing.json")

    async def scenario() -> None:
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.catalog is None
            assert app.load_error is not None
            await pilot.press("a", "ctrl+s")
            assert app.cart.is_empty()
            assert app.last_order_link is None

    asyncio.run(scenario())
