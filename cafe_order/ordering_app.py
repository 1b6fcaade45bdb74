"""Main Textual app class."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from cafe_order.address_modal import AddressModal
from cafe_order.cart import CartStore
from cafe_order.catalog import CatalogError, load_catalog
from cafe_order.confirm_modal import ConfirmModal
from cafe_order.message import compose_order_link
from cafe_order.models import Category, MenuCatalog, MenuItem
from cafe_order.rendering import format_category_tabs, format_menu_row, format_order_line, format_totals
from cafe_order.summary import compute_summary
from cafe_order.validation import PROBLEM_MESSAGES, submission_problem, validate_address, validate_submission

logger = logging.getLogger(__name__)

CLEAR_QUESTION = "Are you sure you want to remove all items from your order?"
# Delay before handing the link to the browser, so the status line is seen first.
_OPEN_LINK_DELAY_SECONDS = 1.0


class CafeOrderApp(App):
    """A Textual app for building a cafe order and sending it over WhatsApp."""

    TITLE = "Cafe Order"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #order-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #category-tabs {
        height: 1;
        margin-bottom: 1;
    }

    #menu-items {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #order-items {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #order-totals, #address, #status {
        margin-top: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    category_index = reactive(0)
    item_index = reactive(0)

    BINDINGS = [
        Binding("tab", "cycle_category(1)", "Next category", priority=True),
        Binding("shift+tab", "cycle_category(-1)", "Previous category", priority=True),
        ("right", "cycle_category(1)", "Next category"),
        ("left", "cycle_category(-1)", "Previous category"),
        ("up", "move_item(-1)", "Previous item"),
        ("down", "move_item(1)", "Next item"),
        Binding("ctrl+s", "submit_order", "Send order", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, menu_path: str | Path | None = None) -> None:
        super().__init__()
        self.menu_path = menu_path
        self.catalog: MenuCatalog | None = None
        self.cart = CartStore()
        self.address = ""
        self.system_status = ""
        self.load_error: str | None = None
        self.last_order_link: str | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="category-tabs")
                yield Static("Loading menu...", id="menu-items")
            with Vertical(id="order-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static("(no items yet)", id="order-items")
                yield Static(id="order-totals")
                yield Static(id="address")
                yield Static(id="status")

    async def on_mount(self) -> None:
        try:
            self.catalog = load_catalog(self.menu_path)
        except CatalogError as exc:
            self.load_error = str(exc)
            logger.error("catalog_load_failed error=%s", exc)
            self._refresh_all()
            return

        self.sub_title = self.catalog.cafe_name
        logger.debug("app_mounted cafe=%r", self.catalog.cafe_name)
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen) or self.catalog is None:
            return
        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        if key in {"a", "+"}:
            self._change_selected_quantity(1)
        elif key in {"x", "-"}:
            self._change_selected_quantity(-1)
        elif key == "d":
            self._remove_selected_item()
        elif key == "c":
            self._confirm_clear()
        elif key == "e":
            self._open_address_modal()
        elif key == "j":
            self.action_move_item(1)
        elif key == "k":
            self.action_move_item(-1)
        else:
            return
        event.stop()

    def action_cycle_category(self, delta: int) -> None:
        if isinstance(self.screen, ModalScreen) or self.catalog is None:
            return

        self.category_index = (self.category_index + delta) % len(self.catalog.categories)
        self.item_index = 0
        self._refresh_menu()

    def action_move_item(self, delta: int) -> None:
        if isinstance(self.screen, ModalScreen):
            return

        items = self._current_items()
        if not items:
            return
        self.item_index = (self.item_index + delta) % len(items)
        self._refresh_menu()

    def action_submit_order(self) -> None:
        if isinstance(self.screen, ModalScreen) or self.catalog is None:
            return

        problem = submission_problem(self.cart, self.address)
        if problem is not None:
            self._set_status(PROBLEM_MESSAGES[problem], severity="error")
            logger.debug("submit_blocked reason=%s", problem)
            return

        summary = compute_summary(self.cart, self.catalog)
        link = compose_order_link(self.catalog, summary, self.address)
        self.last_order_link = link
        logger.info("submit_order lines=%d items=%d total=%d", len(summary.lines), summary.item_count, summary.grand_total)
        self._set_status("Opening WhatsApp with your order details!")
        self.set_timer(_OPEN_LINK_DELAY_SECONDS, lambda: self.open_url(link))

    def _current_category(self) -> Category | None:
        if self.catalog is None:
            return None
        return self.catalog.categories[self.category_index]

    def _current_items(self) -> tuple[MenuItem, ...]:
        category = self._current_category()
        if category is None:
            return ()
        return category.items

    def _selected_item(self) -> MenuItem | None:
        items = self._current_items()
        if not (0 <= self.item_index < len(items)):
            return None
        return items[self.item_index]

    def _change_selected_quantity(self, delta: int) -> None:
        item = self._selected_item()
        if item is None or self.catalog is None:
            return
        # Only ids that resolve against the menu may enter the cart.
        if self.catalog.find_item(item.item_id) is None:
            return

        if delta > 0:
            self.cart.increment(item.item_id)
        else:
            self.cart.decrement(item.item_id)
        logger.debug("quantity_changed item=%s qty=%d", item.item_id, self.cart.quantity_of(item.item_id))
        self._refresh_all()

    def _remove_selected_item(self) -> None:
        item = self._selected_item()
        if item is None or self.cart.quantity_of(item.item_id) == 0:
            return

        self.cart.remove(item.item_id)
        logger.debug("item_removed item=%s", item.item_id)
        self._set_status("Item removed from order")
        self._refresh_all()

    def _confirm_clear(self) -> None:
        if self.cart.is_empty():
            return
        self.push_screen(ConfirmModal(CLEAR_QUESTION), self._on_clear_answer)

    def _on_clear_answer(self, confirmed: bool | None) -> None:
        if not confirmed:
            return

        self.cart.clear()
        logger.debug("cart_cleared")
        self._set_status("All items removed from order")
        self._refresh_all()

    def _open_address_modal(self) -> None:
        self.push_screen(AddressModal(self.address), self._on_address_entered)

    def _on_address_entered(self, address: str | None) -> None:
        if address is None:
            return

        self.address = address
        logger.debug("address_set length=%d", len(address))
        self._refresh_order()

    def _set_status(self, message: str, severity: str = "information") -> None:
        self.system_status = message
        self.notify(message, severity=severity, timeout=3)
        self._refresh_order()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_order()

    def _refresh_menu(self) -> None:
        try:
            tabs_widget = self.query_one("#category-tabs", Static)
            items_widget = self.query_one("#menu-items", Static)
        except NoMatches:
            return

        if self.catalog is None:
            tabs_widget.update("")
            if self.load_error is not None:
                items_widget.update(
                    Text(f"Failed to load menu. Please check the menu file.\n{self.load_error}", style="#ffb3b3")
                )
            return

        tabs_widget.update(format_category_tabs(self.catalog.categories, self.category_index))

        items = self._current_items()
        if not items:
            items_widget.update("No items available in this category.")
            return

        if self.item_index >= len(items):
            self.item_index = 0

        # Each row takes two lines: title and description.
        visible_rows = max(1, self._visible_rows(items_widget) // 2)
        start, end = self._window_bounds(len(items), visible_rows, self.item_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            item = items[idx]
            lines.append_text(format_menu_row(item, self.cart.quantity_of(item.item_id), idx == self.item_index))

        if end < len(items):
            lines.append("\n⋮", style="dim")

        items_widget.update(lines)

    def _refresh_order(self) -> None:
        try:
            order_widget = self.query_one("#order-items", Static)
            totals_widget = self.query_one("#order-totals", Static)
            address_widget = self.query_one("#address", Static)
            status_widget = self.query_one("#status", Static)
        except NoMatches:
            return

        if self.catalog is None:
            order_widget.update("(no items yet)")
            totals_widget.update("")
            address_widget.update("")
            status_widget.update("Restart the app once the menu file is fixed.")
            return

        summary = compute_summary(self.cart, self.catalog)
        selected = self._selected_item()
        if summary.is_empty:
            order_widget.update("(no items yet)")
        else:
            lines = Text()
            for idx, line in enumerate(summary.lines):
                if idx > 0:
                    lines.append("\n")
                lines.append_text(format_order_line(line, selected is not None and line.item_id == selected.item_id))
            order_widget.update(lines)

        totals_widget.update(format_totals(summary))

        address = Text("Deliver to: ")
        if not self.address:
            address.append("(press E to enter address)", style="dim")
        elif validate_address(self.address):
            address.append(self.address)
        else:
            address.append(self.address, style="#ffb3b3")
        address_widget.update(address)

        ready = validate_submission(self.cart, self.address)
        status = Text()
        status.append("Ctrl+S send on WhatsApp", style="bold #5fbf72" if ready else "dim")
        status.append("  A/X +/-  D remove  C clear")
        status.append(f"\n{self.system_status or 'Ready'}")
        status_widget.update(status)
