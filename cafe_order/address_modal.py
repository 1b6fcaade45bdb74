"""Delivery address entry modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from cafe_order.config import MIN_ADDRESS_LENGTH
from cafe_order.validation import INVALID_ADDRESS, PROBLEM_MESSAGES, validate_address

_MAX_ADDRESS_LENGTH = 200


class AddressModal(ModalScreen[str | None]):
    """Prompt for the delivery address; dismisses with the trimmed text."""

    CSS = """
    AddressModal {
        align: center middle;
        background: $background 60%;
    }

    #address-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #address-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #address-prompt {
        color: white;
        margin-bottom: 1;
    }

    #address-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #address-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #address-help {
        color: #dddddd;
    }
    """

    def __init__(self, initial: str = "") -> None:
        super().__init__()
        self.value = initial
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="address-dialog"):
            yield Static("Delivery Address", id="address-title")
            yield Static(f"At least {MIN_ADDRESS_LENGTH} characters", id="address-prompt")
            yield Static(id="address-value")
            yield Static(id="address-error")
            yield Static("Enter confirm. Backspace delete. Esc/Ctrl+C cancel.", id="address-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._confirm()
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self._refresh_error()
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            if len(self.value) < _MAX_ADDRESS_LENGTH:
                self.value += event.character
            self._refresh_error()
            self._refresh_content()
            event.stop()

    def _confirm(self) -> None:
        if not validate_address(self.value):
            self.error = PROBLEM_MESSAGES[INVALID_ADDRESS]
            self._refresh_content()
            return

        self.dismiss(self.value.strip())

    def _refresh_error(self) -> None:
        # Clear a shown error as soon as the text becomes valid.
        if self.error and validate_address(self.value):
            self.error = ""

    def _refresh_content(self) -> None:
        value_widget = self.query_one("#address-value", Static)
        error_widget = self.query_one("#address-error", Static)
        value_widget.update(self.value or "")
        error_widget.update(self.error or "")
