"""Entry point for the cafe-order Textual app."""

from __future__ import annotations

from cafe_order.log import setup_logger
from cafe_order.ordering_app import CafeOrderApp


def main() -> None:
    """Run the Textual application."""
    setup_logger()
    CafeOrderApp().run()


if __name__ == "__main__":
    main()
