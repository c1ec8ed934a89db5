#!/usr/bin/env python3
"""
Console Demo - DevEx Calculator

Drives the conversion widget from the terminal through a ConsoleSurface.
Each line typed is treated as one UI event:

- a number (or any text) replaces the Robux field and fires an input event
- ":cur EUR" changes the selected currency
- ":calc" clicks the calculate button, ":enter" presses Enter
- ":blur" moves focus away from the field
- ":quit" exits

Run: python examples/console_demo.py
"""

import sys

from devex_app.engine import DevExWidget
from devex_app.errors import UnknownCurrencyError
from devex_app.logging import configure_logging
from devex_app.ui.console import ConsoleSurface


def main():
    configure_logging(level="WARNING")

    surface = ConsoleSurface()
    widget = DevExWidget(surface)
    widget.start()
    surface.render()

    print(f"Currencies: {', '.join(code.value for code in widget.tables.codes)}")

    for line in sys.stdin:
        command = line.rstrip("\n")

        if command == ":quit":
            break
        elif command.startswith(":cur "):
            try:
                surface.select_currency(command[5:].strip().upper())
            except UnknownCurrencyError as e:
                surface.selected_code = widget.selected.value
                print(f"⚠️  {e}")
        elif command == ":calc":
            surface.click_calculate()
        elif command == ":enter":
            surface.press_key("Enter")
        elif command == ":blur":
            surface.blur()
        else:
            surface.type_text(command)

    widget.stop()


if __name__ == "__main__":
    main()
