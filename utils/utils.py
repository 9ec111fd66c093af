# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportMissingImports=false
# ruff: ignore

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk  # pyright: ignore

ENTRY_CSS = """
    entry {
        font-family: monospace;
        font-size: 14px;
        padding: 6px 8px;
    }
"""


def apply_styles(widget, css: str = ENTRY_CSS) -> Gtk.CssProvider:
    """Attach ``css`` to one widget only; returns the provider for reuse."""
    provider = Gtk.CssProvider()
    provider.load_from_data(css.encode())
    widget.get_style_context().add_provider(
        provider, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
    )
    return provider
