"""Tests for the GTK-facing pieces, skipped without GTK 4 introspection data"""

from unittest.mock import Mock
import os
import sys

import pytest

# Add the parent directory to the path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

gi = pytest.importorskip("gi")
try:
    gi.require_version("Gtk", "4.0")
    gi.require_version("Gdk", "4.0")
except ValueError:
    pytest.skip("GTK 4 typelib not available", allow_module_level=True)

from core.choice_model import TEXT_COLUMN, choices_to_model  # noqa: E402
from core.launcher_window import PassWindow  # noqa: E402
from gi.repository import Gtk  # noqa: E402
from utils.utils import apply_styles  # noqa: E402


class TestChoiceModel:
    def test_preserves_count_and_order(self):
        choices = ["web/zeta", "email/work", "alpha"]

        model = choices_to_model(choices)

        assert len(model) == 3
        assert [row[TEXT_COLUMN] for row in model] == choices

    def test_empty(self):
        assert len(choices_to_model([])) == 0


class TestPassWindowHandlers:
    """Call the handlers unbound so no display is needed"""

    def test_on_match_uses_fuzzy_matching(self):
        completion = Mock()
        completion.get_model.return_value = {"row": ["email/work"]}

        assert PassWindow.on_match(Mock(), completion, "work", "row")
        assert not PassWindow.on_match(Mock(), completion, "zzzz", "row")

    def test_activate_forwards_text(self):
        window = Mock()
        entry = Mock()
        entry.get_text.return_value = "email/work"

        PassWindow.on_entry_activate(window, entry)

        window.controller.on_confirm.assert_called_once_with("email/work")

    def test_escape_cancels(self):
        from gi.repository import Gdk

        window = Mock()

        handled = PassWindow.on_key_pressed(window, None, Gdk.KEY_Escape, 0, 0)

        assert handled is True
        window.controller.on_cancel.assert_called_once()

    def test_other_keys_pass_through(self):
        from gi.repository import Gdk

        window = Mock()

        assert PassWindow.on_key_pressed(window, None, Gdk.KEY_a, 0, 0) is False
        window.controller.on_cancel.assert_not_called()


class TestApplyStyles:
    def test_provider_attached_to_widget(self):
        widget = Mock()

        provider = apply_styles(widget, "entry { padding: 2px; }")

        widget.get_style_context.return_value.add_provider.assert_called_once_with(
            provider, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
        )
