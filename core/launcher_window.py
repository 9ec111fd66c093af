# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUntypedBaseClass=false
# pyright: reportAttributeAccessIssue=false
# pyright: reportUnusedCallResult=false
# pyright: reportUnknownVariableType=false
# pyright: reportMissingImports=false
# ruff: ignore

import logging
from typing import Callable, Optional, Sequence

from typing_extensions import final

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
from gi.repository import Gdk, Gtk

try:
    gi.require_version("Gtk4LayerShell", "1.0")
    from gi.repository import Gtk4LayerShell as GtkLayerShell
except (ValueError, ImportError):
    GtkLayerShell = None

from utils.fuzzy_search import entry_matches
from utils.utils import apply_styles

from .choice_model import TEXT_COLUMN, choices_to_model
from .config import PASS_CONFIG

logger = logging.getLogger("LauncherWindow")


@final
class PassWindow(Gtk.ApplicationWindow):
    """One search entry with completion over the password store entries."""

    def __init__(self, choices: Sequence[str], **kwargs):
        window_config = PASS_CONFIG["window"]
        super().__init__(
            **kwargs,
            title=window_config["title"],
            resizable=window_config["resizable"],
            modal=window_config["modal"],
        )
        self.set_size_request(window_config["width"], window_config["height"])
        self.controller = None

        completion_config = PASS_CONFIG["completion"]
        self.completion = Gtk.EntryCompletion()
        self.completion.set_model(choices_to_model(choices))
        self.completion.set_text_column(TEXT_COLUMN)
        self.completion.set_inline_completion(completion_config["inline_completion"])
        self.completion.set_popup_completion(completion_config["popup_completion"])
        self.completion.set_popup_single_match(completion_config["popup_single_match"])
        self.completion.set_match_func(self.on_match)

        self.search_entry = Gtk.Entry()
        self.search_entry.set_placeholder_text(window_config["placeholder_text"])
        self.search_entry.set_completion(self.completion)
        self.search_entry.set_hexpand(True)
        self.search_entry.connect("activate", self.on_entry_activate)
        apply_styles(self.search_entry)
        self.set_child(self.search_entry)

        # Handle key presses
        controller = Gtk.EventControllerKey()
        controller.connect("key-pressed", self.on_key_pressed)
        self.add_controller(controller)

        self.connect("close-request", self.on_close_request)

        if window_config["always_on_top"]:
            self._setup_layer_shell()

    def _setup_layer_shell(self):
        if GtkLayerShell is None or not GtkLayerShell.is_supported():
            logger.debug("Layer shell unavailable, using a plain modal window")
            return
        GtkLayerShell.init_for_window(self)
        GtkLayerShell.set_layer(self, GtkLayerShell.Layer.OVERLAY)
        # On demand so pinentry and the refocused window can take the keyboard
        GtkLayerShell.set_keyboard_mode(self, GtkLayerShell.KeyboardMode.ON_DEMAND)
        # No anchors: the compositor centers the surface

    def set_controller(self, controller):
        self.controller = controller

    def on_match(self, completion, key: str, tree_iter) -> bool:
        model = completion.get_model()
        name = model[tree_iter][TEXT_COLUMN]
        completion_config = PASS_CONFIG["completion"]
        return entry_matches(
            key,
            name,
            fuzzy=completion_config["fuzzy"],
            threshold=completion_config["fuzzy_threshold"],
        )

    def on_entry_activate(self, entry):
        if self.controller is None:
            return
        self.controller.on_confirm(entry.get_text())

    def on_key_pressed(self, controller, keyval, keycode, state):
        if keyval == Gdk.KEY_Escape and self.controller is not None:
            self.controller.on_cancel()
            return True
        return False

    def on_close_request(self, window):
        logger.info("Window closed, exiting")
        self.quit()
        return False

    # LauncherView

    def set_input_sensitive(self, sensitive: bool) -> None:
        self.search_entry.set_sensitive(sensitive)
        if sensitive:
            self.search_entry.grab_focus()

    def show_error(self, message: str, on_dismissed: Callable[[], None]) -> None:
        dialog = Gtk.MessageDialog(
            transient_for=self,
            modal=True,
            message_type=Gtk.MessageType.ERROR,
            buttons=Gtk.ButtonsType.OK,
            text="Error",
        )
        dialog.props.secondary_text = message

        def on_response(dialog, response_id):
            dialog.destroy()
            on_dismissed()

        dialog.connect("response", on_response)
        dialog.present()

    def quit(self) -> None:
        app: Optional[Gtk.Application] = self.get_application()
        if app is not None:
            app.quit()
